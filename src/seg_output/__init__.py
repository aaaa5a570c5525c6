from seg_output.adapters.factory import (
    create_default,
    create_from_file,
    create_handler,
    create_output_to_string,
)
from seg_output.adapters.string_handler import StringOutputHandler
from seg_output.adapters.writer_handler import WriterOutputHandler
from seg_output.domain.line_format import LineFormat
from seg_output.domain.tagged_word import TaggedWord
from seg_output.kernel.driver import run_lines
from seg_output.ports.output_handler import OutputHandler

__all__ = [
    "LineFormat",
    "OutputHandler",
    "StringOutputHandler",
    "TaggedWord",
    "WriterOutputHandler",
    "create_default",
    "create_from_file",
    "create_handler",
    "create_output_to_string",
    "run_lines",
]
