from .errors import OutputError, OutputUnavailableError, OutputWriteError, UnknownCharsetError
from .lifecycle import LineState, RunState
from .line_format import DEFAULT_LINE_FORMAT, LineFormat
from .tagged_word import TaggedWord

__all__ = [
    "DEFAULT_LINE_FORMAT",
    "LineFormat",
    "LineState",
    "OutputError",
    "OutputUnavailableError",
    "OutputWriteError",
    "RunState",
    "TaggedWord",
    "UnknownCharsetError",
]
