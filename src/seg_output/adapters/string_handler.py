from __future__ import annotations

import io

from seg_output.adapters.writer_handler import WriterOutputHandler
from seg_output.domain.line_format import LineFormat
from seg_output.ports.log_sink import LogSink


class StringOutputHandler(WriterOutputHandler):
    """In-memory OutputHandler, for using the segmenter as a library call.

    Typical use::

        output = create_output_to_string()
        run_lines(output, segmented_lines)
        text = output.get_string()
    """

    def __init__(self, *, line_format: LineFormat | None = None, log_sink: LogSink | None = None) -> None:
        self._buffer = io.StringIO(newline="")
        # The buffer stays readable after termination, so the handler never closes it.
        super().__init__(
            self._buffer,
            owns_stream=False,
            target="<string>",
            line_format=line_format,
            log_sink=log_sink,
        )

    def get_string(self) -> str:
        # Only completed lines are visible; an open line is still pending.
        return self._buffer.getvalue()
