from __future__ import annotations

import contextlib
from collections.abc import Sequence
from types import TracebackType
from typing import TextIO

from seg_output.domain.errors import OutputWriteError
from seg_output.domain.lifecycle import LineState, RunState
from seg_output.domain.line_format import DEFAULT_LINE_FORMAT, LineFormat
from seg_output.domain.tagged_word import TaggedWord
from seg_output.observability.domain.events import HandlerEvent, HandlerEventKind
from seg_output.ports.log_sink import LogSink
from seg_output.ports.output_handler import OutputHandler


class WriterOutputHandler(OutputHandler):
    """OutputHandler writing one physical line per logical line to a text stream.

    Tokens of the open line are collected in memory and written in a single
    call on ``handle_line_end``, so a partially assembled line never reaches
    the sink.

    Contract violations have defined outcomes instead of being rejected:

    * a segment delivered with no open line implicitly opens one;
    * ``handle_line_start`` on an open line first writes that line;
    * ``handle_line_end`` with no open line writes an empty line;
    * ``on_program_end`` on an open line writes it before releasing the sink;
    * line operations before ``on_program_start`` implicitly start the run;
    * any line operation after ``on_program_end`` raises ``OutputWriteError``.

    Words that render to an empty token (an empty word in seg-only mode) are
    skipped, so tokens on a line are always separated by exactly one separator.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        owns_stream: bool,
        target: str,
        encoding: str | None = None,
        line_format: LineFormat | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._target = target
        self._encoding = encoding
        self._format = line_format or DEFAULT_LINE_FORMAT
        self._log_sink = log_sink
        self._tokens: list[str] = []
        self._line_state = LineState.IDLE
        self._run_state = RunState.UNSTARTED
        self._lines_written = 0
        self._log(HandlerEventKind.OPENED, owns_stream=owns_stream)

    @property
    def line_format(self) -> LineFormat:
        return self._format

    @property
    def line_state(self) -> LineState:
        return self._line_state

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def lines_written(self) -> int:
        return self._lines_written

    def on_program_start(self) -> None:
        self._ensure_running()

    def on_program_end(self) -> None:
        # Idempotent: the sink is released exactly once.
        if self._run_state is RunState.TERMINATED:
            return
        try:
            if self._line_state is LineState.LINE_OPEN:
                self._emit_line()
            self._flush()
        except BaseException:
            # The write/flush failure is the one reported; a close failure after it is dropped.
            self._run_state = RunState.TERMINATED
            with contextlib.suppress(OutputWriteError):
                self._release()
            raise
        self._run_state = RunState.TERMINATED
        self._release()
        self._log(HandlerEventKind.CLOSED, lines=self._lines_written)

    def close(self) -> None:
        self.on_program_end()

    def handle_line_start(self) -> None:
        self._ensure_running()
        if self._line_state is LineState.LINE_OPEN:
            self._emit_line()
        self._tokens = []
        self._line_state = LineState.LINE_OPEN

    def handle_line_segment(self, words: Sequence[TaggedWord], seg_only: bool) -> None:
        self._ensure_running()
        self._line_state = LineState.LINE_OPEN
        delimiter = self._format.delimiter
        # Empty renderings (an empty word in seg-only mode) are skipped so tokens stay single-spaced.
        rendered = (word.render(seg_only, delimiter) for word in words)
        self._tokens.extend(token for token in rendered if token)

    def handle_line_end(self) -> None:
        self._ensure_running()
        self._emit_line()

    def __enter__(self) -> WriterOutputHandler:
        self.on_program_start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.on_program_end()

    def _ensure_running(self) -> None:
        if self._run_state is RunState.TERMINATED:
            raise OutputWriteError(f"Output handler for {self._target} is already terminated")
        if self._run_state is RunState.UNSTARTED:
            self._run_state = RunState.RUNNING
            self._log(HandlerEventKind.STARTED)

    def _emit_line(self) -> None:
        text = self._format.separator.join(self._tokens) + self._format.terminator
        self._tokens = []
        self._line_state = LineState.IDLE
        self._write(text)
        self._lines_written += 1

    def _write(self, text: str) -> None:
        # ValueError covers writes on a stream closed behind our back.
        try:
            self._stream.write(text)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"Failed to write to {self._target}: {exc}") from exc

    def _flush(self) -> None:
        try:
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"Failed to flush {self._target}: {exc}") from exc

    def _release(self) -> None:
        # Shared streams (stdout) are flushed by the caller but never closed here.
        if not self._owns_stream:
            return
        try:
            self._stream.close()
        except OSError as exc:
            raise OutputWriteError(f"Failed to close {self._target}: {exc}") from exc

    def _log(self, kind: HandlerEventKind, *, owns_stream: bool | None = None, lines: int | None = None) -> None:
        if self._log_sink is None:
            return
        self._log_sink.emit(
            HandlerEvent(
                kind=kind,
                target=self._target,
                encoding=self._encoding,
                owns_stream=owns_stream,
                lines=lines,
            )
        )
