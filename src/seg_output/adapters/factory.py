from __future__ import annotations

import os
import sys
from codecs import CodecInfo
from pathlib import Path

from seg_output.adapters.charset import charset_label, resolve_charset
from seg_output.adapters.contracts import adapter
from seg_output.adapters.registry import AdapterRegistry
from seg_output.adapters.string_handler import StringOutputHandler
from seg_output.adapters.writer_handler import WriterOutputHandler
from seg_output.config.models import LogConfig, OutputConfig
from seg_output.domain.errors import OutputUnavailableError
from seg_output.domain.line_format import LineFormat
from seg_output.observability.adapters.sinks import JsonlLogSink, StderrLogSink
from seg_output.ports.log_sink import LogSink
from seg_output.ports.output_handler import OutputHandler


def create_default(*, line_format: LineFormat | None = None, log_sink: LogSink | None = None) -> WriterOutputHandler:
    """Handler writing to ``sys.stdout`` with the platform encoding; stdout is never closed.

    The handler writes the same terminator as every other sink, but stdout is a
    shared text stream left in its own newline mode, so on Windows the console
    receives CRLF where files and buffers hold LF.
    """
    stream = sys.stdout
    return WriterOutputHandler(
        stream,
        owns_stream=False,
        target="<stdout>",
        encoding=getattr(stream, "encoding", None),
        line_format=line_format,
        log_sink=log_sink,
    )


def create_from_file(
    path: str | os.PathLike[str] | None,
    charset_name: str | None = None,
    *,
    charset: CodecInfo | None = None,
    line_format: LineFormat | None = None,
    log_sink: LogSink | None = None,
) -> WriterOutputHandler | None:
    """Handler writing to ``path``, created or truncated, owned until run termination.

    ``path=None`` means no output was requested and returns ``None``; callers
    must check for it. The charset is resolved before the file is touched, so
    an unknown ``charset_name`` raises ``UnknownCharsetError`` and creates no
    file. Open failures raise ``OutputUnavailableError``.
    """
    if path is None:
        return None
    encoding = charset_label(resolve_charset(charset, charset_name))
    target = Path(path)
    try:
        # Line-buffered; newline="" keeps the terminator identical to the other sinks.
        stream = target.open("w", encoding=encoding, newline="", buffering=1)
    except OSError as exc:
        raise OutputUnavailableError(f"Cannot open {target} for writing: {exc}") from exc
    return WriterOutputHandler(
        stream,
        owns_stream=True,
        target=str(target),
        encoding=encoding,
        line_format=line_format,
        log_sink=log_sink,
    )


def create_output_to_string(
    *, line_format: LineFormat | None = None, log_sink: LogSink | None = None
) -> StringOutputHandler:
    """In-memory handler; read the accumulated text with ``get_string()``."""
    return StringOutputHandler(line_format=line_format, log_sink=log_sink)


@adapter(kind="stdout", handler_type=WriterOutputHandler)
def stdout_handler(config: OutputConfig, log_sink: LogSink | None = None) -> OutputHandler:
    return create_default(line_format=config.format.to_line_format(), log_sink=log_sink)


@adapter(kind="file", handler_type=WriterOutputHandler)
def file_handler(config: OutputConfig, log_sink: LogSink | None = None) -> OutputHandler | None:
    return create_from_file(
        config.path,
        config.charset_name,
        charset=config.charset,
        line_format=config.format.to_line_format(),
        log_sink=log_sink,
    )


@adapter(kind="string", handler_type=StringOutputHandler)
def string_handler(config: OutputConfig, log_sink: LogSink | None = None) -> OutputHandler:
    return create_output_to_string(line_format=config.format.to_line_format(), log_sink=log_sink)


def default_registry() -> AdapterRegistry:
    # Built-in sink kinds; callers may register extra kinds on their own registry.
    return AdapterRegistry.from_factories([stdout_handler, file_handler, string_handler])


def build_log_sink(config: LogConfig | None) -> LogSink | None:
    # Log sink declared in the `output.log` section, if any.
    if config is None:
        return None
    if config.kind == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return StderrLogSink()


def create_handler(
    config: OutputConfig,
    *,
    log_sink: LogSink | None = None,
    registry: AdapterRegistry | None = None,
) -> OutputHandler | None:
    """Build the handler selected by ``config.kind``.

    Returns ``None`` for a ``file`` kind without a path, mirroring ``create_from_file``.
    An explicit ``log_sink`` takes precedence over the `log` section of the config.
    """
    factory = (registry or default_registry()).get(config.kind)
    return factory(config, log_sink if log_sink is not None else build_log_sink(config.log))
