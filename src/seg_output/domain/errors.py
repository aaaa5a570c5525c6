from __future__ import annotations


class OutputError(OSError):
    # Base class for I/O failures surfaced by output handlers.
    pass


class OutputUnavailableError(OutputError):
    # Destination could not be created or opened for writing (raised at construction).
    pass


class OutputWriteError(OutputError):
    # A write or flush on an open sink failed, or the handler is already terminated.
    pass


class UnknownCharsetError(LookupError):
    # Charset name does not map to a codec known to the interpreter.
    def __init__(self, charset_name: str) -> None:
        super().__init__(f"Unknown charset: {charset_name!r}")
        self.charset_name = charset_name
