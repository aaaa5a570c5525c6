from __future__ import annotations

from typing import Protocol, runtime_checkable

from seg_output.observability.domain.events import HandlerEvent


# LogSink is a port for handler lifecycle diagnostics.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, event: HandlerEvent) -> None:
        """Consume one HandlerEvent."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
