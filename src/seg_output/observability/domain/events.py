from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class HandlerEventKind(str, Enum):
    # Lifecycle points at which a handler reports to its log sink.
    OPENED = "output_handler.opened"
    STARTED = "output_handler.started"
    CLOSED = "output_handler.closed"


@dataclass(frozen=True, slots=True)
class HandlerEvent:
    # Diagnostic record for one handler; target is a file path, "<stdout>" or "<string>".
    kind: HandlerEventKind
    target: str
    encoding: str | None = None
    owns_stream: bool | None = None
    lines: int | None = None
    level: str = "debug"
    at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if not self.target:
            raise ValueError("HandlerEvent requires a non-empty target")

    def to_record(self) -> dict[str, object]:
        # Unset optional fields are left out so each record carries only what applies to its kind.
        record: dict[str, object] = {
            "level": self.level,
            "event": self.kind.value,
            "at": self.at.isoformat().replace("+00:00", "Z"),
            "target": self.target,
        }
        for key in ("encoding", "owns_stream", "lines"):
            value = getattr(self, key)
            if value is not None:
                record[key] = value
        return record
