from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path

from seg_output.observability.domain.events import HandlerEvent


def _dumps(event: HandlerEvent) -> str:
    return json.dumps(event.to_record(), separators=(",", ":"), ensure_ascii=False)


class StderrLogSink:
    # Handler events on stderr; stdout carries segmented output only.
    def emit(self, event: HandlerEvent) -> None:
        sys.stderr.write(_dumps(event) + "\n")


@dataclass(frozen=True, slots=True)
class JsonlLogSink:
    # Appends one event per line; the file is opened per event so the sink holds no handle
    # that would outlive the handler reporting to it.
    path: Path

    def emit(self, event: HandlerEvent) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(_dumps(event) + "\n")
