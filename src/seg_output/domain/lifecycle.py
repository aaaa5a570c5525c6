from __future__ import annotations

from enum import Enum


class LineState(str, Enum):
    # Per-line state: a line is open between handle_line_start and handle_line_end.
    IDLE = "IDLE"
    LINE_OPEN = "LINE_OPEN"


class RunState(str, Enum):
    # Run-level state driven by on_program_start / on_program_end.
    UNSTARTED = "UNSTARTED"
    RUNNING = "RUNNING"
    TERMINATED = "TERMINATED"
