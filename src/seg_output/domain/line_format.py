from __future__ import annotations

from dataclasses import dataclass

# Output format constants shared by every sink, so console, file and buffer
# output stay byte-comparable for diff-based checks downstream.
TAG_DELIMITER = "/"
LINE_TERMINATOR = "\n"
TOKEN_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class LineFormat:
    # How tokens are rendered into one physical output line.
    delimiter: str = TAG_DELIMITER
    terminator: str = LINE_TERMINATOR
    separator: str = TOKEN_SEPARATOR

    def __post_init__(self) -> None:
        if not self.delimiter or not self.terminator:
            raise ValueError("LineFormat requires non-empty delimiter/terminator")


DEFAULT_LINE_FORMAT = LineFormat()
