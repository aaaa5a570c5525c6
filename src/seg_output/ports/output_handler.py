from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from seg_output.domain.tagged_word import TaggedWord
from seg_output.ports.program_state import ProgramStateListener


# OutputHandler port defines how segmented lines leave the system.
# The driver calls, per input line: handle_line_start, handle_line_segment (one or more
# times, since the segmenter may split long lines), then handle_line_end. All batches
# between a start/end pair belong to the same output line.
@runtime_checkable
class OutputHandler(ProgramStateListener, Protocol):
    def handle_line_segment(self, words: Sequence[TaggedWord], seg_only: bool) -> None:
        """Append one batch of words to the open line; ``seg_only`` suppresses tags."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputHandler is a port; use a concrete adapter.")

    def handle_line_start(self) -> None:
        """Begin a new logical output line and reset per-line state."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputHandler is a port; use a concrete adapter.")

    def handle_line_end(self) -> None:
        """Finish the open line: emit it followed by the line terminator."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("OutputHandler is a port; use a concrete adapter.")
