from __future__ import annotations

from typing import Protocol, runtime_checkable


# ProgramStateListener is notified once when a segmentation run starts and once when it ends.
@runtime_checkable
class ProgramStateListener(Protocol):
    def on_program_start(self) -> None:
        """Called before the first input line is processed."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ProgramStateListener is a port; use a concrete adapter.")

    def on_program_end(self) -> None:
        """Called after the last input line; release resources acquired for the run."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ProgramStateListener is a port; use a concrete adapter.")
