from __future__ import annotations

from collections.abc import Iterable, Sequence

from seg_output.domain.tagged_word import TaggedWord
from seg_output.ports.output_handler import OutputHandler

# One segmented input line: the batches the segmenter produced for it, in order.
SegmentedLine = Iterable[Sequence[TaggedWord]]


def run_lines(handler: OutputHandler, lines: Iterable[SegmentedLine], *, seg_only: bool = False) -> int:
    # Drives the full protocol: run start, start/segments/end per line, run end.
    # Failures propagate unchanged; the handler is still terminated so its sink is released.
    handler.on_program_start()
    count = 0
    try:
        for batches in lines:
            handler.handle_line_start()
            for words in batches:
                handler.handle_line_segment(words, seg_only)
            handler.handle_line_end()
            count += 1
    finally:
        handler.on_program_end()
    return count
