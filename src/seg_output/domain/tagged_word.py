from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TaggedWord:
    # One segmented token with its part-of-speech tag; owned by the segmenter, read-only here.
    word: str
    tag: str = ""

    def render(self, seg_only: bool, delimiter: str) -> str:
        # Word-only mode drops the tag and the delimiter entirely.
        if seg_only:
            return self.word
        return f"{self.word}{delimiter}{self.tag}"
