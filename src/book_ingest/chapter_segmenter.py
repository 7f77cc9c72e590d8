#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Rewrote the multi-pass splitter as a single-pass streaming state machine
# - Added ChapterDraft / ParsedChapter
# - Dropped sub-numbering and duplicate heuristics
#

"""
chapter_segmenter.py - Single-pass chapter segmentation
=======================================================

Groups a lazy sequence of lines into titled chapters. Exactly one draft
is open at a time. A boundary line freezes the open draft (if it has any
lines) and opens a new one titled after the boundary line. Lines that are
not boundaries are always content, so no lookahead is needed.

Back-to-back boundary lines leave an empty draft behind; it is dropped,
never emitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .chapter_patterns import is_chapter_boundary
from .common_constants import FRONT_MATTER_TITLE

logger = logging.getLogger(__name__)


@dataclass
class ChapterDraft:
    """The chapter currently being accumulated."""

    title: str
    lines: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedChapter:
    """A finished chapter, ready to be stored."""

    title: str
    content: str
    order_index: int
    word_count: int


class ChapterSegmenter:
    """Stateful scanner turning lines into ParsedChapters."""

    def __init__(self, front_matter_title: str = FRONT_MATTER_TITLE) -> None:
        self.draft = ChapterDraft(title=front_matter_title)
        self.emitted = 0
        self.dropped = 0

    def feed(self, line: str) -> Optional[ParsedChapter]:
        """
        Consume one line.

        Returns:
            The chapter closed by this line, or None
        """
        if not is_chapter_boundary(line):
            self.draft.lines.append(line)
            return None

        closed = self._freeze()
        if closed is None:
            self.dropped += 1
            logger.debug(f"Dropped empty chapter {self.draft.title!r}")
        self.draft = ChapterDraft(title=line.strip())
        return closed

    def finish(self) -> Optional[ParsedChapter]:
        """Close the stream and return the last chapter, if it has content."""
        return self._freeze()

    def _freeze(self) -> Optional[ParsedChapter]:
        if not self.draft.lines:
            return None
        content = "\n".join(self.draft.lines)
        self.emitted += 1
        return ParsedChapter(
            title=self.draft.title,
            content=content,
            order_index=self.emitted,
            word_count=len(content),
        )


def segment_lines(lines: Iterable[str], front_matter_title: str = FRONT_MATTER_TITLE) -> Iterator[ParsedChapter]:
    """
    Yield chapters from a line stream, in order.

    Args:
        lines: Lines with terminators already stripped
        front_matter_title: Title of the text preceding the first boundary

    Yields:
        ParsedChapter values with order_index 1..N
    """
    segmenter = ChapterSegmenter(front_matter_title)
    for line in lines:
        chapter = segmenter.feed(line)
        if chapter is not None:
            yield chapter
    last = segmenter.finish()
    if last is not None:
        yield last
    logger.debug(f"Segmented {segmenter.emitted} chapters, dropped {segmenter.dropped} empty ones")
