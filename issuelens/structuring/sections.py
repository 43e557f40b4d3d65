"""Named matchers for the labelled sections of an AI response.

A section starts at a heading-style label at the beginning of a line, e.g.
``Analysis:``, ``## Solution``, ``- Prevention:`` or ``3. **Best Practices**``,
or at a label followed directly by a colon further along a line, as in
``Here is my take. Analysis: ...``. A section runs until the next recognised
label of any kind, or the end of the text. Labels inside fenced code blocks are
ignored so that a ``# Solution:`` comment in a snippet does not cut the
narrative short.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..textutils import iter_code_fences
from .constants import (
    ANALYSIS_LABELS,
    BEST_PRACTICE_LABELS,
    SOLUTION_LABELS,
    TERMINATOR_LABELS,
)

_EMPHASIS = r"(?:\*\*|__)?"

_ITEM_MARKER = re.compile(
    r"^[ \t]*(?:(?P<number>\d+)\.|[-*])[ \t]+|(?<=[ \t])(?P<inline>\d+)\.[ \t]+",
    re.MULTILINE,
)

Span = Tuple[int, int]


@dataclass(frozen=True)
class SectionLabels:
    """Label vocabulary for each section of a structured answer."""

    analysis: Tuple[str, ...] = ANALYSIS_LABELS
    solution: Tuple[str, ...] = SOLUTION_LABELS
    best_practices: Tuple[str, ...] = BEST_PRACTICE_LABELS
    terminators: Tuple[str, ...] = TERMINATOR_LABELS

    def all_labels(self) -> Tuple[str, ...]:
        return self.analysis + self.solution + self.best_practices + self.terminators


def compile_label_pattern(labels: Iterable[str]) -> re.Pattern[str]:
    """Compile a case-insensitive pattern for any of ``labels``.

    At the start of a line the label may carry heading hashes, a list number
    and bold markers, and may end at a colon or whitespace. Anywhere else,
    bullets included, it must follow a non-word character and end at a colon,
    so ``- Solution reviews help`` stays an ordinary list item.
    """
    alternatives = [
        r"[ \t]+".join(re.escape(word) for word in label.split())
        for label in sorted({label for label in labels if label.strip()}, key=len, reverse=True)
    ]
    if not alternatives:
        # Nothing configured: a pattern that never matches.
        return re.compile(r"(?!)")
    label = f"(?:{'|'.join(alternatives)})"
    heading = (
        rf"^[ \t]*(?:#{{1,6}}[ \t]*)?{_EMPHASIS}(?:\d+[.)][ \t]*)?{_EMPHASIS}"
        rf"{label}{_EMPHASIS}[ \t]*(?::{_EMPHASIS}|(?=\s))"
    )
    inline = rf"(?:^[ \t]*[-*][ \t]+)?(?<!\w){_EMPHASIS}{label}{_EMPHASIS}:{_EMPHASIS}"
    return re.compile(rf"{heading}|{inline}", re.IGNORECASE | re.MULTILINE)


class SectionMatcher:
    """Finds one section by its labels and captures its text."""

    def __init__(self, name: str, labels: Sequence[str]) -> None:
        self.name = name
        self.labels = tuple(labels)
        self.pattern = compile_label_pattern(self.labels)

    def find(self, text: str, boundaries: Sequence[int], excluded: Sequence[Span] = ()) -> Optional[str]:
        """Return the trimmed section text, or None when no label is present."""
        for match in self.pattern.finditer(text):
            if _inside(match.start(), excluded):
                continue
            end = next((start for start in boundaries if start >= match.end()), len(text))
            return text[match.end():end].strip()
        return None


class SectionLocator:
    """Locates the analysis, solution and best-practice sections of a response."""

    def __init__(self, labels: SectionLabels | None = None) -> None:
        self.labels = labels or SectionLabels()
        self.analysis_matcher = SectionMatcher("analysis", self.labels.analysis)
        self.solution_matcher = SectionMatcher("solution", self.labels.solution)
        self.best_practices_matcher = SectionMatcher("best_practices", self.labels.best_practices)
        self._boundary_pattern = compile_label_pattern(self.labels.all_labels())

    def analysis(self, text: str) -> Optional[str]:
        return self._find(self.analysis_matcher, text)

    def solution(self, text: str) -> Optional[str]:
        return self._find(self.solution_matcher, text)

    def best_practices(self, text: str) -> Optional[str]:
        return self._find(self.best_practices_matcher, text)

    def _find(self, matcher: SectionMatcher, text: str) -> Optional[str]:
        excluded = [(fence.start, fence.end) for fence in iter_code_fences(text)]
        boundaries = [
            match.start()
            for match in self._boundary_pattern.finditer(text)
            if not _inside(match.start(), excluded)
        ]
        return matcher.find(text, boundaries, excluded)


def split_best_practices(text: str) -> List[str]:
    """Split a best-practices section into trimmed items.

    Items start at ``N.``, ``-`` or ``*`` markers at the beginning of a line.
    An inline ``N.`` also starts an item when it continues the numbering of the
    previous item, which covers answers like ``1. Validate input 2. Avoid globals``.
    """
    pieces: List[str] = []
    cursor = 0
    last_number: Optional[int] = None
    for match in _ITEM_MARKER.finditer(text):
        inline = match.group("inline")
        if inline is not None:
            if last_number is None or int(inline) != last_number + 1:
                continue
            last_number = int(inline)
        else:
            number = match.group("number")
            last_number = int(number) if number is not None else None
        pieces.append(text[cursor:match.start()])
        cursor = match.end()
    pieces.append(text[cursor:])
    return [piece.strip() for piece in pieces if piece.strip()]


def _inside(position: int, spans: Sequence[Span]) -> bool:
    return any(start <= position < end for start, end in spans)


__all__ = [
    "SectionLabels",
    "SectionLocator",
    "SectionMatcher",
    "compile_label_pattern",
    "split_best_practices",
]
