"""Recover file and line references from free-form issue text."""

from __future__ import annotations

import re
from functools import partial
from typing import Callable, Dict, List, Optional

from ..diagnostics import Diagnostics, LoggingDiagnostics, guarded
from ..logging import get_logger
from ..models import FileReference
from ..textutils import (
    PATH_PATTERN,
    LineRangeTooLarge,
    expand_line_range,
    fence_path,
    iter_code_fences,
)

_FILE_LINE_PATTERN = re.compile(rf"(?P<path>{PATH_PATTERN}):(?P<start>\d+)(?:-(?P<end>\d+))?")

ReferencePass = Callable[[str], List[FileReference]]


def find_line_references(
    text: str, diagnostics: Diagnostics | None = None
) -> List[FileReference]:
    """Collect ``path:line`` and ``path:start-end`` mentions.

    Repeated mentions of a path collapse into one reference at the position of
    the first mention, with the union of their line numbers in ascending order.
    A range wider than ``MAX_RANGE_SPAN`` is reported to ``diagnostics`` and
    contributes only its start line.
    """
    diagnostics = diagnostics or LoggingDiagnostics()
    by_path: Dict[str, FileReference] = {}
    for match in _FILE_LINE_PATTERN.finditer(text):
        path = match.group("path")
        start = int(match.group("start"))
        end = int(match.group("end")) if match.group("end") else None
        try:
            lines = expand_line_range(start, end)
        except LineRangeTooLarge as exc:
            diagnostics.report("line range", exc)
            lines = expand_line_range(start)

        reference = by_path.get(path)
        if reference is None:
            by_path[path] = FileReference(path=path, line_numbers=lines)
            continue
        reference.line_numbers = sorted(set(reference.line_numbers).union(lines))
    return list(by_path.values())


def find_code_block_references(text: str) -> List[FileReference]:
    """Collect file names annotated on fenced code blocks."""
    references: List[FileReference] = []
    seen: set[str] = set()
    for fence in iter_code_fences(text):
        path = fence_path(fence)
        if path is None or path in seen:
            continue
        seen.add(path)
        references.append(FileReference(path=path))
    return references


class ReferenceExtractor:
    """Best-effort extraction of file references from issue bodies."""

    def __init__(
        self,
        *,
        diagnostics: Diagnostics | None = None,
        line_pass: ReferencePass | None = None,
        block_pass: ReferencePass = find_code_block_references,
    ) -> None:
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self._line_pass = line_pass or partial(find_line_references, diagnostics=self.diagnostics)
        self._block_pass = block_pass
        self.logger = get_logger("extractors.references")

    def extract(self, text: Optional[str]) -> List[FileReference]:
        if not isinstance(text, str) or not text:
            return []
        return guarded(self.diagnostics, "reference extraction", self._extract, text, default=[])

    def _extract(self, text: str) -> List[FileReference]:
        located = guarded(self.diagnostics, "file line pattern", self._line_pass, text, default=[])
        annotated = guarded(self.diagnostics, "code block pattern", self._block_pass, text, default=[])
        merged = merge_references(located, annotated)
        self.logger.debug(
            "Extracted %d file references (%d from locations, %d from code blocks)",
            len(merged),
            len(located),
            len(annotated),
        )
        return merged


def merge_references(
    located: List[FileReference], annotated: List[FileReference]
) -> List[FileReference]:
    """Append annotated paths after located ones, never replacing located line numbers."""
    merged = list(located)
    known = {reference.path for reference in located}
    for reference in annotated:
        if reference.path in known:
            continue
        known.add(reference.path)
        merged.append(reference)
    return merged


def extract_file_references(
    text: Optional[str], *, diagnostics: Diagnostics | None = None
) -> List[FileReference]:
    """Return the deduplicated file references mentioned in ``text``."""
    return ReferenceExtractor(diagnostics=diagnostics).extract(text)
