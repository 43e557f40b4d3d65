"""Turn a free-form AI answer into a structured solution record."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..diagnostics import Diagnostics, LoggingDiagnostics, guarded
from ..logging import get_logger
from ..models import CodeSnippet, KnownFile, StructuredSolution
from ..textutils import fence_line_path, first_paragraph, iter_code_fences
from .sections import SectionLabels, SectionLocator, split_best_practices


def match_known_file(annotation: str, known_files: Sequence[KnownFile]) -> Optional[KnownFile]:
    """Return the first known file whose path contains, or is contained in, ``annotation``.

    With overlapping candidates (``utils.js`` and ``src/utils.js``) list order decides.
    """
    if not annotation:
        return None
    for known in known_files:
        if not known.path:
            continue
        if known.path in annotation or annotation in known.path:
            return known
    return None


def extract_code_snippets(text: str, known_files: Sequence[KnownFile]) -> List[CodeSnippet]:
    """Collect every fenced block, cross-referenced against ``known_files``."""
    snippets: List[CodeSnippet] = []
    for fence in iter_code_fences(text):
        annotation = fence_line_path(fence) or ""
        matched = match_known_file(annotation, known_files)
        snippets.append(
            CodeSnippet(
                file_path=matched.path if matched else annotation,
                original_code=matched.content if matched else "",
                suggested_code=fence.body,
            )
        )
    return snippets


class ResponseStructurer:
    """Extracts analysis, solution, best practices and code snippets from AI prose."""

    def __init__(
        self,
        *,
        labels: SectionLabels | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.locator = SectionLocator(labels)
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.logger = get_logger("structuring.response")

    def structure(
        self, raw_text: Optional[str], known_files: Optional[Sequence[KnownFile]] = None
    ) -> StructuredSolution:
        if not isinstance(raw_text, str) or not raw_text:
            return StructuredSolution()
        files = list(known_files or [])

        analysis = guarded(self.diagnostics, "analysis section", self.locator.analysis, raw_text, default=None)
        if analysis is None:
            self.logger.debug("No analysis label found; using first paragraph")
            analysis = guarded(self.diagnostics, "first paragraph", first_paragraph, raw_text, default="")

        solution = guarded(self.diagnostics, "solution section", self.locator.solution, raw_text, default=None)

        practices_text = guarded(
            self.diagnostics, "best practices section", self.locator.best_practices, raw_text, default=None
        )
        best_practices: List[str] = []
        if practices_text:
            best_practices = guarded(
                self.diagnostics, "best practices split", split_best_practices, practices_text, default=[]
            )

        snippets = guarded(
            self.diagnostics, "code snippets", extract_code_snippets, raw_text, files, default=[]
        )
        self.logger.debug(
            "Structured response: %d best practices, %d code snippets",
            len(best_practices),
            len(snippets),
        )
        return StructuredSolution(
            analysis=analysis,
            solution=solution or "",
            best_practices=best_practices,
            code_snippets=snippets,
        )


def structure_response(
    raw_text: Optional[str],
    known_files: Optional[Sequence[KnownFile]] = None,
    *,
    labels: SectionLabels | None = None,
    diagnostics: Diagnostics | None = None,
) -> StructuredSolution:
    """Return the structured solution found in ``raw_text``."""
    return ResponseStructurer(labels=labels, diagnostics=diagnostics).structure(raw_text, known_files)
