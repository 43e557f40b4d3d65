"""Combine reference extraction with code scanning for an issue."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..diagnostics import Diagnostics, LoggingDiagnostics
from ..extractors import ReferenceExtractor
from ..logging import get_logger
from ..models import FileFindings, IssueAnalysis, KnownFile
from .severity import CodeSmellScanner


class IssueEnhancer:
    """Attaches file references and scanner findings to an issue body."""

    def __init__(
        self,
        extractor: ReferenceExtractor | None = None,
        scanner: CodeSmellScanner | None = None,
        *,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.extractor = extractor or ReferenceExtractor(diagnostics=self.diagnostics)
        self.scanner = scanner or CodeSmellScanner()
        self.logger = get_logger("analyzers.issue")

    def enhance(
        self, body: Optional[str], known_files: Optional[Sequence[KnownFile]] = None
    ) -> IssueAnalysis:
        references = self.extractor.extract(body)
        contents: Dict[str, KnownFile] = {}
        for known in known_files or []:
            contents.setdefault(known.path, known)

        findings = []
        for reference in references:
            known = contents.get(reference.path)
            if known is None:
                continue
            try:
                issues = self.scanner.scan(known.content)
            except Exception as exc:
                self.diagnostics.report(f"scan {reference.path}", exc)
                continue
            if issues:
                findings.append(FileFindings(file_path=reference.path, issues=issues))

        self.logger.debug(
            "Enhanced issue with %d references and %d files with findings",
            len(references),
            len(findings),
        )
        return IssueAnalysis(file_references=references, code_analysis=findings)
