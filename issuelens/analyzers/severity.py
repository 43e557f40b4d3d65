"""Keyword heuristics that rate the severity of smells in source code."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from ..logging import get_logger
from ..models import CodeIssue
from .base import CodeCheck

_CREDENTIAL_PATTERNS = (
    re.compile(r"password\s*[:=]\s*['\"]+[^'\"]+['\"]"),
    re.compile(r"api[_-]?key\s*[:=]\s*['\"]+[^'\"]+['\"]"),
    re.compile(r"secret\s*[:=]\s*['\"]+[^'\"]+['\"]"),
    re.compile(r"token\s*[:=]\s*['\"]+[^'\"]+['\"]"),
    re.compile(r"auth\s*[:=]\s*['\"]+[^'\"]+['\"]"),
)


class KeywordCheck(CodeCheck):
    """Reports a single issue when any of its keywords occurs in the code."""

    keywords: Sequence[str] = ()
    issue_type = ""
    description = ""
    severity = ""

    def supports(self, code: str) -> bool:
        return bool(code)

    def analyze(self, code: str) -> Iterable[CodeIssue]:
        if any(keyword in code for keyword in self.keywords):
            return [CodeIssue(type=self.issue_type, description=self.description, severity=self.severity)]
        return []


class DebugStatementCheck(KeywordCheck):
    keywords = ("console.log", "console.debug", "console.error")
    issue_type = "debugging"
    description = "Debug statements found in code"
    severity = "low"


class IncompleteMarkerCheck(KeywordCheck):
    keywords = ("TODO", "FIXME", "HACK", "XXX")
    issue_type = "incomplete"
    description = "TODO, FIXME, HACK or XXX comments found"
    severity = "medium"


class UnsafeEvaluationCheck(KeywordCheck):
    keywords = ("eval(", "new Function(")
    issue_type = "security"
    description = "Potentially unsafe code execution"
    severity = "high"


class HardcodedCredentialCheck(CodeCheck):
    """Flags quoted literals assigned to password, key, secret, token or auth names."""

    def supports(self, code: str) -> bool:
        return bool(code)

    def analyze(self, code: str) -> Iterable[CodeIssue]:
        if any(pattern.search(code) for pattern in _CREDENTIAL_PATTERNS):
            return [
                CodeIssue(
                    type="security",
                    description="Potential hardcoded credentials found",
                    severity="critical",
                )
            ]
        return []


def default_checks() -> List[CodeCheck]:
    return [
        DebugStatementCheck(),
        IncompleteMarkerCheck(),
        UnsafeEvaluationCheck(),
        HardcodedCredentialCheck(),
    ]


class CodeSmellScanner:
    """Runs independent checks over a file and collects their findings."""

    def __init__(self, checks: Optional[Iterable[CodeCheck]] = None) -> None:
        self.checks = list(checks) if checks is not None else default_checks()
        self.logger = get_logger("analyzers.severity")

    def scan(self, code: object) -> List[CodeIssue]:
        if not isinstance(code, str) or not code:
            self.logger.warning("Invalid code provided for analysis")
            return []
        self.logger.debug("Analyzing code with length: %d characters", len(code))
        issues: List[CodeIssue] = []
        for check in self.checks:
            if check.supports(code):
                issues.extend(check.analyze(code))
        return issues


__all__ = [
    "CodeSmellScanner",
    "DebugStatementCheck",
    "HardcodedCredentialCheck",
    "IncompleteMarkerCheck",
    "KeywordCheck",
    "UnsafeEvaluationCheck",
    "default_checks",
]
