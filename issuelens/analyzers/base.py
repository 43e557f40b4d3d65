"""Base classes for source code checks."""

from abc import ABC, abstractmethod
from typing import Iterable

from ..models import CodeIssue


class CodeCheck(ABC):
    """Contract for heuristics that flag problems in a file's text."""

    @abstractmethod
    def supports(self, code: str) -> bool:
        """Return True when this check should run for the given code."""

    @abstractmethod
    def analyze(self, code: str) -> Iterable[CodeIssue]:
        """Produce the findings for ``code``."""
