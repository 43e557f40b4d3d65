"""Source code checks and issue enhancement."""

from .base import CodeCheck
from .issue import IssueEnhancer
from .severity import CodeSmellScanner, default_checks

__all__ = ["CodeCheck", "CodeSmellScanner", "IssueEnhancer", "default_checks"]
