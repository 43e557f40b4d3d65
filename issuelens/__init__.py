"""Extract file references from issue text and structure AI-generated solutions."""

from .extractors import ReferenceExtractor, extract_file_references
from .models import (
    CodeIssue,
    CodeSnippet,
    FileFindings,
    FileReference,
    IssueAnalysis,
    KnownFile,
    StructuredSolution,
)
from .structuring import ResponseStructurer, structure_response

__all__ = [
    "CodeIssue",
    "CodeSnippet",
    "FileFindings",
    "FileReference",
    "IssueAnalysis",
    "KnownFile",
    "ReferenceExtractor",
    "ResponseStructurer",
    "StructuredSolution",
    "extract_file_references",
    "structure_response",
]
