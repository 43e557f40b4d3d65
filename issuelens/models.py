"""Core data models shared across issuelens components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class FileReference:
    """A source file mentioned in an issue body, with the lines discussed."""

    path: str
    line_numbers: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "lineNumbers": list(self.line_numbers)}


@dataclass
class KnownFile:
    """A file whose full content was supplied to the AI call as context."""

    path: str
    content: str


@dataclass
class CodeSnippet:
    """Code block recovered from an AI response, tied back to a known file when possible."""

    file_path: str
    original_code: str
    suggested_code: str
    # No line-level diffing is performed; kept for the persisted record shape.
    line_numbers: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filePath": self.file_path,
            "originalCode": self.original_code,
            "suggestedCode": self.suggested_code,
            "lineNumbers": list(self.line_numbers),
        }


@dataclass
class StructuredSolution:
    """Structured view of a free-form AI answer."""

    analysis: str = ""
    solution: str = ""
    best_practices: List[str] = field(default_factory=list)
    code_snippets: List[CodeSnippet] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysis": self.analysis,
            "solution": self.solution,
            "bestPractices": list(self.best_practices),
            "codeSnippets": [snippet.to_dict() for snippet in self.code_snippets],
        }


@dataclass
class CodeIssue:
    """Heuristic finding emitted by the severity scanner."""

    type: str
    description: str
    severity: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "description": self.description, "severity": self.severity}


@dataclass
class FileFindings:
    """Scanner findings for a single referenced file."""

    file_path: str
    issues: List[CodeIssue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"filePath": self.file_path, "issues": [issue.to_dict() for issue in self.issues]}


@dataclass
class IssueAnalysis:
    """File references of an issue body combined with findings for the referenced files."""

    file_references: List[FileReference] = field(default_factory=list)
    code_analysis: List[FileFindings] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileReferences": [ref.to_dict() for ref in self.file_references],
            "codeAnalysis": [finding.to_dict() for finding in self.code_analysis],
        }
