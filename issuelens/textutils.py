"""Shared regex helpers for scanning issue and response text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

# Word characters, hyphens, dots and slashes, ending in ".<alpha extension>".
PATH_PATTERN = r"[\w\-./]+\.[A-Za-z]+"

_PATH_TOKEN = re.compile(PATH_PATTERN)
_FENCE = re.compile(r"```(?P<info>[^\n`]*)\n?(?P<body>.*?)```", re.DOTALL)
_BLANK_LINE = re.compile(r"\r?\n[ \t]*\r?\n")
_TRAILING_NEWLINE = re.compile(r"\r?\n\Z")
_INFO_SEPARATOR = re.compile(r"[\s:]+")

# Widest ``path:start-end`` range expanded into individual line numbers.
MAX_RANGE_SPAN = 1000


class LineRangeTooLarge(ValueError):
    """Raised when a line range spans more lines than allowed."""

    def __init__(self, start: int, end: int, max_span: int) -> None:
        super().__init__(f"line range {start}-{end} exceeds {max_span} lines")
        self.start = start
        self.end = end
        self.max_span = max_span


@dataclass
class CodeFence:
    """A closed fenced code block located in a larger text."""

    info: str
    body: str
    start: int
    end: int

    @property
    def first_line(self) -> str:
        return self.body.split("\n", 1)[0].strip()


def is_path_token(token: str) -> bool:
    """Return True when ``token`` as a whole looks like a file path."""
    return _PATH_TOKEN.fullmatch(token) is not None


def iter_code_fences(text: str) -> Iterator[CodeFence]:
    """Yield closed fenced code blocks in document order.

    ``info`` is whatever follows the opening backticks on the fence line and
    ``body`` excludes both fence lines and the newline before the closing fence.
    """
    for match in _FENCE.finditer(text):
        body = _TRAILING_NEWLINE.sub("", match.group("body"))
        yield CodeFence(
            info=match.group("info").strip(),
            body=body,
            start=match.start(),
            end=match.end(),
        )


def fence_line_path(fence: CodeFence) -> Optional[str]:
    """Return the first token of the fence line that is a file path.

    Tokens are split on whitespace and colons, so ``js src/app.js`` and
    ``js:src/app.js`` both name ``src/app.js``.
    """
    for token in _INFO_SEPARATOR.split(fence.info):
        if is_path_token(token):
            return token
    return None


def fence_path(fence: CodeFence) -> Optional[str]:
    """Return a path annotation from the fence line or, failing that, the line below it."""
    path = fence_line_path(fence)
    if path is not None:
        return path
    candidate = fence.first_line
    if candidate and is_path_token(candidate):
        return candidate
    return None


def expand_line_range(
    start: int, end: Optional[int] = None, *, max_span: int = MAX_RANGE_SPAN
) -> List[int]:
    """Expand an inclusive line range of positive line numbers.

    Line 0 is dropped and a reversed range is empty. A range covering more
    than ``max_span`` lines raises ``LineRangeTooLarge``.
    """
    first = max(start, 1)
    last = start if end is None else end
    if last - first + 1 > max_span:
        raise LineRangeTooLarge(start, last, max_span)
    return list(range(first, last + 1))


def first_paragraph(text: str) -> str:
    """Return the text up to the first blank line, trimmed."""
    return _BLANK_LINE.split(text, 1)[0].strip()


__all__ = [
    "MAX_RANGE_SPAN",
    "PATH_PATTERN",
    "CodeFence",
    "LineRangeTooLarge",
    "expand_line_range",
    "fence_line_path",
    "fence_path",
    "first_paragraph",
    "is_path_token",
    "iter_code_fences",
]
