"""Structuring of AI-generated answers into solution records."""

from .response import (
    ResponseStructurer,
    extract_code_snippets,
    match_known_file,
    structure_response,
)
from .sections import SectionLabels, SectionLocator, SectionMatcher, split_best_practices

__all__ = [
    "ResponseStructurer",
    "SectionLabels",
    "SectionLocator",
    "SectionMatcher",
    "extract_code_snippets",
    "match_known_file",
    "split_best_practices",
    "structure_response",
]
