"""Extractors that turn issue text into file references."""

from .references import (
    ReferenceExtractor,
    extract_file_references,
    find_code_block_references,
    find_line_references,
    merge_references,
)

__all__ = [
    "ReferenceExtractor",
    "extract_file_references",
    "find_code_block_references",
    "find_line_references",
    "merge_references",
]
