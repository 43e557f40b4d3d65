"""Shared constants for AI prompt construction."""

from __future__ import annotations

ANALYSIS_TEMPLATE = "analyze_issue.j2"

MISSING_BODY = "No description provided."

# Order mirrors the section labels the response structurer looks for.
RESPONSE_REQUESTS: tuple[str, ...] = (
    "A detailed analysis of the issue",
    "A step-by-step solution with code examples",
    "Best practices to prevent similar issues",
    "Any suggested code improvements",
)


__all__ = ["ANALYSIS_TEMPLATE", "MISSING_BODY", "RESPONSE_REQUESTS"]
