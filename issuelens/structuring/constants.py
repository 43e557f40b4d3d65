"""Default section labels recognised in AI responses."""

from __future__ import annotations

ANALYSIS_LABELS: tuple[str, ...] = ("Issue Analysis", "Analysis")

SOLUTION_LABELS: tuple[str, ...] = (
    "Step-by-step solution",
    "Suggested solution",
    "Solution",
)

BEST_PRACTICE_LABELS: tuple[str, ...] = ("Best Practices", "Prevention")

# End the preceding section without starting a field of their own.
TERMINATOR_LABELS: tuple[str, ...] = (
    "Code Improvements",
    "Suggested Improvements",
    "Conclusion",
)


__all__ = [
    "ANALYSIS_LABELS",
    "BEST_PRACTICE_LABELS",
    "SOLUTION_LABELS",
    "TERMINATOR_LABELS",
]
