"""Diagnostics sinks for non-fatal failures inside extraction passes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Protocol, TypeVar

from .logging import get_logger

T = TypeVar("T")


@dataclass
class Diagnostic:
    """A recovered failure, tagged with the pass that produced it."""

    stage: str
    message: str


class Diagnostics(Protocol):
    """Receives failures that a component recovered from."""

    def report(self, stage: str, error: Exception) -> None:
        """Record that ``stage`` failed with ``error``."""


class LoggingDiagnostics:
    """Forwards recovered failures to the issuelens logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("diagnostics")

    def report(self, stage: str, error: Exception) -> None:
        self.logger.warning("%s failed: %s", stage, error)


class CollectingDiagnostics:
    """Keeps recovered failures in memory."""

    def __init__(self) -> None:
        self.records: List[Diagnostic] = []

    def report(self, stage: str, error: Exception) -> None:
        self.records.append(Diagnostic(stage=stage, message=str(error)))

    @property
    def stages(self) -> List[str]:
        return [record.stage for record in self.records]


def guarded(
    diagnostics: Diagnostics,
    stage: str,
    func: Callable[..., T],
    *args: object,
    default: T,
) -> T:
    """Run ``func`` and return ``default`` after reporting any exception it raises."""
    try:
        return func(*args)
    except Exception as exc:
        diagnostics.report(stage, exc)
        return default


__all__ = [
    "CollectingDiagnostics",
    "Diagnostic",
    "Diagnostics",
    "LoggingDiagnostics",
    "guarded",
]
