"""Tests for the diagnostics sinks."""

from __future__ import annotations

from issuelens.diagnostics import CollectingDiagnostics, LoggingDiagnostics, guarded


class _RecordingLogger:
    def __init__(self) -> None:
        self.warnings: list[tuple[str, tuple[object, ...]]] = []

    def warning(self, message: str, *args: object) -> None:
        self.warnings.append((message, args))


def _explode(value: int) -> int:
    raise RuntimeError(f"bad value {value}")


def test_guarded_returns_result_when_pass_succeeds() -> None:
    diagnostics = CollectingDiagnostics()
    assert guarded(diagnostics, "double", lambda value: value * 2, 4, default=0) == 8
    assert diagnostics.records == []


def test_guarded_reports_and_returns_default() -> None:
    diagnostics = CollectingDiagnostics()
    assert guarded(diagnostics, "explode", _explode, 3, default=-1) == -1
    assert diagnostics.stages == ["explode"]
    assert diagnostics.records[0].message == "bad value 3"


def test_logging_diagnostics_emits_warning() -> None:
    logger = _RecordingLogger()
    LoggingDiagnostics(logger).report("code block pattern", ValueError("oops"))  # type: ignore[arg-type]
    assert len(logger.warnings) == 1
    message, args = logger.warnings[0]
    assert message == "%s failed: %s"
    assert args[0] == "code block pattern"
    assert str(args[1]) == "oops"
