"""Tests for the code smell severity scanner."""

from __future__ import annotations

from typing import Iterable

from issuelens.analyzers import CodeCheck, CodeSmellScanner
from issuelens.models import CodeIssue


def _types(issues: list[CodeIssue]) -> list[tuple[str, str]]:
    return [(issue.type, issue.severity) for issue in issues]


def test_debug_statements_are_low_severity() -> None:
    issues = CodeSmellScanner().scan("function a() { console.log('hi'); }")
    assert issues == [
        CodeIssue(type="debugging", description="Debug statements found in code", severity="low")
    ]


def test_incomplete_markers() -> None:
    assert _types(CodeSmellScanner().scan("# FIXME: handle errors\n")) == [("incomplete", "medium")]


def test_eval_and_credentials_are_separate_security_findings() -> None:
    code = 'password = "hunter2"\nresult = eval(user_input)\n'
    assert _types(CodeSmellScanner().scan(code)) == [("security", "high"), ("security", "critical")]


def test_credential_patterns() -> None:
    scanner = CodeSmellScanner()
    assert _types(scanner.scan("api_key = 'abc123'")) == [("security", "critical")]
    assert _types(scanner.scan("const token: \"xyz\"")) == [("security", "critical")]
    assert scanner.scan("token = os.environ['TOKEN']") == []


def test_each_check_reports_once() -> None:
    code = "console.log(1)\nconsole.error(2)\n// TODO one\n// TODO two\n"
    assert _types(CodeSmellScanner().scan(code)) == [("debugging", "low"), ("incomplete", "medium")]


def test_invalid_input_returns_no_issues() -> None:
    scanner = CodeSmellScanner()
    assert scanner.scan("") == []
    assert scanner.scan(None) == []
    assert scanner.scan(42) == []


def test_custom_checks_replace_defaults() -> None:
    class ShoutCheck(CodeCheck):
        def supports(self, code: str) -> bool:
            return code.isupper()

        def analyze(self, code: str) -> Iterable[CodeIssue]:
            yield CodeIssue(type="style", description="Shouting", severity="low")

    scanner = CodeSmellScanner(checks=[ShoutCheck()])
    assert _types(scanner.scan("LOUD CODE")) == [("style", "low")]
    assert scanner.scan("quiet code with TODO") == []
