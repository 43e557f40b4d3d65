"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from issuelens.config import IssueLensConfig, LabelConfig
from issuelens.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_references_endpoint(client: TestClient) -> None:
    response = client.post("/references", json={"text": "Broken at a/b/file.js:10-12"})
    assert response.status_code == 200
    assert response.json() == {
        "references": [{"path": "a/b/file.js", "lineNumbers": [10, 11, 12]}],
        "diagnostics": [],
    }


def test_references_endpoint_bounds_wide_ranges(client: TestClient) -> None:
    response = client.post("/references", json={"text": "a.py:1-30000000"})
    assert response.status_code == 200
    assert response.json() == {
        "references": [{"path": "a.py", "lineNumbers": [1]}],
        "diagnostics": ["line range: line range 1-30000000 exceeds 1000 lines"],
    }


def test_references_endpoint_accepts_missing_text(client: TestClient) -> None:
    response = client.post("/references", json={})
    assert response.status_code == 200
    assert response.json()["references"] == []


def test_structure_endpoint(client: TestClient) -> None:
    payload = {
        "raw_text": "Analysis: off by one\n\nSolution:\n```js src/app.js\nfix()\n```",
        "known_files": [{"path": "src/app.js", "content": "broken()"}],
    }
    response = client.post("/structure", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["analysis"] == "off by one"
    assert data["bestPractices"] == []
    assert data["codeSnippets"] == [
        {
            "filePath": "src/app.js",
            "originalCode": "broken()",
            "suggestedCode": "fix()",
            "lineNumbers": [],
        }
    ]


def test_structure_endpoint_uses_configured_labels(tmp_path: Path) -> None:
    config = IssueLensConfig(root=tmp_path, labels=LabelConfig(analysis=["Diagnosis"]))
    client = TestClient(create_app(config))

    response = client.post(
        "/structure", json={"raw_text": "Diagnosis: stale cache\n\nSolution: clear it"}
    )

    assert response.json()["analysis"] == "stale cache"
    assert response.json()["solution"] == "clear it"


def test_scan_endpoint(client: TestClient) -> None:
    response = client.post("/scan", json={"code": "eval(input)"})
    assert response.status_code == 200
    assert response.json() == {
        "issues": [
            {
                "type": "security",
                "description": "Potentially unsafe code execution",
                "severity": "high",
            }
        ]
    }


def test_enhance_endpoint(client: TestClient) -> None:
    payload = {
        "body": "See src/app.js:2",
        "known_files": [{"path": "src/app.js", "content": "// TODO"}],
    }
    data = client.post("/enhance", json=payload).json()
    assert data["fileReferences"] == [{"path": "src/app.js", "lineNumbers": [2]}]
    assert data["codeAnalysis"][0]["filePath"] == "src/app.js"
    assert data["codeAnalysis"][0]["issues"][0]["type"] == "incomplete"


def test_prompt_endpoint(client: TestClient) -> None:
    response = client.post("/prompt", json={"title": "Crash", "body": None})
    assert response.status_code == 200
    assert "Issue Title: Crash" in response.json()["prompt"]
