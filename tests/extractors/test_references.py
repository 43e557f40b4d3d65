"""Tests for file reference extraction from issue bodies."""

from __future__ import annotations

from issuelens.diagnostics import CollectingDiagnostics
from issuelens.extractors import (
    ReferenceExtractor,
    extract_file_references,
    find_code_block_references,
    find_line_references,
)
from issuelens.models import FileReference


def _boom(text: str) -> list[FileReference]:
    raise ValueError("pattern exploded")


def test_range_mention_expands_to_every_line() -> None:
    refs = extract_file_references("The crash happens in a/b/file.js:10-12 when saving.")
    assert refs == [FileReference(path="a/b/file.js", line_numbers=[10, 11, 12])]


def test_single_line_mention() -> None:
    refs = extract_file_references("Traceback points at file.py:5.")
    assert refs == [FileReference(path="file.py", line_numbers=[5])]


def test_extraction_is_deterministic() -> None:
    body = "See src/app.js:3, lib/util.py:8-9\n```python\nlib/other.py\nprint(1)\n```"
    assert extract_file_references(body) == extract_file_references(body)


def test_code_block_keeps_line_numbers_from_location_mention() -> None:
    body = (
        "Error at src/app.js:3\n\n"
        "```javascript src/app.js\n"
        "const a = 1;\n"
        "```\n"
    )
    refs = extract_file_references(body)
    assert refs == [FileReference(path="src/app.js", line_numbers=[3])]


def test_code_block_filename_on_following_line() -> None:
    body = "```python\nutils/helpers.py\nprint(1)\n```"
    assert extract_file_references(body) == [FileReference(path="utils/helpers.py", line_numbers=[])]


def test_location_mentions_come_before_code_block_names() -> None:
    body = "```\nfirst.py\n```\nthen second.js:2"
    refs = extract_file_references(body)
    assert [ref.path for ref in refs] == ["second.js", "first.py"]


def test_repeated_mentions_are_merged_in_ascending_order() -> None:
    refs = find_line_references("app.js:3 and later app.js:2-4")
    assert refs == [FileReference(path="app.js", line_numbers=[2, 3, 4])]


def test_reversed_range_yields_no_lines() -> None:
    assert find_line_references("config.yml:9-7") == [FileReference(path="config.yml", line_numbers=[])]


def test_code_block_pass_deduplicates_paths() -> None:
    body = "```js app.js\na()\n```\n```js app.js\nb()\n```"
    assert find_code_block_references(body) == [FileReference(path="app.js")]


def test_unclosed_fence_is_ignored() -> None:
    assert find_code_block_references("```js app.js\nconsole.log(1)") == []


def test_empty_and_missing_input() -> None:
    assert extract_file_references(None) == []
    assert extract_file_references("") == []
    assert ReferenceExtractor().extract(b"file.py:1") == []  # type: ignore[arg-type]


def test_failing_pass_keeps_other_results() -> None:
    diagnostics = CollectingDiagnostics()
    extractor = ReferenceExtractor(diagnostics=diagnostics, line_pass=_boom)

    refs = extractor.extract("main.py:4\n```python main.py\npass\n```")

    assert refs == [FileReference(path="main.py", line_numbers=[])]
    assert diagnostics.stages == ["file line pattern"]
    assert diagnostics.records[0].message == "pattern exploded"


def test_both_passes_failing_returns_empty_list() -> None:
    diagnostics = CollectingDiagnostics()
    extractor = ReferenceExtractor(diagnostics=diagnostics, line_pass=_boom, block_pass=_boom)

    assert extractor.extract("main.py:4") == []
    assert diagnostics.stages == ["file line pattern", "code block pattern"]


def test_to_dict_uses_record_keys() -> None:
    ref = FileReference(path="src/app.js", line_numbers=[1, 2])
    assert ref.to_dict() == {"path": "src/app.js", "lineNumbers": [1, 2]}


def test_line_zero_is_not_a_line_number() -> None:
    assert extract_file_references("see app.py:0") == [FileReference(path="app.py", line_numbers=[])]
    assert extract_file_references("see app.py:0-2") == [
        FileReference(path="app.py", line_numbers=[1, 2])
    ]


def test_oversized_range_keeps_start_line_and_is_reported() -> None:
    diagnostics = CollectingDiagnostics()

    refs = ReferenceExtractor(diagnostics=diagnostics).extract("a.py:1-30000000 and b.py:4")

    assert refs == [
        FileReference(path="a.py", line_numbers=[1]),
        FileReference(path="b.py", line_numbers=[4]),
    ]
    assert diagnostics.stages == ["line range"]
    assert "1-30000000" in diagnostics.records[0].message


def test_colon_annotated_fence_is_a_reference() -> None:
    assert find_code_block_references("```js:src/app.js\nrun()\n```") == [
        FileReference(path="src/app.js")
    ]
