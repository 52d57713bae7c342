"""Tests for IO helpers."""

import json
from pathlib import Path

import pytest

from wildforge import io
from wildforge.engine.errors import RuleError
from wildforge.engine.models import RuleSpec


def test_read_text_and_jsonl(tmp_path: Path) -> None:
    text_path = tmp_path / "paths.txt"
    text_path.write_text("build/a.o\n\nbuild/b.o\n")
    assert io.read_paths(str(text_path)) == ["build/a.o", "build/b.o"]

    jsonl_path = tmp_path / "paths.jsonl"
    jsonl_path.write_text('{"path":"build/c.o"}\n"build/d.o"\n')
    assert io.read_paths(str(jsonl_path)) == ["build/c.o", "build/d.o"]


def test_parse_rules_accepts_object_and_list() -> None:
    rules = [{"name": "compile", "inputs": ["src/{s}.c"], "outputs": ["build/{s}.o"]}]
    expected = [RuleSpec(name="compile", outputs=("build/{s}.o",), inputs=("src/{s}.c",))]
    assert io.parse_rules({"rules": rules}) == expected
    assert io.parse_rules(rules) == expected


def test_parse_rules_defaults() -> None:
    specs = io.parse_rules([{"outputs": "out/{x}"}, {"outputs": ["log/{x}"], "inputs": "in/{x}"}])
    assert specs == [
        RuleSpec(name="rule1", outputs=("out/{x}",)),
        RuleSpec(name="rule2", outputs=("log/{x}",), inputs=("in/{x}",)),
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"not_rules": []},
        [42],
        [{"inputs": ["a"]}],
        [{"outputs": [1, 2]}],
        [{"outputs": ["a"], "inputs": {"x": "y"}}],
    ],
)
def test_parse_rules_rejects_bad_shapes(payload: object) -> None:
    with pytest.raises(RuleError):
        io.parse_rules(payload)


def test_load_workflow(tmp_path: Path) -> None:
    rules_path = tmp_path / "rules.json"
    rules_path.write_text(json.dumps({"rules": [{"name": "copy", "inputs": ["src/{f}"], "outputs": ["dst/{f}"]}]}))
    workflow = io.load_workflow(str(rules_path))
    task = workflow.materialize("dst/readme.md")
    assert task is not None
    assert task.inputs == ("src/readme.md",)


def test_load_wildcards(tmp_path: Path) -> None:
    path = tmp_path / "wildcards.json"
    path.write_text(json.dumps({"stem": "main", "n": 3}))
    assert dict(io.load_wildcards(str(path))) == {"stem": "main", "n": "3"}

    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        io.load_wildcards(str(path))


def test_write_helpers(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "out.json"
    io.write_json({"a": 1}, str(out))
    assert json.loads(out.read_text()) == {"a": 1}

    io.write_json({"b": 2}, "-")
    io.write_text("payload", "-")
    captured = capsys.readouterr()
    assert '"b": 2' in captured.out
    assert captured.out.endswith("payload\n")


def test_read_whole_json_document(tmp_path: Path) -> None:
    json_path = tmp_path / "paths.json"
    json_path.write_text(json.dumps(["build/a.o", {"path": "build/b.o"}], indent=2))
    assert io.read_paths(str(json_path)) == ["build/a.o", "build/b.o"]

    json_path.write_text('{"path":"build/c.o"}\n{"path":"build/d.o"}\n')
    assert io.read_paths(str(json_path)) == ["build/c.o", "build/d.o"]
