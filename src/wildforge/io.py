"""Input/output helpers for the wildforge CLI."""
import json
import os
import sys
from collections.abc import Iterable
from typing import TextIO

from .engine.errors import RuleError
from .engine.mapping import WildcardMap
from .engine.models import RuleSpec
from .engine.rules import Workflow


def _read_text_lines(handle: TextIO) -> list[str]:
    return [line.rstrip("\n\r") for line in handle if line.strip()]


def _path_value(obj: object) -> str:
    if isinstance(obj, dict) and "path" in obj:
        return str(obj["path"])
    return str(obj)


def _read_jsonl(lines: Iterable[str]) -> list[str]:
    return [_path_value(json.loads(raw)) for raw in lines if raw.strip()]


def _read_json(handle: TextIO) -> list[str]:
    """Read a whole JSON document (list or single entry), else JSON lines."""
    text = handle.read()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return _read_jsonl(text.splitlines())
    if isinstance(payload, list):
        return [_path_value(obj) for obj in payload]
    return [_path_value(payload)]


def _open_path(path: str) -> Iterable[str]:
    _, ext = os.path.splitext(path)
    ext = ext.lower()
    if ext == ".json":
        with open(path, encoding="utf-8") as handle:
            for line in _read_json(handle):
                yield line
    elif ext == ".jsonl":
        with open(path, encoding="utf-8") as handle:
            for line in _read_jsonl(handle):
                yield line
    else:
        with open(path, encoding="utf-8") as handle:
            for line in _read_text_lines(handle):
                yield line


def read_paths(path: str) -> list[str]:
    return list(_open_path(path))


def _string_list(value: object, key: str, index: int) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RuleError(f"rule #{index}: '{key}' must be a string or a list of strings")
    return tuple(value)


def parse_rules(payload: object) -> list[RuleSpec]:
    """Turn a decoded rule file into rule specs.

    Accepts ``{"rules": [...]}`` or a bare list of rule objects.
    """
    if isinstance(payload, dict) and "rules" in payload:
        entries = payload["rules"]
    else:
        entries = payload
    if not isinstance(entries, list):
        raise RuleError("rule file must contain a list or an object with a 'rules' key")
    specs: list[RuleSpec] = []
    for index, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise RuleError(f"rule #{index} must be an object")
        outputs = _string_list(entry.get("outputs", []), "outputs", index)
        if not outputs:
            raise RuleError(f"rule #{index} declares no outputs")
        inputs = _string_list(entry.get("inputs", []), "inputs", index)
        name = str(entry.get("name") or f"rule{index}")
        specs.append(RuleSpec(name=name, outputs=outputs, inputs=inputs))
    return specs


def load_rules(path: str) -> list[RuleSpec]:
    with open(path, encoding="utf-8") as handle:
        return parse_rules(json.load(handle))


def load_workflow(path: str) -> Workflow:
    return Workflow.from_specs(load_rules(path))


def load_wildcards(path: str) -> WildcardMap:
    with open(path, encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError("wildcards file must contain a JSON object")
    return WildcardMap({str(name): str(value) for name, value in payload.items()})


def write_json(obj: object, path: str) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=2, sort_keys=True)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
