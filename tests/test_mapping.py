"""Rendering tests for wildcard maps."""

import pytest

from wildforge.engine.errors import MissingNameError
from wildforge.engine.mapping import WildcardMap


def test_render_substitutes_values() -> None:
    wildcards = WildcardMap({"stem": "main", "ext": "c"})
    assert wildcards.render("src/{stem}.{ext}") == "src/main.c"
    assert wildcards.render("no placeholders") == "no placeholders"


def test_render_ignores_constraints_and_keeps_literals() -> None:
    wildcards = WildcardMap(n="7")
    assert wildcards.render("a.b/{n,\\d+}*[x]") == "a.b/7*[x]"
    assert wildcards.render("{}/{n}") == "{}/7"


def test_missing_name_raises() -> None:
    with pytest.raises(MissingNameError) as excinfo:
        WildcardMap({"a": "1"}).render("{a}-{b}")
    assert excinfo.value.name == "b"
    assert excinfo.value.template == "{a}-{b}"


def test_render_all_is_all_or_nothing() -> None:
    wildcards = WildcardMap({"a": "1"})
    assert wildcards.render_all(["{a}.in", "x/{a}"]) == ["1.in", "x/1"]
    with pytest.raises(MissingNameError):
        wildcards.render_all(["{a}.in", "{b}.in"])


def test_map_is_read_only_mapping() -> None:
    wildcards = WildcardMap({"a": "1", "b": "2"})
    assert len(wildcards) == 2
    assert dict(wildcards) == {"a": "1", "b": "2"}
    assert wildcards == WildcardMap({"b": "2", "a": "1"})
    assert wildcards.to_dict() == {"a": "1", "b": "2"}
    with pytest.raises(TypeError):
        wildcards["a"] = "3"  # type: ignore[index]


def test_to_dict_returns_a_copy() -> None:
    wildcards = WildcardMap({"a": "1"})
    copy = wildcards.to_dict()
    copy["a"] = "changed"
    assert wildcards["a"] == "1"
