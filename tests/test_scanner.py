"""Placeholder scanner tests."""

import pytest

from wildforge.engine.scanner import Placeholder, iter_placeholders, iter_segments, placeholder_names


def test_iter_placeholders_offsets() -> None:
    template = "path/{name}/{ext,\\w+}.txt"
    found = list(iter_placeholders(template))
    assert [p.name for p in found] == ["name", "ext"]
    assert [p.constraint for p in found] == [None, "\\w+"]
    assert [template[p.start:p.end] for p in found] == ["{name}", "{ext,\\w+}"]


@pytest.mark.parametrize(
    "template,name,constraint",
    [
        ("{ name }", "name", None),
        ("{name , \\d+ }", "name", "\\d+"),
        ("{name,}", "name", None),
        ("{year,\\d{4}}", "year", "\\d{4}"),
        ("{code,[a-z]{2,3}}", "code", "[a-z]{2,3}"),
        ("{n,\\d{2,}}", "n", "\\d{2,}"),
        ("{0}", "0", None),
        ("{a,x\\ }", "a", "x\\ "),
        ("{a,x\\  }", "a", "x\\ "),
        ("{a,x\\\\ }", "a", "x\\\\"),
    ],
)
def test_placeholder_grammar(template: str, name: str, constraint: str | None) -> None:
    (placeholder,) = iter_placeholders(template)
    assert placeholder == Placeholder(name, constraint, 0, len(template))


@pytest.mark.parametrize("template", ["{}", "{-}", "{a b}", "{a,b{c", "no braces"])
def test_non_placeholders_are_literal(template: str) -> None:
    assert list(iter_placeholders(template)) == []
    assert list(iter_segments(template)) == [template]


def test_iter_segments_interleaves_literals() -> None:
    segments = list(iter_segments("{a}{b}/x/{a}"))
    assert [s if isinstance(s, str) else s.name for s in segments] == ["a", "b", "/x/", "a"]


def test_placeholder_names_first_use_order() -> None:
    assert placeholder_names("{b}/{a}/{b}_{c,\\d+}") == ["b", "a", "c"]
    assert placeholder_names("plain") == []
