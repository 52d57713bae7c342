"""Placeholder scanning for wildcard templates."""
from __future__ import annotations

import re
from collections.abc import Iterator

# Repetition counts such as ``{2,4}`` are part of a constraint, not a new
# placeholder, so braces inside a constraint only accept that shape.
_PLACEHOLDER_RE = re.compile(
    r"""
    \{
        \s*(?P<name>\w+)\s*
        (?:
            ,\s*(?P<constraint>(?:[^{}]|\{\d+(?:,\d*)?\})*)
        )?
    \}
    """,
    re.VERBOSE,
)


def _strip_constraint(text: str) -> str | None:
    """Strip surrounding whitespace, keeping a trailing space escaped with ``\\``."""
    text = text.lstrip()
    stripped = text.rstrip()
    if (len(stripped) - len(stripped.rstrip("\\"))) % 2:
        stripped = text[:len(stripped) + 1]
    return stripped or None


class Placeholder:
    __slots__ = ("name", "constraint", "start", "end")

    def __init__(self, name: str, constraint: str | None, start: int, end: int) -> None:
        self.name = name
        self.constraint = constraint
        self.start = start
        self.end = end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placeholder):
            return NotImplemented
        return (self.name, self.constraint, self.start, self.end) == (
            other.name,
            other.constraint,
            other.start,
            other.end,
        )

    def __hash__(self) -> int:
        return hash((self.name, self.constraint, self.start, self.end))

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Placeholder({self.name!r}, {self.constraint!r}, {self.start}, {self.end})"


def iter_placeholders(template: str) -> Iterator[Placeholder]:
    """Yield the placeholders of ``template`` from left to right.

    Surrounding whitespace is stripped from names and constraints. An empty
    constraint (``{name,}``) counts as no constraint.
    """
    for match in _PLACEHOLDER_RE.finditer(template):
        constraint = match.group("constraint")
        if constraint is not None:
            constraint = _strip_constraint(constraint)
        yield Placeholder(match.group("name"), constraint, match.start(), match.end())


def iter_segments(template: str) -> Iterator[str | Placeholder]:
    """Yield literal chunks and placeholders in template order.

    Literal chunks are never empty; adjacent placeholders produce no chunk
    between them.
    """
    last = 0
    for placeholder in iter_placeholders(template):
        if placeholder.start > last:
            yield template[last:placeholder.start]
        yield placeholder
        last = placeholder.end
    if last < len(template):
        yield template[last:]


def placeholder_names(template: str) -> list[str]:
    """Distinct placeholder names in order of first use."""
    names: list[str] = []
    for placeholder in iter_placeholders(template):
        if placeholder.name not in names:
            names.append(placeholder.name)
    return names
