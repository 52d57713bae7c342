"""Wildcard patterns: templates compiled into anchored regular expressions."""
from __future__ import annotations

import logging
import re
from functools import lru_cache

from .errors import CompileError, InvalidConstraintError
from .mapping import WildcardMap
from .scanner import Placeholder, iter_segments

logger = logging.getLogger(__name__)

DEFAULT_CONSTRAINT = ".+"

# Prefix of the generated group names. Placeholder names are not used as group
# names directly because ``\w+`` allows names like ``0`` that ``re`` rejects.
_GROUP_PREFIX = "_wf"


def _compile(template: str, source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise CompileError(template, str(exc), kind="syntax") from exc
    except (OverflowError, RecursionError) as exc:
        raise CompileError(template, str(exc) or type(exc).__name__, kind="size") from exc


def _translate(template: str) -> tuple[str, dict[str, list[str]]]:
    """Return the expression for ``template`` and the group names per wildcard.

    The first group of every wildcard is its primary capture; any further
    groups belong to repeated occurrences and reuse the first constraint.
    """
    parts = [r"\A"]
    constraints: dict[str, str] = {}
    groups: dict[str, list[str]] = {}
    count = 0
    for segment in iter_segments(template):
        if not isinstance(segment, Placeholder):
            parts.append(re.escape(segment))
            continue
        name = segment.name
        if name in constraints:
            if segment.constraint is not None:
                raise InvalidConstraintError(name, template)
        else:
            constraint = segment.constraint
            if constraint is None:
                constraint = DEFAULT_CONSTRAINT
            else:
                # A constraint has to be a complete expression on its own, so
                # it cannot close its group and escape the anchors.
                _compile(template, constraint)
            constraints[name] = constraint
            groups[name] = []
        group = f"{_GROUP_PREFIX}{count}"
        count += 1
        groups[name].append(group)
        parts.append(f"(?P<{group}>{constraints[name]})")
    parts.append(r"\Z")
    return "".join(parts), groups


class WildcardPattern:
    """A template compiled for matching.

    Matching is anchored to the whole candidate. Every occurrence of a
    repeated wildcard has to capture the same text.

    >>> pattern = WildcardPattern("build/{stem}.o")
    >>> pattern.extract("build/main.o")
    WildcardMap({'stem': 'main'})
    >>> pattern.extract("src/main.c") is None
    True
    """

    __slots__ = ("_template", "_regex", "_primary", "_repeats")

    def __init__(self, template: str) -> None:
        source, groups = _translate(template)
        regex = _compile(template, source)
        self._template = template
        self._regex = regex
        self._primary = {name: regex.groupindex[names[0]] for name, names in groups.items()}
        self._repeats = {
            name: [regex.groupindex[group] for group in names[1:]] for name, names in groups.items()
        }
        logger.debug("compiled %r as %r", template, source)

    @property
    def template(self) -> str:
        return self._template

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    @property
    def names(self) -> list[str]:
        """Distinct wildcard names in order of first use."""
        return list(self._primary)

    @property
    def repeats(self) -> dict[str, list[int]]:
        """Group indices of the repeated occurrences of each wildcard."""
        return {name: list(indices) for name, indices in self._repeats.items()}

    def extract(self, candidate: str) -> WildcardMap | None:
        """Match ``candidate`` and return its wildcard values, or ``None``."""
        match = self._regex.fullmatch(candidate)
        if match is None:
            return None
        values: dict[str, str] = {}
        for name, index in self._primary.items():
            value = match.group(index)
            if value is None:
                return None
            if any(match.group(repeat) != value for repeat in self._repeats[name]):
                return None
            values[name] = value
        return WildcardMap(values)

    def matches(self, candidate: str) -> bool:
        return self.extract(candidate) is not None

    def render(self, wildcards: WildcardMap) -> str:
        return wildcards.render(self._template)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WildcardPattern):
            return NotImplemented
        return self._template == other._template

    def __hash__(self) -> int:
        return hash(self._template)

    def __repr__(self) -> str:
        return f"WildcardPattern({self._template!r})"


@lru_cache(maxsize=1024)
def compile_pattern(template: str) -> WildcardPattern:
    """Compile ``template``, reusing earlier compilations of the same text."""
    return WildcardPattern(template)
