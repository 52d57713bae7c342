"""Data models shared across the wildforge engine."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .mapping import WildcardMap

Action = Callable[[tuple[str, ...], tuple[str, ...], WildcardMap], object]


@dataclass(frozen=True)
class RuleSpec:
    """Declarative form of a rule, as read from a rule file.

    outputs: templates matched against a requested path, tried in order.
    inputs: templates rendered with the wildcards of the matching output.
    """
    name: str
    outputs: tuple[str, ...]
    inputs: tuple[str, ...] = ()

    def to_json(self) -> dict[str, object]:
        return {
            "name": self.name,
            "inputs": list(self.inputs),
            "outputs": list(self.outputs),
        }


@dataclass(frozen=True)
class Task:
    """A rule made concrete for one requested path."""
    rule: str
    target: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    wildcards: WildcardMap = field(hash=False)
    action: Action | None = field(default=None, compare=False, repr=False)

    def run(self) -> object:
        if self.action is None:
            return None
        return self.action(self.inputs, self.outputs, self.wildcards)

    def to_json(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "target": self.target,
            "inputs": list(self.inputs),
            "outputs": list(self.outputs),
            "wildcards": self.wildcards.to_dict(),
        }
