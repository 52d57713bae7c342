"""Rules that turn a requested path into a concrete task."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence

from .errors import RuleError
from .mapping import WildcardMap
from .models import Action, RuleSpec, Task
from .wildcard import WildcardPattern, compile_pattern

logger = logging.getLogger(__name__)


def _as_templates(value: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


class WildcardRule:
    """Output templates to match, input templates to derive from them.

    Output templates are compiled up front, so a broken template fails when
    the rule is declared rather than when a path is first requested.
    """

    def __init__(
        self,
        inputs: str | Sequence[str] = (),
        outputs: str | Sequence[str] = (),
        action: Action | None = None,
        name: str | None = None,
    ) -> None:
        output_templates = _as_templates(outputs)
        if not output_templates:
            raise RuleError(f"rule {name or '<anonymous>'} declares no outputs")
        if name is None:
            name = getattr(action, "__name__", None) or output_templates[0]
        self.name = name
        self.inputs = _as_templates(inputs)
        self.outputs: tuple[WildcardPattern, ...] = tuple(
            compile_pattern(template) for template in output_templates
        )
        self.action = action

    @classmethod
    def from_spec(cls, spec: RuleSpec, action: Action | None = None) -> WildcardRule:
        return cls(spec.inputs, spec.outputs, action=action, name=spec.name)

    @property
    def spec(self) -> RuleSpec:
        return RuleSpec(
            name=self.name,
            outputs=tuple(pattern.template for pattern in self.outputs),
            inputs=self.inputs,
        )

    def match(self, path: str) -> tuple[WildcardPattern, WildcardMap] | None:
        """Return the first output pattern matching ``path`` and its wildcards."""
        for pattern in self.outputs:
            wildcards = pattern.extract(path)
            if wildcards is not None:
                return pattern, wildcards
        return None

    def materialize(self, path: str) -> Task | None:
        """Build the task producing ``path``, or ``None`` if no output matches.

        Every input and output template is rendered with the wildcards of the
        first matching output. A template using a wildcard that output does not
        define raises :class:`MissingNameError`.
        """
        found = self.match(path)
        if found is None:
            return None
        pattern, wildcards = found
        logger.debug("rule %s matched %r with %r", self.name, path, pattern.template)
        return Task(
            rule=self.name,
            target=path,
            inputs=tuple(wildcards.render_all(self.inputs)),
            outputs=tuple(pattern.render(wildcards) for pattern in self.outputs),
            wildcards=wildcards,
            action=self.action,
        )

    def __repr__(self) -> str:
        outputs = [pattern.template for pattern in self.outputs]
        return f"WildcardRule(name={self.name!r}, inputs={list(self.inputs)!r}, outputs={outputs!r})"


class Workflow:
    """Ordered collection of rules; earlier rules take precedence."""

    def __init__(self, rules: Iterable[WildcardRule] = ()) -> None:
        self._rules: list[WildcardRule] = list(rules)

    @classmethod
    def from_specs(cls, specs: Iterable[RuleSpec]) -> Workflow:
        return cls(WildcardRule.from_spec(spec) for spec in specs)

    @property
    def rules(self) -> list[WildcardRule]:
        return list(self._rules)

    def add_rule(self, rule: WildcardRule) -> WildcardRule:
        self._rules.append(rule)
        return rule

    def rule(
        self,
        outputs: str | Sequence[str],
        inputs: str | Sequence[str] = (),
        name: str | None = None,
    ) -> Callable[[Action], Action]:
        """Register the decorated function as the action of a new rule."""

        def decorator(fn: Action) -> Action:
            self.add_rule(WildcardRule(inputs, outputs, action=fn, name=name))
            return fn

        return decorator

    def iter_tasks(self, path: str) -> Iterator[Task]:
        """Yield a task from every rule able to produce ``path``, in rule order."""
        for rule in self._rules:
            task = rule.materialize(path)
            if task is not None:
                yield task

    def materialize(self, path: str) -> Task | None:
        task = next(self.iter_tasks(path), None)
        if task is None:
            logger.debug("no rule produces %r", path)
        return task

    def __len__(self) -> int:
        return len(self._rules)
