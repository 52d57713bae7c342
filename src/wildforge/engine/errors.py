"""Exceptions raised by the wildforge engine."""
from __future__ import annotations


class WildcardError(Exception):
    """Base exception class."""


class InvalidConstraintError(WildcardError):
    """A placeholder constraint was declared more than once in a template."""

    def __init__(self, name: str, template: str | None = None) -> None:
        self.name = name
        self.template = template
        message = f"constraint for wildcard {name!r} may only be given at its first use"
        if template is not None:
            message += f" in {template!r}"
        super().__init__(message)


class MissingNameError(WildcardError):
    """A rendered template references a name that has no value."""

    def __init__(self, name: str, template: str | None = None) -> None:
        self.name = name
        self.template = template
        message = f"no value for wildcard {name!r}"
        if template is not None:
            message += f" in {template!r}"
        super().__init__(message)


class CompileError(WildcardError):
    """The regular expression built from a template could not be compiled.

    ``kind`` is ``"syntax"`` for an invalid expression (usually a broken
    constraint) and ``"size"`` when the compiled expression is too large.
    """

    def __init__(self, template: str, reason: str, kind: str = "syntax") -> None:
        self.template = template
        self.reason = reason
        self.kind = kind
        super().__init__(f"cannot compile {template!r}: {reason}")


class RuleError(WildcardError, ValueError):
    """Invalid rule definition."""
