"""wildforge named-wildcard templates.

Match paths against templates such as ``build/{stem}.o`` and render the
extracted wildcards into other templates such as ``src/{stem}.c``.
"""

from collections.abc import Sequence

from .engine.errors import (
    CompileError,
    InvalidConstraintError,
    MissingNameError,
    RuleError,
    WildcardError,
)
from .engine.mapping import WildcardMap
from .engine.models import RuleSpec, Task
from .engine.rules import WildcardRule, Workflow
from .engine.wildcard import WildcardPattern, compile_pattern

__version__ = "1.0.0"


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`wildforge.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "__version__",
    "main",
    "compile_pattern",
    "WildcardPattern",
    "WildcardMap",
    "WildcardRule",
    "Workflow",
    "RuleSpec",
    "Task",
    "WildcardError",
    "InvalidConstraintError",
    "MissingNameError",
    "CompileError",
    "RuleError",
]
