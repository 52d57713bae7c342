"""Command line interface for the wildforge template tool."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import __version__, io
from .engine.errors import WildcardError
from .engine.mapping import WildcardMap
from .engine.wildcard import compile_pattern

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _parse_assignment(value: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` wildcard assignment."""
    name, sep, text = value.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"invalid wildcard assignment: {value}")
    return name, text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wildforge", description="Named wildcard matching and rendering")
    parser.add_argument("-V", "--version", action="version", version=f"wildforge {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (repeatable)")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_path_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("paths", nargs="*", help="paths to test")
        cmd.add_argument("--paths", dest="paths_file", help="file with one path per line (or JSON lines)")
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")
        cmd.add_argument(
            "--allow-missing",
            action="store_true",
            default=False,
            help="exit with status 0 even when some paths do not match",
        )

    match = sub.add_parser("match", help="extract wildcards from paths")
    match.add_argument("template")
    add_path_options(match)

    render = sub.add_parser("render", help="render a template")
    render.add_argument("template")
    render.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=_parse_assignment,
        default=[],
        metavar="NAME=VALUE",
    )
    render.add_argument("--wildcards", help="JSON object of wildcard values")
    render.add_argument("--format", choices=["text", "json"], default="text")
    render.add_argument("--out", default="-")

    resolve = sub.add_parser("resolve", help="materialize paths through a rule file")
    resolve.add_argument("--rules", required=True)
    resolve.add_argument("--all", action="store_true", default=False, help="report every matching rule")
    add_path_options(resolve)

    names = sub.add_parser("names", help="list the wildcard names of a template")
    names.add_argument("template")
    names.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def _collect_paths(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[str]:
    paths = list(args.paths)
    if args.paths_file:
        paths.extend(io.read_paths(args.paths_file))
    if not paths:
        parser.error(f"{args.command}: no paths given")
    return paths


def _format_wildcards(wildcards: WildcardMap) -> str:
    return " ".join(f"{name}={value}" for name, value in sorted(wildcards.items()))


def _command_match(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    pattern = compile_pattern(args.template)
    paths = _collect_paths(parser, args)
    results = [(path, pattern.extract(path)) for path in paths]
    if args.format == "json":
        payload = {
            "template": pattern.template,
            "matches": [
                {"path": path, "wildcards": wildcards.to_dict() if wildcards is not None else None}
                for path, wildcards in results
            ],
        }
        io.write_json(payload, args.out)
    else:
        lines = [
            f"{path}\t{_format_wildcards(wildcards) if wildcards is not None else '-'}"
            for path, wildcards in results
        ]
        io.write_text("\n".join(lines) + "\n", args.out)
    missing = any(wildcards is None for _, wildcards in results)
    return 1 if missing and not args.allow_missing else 0


def _command_render(args: argparse.Namespace) -> int:
    values: dict[str, str] = {}
    if args.wildcards:
        values.update(io.load_wildcards(args.wildcards))
    values.update(args.assignments)
    result = WildcardMap(values).render(args.template)
    if args.format == "json":
        io.write_json({"template": args.template, "result": result}, args.out)
    else:
        io.write_text(result + "\n", args.out)
    return 0


def _command_resolve(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    workflow = io.load_workflow(args.rules)
    paths = _collect_paths(parser, args)
    tasks = []
    unresolved: list[str] = []
    for path in paths:
        found = list(workflow.iter_tasks(path)) if args.all else [workflow.materialize(path)]
        found = [task for task in found if task is not None]
        if not found:
            unresolved.append(path)
        tasks.extend(found)
    if args.format == "json":
        io.write_json({"tasks": [task.to_json() for task in tasks], "unresolved": unresolved}, args.out)
    else:
        lines: list[str] = []
        for task in tasks:
            lines.append(f"{task.target}: {task.rule}")
            lines.extend(f"  input  {path}" for path in task.inputs)
            lines.extend(f"  output {path}" for path in task.outputs)
        lines.extend(f"{path}: -" for path in unresolved)
        io.write_text("\n".join(lines) + "\n", args.out)
    return 1 if unresolved and not args.allow_missing else 0


def _command_names(args: argparse.Namespace) -> int:
    pattern = compile_pattern(args.template)
    if args.format == "json":
        io.write_json({"template": pattern.template, "names": pattern.names}, "-")
    else:
        io.write_text("\n".join(pattern.names) + "\n", "-")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    command = args.command
    try:
        if command == "match":
            return _command_match(parser, args)
        if command == "render":
            return _command_render(args)
        if command == "resolve":
            return _command_resolve(parser, args)
        if command == "names":
            return _command_names(args)
    except (WildcardError, OSError, ValueError) as exc:
        sys.stderr.write(f"wildforge: error: {exc}\n")
        return 1
    parser.error(f"unknown command {command}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
