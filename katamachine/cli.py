"""Command line entry point: generate exercise days and run their tests."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence

from katamachine.config import DEFAULT_CONFIG_PATH, ConfigError, load
from katamachine.days import current_day, day_dir_path
from katamachine.generate import generate
from katamachine.gotest import prepare_args
from katamachine.templates import TemplateError


class _FlagError(Exception):
    pass


def _parse_flags(
    args: Sequence[str], flags: dict[str, Callable[[str], object]]
) -> tuple[dict[str, object], list[str]]:
    """Parse leading ``-name value`` or ``-name=value`` flags; return them and the rest."""
    values: dict[str, object] = {}
    rest = list(args)
    while rest and len(rest[0]) > 1 and rest[0].startswith("-"):
        arg = rest.pop(0)
        if arg == "--":
            break
        name, has_value, value = arg.lstrip("-").partition("=")
        if name not in flags:
            raise _FlagError(f"flag provided but not defined: -{name}")
        if not has_value:
            if not rest:
                raise _FlagError(f"flag needs an argument: -{name}")
            value = rest.pop(0)
        try:
            values[name] = flags[name](value)
        except ValueError:
            raise _FlagError(f'invalid value "{value}" for flag -{name}') from None
    return values, rest


def _run_generate(args: Sequence[str]) -> int:
    values, names = _parse_flags(args, {"configPath": str})
    try:
        config = load(values.get("configPath", DEFAULT_CONFIG_PATH))
    except ConfigError as exc:
        print(f"Error on config loading: {exc}", file=sys.stderr)
        return 1
    try:
        generate(names or config.dsa)
    except TemplateError as exc:
        print(f"Error on generate: {exc}", file=sys.stderr)
        return 1
    return 0


def _run_test(args: Sequence[str]) -> int:
    values, rest = _parse_flags(args, {"day": lambda text: int(text, 0)})
    day = values.get("day", 0) or current_day()
    command = ["go", "test", *prepare_args(rest, day_dir_path(day))]
    try:
        returncode = subprocess.run(command, check=False).returncode
    except OSError as exc:
        print(f"Error on test: {exc}", file=sys.stderr)
        return 1
    if returncode != 0:
        print(f"Error on test: exit status {returncode}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("generate subcommand is required", file=sys.stderr)
        return 1

    handlers = {"generate": _run_generate, "test": _run_test}
    command = args[0]
    if command not in handlers:
        print(f"Unknown command {command}.\nAvailable commands: generate", file=sys.stderr)
        return 1
    try:
        return handlers[command](args[1:])
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())