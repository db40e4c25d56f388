"""Building the argument list for running a day's tests."""

from __future__ import annotations

import os
from collections.abc import Sequence


def _package(day_path: str, name: str) -> str:
    return "./" + os.path.normpath(os.path.join(day_path, name))


def prepare_args(args: Sequence[str], day_path: str | os.PathLike[str]) -> list[str]:
    """Turn leading test names into package paths under ``day_path``.

    With no names (no arguments, or a flag first) every package of the day
    is selected; arguments from the first flag on are passed through as is.
    """
    day = os.fspath(day_path)
    args = list(args)
    if not args or args[0].startswith("-"):
        return [_package(day, "..."), *args]

    result = []
    for position, arg in enumerate(args):
        if arg.startswith("-"):
            result.extend(args[position:])
            break
        result.append(_package(day, arg))
    return result