"""Generation of a new day directory from exercise templates."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from katamachine.days import DAYS_PATH, day_dir_path, next_day
from katamachine.templates import TEMPLATES_PATH, copy_template


def generate(
    names: Iterable[str],
    days_path: str | PathLike[str] = DAYS_PATH,
    templates_path: str | PathLike[str] = TEMPLATES_PATH,
) -> Path:
    """Copy the named templates into the next day directory and return it."""
    target = day_dir_path(next_day(days_path), days_path)
    for name in names:
        copy_template(name, target, templates_path)
    return target