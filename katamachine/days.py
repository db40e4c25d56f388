"""Locating the numbered day directories that hold generated exercises."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

DAYS_PATH = Path("src")

_DAY_NUMBER = re.compile(r"[+-]?\d+")


def current_day(days_path: str | PathLike[str] = DAYS_PATH) -> int:
    """Return the highest existing day number, or 0 when there is none."""
    days = [
        int(entry.name[3:])
        for entry in Path(days_path).glob("day*")
        if _DAY_NUMBER.fullmatch(entry.name[3:])
    ]
    return max(days, default=0)


def next_day(days_path: str | PathLike[str] = DAYS_PATH) -> int:
    """Return the number of the day that follows the current one."""
    return current_day(days_path) + 1


def day_dir_path(day: int, days_path: str | PathLike[str] = DAYS_PATH) -> Path:
    """Return the directory path of the given day."""
    return Path(days_path) / f"day{day}"