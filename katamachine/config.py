"""Loading of the YAML configuration that lists the exercises to generate."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = "config.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read or parsed."""


@dataclass
class Config:
    """Settings read from the configuration file."""

    dsa: list[str] = field(default_factory=list)


def load(path: str | PathLike[str]) -> Config:
    """Read and parse the configuration file at ``path``."""
    try:
        data = yaml.safe_load(Path(path).read_bytes()) or {}
    except OSError as exc:
        raise ConfigError(f"read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"parse config: {exc}") from exc

    entries = data.get("DSA") if isinstance(data, dict) else None
    if entries is None:
        if not isinstance(data, dict):
            raise ConfigError("parse config: document is not a mapping")
        return Config()
    if not isinstance(entries, list) or any(isinstance(e, (list, dict)) for e in entries):
        raise ConfigError("parse config: DSA must be a list of names")
    return Config(dsa=["" if e is None else str(e) for e in entries])