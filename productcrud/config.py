"""Configuration read from a YAML file, overridable by environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _lower_keys(value):
    if isinstance(value, Mapping):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


@dataclass
class Config:
    """Settings by dotted key; an environment variable such as DB_HOST overrides db.host."""

    values: dict = field(default_factory=dict)
    environ: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.values = _lower_keys(self.values)

    def get(self, key: str, default=None):
        key = key.lower()
        env_value = self.environ.get(key.replace(".", "_").upper())
        if env_value:
            return env_value
        node = self.values
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node


def load_config(directory=".", environ=None) -> Config:
    """Read ``config.yaml`` (or ``config.yml``) from ``directory``."""
    base = Path(directory)
    path = next((p for p in (base / "config.yaml", base / "config.yml") if p.is_file()), None)
    if path is None:
        raise FileNotFoundError(f'config file "config" not found in {base}')
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: top level must be a mapping")
    return Config(dict(data), os.environ if environ is None else environ)