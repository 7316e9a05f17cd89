"""Application configuration loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or decoded."""


def _convert(key: str, kind: str, raw: Any) -> Any:
    if kind == "int":
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        raise ConfigError(f"field {key!r} expects an integer, got {raw!r}")
    if kind == "bool":
        if isinstance(raw, bool):
            return raw
        raise ConfigError(f"field {key!r} expects a boolean, got {raw!r}")
    if kind == "list[str]":
        if isinstance(raw, list):
            return [_convert(key, "str", item) for item in raw]
        raise ConfigError(f"field {key!r} expects a list, got {type(raw).__name__}")
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (str, int, float)):
        return str(raw)
    raise ConfigError(f"field {key!r} expects a scalar, got {type(raw).__name__}")


@dataclass
class Config:
    """Settings of the API, its database and its users."""

    conf_path: str = ""
    userdb: str = ""
    passdb: str = ""
    ipdb: str = ""
    portdb: str = ""
    namedb: str = ""
    extradb: str = ""
    portapi: str = ""
    loglevel: int = 0
    usersapi: list[str] = field(default_factory=list)
    tokensapi: list[str] = field(default_factory=list)
    specimen: bool = False
    nameapi: str = ""
    country: str = ""

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load a configuration from a YAML file; unknown keys are ignored."""
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot load configuration file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"configuration file {path} must hold a mapping")

        kinds = {f.name: str(f.type) for f in fields(cls) if f.name != "conf_path"}
        values = {
            key: _convert(key, kinds[key], raw)
            for key, raw in data.items()
            if key in kinds and raw is not None
        }
        return cls(conf_path=str(path), **values)


_app_config = Config()


def read_config(path: str | Path) -> Config:
    """Load the configuration file and make it the application's configuration."""
    global _app_config
    _app_config = Config.from_file(path)
    return _app_config


def app_config() -> Config:
    """Return the application's current configuration."""
    return _app_config