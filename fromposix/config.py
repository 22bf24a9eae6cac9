"""Configuration management for from-posix.

Schema of ``.fromposix.yaml``:
- prefix: namespace the assignments are written into (default ``$env``)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from fromposix.emitter import DEFAULT_PREFIX
from fromposix.errors import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".fromposix.yaml"


class ConverterConfig(BaseModel):
    """Converter settings."""

    prefix: str = Field(
        default=DEFAULT_PREFIX, description="Environment namespace prefix"
    )

    @field_validator("prefix")
    @classmethod
    def strip_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("prefix must not be empty")
        return value


def find_config_file(start: Path | None = None) -> Path | None:
    """Find .fromposix.yaml in ``start`` (default: cwd) or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(path: Path) -> ConverterConfig:
    """Load a config file from path."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "rb") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc.strerror}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    try:
        return ConverterConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc


def resolve_config(
    path: Path | None = None, prefix: str | None = None
) -> ConverterConfig:
    """Build the effective config.

    An explicit ``path`` wins over a discovered file; ``prefix`` overrides
    whatever the file says.
    """
    config_path = path or find_config_file()
    if config_path is not None:
        log.info("Using config %s", config_path)
        config = load_config(config_path)
    else:
        config = ConverterConfig()

    if prefix is not None:
        try:
            config = ConverterConfig(**{**config.model_dump(), "prefix": prefix})
        except ValidationError as exc:
            raise ConfigError(f"Invalid prefix: {prefix!r}") from exc

    return config
