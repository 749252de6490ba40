"""Typed configuration schema and loader for the docmerge package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ExtractionSettings(BaseModel):
    """Options forwarded to the extractor."""

    strip_field_instructions: bool

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Destination of the merged text."""

    path: str
    encoding: str

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Verbosity of the package logger."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    extraction: ExtractionSettings
    output: OutputSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------

ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "DOCMERGE_STRIP_FIELD_INSTRUCTIONS": ("extraction", "strip_field_instructions"),
    "DOCMERGE_OUTPUT": ("output", "path"),
    "DOCMERGE_LOG_LEVEL": ("logging", "level"),
}


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for var, (section, key) in ENV_OVERRIDES.items():
        if var in environ:
            value = environ[var]
            if key == "level":
                value = value.upper()
            overrides.setdefault(section, {})[key] = value
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``DOCMERGE_*`` environment variables.  Boolean variables accept the usual
    spellings (``1``/``0``, ``true``/``false``, ``yes``/``no``).
    """

    with (
        importlib_resources.files("docmerge.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: configuration must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "ExtractionSettings",
    "OutputSettings",
    "LoggingSettings",
    "ENV_OVERRIDES",
    "deep_merge_dicts",
    "load_config",
]
