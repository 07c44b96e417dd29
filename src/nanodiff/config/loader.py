"""Load and merge configuration from .nanodiff.toml and env vars."""

from __future__ import annotations

import codecs
import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from nanodiff.config.schema import (
    OUTPUT_FORMATS,
    DiffConfig,
    ExitConfig,
    NanodiffConfig,
    OutputConfig,
)
from nanodiff.diff.sources import SOURCE_MODES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".nanodiff.toml"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")

_BOOL_FIELDS = (
    ("diff", "full_context"),
    ("diff", "missing_as_empty"),
    ("output", "show_context"),
    ("output", "show_header"),
    ("output", "show_summary"),
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(search_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = search_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(raw) - valid_fields)
    if unknown:
        logger.warning("Ignoring unknown keys in [%s]: %s", section, ", ".join(unknown))
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _validate(cfg: NanodiffConfig) -> None:
    if cfg.diff.mode not in SOURCE_MODES:
        raise ConfigError(f"Invalid diff.mode: {cfg.diff.mode!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if type(cfg.exit.on_diff) is not int or not 1 <= cfg.exit.on_diff <= 255:
        raise ConfigError(f"Invalid exit.on_diff: {cfg.exit.on_diff!r} (expected 1-255)")
    if not isinstance(cfg.diff.encoding, str) or not _is_known_encoding(cfg.diff.encoding):
        raise ConfigError(f"Unknown diff.encoding: {cfg.diff.encoding!r}")
    for section, name in _BOOL_FIELDS:
        value = getattr(getattr(cfg, section), name)
        if not isinstance(value, bool):
            raise ConfigError(f"Invalid {section}.{name}: {value!r} (expected true or false)")


def _merge_env_overrides(cfg: NanodiffConfig) -> None:
    """Apply NANODIFF_* environment variable overrides. Invalid values are ignored."""
    if val := os.environ.get("NANODIFF_MODE"):
        if val in SOURCE_MODES:
            cfg.diff.mode = val  # type: ignore[assignment]
    if val := os.environ.get("NANODIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("NANODIFF_FULL_CONTEXT"):
        if val.lower() in _TRUTHY:
            cfg.diff.full_context = True
        elif val.lower() in _FALSY:
            cfg.diff.full_context = False
    if val := os.environ.get("NANODIFF_ENCODING"):
        if _is_known_encoding(val):
            cfg.diff.encoding = val
    if val := os.environ.get("NANODIFF_EXIT_ON_DIFF"):
        try:
            code = int(val)
        except ValueError:
            code = 0
        if 1 <= code <= 255:
            cfg.exit.on_diff = code


def load_config(
    search_dir: Path,
    config_override: Optional[str] = None,
) -> NanodiffConfig:
    """Load, validate, and return a NanodiffConfig."""
    config_path = find_config_file(search_dir, config_override)

    if config_path is None:
        cfg = NanodiffConfig()
    else:
        logger.info("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = NanodiffConfig(
            version=raw.get("version", "1.0"),
            diff=_build_section(raw, DiffConfig, "diff"),
            output=_build_section(raw, OutputConfig, "output"),
            exit=_build_section(raw, ExitConfig, "exit"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
