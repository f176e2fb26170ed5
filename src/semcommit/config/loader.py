"""Load and merge configuration from .semcommit.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semcommit.config.schema import (
    OUTPUT_FORMATS,
    ClassifyConfig,
    OutputConfig,
    SemcommitConfig,
)

CONFIG_FILENAME = ".semcommit.toml"

_TRUTHY = ("1", "true", "yes")
_FALSY = ("0", "false", "no")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: SemcommitConfig) -> None:
    """Apply SEMCOMMIT_* environment variable overrides."""
    if val := os.environ.get("SEMCOMMIT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("SEMCOMMIT_STRICT_DOCS"):
        if val.lower() in _TRUTHY:
            cfg.classify.strict_docs = True
        elif val.lower() in _FALSY:
            cfg.classify.strict_docs = False
    if val := os.environ.get("SEMCOMMIT_RULES_FILE"):
        cfg.classify.rules_file = val


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> SemcommitConfig:
    """Load, validate, and return a SemcommitConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = SemcommitConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = SemcommitConfig(
            version=raw.get("version", "1.0"),
            classify=_build_section(raw, ClassifyConfig, "classify"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format in {config_path}: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
