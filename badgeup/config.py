"""Configuration loading for badgeup (.badgeup.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .postproc.constants import BADGE_ORDER

CONFIG_FILENAME = ".badgeup.yml"
DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_README = "README.md"


@dataclass
class BadgeupConfig:
    """Represents the settings defined in .badgeup.yml."""

    root: Path
    manifest: str = DEFAULT_MANIFEST
    readme: str = DEFAULT_README
    require_repository: bool = False
    badges: List[str] = field(default_factory=lambda: list(BADGE_ORDER))

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest

    @property
    def readme_path(self) -> Path:
        return self.root / self.readme


def load_config(config_path: Path) -> BadgeupConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BadgeupConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = BadgeupConfig(root=root)
    manifest = _as_str(data.get("manifest"))
    if manifest:
        config.manifest = manifest
    readme = _as_str(data.get("readme"))
    if readme:
        config.readme = readme

    require_repository = _as_bool(data.get("require_repository"))
    if require_repository is not None:
        config.require_repository = require_repository

    if "badges" in data:
        config.badges = _parse_badges(data.get("badges"))

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    return loaded or {}


def _parse_badges(value: Any) -> List[str]:
    if value is not None and not isinstance(value, (str, list)):
        raise ConfigError(
            f"badges in {CONFIG_FILENAME} must be a badge name or a list of badge names"
        )
    badges = _as_str_list(value)
    unknown = [badge for badge in badges if badge not in BADGE_ORDER]
    if unknown:
        raise ConfigError(
            f"Unknown badge(s) in {CONFIG_FILENAME}: {', '.join(unknown)} "
            f"(expected any of {', '.join(BADGE_ORDER)})"
        )
    return badges


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["BadgeupConfig", "CONFIG_FILENAME", "load_config"]
