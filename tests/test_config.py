"""Tests for badgeup.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from badgeup.config import BadgeupConfig, load_config
from badgeup.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, BadgeupConfig)
    assert config.root == tmp_path.resolve()
    assert config.manifest_path == tmp_path.resolve() / "Cargo.toml"
    assert config.readme_path == tmp_path.resolve() / "README.md"
    assert config.require_repository is False
    assert config.badges == ["version", "downloads", "docs", "license", "dependencies"]


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".badgeup.yml"
    config_file.write_text(
        """
manifest: "crates/core/Cargo.toml"
readme: "docs/README.md"
require_repository: true
badges:
  - version
  - dependencies
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.manifest_path == tmp_path.resolve() / "crates" / "core" / "Cargo.toml"
    assert config.readme_path == tmp_path.resolve() / "docs" / "README.md"
    assert config.require_repository is True
    assert config.badges == ["version", "dependencies"]


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".badgeup.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.require_repository is False
    assert len(config.badges) == 5


def test_load_config_rejects_unknown_badges(tmp_path: Path) -> None:
    (tmp_path / ".badgeup.yml").write_text("badges: [version, coverage]\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="coverage"):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".badgeup.yml").write_text("- version\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_wraps_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".badgeup.yml").write_text("badges: [version\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


@pytest.mark.parametrize("value", ["{version: 1}", "3", "true"])
def test_load_config_rejects_non_list_badges(tmp_path: Path, value: str) -> None:
    (tmp_path / ".badgeup.yml").write_text(f"badges: {value}\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="list of badge names"):
        load_config(tmp_path)


def test_load_config_accepts_single_badge_string(tmp_path: Path) -> None:
    (tmp_path / ".badgeup.yml").write_text("badges: license\n", encoding="utf-8")

    assert load_config(tmp_path).badges == ["license"]
