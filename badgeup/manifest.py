"""Manifest reader for Cargo-style package manifests."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import InvalidUrl, ManifestParseError, MissingField, ReadError, TypeMismatch
from .hosting import classify_repository
from .logging import get_logger
from .models import HostingProvider, Manifest


class ManifestReader:
    """Extracts the package name and repository URL from a manifest."""

    def __init__(self, *, require_repository: bool = False) -> None:
        self.require_repository = require_repository
        self.logger = get_logger("manifest")

    def read(self, path: Path) -> Manifest:
        """Parse ``path`` and return its ``[package]`` name and repository."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Failed to read manifest at {path}: {exc}") from exc

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ManifestParseError(f"Failed to parse manifest at {path}: {exc}") from exc

        package = data.get("package")
        if package is None:
            raise MissingField(f"Failed to get package from manifest at {path}")
        if not isinstance(package, dict):
            raise TypeMismatch(f"Package in the manifest at {path} was expected to be a table")

        name = self._string_field(package, "name", path)
        if name is None or not name:
            raise MissingField(f"Failed to get name from package at {path}")

        repository = self._string_field(package, "repository", path)
        if repository is None and self.require_repository:
            raise MissingField(f"Failed to get repository from package at {path}")

        self.logger.debug("Manifest %s declares package %s", path, name)
        return Manifest(path=path, name=name, repository=repository)

    def hosting_provider(self, manifest: Manifest) -> Optional[HostingProvider]:
        """Classify the manifest's repository URL, if it declares one."""
        if manifest.repository is None:
            self.logger.debug("No repository in %s; dependency badge omitted", manifest.path)
            return None
        try:
            return classify_repository(manifest.repository)
        except InvalidUrl as exc:
            raise InvalidUrl(f"{exc} (repository field of {manifest.path})") from exc

    @staticmethod
    def _string_field(package: Dict[str, Any], key: str, path: Path) -> Optional[str]:
        value = package.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeMismatch(
                f"{key.capitalize()} field in the package at {path} was expected to be a string"
            )
        return value


__all__ = ["ManifestReader"]
