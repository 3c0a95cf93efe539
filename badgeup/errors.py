"""Error taxonomy for badgeup runs.

Every failure is terminal: the CLI reports the message and exits non-zero.
Messages carry the file path and the operation that failed so the final
diagnostic does not need the traceback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .models import HeadingSpan


class BadgeupError(RuntimeError):
    """Base class for every error surfaced by badgeup."""


class ConfigError(BadgeupError):
    """Raised when the configuration file cannot be parsed."""


class MissingManifest(BadgeupError):
    """Raised when the package manifest is absent from the project directory."""


class MissingReadme(BadgeupError):
    """Raised when the README is absent from the project directory."""


class ReadError(BadgeupError):
    """Raised when an expected file exists but cannot be read."""


class WriteError(BadgeupError):
    """Raised when the README cannot be written back."""


class ManifestParseError(BadgeupError):
    """Raised when the manifest is not valid TOML."""


class MissingField(BadgeupError):
    """Raised when a required manifest field is absent."""


class TypeMismatch(BadgeupError):
    """Raised when a manifest field is present but not a string."""


class UnsupportedProvider(BadgeupError):
    """Raised when a recognised hosting provider has no badge support yet."""


class InvalidUrl(BadgeupError):
    """Raised when a repository URL does not match any known provider shape."""


class MarkupParseError(BadgeupError):
    """Raised when the README cannot be parsed into block tokens."""


class MissingHeading(BadgeupError):
    """Raised when the README has no top-level heading."""


class PositionUnavailable(BadgeupError):
    """Raised when the parser reports a heading without source position."""


class StructureError(BadgeupError):
    """Raised when the first heading of the README is not a depth-1 heading."""

    def __init__(self, message: str, *, depth: int, span: "HeadingSpan") -> None:
        super().__init__(message)
        self.depth = depth
        self.span = span


__all__ = [
    "BadgeupError",
    "ConfigError",
    "InvalidUrl",
    "ManifestParseError",
    "MarkupParseError",
    "MissingField",
    "MissingHeading",
    "MissingManifest",
    "MissingReadme",
    "PositionUnavailable",
    "ReadError",
    "StructureError",
    "TypeMismatch",
    "UnsupportedProvider",
    "WriteError",
]
