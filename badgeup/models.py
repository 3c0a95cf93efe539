"""Core data models shared across badgeup components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Tuple, Union

from .errors import UnsupportedProvider


@dataclass(frozen=True)
class GitHub:
    """Fully supported hosting provider carrying user and repository identifiers."""

    user: str
    repo: str

    name: ClassVar[str] = "github"

    def dependency_identifiers(self) -> Tuple[str, str]:
        return self.user, self.repo


@dataclass(frozen=True)
class _PlaceholderProvider:
    """Provider recognised from its URL but not parsed into identifiers."""

    url: str

    name: ClassVar[str] = "unknown"

    def dependency_identifiers(self) -> Tuple[str, str]:
        raise UnsupportedProvider(
            f"Repository {self.url} is hosted on {self.name}, "
            "which has no dependency-status badge support yet"
        )


@dataclass(frozen=True)
class GitLab(_PlaceholderProvider):
    name: ClassVar[str] = "gitlab"


@dataclass(frozen=True)
class Bitbucket(_PlaceholderProvider):
    name: ClassVar[str] = "bitbucket"


@dataclass(frozen=True)
class Codeberg(_PlaceholderProvider):
    name: ClassVar[str] = "codeberg"


@dataclass(frozen=True)
class Gitea(_PlaceholderProvider):
    name: ClassVar[str] = "gitea"


HostingProvider = Union[GitHub, GitLab, Bitbucket, Codeberg, Gitea]


@dataclass(frozen=True)
class Manifest:
    """Read-only view of the package fields badgeup cares about."""

    path: Path
    name: str
    repository: Optional[str] = None


@dataclass(frozen=True)
class Position:
    """A point in the source text (1-based line/column, 0-based offset)."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class HeadingSpan:
    """Source span of a heading block."""

    depth: int
    start: Position
    end: Position

    def describe(self) -> str:
        return (
            f"L{self.start.line}C{self.start.column}:"
            f"L{self.end.line}C{self.end.column}"
        )


@dataclass
class UpdateOutcome:
    """Result of a README badge insertion."""

    path: Path
    diff: str
    dry_run: bool


__all__ = [
    "Bitbucket",
    "Codeberg",
    "GitHub",
    "GitLab",
    "Gitea",
    "HeadingSpan",
    "HostingProvider",
    "Manifest",
    "Position",
    "UpdateOutcome",
]
