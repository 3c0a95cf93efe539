"""Badge templates inserted under the README title."""

from __future__ import annotations

BADGE_ORDER: tuple[str, ...] = (
    "version",
    "downloads",
    "docs",
    "license",
    "dependencies",
)

BADGE_TEMPLATES: dict[str, str] = {
    "version": (
        "[![Crates.io](https://img.shields.io/crates/v/{{ name }})]"
        "(https://crates.io/crates/{{ name }})"
    ),
    "downloads": (
        "[![Downloads](https://img.shields.io/crates/d/{{ name }})]"
        "(https://crates.io/crates/{{ name }})"
    ),
    "docs": (
        "[![Documentation](https://docs.rs/{{ name }}/badge.svg)]"
        "(https://docs.rs/{{ name }})"
    ),
    "license": (
        "[![License](https://img.shields.io/crates/l/{{ name }})]"
        "(https://crates.io/crates/{{ name }})"
    ),
    "dependencies": (
        "[![Dependency status](https://deps.rs/repo/github/{{ user }}/{{ repo }}/status.svg)]"
        "(https://deps.rs/repo/github/{{ user }}/{{ repo }})"
    ),
}

# Badges that need hosting-provider identifiers in addition to the package name.
PROVIDER_BADGES: frozenset[str] = frozenset({"dependencies"})


__all__ = ["BADGE_ORDER", "BADGE_TEMPLATES", "PROVIDER_BADGES"]
