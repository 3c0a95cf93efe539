"""Badge block composition and insertion for README files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from jinja2 import DictLoader, Environment

from ..logging import get_logger
from ..models import HostingProvider
from .constants import BADGE_ORDER, BADGE_TEMPLATES, PROVIDER_BADGES


@dataclass
class BadgeComposer:
    """Builds the badge block placed under the README title."""

    badges: Iterable[str] = BADGE_ORDER
    _env: Environment = field(init=False, repr=False)

    def __post_init__(self) -> None:
        selected = set(self.badges)
        self.badges = tuple(badge for badge in BADGE_ORDER if badge in selected)
        self._env = Environment(loader=DictLoader(BADGE_TEMPLATES), autoescape=False)
        self._logger = get_logger("badges")

    def compose(self, name: str, provider: Optional[HostingProvider] = None) -> str:
        """Return the badge block: a blank line, then one badge per line.

        Provider-backed badges are emitted only when ``provider`` is given; a
        provider without badge support raises ``UnsupportedProvider``.
        """
        lines: List[str] = []
        for badge in self.badges:
            context = {"name": name}
            if badge in PROVIDER_BADGES:
                if provider is None:
                    continue
                user, repo = provider.dependency_identifiers()
                context.update(user=user, repo=repo)
            lines.append(self._env.get_template(badge).render(**context))
        self._logger.debug("Composed %d badge(s) for %s", len(lines), name)
        if not lines:
            return ""
        return "\n\n" + "\n".join(lines)

    @staticmethod
    def insert(markdown: str, offset: int, block: str) -> str:
        """Splice ``block`` into ``markdown`` at character ``offset``."""
        if not 0 <= offset <= len(markdown):
            raise ValueError(f"Offset {offset} outside document of length {len(markdown)}")
        return markdown[:offset] + block + markdown[offset:]


__all__ = ["BadgeComposer"]
