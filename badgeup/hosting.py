"""Repository URL parsing for hosting providers."""

from __future__ import annotations

from typing import Dict, Type

from .errors import InvalidUrl
from .logging import get_logger
from .models import Bitbucket, Codeberg, GitHub, GitLab, Gitea, HostingProvider, _PlaceholderProvider

_SCHEME = "https://"
_GITHUB_HOST = "github.com/"

_PLACEHOLDER_HOSTS: Dict[str, Type[_PlaceholderProvider]] = {
    "gitlab.com/": GitLab,
    "bitbucket.org/": Bitbucket,
    "codeberg.org/": Codeberg,
}

_logger = get_logger("hosting")


def parse_github_url(url: str) -> GitHub:
    """Return the user and repository named by a GitHub URL.

    The optional ``https://`` scheme and the mandatory ``github.com/`` host are
    stripped, then the first two path segments are taken verbatim. Anything
    after the second segment (sub-paths, ``.git`` suffixes on later segments)
    is ignored.
    """
    remainder = _strip_scheme(url)
    if not remainder.startswith(_GITHUB_HOST):
        raise InvalidUrl(f"Repository URL {url!r} is not a github.com URL")
    segments = remainder[len(_GITHUB_HOST):].split("/")
    if len(segments) < 2 or not segments[0] or not segments[1]:
        raise InvalidUrl(
            f"Repository URL {url!r} must name both a user and a repository"
        )
    return GitHub(user=segments[0], repo=segments[1])


def classify_repository(url: str) -> HostingProvider:
    """Map a repository URL onto one of the known hosting providers."""
    remainder = _strip_scheme(url)
    if remainder.startswith(_GITHUB_HOST):
        provider: HostingProvider = parse_github_url(url)
    else:
        provider = _match_placeholder(url, remainder)
    _logger.debug("Repository %s classified as %s", url, provider.name)
    return provider


def _match_placeholder(url: str, remainder: str) -> HostingProvider:
    for host, provider_cls in _PLACEHOLDER_HOSTS.items():
        if remainder.startswith(host):
            return provider_cls(url=url)
    host = remainder.split("/", 1)[0]
    if "gitea" in host.lower():
        return Gitea(url=url)
    raise InvalidUrl(f"Repository URL {url!r} does not belong to a known hosting provider")


def _strip_scheme(url: str) -> str:
    if url.startswith(_SCHEME):
        return url[len(_SCHEME):]
    return url


__all__ = ["classify_repository", "parse_github_url"]
