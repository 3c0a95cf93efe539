"""Locate the insertion point after the README title heading."""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .errors import MarkupParseError, MissingHeading, PositionUnavailable, StructureError
from .logging import get_logger
from .models import HeadingSpan, Position

# markdown-it splits lines on the same terminators before assigning line maps.
_NEWLINE_RE = re.compile(r"\r\n?|\n")
_BOM = "\ufeff"


class HeadingLocator:
    """Finds the end offset of the first top-level heading in a README."""

    def __init__(self, parser: MarkdownIt | None = None) -> None:
        self.parser = parser or MarkdownIt("commonmark")
        self.logger = get_logger("locator")

    def locate(self, markdown: str, *, source: str = "README.md") -> int:
        """Return the character offset just past the first depth-1 heading."""
        return self.first_heading(markdown, source=source).end.offset

    def first_heading(self, markdown: str, *, source: str = "README.md") -> HeadingSpan:
        # A leading byte-order mark stays in the file but is invisible to the parser.
        shift = 1 if markdown.startswith(_BOM) else 0
        body = markdown[shift:]
        try:
            tokens = self.parser.parse(body)
        except Exception as exc:
            raise MarkupParseError(f"Failed to parse {source}: {exc}") from exc

        for token in _top_level(tokens):
            if token.type != "heading_open":
                continue
            depth = int(token.tag[1:])
            if not token.map:
                raise PositionUnavailable(
                    f"Failed to get position of a heading with depth {depth} in {source}"
                )
            span = _span(body, depth, token.map, shift=shift)
            self.logger.debug("First heading in %s: depth %d at %s", source, depth, span.describe())
            if depth != 1:
                raise StructureError(
                    f"The first heading in {source} was expected to have depth 1.\n"
                    f"Found a heading with depth {depth} instead (look {span.describe()})",
                    depth=depth,
                    span=span,
                )
            return span

        raise MissingHeading(f"A heading expected in {source}")


def _top_level(tokens: Sequence[Token]) -> List[Token]:
    return [token for token in tokens if token.level == 0]


def _line_bounds(markdown: str) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` offsets for each line, excluding terminators."""
    bounds: List[Tuple[int, int]] = []
    start = 0
    for match in _NEWLINE_RE.finditer(markdown):
        bounds.append((start, match.start()))
        start = match.end()
    bounds.append((start, len(markdown)))
    return bounds


def _span(markdown: str, depth: int, line_map: Sequence[int], *, shift: int = 0) -> HeadingSpan:
    bounds = _line_bounds(markdown)
    first, last = line_map[0], line_map[1] - 1
    start_offset, _ = bounds[first]
    last_start, end_offset = bounds[last]
    return HeadingSpan(
        depth=depth,
        start=Position(line=first + 1, column=1, offset=start_offset + shift),
        end=Position(line=last + 1, column=end_offset - last_start + 1, offset=end_offset + shift),
    )


__all__ = ["HeadingLocator"]
