"""
Path parsing for declselect.

This module turns a path string such as `a::b::C::d` into an immutable `Path`
of identifier segments. Every segment but the last navigates into a container;
the last one filters the children of that container.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from declselect.config import DEFAULT_SETTINGS, SelectorSettings
from declselect.core.types import DEFAULT_SEPARATOR, Segment, is_identifier
from declselect.exceptions import (
    EmptyPathError,
    EmptySegmentError,
    InvalidIdentifierError,
)

if TYPE_CHECKING:
    from declselect.core.declaration import Declaration, DeclarationNode


@dataclass(frozen=True)
class Path:
    """
    A parsed selection path.

    Not every source path is a valid selection path: generics, qualified
    self types and glob segments are not supported.
    """

    segments: tuple[Segment, ...]
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if not self.segments:
            raise EmptyPathError("")
        for index, segment in enumerate(self.segments):
            if not segment:
                raise EmptySegmentError(str(self), index)
            if not is_identifier(segment):
                raise InvalidIdentifierError(str(self), segment)

    def __str__(self) -> str:
        return self.separator.join(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def navigation(self) -> tuple[Segment, ...]:
        """Segments used to descend into containers (all but the last)."""
        return self.segments[:-1]

    @property
    def filter_segment(self) -> Segment:
        """Segment used to filter the located container's children."""
        return self.segments[-1]

    @classmethod
    def parse(cls, text: str, settings: SelectorSettings | None = None) -> Path:
        """Parse a path string. See `parse_path`."""
        return parse_path(text, settings)

    def apply_to(
        self, root: Declaration, settings: SelectorSettings | None = None
    ) -> DeclarationNode:
        """
        Select from a declaration tree with this already-parsed path.

        Params:
            root: Root of the declaration tree to search
            settings: Optional selector settings

        Returns:
            Pruned copy of the container addressed by the path

        Raises:
            SelectError: If the path cannot be resolved in this tree
        """
        # Import here to avoid circular imports
        from declselect.selection.select import apply_path

        return apply_path(self, root, settings)


def parse_path(text: str, settings: SelectorSettings | None = None) -> Path:
    """
    Parse a path string into its segments.

    Params:
        text: Path string such as "a::b::C::d"
        settings: Optional settings supplying the segment separator

    Returns:
        Path with at least one segment

    Raises:
        EmptyPathError: If text is empty or blank
        EmptySegmentError: If a separator is doubled or at either end
        InvalidIdentifierError: If a segment is not an identifier

    Examples:
        "a::b::C" -> Path(("a", "b", "C"))
        "a::" -> EmptySegmentError(index=1)
    """
    settings = settings or DEFAULT_SETTINGS

    if not text or not text.strip():
        raise EmptyPathError(text)

    # Segments are validated by Path; joining them again reproduces text
    segments = tuple(text.split(settings.separator))
    return Path(segments=segments, separator=settings.separator)
