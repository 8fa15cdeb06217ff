"""
Core type definitions for declselect.

This module contains the declaration kind taxonomy and the small type aliases
shared by the path parser and the selection engine.
"""

import re
from enum import Enum

Segment = str

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

DEFAULT_SEPARATOR = "::"


class DeclarationKind(Enum):
    """Category of a declaration in the source tree."""

    # Container kinds
    MODULE = "module"
    TYPE = "type"
    TRAIT = "trait"
    IMPL = "impl"

    # Leaf kinds
    FUNCTION = "function"
    CONSTANT = "constant"
    TYPE_ALIAS = "type_alias"
    FIELD = "field"

    @property
    def is_container(self) -> bool:
        """Check if declarations of this kind may nest further declarations."""
        return self in CONTAINER_KINDS


CONTAINER_KINDS = frozenset(
    {
        DeclarationKind.MODULE,
        DeclarationKind.TYPE,
        DeclarationKind.TRAIT,
        DeclarationKind.IMPL,
    }
)

LEAF_KINDS = frozenset(set(DeclarationKind) - CONTAINER_KINDS)


def is_identifier(segment: str) -> bool:
    """Check if a string is usable as a single path segment."""
    return IDENTIFIER_PATTERN.fullmatch(segment) is not None
