"""
Core declselect components.

This package provides the declaration tree model and the type definitions
shared by the parser and the selection engine.
"""

from declselect.core.declaration import (
    Declaration,
    DeclarationAttribute,
    DeclarationNode,
    describe,
)
from declselect.core.types import (
    CONTAINER_KINDS,
    DEFAULT_SEPARATOR,
    LEAF_KINDS,
    DeclarationKind,
    Segment,
    is_identifier,
)

__all__ = [
    "Declaration",
    "DeclarationAttribute",
    "DeclarationNode",
    "DeclarationKind",
    "CONTAINER_KINDS",
    "LEAF_KINDS",
    "DEFAULT_SEPARATOR",
    "Segment",
    "describe",
    "is_identifier",
]
