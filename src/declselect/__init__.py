"""
declselect - select declarations from a source declaration tree by path

Given a path such as `a::b::C::d`, declselect finds the container the path
leads to and returns a copy of it narrowed to the declarations named by the
last segment.
"""

from importlib.metadata import version

from declselect.config import SelectorSettings
from declselect.core import (
    Declaration,
    DeclarationAttribute,
    DeclarationKind,
    DeclarationNode,
)
from declselect.exceptions import (
    AmbiguousError,
    DeclSelectError,
    EmptyPathError,
    EmptySegmentError,
    InvalidIdentifierError,
    NotAContainerError,
    NotFoundError,
    ParseError,
    SelectError,
    SelectionError,
)
from declselect.parsing import Path, parse_path
from declselect.selection import select

__version__ = version("declselect")

__all__ = [
    "__version__",
    "select",
    "parse_path",
    "Path",
    "Declaration",
    "DeclarationAttribute",
    "DeclarationKind",
    "DeclarationNode",
    "SelectorSettings",
    "DeclSelectError",
    "SelectionError",
    "ParseError",
    "EmptyPathError",
    "EmptySegmentError",
    "InvalidIdentifierError",
    "SelectError",
    "NotFoundError",
    "AmbiguousError",
    "NotAContainerError",
]
