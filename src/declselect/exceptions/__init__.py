"""
declselect exception classes.

This package provides all exception types raised by declselect for consistent
error handling and reporting.
"""

from declselect.exceptions.core import (
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
    SettingsError,
    TreeDocumentError,
)

__all__ = [
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
    "TreeDocumentError",
    "SettingsError",
]
