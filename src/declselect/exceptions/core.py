"""
Exception classes for declselect.

This module defines specific exception types for the conditions that can occur
while parsing a path, selecting from a declaration tree, and loading trees or
settings from files.
"""

from declselect.core.types import DeclarationKind


class DeclSelectError(Exception):
    """Base exception for all declselect errors."""

    pass


class SelectionError(DeclSelectError):
    """Base exception for every failure of a path query."""

    pass


class ParseError(SelectionError):
    """Raised when a path string cannot be parsed."""

    def __init__(self, path_text: str, reason: str):
        """
        Initialize the exception.

        Params:
            path_text: The path string as given by the caller
            reason: Why the path is malformed
        """
        self.path_text = path_text
        self.reason = reason
        super().__init__(f"Invalid path '{path_text}': {reason}")


class EmptyPathError(ParseError):
    """Raised when the path string is empty or blank."""

    def __init__(self, path_text: str = ""):
        super().__init__(path_text, "path is empty")


class EmptySegmentError(ParseError):
    """Raised when a separator is doubled or sits at either end of the path."""

    def __init__(self, path_text: str, index: int):
        """
        Initialize the exception.

        Params:
            path_text: The path string as given by the caller
            index: Zero-based position of the empty segment
        """
        self.index = index
        super().__init__(path_text, f"segment {index} is empty")


class InvalidIdentifierError(ParseError):
    """Raised when a segment is not a valid identifier."""

    def __init__(self, path_text: str, segment: str):
        """
        Initialize the exception.

        Params:
            path_text: The path string as given by the caller
            segment: The offending segment
        """
        self.segment = segment
        super().__init__(path_text, f"segment '{segment}' is not a valid identifier")


class SelectError(SelectionError):
    """Raised when a parsed path cannot be resolved against a tree."""

    def __init__(self, segment: str, reason: str):
        """
        Initialize the exception.

        Params:
            segment: The path segment at which resolution stopped
            reason: Why resolution stopped there
        """
        self.segment = segment
        self.reason = reason
        super().__init__(f"Segment '{segment}' {reason}")


class NotFoundError(SelectError):
    """Raised when a segment matches no child at its level."""

    def __init__(self, segment: str, container: str | None = None):
        """
        Initialize the exception.

        Params:
            segment: The segment that matched nothing
            container: Label of the declaration that was searched
        """
        self.container = container
        where = f" in {container}" if container else ""
        super().__init__(segment, f"matched no declaration{where}")


class AmbiguousError(SelectError):
    """Raised when a navigation segment matches more than one child."""

    def __init__(self, segment: str, count: int, container: str | None = None):
        """
        Initialize the exception.

        Params:
            segment: The segment that matched several children
            count: Number of same-named children found
            container: Label of the declaration that was searched
        """
        self.count = count
        self.container = container
        where = f" in {container}" if container else ""
        super().__init__(
            segment,
            f"matched {count} declarations{where}; navigation needs exactly one",
        )


class NotAContainerError(SelectError):
    """Raised when navigation reaches a leaf declaration before the path ends."""

    def __init__(self, segment: str, kind: DeclarationKind):
        """
        Initialize the exception.

        Params:
            segment: The segment that resolved to a leaf
            kind: Kind of the leaf declaration
        """
        self.kind = kind
        super().__init__(
            segment,
            f"names a {kind.value} declaration, which cannot be descended into",
        )


class TreeDocumentError(DeclSelectError):
    """Raised when a declaration tree document cannot be read or validated."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: File name or other description of the document origin
            reason: Why the document is unusable
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load declaration tree from {source}: {reason}")


class SettingsError(DeclSelectError):
    """Raised when selector settings are invalid or cannot be loaded."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid selector settings: {reason}")
