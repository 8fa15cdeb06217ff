"""
Tree descent for declselect.

Walks a declaration tree along the navigation segments of a path. Each step
commits to exactly one child, so there is never any backtracking: a segment
naming zero or several children, or naming a leaf, stops the walk.
"""

import logging

from attrs import frozen

from declselect.core.declaration import Declaration, describe
from declselect.core.types import DeclarationKind, Segment
from declselect.exceptions import AmbiguousError, NotAContainerError, NotFoundError
from declselect.parsing.path import Path

logger = logging.getLogger(__name__)


@frozen
class Descent:
    """Where a descent stopped.

    Attributes:
        container: Declaration whose children the filter segment selects from
        filter_segment: Last segment of the path
        trail: Declarations navigated through, outermost first, ending with
            the container (empty when the container is the root)
    """

    container: Declaration
    filter_segment: Segment
    trail: tuple[Declaration, ...] = ()

    @property
    def ancestors(self) -> tuple[Declaration, ...]:
        """Navigated declarations enclosing the container, outermost first."""
        return self.trail[:-1]


def matching_children(node: Declaration, segment: Segment) -> list[Declaration]:
    """Children of node named segment, in their original order."""
    return [
        child
        for child in node.children
        if child.name is not None and child.name == segment
    ]


def descend(root: Declaration, path: Path) -> Descent:
    """
    Locate the container addressed by all but the last segment of a path.

    Params:
        root: Root of the declaration tree
        path: Parsed selection path

    Returns:
        Descent holding the container, the filter segment and the trail

    Raises:
        NotFoundError: If a navigation segment matches no child
        AmbiguousError: If a navigation segment matches more than one child
        NotAContainerError: If a navigation segment matches a leaf declaration
    """
    current = root
    trail: list[Declaration] = []

    for segment in path.navigation:
        matches = matching_children(current, segment)
        if not matches:
            raise NotFoundError(segment, describe(current))
        if len(matches) > 1:
            raise AmbiguousError(segment, len(matches), describe(current))

        child = matches[0]
        kind = DeclarationKind(child.kind)
        if not kind.is_container:
            raise NotAContainerError(segment, kind)

        logger.debug("Descended from %s into %s", describe(current), describe(child))
        trail.append(child)
        current = child

    return Descent(
        container=current, filter_segment=path.filter_segment, trail=tuple(trail)
    )
