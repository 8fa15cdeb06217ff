"""
Pruning for declselect.

A matched leaf (a method, a field) only makes sense inside the declaration
that encloses it, so the outcome of a selection is the located container
itself with every child that does not match the filter segment removed.
"""

import logging
from collections.abc import Iterable

from declselect.core.declaration import (
    Declaration,
    DeclarationAttribute,
    DeclarationNode,
    describe,
)
from declselect.core.types import DeclarationKind, Segment
from declselect.exceptions import NotFoundError
from declselect.selection.descender import matching_children

logger = logging.getLogger(__name__)


def inherited_attributes(
    ancestors: Iterable[Declaration], names: Iterable[str]
) -> tuple[DeclarationAttribute, ...]:
    """
    Collect attributes that should follow a declaration out of its ancestors.

    Params:
        ancestors: Enclosing declarations, outermost first
        names: Attribute names to carry over (e.g. {"cfg"})

    Returns:
        Matching attributes, nearest ancestor first
    """
    names = frozenset(names)
    collected: list[DeclarationAttribute] = []
    for ancestor in reversed(tuple(ancestors)):
        for attribute in getattr(ancestor, "attributes", ()):
            attribute = DeclarationAttribute.model_validate(attribute)
            if attribute.name in names:
                collected.append(attribute)
    return tuple(collected)


def prune(
    container: Declaration,
    filter_segment: Segment,
    inherited: Iterable[DeclarationAttribute] = (),
) -> DeclarationNode:
    """
    Copy a container keeping only the children named by the filter segment.

    Params:
        container: Declaration located by navigation
        filter_segment: Name the kept children must have
        inherited: Attributes to append after the container's own

    Returns:
        New DeclarationNode with the container's kind and name, the matching
        children in their original order, and the merged attributes

    Raises:
        NotFoundError: If no child matches the filter segment
    """
    matches = matching_children(container, filter_segment)
    if not matches:
        raise NotFoundError(filter_segment, describe(container))

    own_attributes = tuple(
        DeclarationAttribute.model_validate(a)
        for a in getattr(container, "attributes", ())
    )
    attributes = list(own_attributes)
    for attribute in inherited:
        if attribute not in attributes:
            attributes.append(attribute)

    children = tuple(DeclarationNode.from_declaration(child) for child in matches)

    if isinstance(container, DeclarationNode):
        outcome = container.model_copy(
            update={"children": children, "attributes": tuple(attributes)}
        )
    else:
        outcome = DeclarationNode(
            kind=DeclarationKind(container.kind),
            name=container.name,
            children=children,
            attributes=tuple(attributes),
        )

    logger.debug(
        "Pruned %s to %d of %d children",
        describe(container),
        len(children),
        len(container.children),
    )
    return outcome
