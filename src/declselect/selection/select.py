"""
Top-level selection entry points.

Composes the path parser, the descender and the pruner into a single query.
Every step is a pure function of its inputs, so the same query against the
same unmutated tree always returns an equal outcome.
"""

import logging

from declselect.config import DEFAULT_SETTINGS, SelectorSettings
from declselect.core.declaration import Declaration, DeclarationNode
from declselect.parsing.path import Path, parse_path
from declselect.selection.descender import descend
from declselect.selection.pruner import inherited_attributes, prune

logger = logging.getLogger(__name__)


def apply_path(
    path: Path, root: Declaration, settings: SelectorSettings | None = None
) -> DeclarationNode:
    """
    Resolve an already-parsed path against a declaration tree.

    Params:
        path: Parsed selection path
        root: Root of the declaration tree
        settings: Optional selector settings

    Returns:
        Pruned copy of the addressed container

    Raises:
        SelectError: If the path cannot be resolved in this tree
    """
    settings = settings or DEFAULT_SETTINGS

    descent = descend(root, path)
    inherited = inherited_attributes(descent.ancestors, settings.inherited_attributes)
    return prune(descent.container, descent.filter_segment, inherited)


def select(
    path_text: str, root: Declaration, settings: SelectorSettings | None = None
) -> DeclarationNode:
    """
    Parse a path, then select the declarations it addresses.

    Params:
        path_text: Path string such as "a::b::C::d"
        root: Root of the declaration tree
        settings: Optional selector settings

    Returns:
        The container addressed by all but the last segment, with its
        children narrowed to those named by the last segment

    Raises:
        ParseError: If path_text is malformed
        SelectError: If the path cannot be resolved in this tree

    Example:
        select("a::b::C::d", root) -> trait 'C' with children [function 'd']
    """
    logger.debug("Selecting '%s'", path_text)
    path = parse_path(path_text, settings)
    return apply_path(path, root, settings)
