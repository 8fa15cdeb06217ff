"""
declselect selection engine.

This package provides tree descent, pruning and the composed `select` query.
"""

from declselect.selection.descender import Descent, descend, matching_children
from declselect.selection.pruner import inherited_attributes, prune
from declselect.selection.select import apply_path, select

__all__ = [
    "Descent",
    "descend",
    "matching_children",
    "inherited_attributes",
    "prune",
    "apply_path",
    "select",
]
