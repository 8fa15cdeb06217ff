"""
Declaration tree documents.

Reads declaration trees from YAML (or JSON) documents and writes selection
outcomes back out in the same shape. A document is a nested mapping:

    kind: module          # optional on the root
    children:
      - kind: module
        name: a
        attributes: ['cfg(feature = "g")']
        children:
          - {kind: function, name: run}
"""

from __future__ import annotations

import pathlib
from typing import Any

import yaml
from pydantic import ValidationError

from declselect.core.declaration import DeclarationNode
from declselect.core.types import DeclarationKind
from declselect.exceptions import TreeDocumentError


def tree_from_document(document: Any, source: str = "<document>") -> DeclarationNode:
    """
    Validate a decoded document into a declaration tree.

    Params:
        document: Decoded YAML/JSON value
        source: Description of where the document came from, for errors

    Returns:
        Root DeclarationNode of the tree

    Raises:
        TreeDocumentError: If the document does not describe a valid tree
    """
    if document is None:
        raise TreeDocumentError(source, "document is empty")
    if not isinstance(document, dict):
        raise TreeDocumentError(source, "top level must be a mapping")

    document = {"kind": DeclarationKind.MODULE.value, **document}
    try:
        return DeclarationNode.model_validate(document)
    except ValidationError as e:
        raise TreeDocumentError(source, _summarize(e)) from e


def load_tree(source: str | pathlib.Path) -> DeclarationNode:
    """
    Load a declaration tree from a YAML or JSON file.

    Params:
        source: Path of the document

    Returns:
        Root DeclarationNode of the tree

    Raises:
        TreeDocumentError: If the file cannot be read, decoded or validated
    """
    path = pathlib.Path(source)
    try:
        with path.open(encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise TreeDocumentError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise TreeDocumentError(str(path), f"not valid UTF-8: {e.reason}") from e
    except yaml.YAMLError as e:
        raise TreeDocumentError(str(path), f"not valid YAML: {e}") from e

    return tree_from_document(document, source=str(path))


def node_to_document(node: DeclarationNode) -> dict[str, Any]:
    """Convert a node to the document shape, omitting empty members."""
    document: dict[str, Any] = {"kind": node.kind.value}
    if node.name is not None:
        document["name"] = node.name
    if node.attributes:
        document["attributes"] = [
            attribute.model_dump(exclude_none=True) for attribute in node.attributes
        ]
    if node.children:
        document["children"] = [node_to_document(child) for child in node.children]
    return document


def dump_outcome(node: DeclarationNode) -> str:
    """Render a selection outcome as a YAML document."""
    return yaml.safe_dump(node_to_document(node), sort_keys=False)


def _summarize(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)
