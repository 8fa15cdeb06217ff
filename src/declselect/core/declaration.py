"""
Declaration tree model for declselect.

This module contains the read-only `Declaration` protocol the selection engine
consumes, and `DeclarationNode`, the pydantic model used both as the reference
tree implementation and as the value type of every selection outcome.
"""

import re
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, model_validator

from declselect.core.types import DeclarationKind

_ATTRIBUTE_PATTERN = re.compile(
    r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*(?:\((.*)\)|=\s*(.*?))?\s*", re.DOTALL
)


class DeclarationAttribute(BaseModel):
    """
    An attribute attached to a declaration, such as `#[cfg(test)]`.

    Attributes can be given in documents either as a mapping or in one of the
    shorthand forms `name`, `name(arguments)` and `name = value`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    arguments: str | None = None
    value: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _parse_shorthand(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        match = _ATTRIBUTE_PATTERN.fullmatch(data)
        if match is None:
            raise ValueError(f"cannot parse attribute {data!r}")
        name, arguments, value = match.groups()
        return {"name": name, "arguments": arguments, "value": value}

    def __str__(self) -> str:
        if self.arguments is not None:
            return f"#[{self.name}({self.arguments})]"
        if self.value is not None:
            return f"#[{self.name} = {self.value}]"
        return f"#[{self.name}]"


@runtime_checkable
class Declaration(Protocol):
    """
    Minimal read-only view of a node in a declaration tree.

    Any tree produced by a source parser can be queried once it is adapted to
    expose these three members. An optional `attributes` member is honoured
    when present.
    """

    @property
    def kind(self) -> DeclarationKind: ...

    @property
    def name(self) -> str | None: ...

    @property
    def children(self) -> Sequence["Declaration"]: ...


class DeclarationNode(BaseModel):
    """
    Immutable declaration tree node.

    Container kinds (modules, types, traits, impl blocks) may hold children;
    leaf kinds (functions, constants, type aliases, fields) may not. Anonymous
    containers, e.g. an impl block, leave `name` unset and are never matched
    by a path segment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: DeclarationKind
    name: str | None = None
    children: tuple["DeclarationNode", ...] = ()
    attributes: tuple[DeclarationAttribute, ...] = ()

    @model_validator(mode="after")
    def _leaves_have_no_children(self) -> "DeclarationNode":
        if self.children and not self.kind.is_container:
            raise ValueError(
                f"{describe(self)} is a leaf declaration and cannot have children"
            )
        return self

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    @classmethod
    def from_declaration(cls, declaration: Declaration) -> "DeclarationNode":
        """
        Convert any protocol-conforming declaration into a `DeclarationNode`.

        Params:
            declaration: Node from an arbitrary tree implementation

        Returns:
            The node itself if it already is a `DeclarationNode`, otherwise a
            structural copy of it and its whole subtree
        """
        if isinstance(declaration, cls):
            return declaration
        return cls(
            kind=DeclarationKind(declaration.kind),
            name=declaration.name,
            children=tuple(cls.from_declaration(c) for c in declaration.children),
            attributes=tuple(getattr(declaration, "attributes", ())),
        )


DeclarationNode.model_rebuild()


def describe(declaration: Declaration) -> str:
    """Short human-readable label such as `trait 'C'` or `anonymous impl`."""
    kind = DeclarationKind(declaration.kind)
    if declaration.name is None:
        return f"anonymous {kind.value}"
    return f"{kind.value} '{declaration.name}'"
