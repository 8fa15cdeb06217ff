"""
Tests for the declaration tree model.

Focus Areas:
1. Container/leaf kind taxonomy
2. DeclarationNode validation and immutability
3. Attribute shorthand parsing
4. Conversion of foreign protocol-conforming trees
"""

from dataclasses import dataclass, field

import pytest
from pydantic import ValidationError

from declselect.core import (
    CONTAINER_KINDS,
    LEAF_KINDS,
    Declaration,
    DeclarationAttribute,
    DeclarationKind,
    DeclarationNode,
    describe,
    is_identifier,
)


class TestDeclarationKind:
    """Test the closed declaration kind taxonomy."""

    @pytest.mark.parametrize(
        "kind",
        [
            DeclarationKind.MODULE,
            DeclarationKind.TYPE,
            DeclarationKind.TRAIT,
            DeclarationKind.IMPL,
        ],
    )
    def test_container_kinds(self, kind):
        assert kind.is_container
        assert kind in CONTAINER_KINDS

    @pytest.mark.parametrize(
        "kind",
        [
            DeclarationKind.FUNCTION,
            DeclarationKind.CONSTANT,
            DeclarationKind.TYPE_ALIAS,
            DeclarationKind.FIELD,
        ],
    )
    def test_leaf_kinds(self, kind):
        assert not kind.is_container
        assert kind in LEAF_KINDS

    def test_kinds_are_partitioned(self):
        assert CONTAINER_KINDS | LEAF_KINDS == set(DeclarationKind)
        assert not CONTAINER_KINDS & LEAF_KINDS


class TestIsIdentifier:
    @pytest.mark.parametrize("segment", ["a", "_", "Foo", "snake_case", "x1", "_private"])
    def test_valid(self, segment):
        assert is_identifier(segment)

    @pytest.mark.parametrize("segment", ["", "1a", "a-b", "a b", "a.b", "a:", "a\n"])
    def test_invalid(self, segment):
        assert not is_identifier(segment)


class TestDeclarationNode:
    """Test DeclarationNode construction and validation."""

    def test_defaults(self):
        node = DeclarationNode(kind=DeclarationKind.MODULE)

        assert node.name is None
        assert node.children == ()
        assert node.attributes == ()

    def test_kind_from_string(self):
        node = DeclarationNode(kind="trait", name="C")
        assert node.kind is DeclarationKind.TRAIT

    def test_children_from_list(self):
        node = DeclarationNode.model_validate(
            {
                "kind": "type",
                "name": "S",
                "children": [{"kind": "field", "name": "x"}],
            }
        )
        assert isinstance(node.children, tuple)
        assert node.children[0].name == "x"

    def test_leaf_with_children_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            DeclarationNode(
                kind=DeclarationKind.FUNCTION,
                name="d",
                children=(DeclarationNode(kind=DeclarationKind.TYPE, name="E"),),
            )
        assert "leaf declaration" in str(exc_info.value)

    def test_empty_container_allowed(self):
        node = DeclarationNode(kind=DeclarationKind.TRAIT, name="Marker")
        assert node.is_container
        assert node.children == ()

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            DeclarationNode(kind="macro", name="m")

    def test_nodes_are_frozen(self):
        node = DeclarationNode(kind=DeclarationKind.MODULE, name="a")
        with pytest.raises(ValidationError):
            node.name = "b"

    def test_equality_is_structural(self):
        first = DeclarationNode(
            kind="module", name="a", children=({"kind": "function", "name": "f"},)
        )
        second = DeclarationNode(
            kind="module", name="a", children=({"kind": "function", "name": "f"},)
        )
        assert first == second
        assert first is not second

    def test_satisfies_protocol(self):
        assert isinstance(DeclarationNode(kind="module"), Declaration)


class TestDeclarationAttribute:
    """Test attribute shorthand parsing and rendering."""

    def test_bare_name(self):
        attribute = DeclarationAttribute.model_validate("test")

        assert attribute.name == "test"
        assert attribute.arguments is None
        assert attribute.value is None
        assert str(attribute) == "#[test]"

    def test_arguments(self):
        attribute = DeclarationAttribute.model_validate('cfg(feature = "g")')

        assert attribute.name == "cfg"
        assert attribute.arguments == 'feature = "g"'
        assert str(attribute) == '#[cfg(feature = "g")]'

    def test_value(self):
        attribute = DeclarationAttribute.model_validate('doc = "Documentation"')

        assert attribute.name == "doc"
        assert attribute.value == '"Documentation"'
        assert str(attribute) == '#[doc = "Documentation"]'

    def test_mapping_form(self):
        attribute = DeclarationAttribute.model_validate(
            {"name": "cfg", "arguments": "unix"}
        )
        assert attribute == DeclarationAttribute.model_validate("cfg(unix)")

    def test_unparseable_shorthand(self):
        with pytest.raises(ValidationError):
            DeclarationAttribute.model_validate("not an attribute")

    def test_node_accepts_shorthand(self):
        node = DeclarationNode(kind="module", name="a", attributes=("cfg(test)",))
        assert node.attributes == (DeclarationAttribute(name="cfg", arguments="test"),)


@dataclass
class ForeignNode:
    """Stand-in for a node type from some other parser."""

    kind: str
    name: str | None = None
    children: list["ForeignNode"] = field(default_factory=list)


class TestFromDeclaration:
    """Test conversion of foreign trees into DeclarationNode values."""

    def test_declaration_node_returned_unchanged(self):
        node = DeclarationNode(kind="module", name="a")
        assert DeclarationNode.from_declaration(node) is node

    def test_foreign_tree_converted(self):
        foreign = ForeignNode(
            "trait", "C", [ForeignNode("function", "d"), ForeignNode("function", "f")]
        )

        node = DeclarationNode.from_declaration(foreign)

        assert node == DeclarationNode(
            kind=DeclarationKind.TRAIT,
            name="C",
            children=(
                DeclarationNode(kind=DeclarationKind.FUNCTION, name="d"),
                DeclarationNode(kind=DeclarationKind.FUNCTION, name="f"),
            ),
        )

    def test_foreign_node_satisfies_protocol(self):
        assert isinstance(ForeignNode("module"), Declaration)


class TestDescribe:
    def test_named(self):
        assert describe(DeclarationNode(kind="trait", name="C")) == "trait 'C'"

    def test_anonymous(self):
        assert describe(DeclarationNode(kind="impl")) == "anonymous impl"
