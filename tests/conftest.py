"""
Shared test fixtures and utilities for the declselect test suite.
"""

import pytest

from declselect import DeclarationKind, DeclarationNode


def node(kind: DeclarationKind, name=None, *children, attributes=()):
    """Build a DeclarationNode with positional children."""
    return DeclarationNode(
        kind=kind, name=name, children=tuple(children), attributes=attributes
    )


@pytest.fixture
def sample_tree() -> DeclarationNode:
    """Module a containing module b containing trait C with functions d and f.

    Equivalent source:
        mod a {
            mod b {
                trait C {
                    fn d(self);
                    fn f();
                }
            }
        }
    """
    return node(
        DeclarationKind.MODULE,
        None,
        node(
            DeclarationKind.MODULE,
            "a",
            node(
                DeclarationKind.MODULE,
                "b",
                node(
                    DeclarationKind.TRAIT,
                    "C",
                    node(DeclarationKind.FUNCTION, "d"),
                    node(DeclarationKind.FUNCTION, "f"),
                ),
            ),
        ),
    )


@pytest.fixture
def overloaded_tree() -> DeclarationNode:
    """Module a holding a module and a function that are both named b.

    Equivalent source:
        mod a {
            mod b {
                struct S { x: u8 }
            }
            fn b() {}
            impl S {
                fn new() -> S;
            }
        }
    """
    return node(
        DeclarationKind.MODULE,
        None,
        node(
            DeclarationKind.MODULE,
            "a",
            node(
                DeclarationKind.MODULE,
                "b",
                node(DeclarationKind.TYPE, "S", node(DeclarationKind.FIELD, "x")),
            ),
            node(DeclarationKind.FUNCTION, "b"),
            node(DeclarationKind.IMPL, None, node(DeclarationKind.FUNCTION, "new")),
        ),
    )


@pytest.fixture
def cfg_tree() -> DeclarationNode:
    """Nested modules gated by cfg attributes.

    Equivalent source:
        #[cfg(feature = "g")]
        mod outer {
            #[doc = "inner"]
            #[cfg(unix)]
            mod inner {
                /// Documentation
                #[cfg(feature = "h")]
                mod imp {
                    pub struct H(u8);
                }
            }
        }
    """
    return node(
        DeclarationKind.MODULE,
        None,
        node(
            DeclarationKind.MODULE,
            "outer",
            node(
                DeclarationKind.MODULE,
                "inner",
                node(
                    DeclarationKind.MODULE,
                    "imp",
                    node(DeclarationKind.TYPE, "H"),
                    attributes=('doc = "Documentation"', 'cfg(feature = "h")'),
                ),
                attributes=('doc = "inner"', "cfg(unix)"),
            ),
            attributes=('cfg(feature = "g")',),
        ),
    )
