"""Node-kind rules for the tree-sitter-python grammar.

The function boundary set is shared by the function locator (where a new
unit starts) and the complexity counter (where descent stops). Both must use
:func:`is_function_boundary` so the two never disagree.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol


class SyntaxNode(Protocol):
    """The subset of ``tree_sitter.Node`` that analysis relies on."""

    type: str
    start_point: tuple[int, int]
    end_point: tuple[int, int]
    text: Optional[bytes]

    @property
    def children(self) -> Iterable["SyntaxNode"]: ...

    def child_by_field_name(self, name: str) -> Optional["SyntaxNode"]: ...


# ``async def``, methods and decorated functions all parse to function_definition
FUNCTION_KINDS = frozenset({"function_definition"})

# Named scopes that contribute to qualified names without being scored
SCOPE_KINDS = frozenset({"class_definition"}) | FUNCTION_KINDS

# One increment per node of these kinds
DECISION_KINDS = frozenset(
    {
        "if_statement",
        "elif_clause",
        "for_statement",
        "while_statement",
        "try_statement",
        "except_clause",
        "except_group_clause",
        "with_statement",
        "boolean_operator",
    }
)

ANONYMOUS_NAME = "<anonymous>"


def is_function_boundary(node: SyntaxNode) -> bool:
    """True if the node starts a new, separately scored function."""
    return node.type in FUNCTION_KINDS


def is_decision_point(node: SyntaxNode) -> bool:
    return node.type in DECISION_KINDS


def node_name(node: SyntaxNode) -> Optional[str]:
    """Return the text of the node's ``name`` field, if it has one."""
    name_node = node.child_by_field_name("name")
    if name_node is None or not name_node.text:
        return None
    return name_node.text.decode("utf-8", errors="replace")
