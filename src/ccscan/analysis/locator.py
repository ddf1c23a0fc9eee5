"""Function locator: finds every function definition in a syntax tree."""

from __future__ import annotations

from typing import Iterator

from ..models import FunctionUnit
from ..scanning.node_kinds import (
    ANONYMOUS_NAME,
    SCOPE_KINDS,
    SyntaxNode,
    is_function_boundary,
    node_name,
)


def locate_functions(root: SyntaxNode, path: str) -> Iterator[FunctionUnit]:
    """Yield a FunctionUnit for each function definition under ``root``.

    Units come out in source order (pre-order, left to right). Nested and
    class-scoped definitions are yielded as units of their own. The walk
    uses an explicit stack, so tree depth is not limited by recursion.

    Args:
        root: Root node of one parsed file
        path: Display path recorded on each unit

    Yields:
        FunctionUnit per definition; nothing for a file without functions
    """
    stack: list[tuple[SyntaxNode, tuple[str, ...]]] = [(root, ())]

    while stack:
        node, scope = stack.pop()
        inner_scope = scope

        if node.type in SCOPE_KINDS:
            name = node_name(node) or ANONYMOUS_NAME
            inner_scope = scope + (name,)

            if is_function_boundary(node):
                yield FunctionUnit(
                    name=name,
                    qualified_name=".".join(inner_scope),
                    path=path,
                    start_line=node.start_point[0] + 1,
                    end_line=node.end_point[0] + 1,
                    node=node,
                )

        children = list(node.children)
        stack.extend((child, inner_scope) for child in reversed(children))
