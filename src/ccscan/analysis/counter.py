"""Complexity counter: scores one function's body."""

from __future__ import annotations

from ..scanning.node_kinds import SyntaxNode, is_decision_point, is_function_boundary

BASE_COMPLEXITY = 1


def count_complexity(function_node: SyntaxNode) -> int:
    """Return the cyclomatic complexity of one function.

    Starts at 1 and adds 1 for every decision-point node in the function's
    ``body``. Parameters, default values, decorators and the return
    annotation are outside the body and never count. A ``a and b or c``
    expression holds two boolean_operator nodes and so adds 2. Descent stops
    at nested function definitions: their constructs belong to their own
    score. Node kinds that are not decision points count 0, so grammar
    additions never break scoring.
    """
    score = BASE_COMPLEXITY
    body = function_node.child_by_field_name("body")
    stack = [body] if body is not None else []

    while stack:
        node = stack.pop()
        if is_function_boundary(node):
            continue
        if is_decision_point(node):
            score += 1
        stack.extend(node.children)

    return score
