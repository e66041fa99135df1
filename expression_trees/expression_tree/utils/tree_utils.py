"""
Tree Utility Functions

Traversal-based queries over expression trees: depth, variables, constants
and operator counts.
"""

from collections import Counter
from typing import Dict, List

from ..core.arena import ExpressionTree
from ..core.operators import is_operator, parse_integer
from ...config import get_config


def calculate_tree_depth(tree: ExpressionTree) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        tree: Expression tree

    Returns:
        Maximum depth (a single leaf has depth 1, an empty tree 0)
    """
    if tree.is_empty():
        return 0
    depth = 0
    stack = [(tree.root(), 1)]
    while stack:
        p, level = stack.pop()
        depth = max(depth, level)
        for child in tree.children(p):
            stack.append((child, level + 1))
    return depth


def get_variables(tree: ExpressionTree) -> List[str]:
    """Leaf values that are not integer literals, in first-seen prefix order."""
    dtype = get_config().dtype
    seen: Dict[str, None] = {}
    for p in tree.preorder():
        value = tree.element(p)
        if tree.is_external(p) and value is not None and parse_integer(value, dtype) is None:
            seen.setdefault(value, None)
    return list(seen)


def get_constants(tree: ExpressionTree) -> List[int]:
    """Integer literal leaves in prefix order."""
    dtype = get_config().dtype
    constants = []
    for p in tree.preorder():
        if tree.is_external(p):
            number = parse_integer(tree.element(p), dtype)
            if number is not None:
                constants.append(number)
    return constants


def count_operators(tree: ExpressionTree) -> Dict[str, int]:
    """Count the usage frequency of each operator in the tree."""
    return dict(Counter(tree.element(p) for p in tree.preorder()
                        if tree.is_internal(p) and is_operator(tree.element(p))))


def clone_tree(tree: ExpressionTree) -> ExpressionTree:
    """Create an independent copy of the entire tree."""
    return tree.copy()
