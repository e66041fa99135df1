from typing import Optional

from ..core.arena import ExpressionTree


def _equal_subtrees(a_tree: ExpressionTree, b_tree: ExpressionTree,
                    a_pos: Optional[int], b_pos: Optional[int]) -> bool:
  stack = [(a_pos, b_pos)]
  while stack:
    a, b = stack.pop()
    if a is None or b is None:
      if a is not b:
        return False
      continue
    if a_tree.element(a) != b_tree.element(b):
      return False
    stack.append((a_tree.right(a), b_tree.right(b)))
    stack.append((a_tree.left(a), b_tree.left(b)))
  return True


def equals(a: Optional[ExpressionTree], b: Optional[ExpressionTree]) -> bool:
  """True if both trees have the same shape and the same value at every position.

  "+ 1 2" equals another "+ 1 2" but not "+ 2 1".
  """
  if a is None or b is None:
    return a is None and b is None
  return _equal_subtrees(a, b, a.root(), b.root())


def equals_at(tree: ExpressionTree, a: Optional[int], b: Optional[int]) -> bool:
  """Compare two subtrees of the same tree."""
  return _equal_subtrees(tree, tree, a, b)
