from typing import List

import sympy as sp

from ..core.arena import ExpressionTree
from ..core.operators import parse_integer
from ...config import get_config
from .validator import ExpressionValidator


def to_prefix(tree: ExpressionTree) -> str:
  """Render the tree in Polish notation, e.g. "- + 2 15 4"."""
  ExpressionValidator.require_valid(tree)
  return " ".join(tree.element(p) for p in tree.preorder())


def to_infix(tree: ExpressionTree) -> str:
  """Render the tree in fully parenthesized infix notation, e.g. "((2+15)-4)".

  Leaves are never wrapped, so a single leaf renders as itself.
  """
  ExpressionValidator.require_valid(tree)
  parts: List[str] = []
  # Entries are positions to expand or literal strings to emit
  stack: list = [tree.root()]
  while stack:
    item = stack.pop()
    if isinstance(item, str):
      parts.append(item)
    elif tree.is_external(item):
      parts.append(tree.element(item))
    else:
      stack.extend((")", tree.right(item), tree.element(item), tree.left(item), "("))
  return "".join(parts)


def to_sympy(tree: ExpressionTree) -> sp.Expr:
  """Convert to a SymPy expression; integer literals become Integers, everything else a Symbol."""
  ExpressionValidator.require_valid(tree)
  dtype = get_config().dtype
  converted = {}
  for p in tree.postorder():
    value = tree.element(p)
    if tree.is_external(p):
      number = parse_integer(value, dtype)
      converted[p] = sp.Integer(number) if number is not None else sp.Symbol(value)
      continue

    left = converted.pop(tree.left(p))
    right = converted.pop(tree.right(p))
    if value == '+':
      converted[p] = sp.Add(left, right)
    elif value == '-':
      converted[p] = sp.Add(left, sp.Mul(-1, right))
    else:
      converted[p] = sp.Mul(left, right)
  return converted[tree.root()]