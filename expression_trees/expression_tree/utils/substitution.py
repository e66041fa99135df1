from numbers import Integral
from typing import Mapping, Optional

from ..core.arena import ExpressionTree
from .validator import ExpressionValidator
from ...errors import InvalidArgument, InvalidSubstitution
from ...logging_system import log_debug


def _render(variable: Optional[str], value) -> str:
  # bool is an Integral but never a meaningful value here
  if value is None or isinstance(value, bool) or not isinstance(value, Integral):
    raise InvalidSubstitution(variable)
  return str(int(value))


def substitute(tree: ExpressionTree, variable, value=None) -> ExpressionTree:
  """Replace every node whose value is `variable` with the decimal form of `value`.

  A mapping may be passed instead of a variable name, in which case this is
  substitute_many(tree, mapping).
  """
  if isinstance(variable, Mapping):
    return substitute_many(tree, variable)

  ExpressionValidator.require_valid(tree)
  if variable is None:
    raise InvalidArgument("variable name is absent")
  replacement = _render(variable, value)

  replaced = 0
  for p in tree.inorder():
    if tree.element(p) == variable:
      tree.set(p, replacement)
      replaced += 1

  log_debug(f"substituted {variable}={replacement} at {replaced} positions")
  return tree


def substitute_many(tree: ExpressionTree, mapping: Mapping[str, Optional[int]]) -> ExpressionTree:
  """Replace every node whose value is a key of `mapping` with the mapped integer.

  A key mapped to None only raises InvalidSubstitution once it is actually met
  in the tree; nodes visited before it have already been replaced.
  """
  ExpressionValidator.require_valid(tree)
  if mapping is None:
    raise InvalidArgument("substitution mapping is absent")

  replaced = 0
  for p in tree.inorder():
    value = tree.element(p)
    if value in mapping:
      tree.set(p, _render(value, mapping[value]))
      replaced += 1

  log_debug(f"substituted {len(mapping)} variables at {replaced} positions")
  return tree
