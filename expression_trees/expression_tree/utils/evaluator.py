from typing import Dict, Mapping, Optional

from ..core.arena import ExpressionTree
from ..core.operators import parse_integer, fold_constants
from .validator import ExpressionValidator
from .substitution import _render
from ...config import get_config
from ...errors import InvalidSubstitution


def evaluate(tree: ExpressionTree, values: Optional[Mapping[str, int]] = None) -> int:
  """Compute the integer value of the tree without modifying it.

  Leaves that are not integer literals are looked up in `values`; an unbound
  leaf raises InvalidSubstitution. Arithmetic wraps like simplify() does.
  """
  ExpressionValidator.require_valid(tree)
  values = values or {}
  dtype = get_config().dtype
  results: Dict[int, int] = {}

  for p in tree.postorder():
    value = tree.element(p)
    if tree.is_external(p):
      number = parse_integer(value, dtype)
      if number is None:
        if value not in values:
          raise InvalidSubstitution(value, f"variable '{value}' has no value")
        number = parse_integer(_render(value, values[value]), dtype)
        if number is None:
          raise InvalidSubstitution(value, f"value for '{value}' does not fit in {dtype.__name__}")
      results[p] = number
    else:
      results[p] = fold_constants(results.pop(tree.left(p)), results.pop(tree.right(p)), value, dtype)

  return results[tree.root()]
