from typing import List, Mapping, Optional, Union

import sympy as sp

from .core.arena import ExpressionTree
from .parser import parse
from .utils.comparator import equals
from .utils.serializer import to_prefix, to_infix, to_sympy
from .utils.simplifier import ExpressionSimplifier
from .utils.substitution import substitute, substitute_many
from .utils.evaluator import evaluate
from .utils.tree_utils import calculate_tree_depth, get_variables


class Expression:
  """Arithmetic expression backed by an ExpressionTree, with cached prefix form"""

  __slots__ = ('tree', '_string_cache')

  def __init__(self, tree: ExpressionTree):
    self.tree = tree
    self._string_cache: Optional[str] = None

  @classmethod
  def from_prefix(cls, expression: str, strict: Optional[bool] = None) -> 'Expression':
    return cls(parse(expression, strict=strict))

  def to_prefix(self) -> str:
    if self._string_cache is None:
      self._string_cache = to_prefix(self.tree)
    return self._string_cache

  def to_infix(self) -> str:
    return to_infix(self.tree)

  def to_sympy(self) -> sp.Expr:
    return to_sympy(self.tree)

  def copy(self) -> 'Expression':
    return Expression(self.tree.copy())

  def size(self) -> int:
    """Node count"""
    return self.tree.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.tree)

  def variables(self) -> List[str]:
    return get_variables(self.tree)

  def clear_cache(self):
    """Clear cached values"""
    self._string_cache = None

  def simplify(self, fancy: bool = False) -> 'Expression':
    """Simplify in place and return self."""
    self.clear_cache()
    if fancy:
      ExpressionSimplifier.simplify_fancy(self.tree)
    else:
      ExpressionSimplifier.simplify(self.tree)
    return self

  def substitute(self, variable: Union[str, Mapping[str, int]], value: Optional[int] = None) -> 'Expression':
    """Substitute in place and return self."""
    self.clear_cache()
    if isinstance(variable, Mapping):
      substitute_many(self.tree, variable)
    else:
      substitute(self.tree, variable, value)
    return self

  def evaluate(self, values: Optional[Mapping[str, int]] = None) -> int:
    return evaluate(self.tree, values)

  def __str__(self) -> str:
    return self.to_prefix()

  def __repr__(self) -> str:
    return f"Expression({self.to_prefix()!r})"

  def __hash__(self) -> int:
    """Hash of the current prefix form.

    The hash changes when the tree is rewritten in place by `simplify` or
    `substitute`, so an Expression must not be mutated while it is a set
    member or a dict key.
    """
    return hash(self.to_prefix())

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return equals(self.tree, other.tree)
