from typing import NamedTuple, Optional

from ..core.arena import ExpressionTree
from ..core.operators import is_operator
from ...errors import InvalidExpression
from ...logging_system import log_debug


class ValidationResult(NamedTuple):
  valid: bool
  reason: Optional[str] = None
  position: Optional[int] = None

  def __bool__(self) -> bool:
    return self.valid


VALID = ValidationResult(True)


class ExpressionValidator:

  @staticmethod
  def validate(tree: Optional[ExpressionTree]) -> ValidationResult:
    """Check that every node is either an operand leaf or a binary operator node."""
    if tree is None:
      return ValidationResult(False, "tree is absent")
    if not isinstance(tree, ExpressionTree):
      return ValidationResult(False, f"expected an ExpressionTree, got {type(tree).__name__}")
    if tree.is_empty():
      return ValidationResult(False, "tree is empty")

    for p in tree.preorder():
      value = tree.element(p)
      if value is None:
        return ValidationResult(False, "node has no value", p)

      n_children = tree.num_children(p)
      if n_children == 0:
        if is_operator(value):
          return ValidationResult(False, f"operator '{value}' has no operands", p)
      elif n_children == 2:
        if not is_operator(value):
          return ValidationResult(False, f"operand '{value}' has children", p)
      else:
        return ValidationResult(False, f"node '{value}' has exactly one child", p)

    return VALID

  @staticmethod
  def is_valid_expression(tree: Optional[ExpressionTree]) -> bool:
    return ExpressionValidator.validate(tree).valid

  @staticmethod
  def require_valid(tree: Optional[ExpressionTree]) -> ExpressionTree:
    """Guard run before every serializing or mutating operation."""
    result = ExpressionValidator.validate(tree)
    if not result.valid:
      log_debug(f"rejected tree: {result.reason} (position {result.position})")
      raise InvalidExpression(result.reason)
    return tree


def validate(tree: Optional[ExpressionTree]) -> ValidationResult:
  return ExpressionValidator.validate(tree)


def is_valid(tree: Optional[ExpressionTree]) -> bool:
  return ExpressionValidator.is_valid_expression(tree)


def require_valid(tree: Optional[ExpressionTree]) -> ExpressionTree:
  return ExpressionValidator.require_valid(tree)
