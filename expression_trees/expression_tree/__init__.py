"""Expression Tree Module

Prefix-notation arithmetic expression trees: parsing, validation, comparison,
serialization, simplification and substitution.
"""

from .expression import Expression
from .parser import parse
from .core import (
  ExpressionTree,
  OpType, BINARY_OP_MAP, OPERATORS,
  is_operator, parse_integer, evaluate_binary_op, fold_constants
)
from .utils import (
  ExpressionValidator, ValidationResult, validate, is_valid, require_valid,
  equals, equals_at,
  to_prefix, to_infix, to_sympy,
  ExpressionSimplifier, SimplifyStats, simplify, simplify_fancy,
  substitute, substitute_many, evaluate,
  calculate_tree_depth, get_variables, get_constants, count_operators, clone_tree
)

__all__ = [
  "Expression", "ExpressionTree", "parse",
  "OpType", "BINARY_OP_MAP", "OPERATORS",
  "is_operator", "parse_integer", "evaluate_binary_op", "fold_constants",
  "ExpressionValidator", "ValidationResult", "validate", "is_valid", "require_valid",
  "equals", "equals_at",
  "to_prefix", "to_infix", "to_sympy",
  "ExpressionSimplifier", "SimplifyStats", "simplify", "simplify_fancy",
  "substitute", "substitute_many", "evaluate",
  "calculate_tree_depth", "get_variables", "get_constants", "count_operators", "clone_tree"
]
