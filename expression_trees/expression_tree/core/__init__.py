"""Core expression tree components."""

from .arena import ExpressionTree
from .operators import (
  OpType, BINARY_OP_MAP, OPERATORS,
  is_operator, parse_integer, evaluate_binary_op, fold_constants
)

__all__ = [
  'ExpressionTree',
  'OpType', 'BINARY_OP_MAP', 'OPERATORS',
  'is_operator', 'parse_integer', 'evaluate_binary_op', 'fold_constants'
]
