"""Utilities for expression trees."""

from .validator import ExpressionValidator, ValidationResult, validate, is_valid, require_valid
from .comparator import equals, equals_at
from .serializer import to_prefix, to_infix, to_sympy
from .simplifier import ExpressionSimplifier, SimplifyStats, simplify, simplify_fancy
from .substitution import substitute, substitute_many
from .evaluator import evaluate
from .tree_utils import (
  calculate_tree_depth, get_variables, get_constants, count_operators, clone_tree
)

__all__ = [
  'ExpressionValidator', 'ValidationResult', 'validate', 'is_valid', 'require_valid',
  'equals', 'equals_at',
  'to_prefix', 'to_infix', 'to_sympy',
  'ExpressionSimplifier', 'SimplifyStats', 'simplify', 'simplify_fancy',
  'substitute', 'substitute_many', 'evaluate',
  'calculate_tree_depth', 'get_variables', 'get_constants', 'count_operators', 'clone_tree'
]
