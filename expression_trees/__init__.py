# Python

"""Prefix Expression Trees

Parse arithmetic expressions written in prefix notation into binary trees,
then validate, compare, print, simplify and substitute them.

Quick start:
    from expression_trees import parse, simplify_fancy, to_infix

    tree = simplify_fancy(parse("- * 1 c + c 0"))
    to_infix(tree)  # => "0"
"""

from .expression_tree import (
  Expression, ExpressionTree, parse,
  OPERATORS, is_operator, parse_integer,
  ExpressionValidator, ValidationResult, validate, is_valid, require_valid,
  equals, equals_at,
  to_prefix, to_infix, to_sympy,
  ExpressionSimplifier, SimplifyStats, simplify, simplify_fancy,
  substitute, substitute_many, evaluate,
  calculate_tree_depth, get_variables, get_constants, count_operators, clone_tree
)
from .errors import (
  ExpressionError, MalformedExpression, InvalidArgument, InvalidExpression,
  InvalidSubstitution, InvalidPosition
)
from .config import ExpressionConfig, get_config, set_config, reset_config
from .logging_system import LogLevel, ExpressionLogger, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "ExpressionTree", "parse",
  "OPERATORS", "is_operator", "parse_integer",
  "ExpressionValidator", "ValidationResult", "validate", "is_valid", "require_valid",
  "equals", "equals_at",
  "to_prefix", "to_infix", "to_sympy",
  "ExpressionSimplifier", "SimplifyStats", "simplify", "simplify_fancy",
  "substitute", "substitute_many", "evaluate",
  "calculate_tree_depth", "get_variables", "get_constants", "count_operators", "clone_tree",
  "ExpressionError", "MalformedExpression", "InvalidArgument", "InvalidExpression",
  "InvalidSubstitution", "InvalidPosition",
  "ExpressionConfig", "get_config", "set_config", "reset_config",
  "LogLevel", "ExpressionLogger", "get_logger", "set_log_level", "configure_logging"
]
