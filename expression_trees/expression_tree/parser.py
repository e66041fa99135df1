from collections import deque
from typing import Optional

from .core.arena import ExpressionTree
from .core.operators import is_operator
from ..config import get_config
from ..errors import MalformedExpression
from ..logging_system import log_warning, log_debug


def parse(expression: Optional[str], strict: Optional[bool] = None) -> ExpressionTree:
  """Build a tree from a prefix expression such as "+ 2 - 4 5".

  The text is split on single spaces. Each "+", "-" or "*" token takes the next
  two complete expressions as its left and right operands; any other token is
  a leaf (a variable or an integer literal).

  Tokens left over once the expression is complete are ignored with a warning,
  or rejected when `strict` (default: ExpressionConfig.strict_parse) is set.

  Raises:
    MalformedExpression: if `expression` is absent or an operator runs out of operands
  """
  if expression is None:
    raise MalformedExpression("expression string is absent")
  if not isinstance(expression, str):
    raise MalformedExpression(f"expression must be a string, got {type(expression).__name__}")
  if strict is None:
    strict = get_config().strict_parse

  tokens = deque(expression.split(" "))
  tree = ExpressionTree()
  # Each entry is (parent position, side) still waiting for an operand
  pending = [(None, None)]

  while pending:
    parent, side = pending.pop()
    if not tokens:
      raise MalformedExpression(
        f"missing {side} operand for '{tree.element(parent)}' in prefix expression: {expression!r}")
    token = tokens.popleft()

    if parent is None:
      position = tree.add_root(token)
    elif side == 'left':
      position = tree.add_left(parent, token)
    else:
      position = tree.add_right(parent, token)

    if is_operator(token):
      pending.append((position, 'right'))
      pending.append((position, 'left'))

  if tokens:
    if strict:
      raise MalformedExpression(
        f"{len(tokens)} unused token(s) after complete expression: {' '.join(tokens)!r}")
    log_warning(f"ignoring {len(tokens)} unused token(s) after complete expression: {' '.join(tokens)!r}")

  log_debug(f"parsed {expression!r} into {tree.size()} nodes")
  return tree
