import re
from enum import IntEnum
from typing import Optional

import numba
import numpy as np


class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2


BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL}
OPERATORS = frozenset(BINARY_OP_MAP)

# Optional sign followed by ASCII digits; leading zeros are allowed
_INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')


def is_operator(value: Optional[str]) -> bool:
  return value in OPERATORS


def parse_integer(value: Optional[str], dtype=np.int32) -> Optional[int]:
  """Return the integer a leaf payload denotes, or None if it is not a literal.

  Literals outside the range of `dtype` are not literals: they stay
  irreducible like any variable name.
  """
  if value is None or _INTEGER_LITERAL.fullmatch(value) is None:
    return None
  number = int(value)
  info = np.iinfo(dtype)
  if number < info.min or number > info.max:
    return None
  return number


@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_code):
  if op_code == 0:    # OpType.ADD
    return left_val + right_val
  elif op_code == 1:  # OpType.SUB
    return left_val - right_val
  return left_val * right_val


def fold_constants(left: int, right: int, operator: str, dtype=np.int32) -> int:
  """Apply a binary operator with fixed-width wraparound arithmetic."""
  if operator not in BINARY_OP_MAP:
    raise ValueError(f"Unknown operator: {operator}")
  op_code = int(BINARY_OP_MAP[operator])
  result = evaluate_binary_op(np.array([left], dtype=dtype), np.array([right], dtype=dtype), op_code)
  return int(np.asarray(result).astype(dtype)[0])
