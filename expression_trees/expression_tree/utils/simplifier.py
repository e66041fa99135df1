from dataclasses import dataclass
from typing import Optional

from ..core.arena import ExpressionTree
from ..core.operators import parse_integer, fold_constants
from .comparator import equals_at
from .validator import ExpressionValidator
from ...config import get_config
from ...logging_system import get_logger, log_debug, log_info, LogLevel


@dataclass
class SimplifyStats:
  folds: int = 0       # operator nodes replaced by their computed value
  rewrites: int = 0    # algebraic identities applied


class ExpressionSimplifier:
  """Constant folding and algebraic identity rewriting, in place.

  Nodes are visited in post-order so that each operator sees its children in
  their final form. The order is computed before any rewrite: rewriting a node
  only changes its own subtree and the link from its parent, so the remaining
  entries (ancestors and unrelated subtrees) stay valid.

  `last_stats` is shared by the whole process and holds the counts of the most
  recent `simplify` or `simplify_fancy` call only. Callers that need counts for
  a specific tree should use `_run`, which returns them.
  """

  last_stats: Optional[SimplifyStats] = None

  @staticmethod
  def simplify(tree: ExpressionTree) -> ExpressionTree:
    """Fold every operator whose operands are both integer literals."""
    stats = ExpressionSimplifier._run(tree, fancy=False)
    log_info(f"simplify: {stats.folds} folds, {tree.size()} nodes left", LogLevel.DETAILED)
    return tree

  @staticmethod
  def simplify_fancy(tree: ExpressionTree) -> ExpressionTree:
    """Fold constants, then apply the identities below at every node that did not fold.

      (1*x)==x  (x*1)==x  (0*x)==0  (x*0)==0
      (0+x)==x  (x+0)==x  (x-0)==x  (x-x)==0

    x-x only matches identical subtrees; (a+b)-(b+a) is left alone.
    """
    stats = ExpressionSimplifier._run(tree, fancy=True)
    log_info(f"simplify_fancy: {stats.folds} folds, {stats.rewrites} rewrites, "
             f"{tree.size()} nodes left", LogLevel.DETAILED)
    return tree

  @staticmethod
  def _run(tree: ExpressionTree, fancy: bool) -> SimplifyStats:
    ExpressionValidator.require_valid(tree)
    stats = SimplifyStats()
    dtype = get_config().dtype
    verbose = get_logger().is_verbose()

    for p in list(tree.postorder()):
      if not ExpressionSimplifier._fold(tree, p, dtype, stats, verbose) and fancy:
        ExpressionSimplifier._apply_identities(tree, p, stats, verbose)

    ExpressionSimplifier.last_stats = stats
    return stats

  @staticmethod
  def _fold(tree: ExpressionTree, p: int, dtype, stats: SimplifyStats, verbose: bool = False) -> bool:
    if tree.is_external(p):
      return False

    left, right = tree.left(p), tree.right(p)
    left_val = parse_integer(tree.element(left), dtype)
    right_val = parse_integer(tree.element(right), dtype)
    if left_val is None or right_val is None:
      return False

    operator = tree.element(p)
    result = fold_constants(left_val, right_val, operator, dtype)
    tree.set(p, str(result))
    # Both operands are literals, hence leaves
    tree.remove(left)
    tree.remove(right)
    stats.folds += 1
    if verbose:
      log_debug(f"folded {left_val} {operator} {right_val} -> {result}")
    return True

  @staticmethod
  def _apply_identities(tree: ExpressionTree, p: int, stats: SimplifyStats, verbose: bool = False):
    if tree.is_external(p):
      return

    operator = tree.element(p)
    left, right = tree.left(p), tree.right(p)
    left_val, right_val = tree.element(left), tree.element(right)

    if operator == '*':
      if left_val == '1':
        ExpressionSimplifier._collapse(tree, p, right, "(1*x)==x", stats, verbose)
      elif right_val == '1':
        ExpressionSimplifier._collapse(tree, p, left, "(x*1)==x", stats, verbose)
      elif left_val == '0' or right_val == '0':
        ExpressionSimplifier._zero(tree, p, "(0*x)==0" if left_val == '0' else "(x*0)==0", stats, verbose)

    elif operator == '+':
      if left_val == '0':
        ExpressionSimplifier._collapse(tree, p, right, "(0+x)==x", stats, verbose)
      elif right_val == '0':
        ExpressionSimplifier._collapse(tree, p, left, "(x+0)==x", stats, verbose)

    elif operator == '-':
      if right_val == '0':
        ExpressionSimplifier._collapse(tree, p, left, "(x-0)==x", stats, verbose)
      elif equals_at(tree, left, right):
        ExpressionSimplifier._zero(tree, p, "(x-x)==0", stats, verbose)

  @staticmethod
  def _collapse(tree: ExpressionTree, p: int, keep: int, rule: str, stats: SimplifyStats, verbose: bool = False):
    tree.replace_subtree(p, keep)
    stats.rewrites += 1
    if verbose:
      log_debug(f"applied {rule} at position {p}")

  @staticmethod
  def _zero(tree: ExpressionTree, p: int, rule: str, stats: SimplifyStats, verbose: bool = False):
    tree.set(p, "0")
    tree.prune(tree.left(p))
    tree.prune(tree.right(p))
    stats.rewrites += 1
    if verbose:
      log_debug(f"applied {rule} at position {p}")


def simplify(tree: ExpressionTree) -> ExpressionTree:
  return ExpressionSimplifier.simplify(tree)


def simplify_fancy(tree: ExpressionTree) -> ExpressionTree:
  return ExpressionSimplifier.simplify_fancy(tree)
