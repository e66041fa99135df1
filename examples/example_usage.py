import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expression_trees import (
  Expression, LogLevel, configure_logging, parse, simplify, simplify_fancy,
  substitute_many, to_infix, to_prefix
)


def show(label, tree):
  print(f"{label:<28} prefix: {to_prefix(tree):<24} infix: {to_infix(tree)}")


def main():
  configure_logging(LogLevel.MINIMAL)

  tree = parse("- + 2 15 c")
  show("parsed", tree)
  show("simplify", simplify(tree))

  tree = parse("+ + -10 5 - * a 1 - a 0")
  show("parsed", tree)
  show("simplify_fancy", simplify_fancy(tree))

  tree = parse("+ - d a * b c")
  substitute_many(tree, {"a": 1000, "b": 234, "c": 1, "d": 0})
  show("substituted", tree)
  show("simplify", simplify(tree))

  expr = Expression.from_prefix("* x - x 1")
  print(f"\nSymPy form of {expr}: {expr.to_sympy()}")
  print(f"Value at x=7: {expr.evaluate({'x': 7})}")


if __name__ == "__main__":
  main()
