import pytest
import sympy as sp

from expression_trees import ExpressionTree, InvalidExpression, parse, to_infix, to_prefix, to_sympy


@pytest.mark.parametrize("prefix, infix", [
    ("1", "1"),
    ("x", "x"),
    ("+ 1 2", "(1+2)"),
    ("+ 1 - 2 3", "(1+(2-3))"),
    ("* - 1 + b 3 d", "((1-(b+3))*d)"),
    ("+ a b", "(a+b)"),
    ("- * a b c", "((a*b)-c)"),
    ("* + dog cat - elephant wolf", "((dog+cat)*(elephant-wolf))"),
])
def test_prefix_and_infix(prefix, infix):
    tree = parse(prefix)
    assert to_prefix(tree) == prefix
    assert to_infix(tree) == infix


def test_serializers_reject_invalid_tree():
    tree = ExpressionTree()
    tree.add_root("+")
    with pytest.raises(InvalidExpression):
        to_prefix(tree)
    with pytest.raises(InvalidExpression):
        to_infix(tree)
    with pytest.raises(InvalidExpression):
        to_infix(None)


def test_to_sympy():
    a, b = sp.symbols("a b")
    expr = to_sympy(parse("- * 2 a + b 3"))
    assert sp.simplify(expr - (2 * a - b - 3)) == 0


def test_to_sympy_single_literal():
    assert to_sympy(parse("-7")) == sp.Integer(-7)


def test_infix_of_deep_tree():
    depth = 3000
    tree = parse(" ".join(["-"] * depth + ["x"] * (depth + 1)))
    text = to_infix(tree)
    assert text.startswith("(" * depth)
    assert text.count("x") == depth + 1
