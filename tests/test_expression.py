import sympy as sp

from expression_trees import Expression


def test_expression_round_trip():
    expr = Expression.from_prefix("* - 1 + b 3 d")
    assert expr.to_prefix() == "* - 1 + b 3 d"
    assert expr.to_infix() == "((1-(b+3))*d)"
    assert str(expr) == "* - 1 + b 3 d"
    assert expr.size() == 7
    assert expr.depth() == 4
    assert expr.variables() == ["b", "d"]


def test_expression_equality_is_structural():
    assert Expression.from_prefix("+ 1 2") == Expression.from_prefix("+ 1 2")
    assert Expression.from_prefix("+ 1 2") != Expression.from_prefix("+ 2 1")
    assert hash(Expression.from_prefix("+ 1 2")) == hash(Expression.from_prefix("+ 1 2"))
    assert Expression.from_prefix("a") != "a"


def test_simplify_refreshes_cached_string():
    expr = Expression.from_prefix("+ 0 * 1 x")
    assert expr.to_prefix() == "+ 0 * 1 x"
    assert expr.simplify(fancy=True) is expr
    assert expr.to_prefix() == "x"


def test_copy_then_mutate():
    expr = Expression.from_prefix("- a b")
    clone = expr.copy().substitute({"a": 7, "b": 2}).simplify()
    assert clone.to_prefix() == "5"
    assert expr.to_prefix() == "- a b"


def test_substitute_single_and_evaluate():
    expr = Expression.from_prefix("* x + y 1")
    assert expr.evaluate({"x": 3, "y": 4}) == 15
    expr.substitute("x", 2)
    assert expr.to_prefix() == "* 2 + y 1"


def test_to_sympy():
    x = sp.Symbol("x")
    assert sp.expand(Expression.from_prefix("* x - x 1").to_sympy()) == x**2 - x


def test_hash_follows_prefix_after_simplify():
    expression = Expression.from_prefix("+ x 0")
    before = hash(expression)
    assert before == hash("+ x 0")
    expression.simplify(fancy=True)
    assert hash(expression) == hash("x")
    assert hash(expression) == hash(Expression.from_prefix("x"))
