"""
Property checks over a fixed set of generated expressions: round trips,
idempotence, soundness against SymPy and the relationship between the two
simplifiers.
"""

import random

import pytest
import sympy as sp

from expression_trees import (
    InvalidSubstitution, MalformedExpression, equals, evaluate, parse, set_config, simplify, simplify_fancy,
    substitute, substitute_many, to_infix, to_prefix, to_sympy,
)

VARIABLES = ["a", "b", "c"]


def random_prefix(rng: random.Random, depth: int, allow_variables: bool = True) -> str:
    if depth == 0 or rng.random() < 0.3:
        if allow_variables and rng.random() < 0.4:
            return rng.choice(VARIABLES)
        return str(rng.choice([0, 1, rng.randint(-9, 9)]))
    operator = rng.choice("+-*")
    left = random_prefix(rng, depth - 1, allow_variables)
    right = random_prefix(rng, depth - 1, allow_variables)
    return f"{operator} {left} {right}"


def sample(n: int, seed: int, allow_variables: bool = True):
    rng = random.Random(seed)
    return [random_prefix(rng, 4, allow_variables) for _ in range(n)]


@pytest.mark.parametrize("source", sample(40, seed=1))
def test_prefix_round_trip(source):
    assert to_prefix(parse(source)) == source


@pytest.mark.parametrize("source", sample(40, seed=2))
def test_simplifiers_are_idempotent(source):
    once = simplify(parse(source))
    assert equals(simplify(once.copy()), once)
    fancy = simplify_fancy(parse(source))
    assert equals(simplify_fancy(fancy.copy()), fancy)


@pytest.mark.parametrize("source", sample(40, seed=3, allow_variables=False))
def test_constant_expressions_fold_to_their_value(source):
    # wide enough that no product of sampled literals overflows
    set_config(integer_bits=64)
    expected = int(to_sympy(parse(source)))
    for function in (simplify, simplify_fancy):
        tree = function(parse(source))
        assert tree.size() == 1
        assert int(tree.element(tree.root())) == expected


@pytest.mark.parametrize("source", sample(40, seed=4))
def test_fancy_is_never_larger_and_fully_folded(source):
    basic = simplify(parse(source))
    fancy = simplify_fancy(parse(source))
    assert fancy.size() <= basic.size()
    assert equals(simplify(fancy.copy()), fancy)


@pytest.mark.parametrize("source", sample(40, seed=5))
def test_simplification_preserves_meaning(source):
    set_config(integer_bits=64)
    original = to_sympy(parse(source))
    for function in (simplify, simplify_fancy):
        assert sp.expand(to_sympy(function(parse(source))) - original) == 0


@pytest.mark.parametrize("source", sample(40, seed=6))
def test_substitution_commutes_with_simplification(source):
    values = {"a": 3, "b": -2, "c": 5}
    substituted_first = simplify(substitute_many(parse(source), values))
    simplified_first = simplify(substitute_many(simplify_fancy(parse(source)), values))
    assert substituted_first.size() == 1
    assert equals(substituted_first, simplified_first)
    assert int(substituted_first.element(substituted_first.root())) == evaluate(parse(source), values)


def test_scenario_parse():
    tree = parse("+ 2 15")
    assert tree.size() == 3
    assert [tree.element(p) for p in tree.preorder()] == ["+", "2", "15"]


def test_scenario_malformed():
    with pytest.raises(MalformedExpression):
        parse("+ 5 - 4")


def test_scenario_simplify():
    assert equals(simplify(parse("- + 2 15 c")), parse("- 17 c"))


def test_scenario_simplify_fancy():
    assert equals(simplify_fancy(parse("* 1 a")), parse("a"))


def test_scenario_infix():
    assert to_infix(parse("* - 1 + b 3 d")) == "((1-(b+3))*d)"


def test_scenario_absent_substitution():
    with pytest.raises(InvalidSubstitution):
        substitute(parse("a"), {"a": None})
