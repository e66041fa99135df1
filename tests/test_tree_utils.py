from expression_trees import (
    calculate_tree_depth, clone_tree, count_operators, get_constants, get_variables, parse,
    ExpressionTree,
)


def test_depth():
    assert calculate_tree_depth(ExpressionTree()) == 0
    assert calculate_tree_depth(parse("a")) == 1
    assert calculate_tree_depth(parse("+ a * b c")) == 3


def test_variables_and_constants():
    tree = parse("+ * a 2 - b + a 007")
    assert get_variables(tree) == ["a", "b"]
    assert get_constants(tree) == [2, 7]


def test_count_operators():
    assert count_operators(parse("+ * a 2 - b + a 7")) == {"+": 2, "*": 1, "-": 1}
    assert count_operators(parse("x")) == {}


def test_clone_tree():
    tree = parse("+ a b")
    clone = clone_tree(tree)
    clone.prune(clone.left(clone.root()))
    assert tree.size() == 3
