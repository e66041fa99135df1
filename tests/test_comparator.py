from expression_trees import ExpressionTree, equals, equals_at, parse


def test_identical_trees_are_equal():
    assert equals(parse("+ 1 2"), parse("+ 1 2"))
    assert equals(parse("* - 1 + b 3 d"), parse("* - 1 + b 3 d"))


def test_swapped_operands_are_not_equal():
    assert not equals(parse("+ 1 2"), parse("+ 2 1"))


def test_different_shapes_are_not_equal():
    assert not equals(parse("+ + 1 2 3"), parse("+ 1 + 2 3"))
    assert not equals(parse("a"), parse("+ a b"))


def test_absent_trees():
    assert equals(None, None)
    assert not equals(parse("a"), None)
    assert not equals(None, parse("a"))


def test_empty_trees_are_equal():
    assert equals(ExpressionTree(), ExpressionTree())


def test_equals_at_compares_subtrees_of_one_tree():
    tree = parse("- + a b + a b")
    root = tree.root()
    assert equals_at(tree, tree.left(root), tree.right(root))


def test_equals_at_is_not_commutative_aware():
    tree = parse("- + a b + b a")
    root = tree.root()
    assert not equals_at(tree, tree.left(root), tree.right(root))
