import pytest

from arith_tree import (
    ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, NodeType, OpType, ExpressionValidator
)
from arith_tree.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, get_variable_names, validate_tree_structure
)


def build_tree():
    # (-(x) - (2 * y))
    return BinaryOpNode(
        '-',
        UnaryOpNode('-', VariableNode('x')),
        BinaryOpNode('*', ConstantNode(2.0), VariableNode('y'))
    )


def test_breadth_first_order():
    names = [node.to_string() for node in get_all_nodes(build_tree())]
    assert names == ["(-(x) - (2 * y))", "-(x)", "(2 * y)", "x", "2", "y"]


def test_depth_first_order():
    names = [node.to_string() for node in get_all_nodes(build_tree(), 'depth_first')]
    assert names == ["(-(x) - (2 * y))", "-(x)", "x", "(2 * y)", "2", "y"]


def test_invalid_traversal_order():
    with pytest.raises(ValueError):
        get_all_nodes(build_tree(), 'sideways')


def test_tree_depth():
    assert calculate_tree_depth(ConstantNode(1.0)) == 1
    assert calculate_tree_depth(build_tree()) == 3


def test_find_by_type():
    tree = build_tree()
    assert len(find_nodes_by_type(tree, NodeType.BINARY_OP)) == 2
    assert [c.value for c in get_constants(tree)] == [2.0]
    assert [v.name for v in get_variables(tree)] == ['x', 'y']


def test_find_by_operator():
    tree = build_tree()
    assert len(find_nodes_by_operator(tree, '-')) == 2
    assert len(find_nodes_by_operator(tree, OpType.MINUS)) == 1
    assert len(find_nodes_by_operator(tree, OpType.SUB)) == 1
    assert find_nodes_by_operator(tree, '^') == []


def test_variable_names_are_sorted_and_unique():
    tree = BinaryOpNode('+', VariableNode('b'), BinaryOpNode('*', VariableNode('a'), VariableNode('b')))
    assert get_variable_names(tree) == ['a', 'b']


def test_built_trees_are_structurally_valid():
    assert validate_tree_structure(build_tree())
    assert ExpressionValidator.is_valid_expression(build_tree())
    assert not validate_tree_structure("x")


def test_shared_node_is_detected():
    tree = BinaryOpNode('+', VariableNode('x'), ConstantNode(1.0))
    # force sharing behind the constructor's back
    tree._right = tree._left
    assert not validate_tree_structure(tree)


def test_find_undefined_variables():
    tree = build_tree()
    assert ExpressionValidator.find_undefined_variables(tree, {'x': 1.0}) == ['y']
    assert not ExpressionValidator.is_fully_bound(tree, {'x': 1.0})
    assert ExpressionValidator.is_fully_bound(tree, {'x': 1.0, 'y': 2.0})
