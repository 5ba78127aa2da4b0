"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. None of them mutate
the tree.
"""

from collections import deque
from typing import List, Set, Union

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode
from ..core.operators import NodeType, OpType


def get_children(node: Node) -> List[Node]:
    """Direct children of a node, left to right"""
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    elif isinstance(node, UnaryOpNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(get_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive), the order evaluation visits nodes in"""
    nodes = [node]
    for child in get_children(node):
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = get_children(node)
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_type: NodeType) -> List[Node]:
    """All nodes of one variant, in depth-first order"""
    return [n for n in _depth_first_traversal(node) if n.node_type == node_type]


def find_nodes_by_operator(node: Node, operator: Union[str, OpType]) -> List[Node]:
    """
    Find operator nodes matching a symbol or an OpType.

    A symbol such as '-' matches both the unary minus and the binary
    subtraction; pass an OpType to tell them apart.
    """
    matches = []
    for n in _depth_first_traversal(node):
        if not isinstance(n, (UnaryOpNode, BinaryOpNode)):
            continue
        if isinstance(operator, OpType):
            if n.op_type == operator:
                matches.append(n)
        elif n.operator == operator:
            matches.append(n)
    return matches


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, NodeType.CONSTANT)


def get_variables(node: Node) -> List[VariableNode]:
    return find_nodes_by_type(node, NodeType.VARIABLE)


def get_variable_names(node: Node) -> List[str]:
    """Sorted, de-duplicated variable names"""
    return sorted({v.name for v in get_variables(node)})


def validate_tree_structure(node: Node) -> bool:
    """
    Check that every child is a Node and that no node object is reachable twice.

    A node reachable twice would be shared between parents (or part of a
    cycle), which breaks exclusive ownership.
    """
    if not isinstance(node, Node):
        return False

    seen: Set[int] = set()
    nodes_to_visit = [node]
    while nodes_to_visit:
        current_node = nodes_to_visit.pop()
        if not isinstance(current_node, Node):
            return False
        if id(current_node) in seen:
            return False
        seen.add(id(current_node))
        nodes_to_visit.extend(get_children(current_node))

    return True
