"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode
from .operators import (
    NodeType, OpType, UNARY_OP_MAP, BINARY_OP_MAP,
    evaluate_constant, evaluate_variable, evaluate_unary_op, evaluate_binary_op,
    evaluate_division
)

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'UnaryOpNode', 'BinaryOpNode',
    'NodeType', 'OpType', 'UNARY_OP_MAP', 'BINARY_OP_MAP',
    'evaluate_constant', 'evaluate_variable', 'evaluate_unary_op', 'evaluate_binary_op',
    'evaluate_division'
]
