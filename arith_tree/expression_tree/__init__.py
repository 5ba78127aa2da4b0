"""Expression Tree Module

Node variants, operator kernels and tree utilities.
"""

from .expression import Expression
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    UnaryOpNode,
    BinaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    UNARY_OP_MAP,
    BINARY_OP_MAP,
    evaluate_constant,
    evaluate_variable,
    evaluate_unary_op,
    evaluate_binary_op,
    evaluate_division
)
from .utils import ExpressionValidator

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "UnaryOpNode", "BinaryOpNode",
    "NodeType", "OpType",
    "UNARY_OP_MAP", "BINARY_OP_MAP",
    "evaluate_constant", "evaluate_variable", "evaluate_unary_op", "evaluate_binary_op",
    "evaluate_division",
    "ExpressionValidator"
]
