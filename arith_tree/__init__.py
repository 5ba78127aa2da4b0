# Python

"""Arithmetic Expression Tree Package

Expression trees over constants, variables, sign operators and binary
arithmetic, evaluated against an explicit variable environment.
"""

from .environment import VariableEnvironment, get_global_environment, reset_global_environment
from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode,
  UnaryOpNode, BinaryOpNode, NodeType, OpType,
  ExpressionValidator
)
from .logging_system import LogLevel, DiagnosticKind, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "VariableEnvironment", "get_global_environment", "reset_global_environment",
  "Expression", "Node", "ConstantNode", "VariableNode",
  "UnaryOpNode", "BinaryOpNode", "NodeType", "OpType",
  "ExpressionValidator",
  "LogLevel", "DiagnosticKind", "configure_logging", "get_logger", "set_log_level"
]
