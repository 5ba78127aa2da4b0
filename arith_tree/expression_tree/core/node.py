import numpy as np
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union
from .operators import (
  NodeType, OpType, UNARY_OP_SYMBOLS, BINARY_OP_SYMBOLS,
  resolve_unary_op, resolve_binary_op,
  evaluate_constant, evaluate_variable, evaluate_unary_op, evaluate_binary_op,
  evaluate_division
)
from ...logging_system import LogLevel, get_logger, log_debug


class Node(ABC):
  """Base node class. Nodes are read-only once built and owned by at most one parent."""

  __slots__ = ('_owned', '_hash_cache', '_size_cache')

  def __init__(self):
    self._owned = False
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  @abstractmethod
  def node_type(self) -> NodeType:
    pass

  @property
  def is_owned(self) -> bool:
    return self._owned

  @staticmethod
  def _check_child(child: 'Node') -> 'Node':
    if not isinstance(child, Node):
      raise TypeError(f"Expected a Node, got {type(child).__name__}")
    if child._owned:
      raise ValueError(f"Node {child.to_string()} already has an owner; attach a copy() instead")
    return child

  @staticmethod
  def _adopt(*children: 'Node'):
    """Take exclusive ownership of already checked children"""
    for child in children:
      child._owned = True

  @abstractmethod
  def evaluate(self, env: Mapping[str, float]) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def _compute_hash(self) -> int:
    return hash(self.structure_key())

  @abstractmethod
  def structure_key(self) -> tuple:
    """Nested tuple identifying the tree shape, operators, names and values"""
    pass

  def same_structure(self, other: 'Node') -> bool:
    if not isinstance(other, Node):
      return False
    return self.structure_key() == other.structure_key()

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class ConstantNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: float):
    super().__init__()
    self._value = float(value)

  @property
  def node_type(self) -> NodeType:
    return NodeType.CONSTANT

  @property
  def value(self) -> float:
    return self._value

  def evaluate(self, env: Mapping[str, float]) -> float:
    return evaluate_constant(self._value)

  def to_string(self) -> str:
    return f"{self._value:g}"

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self._value)

  def _compute_size(self) -> int:
    return 1

  def structure_key(self) -> tuple:
    # every NaN compares alike
    value = 'nan' if np.isnan(self._value) else self._value
    return (NodeType.CONSTANT, value)


class VariableNode(Node):
  __slots__ = ('_name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a str, got {type(name).__name__}")
    self._name = name

  @property
  def node_type(self) -> NodeType:
    return NodeType.VARIABLE

  @property
  def name(self) -> str:
    return self._name

  def evaluate(self, env: Mapping[str, float]) -> float:
    return evaluate_variable(env, self._name)

  def to_string(self) -> str:
    return self._name

  def copy(self) -> 'VariableNode':
    return VariableNode(self._name)

  def _compute_size(self) -> int:
    return 1

  def structure_key(self) -> tuple:
    return (NodeType.VARIABLE, self._name)


class UnaryOpNode(Node):
  __slots__ = ('_op_type', '_operand')

  def __init__(self, operator: Union[str, OpType], operand: Node):
    super().__init__()
    self._op_type = resolve_unary_op(operator)
    self._operand = self._check_child(operand)
    self._adopt(operand)

  @property
  def node_type(self) -> NodeType:
    return NodeType.UNARY_OP

  @property
  def op_type(self) -> OpType:
    return self._op_type

  @property
  def operator(self) -> str:
    return UNARY_OP_SYMBOLS[self._op_type]

  @property
  def operand(self) -> Node:
    return self._operand

  def evaluate(self, env: Mapping[str, float]) -> float:
    operand_val = self._operand.evaluate(env)
    result = float(evaluate_unary_op(operand_val, self._op_type))
    if get_logger().is_enabled_for(LogLevel.VERBOSE):
      log_debug(f"{self.operator}({operand_val}) -> {result}")
    return result

  def to_string(self) -> str:
    return f"{self.operator}({self._operand.to_string()})"

  def copy(self) -> 'UnaryOpNode':
    return UnaryOpNode(self._op_type, self._operand.copy())

  def _compute_size(self) -> int:
    return 1 + self._operand.size()

  def structure_key(self) -> tuple:
    return (NodeType.UNARY_OP, self._op_type, self._operand.structure_key())


class BinaryOpNode(Node):
  __slots__ = ('_op_type', '_left', '_right')

  def __init__(self, operator: Union[str, OpType], left: Node, right: Node):
    super().__init__()
    self._op_type = resolve_binary_op(operator)
    self._left = self._check_child(left)
    self._right = self._check_child(right)
    if left is right:
      raise ValueError("Left and right operands must be distinct nodes")
    self._adopt(left, right)

  @property
  def node_type(self) -> NodeType:
    return NodeType.BINARY_OP

  @property
  def op_type(self) -> OpType:
    return self._op_type

  @property
  def operator(self) -> str:
    return BINARY_OP_SYMBOLS[self._op_type]

  @property
  def left(self) -> Node:
    return self._left

  @property
  def right(self) -> Node:
    return self._right

  def evaluate(self, env: Mapping[str, float]) -> float:
    # each operand is evaluated exactly once, left first
    left_val = self._left.evaluate(env)
    right_val = self._right.evaluate(env)
    if self._op_type == OpType.DIV:
      result = float(evaluate_division(left_val, right_val))
    else:
      result = float(evaluate_binary_op(left_val, right_val, self._op_type))
    if get_logger().is_enabled_for(LogLevel.VERBOSE):
      log_debug(f"({left_val} {self.operator} {right_val}) -> {result}")
    return result

  def to_string(self) -> str:
    return f"({self._left.to_string()} {self.operator} {self._right.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self._op_type, self._left.copy(), self._right.copy())

  def _compute_size(self) -> int:
    return 1 + self._left.size() + self._right.size()

  def structure_key(self) -> tuple:
    return (NodeType.BINARY_OP, self._op_type, self._left.structure_key(), self._right.structure_key())
