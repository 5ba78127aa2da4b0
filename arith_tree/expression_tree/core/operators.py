import numpy as np
import numba
from enum import IntEnum
from typing import Mapping, Optional, Union

from ...logging_system import DiagnosticKind, log_diagnostic

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  UNARY_OP = 2
  BINARY_OP = 3

class OpType(IntEnum):
  # Unary ops
  PLUS = 0
  MINUS = 1
  # Binary ops
  ADD = 2
  SUB = 3
  MUL = 4
  DIV = 5
  POW = 6

# Mapping dictionaries
UNARY_OP_MAP = {'+': OpType.PLUS, '-': OpType.MINUS}
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}

UNARY_OP_SYMBOLS = {op: symbol for symbol, op in UNARY_OP_MAP.items()}
BINARY_OP_SYMBOLS = {op: symbol for symbol, op in BINARY_OP_MAP.items()}


def resolve_unary_op(operator: Union[str, OpType]) -> OpType:
  """Map a unary operator symbol or OpType onto its OpType"""
  if isinstance(operator, OpType):
    if operator not in UNARY_OP_SYMBOLS:
      raise ValueError(f"{operator.name} is not a unary operator")
    return operator
  if operator not in UNARY_OP_MAP:
    raise ValueError(f"Unknown unary operator: {operator!r}")
  return UNARY_OP_MAP[operator]


def resolve_binary_op(operator: Union[str, OpType]) -> OpType:
  """Map a binary operator symbol or OpType onto its OpType"""
  if isinstance(operator, OpType):
    if operator not in BINARY_OP_SYMBOLS:
      raise ValueError(f"{operator.name} is not a binary operator")
    return operator
  if operator not in BINARY_OP_MAP:
    raise ValueError(f"Unknown binary operator: {operator!r}")
  return BINARY_OP_MAP[operator]


def evaluate_constant(value: float) -> float:
  return value


def evaluate_variable(env: Mapping[str, float], name: str) -> float:
  value: Optional[float] = env.get(name)
  if value is None:
    log_diagnostic(DiagnosticKind.UNDEFINED_VARIABLE, f"Error: Undefined variable '{name}'.")
    return 0.0
  # plain mappings may hold ints; the kernels only ever see float64
  return float(value)


def evaluate_division(left_val: float, right_val: float) -> float:
  if right_val == 0.0:
    log_diagnostic(DiagnosticKind.DIVISION_BY_ZERO, "Error: Division by zero.")
    return float(np.inf)
  return evaluate_binary_op(left_val, right_val, OpType.DIV)


# No fastmath: NaN and inf have to survive every kernel untouched.
@numba.njit(cache=True)
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.PLUS:
    return operand_val
  elif op_type == OpType.MINUS:
    return -operand_val
  return np.nan

@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    # Callers go through evaluate_division, which rules out a zero divisor
    return left_val / right_val
  elif op_type == OpType.POW:
    return left_val ** right_val
  return np.nan
