from typing import List, Mapping
from ..core.node import Node
from .tree_utils import validate_tree_structure, get_variable_names


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    return validate_tree_structure(node)

  @staticmethod
  def find_undefined_variables(node: Node, env: Mapping[str, float]) -> List[str]:
    """Names the tree refers to that env does not bind, sorted"""
    return [name for name in get_variable_names(node) if name not in env]

  @staticmethod
  def is_fully_bound(node: Node, env: Mapping[str, float]) -> bool:
    return not ExpressionValidator.find_undefined_variables(node, env)
