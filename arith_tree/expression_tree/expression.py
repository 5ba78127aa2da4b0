from typing import List, Mapping, Optional
from .core.node import Node
from .utils.tree_utils import calculate_tree_depth, get_variable_names
from ..logging_system import LogLevel, log_info


class Expression:
  """Root handle of an expression tree. Dropping it releases the whole tree."""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    Node._check_child(root)
    Node._adopt(root)
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, env: Mapping[str, float]) -> float:
    result = self.root.evaluate(env)
    log_info(f"{self.to_string()} = {result}", LogLevel.DETAILED)
    return result

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    """Sorted names of the variables the tree refers to"""
    return get_variable_names(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root.same_structure(other.root)
