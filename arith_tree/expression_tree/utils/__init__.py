"""Utilities for expression trees."""

from .tree_utils import (
    get_children, get_all_nodes, calculate_tree_depth,
    find_nodes_by_type, find_nodes_by_operator,
    get_constants, get_variables, get_variable_names,
    validate_tree_structure
)
from .validator import ExpressionValidator

__all__ = [
    'get_children', 'get_all_nodes', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator',
    'get_constants', 'get_variables', 'get_variable_names',
    'validate_tree_structure', 'ExpressionValidator'
]
