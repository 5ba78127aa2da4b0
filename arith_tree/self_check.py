"""
Built-in self-check, run by ``arith-tree --run-tests``.

Each check builds a small tree, evaluates it against its own environment and
compares the result with the expected value. Failures are reported, never
raised.
"""

import math
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Sequence, Tuple

from .environment import VariableEnvironment
from .expression_tree import (
    Expression, Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode
)
from .logging_system import LogLevel, get_logger


class SelfCheck(NamedTuple):
    name: str
    build: Callable[[], Node]
    expected: float
    bindings: Mapping[str, float] = MappingProxyType({})


def build_demo_tree() -> Node:
    """-Num1 + 2 * (4 - Num2)"""
    return BinaryOpNode(
        '+',
        UnaryOpNode('-', VariableNode('Num1')),
        BinaryOpNode('*', ConstantNode(2), BinaryOpNode('-', ConstantNode(4), VariableNode('Num2')))
    )


DEMO_BINDINGS = MappingProxyType({'Num1': 3.0, 'Num2': 7.0})


def build_composite_tree() -> Node:
    """(2 * (a + b)) / ((c - 1) ^ (d + 1))"""
    return BinaryOpNode(
        '/',
        BinaryOpNode('*', ConstantNode(2), BinaryOpNode('+', VariableNode('a'), VariableNode('b'))),
        BinaryOpNode(
            '^',
            BinaryOpNode('-', VariableNode('c'), ConstantNode(1)),
            BinaryOpNode('+', VariableNode('d'), ConstantNode(1))
        )
    )


SELF_CHECKS: Tuple[SelfCheck, ...] = (
    SelfCheck('constant', lambda: ConstantNode(5.0), 5.0),
    SelfCheck('variable', lambda: VariableNode('x'), 10.0, {'x': 10.0}),
    SelfCheck('unary_plus', lambda: UnaryOpNode('+', ConstantNode(7.0)), 7.0),
    SelfCheck('unary_minus', lambda: UnaryOpNode('-', ConstantNode(8.0)), -8.0),
    SelfCheck('add', lambda: BinaryOpNode('+', ConstantNode(3.0), ConstantNode(4.0)), 7.0),
    SelfCheck('subtract', lambda: BinaryOpNode('-', ConstantNode(9.0), ConstantNode(5.0)), 4.0),
    SelfCheck('multiply', lambda: BinaryOpNode('*', ConstantNode(2.0), ConstantNode(6.0)), 12.0),
    SelfCheck('divide', lambda: BinaryOpNode('/', ConstantNode(8.0), ConstantNode(2.0)), 4.0),
    SelfCheck('power', lambda: BinaryOpNode('^', ConstantNode(2.0), ConstantNode(3.0)), 8.0),
    SelfCheck('undefined_variable', lambda: VariableNode('y'), 0.0),
    SelfCheck('division_by_zero', lambda: BinaryOpNode('/', ConstantNode(1.0), ConstantNode(0.0)), math.inf),
    SelfCheck('composite', build_composite_tree, 0.125, {'a': 3.0, 'b': 1.0, 'c': 5.0, 'd': 2.0}),
    SelfCheck('demo', build_demo_tree, -9.0, DEMO_BINDINGS),
)


def _matches(expected: float, actual: float) -> bool:
    if math.isnan(expected):
        return math.isnan(actual)
    return expected == actual


def run_self_check(checks: Sequence[SelfCheck] = SELF_CHECKS) -> bool:
    """Run every check, print one line per check and return True if all passed"""
    logger = get_logger()
    all_passed = True

    for check in checks:
        env = VariableEnvironment(check.bindings)
        expression = Expression(check.build())
        logger.info(f"Checking {check.name}: {expression.to_string()}", LogLevel.MODERATE)
        actual = expression.evaluate(env)

        if _matches(check.expected, actual):
            print(f"Test: {check.name} ... Passed.")
        else:
            print(f"Test: {check.name} ... Failed (expected: {check.expected} but got {actual}).")
            logger.critical(f"self-check '{check.name}' failed")
            all_passed = False

    if all_passed:
        print("All tests passed successfully.")
    return all_passed
