# logic/evaluator.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Boolean evaluation of expression trees under a variable assignment

"""Evaluation of propositional formulas.

An assignment is the set of variable names that are true; every variable not
in the set is false. Evaluation is pure and total over well-formed trees.
Operands are evaluated left to right.
"""

from __future__ import annotations
from typing import AbstractSet, Optional

from rpn import parse
from rpn import ast_nodes as ast
from rpn.exceptions import UnknownVariable
from utils.limits import EngineLimits
from utils.logger import get_logger
from .variables import variables_in_order


class Evaluator(ast.Visitor):
    """Computes the truth value of a tree under a fixed assignment.

    Attributes:
        assignment: Names of the variables that are true
    """

    def __init__(self, assignment: AbstractSet[str]):
        self.assignment = assignment

    def evaluate(self, node: ast.Expr) -> bool:
        return node.accept(self)

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_variable(self, n: ast.Variable) -> bool:
        return n.name in self.assignment

    def visit_not(self, n: ast.Not) -> bool:
        return not self.evaluate(n.operand)

    def visit_and(self, n: ast.And) -> bool:
        left = self.evaluate(n.left)
        right = self.evaluate(n.right)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = self.evaluate(n.left)
        right = self.evaluate(n.right)
        return left or right

    def visit_xor(self, n: ast.Xor) -> bool:
        return self.evaluate(n.left) != self.evaluate(n.right)

    def visit_implies(self, n: ast.Implies) -> bool:
        left = self.evaluate(n.left)
        right = self.evaluate(n.right)
        return not left or right

    def visit_iff(self, n: ast.Iff) -> bool:
        return self.evaluate(n.left) == self.evaluate(n.right)


def evaluate(expr: ast.Expr, assignment: AbstractSet[str] = frozenset()) -> bool:
    """Evaluate expr with the variables in assignment set to true.

    Args:
        expr: Expression to evaluate
        assignment: Names of the variables that are true

    Returns:
        Truth value of the expression
    """
    return Evaluator(assignment).evaluate(expr)


def eval_formula(source: str, limits: Optional[EngineLimits] = None) -> bool:
    """Parse and evaluate a formula made of constants and operators only.

    Args:
        source: RPN formula such as "10&" or "1011||="
        limits: Resource bounds (defaults to DEFAULT_LIMITS)

    Returns:
        Truth value of the formula

    Raises:
        ParseError: Formula is malformed
        UnknownVariable: Formula references a variable; the first one in the
            formula text is reported
        LimitExceededError: Formula nests deeper than limits.max_depth
    """
    expr = parse(source, limits)

    names = variables_in_order(expr)
    if names:
        raise UnknownVariable(names[0])

    result = evaluate(expr)
    get_logger().debug(f"Formula {source!r} evaluates to {result}")
    return result
