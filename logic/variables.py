# logic/variables.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Collection of the propositional variables referenced by a formula

"""Variable collection for expression trees.

The sorted variable list returned by sorted_variables fixes the bit position
of every variable during enumeration: position 0 is the most significant bit,
so the first variable in code-point order changes least often.
"""

from __future__ import annotations
from typing import FrozenSet, List, Set

from rpn import ast_nodes as ast


class VariableCollector(ast.Visitor):
    """Visitor gathering every distinct variable name of a tree."""

    def __init__(self):
        self.names: Set[str] = set()

    def visit_constant(self, n: ast.Constant):
        pass

    def visit_variable(self, n: ast.Variable):
        self.names.add(n.name)

    def visit_not(self, n: ast.Not):
        n.operand.accept(self)

    def _visit_binary(self, n: ast.BinaryOp):
        n.left.accept(self)
        n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_xor = _visit_binary
    visit_implies = _visit_binary
    visit_iff = _visit_binary


def collect_variables(expr: ast.Expr) -> FrozenSet[str]:
    """Return the set of variable names referenced in expr."""
    collector = VariableCollector()
    expr.accept(collector)
    return frozenset(collector.names)


def sorted_variables(expr: ast.Expr) -> List[str]:
    """Return the variables of expr in ascending code-point order."""
    return sorted(collect_variables(expr))


def variables_in_order(expr: ast.Expr) -> List[str]:
    """Return every variable occurrence of expr in left-to-right order.

    This is the order in which the variables appear in the RPN text.
    """
    names: List[str] = []
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, ast.Variable):
            names.append(node.name)
        else:
            pending.extend(reversed(node.operands))
    return names
