# rpn/cnf_transformer.py
# This file is part of Veritas - A Propositional Logic Engine
#
# AST transformer for Conjunctive Normal Form conversion

"""Transforms NNF expression trees into Conjunctive Normal Form (CNF).

The input must already be in negation normal form. The transformation:
1. Recursively converts both operands of every connective to CNF
2. Distributes disjunction over conjunction: A | (B & C) => (A | B) & (A | C)
3. Flattens the result into a right-associative chain of clauses, each clause
   being a right-associative chain of literals

Distribution multiplies clause counts, so the output can be exponentially
larger than the input. The clause count is checked against the configured
bound before every distribution step, and the depth of the flattened chains
against the depth bound before they are built.
"""

from __future__ import annotations
from typing import List, Optional

from utils.limits import DEFAULT_LIMITS, EngineLimits
from utils.logger import get_logger
from .exceptions import UnexpectedOperator
from . import ast_nodes as ast
from .serializer import to_rpn


class CNFTransformer(ast.Visitor):
    """Converts an NNF expression into CNF.

    Attributes:
        limits: Resource bounds; max_clauses guards the distribution step and
            max_depth the depth of the flattened result
    """

    def __init__(self, limits: Optional[EngineLimits] = None):
        self.limits = limits or DEFAULT_LIMITS

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Transform an NNF expression into flattened CNF.

        Args:
            root: Root node of an expression in negation normal form

        Returns:
            Equivalent conjunction of disjunctions of literals

        Raises:
            UnexpectedOperator: The input contains ^, >, = or a non-literal negation
            LimitExceededError: Distribution would exceed limits.max_clauses, or
                the flattened chains would be deeper than limits.max_depth
        """
        logger = get_logger()
        logger.debug(f"Starting CNF transformation of {type(root).__name__}")

        distributed = root.accept(self)
        result = flatten(distributed, self.limits)

        logger.transform_complete("CNF", to_rpn(result))
        return result

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return n

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        if not ast.is_literal(n):
            raise UnexpectedOperator(n)
        return n

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        left = n.left.accept(self)
        right = n.right.accept(self)
        self.limits.check("max_clauses", _clause_count(left) * _clause_count(right))
        return _distribute(left, right)

    def visit_xor(self, n: ast.Xor):
        raise UnexpectedOperator(n)

    def visit_implies(self, n: ast.Implies):
        raise UnexpectedOperator(n)

    def visit_iff(self, n: ast.Iff):
        raise UnexpectedOperator(n)


def _distribute(left: ast.Expr, right: ast.Expr) -> ast.Expr:
    """Build the CNF of left | right from two CNF operands.

    A conjunction on the right is distributed first:
        A | (B & C) -> (A | B) & (A | C)
        (A & B) | C -> (A | C) & (B | C)

    Args:
        left: Left operand, already in CNF
        right: Right operand, already in CNF

    Returns:
        CNF expression equivalent to the disjunction
    """
    if isinstance(right, ast.And):
        return ast.And(_distribute(left, right.left), _distribute(left, right.right))

    if isinstance(left, ast.And):
        return ast.And(_distribute(left.left, right), _distribute(left.right, right))

    return ast.Or(left, right)


def _clause_count(expr: ast.Expr) -> int:
    """Count the clauses of a CNF expression (conjuncts along the And spine)."""
    count = 0
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, ast.And):
            pending.extend((node.right, node.left))
        else:
            count += 1
    return count


def _collect(expr: ast.Expr, node_type: type) -> List[ast.Expr]:
    """Collect the operands of a same-operator chain, depth-first left to right."""
    operands: List[ast.Expr] = []
    pending = [expr]
    while pending:
        node = pending.pop()
        if isinstance(node, node_type):
            pending.extend((node.right, node.left))
        else:
            operands.append(node)
    return operands


def _chain(operands: List[ast.Expr], node_type: type) -> ast.Expr:
    """Build a right-associative chain a op (b op (c ...)) from operands."""
    result = operands[-1]
    for operand in reversed(operands[:-1]):
        result = node_type(operand, result)
    return result


def _chain_depth(depths: List[int]) -> int:
    """Depth of the right-associative chain built over operands of the given depths."""
    depth = depths[-1]
    for operand_depth in reversed(depths[:-1]):
        depth = 1 + max(operand_depth, depth)
    return depth


def _literal_depth(literal: ast.Expr) -> int:
    return 2 if isinstance(literal, ast.Not) else 1


def flatten(expr: ast.Expr, limits: Optional[EngineLimits] = None) -> ast.Expr:
    """Re-associate a CNF expression into canonical right-associative chains.

    And(And(a, b), c) and And(a, And(b, c)) both become And(a, And(b, c));
    the same applies to the literals of every clause. A chain is as deep as
    its length, so the depth of the result is checked against
    limits.max_depth before it is built.

    Args:
        expr: Expression in CNF
        limits: Resource bounds (defaults to DEFAULT_LIMITS)

    Returns:
        The same CNF with conjunctions and disjunctions chained to the right

    Raises:
        LimitExceededError: The chained result would be deeper than limits.max_depth
    """
    limits = limits or DEFAULT_LIMITS

    clauses = [_collect(clause, ast.Or) for clause in _collect(expr, ast.And)]
    clause_depths = [
        _chain_depth([_literal_depth(literal) for literal in literals])
        for literals in clauses
    ]
    limits.check("max_depth", _chain_depth(clause_depths))

    return _chain([_chain(literals, ast.Or) for literals in clauses], ast.And)


def is_cnf(expr: ast.Expr) -> bool:
    """Return True if expr is a conjunction of disjunctions of literals."""
    return all(
        all(ast.is_literal(literal) for literal in _collect(clause, ast.Or))
        for clause in _collect(expr, ast.And)
    )
