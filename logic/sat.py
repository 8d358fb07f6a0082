# logic/sat.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Satisfiability by exhaustive assignment search

"""Satisfiability checking by brute-force enumeration.

Every assignment over the formula's sorted variables is tried in increasing
order until one satisfies the formula. This is intentionally not a SAT solver:
the cost is 2^n evaluations for n distinct variables, bounded by the
max_variables limit.

A malformed formula is reported by the ParseError raised from parsing; it is
never folded into an "unsatisfiable" answer.
"""

from typing import FrozenSet, Optional

from rpn import parse
from rpn import ast_nodes as ast
from utils.limits import EngineLimits
from utils.logger import get_logger
from .assignments import enumerate_assignments
from .evaluator import evaluate
from .variables import sorted_variables


def find_satisfying_assignment(
    expr: ast.Expr, limits: Optional[EngineLimits] = None
) -> Optional[FrozenSet[str]]:
    """Return the first assignment that makes expr true, or None.

    "First" follows the enumeration order: the lowest assignment number, with
    the first sorted variable as the most significant bit.

    Args:
        expr: Expression to search a model for
        limits: Resource bounds; max_variables caps the search

    Returns:
        Set of variables that are true in the first model, or None if the
        expression is unsatisfiable

    Raises:
        LimitExceededError: The expression has more than limits.max_variables
    """
    logger = get_logger()
    variables = sorted_variables(expr)

    checked = 0
    for _, assignment in enumerate_assignments(variables, limits):
        checked += 1
        if evaluate(expr, assignment):
            logger.sat_result("".join(variables), True, checked)
            return assignment

    logger.sat_result("".join(variables), False, checked)
    return None


def is_satisfiable(expr: ast.Expr, limits: Optional[EngineLimits] = None) -> bool:
    """Return True if some assignment over expr's variables makes it true."""
    return find_satisfying_assignment(expr, limits) is not None


def sat(source: str, limits: Optional[EngineLimits] = None) -> bool:
    """Parse an RPN formula and decide whether it is satisfiable.

    Args:
        source: Formula string
        limits: Resource bounds applied to parsing and search

    Returns:
        True if the formula is satisfiable

    Raises:
        ParseError: Formula is malformed (including the empty formula)
        LimitExceededError: A resource bound was exceeded

    Example:
        >>> sat("AA!&")
        False
    """
    return is_satisfiable(parse(source, limits), limits)
