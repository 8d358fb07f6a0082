# logic/truth_table.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Truth-table generation and rendering

"""Truth tables over the sorted variables of a formula.

Rows follow the same enumeration as the satisfiability search, in strictly
increasing assignment number, and record each variable's value in sorted
order followed by the formula's value.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from rpn import parse
from rpn import ast_nodes as ast
from utils.limits import EngineLimits
from utils.logger import get_logger
from .assignments import enumerate_assignments
from .evaluator import evaluate
from .variables import sorted_variables


@dataclass(frozen=True)
class TruthTableRow:
    """One assignment and the formula value under it.

    Attributes:
        bits: Value of each variable, in sorted variable order
        result: Value of the formula
    """

    bits: Tuple[bool, ...]
    result: bool

    def as_digits(self) -> str:
        """Return the row as a 0/1 string, variables first then the result."""
        return "".join("1" if bit else "0" for bit in (*self.bits, self.result))


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        variables: Sorted variable names (column order)
        rows: One row per assignment, in enumeration order
    """

    variables: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def to_markdown(self) -> str:
        """Render the table with a '=' column for the formula value.

        Example:
            | A | B | = |
            |---|---|---|
            | 0 | 0 | 0 |
        """
        lines: List[str] = []
        lines.append("|" + "".join(f" {name} |" for name in self.variables) + " = |")
        lines.append("|---" * (len(self.variables) + 1) + "|")
        for row in self.rows:
            lines.append("|" + "".join(f" {digit} |" for digit in row.as_digits()))
        return "\n".join(lines)


def truth_table(expr: ast.Expr, limits: Optional[EngineLimits] = None) -> TruthTable:
    """Evaluate expr under every assignment over its sorted variables.

    Args:
        expr: Expression to tabulate
        limits: Resource bounds; max_variables caps the table size

    Returns:
        TruthTable with 2^n rows for n distinct variables

    Raises:
        LimitExceededError: The expression has more than limits.max_variables
    """
    variables = sorted_variables(expr)
    rows = tuple(
        TruthTableRow(
            bits=tuple(name in assignment for name in variables),
            result=evaluate(expr, assignment),
        )
        for _, assignment in enumerate_assignments(variables, limits)
    )

    get_logger().debug(f"Truth table over [{''.join(variables)}] has {len(rows)} rows")
    return TruthTable(variables=tuple(variables), rows=rows)


def format_truth_table(source: str, limits: Optional[EngineLimits] = None) -> str:
    """Parse a formula and return its Markdown truth table.

    Raises:
        ParseError: Formula is malformed
    """
    return truth_table(parse(source, limits), limits).to_markdown()
