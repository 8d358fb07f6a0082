# logic/__init__.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Semantic operations over parsed formulas

"""Evaluation and exhaustive search over propositional formulas.

This package provides:
  • evaluate / eval_formula: truth value under an assignment
  • collect_variables / sorted_variables: canonical variable order
  • sat / is_satisfiable / find_satisfying_assignment: brute-force satisfiability
  • truth_table / format_truth_table: full enumeration of a formula
"""

from .evaluator import Evaluator, evaluate, eval_formula
from .variables import collect_variables, sorted_variables, variables_in_order
from .assignments import assignment_for, enumerate_assignments
from .sat import sat, is_satisfiable, find_satisfying_assignment
from .truth_table import TruthTable, TruthTableRow, truth_table, format_truth_table

__all__ = [
    "Evaluator",
    "evaluate",
    "eval_formula",
    "collect_variables",
    "sorted_variables",
    "variables_in_order",
    "assignment_for",
    "enumerate_assignments",
    "sat",
    "is_satisfiable",
    "find_satisfying_assignment",
    "TruthTable",
    "TruthTableRow",
    "truth_table",
    "format_truth_table",
]
