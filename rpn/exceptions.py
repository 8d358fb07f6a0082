# rpn/exceptions.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Custom exceptions for formula parsing and transformation

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while parsing, transforming
and searching propositional formulas. Malformed user input is always reported
as a subclass of ParseError so that callers can tell a malformed formula from
an unsatisfiable one. Resource bounds and internal contract violations have
their own classes and are never ParseErrors.
"""

from typing import Optional

from utils.limits import LimitExceededError


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class for every error caused by malformed formula text. Used
    throughout the parsing pipeline to provide consistent error handling.
    """

    pass


class UnrecognizedSymbol(ParseError):
    """A character outside the formula grammar was found.

    Attributes:
        character: The offending character
        position: Zero-based index of the character in the input, if known
    """

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unrecognized symbol '{character}'{where}")


class MissingOperand(ParseError):
    """An operator was reached with too few operands on the stack.

    Attributes:
        character: The operator glyph that could not be applied
        position: Zero-based index of the operator in the input, if known
    """

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Missing operand for operator '{character}'{where}")


class IncompleteFormula(ParseError):
    """The scan finished with a stack size other than one.

    Attributes:
        expected: Number of items that should remain (always 1)
        actual: Number of items that remained
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Incomplete formula: expected {expected} expression on the stack, "
            f"found {actual}"
        )


class UnknownVariable(ParseError):
    """A variable appeared where only constants are allowed."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown variable '{name}' in constant formula")


class UnexpectedOperator(RuntimeError):
    """An operator that a transformation stage does not accept was found.

    Raised by the CNF transformer when its input is not in negation normal
    form. This signals a programming error, not malformed user input.
    """

    def __init__(self, node):
        self.node = node
        super().__init__(
            f"Unexpected {type(node).__name__} node in CNF input: {node}"
        )


__all__ = [
    "ParseError",
    "UnrecognizedSymbol",
    "MissingOperand",
    "IncompleteFormula",
    "UnknownVariable",
    "LimitExceededError",
    "UnexpectedOperator",
]
