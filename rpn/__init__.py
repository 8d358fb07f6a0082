# rpn/__init__.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Formula parsing and normal-form transformation components

"""Propositional formula parsing and normalization.

This module provides the parsing pipeline of the engine. Formulas are written
in reverse-Polish notation, one character per token, and are turned into
immutable expression trees that can be rewritten into Negation Normal Form
(NNF) and Conjunctive Normal Form (CNF) and serialized back to RPN.

Core Functions:
    parse: Converts formula strings into expression trees
    parse_and_nnf: Parsing followed by NNF transformation
    parse_and_cnf: Parsing followed by NNF and CNF transformation
    negation_normal_form: RPN in, NNF as RPN out
    conjunctive_normal_form: RPN in, CNF as RPN out

Grammar:
    0, 1            constants false and true
    A-Z, a-z, ...   single-character alphabetic variables
    !               negation (unary)
    &, |, ^, >, =   and, or, xor, implication, equivalence (binary)

Example:
    >>> from rpn import conjunctive_normal_form
    >>> conjunctive_normal_form("ABC&|")
    'AB|AC|&'
"""

from typing import Optional

from utils.limits import EngineLimits, LimitExceededError
from utils.logger import get_logger
from .exceptions import ParseError
from .grammar import RPNParser
from .nnf_transformer import NNFTransformer
from .cnf_transformer import CNFTransformer
from .serializer import to_rpn
from . import ast_nodes as ast


def parse(source: str, limits: Optional[EngineLimits] = None) -> ast.Expr:
    """Parse an RPN formula string into an expression tree.

    Uses a fresh parser instance for each invocation so that parsing is
    stateless.

    Args:
        source: Formula string to parse
        limits: Resource bounds (defaults to DEFAULT_LIMITS)

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula is malformed (see rpn.exceptions for subclasses)
        LimitExceededError: Formula nests deeper than limits.max_depth

    Example:
        >>> parse("AB&!")
        Not(operand=And(left=Variable(name='A'), right=Variable(name='B')))
    """
    logger = get_logger()
    parser = RPNParser(limits)

    try:
        return parser.parse(source)

    except ParseError as exc:
        logger.debug(f"ParseError encountered during formula parsing: {exc}")
        raise

    except LimitExceededError:
        logger.debug("Resource limit hit during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_nnf(source: str, limits: Optional[EngineLimits] = None) -> ast.Expr:
    """Parse a formula and transform it to Negation Normal Form.

    Args:
        source: Formula string to parse and transform
        limits: Resource bounds (defaults to DEFAULT_LIMITS)

    Returns:
        Root node of the NNF expression
    """
    return NNFTransformer().transform(parse(source, limits))


def parse_and_cnf(source: str, limits: Optional[EngineLimits] = None) -> ast.Expr:
    """Parse a formula and transform it to Conjunctive Normal Form.

    The formula is first rewritten into NNF, then distributed and flattened.

    Args:
        source: Formula string to parse and transform
        limits: Resource bounds (defaults to DEFAULT_LIMITS)

    Returns:
        Root node of the CNF expression

    Raises:
        ParseError: Formula is malformed
        LimitExceededError: Parsing or distribution exceeded a bound
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to CNF: {source!r}")

    nnf = parse_and_nnf(source, limits)
    return CNFTransformer(limits).transform(nnf)


def negation_normal_form(source: str, limits: Optional[EngineLimits] = None) -> str:
    """Return the NNF of an RPN formula as an RPN string.

    Example:
        >>> negation_normal_form("AB&!")
        'A!B!|'
    """
    return to_rpn(parse_and_nnf(source, limits))


def conjunctive_normal_form(source: str, limits: Optional[EngineLimits] = None) -> str:
    """Return the CNF of an RPN formula as an RPN string.

    Example:
        >>> conjunctive_normal_form("AB=")
        'A!B|B!A|&'
    """
    return to_rpn(parse_and_cnf(source, limits))


__all__ = [
    "parse",
    "parse_and_nnf",
    "parse_and_cnf",
    "negation_normal_form",
    "conjunctive_normal_form",
    "to_rpn",
    "ParseError",
]

__version__ = "1.0.0"
__description__ = "RPN formula parsing and normal-form transformation components"
