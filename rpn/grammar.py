# rpn/grammar.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Stack-based parser turning RPN token streams into expression trees

"""Reverse-Polish parser for propositional formulas.

Postfix notation needs neither precedence rules nor lookahead, so the parser
is a single forward scan over the token stream that keeps an explicit stack
of finished subtrees:

- A constant or variable token pushes a leaf.
- '!' pops one operand and pushes its negation.
- A binary operator pops the right operand, then the left operand, and pushes
  the combined node.

After the scan exactly one tree must remain on the stack.
"""

from typing import Dict, List, Optional, Type

from utils.limits import DEFAULT_LIMITS, EngineLimits
from utils.logger import get_logger
from .lexer import FormulaLexer
from .exceptions import (
    IncompleteFormula,
    MissingOperand,
    ParseError,
    UnrecognizedSymbol,
)
from . import ast_nodes as ast


# Binary token type -> node class
BINARY_NODES: Dict[str, Type[ast.BinaryOp]] = {
    "AND": ast.And,
    "OR": ast.Or,
    "XOR": ast.Xor,
    "IMPLIES": ast.Implies,
    "IFF": ast.Iff,
}


class RPNParser:
    """Explicit-stack parser for RPN formulas.

    Each stack entry is paired with the depth of its subtree so that the
    configured depth bound can be enforced while the tree is being built,
    before any recursive consumer walks it.

    Attributes:
        limits: Resource bounds applied during parsing
    """

    def __init__(self, limits: Optional[EngineLimits] = None):
        self.limits = limits or DEFAULT_LIMITS

    def parse(self, text: str) -> ast.Expr:
        """Parse an RPN formula string into an expression tree.

        Args:
            text: Formula to parse

        Returns:
            Root node of the parsed expression

        Raises:
            UnrecognizedSymbol: A character outside the grammar was found
            MissingOperand: An operator had too few operands available
            IncompleteFormula: The scan ended with zero or several trees
            LimitExceededError: The tree would be deeper than limits.max_depth
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text!r}")

        stack: List[ast.Expr] = []
        depths: List[int] = []

        for token in FormulaLexer().tokenize(text):
            if token.type == "VARIABLE":
                if not token.value.isalpha():
                    raise UnrecognizedSymbol(token.value, token.index)
                stack.append(ast.Variable(token.value))
                depths.append(1)

            elif token.type in ("TRUE", "FALSE"):
                stack.append(ast.Constant(token.type == "TRUE"))
                depths.append(1)

            elif token.type == "NOT":
                if not stack:
                    raise MissingOperand(token.value, token.index)
                stack.append(ast.Not(stack.pop()))
                depths.append(self._deeper(depths.pop()))

            elif token.type in BINARY_NODES:
                if len(stack) < 2:
                    raise MissingOperand(token.value, token.index)
                right = stack.pop()
                left = stack.pop()
                stack.append(BINARY_NODES[token.type](left, right))
                depths.append(self._deeper(max(depths.pop(), depths.pop())))

            else:
                raise ParseError(f"Unhandled token type {token.type}")

        if len(stack) != 1:
            raise IncompleteFormula(expected=1, actual=len(stack))

        result = stack.pop()
        logger.formula_parsed(text, type(result).__name__)
        return result

    def _deeper(self, child_depth: int) -> int:
        depth = child_depth + 1
        self.limits.check("max_depth", depth)
        return depth
