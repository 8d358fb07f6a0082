# rpn/lexer.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Lexical analyzer for RPN formula tokenization using SLY

"""Lexical analyzer for reverse-Polish formula strings.

Every token of the formula language is exactly one character long, so the
lexer is a thin classification layer: it maps each character onto a token
type and rejects anything outside the grammar. No character is ignored,
whitespace included.

Supported Tokens:
- Constants: 0 / ⊥ (false), 1 / ⊤ (true)
- Variables: any single alphabetic character (case-sensitive)
- Operators: ! / ¬, & / ∧, | / ∨, ^ / ⊕, > / ⇒, = / ⇔
"""

from sly import Lexer
from utils.logger import get_logger
from .exceptions import UnrecognizedSymbol


class FormulaLexer(Lexer):
    """SLY-based lexer for RPN formula tokenization.

    Attributes:
        tokens: Set of valid token types
        VARIABLE: Word character that is neither a digit nor an underscore
    """

    tokens = {
        "FALSE",
        "TRUE",
        "VARIABLE",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "IMPLIES",
        "IFF",
    }

    FALSE = r"0|⊥"
    TRUE = r"1|⊤"

    NOT = r"!|¬"
    AND = r"&|∧"
    OR = r"\||∨"
    XOR = r"\^|⊕"
    IMPLIES = r">|⇒"
    IFF = r"=|⇔"

    # Alphabetic check is completed by the parser with str.isalpha()
    VARIABLE = r"[^\W\d_]"

    def error(self, t):
        """Handle characters outside the formula grammar.

        Args:
            t: SLY token object whose value starts at the offending character

        Raises:
            UnrecognizedSymbol: Always raised with the character and position
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1
        raise UnrecognizedSymbol(illegal_char, error_pos)
