# rpn/serializer.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Rendering of expression trees back to RPN strings

"""Serialize expression trees to reverse-Polish strings.

This is the inverse of the parser: leaves render as their glyph, a negation
renders its operand followed by '!', and a binary node renders its left
operand, its right operand and then its operator glyph. Parsing the output
yields a tree equal to the input.

The walk uses an explicit stack instead of recursion, so that the long
right-associative chains produced by CNF conversion serialize regardless of
the interpreter recursion limit.
"""

from typing import Dict, List, Tuple

from . import ast_nodes as ast


ASCII_GLYPHS: Dict[str, str] = {
    "0": "0",
    "1": "1",
    "!": "!",
    "&": "&",
    "|": "|",
    "^": "^",
    ">": ">",
    "=": "=",
}

UNICODE_GLYPHS: Dict[str, str] = {
    "0": "⊥",
    "1": "⊤",
    "!": "¬",
    "&": "∧",
    "|": "∨",
    "^": "⊕",
    ">": "⇒",
    "=": "⇔",
}

STYLES: Dict[str, Dict[str, str]] = {
    "ascii": ASCII_GLYPHS,
    "unicode": UNICODE_GLYPHS,
}


def to_rpn(expr: ast.Expr, style: str = "ascii") -> str:
    """Render an expression as an RPN string.

    Args:
        expr: Root of the expression to render
        style: "ascii" for the canonical glyphs, "unicode" for logic symbols

    Returns:
        Postfix representation of the expression

    Raises:
        ValueError: Unknown style name
    """
    try:
        glyphs = STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown glyph style: {style!r}") from None

    output: List[str] = []
    pending: List[Tuple[ast.Expr, bool]] = [(expr, False)]

    while pending:
        node, operands_done = pending.pop()

        if isinstance(node, ast.Variable):
            output.append(node.name)
        elif isinstance(node, ast.Constant):
            output.append(glyphs["1" if node.value else "0"])
        elif operands_done:
            output.append(glyphs[node.symbol])
        else:
            pending.append((node, True))
            # Right pushed first so the left operand is emitted first
            for operand in reversed(node.operands):
                pending.append((operand, False))

    return "".join(output)
