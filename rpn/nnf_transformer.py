# rpn/nnf_transformer.py
# This file is part of Veritas - A Propositional Logic Engine
#
# AST transformer for Negation Normal Form conversion

"""Transforms expression trees into Negation Normal Form (NNF).

In NNF the only connectives are conjunction and disjunction, and negation
appears only directly above a variable or a constant. The rewrite is a
two-state automaton encoded as two mutually recursive procedures:

- normalize(e): rewrite e itself (the visit_* methods of NNFTransformer)
- negate(e): rewrite !e, pushing the negation inward (_negate)

normalize(!e) hands over to negate(e) and negate(!e) hands back to
normalize(e), which eliminates double negations on the way.

Rewrite laws:
    A ^ B   =>  (A & !B) | (!A & B)
    A > B   =>  !A | B
    A = B   =>  (!A | B) & (!B | A)
    !(A & B)  =>  !A | !B
    !(A | B)  =>  !A & !B
    !(A ^ B)  =>  (A & B) | (!A & !B)
    !(A > B)  =>  A & !B
    !(A = B)  =>  (A & !B) | (!A & B)
"""

from __future__ import annotations

from utils.logger import get_logger
from . import ast_nodes as ast
from .serializer import to_rpn


class NNFTransformer(ast.Visitor):
    """Rewrites an expression into an equivalent one in NNF.

    Each visit_* method returns the normalized form of its node; negated
    subtrees are delegated to _negate.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Transform the expression into NNF.

        Args:
            root: Root node of the expression to transform

        Returns:
            Equivalent expression in negation normal form
        """
        logger = get_logger()
        logger.debug(f"Starting NNF transformation of {type(root).__name__}")

        result = self.normalize(root)

        logger.transform_complete("NNF", to_rpn(result))
        return result

    def normalize(self, node: ast.Expr) -> ast.Expr:
        return node.accept(self)

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return n

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not) -> ast.Expr:
        return _negate(self, n.operand)

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(self.normalize(n.left), self.normalize(n.right))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return ast.Or(self.normalize(n.left), self.normalize(n.right))

    def visit_xor(self, n: ast.Xor) -> ast.Expr:
        return ast.Or(
            ast.And(self.normalize(n.left), _negate(self, n.right)),
            ast.And(_negate(self, n.left), self.normalize(n.right)),
        )

    def visit_implies(self, n: ast.Implies) -> ast.Expr:
        return ast.Or(_negate(self, n.left), self.normalize(n.right))

    def visit_iff(self, n: ast.Iff) -> ast.Expr:
        return ast.And(
            ast.Or(_negate(self, n.left), self.normalize(n.right)),
            ast.Or(_negate(self, n.right), self.normalize(n.left)),
        )


def _negate(nnf: NNFTransformer, expr: ast.Expr) -> ast.Expr:
    """Return the NNF of the negation of expr.

    Args:
        nnf: Transformer used for the non-negated subterms
        expr: Expression whose negation is pushed inward

    Returns:
        Equivalent NNF expression for !expr
    """
    if isinstance(expr, ast.Constant):
        return ast.Constant(not expr.value)

    if isinstance(expr, ast.Variable):
        return ast.Not(expr)

    # Double negation: !!A -> A
    if isinstance(expr, ast.Not):
        return nnf.normalize(expr.operand)

    # De Morgan: !(A & B) -> !A | !B
    if isinstance(expr, ast.And):
        return ast.Or(_negate(nnf, expr.left), _negate(nnf, expr.right))

    # De Morgan: !(A | B) -> !A & !B
    if isinstance(expr, ast.Or):
        return ast.And(_negate(nnf, expr.left), _negate(nnf, expr.right))

    if isinstance(expr, ast.Xor):
        return ast.Or(
            ast.And(nnf.normalize(expr.left), nnf.normalize(expr.right)),
            ast.And(_negate(nnf, expr.left), _negate(nnf, expr.right)),
        )

    if isinstance(expr, ast.Implies):
        return ast.And(nnf.normalize(expr.left), _negate(nnf, expr.right))

    if isinstance(expr, ast.Iff):
        return ast.Or(
            ast.And(nnf.normalize(expr.left), _negate(nnf, expr.right)),
            ast.And(_negate(nnf, expr.left), nnf.normalize(expr.right)),
        )

    raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def is_nnf(expr: ast.Expr) -> bool:
    """Return True if expr only uses constants, variables, negated leaves, & and |."""
    if ast.is_literal(expr):
        return True
    if isinstance(expr, (ast.And, ast.Or)):
        return is_nnf(expr.left) and is_nnf(expr.right)
    return False
