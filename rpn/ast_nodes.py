# rpn/ast_nodes.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Expression tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Trees are never mutated after
construction; every transformation builds a new tree.

Node Types:
    Constant: Boolean constants (glyphs 0 and 1)
    Variable: Single-character propositional variables
    Not: Unary negation
    And, Or, Xor, Implies, Iff: Binary connectives

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def operands(self) -> Tuple[Expr, ...]:
        """Child nodes in left-to-right order (empty for leaves)."""
        return ()

    def __str__(self) -> str:
        """Return parenthesised infix representation of the node."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant leaf.

    Attributes:
        value: The fixed truth value
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable leaf.

    Attributes:
        name: Single alphabetic character identifying the variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation that inverts the truth value of its operand.

    Attributes:
        operand: The expression being negated
    """

    symbol: ClassVar[str] = "!"

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    @property
    def operands(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common base of the binary connectives.

    Operand order is significant: it decides the meaning of implication
    and the serialized form of every connective.

    Attributes:
        left: Left operand
        right: Right operand
    """

    symbol: ClassVar[str] = "?"

    left: Expr
    right: Expr

    @property
    def operands(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Logical conjunction, true when both operands are true."""

    symbol: ClassVar[str] = "&"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Logical disjunction, true when at least one operand is true."""

    symbol: ClassVar[str] = "|"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryOp):
    """Exclusive or, true when the operands differ."""

    symbol: ClassVar[str] = "^"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication, false only when left is true and right is false."""

    symbol: ClassVar[str] = ">"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryOp):
    """Equivalence, true when both operands have the same value."""

    symbol: ClassVar[str] = "="

    def accept(self, v: Visitor):
        return v.visit_iff(self)


def is_literal(node: Expr) -> bool:
    """Return True for a constant, a variable, or a negated leaf."""
    if isinstance(node, (Constant, Variable)):
        return True
    return isinstance(node, Not) and isinstance(node.operand, (Constant, Variable))
