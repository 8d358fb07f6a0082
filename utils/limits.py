# utils/limits.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Resource bounds for parsing, normal-form conversion and exhaustive search

"""Configurable resource bounds for the formula engine.

Every algorithm in the engine is total over well-formed formulas, but some of
them are exponential (CNF distribution, 2^n assignment enumeration) or
recursive (tree walks). The limits defined here turn those cases into a
LimitExceededError instead of an exhausted interpreter stack or an endless
search. A bound of None disables the corresponding check.
"""

from dataclasses import dataclass, replace
from typing import Optional


class LimitExceededError(RuntimeError):
    """A configured resource bound was exceeded.

    Attributes:
        limit: Name of the bound (e.g. "max_depth")
        value: The value that was reached
        bound: The configured maximum
    """

    def __init__(self, limit: str, value: int, bound: int):
        self.limit = limit
        self.value = value
        self.bound = bound
        super().__init__(f"Resource limit {limit}={bound} exceeded (reached {value})")


@dataclass(frozen=True)
class EngineLimits:
    """Resource bounds shared by the parser, transformers and search.

    Attributes:
        max_depth: Deepest expression tree the parser will build
        max_variables: Most distinct variables enumerated by sat and truth tables
        max_clauses: Most clauses the CNF distribution may produce
    """

    max_depth: Optional[int] = 256
    max_variables: Optional[int] = 20
    max_clauses: Optional[int] = 256

    def with_overrides(self, **overrides) -> "EngineLimits":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def check(self, limit: str, value: int) -> None:
        """Raise LimitExceededError if value is above the named bound."""
        bound = getattr(self, limit)
        if bound is not None and value > bound:
            raise LimitExceededError(limit, value, bound)


DEFAULT_LIMITS = EngineLimits()

UNLIMITED = EngineLimits(max_depth=None, max_variables=None, max_clauses=None)
