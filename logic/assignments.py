# logic/assignments.py
# This file is part of Veritas - A Propositional Logic Engine
#
# Exhaustive enumeration of variable assignments

"""Enumeration of all assignments over an ordered variable list.

Assignment number i (0 <= i < 2^n) sets the variable at sorted position j to
true iff bit (n - 1 - j) of i is set. Position 0 is therefore the most
significant bit, and assignments are produced in increasing i order.
With no variables exactly one assignment, the empty one, is produced.
"""

from typing import FrozenSet, Iterator, Optional, Sequence, Tuple

from utils.limits import DEFAULT_LIMITS, EngineLimits


def assignment_for(index: int, variables: Sequence[str]) -> FrozenSet[str]:
    """Return the assignment with the given number over variables."""
    n = len(variables)
    return frozenset(
        name for j, name in enumerate(variables) if index & (1 << (n - 1 - j))
    )


def enumerate_assignments(
    variables: Sequence[str], limits: Optional[EngineLimits] = None
) -> Iterator[Tuple[int, FrozenSet[str]]]:
    """Yield (index, assignment) for every assignment over variables.

    Args:
        variables: Variables in bit-position order
        limits: Resource bounds; max_variables caps the 2^n enumeration

    Yields:
        Pairs of assignment number and the set of true variables

    Raises:
        LimitExceededError: More variables than limits.max_variables
    """
    (limits or DEFAULT_LIMITS).check("max_variables", len(variables))

    for index in range(1 << len(variables)):
        yield index, assignment_for(index, variables)
