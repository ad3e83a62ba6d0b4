"""Dominance comparison of two coverage vectors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import repeat


class Dominance(Enum):
    """Outcome of comparing two coverage vectors."""

    A_DOMINATES = "a_dominates"
    B_DOMINATES = "b_dominates"
    NO_DOMINANCE = "no_dominance"
    EQUAL = "equal"


def check_dominance(
    a: Sequence[int], b: Sequence[int], mask: Iterable[bool] | None = None
) -> Dominance:
    """Compare ``a`` and ``b`` element by element, skipping masked positions."""
    skip = repeat(False) if mask is None else mask
    a_strict = b_strict = False
    for a_value, b_value, skipped in zip(a, b, skip):
        if skipped:
            continue
        if a_value == 1 and b_value == 0:
            a_strict = True
        elif a_value == 0 and b_value == 1:
            b_strict = True

    if not a_strict and not b_strict:
        return Dominance.EQUAL
    if a_strict and not b_strict:
        return Dominance.A_DOMINATES
    if b_strict and not a_strict:
        return Dominance.B_DOMINATES
    return Dominance.NO_DOMINANCE