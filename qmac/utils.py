"""Small combinatorial helpers used by the minimiser."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r), or 0 when r exceeds n."""
    if r > n:
        return 0
    if r == 0 or r == n:
        return 1
    return n_choose_r(n - 1, r - 1) + n_choose_r(n - 1, r)


def popcount(n: int) -> int:
    """Return the number of set bits in a non-negative integer."""
    return bin(n).count("1")


def max_combination(var_count: int, minimization_level: int) -> int:
    """Return the largest number of implicants possible at a combining level.

    At level ``k`` an implicant has ``k`` don't-care positions chosen from
    ``var_count`` variables, and the remaining positions take any value.
    """
    if minimization_level > var_count:
        return 0
    if var_count - minimization_level >= 32:
        return 0
    combinations = n_choose_r(var_count, minimization_level)
    return combinations * (1 << (var_count - minimization_level))