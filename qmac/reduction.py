"""Reduction steps applied to a coverage table until nothing changes."""

from __future__ import annotations

from .coverage import CoverageTable
from .dominance import Dominance, check_dominance


def _apply_dominance(mask: list[bool], a: int, b: int, result: Dominance) -> bool:
    """Mask the line that loses the comparison; report whether one was masked."""
    if result is Dominance.A_DOMINATES:
        mask[b] = True
    elif result is Dominance.B_DOMINATES:
        mask[a] = True
    elif result is Dominance.EQUAL:
        mask[max(a, b)] = True
    else:
        return False
    return True


def remove_essential(table: CoverageTable) -> bool:
    """Select rows that alone cover some live column.

    Each such row is flagged essential and removed, and every column it
    covers is removed too. Returns True when at least one row was selected.
    """
    found = False
    for j in range(table.cols):
        if table.cmask[j]:
            continue
        covering = [
            i
            for i in range(table.rows)
            if not table.rmask[i] and table.table[i][j] == 1
        ]
        if len(covering) != 1:
            continue
        row = covering[0]
        found = True
        table.emask[row] = True
        table.rmask[row] = True
        for k, value in enumerate(table.table[row]):
            if value == 1:
                table.cmask[k] = True
    return found


def row_dominance(table: CoverageTable) -> bool:
    """Remove rows dominated by another live row; of two equal rows, the later goes."""
    found = False
    for i in range(table.rows):
        if table.rmask[i]:
            continue
        for k in range(table.rows):
            if k == i or table.rmask[k]:
                continue
            result = check_dominance(table.row(i), table.row(k), table.cmask)
            if _apply_dominance(table.rmask, i, k, result):
                found = True
    return found


def col_dominance(table: CoverageTable) -> bool:
    """Remove columns dominated by another live column; of two equal ones, the later goes."""
    found = False
    for j in range(table.cols):
        if table.cmask[j]:
            continue
        for k in range(table.cols):
            if k == j or table.cmask[k]:
                continue
            result = check_dominance(table.column(j), table.column(k), table.rmask)
            if _apply_dominance(table.cmask, j, k, result):
                found = True
    return found


def reduce(table: CoverageTable) -> list[int]:
    """Run all reduction steps until none changes the table.

    Returns the indices of the rows flagged essential.
    """
    while True:
        changed = remove_essential(table)
        changed |= row_dominance(table)
        changed |= col_dominance(table)
        if not changed:
            break
    return [i for i, essential in enumerate(table.emask) if essential]