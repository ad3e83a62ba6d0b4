"""Coverage tables relating prime implicants to the minterms they cover."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .implicant import Implicant


def coverage_populate(implicant: Implicant) -> list[int]:
    """Return the terms generated from an implicant's don't-care mask.

    The list starts with the base term, then the term with each single
    don't-care bit set, lowest bit first, then the term with every
    don't-care bit set. An implicant with no mask yields an empty list.
    """
    if not implicant.mask:
        return []
    result = [implicant.term]
    remaining = implicant.mask
    while remaining:
        bit = remaining & -remaining
        result.append(implicant.term + bit)
        remaining &= remaining - 1
    result.append(implicant.term + implicant.mask)
    return result


class CoverageTable:
    """A 0/1 table of implicants (rows) against minterms (columns).

    ``rmask`` and ``cmask`` flag rows and columns removed from further
    consideration; ``emask`` flags rows chosen as essential.
    """

    def __init__(self, table: Iterable[Iterable[int]], cols: int | None = None) -> None:
        self.table = [list(row) for row in table]
        self.rows = len(self.table)
        if cols is None:
            cols = len(self.table[0]) if self.table else 0
        if any(len(row) != cols for row in self.table):
            raise ValueError("all rows of a coverage table must have the same length")
        self.cols = cols
        self.rmask = [False] * self.rows
        self.cmask = [False] * self.cols
        self.emask = [False] * self.rows

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> CoverageTable:
        """Build a table from explicit row values."""
        return cls(rows)

    @classmethod
    def from_implicants(
        cls, implicants: Iterable[Implicant], minterms: Sequence[int]
    ) -> CoverageTable:
        """Build the table marking which minterms each implicant covers."""
        rows = []
        for imp in implicants:
            covered = set(coverage_populate(imp)) or {imp.term}
            rows.append([1 if m in covered else 0 for m in minterms])
        return cls(rows, len(minterms))

    def row(self, i: int) -> list[int]:
        """Return a copy of row ``i``."""
        return list(self.table[i])

    def column(self, j: int) -> list[int]:
        """Return the values of column ``j`` from top to bottom."""
        return [row[j] for row in self.table]

    def format(self) -> str:
        """Render the rows and columns still in play; essentials carry a '*'."""
        parts = ["\nCoverage Table:\n     "]
        live_cols = [j for j in range(self.cols) if not self.cmask[j]]
        parts.extend(f"M{j:<2d} " for j in live_cols)
        parts.append("\n")
        for i, row in enumerate(self.table):
            if self.rmask[i]:
                continue
            parts.append(f"P{i:<2d}{'*' if self.emask[i] else ' '} ")
            parts.extend(f" {row[j]}  " for j in live_cols)
            parts.append("\n")
        parts.append("\n")
        return "".join(parts)