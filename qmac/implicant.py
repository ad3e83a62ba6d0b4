"""Implicants: a term together with a mask of don't-care bit positions."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import popcount

DEFAULT_MASK = 0


@dataclass
class Implicant:
    """A product term; bits set in ``mask`` are positions that may take any value."""

    term: int
    mask: int = DEFAULT_MASK
    is_dontcare: bool = False
    is_combined: bool = False

    @property
    def ones_count(self) -> int:
        """Number of set bits in the base term."""
        return popcount(self.term)

    def can_combine(self, other: Implicant) -> bool:
        """True when both differ in exactly one bit and share the same mask."""
        return popcount(self.term ^ other.term) == 1 and self.mask == other.mask

    def implies(self, other: Implicant) -> bool:
        """True when combining with ``other`` would repeat an already produced term."""
        return (self.term ^ other.term) < self.mask

    def combine(self, other: Implicant) -> Implicant:
        """Merge two adjacent implicants into one with an extra don't-care bit."""
        return Implicant(
            self.term & other.term,
            (self.term ^ other.term) ^ self.mask,
            self.is_dontcare and other.is_dontcare,
        )

    def format(self) -> str:
        """Return a one-line description of this implicant."""
        t, m = self.term, self.mask
        return (
            f"<term: {t:<2d} ({t:08b}) | mask: {m:<2d} ({m:08b}) | "
            f"ones_count: {self.ones_count:<2d}| combined: {int(self.is_combined)} | "
            f"is_dontcare: {int(self.is_dontcare)}>"
        )