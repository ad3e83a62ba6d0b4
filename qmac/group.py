"""Operations on groups (lists) of implicants."""

from __future__ import annotations

from collections.abc import Iterable

from .implicant import Implicant


def combine_groups(a: Iterable[Implicant], b: Iterable[Implicant]) -> list[Implicant]:
    """Combine every adjacent pair from ``a`` and ``b``.

    Both members of each adjacent pair are marked as combined. Pairs whose
    merge would repeat an already produced implicant add nothing.
    """
    b = list(b)
    merged: list[Implicant] = []
    for x in a:
        for y in b:
            if not x.can_combine(y):
                continue
            x.is_combined = True
            y.is_combined = True
            if x.implies(y):
                continue
            merged.append(x.combine(y))
    return merged


def uncombined_terms(group: Iterable[Implicant]) -> list[Implicant]:
    """Return the implicants that were never combined and are not don't-cares.

    Each returned implicant is marked combined so it is collected only once.
    """
    found: list[Implicant] = []
    for imp in group:
        if not imp.is_combined and not imp.is_dontcare:
            found.append(imp)
            imp.is_combined = True
    return found


def format_group(group: Iterable[Implicant], name: str) -> str:
    """Return a header line for the group followed by one line per implicant."""
    items = list(group)
    lines = [f"<Group[{name}] -> size: {len(items)}>"]
    lines.extend(imp.format() for imp in items)
    return "\n".join(lines)