"""Command-line entry point: two-level minimisation of a boolean function."""

from __future__ import annotations

import sys

from .coverage import CoverageTable
from .group import combine_groups, uncombined_terms
from .implicant import Implicant
from .parser import ParsedInput, UsageError, parse_input
from .reduction import reduce


def _check_terms(data: ParsedInput) -> None:
    limit = 1 << data.variable_count
    for term in (*data.included_terms, *data.excluded_terms):
        if term >= limit:
            raise ValueError(
                f"term {term} does not fit in {data.variable_count} variables"
            )


def prime_implicants(data: ParsedInput) -> list[Implicant]:
    """Find the prime implicants by repeatedly merging adjacent terms."""
    _check_terms(data)
    n = data.variable_count
    groups: list[list[Implicant]] = [[] for _ in range(n + 1)]
    for term in data.included_terms:
        imp = Implicant(term)
        groups[imp.ones_count].append(imp)
    for term in data.excluded_terms:
        imp = Implicant(term, is_dontcare=True)
        groups[imp.ones_count].append(imp)

    primes: list[Implicant] = []
    while True:
        merged: list[Implicant] = []
        for i in range(n + 1):
            if i >= n:
                groups[i].clear()
                continue
            if not groups[i]:
                continue
            if groups[i + 1]:
                merged.extend(combine_groups(groups[i], groups[i + 1]))
            primes.extend(uncombined_terms(groups[i]))
            groups[i].clear()

        if not merged:
            break
        for imp in merged:
            groups[imp.ones_count].append(imp)
    return primes


def minimize(data: ParsedInput) -> list[Implicant]:
    """Return the implicants selected by reducing the coverage table."""
    primes = prime_implicants(data)
    table = CoverageTable.from_implicants(primes, data.included_terms)
    return [primes[i] for i in reduce(table)]


def main(argv: list[str] | None = None) -> int:
    """Parse the command line, minimise, and print the selected implicants."""
    args = sys.argv[1:] if argv is None else argv
    try:
        data = parse_input(args)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        selected = minimize(data)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for imp in selected:
        print(imp.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())