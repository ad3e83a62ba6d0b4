"""Command-line parsing for the minimiser."""

from __future__ import annotations

import getopt
import re
from dataclasses import dataclass, field

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class ParsedInput:
    """Minterms, don't-care terms and the number of variables."""

    included_terms: list[int] = field(default_factory=list)
    excluded_terms: list[int] = field(default_factory=list)
    variable_count: int = 0


def usage(prog_name: str) -> str:
    """Return the usage text for the program."""
    return (
        f"Usage: {prog_name} -v <varsize> -m <m-terms> -d <d-terms>\n"
        f"Example: {prog_name} -v 3 -m 1,2,3 -d 4,5,6"
    )


def _leading_int(text: str) -> int:
    """Read the leading integer of ``text``; text without one reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_terms(arg: str) -> list[int]:
    """Parse a comma separated list of terms, skipping empty entries."""
    return [_leading_int(tok) & 0xFFFF for tok in arg.split(",") if tok]


def parse_input(argv: list[str]) -> ParsedInput:
    """Parse ``-v``, ``-m`` and ``-d`` options from the arguments after the program name."""
    try:
        options, _ = getopt.gnu_getopt(list(argv), "v:m:d:")
    except getopt.GetoptError as exc:
        raise UsageError(usage("qmac")) from exc
    if not options:
        raise UsageError(usage("qmac"))

    varsize = 0
    m_arg: str | None = None
    d_arg: str | None = None
    for opt, value in options:
        if opt == "-v":
            varsize = _leading_int(value) & 0xFF
        elif opt == "-m":
            m_arg = value
        else:
            d_arg = value

    return ParsedInput(
        included_terms=parse_terms(m_arg) if m_arg is not None else [],
        excluded_terms=parse_terms(d_arg) if d_arg is not None else [],
        variable_count=varsize,
    )