"""Quine-McCluskey Boolean minimization with coverage-table reduction."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "coverage",
    "dominance",
    "group",
    "implicant",
    "parser",
    "reduction",
    "utils",
]