# qmac

`qmac` minimizes Boolean functions with the Quine-McCluskey method. It
groups terms by their number of set bits, merges adjacent terms step by
step into prime implicants, builds a coverage table of those primes
against the required minterms, and reduces the table by selecting
essential implicants and applying row and column dominance until nothing
changes. The selected implicants are printed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
qmac -v <varsize> -m <m-terms> -d <d-terms>
```

- `-v` number of input variables
- `-m` comma-separated minterms the function must cover
- `-d` comma-separated don't-care terms, used for merging but never required

Example:

```
qmac -v 3 -m 1,2,3 -d 4,5,6
```

Each selected implicant is printed on one line with its base term and its
mask of don't-care bit positions (both in decimal and in 8-digit binary),
the number of set bits in the term, and its `combined` and `is_dontcare`
flags. An implicant with term `4` and mask `3` stands for `1--`, covering
minterms 4, 5, 6 and 7.

If no options are given or an option is not recognised, the usage text is
printed and the command exits with status 1. A term that does not fit in
the given number of variables is reported on standard error, also with
status 1.

## Library use

The steps of the command are available as functions. `parse_input` takes
the arguments that follow the program name:

```python
from qmac.parser import parse_input
from qmac.cli import prime_implicants, minimize

data = parse_input(["-v", "3", "-m", "1,2,3", "-d", "4,5,6"])
primes = prime_implicants(data)
selected = minimize(data)
for implicant in selected:
    print(implicant.format())
```

`qmac.cli.main(argv=None)` runs the whole command and returns its exit
status; with no argument it reads `sys.argv`.

Lower-level pieces:

- `qmac.parser` – `ParsedInput` (`included_terms`, `excluded_terms`,
  `variable_count`), `parse_terms`, `parse_input`, `usage` and
  `UsageError`.
- `qmac.implicant.Implicant` – a `term` with a don't-care `mask` and the
  flags `is_dontcare` and `is_combined`; the `ones_count` property and the
  methods `can_combine`, `implies`, `combine` and `format`.
- `qmac.group` – `combine_groups`, `uncombined_terms`, `format_group`.
- `qmac.coverage` – `coverage_populate` and `CoverageTable`, built with
  `CoverageTable.from_implicants(implicants, minterms)` or
  `CoverageTable.from_rows(rows)`; it has `row`, `column` and `format`, and
  the lists `rmask`, `cmask` and `emask` for removed rows, removed columns
  and essential rows.
- `qmac.dominance` – `check_dominance(a, b, mask)` returning a `Dominance`
  value (`A_DOMINATES`, `B_DOMINATES`, `NO_DOMINANCE`, `EQUAL`).
- `qmac.reduction` – `remove_essential`, `row_dominance`, `col_dominance`
  and `reduce`, which repeats all three until the table stops changing and
  returns the indices of the essential rows.
- `qmac.utils` – `n_choose_r`, `popcount`, `max_combination`.

## Limits

- Reduction stops as soon as no essential row and no dominance is found.
  When the table still holds a cyclic core at that point, no further
  choice is made, so the printed implicants may not cover every required
  minterm.
- Results are printed as terms and masks; no algebraic expression is
  written out.