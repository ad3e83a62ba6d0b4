import pytest

from qmac.coverage import CoverageTable, coverage_populate
from qmac.implicant import Implicant


def test_coverage_populate_basic():
    result = coverage_populate(Implicant(0b1000, 0b0110))
    assert result[:4] == [8, 10, 12, 14]


def test_coverage_populate_nonzero_term():
    result = coverage_populate(Implicant(0b0100, 0b0001))
    assert result[:3] == [0b0100, 0b0101, 0b0101]


def test_coverage_populate_zero_mask():
    assert coverage_populate(Implicant(5, 0)) == []


def test_coverage_table_simple():
    group = [Implicant(1, 6), Implicant(2, 5), Implicant(4, 3)]
    ct = CoverageTable.from_implicants(group, [1, 2, 3, 4, 5, 6, 7])
    expected = [
        [1, 0, 1, 0, 1, 0, 1],
        [0, 1, 1, 0, 0, 1, 1],
        [0, 0, 0, 1, 1, 1, 1],
    ]
    assert [ct.row(i) for i in range(3)] == expected
    assert (ct.rows, ct.cols) == (3, 7)


def test_from_implicants_without_mask_covers_own_term():
    ct = CoverageTable.from_implicants([Implicant(3)], [1, 3, 5])
    assert ct.row(0) == [0, 1, 0]


def test_from_implicants_empty_keeps_columns():
    ct = CoverageTable.from_implicants([], [1, 2])
    assert (ct.rows, ct.cols) == (0, 2)
    assert ct.cmask == [False, False]


def test_from_rows_masks_start_clear():
    ct = CoverageTable.from_rows([[1, 0, 1], [0, 1, 0]])
    assert ct.rmask == [False, False]
    assert ct.emask == [False, False]
    assert ct.cmask == [False, False, False]
    assert ct.column(2) == [1, 0]


def test_from_rows_rejects_ragged():
    with pytest.raises(ValueError):
        CoverageTable.from_rows([[1, 0], [1]])


def test_row_is_a_copy():
    ct = CoverageTable.from_rows([[1, 0]])
    ct.row(0)[0] = 0
    assert ct.row(0) == [1, 0]


def test_format_hides_masked_and_stars_essentials():
    ct = CoverageTable.from_rows([[1, 0], [0, 1]])
    ct.emask[0] = True
    ct.rmask[1] = True
    ct.cmask[1] = True
    text = ct.format()
    assert "Coverage Table:" in text
    assert "M0 " in text
    assert "M1" not in text
    assert "P0 *" in text
    assert "P1" not in text