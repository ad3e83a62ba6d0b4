import pytest

from qmac.cli import main, minimize, prime_implicants
from qmac.coverage import coverage_populate
from qmac.parser import ParsedInput, usage


def _covered(imp):
    return frozenset(coverage_populate(imp) or [imp.term])


def test_prime_implicants_pairs():
    data = ParsedInput([1, 2, 3], [], 3)
    primes = prime_implicants(data)
    assert {_covered(p) for p in primes} == {frozenset({1, 3}), frozenset({2, 3})}
    assert all(p.is_combined for p in primes)
    assert not any(p.is_dontcare for p in primes)


def test_prime_implicants_single_merge():
    data = ParsedInput([0, 1], [], 2)
    primes = prime_implicants(data)
    assert len(primes) == 1
    assert _covered(primes[0]) == frozenset({0, 1})


def test_prime_implicants_respect_dont_cares():
    data = ParsedInput([1, 2, 3], [4, 5, 6], 3)
    allowed = {1, 2, 3, 4, 5, 6}
    primes = prime_implicants(data)
    for p in primes:
        assert _covered(p) <= allowed
        assert not p.is_dontcare
    for m in data.included_terms:
        assert any(m in _covered(p) for p in primes)


def test_prime_implicants_rejects_out_of_range_term():
    with pytest.raises(ValueError):
        prime_implicants(ParsedInput([8], [], 3))


def test_minimize_all_essential():
    data = ParsedInput([1, 2, 3], [], 3)
    selected = minimize(data)
    covered = set().union(*(_covered(p) for p in selected))
    assert covered == {1, 2, 3}
    assert len(selected) == 2


def test_minimize_selects_subset_of_primes():
    data = ParsedInput([1, 2, 3], [4, 5, 6], 3)
    primes = prime_implicants(data)
    selected = minimize(data)
    prime_keys = {(p.term, p.mask) for p in primes}
    assert selected
    assert {(s.term, s.mask) for s in selected} <= prime_keys


def test_main_prints_selected(capsys):
    assert main(["-v", "3", "-m", "1,2,3"]) == 0
    out = capsys.readouterr().out
    expected = [imp.format() for imp in minimize(ParsedInput([1, 2, 3], [], 3))]
    assert out.splitlines() == expected


def test_main_usage_on_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == usage("qmac")


def test_main_out_of_range_term(capsys):
    assert main(["-v", "2", "-m", "9"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "9" in captured.err