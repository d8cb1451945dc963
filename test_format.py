"""
Tests for DIMACS formatting and for read/write round trips.
"""

import io
import random

import pytest

from dimacs_cnf import (
    CNFFormula,
    fmt_clause,
    fmt_comment,
    fmt_problem,
    format_cnf,
    generate_random_formula,
    parse_cnf,
    read_cnf,
    write_cnf,
)


def test_fmt_helpers():
    assert fmt_clause([1, -2, 3]) == "1 -2 3 0"
    assert fmt_clause([]) == "0"
    assert fmt_problem(3, 4) == "p cnf 3 4"
    assert fmt_comment("hello") == "c hello"
    assert fmt_comment("") == "c"


def test_format_cnf():
    formula = CNFFormula(num_vars=3, clauses=[[1, 2, 3], [-2, -3]])
    text = format_cnf(formula, comments=["generated"])
    assert text == "c generated\np cnf 3 2\n1 2 3 0\n-2 -3 0\n"


def test_write_matches_format():
    formula = CNFFormula(num_vars=2, clauses=[[1], [-1, 2]])
    out = io.StringIO()
    write_cnf(formula, out)
    assert out.getvalue() == format_cnf(formula)


def test_round_trip_example():
    formula = CNFFormula(num_vars=3, clauses=[[1, 2, 3], [1, -2, 3], [1, -3], [-2, -3]])
    assert parse_cnf(format_cnf(formula)) == formula


def test_round_trip_empty():
    formula = CNFFormula()
    assert parse_cnf(format_cnf(formula)) == formula


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_round_trip_random(seed):
    formula = generate_random_formula(12, rng=random.Random(seed))
    out = io.StringIO()
    write_cnf(formula, out, comments=[f"seed {seed}"])
    out.seek(0)
    parsed = read_cnf(out, keep_comments=True, check_bounds=True)
    assert parsed == formula
    assert parsed.comments == [f"c seed {seed}"]


def test_generate_random_formula():
    formula = generate_random_formula(5, clause_length=3, n_clauses=7, rng=random.Random(42))
    assert formula.num_vars == 5
    assert formula.num_clauses == 7
    for clause in formula.clauses:
        assert len(clause) == 3
        assert len({abs(lit) for lit in clause}) == 3
        assert all(1 <= abs(lit) <= 5 for lit in clause)
    assert formula.max_var() <= 5


def test_generate_random_formula_rejects_long_clauses():
    with pytest.raises(ValueError):
        generate_random_formula(2, clause_length=3)
