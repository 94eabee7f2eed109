import pytest
from rdflib import Namespace

from karyotype_owl.expressions import (
    ExactCardinality,
    Intersection,
    SomeValuesFrom,
    exactly,
    intersection,
    some,
)

EX = Namespace("http://example.org/")


def test_some_returns_one_restriction_per_filler():
    assert some(EX.p, EX.A, EX.B) == [SomeValuesFrom(EX.p, EX.A), SomeValuesFrom(EX.p, EX.B)]


def test_intersection_splices_lists_but_not_intersections():
    inner = intersection(EX.A, EX.B)
    outer = intersection(EX.C, some(EX.p, EX.D), inner)

    assert outer.operands == (EX.C, SomeValuesFrom(EX.p, EX.D), inner)
    assert len(outer) == 3


def test_empty_intersection_is_rejected():
    with pytest.raises(ValueError):
        intersection()
    with pytest.raises(ValueError):
        intersection([])


@pytest.mark.parametrize("n", [-1, 1.5, True, "2"])
def test_exactly_rejects_invalid_cardinality(n):
    with pytest.raises(ValueError):
        exactly(n, EX.p, EX.A)


def test_expressions_compare_by_value():
    assert exactly(2, EX.p, EX.A) == ExactCardinality(2, EX.p, EX.A)
    assert intersection(EX.A) == Intersection((EX.A,))
