"""Class expressions used to describe bands and rearrangement events.

Expressions are plain immutable values. They are only written into a graph
when :class:`~karyotype_owl.backend.OntologyBackend` renders them as part of
an axiom, so an event pattern can be built, inspected and compared without
touching the ontology.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from rdflib import URIRef


@dataclass(frozen=True)
class SomeValuesFrom:
    property: URIRef
    filler: "ClassExpression"


@dataclass(frozen=True)
class ExactCardinality:
    """Qualified ``exactly n property filler`` restriction."""

    n: int
    property: URIRef
    filler: "ClassExpression"

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n < 0:
            raise ValueError(f"Cardinality must be a non-negative integer, got {self.n!r}")


@dataclass(frozen=True)
class Intersection:
    operands: Tuple["ClassExpression", ...]

    def __iter__(self):
        return iter(self.operands)

    def __len__(self) -> int:
        return len(self.operands)


ClassExpression = Union[URIRef, SomeValuesFrom, ExactCardinality, Intersection]


def some(property: URIRef, *fillers: ClassExpression) -> list[SomeValuesFrom]:
    """Return one existential restriction per filler."""

    return [SomeValuesFrom(property, filler) for filler in fillers]


def exactly(n: int, property: URIRef, filler: ClassExpression) -> ExactCardinality:
    return ExactCardinality(n, property, filler)


def intersection(*operands) -> Intersection:
    """Conjoin ``operands``; list and tuple operands are spliced in place."""

    flattened: list = []
    for operand in operands:
        if isinstance(operand, (list, tuple)):
            flattened.extend(operand)
        else:
            flattened.append(operand)
    if not flattened:
        raise ValueError("An intersection needs at least one operand")
    return Intersection(tuple(flattened))


__all__ = [
    "ClassExpression",
    "SomeValuesFrom",
    "ExactCardinality",
    "Intersection",
    "some",
    "exactly",
    "intersection",
]
