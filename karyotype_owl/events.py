"""Class-expression patterns for chromosomal rearrangement events.

Each builder returns a restriction on ``hasDirectEvent`` whose filler is the
event class conjoined with the event's breakpoints, for example::

    exactly 1 hasDirectEvent (DeletionTerminal
                              and (hasBreakPoint some HumanChromosome1Bandp36.3)
                              and (hasBreakPoint some HumanChromosome1BandpTer))

With ``n=None`` an existential restriction is returned instead. The
expressions are not asserted anywhere; callers attach them to karyotype
classes of their own.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

from rdflib import URIRef

from . import karyotype as k
from .context import BuildContext
from .errors import ArityError, InvalidEventArgument
from .expressions import ClassExpression, SomeValuesFrom, exactly, intersection, some
from .human import HumanChromosome, HumanChromosomeBand
from .namespaces import EVENTS as E, human_iri
from .telomeres import resolve_telomere

Event = E.Event
Addition = E.Addition
Deletion = E.Deletion
Duplication = E.Duplication
Fission = E.Fission
Insertion = E.Insertion
Inversion = E.Inversion
Quadruplication = E.Quadruplication
Translocation = E.Translocation
Triplication = E.Triplication

DirectDuplication = E.DirectDuplication
InverseDuplication = E.InverseDuplication
DirectInsertion = E.DirectInsertion
InverseInsertion = E.InverseInsertion
DirectTriplication = E.DirectTriplication
InverseTriplication = E.InverseTriplication
DeletionTerminal = E.DeletionTerminal
DeletionInterstitial = E.DeletionInterstitial
DirectInsertionOneChromosome = E.DirectInsertionOneChromosome
DirectInsertionTwoChromosome = E.DirectInsertionTwoChromosome
InverseInsertionOneChromosome = E.InverseInsertionOneChromosome
InverseInsertionTwoChromosome = E.InverseInsertionTwoChromosome

hasEvent = E.hasEvent
isEventOf = E.isEventOf
hasDirectEvent = E.hasDirectEvent
isDirectEventOf = E.isDirectEventOf
hasDerivedEvent = E.hasDerivedEvent
isDerivedEventOf = E.isDerivedEventOf
hasBreakPoint = E.hasBreakPoint
isBreakPointOf = E.isBreakPointOf
hasReceivingBreakPoint = E.hasReceivingBreakPoint
isReceivingBreakPointOf = E.isReceivingBreakPointOf
hasProvidingBreakPoint = E.hasProvidingBreakPoint
isProvidingBreakPointOf = E.isProvidingBreakPointOf

EVENT_KINDS = [
    Addition,
    Deletion,
    Duplication,
    Fission,
    Insertion,
    Inversion,
    Quadruplication,
    Translocation,
    Triplication,
]

EVENT_SUBKINDS = {
    Duplication: [DirectDuplication, InverseDuplication],
    Insertion: [DirectInsertion, InverseInsertion],
    Triplication: [DirectTriplication, InverseTriplication],
    Deletion: [DeletionTerminal, DeletionInterstitial],
    DirectInsertion: [DirectInsertionOneChromosome, DirectInsertionTwoChromosome],
    InverseInsertion: [InverseInsertionOneChromosome, InverseInsertionTwoChromosome],
}


def declare_event_vocabulary(ctx: BuildContext) -> None:
    backend = ctx.backend
    backend.declare_class(Event)
    for kind in EVENT_KINDS:
        backend.declare_class_with_superclasses(kind, Event)
    backend.assert_disjoint(EVENT_KINDS)
    for parent, kinds in EVENT_SUBKINDS.items():
        for kind in kinds:
            backend.declare_class_with_superclasses(kind, parent)
        backend.assert_disjoint(kinds)

    _inverse_pair(ctx, hasEvent, isEventOf, domain=k.Karyotype, range=Event)
    _inverse_pair(ctx, hasDirectEvent, isDirectEventOf, parents=(hasEvent, isEventOf))
    _inverse_pair(ctx, hasDerivedEvent, isDerivedEventOf, parents=(hasEvent, isEventOf))
    _inverse_pair(
        ctx, hasBreakPoint, isBreakPointOf, domain=k.Karyotype, range=k.ChromosomeComponent
    )
    _inverse_pair(
        ctx,
        hasReceivingBreakPoint,
        isReceivingBreakPointOf,
        parents=(hasBreakPoint, isBreakPointOf),
    )
    _inverse_pair(
        ctx,
        hasProvidingBreakPoint,
        isProvidingBreakPointOf,
        parents=(hasBreakPoint, isBreakPointOf),
    )


def _inverse_pair(ctx, forward, inverse, domain=None, range=None, parents=(None, None)):
    ctx.backend.declare_object_property(
        forward, domain=domain, range=range, subproperty_of=parents[0]
    )
    ctx.backend.declare_object_property(
        inverse, domain=range, range=domain, subproperty_of=parents[1], inverse_of=forward
    )


def event(n: Optional[int], pattern: ClassExpression):
    """``exactly n hasEvent pattern``, or ``hasEvent some pattern`` when n is None."""

    return _restrict(hasEvent, n, pattern)


def direct_event(n: Optional[int], pattern: ClassExpression):
    return _restrict(hasDirectEvent, n, pattern)


def _restrict(prop: URIRef, n: Optional[int], pattern: ClassExpression):
    if n is None:
        return SomeValuesFrom(prop, pattern)
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidEventArgument(f"Event cardinality must be a non-negative integer, got {n!r}")
    return exactly(n, prop, pattern)


class TargetKind(Enum):
    CHROMOSOME = "chromosome"
    BAND = "band"


@dataclass(frozen=True)
class EventTarget:
    """A chromosome or band argument whose kind was settled up front."""

    iri: URIRef
    kind: TargetKind

    @classmethod
    def chromosome(cls, identifier) -> "EventTarget":
        return cls(human_iri(identifier), TargetKind.CHROMOSOME)

    @classmethod
    def band(cls, identifier) -> "EventTarget":
        return cls(human_iri(identifier), TargetKind.BAND)

    @classmethod
    def resolve(cls, ctx: BuildContext, identifier) -> "EventTarget":
        """Decide the kind of ``identifier`` from the declared class hierarchy."""

        if isinstance(identifier, EventTarget):
            if not ctx.backend.is_declared(identifier.iri):
                raise InvalidEventArgument(f"Event target is not a declared class: {identifier.iri}")
            return identifier
        iri = human_iri(identifier)
        if ctx.backend.is_subclass_of(iri, HumanChromosome):
            return cls(iri, TargetKind.CHROMOSOME)
        if ctx.backend.is_subclass_of(iri, HumanChromosomeBand):
            return cls(iri, TargetKind.BAND)
        raise InvalidEventArgument(
            f"Expected a HumanChromosome or HumanChromosomeBand. Got: {identifier}"
        )


BandArgument = Union[str, URIRef, EventTarget]


class EventPatternBuilder:
    """Builds event restrictions against a context whose bands are declared."""

    def __init__(self, ctx: BuildContext) -> None:
        self.ctx = ctx

    # -- single chromosome or band ------------------------------------

    def addition(self, n: Optional[int], target: BandArgument):
        """Whole-chromosome gain, or an addition at a single band."""

        target = EventTarget.resolve(self.ctx, target)
        if target.kind is TargetKind.CHROMOSOME:
            return direct_event(n, intersection(Addition, target.iri))
        return direct_event(n, intersection(Addition, some(hasBreakPoint, target.iri)))

    def deletion(self, n: Optional[int], target: BandArgument, band2: Optional[BandArgument] = None):
        """Chromosome loss, terminal band deletion or interstitial deletion.

        With one chromosome the pattern is a whole-chromosome ``Deletion``.
        With one band it is a ``DeletionTerminal`` running from the band to
        the telomere of its arm. With two bands it is a
        ``DeletionInterstitial`` between exactly those bands.
        """

        if band2 is not None:
            band1 = self._band(target)
            return direct_event(
                n,
                intersection(DeletionInterstitial, self._breakpoints(band1, self._band(band2))),
            )
        target = EventTarget.resolve(self.ctx, target)
        if target.kind is TargetKind.CHROMOSOME:
            return direct_event(n, intersection(Deletion, target.iri))
        return direct_event(
            n, intersection(DeletionTerminal, self._to_telomere(target.iri))
        )

    def fission(self, n: Optional[int], band: BandArgument):
        """Centric fission: a break at ``band`` running to its telomere."""

        return direct_event(n, intersection(Fission, self._to_telomere(self._band(band))))

    # -- two breakpoints on one chromosome ----------------------------

    def duplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(Duplication, n, band1, band2)

    def direct_duplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(DirectDuplication, n, band1, band2)

    def inverse_duplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(InverseDuplication, n, band1, band2)

    def inversion(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        """Paracentric or pericentric inversion between two bands."""

        return self._segment(Inversion, n, band1, band2)

    def quadruplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(Quadruplication, n, band1, band2)

    def triplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(Triplication, n, band1, band2)

    def direct_triplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(DirectTriplication, n, band1, band2)

    def inverse_triplication(self, n: Optional[int], band1: BandArgument, band2: BandArgument):
        return self._segment(InverseTriplication, n, band1, band2)

    # -- insertions ---------------------------------------------------

    def insertion(self, n: Optional[int], band1, band2, band3):
        """``band1`` receives the segment between ``band2`` and ``band3``."""

        return self._insert(Insertion, n, band1, band2, band3)

    def direct_insertion(self, n: Optional[int], band1, band2, band3):
        return self._insert(DirectInsertion, n, band1, band2, band3)

    def inverse_insertion(self, n: Optional[int], band1, band2, band3):
        return self._insert(InverseInsertion, n, band1, band2, band3)

    def direct_insertion_by_chromosome(
        self, n: Optional[int], chrom1: Sequence, chrom2: Optional[Sequence] = None
    ):
        """Direct insertion within one chromosome (3 bands) or between two (1 + 2)."""

        return self._insert_by_chromosome(
            DirectInsertionOneChromosome, DirectInsertionTwoChromosome, n, chrom1, chrom2
        )

    def inverse_insertion_by_chromosome(
        self, n: Optional[int], chrom1: Sequence, chrom2: Optional[Sequence] = None
    ):
        return self._insert_by_chromosome(
            InverseInsertionOneChromosome, InverseInsertionTwoChromosome, n, chrom1, chrom2
        )

    # -- translocation ------------------------------------------------

    def translocation(self, n: Optional[int], *groups: Sequence[BandArgument]):
        """Exchange between two or more chromosomes.

        Each group holds the one or two breakpoint bands on one chromosome;
        a single band is paired with the telomere of its arm. Every group
        receives at its own pair and provides to the next group's pair, the
        last group providing to the first.
        """

        if len(groups) < 2:
            raise ArityError(
                f"Translocation needs at least two chromosome groups, got {len(groups)}"
            )
        pairs = [self._pair_with_telomere(group) for group in groups]
        exchanges = []
        for index, pair in enumerate(pairs):
            following = pairs[(index + 1) % len(pairs)]
            exchanges.append(
                intersection(
                    some(hasReceivingBreakPoint, *pair),
                    some(hasProvidingBreakPoint, *following),
                )
            )
        return direct_event(n, intersection(Translocation, *exchanges))

    # -- helpers ------------------------------------------------------

    def _segment(self, kind: URIRef, n, band1, band2):
        return direct_event(
            n, intersection(kind, self._breakpoints(self._band(band1), self._band(band2)))
        )

    def _insert(self, kind: URIRef, n, band1, band2, band3):
        receiving = self._band(band1)
        providing = [self._band(band2), self._band(band3)]
        return direct_event(
            n,
            intersection(
                kind,
                some(hasReceivingBreakPoint, receiving),
                some(hasProvidingBreakPoint, *providing),
            ),
        )

    def _insert_by_chromosome(self, one_kind, two_kind, n, chrom1, chrom2):
        chrom1 = list(chrom1)
        if chrom2 is None:
            if len(chrom1) != 3:
                raise ArityError(
                    f"Insertion within one chromosome needs 3 bands, got {len(chrom1)}"
                )
            return self._insert(one_kind, n, *chrom1)
        chrom2 = list(chrom2)
        if len(chrom1) != 1 or len(chrom2) != 2:
            raise ArityError(
                "Insertion between two chromosomes needs 1 receiving and 2 providing bands, "
                f"got {len(chrom1)} and {len(chrom2)}"
            )
        return self._insert(two_kind, n, chrom1[0], *chrom2)

    def _pair_with_telomere(self, group: Sequence[BandArgument]) -> List[URIRef]:
        if isinstance(group, (str, URIRef, EventTarget)):
            group = [group]
        bands = [self._band(band) for band in group]
        if len(bands) == 1:
            return [bands[0], resolve_telomere(self.ctx, bands[0])]
        if len(bands) == 2:
            return bands
        raise ArityError(f"Band group should contain 1 or 2 bands: {list(group)}")

    def _to_telomere(self, band: URIRef) -> List[SomeValuesFrom]:
        return self._breakpoints(band, resolve_telomere(self.ctx, band))

    @staticmethod
    def _breakpoints(*bands: URIRef) -> List[SomeValuesFrom]:
        return some(hasBreakPoint, *bands)

    def _band(self, band: BandArgument) -> URIRef:
        iri = band.iri if isinstance(band, EventTarget) else human_iri(band)
        if not self.ctx.backend.is_declared(iri):
            raise InvalidEventArgument(f"Breakpoint is not a declared class: {band}")
        return iri


__all__ = [
    "EventTarget",
    "TargetKind",
    "EventPatternBuilder",
    "declare_event_vocabulary",
    "event",
    "direct_event",
    "EVENT_KINDS",
    "EVENT_SUBKINDS",
]
