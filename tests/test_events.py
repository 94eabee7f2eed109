"""Event restriction patterns built against the human band hierarchy."""

import pytest
from rdflib.namespace import OWL, RDFS

from karyotype_owl import events as ev
from karyotype_owl.errors import ArityError, InvalidEventArgument
from karyotype_owl.events import EventPatternBuilder, EventTarget, TargetKind, direct_event, event
from karyotype_owl.expressions import ExactCardinality, Intersection, SomeValuesFrom, intersection
from karyotype_owl.karyotype import Karyotype
from karyotype_owl.namespaces import EVENTS as E, HUMAN as H

P36_3 = H["HumanChromosome1Bandp36.3"]
P_TER = H.HumanChromosome1BandpTer
Q21 = H.HumanChromosome21Bandq21
Q_TER_21 = H.HumanChromosome21BandqTer


@pytest.fixture
def builder(human_ctx):
    return EventPatternBuilder(human_ctx)


def test_terminal_deletion_runs_to_the_telomere(builder):
    pattern = builder.deletion(1, "HumanChromosome1Bandp36.3")

    assert pattern == ExactCardinality(
        1,
        ev.hasDirectEvent,
        Intersection(
            (
                ev.DeletionTerminal,
                SomeValuesFrom(ev.hasBreakPoint, P36_3),
                SomeValuesFrom(ev.hasBreakPoint, P_TER),
            )
        ),
    )


def test_interstitial_deletion_uses_both_bands(builder):
    pattern = builder.deletion(1, P36_3, "HumanChromosome1Bandp32")

    assert pattern.filler.operands == (
        ev.DeletionInterstitial,
        SomeValuesFrom(ev.hasBreakPoint, P36_3),
        SomeValuesFrom(ev.hasBreakPoint, H.HumanChromosome1Bandp32),
    )


def test_whole_chromosome_deletion_and_addition(builder):
    assert builder.deletion(1, "HumanChromosome21").filler == Intersection(
        (ev.Deletion, H.HumanChromosome21)
    )
    assert builder.addition(2, "HumanChromosome21") == ExactCardinality(
        2, ev.hasDirectEvent, Intersection((ev.Addition, H.HumanChromosome21))
    )


def test_addition_at_a_band(builder):
    pattern = builder.addition(None, Q21)
    assert pattern == SomeValuesFrom(
        ev.hasDirectEvent, Intersection((ev.Addition, SomeValuesFrom(ev.hasBreakPoint, Q21)))
    )


def test_addition_rejects_non_band_classes(builder):
    with pytest.raises(InvalidEventArgument):
        builder.addition(1, "HumanChromosome1Cen")
    with pytest.raises(InvalidEventArgument):
        builder.addition(1, Karyotype)


def test_translocation_is_cyclic(builder):
    pattern = builder.translocation(1, ["HumanChromosome1Bandp36.3"], ["HumanChromosome21Bandq21"])

    receiving_one = [SomeValuesFrom(ev.hasReceivingBreakPoint, band) for band in (P36_3, P_TER)]
    providing_one = [SomeValuesFrom(ev.hasProvidingBreakPoint, band) for band in (P36_3, P_TER)]
    receiving_two = [SomeValuesFrom(ev.hasReceivingBreakPoint, band) for band in (Q21, Q_TER_21)]
    providing_two = [SomeValuesFrom(ev.hasProvidingBreakPoint, band) for band in (Q21, Q_TER_21)]
    assert pattern == ExactCardinality(
        1,
        ev.hasDirectEvent,
        intersection(
            ev.Translocation,
            intersection(receiving_one, providing_two),
            intersection(receiving_two, providing_one),
        ),
    )


def test_translocation_with_explicit_pairs_and_three_groups(builder):
    pattern = builder.translocation(
        None,
        ["HumanChromosome1Bandp36.3", "HumanChromosome1Bandp32"],
        ["HumanChromosome21Bandq21"],
        "HumanChromosome1Bandq12",
    )
    exchanges = pattern.filler.operands[1:]
    assert len(exchanges) == 3
    last = exchanges[-1]
    assert SomeValuesFrom(ev.hasProvidingBreakPoint, H.HumanChromosome1Bandp32) in last.operands


@pytest.mark.parametrize(
    "groups",
    [
        (["HumanChromosome1Bandp36.3"],),
        (["HumanChromosome1Bandp36.3", "HumanChromosome1Bandp32", "HumanChromosome1Bandp31"], [Q21]),
    ],
)
def test_translocation_arity(builder, groups):
    with pytest.raises(ArityError):
        builder.translocation(1, *groups)


def test_segment_events_share_breakpoint_shape(builder):
    for method, kind in [
        (builder.inversion, ev.Inversion),
        (builder.duplication, ev.Duplication),
        (builder.inverse_duplication, ev.InverseDuplication),
        (builder.triplication, ev.Triplication),
        (builder.direct_triplication, ev.DirectTriplication),
        (builder.quadruplication, ev.Quadruplication),
    ]:
        pattern = method(1, P36_3, "HumanChromosome1Bandq12")
        assert pattern.filler.operands[0] == kind
        assert pattern.filler.operands[2] == SomeValuesFrom(ev.hasBreakPoint, H.HumanChromosome1Bandq12)


def test_fission_breaks_to_the_telomere(builder):
    pattern = builder.fission(1, "HumanChromosome21Bandq21")
    assert pattern.filler.operands == (
        ev.Fission,
        SomeValuesFrom(ev.hasBreakPoint, Q21),
        SomeValuesFrom(ev.hasBreakPoint, Q_TER_21),
    )


def test_insertions(builder):
    pattern = builder.direct_insertion_by_chromosome(
        1, ["HumanChromosome21Bandq21"], [P36_3, "HumanChromosome1Bandp32"]
    )
    assert pattern.filler.operands == (
        ev.DirectInsertionTwoChromosome,
        SomeValuesFrom(ev.hasReceivingBreakPoint, Q21),
        SomeValuesFrom(ev.hasProvidingBreakPoint, P36_3),
        SomeValuesFrom(ev.hasProvidingBreakPoint, H.HumanChromosome1Bandp32),
    )
    one = builder.inverse_insertion_by_chromosome(1, [Q21, "HumanChromosome21Bandq22", Q_TER_21])
    assert one.filler.operands[0] == ev.InverseInsertionOneChromosome
    assert builder.insertion(1, Q21, P36_3, P_TER).filler.operands[0] == ev.Insertion

    with pytest.raises(ArityError):
        builder.direct_insertion_by_chromosome(1, [Q21, P36_3])
    with pytest.raises(ArityError):
        builder.inverse_insertion_by_chromosome(1, [Q21, P36_3], [P_TER])


def test_breakpoints_must_be_declared(builder):
    with pytest.raises(InvalidEventArgument):
        builder.inversion(1, P36_3, "HumanChromosome1Bandp99")


@pytest.mark.parametrize("n", [-1, 1.5, True])
def test_cardinality_must_be_a_count(n):
    with pytest.raises(InvalidEventArgument):
        direct_event(n, ev.Deletion)


def test_event_restrictions_use_has_event():
    assert event(None, ev.Addition) == SomeValuesFrom(ev.hasEvent, ev.Addition)
    assert event(0, ev.Addition) == ExactCardinality(0, ev.hasEvent, ev.Addition)


def test_event_target_resolution(human_ctx):
    assert EventTarget.resolve(human_ctx, "HumanChromosome1").kind is TargetKind.CHROMOSOME
    assert EventTarget.resolve(human_ctx, P_TER).kind is TargetKind.BAND
    explicit = EventTarget.band(P36_3)
    assert EventTarget.resolve(human_ctx, explicit) is explicit


def test_event_vocabulary(human_ctx):
    backend = human_ctx.backend
    assert backend.is_subclass_of(ev.DeletionTerminal, ev.Deletion)
    assert backend.is_subclass_of(ev.DirectInsertionOneChromosome, ev.Event)
    assert backend.are_disjoint(ev.Deletion, ev.Translocation)
    graph = human_ctx.graph
    assert (E.hasReceivingBreakPoint, RDFS.subPropertyOf, E.hasBreakPoint) in graph
    assert (E.isDirectEventOf, OWL.inverseOf, E.hasDirectEvent) in graph


def test_patterns_can_be_asserted(human_ctx, builder):
    derived = H.DerivativeKaryotype
    human_ctx.backend.declare_class_with_superclasses(
        derived, Karyotype, builder.translocation(1, [P36_3], [Q21])
    )
    restriction = next(
        node for node in human_ctx.graph.objects(derived, RDFS.subClassOf) if node != Karyotype
    )
    assert human_ctx.graph.value(restriction, OWL.onProperty) == ev.hasDirectEvent


def test_explicit_targets_must_be_declared(builder):
    with pytest.raises(InvalidEventArgument):
        builder.addition(1, EventTarget.band("NoSuchBand"))
    with pytest.raises(InvalidEventArgument):
        builder.deletion(1, EventTarget.chromosome("HumanChromosome99"))
