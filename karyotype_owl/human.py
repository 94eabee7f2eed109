"""Human chromosome classes and the properties linking their bands."""
from __future__ import annotations

from rdflib import URIRef

from . import karyotype as k
from .context import BuildContext
from .namespaces import HUMAN as H, local_name
from .registry import EntityKind, EntityRecord

HumanChromosome = H.HumanChromosome
HumanChromosomeBand = H.HumanChromosomeBand
HumanCentromere = H.HumanCentromere
HumanTelomere = H.HumanTelomere
HumanAutosome = H.HumanAutosome
HumanAllosome = H.HumanAllosome

isSubBandOf = H.isSubBandOf
hasSubBand = H.hasSubBand

AUTOSOMES = [str(number) for number in range(1, 23)]
ALLOSOMES = ["X", "Y"]
CHROMOSOMES = AUTOSOMES + ALLOSOMES


def chromosome_iri(label: str) -> URIRef:
    """``"1"`` -> ``hum:HumanChromosome1``; full names pass through."""

    label = str(label)
    if label.startswith("HumanChromosome"):
        return H[label]
    return H[f"HumanChromosome{label}"]


def declare_human_vocabulary(ctx: BuildContext) -> None:
    backend = ctx.backend
    registry = ctx.registry

    backend.declare_class_with_superclasses(HumanChromosome, k.Chromosome)
    backend.declare_class_with_superclasses(HumanChromosomeBand, k.ChromosomeBand)
    backend.declare_class_with_superclasses(HumanCentromere, k.Centromere)
    backend.declare_class_with_superclasses(HumanTelomere, k.Telomere)
    backend.declare_class_with_superclasses(HumanAutosome, HumanChromosome)
    backend.declare_class_with_superclasses(HumanAllosome, HumanChromosome)
    backend.assert_disjoint([HumanAutosome, HumanAllosome])

    for root in (HumanChromosome, HumanChromosomeBand, HumanCentromere, HumanAutosome, HumanAllosome):
        registry.register(EntityRecord(local_name(root), EntityKind.ROOT))
    registry.register(EntityRecord("HumanTelomere", EntityKind.TELOMERE))

    backend.declare_object_property(
        isSubBandOf, domain=HumanChromosomeBand, range=HumanChromosomeBand
    )
    backend.declare_object_property(
        hasSubBand, domain=HumanChromosomeBand, range=HumanChromosomeBand, inverse_of=isSubBandOf
    )

    autosomes = [_declare_chromosome(ctx, label, HumanAutosome) for label in AUTOSOMES]
    allosomes = [_declare_chromosome(ctx, label, HumanAllosome) for label in ALLOSOMES]
    backend.assert_disjoint(autosomes)
    backend.assert_disjoint(allosomes)


def _declare_chromosome(ctx: BuildContext, label: str, parent: URIRef) -> URIRef:
    iri = ctx.backend.declare_class_with_superclasses(chromosome_iri(label), parent)
    name = f"HumanChromosome{label}"
    ctx.registry.register(EntityRecord(name, EntityKind.CHROMOSOME, chromosome=name))
    return iri


__all__ = [
    "HumanChromosome",
    "HumanChromosomeBand",
    "HumanCentromere",
    "HumanTelomere",
    "HumanAutosome",
    "HumanAllosome",
    "isSubBandOf",
    "hasSubBand",
    "AUTOSOMES",
    "ALLOSOMES",
    "CHROMOSOMES",
    "chromosome_iri",
    "declare_human_vocabulary",
]
