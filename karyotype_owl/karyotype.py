"""Species-independent karyotype vocabulary."""
from __future__ import annotations

from .context import BuildContext
from .namespaces import KARYOTYPE as K

Karyotype = K.Karyotype
ChromosomeComponent = K.ChromosomeComponent
Chromosome = K.Chromosome
ChromosomeBand = K.ChromosomeBand
Centromere = K.Centromere
Telomere = K.Telomere

hasComponent = K.hasComponent
isComponentOf = K.isComponentOf
hasBand = K.hasBand
isBandOf = K.isBandOf


def declare_karyotype_vocabulary(ctx: BuildContext) -> None:
    backend = ctx.backend
    backend.declare_class(Karyotype)
    backend.declare_class(ChromosomeComponent)
    for cls in (Chromosome, ChromosomeBand, Centromere, Telomere):
        backend.declare_class_with_superclasses(cls, ChromosomeComponent)

    backend.declare_object_property(hasComponent, domain=Chromosome, range=ChromosomeComponent)
    backend.declare_object_property(
        isComponentOf, domain=ChromosomeComponent, range=Chromosome, inverse_of=hasComponent
    )
    backend.declare_object_property(
        hasBand, domain=Chromosome, range=ChromosomeBand, subproperty_of=hasComponent
    )
    backend.declare_object_property(
        isBandOf,
        domain=ChromosomeBand,
        range=Chromosome,
        subproperty_of=isComponentOf,
        inverse_of=hasBand,
    )
