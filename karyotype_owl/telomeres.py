"""Find the telomere that terminates a band, arm or chromosome."""
from __future__ import annotations

from rdflib import URIRef

from .context import BuildContext
from .namespaces import HUMAN as H, local_name
from .registry import EntityKind, EntityRecord, EntityRegistry


def resolve_telomere(ctx: BuildContext | EntityRegistry, identifier) -> URIRef:
    """Return the IRI of the telomere associated with ``identifier``.

    ``identifier`` may be a local name or a full IRI of any class the band
    builders declared:

    * a band, boundary band or arm group resolves to the telomere of its arm
      (``HumanChromosome1Bandp36.3`` -> ``HumanChromosome1BandpTer``);
    * a chromosome, its band group or its centromere resolves to the
      chromosome's telomere (``HumanChromosome1Telomere``);
    * a telomere resolves to itself;
    * the generic human roots resolve to ``HumanTelomere``.

    Anything that was never declared raises
    :class:`~karyotype_owl.errors.UnrecognizedBandSyntax`. Chromosomes must
    therefore be built before their telomeres are referenced.
    """

    registry = ctx.registry if isinstance(ctx, BuildContext) else ctx
    record = registry.require(local_name(identifier))
    return H[_telomere_record(registry, record).name]


def _telomere_record(registry: EntityRegistry, record: EntityRecord) -> EntityRecord:
    if record.kind is EntityKind.TELOMERE:
        return record
    if record.kind in (EntityKind.BAND, EntityKind.ARM):
        return registry.telomere_of(record.chromosome, record.arm)
    if record.kind in (EntityKind.CHROMOSOME, EntityKind.BAND_GROUP, EntityKind.CENTROMERE):
        return registry.telomere_of(record.chromosome)
    return registry.require("HumanTelomere")


__all__ = ["resolve_telomere"]
