"""Assemble the human band hierarchy for a set of chromosomes."""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from rdflib import URIRef

from .context import BuildContext
from .hierarchy import BandHierarchyBuilder
from .human import CHROMOSOMES, chromosome_iri, declare_human_vocabulary
from .human_bands import HUMAN_BAND_SPECS
from .karyotype import declare_karyotype_vocabulary
from .namespaces import HUMAN as H

logger = logging.getLogger(__name__)


def build_human_chromosomes(
    ctx: BuildContext,
    specs: Mapping[str, Sequence] = HUMAN_BAND_SPECS,
    chromosomes: Optional[Iterable[str]] = None,
) -> List[URIRef]:
    """Build the band hierarchy of each requested chromosome.

    Chromosomes are built in nomenclature order (1-22, X, Y) whatever order
    they are requested in. Once all are built, their ``...Band`` classes are
    declared pairwise disjoint, as are their centromeres.
    """

    labels = _select(specs, chromosomes)
    builder = BandHierarchyBuilder(ctx)
    built: List[URIRef] = []
    for label in labels:
        chromosome = chromosome_iri(label)
        builder.build_chromosome(chromosome, specs[label])
        built.append(chromosome)

    groups = [f"HumanChromosome{label}" for label in labels]
    ctx.backend.assert_disjoint([H[f"{group}Band"] for group in groups])
    ctx.backend.assert_disjoint(
        [H[f"{group}Cen"] for group in groups if f"{group}Cen" in ctx.registry]
    )
    logger.info("Built band hierarchies for %d chromosome(s)", len(built))
    return built


def build_human_ontology(
    ctx: BuildContext, chromosomes: Optional[Iterable[str]] = None
) -> List[URIRef]:
    """Declare the karyotype and human vocabularies, then every band hierarchy."""

    declare_karyotype_vocabulary(ctx)
    declare_human_vocabulary(ctx)
    return build_human_chromosomes(ctx, chromosomes=chromosomes)


def _select(specs: Mapping[str, Sequence], chromosomes: Optional[Iterable[str]]) -> List[str]:
    order = [label for label in CHROMOSOMES if label in specs]
    order += [label for label in specs if label not in order]
    if chromosomes is None:
        return order
    requested = {str(label).replace("HumanChromosome", "") for label in chromosomes}
    unknown = requested.difference(specs)
    if unknown:
        raise ValueError(f"No band data for chromosome(s): {', '.join(sorted(unknown))}")
    return [label for label in order if label in requested]


__all__ = ["build_human_chromosomes", "build_human_ontology"]
