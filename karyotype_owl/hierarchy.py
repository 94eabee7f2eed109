"""Recursive construction of a chromosome's band class hierarchy.

A chromosome's band data is an ordered list running from pTer through the
centromere to qTer. Each entry is either a band token or a container such as
``["q22q23q24", "q22", ["q23", "q23.1", ...], ...]`` whose label names a
merged region and whose children are the more specific bands inside it.

Every band class is a subclass of its arm group (``HumanChromosome1Bandp``
or ``...Bandq``) however deeply it is nested; containment is expressed
separately with ``isSubBandOf`` restrictions on the immediate container.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from rdflib import URIRef

from . import karyotype as k
from .bands import (
    BandKind,
    Container,
    Leaf,
    RawBandSpec,
    classify,
    parse_band_spec,
    telomere_arm,
)
from .context import BuildContext
from .errors import BandSyntaxError, UnrecognizedBandSyntax
from .expressions import some
from .human import HumanCentromere, HumanChromosomeBand, HumanTelomere, isSubBandOf
from .namespaces import HUMAN as H, human_iri, local_name
from .registry import EntityKind, EntityRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChromosomeScope:
    chromosome: URIRef
    group: str
    band_group: str
    arm_groups: Dict[str, URIRef]
    telomere: URIRef
    disjoint_sets: List[List[URIRef]] = field(default_factory=list)


class BandHierarchyBuilder:
    def __init__(self, ctx: BuildContext) -> None:
        self.ctx = ctx
        self.backend = ctx.backend
        self.registry = ctx.registry

    def build_chromosome(self, chromosome, specs: Sequence[RawBandSpec]) -> List[URIRef]:
        """Declare every band of ``chromosome`` and return its top-level classes.

        The chromosome class must already be declared. Disjointness axioms are
        collected while the spec is walked and only asserted once every node
        has been declared, so a malformed token or container label aborts the
        build without leaving any of this chromosome's disjointness axioms
        behind.
        """

        chromosome = human_iri(chromosome)
        group = local_name(chromosome)
        record = self.registry.require(group)
        if record.kind is not EntityKind.CHROMOSOME:
            raise BandSyntaxError(group, f"{group} is not a chromosome class")

        nodes = parse_band_spec(specs)
        scope = self._declare_groups(chromosome, group)

        top_level: List[URIRef] = []
        for node in nodes:
            top_level.extend(self._build_top_level(scope, node))
        scope.disjoint_sets.append(top_level)
        for members in scope.disjoint_sets:
            self.backend.assert_disjoint(members)
        logger.info("Built %s with %d top-level bands", group, len(top_level))
        return top_level

    def _declare_groups(self, chromosome: URIRef, group: str) -> ChromosomeScope:
        band_group = f"{group}Band"
        backend = self.backend

        backend.declare_class_with_superclasses(
            H[band_group], *some(k.isBandOf, chromosome), HumanChromosomeBand
        )
        self._register(band_group, EntityKind.BAND_GROUP, group)

        arm_groups = {}
        for arm in ("p", "q"):
            name = f"{band_group}{arm}"
            arm_groups[arm] = backend.declare_class_with_superclasses(H[name], H[band_group])
            self._register(name, EntityKind.ARM, group, arm)

        telomere = backend.declare_class_with_superclasses(
            H[f"{group}Telomere"], HumanTelomere, *some(k.isComponentOf, chromosome)
        )
        self._register(f"{group}Telomere", EntityKind.TELOMERE, group)
        scope = ChromosomeScope(chromosome, group, band_group, arm_groups, telomere)
        scope.disjoint_sets.append(list(arm_groups.values()))
        return scope

    def _build_top_level(self, scope: ChromosomeScope, node) -> List[URIRef]:
        if isinstance(node, Container):
            arm = self._container_arm(node)
            return [self._expand_container(scope, arm, node, enclosing=None, path=())]

        kind = self._classify(node.token)
        if kind is BandKind.CENTROMERE:
            return list(self._declare_centromere(scope, node.token))
        if kind is BandKind.TELOMERE:
            return [self._declare_telomere(scope, node.token)]
        arm = "p" if kind is BandKind.P_BAND else "q"
        name = scope.band_group + node.token
        iri = self.backend.declare_class_with_superclasses(H[name], scope.arm_groups[arm])
        self._register(name, EntityKind.BAND, scope.group, arm)
        return [iri]

    def _expand_container(
        self,
        scope: ChromosomeScope,
        arm: str,
        container: Container,
        enclosing: Optional[URIRef],
        path: Tuple[str, ...],
    ) -> URIRef:
        if self._classify(container.label) not in (BandKind.P_BAND, BandKind.Q_BAND):
            raise BandSyntaxError(
                container.label, f"Container label must be a p or q band: {container.label!r}"
            )
        name = scope.band_group + container.label
        superclasses = [scope.arm_groups[arm]]
        if enclosing is not None:
            superclasses.extend(some(isSubBandOf, enclosing))
        iri = self.backend.declare_class_with_superclasses(H[name], *superclasses)
        self._register(name, EntityKind.BAND, scope.group, arm, path)

        child_path = path + (container.label,)
        children: List[URIRef] = []
        for child in container.children:
            if isinstance(child, Container):
                children.append(self._expand_container(scope, arm, child, iri, child_path))
            else:
                children.append(self._declare_sub_band(scope, arm, child, iri, child_path))
        scope.disjoint_sets.append(children)
        return iri

    def _declare_sub_band(
        self,
        scope: ChromosomeScope,
        arm: str,
        leaf: Leaf,
        container: URIRef,
        path: Tuple[str, ...],
    ) -> URIRef:
        if self._classify(leaf.token) not in (BandKind.P_BAND, BandKind.Q_BAND):
            raise BandSyntaxError(leaf.token, f"Sub-band must be a p or q band: {leaf.token!r}")
        name = scope.band_group + leaf.token
        iri = self.backend.declare_class_with_superclasses(
            H[name], scope.arm_groups[arm], *some(isSubBandOf, container)
        )
        self._register(name, EntityKind.BAND, scope.group, arm, path)
        return iri

    def _declare_centromere(self, scope: ChromosomeScope, token: str) -> Tuple[URIRef, ...]:
        name = scope.group + token
        centromere = self.backend.declare_class_with_superclasses(
            H[name], HumanCentromere, *some(k.isComponentOf, scope.chromosome)
        )
        self._register(name, EntityKind.CENTROMERE, scope.group)

        boundaries = []
        for arm in ("p", "q"):
            boundary = f"{scope.band_group}{arm}10"
            boundaries.append(
                self.backend.declare_class_with_superclasses(H[boundary], scope.arm_groups[arm])
            )
            self._register(boundary, EntityKind.BAND, scope.group, arm)
        scope.disjoint_sets.append(boundaries)
        return (centromere, *boundaries)

    def _declare_telomere(self, scope: ChromosomeScope, token: str) -> URIRef:
        try:
            arm = telomere_arm(token)
        except UnrecognizedBandSyntax as exc:
            raise BandSyntaxError(token) from exc
        name = scope.band_group + token
        iri = self.backend.declare_class_with_superclasses(
            H[name],
            scope.arm_groups[arm],
            scope.telomere,
            *some(k.isComponentOf, scope.chromosome),
        )
        self._register(name, EntityKind.TELOMERE, scope.group, arm)
        return iri

    def _container_arm(self, container: Container) -> str:
        # Data precondition: a container lists a band of its own arm first.
        token = container.first_leaf().token
        kind = self._classify(token)
        if kind is BandKind.P_BAND:
            return "p"
        if kind is BandKind.Q_BAND:
            return "q"
        raise BandSyntaxError(
            container.label,
            f"Container {container.label!r} must start with a p or q band, got {token!r}",
        )

    @staticmethod
    def _classify(token: str) -> BandKind:
        try:
            return classify(token)
        except UnrecognizedBandSyntax as exc:
            raise BandSyntaxError(token) from exc

    def _register(
        self,
        name: str,
        kind: EntityKind,
        chromosome: str,
        arm: Optional[str] = None,
        path: Tuple[str, ...] = (),
    ) -> None:
        self.registry.register(EntityRecord(name, kind, chromosome, arm, path))
        logger.debug("Registered %s (%s)", name, kind.value)


__all__ = ["BandHierarchyBuilder", "ChromosomeScope"]
