"""The build context shared by every ontology builder."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .backend import OntologyBackend
from .config import BuildConfig
from .paths import DEFAULT_ONTOLOGY_IRI
from .registry import EntityRegistry


@dataclass
class BuildContext:
    """Owns the ontology under construction and the records of what it holds.

    Builders receive the context explicitly; nothing is declared through
    module-level state.
    """

    backend: OntologyBackend
    registry: EntityRegistry = field(default_factory=EntityRegistry)

    @classmethod
    def create(cls, config: Optional[BuildConfig] = None) -> "BuildContext":
        iri = config.ontology_iri if config is not None else DEFAULT_ONTOLOGY_IRI
        return cls(backend=OntologyBackend(ontology_iris=[iri]))

    @property
    def graph(self):
        return self.backend.graph
