"""DL reasoning over a built karyotype ontology."""
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from owlready2 import OwlReadyInconsistentOntologyError, World, sync_reasoner
from owlready2.base import OwlReadyJavaError
from rdflib import Graph

from .errors import ReasonerError

logger = logging.getLogger(__name__)


@dataclass
class ReasonerReport:
    enabled: bool
    consistent: Optional[bool]
    unsatisfiable_classes: List[str] = field(default_factory=list)
    notes: str = ""
    backend: Optional[str] = None


def run_reasoner(graph: Graph, enabled: bool = True) -> ReasonerReport:
    """Classify ``graph`` with HermiT and report its consistency.

    The graph is written to a temporary RDF/XML file and loaded into a fresh
    owlready2 ``World`` so repeated runs never share state. A missing Java
    runtime raises :class:`ReasonerError`; an inconsistent ontology is
    reported rather than raised.
    """

    if not enabled:
        return ReasonerReport(False, None, [], "Reasoner disabled.")

    fd, tmp_name = tempfile.mkstemp(suffix=".owl")
    tmp_path = Path(tmp_name)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(graph.serialize(format="pretty-xml"))

    world = World()
    consistent = True
    notes: List[str] = []
    unsatisfiable: List[str] = []
    try:
        # Owlready2 expects forward-slash paths.
        world.get_ontology(tmp_path.as_posix()).load()
        try:
            sync_reasoner(world, infer_property_values=False, debug=0)
        except OwlReadyInconsistentOntologyError:
            consistent = False
            notes.append("Ontology is inconsistent.")
        else:
            unsatisfiable = [cls.iri for cls in world.inconsistent_classes()]
    except (OwlReadyJavaError, OSError) as exc:
        raise ReasonerError("Java runtime not found; install Java to enable reasoning") from exc
    finally:
        tmp_path.unlink(missing_ok=True)

    for iri in unsatisfiable:
        logger.warning("Unsatisfiable class: %s", iri)
    if unsatisfiable:
        notes.append(f"{len(unsatisfiable)} unsatisfiable class(es).")
    logger.info("Reasoner finished: consistent=%s", consistent)
    return ReasonerReport(True, consistent, unsatisfiable, " ".join(notes), backend="hermit")


__all__ = ["ReasonerReport", "run_reasoner"]
