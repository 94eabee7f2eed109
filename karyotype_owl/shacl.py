"""SHACL validation of built karyotype ontologies."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from pyshacl import validate
from rdflib import Graph
from rdflib.namespace import RDF, SH

from .namespaces import local_name

logger = logging.getLogger(__name__)

_RESULT_FIELDS = (
    ("focus_node", SH.focusNode),
    ("path", SH.resultPath),
    ("message", SH.resultMessage),
    ("severity", SH.resultSeverity),
    ("source_shape", SH.sourceShape),
    ("constraint_component", SH.sourceConstraintComponent),
    ("value", SH.value),
)


@dataclass
class ShaclResult:
    """One ``sh:ValidationResult`` flattened to strings."""

    focus_node: Optional[str]
    path: Optional[str]
    message: Optional[str]
    severity: Optional[str]
    source_shape: Optional[str]
    constraint_component: Optional[str]
    value: Optional[str]


@dataclass
class ShaclReport:
    conforms: bool
    text_report: str
    report_graph_ttl: Optional[str] = None
    results: List[ShaclResult] = field(default_factory=list)


class ShaclValidator:
    """Check the structure of a built ontology against SHACL shapes.

    The bundled shapes require every human-namespace class to have a
    superclass, every restriction to name exactly one declared property,
    qualified cardinalities to be non-negative integers and disjointness
    axioms to list their members.
    """

    def __init__(self, shapes_path: Path, inference: str = "none") -> None:
        if not shapes_path.exists():
            raise FileNotFoundError(f"SHACL shapes file not found: {shapes_path}")
        self.shapes_path = shapes_path
        self.inference = inference
        self.shapes_graph = Graph().parse(shapes_path, format="turtle")

    def validate(self, data_graph: Graph) -> ShaclReport:
        conforms, report_graph, text_report = validate(
            data_graph,
            shacl_graph=self.shapes_graph,
            inference=self.inference,
            advanced=True,
            serialize_report_graph=False,
        )
        results = self._extract_results(report_graph)
        logger.info("SHACL validation: conforms=%s, %d result(s)", conforms, len(results))
        return ShaclReport(
            bool(conforms),
            str(text_report),
            report_graph.serialize(format="turtle"),
            results,
        )

    @staticmethod
    def _extract_results(report_graph: Graph) -> List[ShaclResult]:
        results = []
        for node in report_graph.subjects(RDF.type, SH.ValidationResult):
            values = {}
            for name, predicate in _RESULT_FIELDS:
                value = report_graph.value(node, predicate)
                values[name] = str(value) if value is not None else None
            results.append(ShaclResult(**values))
        return sorted(results, key=lambda result: result.focus_node or "")


def summarize_shacl_report(report: ShaclReport) -> Dict[str, object]:
    """Count results per severity and per failing shape."""

    severities = Counter(
        local_name(result.severity) if result.severity else "Unknown" for result in report.results
    )
    shapes = Counter(
        local_name(result.source_shape) for result in report.results if result.source_shape
    )
    return {
        "total": len(report.results),
        "violations": severities.get("Violation", 0),
        "by_severity": dict(severities),
        "by_shape": dict(shapes),
    }


__all__ = ["ShaclResult", "ShaclReport", "ShaclValidator", "summarize_shacl_report"]
