"""SHACL validation of built ontologies against the bundled shapes."""

from rdflib import BNode, Graph
from rdflib.namespace import OWL, RDF, RDFS

from karyotype_owl.namespaces import HUMAN as H
from karyotype_owl.paths import DEFAULT_SHAPES_PATH
from karyotype_owl.shacl import ShaclReport, ShaclValidator, summarize_shacl_report


def test_built_ontology_conforms(human_ctx):
    validator = ShaclValidator(DEFAULT_SHAPES_PATH)
    report = validator.validate(human_ctx.graph)

    assert isinstance(report, ShaclReport)
    assert report.conforms, report.text_report
    assert summarize_shacl_report(report)["total"] == 0


def test_orphan_class_and_broken_restriction_are_reported():
    graph = Graph()
    graph.add((H.Orphan, RDF.type, OWL.Class))
    restriction = BNode()
    graph.add((restriction, RDF.type, OWL.Restriction))
    graph.add((H.Child, RDF.type, OWL.Class))
    graph.add((H.Child, RDFS.subClassOf, restriction))

    report = ShaclValidator(DEFAULT_SHAPES_PATH).validate(graph)

    assert not report.conforms
    focus_nodes = {result.focus_node for result in report.results}
    assert str(H.Orphan) in focus_nodes
    summary = summarize_shacl_report(report)
    assert summary["violations"] == summary["total"]
    assert summary["by_shape"]["HumanClassShape"] == 1
    assert summary["total"] >= 2


def test_missing_shapes_file(tmp_path):
    import pytest

    with pytest.raises(FileNotFoundError):
        ShaclValidator(tmp_path / "missing.ttl")
