"""Rendering and querying of the rdflib ontology backend."""

import unittest

from rdflib import Literal, Namespace
from rdflib.collection import Collection
from rdflib.namespace import OWL, RDF, RDFS, XSD

from karyotype_owl.backend import OntologyBackend
from karyotype_owl.expressions import exactly, intersection, some

EX = Namespace("http://example.org/")


class OntologyBackendTests(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = OntologyBackend(ontology_iris=["http://example.org/onto"])
        self.graph = self.backend.graph

    def test_ontology_header_and_prefixes(self) -> None:
        self.assertIn((EX.onto, RDF.type, OWL.Ontology), self.graph)
        prefixes = dict(self.graph.namespaces())
        self.assertIn("hum", prefixes)
        self.assertIn("evn", prefixes)

    def test_two_classes_use_disjoint_with(self) -> None:
        self.backend.assert_disjoint([EX.A, EX.B])
        self.assertIn((EX.A, OWL.disjointWith, EX.B), self.graph)
        self.assertTrue(self.backend.are_disjoint(EX.B, EX.A))

    def test_larger_sets_use_all_disjoint_classes(self) -> None:
        self.backend.assert_disjoint([EX.A, EX.B, EX.C, EX.B])
        axioms = list(self.graph.subjects(RDF.type, OWL.AllDisjointClasses))
        self.assertEqual(1, len(axioms))
        members = list(Collection(self.graph, self.graph.value(axioms[0], OWL.members)))
        self.assertEqual([EX.A, EX.B, EX.C], members)

    def test_single_class_is_not_disjoint(self) -> None:
        before = len(self.graph)
        self.backend.assert_disjoint([EX.A])
        self.assertEqual(before, len(self.graph))

    def test_exact_cardinality_is_qualified(self) -> None:
        node = self.backend.render(exactly(2, EX.p, EX.A))
        self.assertEqual(EX.p, self.graph.value(node, OWL.onProperty))
        self.assertEqual(EX.A, self.graph.value(node, OWL.onClass))
        self.assertEqual(
            Literal(2, datatype=XSD.nonNegativeInteger),
            self.graph.value(node, OWL.qualifiedCardinality),
        )

    def test_intersection_renders_rdf_list(self) -> None:
        node = self.backend.render(intersection(EX.A, some(EX.p, EX.B)))
        operands = list(Collection(self.graph, self.graph.value(node, OWL.intersectionOf)))
        self.assertEqual(EX.A, operands[0])
        self.assertEqual(EX.B, self.graph.value(operands[1], OWL.someValuesFrom))

    def test_unsupported_expression_raises(self) -> None:
        with self.assertRaises(TypeError):
            self.backend.render("not an expression")

    def test_subclass_queries_follow_named_links(self) -> None:
        self.backend.declare_class_with_superclasses(EX.B, EX.A, *some(EX.p, EX.X))
        self.backend.declare_class_with_superclasses(EX.C, EX.B)

        self.assertTrue(self.backend.is_subclass_of(EX.C, EX.A))
        self.assertTrue(self.backend.is_subclass_of(EX.C, EX.C))
        self.assertFalse(self.backend.is_subclass_of(EX.A, EX.C))
        self.assertEqual({EX.B}, self.backend.direct_subclasses(EX.A))
        self.assertEqual({EX.B, EX.C}, self.backend.classes())

    def test_equivalence_and_property_declaration(self) -> None:
        self.backend.declare_object_property(EX.q, domain=EX.A, range=EX.B, inverse_of=EX.p)
        self.backend.assert_equivalent(EX.D, intersection(EX.A, EX.B))

        self.assertIn((EX.q, RDF.type, OWL.ObjectProperty), self.graph)
        self.assertIn((EX.q, RDFS.domain, EX.A), self.graph)
        self.assertIn((EX.q, OWL.inverseOf, EX.p), self.graph)
        self.assertIsNotNone(self.graph.value(EX.D, OWL.equivalentClass))

    def test_serialize_writes_file(self) -> None:
        import tempfile
        from pathlib import Path

        self.backend.declare_class(EX.A)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "onto.ttl"
            self.backend.serialize(path)
            self.assertIn("owl:Class", path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
