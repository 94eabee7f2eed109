"""rdflib-backed store for class declarations and axioms."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.collection import Collection
from rdflib.namespace import OWL, RDF, RDFS, XSD

from .expressions import ClassExpression, ExactCardinality, Intersection, SomeValuesFrom
from .namespaces import PREFIXES

logger = logging.getLogger(__name__)


class OntologyBackend:
    """Declares OWL classes and properties into a single rdflib graph.

    Every declaration is written immediately. Class expressions are rendered
    to blank-node structures only when they appear in an asserted axiom.
    """

    def __init__(self, ontology_iris: Sequence[str] = ()) -> None:
        self.graph = Graph()
        self.standard_prefixes = [
            ("owl", str(OWL)),
            ("rdf", str(RDF)),
            ("rdfs", str(RDFS)),
            ("xsd", str(XSD)),
        ] + [(prefix, str(namespace)) for prefix, namespace in PREFIXES.items()]
        for prefix, uri in self.standard_prefixes:
            self.graph.bind(prefix, uri)
        for iri in ontology_iris:
            self.graph.add((URIRef(iri), RDF.type, OWL.Ontology))

    # -- declarations -------------------------------------------------

    def declare_class(self, iri: URIRef) -> URIRef:
        self.graph.add((iri, RDF.type, OWL.Class))
        return iri

    def declare_class_with_superclasses(self, iri: URIRef, *superclasses: ClassExpression) -> URIRef:
        self.declare_class(iri)
        for superclass in superclasses:
            self.assert_subclass(iri, superclass)
        logger.debug("Declared %s with %d superclass(es)", iri, len(superclasses))
        return iri

    def declare_object_property(
        self,
        iri: URIRef,
        domain: Optional[URIRef] = None,
        range: Optional[URIRef] = None,
        subproperty_of: Optional[URIRef] = None,
        inverse_of: Optional[URIRef] = None,
    ) -> URIRef:
        self.graph.add((iri, RDF.type, OWL.ObjectProperty))
        if domain is not None:
            self.graph.add((iri, RDFS.domain, domain))
        if range is not None:
            self.graph.add((iri, RDFS.range, range))
        if subproperty_of is not None:
            self.graph.add((iri, RDFS.subPropertyOf, subproperty_of))
        if inverse_of is not None:
            self.graph.add((iri, OWL.inverseOf, inverse_of))
        return iri

    # -- axioms -------------------------------------------------------

    def assert_subclass(self, iri: URIRef, superclass: ClassExpression) -> None:
        self.graph.add((iri, RDFS.subClassOf, self.render(superclass)))

    def assert_equivalent(self, iri: URIRef, expression: ClassExpression) -> None:
        self.graph.add((iri, OWL.equivalentClass, self.render(expression)))

    def assert_disjoint(self, classes: Iterable[ClassExpression]) -> None:
        """Make ``classes`` pairwise disjoint.

        Two classes use ``owl:disjointWith``; larger sets are written as a
        single ``owl:AllDisjointClasses`` axiom. Fewer than two is a no-op.
        """

        members = list(dict.fromkeys(classes))
        if len(members) < 2:
            return
        if len(members) == 2:
            first, second = members
            self.graph.add((self.render(first), OWL.disjointWith, self.render(second)))
            return
        axiom = BNode()
        self.graph.add((axiom, RDF.type, OWL.AllDisjointClasses))
        self.graph.add((axiom, OWL.members, self._list([self.render(m) for m in members])))

    # -- rendering ----------------------------------------------------

    def render(self, expression: ClassExpression):
        """Write ``expression`` into the graph and return its node."""

        if isinstance(expression, URIRef):
            return expression
        if isinstance(expression, SomeValuesFrom):
            node = self._restriction(expression.property)
            self.graph.add((node, OWL.someValuesFrom, self.render(expression.filler)))
            return node
        if isinstance(expression, ExactCardinality):
            node = self._restriction(expression.property)
            self.graph.add(
                (
                    node,
                    OWL.qualifiedCardinality,
                    Literal(expression.n, datatype=XSD.nonNegativeInteger),
                )
            )
            self.graph.add((node, OWL.onClass, self.render(expression.filler)))
            return node
        if isinstance(expression, Intersection):
            node = BNode()
            self.graph.add((node, RDF.type, OWL.Class))
            operands = [self.render(operand) for operand in expression.operands]
            self.graph.add((node, OWL.intersectionOf, self._list(operands)))
            return node
        raise TypeError(f"Unsupported class expression: {expression!r}")

    def _restriction(self, prop: URIRef) -> BNode:
        node = BNode()
        self.graph.add((node, RDF.type, OWL.Restriction))
        self.graph.add((node, OWL.onProperty, prop))
        return node

    def _list(self, items: list) -> BNode:
        head = BNode()
        Collection(self.graph, head, items)
        return head

    # -- queries ------------------------------------------------------

    def is_declared(self, iri: URIRef) -> bool:
        return (iri, RDF.type, OWL.Class) in self.graph

    def is_subclass_of(self, candidate: URIRef, ancestor: URIRef) -> bool:
        """Reflexive, transitive check over named ``rdfs:subClassOf`` links."""

        if candidate == ancestor:
            return True
        return any(
            node == ancestor
            for node in self.graph.transitive_objects(candidate, RDFS.subClassOf)
            if isinstance(node, URIRef)
        )

    def direct_subclasses(self, iri: URIRef) -> set[URIRef]:
        return {
            sub for sub in self.graph.subjects(RDFS.subClassOf, iri) if isinstance(sub, URIRef)
        }

    def classes(self) -> set[URIRef]:
        return {cls for cls in self.graph.subjects(RDF.type, OWL.Class) if isinstance(cls, URIRef)}

    def disjoint_sets(self) -> list[set]:
        """Return every disjointness axiom as a set of member nodes."""

        sets: list[set] = [
            {first, second} for first, second in self.graph.subject_objects(OWL.disjointWith)
        ]
        for axiom in self.graph.subjects(RDF.type, OWL.AllDisjointClasses):
            head = self.graph.value(axiom, OWL.members)
            sets.append(set(Collection(self.graph, head)))
        return sets

    def are_disjoint(self, first: URIRef, second: URIRef) -> bool:
        return any({first, second} <= members for members in self.disjoint_sets())

    def serialize(self, path: Path, format: str = "turtle") -> None:
        self.graph.serialize(destination=str(path), format=format)


__all__ = ["OntologyBackend"]
