"""Namespace helpers used across the ontology builders."""
from __future__ import annotations

from rdflib import Namespace, URIRef

KARYOTYPE = Namespace("http://ncl.ac.uk/karyotype/karyotype#")
HUMAN = Namespace("http://ncl.ac.uk/karyotype/human#")
EVENTS = Namespace("http://ncl.ac.uk/karyotype/events#")

PREFIXES = {
    "kar": KARYOTYPE,
    "hum": HUMAN,
    "evn": EVENTS,
}


def local_name(identifier) -> str:
    """Return ``identifier`` without its namespace.

    Known karyotype namespaces are stripped exactly; any other IRI loses
    everything up to its last ``#`` or ``/``. Plain local names pass through.
    """

    text = str(identifier)
    for namespace in PREFIXES.values():
        if text.startswith(str(namespace)):
            return text[len(str(namespace)):]
    if "#" in text:
        return text.rsplit("#", 1)[1]
    if "://" in text:
        return text.rstrip("/").rsplit("/", 1)[-1]
    return text


def human_iri(identifier) -> URIRef:
    """Coerce a local name or IRI into the human namespace."""

    if isinstance(identifier, URIRef):
        return identifier
    return HUMAN[local_name(identifier)]


__all__ = ["KARYOTYPE", "HUMAN", "EVENTS", "PREFIXES", "local_name", "human_iri"]
