"""OWL ontology of human chromosome bands and karyotype events."""

from .assembler import build_human_chromosomes, build_human_ontology
from .bands import BandKind, classify
from .config import BuildConfig
from .context import BuildContext
from .errors import (
    ArityError,
    BandSyntaxError,
    InvalidEventArgument,
    KaryotypeError,
    UnrecognizedBandSyntax,
)
from .events import EventPatternBuilder, EventTarget, declare_event_vocabulary
from .hierarchy import BandHierarchyBuilder
from .pipeline import KaryotypeOntologyPipeline
from .telomeres import resolve_telomere

__all__ = [
    "ArityError",
    "BandHierarchyBuilder",
    "BandKind",
    "BandSyntaxError",
    "BuildConfig",
    "BuildContext",
    "EventPatternBuilder",
    "EventTarget",
    "InvalidEventArgument",
    "KaryotypeError",
    "KaryotypeOntologyPipeline",
    "UnrecognizedBandSyntax",
    "build_human_chromosomes",
    "build_human_ontology",
    "classify",
    "declare_event_vocabulary",
    "resolve_telomere",
]
