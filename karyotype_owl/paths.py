"""Centralised filesystem paths used across the project."""
from __future__ import annotations

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_ROOT / "data"
DEFAULT_ONTOLOGY_IRI = "http://ncl.ac.uk/karyotype/human"
DEFAULT_SHAPES_PATH = DATA_DIR / "karyotype_shapes.ttl"
DEFAULT_CQS_PATH = DATA_DIR / "competency_questions.rq"
__all__ = [
    "PACKAGE_ROOT",
    "DATA_DIR",
    "DEFAULT_ONTOLOGY_IRI",
    "DEFAULT_SHAPES_PATH",
    "DEFAULT_CQS_PATH",
]
