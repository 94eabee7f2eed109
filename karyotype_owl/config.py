"""Configuration helpers for the karyotype ontology build."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .paths import DEFAULT_CQS_PATH, DEFAULT_ONTOLOGY_IRI, DEFAULT_SHAPES_PATH


@dataclass
class BuildConfig:
    """Runtime configuration for :class:`KaryotypeOntologyPipeline`."""

    output_path: Path
    report_path: Optional[Path] = None
    output_format: str = "turtle"
    ontology_iri: str = DEFAULT_ONTOLOGY_IRI
    chromosomes: Optional[List[str]] = None
    shapes_path: Optional[Path] = field(default_factory=lambda: DEFAULT_SHAPES_PATH)
    competency_questions_path: Optional[Path] = field(default_factory=lambda: DEFAULT_CQS_PATH)
    validation_enabled: bool = True
    shacl_inference: str = "none"
    reasoning_enabled: bool = False

    def ensure_output_dirs(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        if self.report_path is not None:
            self.report_path.parent.mkdir(parents=True, exist_ok=True)
