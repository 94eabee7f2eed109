"""High-level orchestration of a karyotype ontology build."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .assembler import build_human_ontology
from .config import BuildConfig
from .context import BuildContext
from .events import declare_event_vocabulary
from .namespaces import local_name
from .queries import CompetencyQuestionRunner
from .reasoning import run_reasoner
from .reporting import build_report, save_report
from .shacl import ShaclValidator, summarize_shacl_report

logger = logging.getLogger(__name__)


class KaryotypeOntologyPipeline:
    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self.config.ensure_output_dirs()
        self.validator: Optional[ShaclValidator] = None
        if config.validation_enabled and config.shapes_path:
            self.validator = ShaclValidator(config.shapes_path, inference=config.shacl_inference)
        self.cq_runner: Optional[CompetencyQuestionRunner] = None
        if config.competency_questions_path:
            self.cq_runner = CompetencyQuestionRunner(config.competency_questions_path)
        self.context: Optional[BuildContext] = None
        self.built_chromosomes: List[str] = []
        self.last_shacl_report = None
        self.last_reasoner_report = None
        self.last_cq_results = None

    def build(self) -> BuildContext:
        """Declare every vocabulary and band hierarchy into a fresh context."""

        ctx = BuildContext.create(self.config)
        chromosomes = build_human_ontology(ctx, chromosomes=self.config.chromosomes)
        declare_event_vocabulary(ctx)
        logger.info(
            "Declared %d classes for %d chromosome(s)", len(ctx.backend.classes()), len(chromosomes)
        )
        self.context = ctx
        self.built_chromosomes = [local_name(iri) for iri in chromosomes]
        return ctx

    def run(self) -> Dict[str, Any]:
        ctx = self.build()
        graph = ctx.graph
        ctx.backend.serialize(self.config.output_path, format=self.config.output_format)
        logger.info("Wrote ontology to %s", self.config.output_path)

        summary: Dict[str, Any] = {
            "ontology_iri": self.config.ontology_iri,
            "output": str(self.config.output_path),
            "triples": len(graph),
            "classes": len(ctx.backend.classes()),
            "chromosomes": self.built_chromosomes,
            "entities": ctx.registry.summary(),
        }

        shacl_summary = None
        if self.validator is not None:
            self.last_shacl_report = self.validator.validate(graph)
            shacl_summary = summarize_shacl_report(self.last_shacl_report)
            if not self.last_shacl_report.conforms:
                logger.warning(
                    "SHACL validation reported %d result(s)", len(self.last_shacl_report.results)
                )

        if self.config.reasoning_enabled:
            self.last_reasoner_report = run_reasoner(graph)

        if self.cq_runner is not None:
            self.last_cq_results = self.cq_runner.run(graph)

        report = build_report(
            summary,
            shacl_report=self.last_shacl_report,
            shacl_summary=shacl_summary,
            reasoner_report=self.last_reasoner_report,
            cq_results=self.last_cq_results,
        )
        if self.config.report_path:
            save_report(report, self.config.report_path)
            logger.info("Wrote report to %s", self.config.report_path)
        return report


__all__ = ["KaryotypeOntologyPipeline"]
