"""Build and persist the JSON report of an ontology build."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .queries import CompetencyQuestionResult
from .reasoning import ReasonerReport
from .shacl import ShaclReport


def build_report(
    summary: Dict[str, Any],
    shacl_report: Optional[ShaclReport] = None,
    shacl_summary: Optional[Dict[str, Any]] = None,
    reasoner_report: Optional[ReasonerReport] = None,
    cq_results: Optional[List[CompetencyQuestionResult]] = None,
) -> Dict[str, Any]:
    report: Dict[str, Any] = {"build": summary}
    if shacl_report is not None:
        report["shacl"] = {
            "conforms": shacl_report.conforms,
            "text_report": shacl_report.text_report,
            "results": [asdict(res) for res in shacl_report.results],
        }
    if shacl_summary is not None:
        report["shacl_summary"] = shacl_summary
    if reasoner_report is not None:
        report["reasoner"] = asdict(reasoner_report)
    if cq_results is not None:
        report["competency_questions"] = [asdict(result) for result in cq_results]
    return report


def save_report(report: Dict[str, Any], path: Path) -> None:
    path.write_text(json.dumps(report, indent=2), encoding="utf-8")


__all__ = ["build_report", "save_report"]
