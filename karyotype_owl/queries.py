"""Competency questions asked of the built ontology."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from rdflib import Graph

logger = logging.getLogger(__name__)


@dataclass
class CompetencyQuestionResult:
    question: str
    query: str
    success: bool
    answer: Optional[bool]
    message: str


class CompetencyQuestionRunner:
    """Run the ASK queries of a ``.rq`` file against a graph.

    Queries are separated by blank lines between balanced brace blocks. A
    ``#`` comment immediately above a query is kept as its question text.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        if not path.exists():
            raise FileNotFoundError(path)
        self.questions = self._load_queries(path)

    @property
    def queries(self) -> List[str]:
        return [query for _, query in self.questions]

    def _load_queries(self, path: Path) -> List[Tuple[str, str]]:
        content = path.read_text(encoding="utf-8")
        questions: List[Tuple[str, str]] = []
        title = ""
        buffer: List[str] = []
        brace_depth = 0

        for line in content.splitlines():
            stripped = line.strip()
            if not buffer:
                if stripped.startswith("#"):
                    title = stripped.lstrip("#").strip()
                    continue
                if not stripped:
                    continue

            buffer.append(line)
            brace_depth += line.count("{") - line.count("}")
            if brace_depth == 0 and any("ASK" in item.upper() for item in buffer):
                questions.append((title or f"Question {len(questions) + 1}", "\n".join(buffer).strip()))
                buffer = []
                title = ""

        if buffer:
            questions.append((title or f"Question {len(questions) + 1}", "\n".join(buffer).strip()))
        return [(title, query) for title, query in questions if "ASK" in query.upper()]

    def run(self, graph: Graph) -> List[CompetencyQuestionResult]:
        results: List[CompetencyQuestionResult] = []
        for question, query in self.questions:
            try:
                answer = bool(graph.query(query).askAnswer)
            except Exception as exc:  # pragma: no cover - rdflib runtime
                logger.warning("Competency question failed: %s (%s)", question, exc)
                results.append(CompetencyQuestionResult(question, query, False, None, str(exc)))
                continue
            if not answer:
                logger.info("Competency question answered no: %s", question)
            results.append(CompetencyQuestionResult(question, query, True, answer, ""))
        return results


__all__ = ["CompetencyQuestionResult", "CompetencyQuestionRunner"]
