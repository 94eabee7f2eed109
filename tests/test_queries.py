"""Competency question loading and execution."""

import unittest
from pathlib import Path
import tempfile

from karyotype_owl.paths import DEFAULT_CQS_PATH
from karyotype_owl.queries import CompetencyQuestionRunner


class CompetencyQuestionRunnerTests(unittest.TestCase):
    def test_bundled_questions_are_split_with_titles(self) -> None:
        runner = CompetencyQuestionRunner(DEFAULT_CQS_PATH)

        self.assertEqual(6, len(runner.questions))
        title, query = runner.questions[0]
        self.assertEqual("Chromosome 1 band p36.3 lies on the p arm", title)
        self.assertTrue(query.startswith("PREFIX rdfs:"))
        self.assertTrue(query.rstrip().endswith("}"))

    def test_untitled_and_broken_queries(self) -> None:
        from rdflib import Graph

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cqs.rq"
            path.write_text(
                "ASK { ?s ?p ?o }\n\n# Broken\nASK { ?s ?p }\n", encoding="utf-8"
            )
            results = CompetencyQuestionRunner(path).run(Graph())

        self.assertEqual("Question 1", results[0].question)
        self.assertTrue(results[0].success)
        self.assertFalse(results[0].answer)
        self.assertEqual("Broken", results[1].question)
        self.assertFalse(results[1].success)
        self.assertIsNone(results[1].answer)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            CompetencyQuestionRunner(Path("does/not/exist.rq"))


def test_bundled_questions_hold_for_chromosome_one(human_ctx):
    results = CompetencyQuestionRunner(DEFAULT_CQS_PATH).run(human_ctx.graph)

    assert all(result.success for result in results)
    assert [result.question for result in results if not result.answer] == []


if __name__ == "__main__":
    unittest.main()
