"""End-to-end builds through the pipeline and the command-line script."""

import json
import unittest
from pathlib import Path
import tempfile

from rdflib import Graph
from rdflib.namespace import OWL, RDF

from karyotype_owl.config import BuildConfig
from karyotype_owl.namespaces import HUMAN as H
from karyotype_owl.pipeline import KaryotypeOntologyPipeline


class PipelineTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_run_writes_ontology_and_report(self) -> None:
        config = BuildConfig(
            output_path=self.tmp / "out" / "karyotype.ttl",
            report_path=self.tmp / "out" / "report.json",
            chromosomes=["21"],
        )
        report = KaryotypeOntologyPipeline(config).run()

        self.assertEqual(["HumanChromosome21"], report["build"]["chromosomes"])
        self.assertTrue(report["shacl"]["conforms"])
        self.assertEqual(6, len(report["competency_questions"]))
        self.assertNotIn("reasoner", report)

        graph = Graph().parse(config.output_path, format="turtle")
        self.assertIn((H.HumanChromosome21BandqTer, RDF.type, OWL.Class), graph)
        saved = json.loads(config.report_path.read_text(encoding="utf-8"))
        self.assertEqual(report["build"]["triples"], saved["build"]["triples"])

    def test_validation_and_questions_can_be_disabled(self) -> None:
        config = BuildConfig(
            output_path=self.tmp / "karyotype.owl",
            output_format="xml",
            chromosomes=["Y"],
            validation_enabled=False,
            competency_questions_path=None,
        )
        pipeline = KaryotypeOntologyPipeline(config)
        report = pipeline.run()

        self.assertEqual({"build"}, set(report))
        self.assertTrue(config.output_path.exists())
        self.assertIsNotNone(pipeline.context)
        self.assertEqual(1, report["build"]["entities"]["centromere"])


def test_cli_builds_selected_chromosomes(tmp_path, capsys):
    from scripts.build_ontology import main

    output = tmp_path / "karyotype.ttl"
    status = main(["--output", str(output), "--chromosomes", "21", "22", "--no-validate"])

    assert status == 0
    assert output.exists()
    assert "Build complete" in capsys.readouterr().out


def test_cli_reports_unknown_chromosomes(tmp_path):
    from scripts.build_ontology import main

    status = main(["--output", str(tmp_path / "k.ttl"), "--chromosomes", "25"])
    assert status == 1


if __name__ == "__main__":
    unittest.main()
