#!/usr/bin/env python3
"""Command-line entry point for building the human karyotype ontology."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the project root (containing the ``karyotype_owl`` package) is on
# ``sys.path`` so the script can be executed directly without an install.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from karyotype_owl import BuildConfig, KaryotypeError, KaryotypeOntologyPipeline
from karyotype_owl.errors import ReasonerError
from karyotype_owl.paths import DEFAULT_CQS_PATH, DEFAULT_SHAPES_PATH


def parse_args(argv=None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(description="Build the human chromosome band ontology")
    parser.add_argument("--output", type=Path, required=True, help="Where to write the ontology")
    parser.add_argument(
        "--format",
        default="turtle",
        choices=["turtle", "xml", "pretty-xml", "nt", "json-ld"],
        help="rdflib serialization format",
    )
    parser.add_argument("--report", type=Path, help="Optional JSON report path")
    parser.add_argument(
        "--chromosomes",
        nargs="+",
        metavar="LABEL",
        help="Only build these chromosomes (e.g. 1 2 X); defaults to all",
    )
    parser.add_argument("--no-validate", action="store_true", help="Skip SHACL validation")
    parser.add_argument("--reasoning", action="store_true", help="Classify with HermiT (requires Java)")
    parser.add_argument("--shapes", type=Path, default=DEFAULT_SHAPES_PATH, help="SHACL shapes file")
    parser.add_argument("--cqs", type=Path, default=DEFAULT_CQS_PATH, help="SPARQL ASK competency questions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at debug level")
    args = parser.parse_args(argv)
    return parser, args


def _format_summary(key: str, value: object) -> str:
    if isinstance(value, dict):
        if key == "build":
            return f"{value.get('classes')} classes, {value.get('triples')} triples"
        if key == "shacl":
            return f"conforms={value.get('conforms')} ({len(value.get('results', []))} results)"
        if key == "reasoner":
            return f"consistent={value.get('consistent')}"
        return ", ".join(f"{k}={v}" for k, v in value.items())
    if isinstance(value, list) and key == "competency_questions":
        answered = sum(1 for item in value if item.get("answer"))
        return f"{answered}/{len(value)} answered yes"
    return str(value)


def main(argv=None) -> int:
    _, args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = BuildConfig(
        output_path=args.output,
        report_path=args.report,
        output_format=args.format,
        chromosomes=args.chromosomes,
        shapes_path=args.shapes,
        competency_questions_path=args.cqs,
        validation_enabled=not args.no_validate,
        reasoning_enabled=args.reasoning,
    )
    try:
        report = KaryotypeOntologyPipeline(config).run()
    except (KaryotypeError, ReasonerError, ValueError, FileNotFoundError) as exc:
        logging.getLogger("build_ontology").error("%s", exc)
        return 1

    print("Build complete. Summary:")
    for key, value in report.items():
        print(f"- {key}: {_format_summary(key, value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
