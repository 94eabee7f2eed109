import pytest

from karyotype_owl.assembler import build_human_ontology
from karyotype_owl.context import BuildContext
from karyotype_owl.errors import ReasonerError
from karyotype_owl.events import declare_event_vocabulary
from karyotype_owl.reasoning import run_reasoner


def test_run_reasoner_on_small_build():
    ctx = BuildContext.create()
    build_human_ontology(ctx, chromosomes=["21"])
    declare_event_vocabulary(ctx)

    try:
        report = run_reasoner(ctx.graph)
    except ReasonerError as exc:
        pytest.skip(str(exc))
        return

    assert report.enabled
    assert report.consistent
    assert report.unsatisfiable_classes == []
    assert report.backend == "hermit"


def test_disabled_reasoner_reports_nothing():
    ctx = BuildContext.create()
    report = run_reasoner(ctx.graph, enabled=False)

    assert not report.enabled
    assert report.consistent is None
