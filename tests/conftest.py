import pytest

from karyotype_owl.assembler import build_human_ontology
from karyotype_owl.context import BuildContext
from karyotype_owl.events import declare_event_vocabulary


@pytest.fixture
def human_ctx():
    """Context holding the vocabularies and the bands of chromosomes 1 and 21."""

    ctx = BuildContext.create()
    build_human_ontology(ctx, chromosomes=["1", "21"])
    declare_event_vocabulary(ctx)
    return ctx
