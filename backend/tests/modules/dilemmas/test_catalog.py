"""Tests for the built-in dilemma catalog."""

from modules.dilemmas.catalog import DILEMMAS, StaticCaseCatalog, get_case_catalog
from modules.dilemmas.interfaces import ICaseCatalog
from modules.dilemmas.models import Dilemma, Positions


class TestStaticCaseCatalog:
    def test_implements_interface(self):
        assert isinstance(StaticCaseCatalog(), ICaseCatalog)

    def test_ids_are_unique_and_sequential(self):
        ids = [d.id for d in DILEMMAS]
        assert ids == list(range(1, len(DILEMMAS) + 1))

    def test_every_entry_is_complete(self):
        for dilemma in DILEMMAS:
            assert dilemma.title
            assert dilemma.description
            assert dilemma.context
            assert dilemma.positions.prosecution
            assert dilemma.positions.defense

    def test_list_omits_positions(self):
        summaries = StaticCaseCatalog().list_dilemmas()

        assert len(summaries) == len(DILEMMAS)
        assert summaries[0].title == "The Speluncean Explorers"
        assert "positions" not in summaries[0].model_dump()

    def test_list_in_id_order(self):
        shuffled = (DILEMMAS[2], DILEMMAS[0], DILEMMAS[1])
        summaries = StaticCaseCatalog(shuffled).list_dilemmas()
        assert [s.id for s in summaries] == [1, 2, 3]

    def test_get_dilemma(self):
        assert StaticCaseCatalog().get_dilemma(2) == DILEMMAS[1]

    def test_get_unknown_dilemma(self):
        assert StaticCaseCatalog().get_dilemma(9999) is None

    def test_non_int_ids_never_match(self):
        catalog = StaticCaseCatalog()
        assert catalog.get_dilemma(True) is None
        assert catalog.get_dilemma("1") is None

    def test_custom_catalog(self):
        dilemma = Dilemma(
            id=42,
            title="T",
            description="D",
            context="C",
            positions=Positions(prosecution="P", defense="Q"),
        )
        assert StaticCaseCatalog((dilemma,)).get_dilemma(42) is dilemma


def test_get_case_catalog_is_singleton():
    assert get_case_catalog() is get_case_catalog()
