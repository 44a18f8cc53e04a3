"""Tests for the in-memory card store."""

import pytest
from flashdeck.core.codec import loads
from flashdeck.core.models import Card
from flashdeck.core.store import (
    CardStore,
    DuplicateCardError,
    DuplicateDefinitionError,
    DuplicateTermError,
)


@pytest.fixture
def store():
    """A store with three capitals."""
    store = CardStore()
    store.add("France", "Paris")
    store.add("Japan", "Tokyo")
    store.add("Peru", "Lima")
    return store


class TestAdd:
    """Tests for adding cards."""

    def test_add_appends_in_order(self, store):
        store.add("Chile", "Santiago")
        assert [c.term for c in store] == ["France", "Japan", "Peru", "Chile"]
        assert store[3].mistakes == 0

    def test_duplicate_term_rejected(self, store):
        """Test that a repeated term leaves the store unchanged."""
        before = store.cards
        with pytest.raises(DuplicateTermError) as exc:
            store.add("France", "Lyon")
        assert exc.value.value == "France"
        assert store.cards == before

    def test_duplicate_definition_rejected(self, store):
        """Test that a repeated definition leaves the store unchanged."""
        before = store.cards
        with pytest.raises(DuplicateDefinitionError):
            store.add("Texas", "Paris")
        assert store.cards == before

    def test_duplicate_errors_share_base(self):
        assert issubclass(DuplicateTermError, DuplicateCardError)
        assert issubclass(DuplicateDefinitionError, DuplicateCardError)


class TestLookup:
    """Tests for linear lookups."""

    def test_find_by_term(self, store):
        assert store.find_by_term("Japan") == 1
        assert store.find_by_term("Italy") is None

    def test_find_by_definition(self, store):
        assert store.find_by_definition("Lima") == 2
        assert store.find_by_definition("Rome") is None

    def test_lookup_is_case_sensitive(self, store):
        assert store.find_by_term("france") is None
        assert not store.has_definition("paris")


class TestRemove:
    """Tests for removing cards."""

    def test_remove_existing(self, store):
        assert store.remove("Japan")
        assert [c.term for c in store] == ["France", "Peru"]

    def test_remove_missing_keeps_length(self, store):
        """Test that removing an unknown term changes nothing."""
        assert not store.remove("Italy")
        assert len(store) == 3

    def test_remove_then_readd(self, store):
        store.remove("France")
        store.add("France", "Paris")
        assert store.find_by_term("France") == 2

    def test_remove_only_first_of_repeated_term(self):
        """Test that an imported file with a repeated term loses one card per remove."""
        store = CardStore(loads("a=1=0\na=2=0\nb=3=0\n"))

        assert store.remove("a")
        assert [(c.term, c.definition) for c in store] == [("a", "2"), ("b", "3")]


class TestStats:
    """Tests for mistake statistics."""

    def test_hardest_cards_ties(self):
        """Test that all cards sharing the top count are returned."""
        store = CardStore(
            [
                Card(term="a", definition="1", mistakes=2),
                Card(term="b", definition="2", mistakes=2),
                Card(term="c", definition="3", mistakes=1),
            ]
        )
        assert [c.term for c in store.hardest_cards()] == ["a", "b"]

    def test_hardest_card_single(self, store):
        store[2].mistakes = 4
        store[0].mistakes = 1
        assert [c.term for c in store.hardest_cards()] == ["Peru"]

    def test_hardest_cards_none_missed(self, store):
        assert store.hardest_cards() == []

    def test_hardest_cards_empty_store(self):
        assert CardStore().hardest_cards() == []

    def test_reset_stats(self, store):
        """Test that resetting leaves no hardest cards."""
        for card in store:
            card.mistakes = 3
        store.reset_stats()
        assert all(card.mistakes == 0 for card in store)
        assert store.hardest_cards() == []


class TestReplace:
    def test_replace_swaps_everything(self, store):
        store.replace([Card(term="x", definition="y", mistakes=5)])
        assert len(store) == 1
        assert store[0].term == "x"

    def test_cards_is_a_snapshot(self, store):
        snapshot = store.cards
        snapshot.clear()
        assert len(store) == 3
