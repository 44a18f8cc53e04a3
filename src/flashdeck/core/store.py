"""In-memory card store with duplicate checks."""

from collections.abc import Iterable, Iterator

from flashdeck.core.models import Card


class DuplicateCardError(Exception):
    """Raised when a card would repeat an existing term or definition."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(value)


class DuplicateTermError(DuplicateCardError):
    """The term is already used by another card."""


class DuplicateDefinitionError(DuplicateCardError):
    """The definition is already used by another card."""


class CardStore:
    """Ordered collection of cards, kept in insertion order.

    Terms and definitions are unique across the store.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        self._cards: list[Card] = list(cards) if cards is not None else []

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    @property
    def cards(self) -> list[Card]:
        """A snapshot of the cards in store order."""
        return list(self._cards)

    def find_by_term(self, term: str) -> int | None:
        """Index of the card with this term, or None."""
        for index, card in enumerate(self._cards):
            if card.term == term:
                return index
        return None

    def find_by_definition(self, definition: str) -> int | None:
        """Index of the card with this definition, or None."""
        for index, card in enumerate(self._cards):
            if card.definition == definition:
                return index
        return None

    def has_term(self, term: str) -> bool:
        return self.find_by_term(term) is not None

    def has_definition(self, definition: str) -> bool:
        return self.find_by_definition(definition) is not None

    def add(self, term: str, definition: str) -> Card:
        """Append a new card with no mistakes.

        Raises DuplicateTermError or DuplicateDefinitionError and leaves the
        store untouched if either value is already present.
        """
        if self.has_term(term):
            raise DuplicateTermError(term)
        if self.has_definition(definition):
            raise DuplicateDefinitionError(definition)

        card = Card(term=term, definition=definition)
        self._cards.append(card)
        return card

    def remove(self, term: str) -> bool:
        """Remove the first card with this term. Returns False if there is none."""
        index = self.find_by_term(term)
        if index is None:
            return False
        self._cards = self._cards[:index] + self._cards[index + 1 :]
        return True

    def replace(self, cards: Iterable[Card]) -> None:
        """Swap the whole store for a new list of cards."""
        self._cards = list(cards)

    def reset_stats(self) -> None:
        """Set every card's mistake count back to zero."""
        for card in self._cards:
            card.mistakes = 0

    def hardest_cards(self) -> list[Card]:
        """Cards sharing the highest mistake count, in store order.

        Empty when no card has ever been missed.
        """
        most = max((card.mistakes for card in self._cards), default=0)
        if most == 0:
            return []
        return [card for card in self._cards if card.mistakes == most]
