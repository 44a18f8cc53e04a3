"""Quiz engine: asks cards in store order and grades free-text answers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from flashdeck.core.models import Card
from flashdeck.core.store import CardStore


class EmptyDeckError(Exception):
    """Raised when a quiz is requested but there are no cards."""


class Verdict(StrEnum):
    """Outcome of a single quiz answer."""

    CORRECT = "correct"
    WRONG = "wrong"
    OTHER_CARD = "other-card"  # Wrong here, but the definition of another card


@dataclass
class QuizResult:
    """Result of grading one answer."""

    card: Card
    answer: str
    verdict: Verdict
    matched_term: str | None = None

    @property
    def correct(self) -> bool:
        return self.verdict == Verdict.CORRECT


class QuizEngine:
    """Cycles through the store asking for definitions.

    Cards are asked in store order and wrap around when more questions are
    requested than there are cards, so a card can come up several times in
    one round.
    """

    def __init__(self, store: CardStore):
        self.store = store

    def schedule(self, count: int) -> list[int]:
        """Card indices to ask for a round of ``count`` questions."""
        if count <= 0:
            return []
        if len(self.store) == 0:
            raise EmptyDeckError("There are no cards to ask.")
        return [i % len(self.store) for i in range(count)]

    def grade(self, index: int, answer: str) -> QuizResult:
        """Grade an answer for the card at ``index``.

        A wrong answer counts as a mistake for this card only, even when it
        matches another card's definition.
        """
        card = self.store[index]
        if answer == card.definition:
            return QuizResult(card=card, answer=answer, verdict=Verdict.CORRECT)

        card.miss()
        other = self.store.find_by_definition(answer)
        if other is not None:
            return QuizResult(
                card=card,
                answer=answer,
                verdict=Verdict.OTHER_CARD,
                matched_term=self.store[other].term,
            )
        return QuizResult(card=card, answer=answer, verdict=Verdict.WRONG)
