"""Pydantic models for flashcards."""

from pydantic import BaseModel, Field


class Card(BaseModel):
    """A term/definition pair with a mistake counter."""

    term: str
    definition: str
    mistakes: int = Field(default=0, ge=0)

    def miss(self) -> None:
        """Record a wrong answer for this card."""
        self.mistakes += 1
