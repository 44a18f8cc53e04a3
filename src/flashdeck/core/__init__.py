"""Core library for flashdeck."""

from flashdeck.core.codec import (
    CardFileError,
    CardNotFoundError,
    dumps,
    export_cards,
    import_cards,
    loads,
)
from flashdeck.core.models import Card
from flashdeck.core.quiz import EmptyDeckError, QuizEngine, QuizResult, Verdict
from flashdeck.core.store import (
    CardStore,
    DuplicateCardError,
    DuplicateDefinitionError,
    DuplicateTermError,
)
from flashdeck.core.transcript import Transcript, TranscriptError

__all__ = [
    # Models
    "Card",
    # Store
    "CardStore",
    "DuplicateCardError",
    "DuplicateDefinitionError",
    "DuplicateTermError",
    # File format
    "CardFileError",
    "CardNotFoundError",
    "dumps",
    "export_cards",
    "import_cards",
    "loads",
    # Quiz
    "EmptyDeckError",
    "QuizEngine",
    "QuizResult",
    "Verdict",
    # Transcript
    "Transcript",
    "TranscriptError",
]
