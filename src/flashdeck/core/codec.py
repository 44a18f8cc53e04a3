"""Flat text storage for cards: one ``term=definition=mistakes`` line per card."""

import logging
from pathlib import Path

from flashdeck.core.models import Card

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "="


class CardFileError(Exception):
    """Error reading or writing a card file."""


class CardNotFoundError(CardFileError):
    """The card file does not exist or cannot be read."""


def _parse_mistakes(raw: str) -> int:
    # Anything but a plain non-negative integer counts as no mistakes
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return 0


def dumps(cards: list[Card]) -> str:
    """Serialize cards, one newline-terminated line each."""
    return "".join(
        f"{card.term}{FIELD_SEPARATOR}{card.definition}{FIELD_SEPARATOR}{card.mistakes}\n"
        for card in cards
    )


def loads(text: str) -> list[Card]:
    """Parse the card file format.

    The text after the last newline is never read as a card, so a file that
    does not end with a newline loses its final line.
    """
    lines = text.split("\n")
    trailing = lines.pop()
    if trailing:
        logger.warning("Ignoring unterminated last line: %r", trailing)

    cards = []
    for lineno, line in enumerate(lines, 1):
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) < 2:
            logger.warning("Skipping malformed line %d: %r", lineno, line)
            continue

        mistakes = _parse_mistakes(fields[2]) if len(fields) > 2 else 0
        cards.append(Card(term=fields[0], definition=fields[1], mistakes=mistakes))

    return cards


def export_cards(path: Path, cards: list[Card]) -> int:
    """Overwrite ``path`` with the given cards. Returns the number written."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(dumps(cards))
    except OSError as e:
        raise CardFileError(f"Cannot write {path}: {e}") from e

    logger.info("Exported %d cards to %s", len(cards), path)
    return len(cards)


def import_cards(path: Path) -> list[Card]:
    """Read every card from ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CardNotFoundError(f"Cannot read {path}: {e}") from e

    cards = loads(text)
    logger.info("Imported %d cards from %s", len(cards), path)
    return cards
