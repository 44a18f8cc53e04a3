"""Interactive command loop for a study session.

Every line shown to the user and every line read back is recorded in the
session transcript, which the ``log`` command writes to a file.
"""

import logging
import re
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.control import strip_control_codes

from flashdeck.core.codec import CardNotFoundError, export_cards, import_cards
from flashdeck.core.quiz import EmptyDeckError, QuizEngine, Verdict
from flashdeck.core.store import CardStore
from flashdeck.core.transcript import Transcript

logger = logging.getLogger(__name__)

ACTION_PROMPT = (
    "Input the action (add, remove, import, export, ask, exit, log, hardest card, reset stats):"
)

# ASCII digits only, no underscores
_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputClosedError(Exception):
    """Standard input ended or could not be read."""


class InvalidCountError(Exception):
    """The number of questions to ask is not an integer."""


class Session:
    """Reads commands one line at a time and runs them against a card store."""

    def __init__(
        self,
        store: CardStore,
        transcript: Transcript | None = None,
        *,
        stdin: TextIO | None = None,
        console: Console | None = None,
        export_to: Path | None = None,
    ):
        self.store = store
        self.transcript = transcript if transcript is not None else Transcript()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.console = console if console is not None else Console()
        self.export_to = export_to
        self.quiz = QuizEngine(store)
        self.running = False

        self.commands: dict[str, Callable[[], None]] = {
            "add": self.add,
            "remove": self.remove,
            "import": self.import_file,
            "export": self.export_file,
            "ask": self.ask,
            "log": self.log,
            "reset stats": self.reset_stats,
            "hardest card": self.hardest_card,
            "exit": self.exit,
        }

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def say(self, message: str) -> None:
        """Print a line to the user and record it.

        Control characters are dropped from both copies so the transcript
        matches what was shown.
        """
        message = strip_control_codes(message)
        self.console.out(message, highlight=False)
        self.transcript.record(message)

    def listen(self) -> str:
        """Read one line from the user, stripped, and record it."""
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputClosedError(str(e)) from e
        if not line:
            raise InputClosedError("EOF")

        line = line.strip()
        self.transcript.record(line)
        return line

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Prompt for commands until ``exit``."""
        self.running = True
        while self.running:
            self.say(ACTION_PROMPT)
            command = self.listen()
            handler = self.commands.get(command)
            if handler is None:
                logger.debug("Ignoring unknown action %r", command)
                continue
            handler()

    def load(self, path: Path) -> None:
        """Replace the store with the cards in ``path``.

        A missing file is reported to the user and leaves the store empty.
        """
        try:
            cards = import_cards(path)
        except CardNotFoundError as e:
            logger.warning("%s", e)
            self.store.replace([])
            self.say("File not found.")
            return

        self.store.replace(cards)
        self.say(f"{len(cards)} cards have been loaded.")

    def save(self, path: Path) -> None:
        """Write the store to ``path``."""
        count = export_cards(path, self.store.cards)
        self.say(f"{count} cards have been saved.")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add(self) -> None:
        self.say("The card:")
        term = self.listen()
        while self.store.has_term(term):
            self.say(f'The term "{term}" already exists. Try again:')
            term = self.listen()

        self.say("The definition of the card:")
        definition = self.listen()
        while self.store.has_definition(definition):
            self.say(f'The definition "{definition}" already exists. Try again:')
            definition = self.listen()

        self.store.add(term, definition)
        self.say(f'The pair ("{term}":"{definition}") has been added.')

    def remove(self) -> None:
        self.say("Which card?")
        term = self.listen()
        if self.store.remove(term):
            self.say("The card has been removed.")
        else:
            self.say(f'Can\'t remove "{term}": there is no such card.')

    def import_file(self) -> None:
        self.say("File name:")
        self.load(Path(self.listen()))

    def export_file(self) -> None:
        self.say("File name:")
        self.save(Path(self.listen()))

    def ask(self) -> None:
        self.say("How many times to ask?")
        raw = self.listen()
        if not _COUNT_PATTERN.fullmatch(raw):
            raise InvalidCountError(f"Not a number of questions: {raw!r}")
        count = int(raw)

        try:
            schedule = self.quiz.schedule(count)
        except EmptyDeckError as e:
            self.say(str(e))
            return

        for index in schedule:
            card = self.store[index]
            self.say(f'Print the definition of "{card.term}":')
            result = self.quiz.grade(index, self.listen())

            if result.verdict == Verdict.CORRECT:
                self.say("Correct!")
            elif result.verdict == Verdict.OTHER_CARD:
                self.say(
                    f'Wrong. The right answer is "{card.definition}", '
                    f'but your definition is correct for "{result.matched_term}".'
                )
            else:
                self.say(f'Wrong. The right answer is "{card.definition}".')

    def log(self) -> None:
        self.say("File name:")
        path = Path(self.listen())
        # The confirmation is recorded only after the dump, so it is not in the file
        self.transcript.save(path)
        self.say("The log has been saved.")

    def reset_stats(self) -> None:
        self.store.reset_stats()
        self.say("Card statistics have been reset.")

    def hardest_card(self) -> None:
        hardest = self.store.hardest_cards()
        if not hardest:
            self.say("There are no cards with errors.")
        elif len(hardest) == 1:
            card = hardest[0]
            self.say(
                f'The hardest card is "{card.term}". '
                f"You have {card.mistakes} errors answering it."
            )
        else:
            terms = ", ".join(f'"{card.term}"' for card in hardest)
            total = sum(card.mistakes for card in hardest)
            self.say(f"The hardest cards are {terms}. You have {total} errors answering them.")

    def exit(self) -> None:
        if self.export_to is not None:
            self.save(self.export_to)
        self.say("Bye bye!")
        self.running = False
