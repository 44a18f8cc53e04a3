"""Main CLI entry point for flashdeck."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.markup import escape

from flashdeck.cli.helpers import console, err_console, setup_logging
from flashdeck.cli.session import InputClosedError, InvalidCountError, Session
from flashdeck.core.codec import CardFileError
from flashdeck.core.store import CardStore
from flashdeck.core.transcript import TranscriptError

load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="flashdeck",
    help="Study term/definition flashcards from the command line.",
    add_completion=False,
)


@app.command()
def study(
    import_from: Path | None = typer.Option(
        None,
        "--import_from",
        "--import-from",
        envvar="FLASHDECK_IMPORT_FROM",
        help="(Optional) File to import cards from at startup",
    ),
    export_to: Path | None = typer.Option(
        None,
        "--export_to",
        "--export-to",
        envvar="FLASHDECK_EXPORT_TO",
        help="(Optional) File to export cards to on exit",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="FLASHDECK_LOG_LEVEL",
        help="Diagnostic log level (written to stderr)",
    ),
) -> None:
    """Run an interactive study session."""
    setup_logging(log_level)

    session = Session(CardStore(), stdin=sys.stdin, console=console, export_to=export_to)
    try:
        if import_from is not None:
            session.load(import_from)
        session.run()
    except InputClosedError as e:
        session.say(f"Error reading input: {e}")
        raise typer.Exit(1)
    except (InvalidCountError, CardFileError, TranscriptError) as e:
        logger.debug("Fatal error", exc_info=True)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


# ============================================================================
# Main entry point
# ============================================================================


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
