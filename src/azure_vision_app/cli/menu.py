"""Interactive menu loop."""

import logging
from collections.abc import Callable
from pathlib import Path

import httpx

from azure_vision_app.cli import flows
from azure_vision_app.reporter import Reporter
from azure_vision_app.vision.client import VisionClient

logger = logging.getLogger(__name__)

# A camera
BANNER = "\n".join(
    [
        "      .-------------------.",
        '     /--"--.------.------/|',
        "     |     |__Ll__| [==] ||",
        '     |     | .--. | """" ||',
        "     |     |( () )|      ||",
        "     |     | `--' |      |/",
        "     `-----'------'------'",
    ]
)

MENU_LINES = (
    "Välj ett alternativ:",
    "1. Analysera en lokal fil",
    "2. Analysera en bild-URL",
    "3. Avsluta",
    "4. Hjälp",
)

HELP_LINES = (
    "1. Skriv '1' för att analysera en lokal bildfil. "
    "Du behöver ange den fullständiga sökvägen till filen.",
    "2. Skriv '2' för att analysera en bild via en URL. "
    "Se till att URL:en är korrekt och att bilden är tillgänglig.",
    "3. Skriv '3' för att avsluta applikationen.",
    "4. Skriv '4' för att visa denna hjälpsektion.",
)

EXIT_TEXT = "Avslutar programmet..."
INVALID_CHOICE_TEXT = "Ogiltigt val, vänligen försök igen."


def print_welcome(reporter: Reporter) -> None:
    reporter.info(BANNER)
    reporter.section(None, ["Välkommen till Azure Vision App!"], "cyan")
    reporter.info("Denna applikation analyserar bilder och ger dig detaljerad information om dem.")


def print_help(reporter: Reporter) -> None:
    reporter.section("Hjälpsektion:", HELP_LINES)


def run_menu(
    client: VisionClient,
    reporter: Reporter,
    read_line: Callable[[], str] | None = None,
    output_dir: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> None:
    """Show the menu and dispatch choices until '3' or end of input."""
    read_line = read_line or input
    while True:
        reporter.section(None, MENU_LINES)
        try:
            choice = read_line().strip().lower()
            logger.debug("Menu choice: %r", choice)

            if choice == "1":
                reporter.info("Ange sökvägen till bilden:")
                image_file = read_line().strip()
                flows.analyze_file(client, image_file, reporter, read_line, output_dir)
            elif choice == "2":
                reporter.info("Ange URL till bilden:")
                image_url = read_line().strip()
                flows.analyze_url(
                    client, image_url, reporter, read_line, output_dir, transport=transport
                )
            elif choice == "3":
                reporter.info(EXIT_TEXT)
                return
            elif choice == "4":
                print_help(reporter)
            else:
                reporter.warn(INVALID_CHOICE_TEXT)
        except EOFError:
            reporter.info(EXIT_TEXT)
            return
