"""Console front-end: analyze images with Azure Computer Vision."""

import argparse
import logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the interactive menu."""
    parser = argparse.ArgumentParser(description="Azure Vision App")
    parser.add_argument(
        "--settings",
        help="Path to the JSON settings file (default: appsettings.json, or AZURE_VISION_SETTINGS)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level for stderr output (default: WARNING, or AZURE_VISION_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    from azure_vision_app.cli.menu import print_welcome, run_menu
    from azure_vision_app.config import LOG_LEVEL, load_settings
    from azure_vision_app.exceptions import AuthError, ConfigError
    from azure_vision_app.logging_config import configure_logging
    from azure_vision_app.reporter import RichReporter
    from azure_vision_app.vision.client import VisionClient

    configure_logging(args.log_level or LOG_LEVEL)
    reporter = RichReporter()
    print_welcome(reporter)

    try:
        settings = load_settings(args.settings)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        reporter.error(f"Ett fel inträffade: {e}")
        return 1

    try:
        with VisionClient(settings) as client:
            run_menu(client, reporter)
    except AuthError as e:
        logger.error("Authentication failed: %s", e)
        reporter.error(f"Ett fel inträffade: {e}")
        return 1
    except KeyboardInterrupt:
        reporter.info("Avslutar programmet...")
        return 130
    except Exception as e:
        logger.exception("Unexpected failure")
        reporter.error(f"Ett fel inträffade: {e}")
        reporter.info("Kontrollera att bilden är korrekt och att URL:en är tillgänglig.")
        return 1
    return 0
