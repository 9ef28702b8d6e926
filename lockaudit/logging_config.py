"""Logging setup for the lockaudit entry point."""
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
