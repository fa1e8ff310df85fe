"""Match transcript output and logging setup for the CLI."""

import datetime
import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure_logging(level="WARNING"):
    """Route engine/session debug records to stderr at the requested level."""
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt="%H:%M:%S")
