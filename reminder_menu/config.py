"""Environment configuration and logging setup for the interactive menu."""
import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL = os.getenv("EVENT_REMINDER_LOG_LEVEL", "WARNING")

# "0", "false" or "no" turns off the "Press Enter to continue" pause
PAUSE_AFTER_ACTION = os.getenv("EVENT_REMINDER_PAUSE", "1").strip().lower() not in ("0", "false", "no")


def setup_logging(log_level: str = LOG_LEVEL) -> None:
    """
    Route log records to stderr through rich.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
