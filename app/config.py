"""
Configuration settings for the ResumeForge application.

Values come from the environment (or a local .env file).
You can override any of them without touching the code.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

APP_TITLE = os.getenv("APP_TITLE", "ResumeForge")

# Logging level for the app's own loggers ("DEBUG", "INFO", ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# PDF export configuration
# Set to "A4" or "LETTER"
PDF_PAGE_SIZE = os.getenv("PDF_PAGE_SIZE", "A4").upper()

# The download name is fixed
EXPORT_FILENAME = "resume.pdf"

# Height (px) of the preview iframe
PREVIEW_HEIGHT = int(os.getenv("PREVIEW_HEIGHT", "900"))

# third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("watchdog", "PIL", "fontTools")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the app."""
    level = level or LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
