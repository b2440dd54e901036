"""
Configuration settings for resume2ats.

Values come from the environment (or a local .env file). The scoring
weights and extraction caps are not configurable here: they are part of
the score contract and live as constants next to the code that uses them.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# Logging
# Any standard level name: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL = os.getenv("RESUME2ATS_LOG_LEVEL", "WARNING")

# Report output
# "text", "html" or "json"; anything else falls back to "text"
REPORT_FORMATS = ("text", "html", "json")
DEFAULT_REPORT_FORMAT = "text"

# Document types the extractor knows how to turn into text
SUPPORTED_SUFFIXES = (".pdf", ".txt", ".md")


def get_log_level(name: str | None = None) -> int:
    """Resolve a level name to a logging constant, WARNING if unknown."""
    level = logging.getLevelName((name or LOG_LEVEL).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def get_report_format(name: str | None) -> str:
    fmt = (name or "").strip().lower()
    if fmt in REPORT_FORMATS:
        return fmt
    if fmt:
        logging.getLogger(__name__).warning(
            "Unknown report format %r, using %r", name, DEFAULT_REPORT_FORMAT)
    return DEFAULT_REPORT_FORMAT


REPORT_FORMAT = get_report_format(os.getenv("RESUME2ATS_REPORT_FORMAT"))
