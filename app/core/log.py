"""
Logging helpers.

Messages may carry transcript or chart fragments, so every argument passed to
a logger from this module goes through `sanitize` before it is formatted.
"""

import logging
import traceback
from typing import Any

from app.core.config import get_settings

PHI_KEYS = {
    "patientname",
    "chiefcomplaint",
    "hpitext",
    "medications",
    "rostext",
    "pmh",
    "socialhistory",
    "familyhistory",
    "physicalexam",
    "labsstudies",
    "assessment",
    "plan",
    "text",
    "transcript",
    "content",
    "summary",
    "keyfindings",
    "redflags",
    "vitals",
    "evidence",
    "diseasename",
    "utterances",
    "doctornotes",
    "html",
    "question",
    "selectedtext",
    "comment",
}

MAX_STRING = 200
KEEP_STRING = 100

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def sanitize(data: Any) -> Any:
    """Redact PHI keys and clip long strings, recursively."""
    if data is None:
        return data
    if isinstance(data, BaseException):
        return {
            "name": type(data).__name__,
            "message": str(data),
            "stack": "".join(traceback.format_exception(data)),
        }
    if isinstance(data, str):
        if len(data) > MAX_STRING:
            return f"{data[:KEEP_STRING]}...[TRUNCATED]"
        return data
    if isinstance(data, (list, tuple)):
        return [sanitize(item) for item in data]
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if str(key).lower() in PHI_KEYS else sanitize(value)
            for key, value in data.items()
        }
    return data


class RedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, dict):
            record.args = sanitize(record.args)
        elif record.args:
            record.args = tuple(sanitize(arg) for arg in record.args)
        return True


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(f, RedactingFilter) for f in logger.filters):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.addFilter(RedactingFilter())
        logger.propagate = False
    if level is None:
        level = get_settings().LOG_LEVEL
    logger.setLevel(level.upper())
    return logger
