"""Shared utilities: datetime, sanitization."""

from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.sanitization import InputSanitizer

__all__ = [
    "utc_now",
    "ensure_utc",
    "InputSanitizer",
]
