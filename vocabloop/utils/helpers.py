"""Utility functions."""

from datetime import datetime
from typing import Optional


EXPORT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def build_export_filename(position: int, now: Optional[datetime] = None) -> str:
    """
    Build the export filename for a word file.

    Args:
        position: 1-based index of the word being reviewed
        now: Timestamp to embed (defaults to the current local time)

    Returns:
        Filename like words_12_20240131_235959.txt
    """
    now = now or datetime.now()
    return f"words_{position}_{now.strftime(EXPORT_TIMESTAMP_FORMAT)}.txt"

