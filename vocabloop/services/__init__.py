"""Services layer for business logic separation."""

from .word_store import WordStore
from .review_cursor import ReviewCursor, ReviewProgress, is_eligible
from .review_session import ReviewSession
from .repository import WordFileRepository

__all__ = [
    "WordStore",
    "ReviewCursor",
    "ReviewProgress",
    "is_eligible",
    "ReviewSession",
    "WordFileRepository",
]
