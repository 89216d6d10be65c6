"""VocabLoop - Flashcard review for vocabulary word files"""

__version__ = "1.0.0"
__author__ = "VocabLoop Team"

from .errors import EmptyStoreError, IndexOutOfRangeError, ReviewError
from .models import EDITABLE_FIELDS, ViewStage, WordRecord
from .services import (
    ReviewCursor,
    ReviewProgress,
    ReviewSession,
    WordFileRepository,
    WordStore,
    is_eligible,
)

__all__ = [
    'EmptyStoreError',
    'IndexOutOfRangeError',
    'ReviewError',
    'EDITABLE_FIELDS',
    'ViewStage',
    'WordRecord',
    'ReviewCursor',
    'ReviewProgress',
    'ReviewSession',
    'WordFileRepository',
    'WordStore',
    'is_eligible',
]
