"""
Review Session - the single state object shared by UI event handlers.

Bundles the word store and the review cursor and exposes one method per
user action, so handlers never touch module-level state.
"""

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from ..errors import EmptyStoreError, IndexOutOfRangeError
from ..models import ViewStage, WordRecord
from ..utils.helpers import build_export_filename
from .review_cursor import ReviewCursor, ReviewProgress
from .word_store import WordStore

logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"[0-9]+")


class ReviewSession:
    """
    Owns the WordStore and ReviewCursor for one review.

    Usage:
        session = ReviewSession()
        session.import_text(raw_text)
        session.next()
        content, filename = session.export()
    """

    def __init__(self, learn_favorites: bool = True) -> None:
        """
        Initialize an empty session.

        Args:
            learn_favorites: Initial value of the learn-favorites toggle
        """
        self.store = WordStore()
        self.cursor = ReviewCursor(self.store, learn_favorites=learn_favorites)

    # ==================== State ====================

    @property
    def is_loaded(self) -> bool:
        return not self.store.is_empty

    @property
    def current_index(self) -> Optional[int]:
        return self.cursor.current_index

    @property
    def current_record(self) -> Optional[WordRecord]:
        return self.cursor.current_record

    @property
    def stage(self) -> ViewStage:
        return self.cursor.stage

    @property
    def learn_favorites_enabled(self) -> bool:
        return self.cursor.learn_favorites_enabled

    @property
    def is_complete(self) -> bool:
        return self.cursor.is_complete

    @property
    def progress(self) -> ReviewProgress:
        return self.cursor.progress()

    # ==================== Import / Export ====================

    def import_text(self, raw_text: str) -> int:
        """
        Replace the word list with the content of a word file.

        Args:
            raw_text: Complete file content

        Returns:
            Number of words loaded
        """
        self.store.load(raw_text)
        self.cursor.reset_for_load()
        logger.info(
            "Imported %d word(s), %d eligible, starting at %s",
            self.store.count,
            self.cursor.eligible_count(),
            self.cursor.current_index,
        )
        return self.store.count

    def export(self, now: Optional[datetime] = None) -> Tuple[str, str]:
        """
        Serialize the word list for download.

        Args:
            now: Timestamp for the filename (defaults to now)

        Returns:
            Tuple of (file content, filename)

        Raises:
            EmptyStoreError: No words are loaded
        """
        if self.store.is_empty:
            raise EmptyStoreError("No data to export.")

        filename = build_export_filename(self.cursor.current_index + 1, now)
        return self.store.serialize(), filename

    # ==================== Navigation ====================

    def next(self) -> None:
        self.cursor.advance()

    def previous(self) -> None:
        self.cursor.retreat()

    def toggle_learned(self) -> bool:
        """Toggle learned on the status stage only."""
        return self.cursor.toggle_learned_if_on_status()

    def jump(self, text: str) -> int:
        """
        Jump to a word from user-entered 1-based index text.

        Args:
            text: Index text, surrounding whitespace allowed

        Returns:
            The 0-based index jumped to

        Raises:
            EmptyStoreError: No words are loaded
            IndexOutOfRangeError: Text is not an integer in 1..n
        """
        if self.store.is_empty:
            raise EmptyStoreError()

        digits = str(text).strip()
        if not _INDEX_PATTERN.fullmatch(digits):
            logger.warning("Rejected jump target %r", text)
            raise IndexOutOfRangeError(text, self.store.count)
        target = int(digits)

        try:
            self.cursor.jump_to(target)
        except IndexOutOfRangeError:
            logger.warning("Rejected jump target %r", text)
            raise

        return self.cursor.current_index

    # ==================== Word actions ====================

    def toggle_favorited(self) -> bool:
        if self.store.is_empty:
            return False
        return self.store.toggle_favorited(self.cursor.current_index)

    def toggle_mastered(self) -> bool:
        if self.store.is_empty:
            return False
        return self.store.toggle_mastered(self.cursor.current_index)

    def toggle_learn_favorites(self) -> bool:
        """Flip the learn-favorites toggle and return its new value."""
        enabled = self.cursor.toggle_learn_favorites_enabled()
        logger.info("Learn favorites %s", "enabled" if enabled else "disabled")
        return enabled

    def edit_current_field(self, field: str, value: str) -> bool:
        """
        Edit a text field of the current word.

        Returns:
            True if the word changed
        """
        if self.store.is_empty:
            return False
        return self.store.edit_field(self.cursor.current_index, field, value)
