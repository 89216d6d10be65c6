"""
Word Store - in-memory word list for a review session.

Owns the ordered list of word records loaded from a word file and the
in-place mutations (field edits and flag toggles). The list length is
fixed between imports.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from ..models import EDITABLE_FIELDS, WordRecord
from ..utils.parsing import WordFileParser

logger = logging.getLogger(__name__)


class WordStore:
    """
    Ordered, index-addressable sequence of WordRecord.

    Usage:
        store = WordStore.from_text(raw_text)
        store.toggle_favorited(0)
        raw_text = store.serialize()
    """

    def __init__(self, records: Optional[List[WordRecord]] = None) -> None:
        self._records: List[WordRecord] = list(records or [])
        self._dirty: bool = False
        self._change_callbacks: List[Callable[[], None]] = []

    @classmethod
    def from_text(cls, raw_text: str) -> "WordStore":
        """Create a store from raw word file text."""
        store = cls()
        store.load(raw_text)
        return store

    @property
    def count(self) -> int:
        """Get total word count."""
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def has_unsaved_changes(self) -> bool:
        """Check for changes since the last load or export."""
        return self._dirty

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> WordRecord:
        return self._records[index]

    def __iter__(self):
        return iter(self._records)

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for data changes.

        Args:
            callback: Function to call after every mutation
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        self._dirty = True
        for callback in self._change_callbacks:
            callback()

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._records)

    def load(self, raw_text: str) -> "WordStore":
        """
        Replace the store contents with records parsed from raw text.

        Tabs are stripped before splitting; malformed lines are tolerated
        by defaulting missing fields.

        Args:
            raw_text: Complete word file content

        Returns:
            This store, for chaining
        """
        self._records = WordFileParser.parse(raw_text)
        self._dirty = False
        logger.info("Loaded %d word(s)", len(self._records))
        for callback in self._change_callbacks:
            callback()
        return self

    def serialize(self) -> str:
        """Render the store as word file text."""
        return WordFileParser.format(self._records)

    def mark_saved(self) -> None:
        """Clear the unsaved-changes flag after a successful export."""
        self._dirty = False

    def get(self, index: int) -> Optional[WordRecord]:
        """
        Get a copy of the record at index.

        Returns:
            Record copy, or None when out of range
        """
        if not self._in_range(index):
            return None
        return replace(self._records[index])

    def records(self) -> List[WordRecord]:
        """Get copies of all records."""
        return [replace(r) for r in self._records]

    def unlearned_count(self, upto: Optional[int] = None) -> int:
        """
        Count records not yet learned.

        Args:
            upto: Inclusive index limit; None counts the whole store

        Returns:
            Number of unlearned records in records[0..upto]
        """
        records = self._records if upto is None else self._records[:upto + 1]
        return sum(1 for r in records if not r.is_learned)

    def edit_field(self, index: int, field: str, value: str) -> bool:
        """
        Replace one editable text field of a record.

        Args:
            index: Record index
            field: One of phonetic, part_of_speech, meaning, mnemonic
            value: Replacement text

        Returns:
            True if the record changed
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field {field!r} is not editable")

        if not self._in_range(index):
            return False

        record = self._records[index]
        if getattr(record, field) == value:
            return False

        setattr(record, field, value)
        logger.debug("Edited %s of word %d", field, index)
        self._notify_change()
        return True

    def _toggle(self, index: int, flag: str) -> bool:
        if not self._in_range(index):
            return False

        record = self._records[index]
        setattr(record, flag, not getattr(record, flag))
        logger.debug("Toggled %s of word %d to %s", flag, index, getattr(record, flag))
        self._notify_change()
        return True

    def toggle_learned(self, index: int) -> bool:
        """Flip the learned flag. Returns False when nothing changed."""
        return self._toggle(index, "is_learned")

    def toggle_favorited(self, index: int) -> bool:
        """Flip the favorited flag. Returns False when nothing changed."""
        return self._toggle(index, "is_favorited")

    def toggle_mastered(self, index: int) -> bool:
        """Flip the mastered flag. Returns False when nothing changed."""
        return self._toggle(index, "is_mastered")
