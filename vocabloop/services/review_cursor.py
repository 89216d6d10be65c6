"""
Review Cursor - navigation over the word store.

Tracks the current word and its view stage, decides which words take part
in the review loop and walks the loop forwards and backwards.

Each word is shown in three stages (word, details, status). Moving past the
status stage lands on the word stage of the next eligible word; moving back
from the word stage lands on the status stage of the previous one. When no
word is eligible, the cursor stays on the current word and only the stage
changes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import EmptyStoreError, IndexOutOfRangeError
from ..models import ViewStage, WordRecord
from .word_store import WordStore

logger = logging.getLogger(__name__)


_NEXT_STAGE = {
    ViewStage.WORD: ViewStage.DETAILS,
    ViewStage.DETAILS: ViewStage.STATUS,
}
_PREV_STAGE = {
    ViewStage.STATUS: ViewStage.DETAILS,
    ViewStage.DETAILS: ViewStage.WORD,
}


def is_eligible(record: WordRecord, learn_favorites: bool = True) -> bool:
    """
    Decide whether a word takes part in the review loop.

    Mastered words never do. Unlearned words always do. Learned words only
    do when they are favorited and favorites are being reviewed.

    Args:
        record: Word to check
        learn_favorites: Whether learned favorites stay in the loop

    Returns:
        True if the word should be shown
    """
    if record.is_mastered:
        return False
    if not record.is_learned:
        return True
    if record.is_favorited:
        return learn_favorites
    return False


@dataclass(frozen=True)
class ReviewProgress:
    """Progress through the word list, derived on demand."""

    position: int
    total: int
    unlearned_seen: int
    unlearned_total: int

    @property
    def label(self) -> str:
        return f"{self.position}/{self.total} ({self.unlearned_seen}/{self.unlearned_total})"

    @property
    def ratio(self) -> float:
        return self.position / self.total if self.total else 0.0

    @property
    def unlearned_ratio(self) -> float:
        return self.unlearned_seen / self.unlearned_total if self.unlearned_total else 0.0


class ReviewCursor:
    """
    Current position and view stage over a WordStore.

    The cursor only reads the store, except for toggling the learned flag
    of the current word from the status stage.
    """

    def __init__(self, store: WordStore, learn_favorites: bool = True) -> None:
        """
        Initialize the cursor.

        Args:
            store: Word store to navigate
            learn_favorites: Initial value of the learn-favorites toggle
        """
        self.store = store
        self.learn_favorites_enabled: bool = learn_favorites
        self.stage: ViewStage = ViewStage.WORD
        self._index: int = 0
        self.reset_for_load()
        store.on_change(self._clamp_index)

    @property
    def current_index(self) -> Optional[int]:
        """Index of the current word, None when the store is empty."""
        if self.store.is_empty:
            return None
        return self._index

    @property
    def current_record(self) -> Optional[WordRecord]:
        if self.store.is_empty:
            return None
        return self.store[self._index]

    def is_eligible(self, record: WordRecord) -> bool:
        """Eligibility under the current learn-favorites setting."""
        return is_eligible(record, self.learn_favorites_enabled)

    def eligible_count(self) -> int:
        """Number of words currently in the review loop."""
        return sum(1 for record in self.store if self.is_eligible(record))

    @property
    def is_complete(self) -> bool:
        """True when words are loaded but none is left to review."""
        return not self.store.is_empty and self.eligible_count() == 0

    def reset_for_load(self) -> None:
        """
        Position the cursor after the store has been (re)loaded.

        Uses the first eligible word under the default learn-favorites
        setting, falling back to the first word.
        """
        self._index = 0
        for index, record in enumerate(self.store):
            if is_eligible(record, learn_favorites=True):
                self._index = index
                break
        self.stage = ViewStage.WORD

    def _clamp_index(self) -> None:
        """Keep the index inside the store after it shrinks."""
        if self._index >= self.store.count:
            self._index = max(self.store.count - 1, 0)
            self.stage = ViewStage.WORD

    def _find_eligible(self, step: int) -> Optional[int]:
        """
        Scan circularly from the current index for an eligible word.

        Probes at most n candidates, ending with the current word itself.

        Args:
            step: +1 to scan forwards, -1 to scan backwards

        Returns:
            Index of the eligible word, or None if there is none
        """
        total = self.store.count
        for offset in range(1, total + 1):
            candidate = (self._index + step * offset) % total
            if self.is_eligible(self.store[candidate]):
                return candidate
        return None

    def advance(self) -> None:
        """Move one stage forward, onto the next eligible word after STATUS."""
        if self.store.is_empty:
            return

        if self.stage in _NEXT_STAGE:
            self.stage = _NEXT_STAGE[self.stage]
            return

        found = self._find_eligible(+1)
        if found is None:
            logger.debug("No eligible word after %d, staying", self._index)
        else:
            self._index = found
        self.stage = ViewStage.WORD

    def retreat(self) -> None:
        """Move one stage back, onto the previous eligible word before WORD."""
        if self.store.is_empty:
            return

        if self.stage in _PREV_STAGE:
            self.stage = _PREV_STAGE[self.stage]
            return

        found = self._find_eligible(-1)
        if found is None:
            logger.debug("No eligible word before %d, staying", self._index)
        else:
            self._index = found
        self.stage = ViewStage.STATUS

    def toggle_learned_if_on_status(self) -> bool:
        """
        Flip the learned flag of the current word on the status stage.

        Returns:
            True if the flag was toggled
        """
        if self.stage is not ViewStage.STATUS or self.store.is_empty:
            return False
        return self.store.toggle_learned(self._index)

    def jump_to(self, one_based_index: int) -> None:
        """
        Move to a word by its 1-based position and show its word stage.

        Raises:
            EmptyStoreError: No words are loaded
            IndexOutOfRangeError: Position outside 1..n
        """
        total = self.store.count
        if total == 0:
            raise EmptyStoreError()
        if not 1 <= one_based_index <= total:
            raise IndexOutOfRangeError(one_based_index, total)

        self._index = one_based_index - 1
        self.stage = ViewStage.WORD

    def toggle_learn_favorites_enabled(self) -> bool:
        """
        Flip whether learned favorites stay in the loop.

        Returns:
            The new setting
        """
        self.learn_favorites_enabled = not self.learn_favorites_enabled
        return self.learn_favorites_enabled

    def progress(self) -> ReviewProgress:
        """Compute position and unlearned progress for display."""
        if self.store.is_empty:
            return ReviewProgress(0, 0, 0, 0)

        return ReviewProgress(
            position=self._index + 1,
            total=self.store.count,
            unlearned_seen=self.store.unlearned_count(upto=self._index),
            unlearned_total=self.store.unlearned_count(),
        )
