"""Recoverable errors surfaced to the user as messages."""


class ReviewError(Exception):
    """Base class for review session errors."""


class EmptyStoreError(ReviewError):
    """Raised when an operation needs words but none are loaded."""

    def __init__(self, message: str = "No words loaded. Import a word file first.") -> None:
        super().__init__(message)


class IndexOutOfRangeError(ReviewError):
    """Raised when a jump target is not a valid 1-based word index."""

    def __init__(self, value: object, total: int) -> None:
        self.value = value
        self.total = total
        super().__init__(f"Index must be a number between 1 and {total} (got {value!r})")
