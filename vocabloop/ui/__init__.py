"""UI components for VocabLoop."""

from .review import ReviewView, create_review_view, KEY_BINDINGS

__all__ = [
    'ReviewView',
    'create_review_view',
    'KEY_BINDINGS',
]
