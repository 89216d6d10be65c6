"""Data models for VocabLoop."""

from .word import EDITABLE_FIELDS, ViewStage, WordRecord

__all__ = [
    'EDITABLE_FIELDS',
    'ViewStage',
    'WordRecord',
]
