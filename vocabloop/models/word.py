"""Data models for VocabLoop."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ViewStage(Enum):
    """Per-word view phases, cycled in declaration order."""
    WORD = "word"
    DETAILS = "details"
    STATUS = "status"


# Free-text fields that can be edited in place (the headword itself cannot)
EDITABLE_FIELDS: Dict[str, str] = {
    "phonetic": "Phonetic",
    "part_of_speech": "Part of Speech",
    "meaning": "Meaning",
    "mnemonic": "Mnemonic",
}


@dataclass
class WordRecord:
    """One vocabulary entry of a word file."""

    # Text fields
    word: str = ""
    phonetic: str = ""
    part_of_speech: str = ""
    meaning: str = ""
    mnemonic: str = ""

    # Review flags
    is_learned: bool = False
    is_favorited: bool = False
    is_mastered: bool = False
