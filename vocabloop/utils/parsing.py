"""Word file parsing utilities shared by import and export."""

import re
from typing import List

from ..models import WordRecord


class WordFileParser:
    """
    Codec for the pipe-delimited word file format.

    One record per line, eight positional fields:
    word|phonetic|part_of_speech|meaning|mnemonic|learned|favorited|mastered

    Parsing is lenient: missing fields default to empty text or False,
    extra fields are ignored.
    """

    FIELD_DELIMITER = "|"
    RECORD_DELIMITER = "\n"
    FIELD_COUNT = 8

    TRUE_TOKEN = "1"
    FALSE_TOKEN = "0"

    TEXT_FIELDS = ("word", "phonetic", "part_of_speech", "meaning", "mnemonic")
    FLAG_FIELDS = ("is_learned", "is_favorited", "is_mastered")

    TAB_PATTERN = re.compile(r'\t')

    @classmethod
    def strip_tabs(cls, text: str) -> str:
        """Remove every tab character from raw file text."""
        if not text:
            return ""
        return cls.TAB_PATTERN.sub('', text)

    @classmethod
    def split_lines(cls, text: str) -> List[str]:
        """
        Split raw file text into record lines.

        The text is tab-stripped first. Blank lines before the first and
        after the last record are dropped, so a trailing newline does not
        produce an extra empty record. Spaces inside a record are kept. A
        trailing carriage return on each line is dropped.

        Args:
            text: Raw file content

        Returns:
            Record lines, empty list for blank input
        """
        lines = [line.rstrip('\r') for line in cls.strip_tabs(text).split(cls.RECORD_DELIMITER)]
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        return lines

    @classmethod
    def parse_flag(cls, token: str) -> bool:
        """A flag is set only when its token is exactly "1"."""
        return token == cls.TRUE_TOKEN

    @classmethod
    def format_flag(cls, value: bool) -> str:
        """Render a flag as "1" or "0"."""
        return cls.TRUE_TOKEN if value else cls.FALSE_TOKEN

    @classmethod
    def parse_line(cls, line: str) -> WordRecord:
        """
        Parse one record line.

        Args:
            line: A single line without its newline

        Returns:
            WordRecord with missing fields defaulted
        """
        parts = line.split(cls.FIELD_DELIMITER)
        parts += [""] * (cls.FIELD_COUNT - len(parts))

        texts = parts[:len(cls.TEXT_FIELDS)]
        flags = parts[len(cls.TEXT_FIELDS):cls.FIELD_COUNT]

        return WordRecord(
            *texts,
            *(cls.parse_flag(token) for token in flags),
        )

    @classmethod
    def format_line(cls, record: WordRecord) -> str:
        """Render one record as a pipe-delimited line."""
        fields = [getattr(record, name) for name in cls.TEXT_FIELDS]
        fields += [cls.format_flag(getattr(record, name)) for name in cls.FLAG_FIELDS]
        return cls.FIELD_DELIMITER.join(fields)

    @classmethod
    def parse(cls, text: str) -> List[WordRecord]:
        """Parse a whole word file into records."""
        return [cls.parse_line(line) for line in cls.split_lines(text)]

    @classmethod
    def format(cls, records: List[WordRecord]) -> str:
        """Render records as word file text, no trailing newline."""
        return cls.RECORD_DELIMITER.join(cls.format_line(r) for r in records)
