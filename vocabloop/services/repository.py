"""
Word File Repository - file I/O boundary for word lists.

Reads word files into text and writes exported text to disk. Parsing and
serialization stay in the word store; this layer only moves strings.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from ..config import Config

logger = logging.getLogger(__name__)


class WordFileRepository:
    """
    Plain-text storage for word files.

    Usage:
        repo = WordFileRepository(export_dir="data/export")
        text = repo.read_text("words.txt")
        path = repo.write_export(content, filename)
    """

    # Thread pool for blocking I/O operations
    _executor = ThreadPoolExecutor(max_workers=2)

    def __init__(self, export_dir: Optional[str] = None) -> None:
        """
        Initialize the repository.

        Args:
            export_dir: Directory for exported files
        """
        self.export_dir = Path(export_dir or Config.EXPORT_DIR)

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read a word file.

        Args:
            path: File to read

        Returns:
            Complete file content

        Raises:
            OSError: File missing or unreadable
        """
        path = Path(path)
        text = path.read_text(encoding=Config.READ_ENCODING, errors=Config.READ_ERRORS)
        logger.info("Read %s (%d bytes)", path, len(text))
        return text

    def write_export(self, content: str, filename: str) -> Path:
        """
        Write exported word file text.

        Args:
            content: Serialized word list
            filename: Target file name inside the export directory

        Returns:
            Path of the written file
        """
        self.export_dir.mkdir(parents=True, exist_ok=True)
        target = self.export_dir / filename
        with open(target, "w", encoding=Config.WRITE_ENCODING, newline="") as f:
            f.write(content)
        logger.info("Exported word list to %s", target)
        return target

    async def read_text_async(self, path: Union[str, Path]) -> str:
        """Read a word file without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.read_text, path)

    async def write_export_async(self, content: str, filename: str) -> Path:
        """Write an export without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.write_export, content, filename)
