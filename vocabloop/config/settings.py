"""Global settings and configuration."""

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass
class Config:
    """Application-wide configuration."""

    APP_TITLE: str = "VocabLoop"

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of vocabloop/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    EXPORT_DIR: str = str(BASE_DIR / "data" / "export")
    LOG_DIR: str = str(BASE_DIR / "data" / "logs")
    SETTINGS_FILE: str = str(BASE_DIR / "settings.json")

    # File encoding (utf-8-sig tolerates a BOM, undecodable bytes become U+FFFD)
    READ_ENCODING: str = "utf-8-sig"
    READ_ERRORS: str = "replace"
    WRITE_ENCODING: str = "utf-8"
