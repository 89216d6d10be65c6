"""Persistent review preferences stored as JSON, overridable from the environment."""

import json
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .settings import Config

_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Process-wide review preferences.

    Values come from DEFAULTS, then settings.json, then environment
    variables of the same name. Every set() rewrites the file.

    Usage:
        settings = SettingsManager()
        if settings.get("LEARN_FAVORITES"):
            ...
        settings.set("LAST_IMPORT_PATH", "/words/week1.txt")
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    DEFAULTS: Dict[str, Any] = {
        "LEARN_FAVORITES": True,
        "EXPORT_DIR": Config.EXPORT_DIR,
        "LAST_IMPORT_PATH": "",
        "LOG_LEVEL": "INFO",
        "LOG_TO_FILE": False,
        "WINDOW_WIDTH": 1100,
        "WINDOW_HEIGHT": 760,
    }

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Load preferences once per process.

        Args:
            settings_file: JSON file to use, Config.SETTINGS_FILE by default.
                           Ignored after the first construction.
        """
        if getattr(self, "_initialized", False):
            return

        self._path = Path(settings_file or Config.SETTINGS_FILE)
        self._values: Dict[str, Any] = dict(self.DEFAULTS)
        self._write_lock = Lock()

        self._load()
        self._initialized = True

    def _load(self) -> None:
        if self._path.exists():
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    self._values.update(json.load(f))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)

        for key, default in self.DEFAULTS.items():
            raw = os.environ.get(key)
            if raw is not None:
                self._values[key] = self._coerce(raw, default)

        self._save()

    @staticmethod
    def _coerce(raw: str, default: Any) -> Any:
        """Convert an environment string to the type of its default."""
        if isinstance(default, bool):
            return raw.lower() in ("true", "1", "yes", "on")
        if isinstance(default, int):
            try:
                return int(raw)
            except ValueError:
                logger.warning("Expected an integer, got %r; using %r", raw, default)
                return default
        return raw

    def _save(self) -> None:
        with self._write_lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with open(self._path, "w", encoding="utf-8") as f:
                    json.dump(self._values, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.warning("Could not write settings file %s: %s", self._path, e)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a preference and write the settings file."""
        self._values[key] = value
        self._save()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so the next construction reloads."""
        with cls._lock:
            cls._instance = None
