"""Configuration module for VocabLoop."""

from .settings import Config
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'SettingsManager',
]
