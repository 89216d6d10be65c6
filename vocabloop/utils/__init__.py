"""Utils module."""

from .helpers import build_export_filename
from .parsing import WordFileParser
from .logger import setup_logger

__all__ = [
    'build_export_filename',
    'WordFileParser',
    'setup_logger',
]
