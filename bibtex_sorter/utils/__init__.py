"""Utility functions for Bibtex Sorter."""

from .file_io import read_text, write_text, ensure_directory_exists
from .text_processing import collation_key, preview_text

__all__ = [
    'read_text',
    'write_text',
    'ensure_directory_exists',
    'collation_key',
    'preview_text'
]
