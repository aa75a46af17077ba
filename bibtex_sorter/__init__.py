"""
Bibtex Sorter - A tool for sorting BibTeX bibliographies by citation key.
"""

from .bibtex_processor import sort_bibtex, sort_bibtex_file
from .clipboard import copy_to_clipboard, copy_to_clipboard_async
from .extractor import extract_entries, parse_header, scan_boundaries
from .models import BibEntry, CopyResult, ErrorKind, SortResult
from .sorter import is_sorted, render_entries, sort_and_render, sort_entries

__version__ = "0.1.0"
__all__ = [
    'sort_bibtex',
    'sort_bibtex_file',
    'copy_to_clipboard',
    'copy_to_clipboard_async',
    'extract_entries',
    'parse_header',
    'scan_boundaries',
    'BibEntry',
    'CopyResult',
    'ErrorKind',
    'SortResult',
    'is_sorted',
    'render_entries',
    'sort_and_render',
    'sort_entries'
]
