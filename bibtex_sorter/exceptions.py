"""Custom exceptions for Bibtex Sorter."""


class BibSortError(Exception):
    """Base exception for BibTeX sorting errors."""
    pass


class NoEntriesFoundError(BibSortError):
    """Raised when non-blank input contains no recognisable BibTeX entries."""
    pass


class ClipboardError(BibSortError):
    """Raised when the system clipboard cannot be written."""
    pass
