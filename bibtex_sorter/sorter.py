"""Ordering and rendering of extracted BibTeX entries."""

from typing import Iterable, List, Sequence

from .models import BibEntry
from .utils.text_processing import collation_key

ENTRY_SEPARATOR = "\n\n"


def sort_entries(entries: Iterable[BibEntry]) -> List[BibEntry]:
    """Sort entries by citation key, ignoring case and accents.
    
    The sort is stable: keys that compare equal keep their input order.
    
    Args:
        entries: Entries to sort
        
    Returns:
        New list of entries in key order
    """
    return sorted(entries, key=lambda entry: collation_key(entry.id))


def render_entries(entries: Iterable[BibEntry]) -> str:
    """Join entry texts with one blank line between consecutive entries."""
    return ENTRY_SEPARATOR.join(entry.content for entry in entries)


def sort_and_render(entries: Iterable[BibEntry]) -> str:
    """Sort entries by key and render them as BibTeX text."""
    return render_entries(sort_entries(entries))


def is_sorted(entries: Sequence[BibEntry]) -> bool:
    """Check whether entries are already in key order."""
    keys = [collation_key(entry.id) for entry in entries]
    return all(a <= b for a, b in zip(keys, keys[1:]))
