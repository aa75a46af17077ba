"""Tabular index of extracted entries."""

from pathlib import Path
from typing import Iterable

import pandas as pd

from .models import BibEntry
from .utils.file_io import ensure_directory_exists

INDEX_COLUMNS = ['position', 'id', 'entry_type', 'start', 'end']


def entries_to_frame(entries: Iterable[BibEntry]) -> pd.DataFrame:
    """Build a DataFrame with one row per entry, in the given order.
    
    Args:
        entries: Entries to index
        
    Returns:
        DataFrame with position, id, entry_type, start and end columns
    """
    rows = [
        {
            'position': position,
            'id': entry.id,
            'entry_type': entry.entry_type,
            'start': entry.start,
            'end': entry.end,
        }
        for position, entry in enumerate(entries, start=1)
    ]
    return pd.DataFrame(rows, columns=INDEX_COLUMNS)


def export_index_csv(entries: Iterable[BibEntry], output_path: str) -> str:
    """Export the entry index to a CSV file.
    
    Args:
        entries: Entries to index
        output_path: Path to save the CSV file
        
    Returns:
        Path to the saved file
    """
    ensure_directory_exists(Path(output_path).parent)
    df = entries_to_frame(entries)
    df.to_csv(output_path, index=False)
    return output_path
