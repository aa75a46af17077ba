"""File I/O utilities for Bibtex Sorter."""

import os
import sys
from pathlib import Path
from typing import Optional, Union


def ensure_directory_exists(directory: Union[str, Path]) -> None:
    """Ensure that a directory exists, creating it if necessary."""
    if directory:
        os.makedirs(directory, exist_ok=True)


def read_text(path: Optional[str] = None) -> str:
    """Read a BibTeX file, or standard input when no path is given.
    
    Args:
        path: Path to the file; None or '-' reads stdin
        
    Returns:
        File contents as a string
    """
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(text: str, output_path: Union[str, Path]) -> str:
    """Save text to a file, creating the parent directory if needed.
    
    Args:
        text: Text to save
        output_path: Path to save the file
        
    Returns:
        Path to the saved file
    """
    ensure_directory_exists(os.path.dirname(str(output_path)))
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text)
    return str(output_path)
