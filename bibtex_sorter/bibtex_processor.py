import logging
from typing import List, Optional

from .extractor import extract_entries
from .exceptions import NoEntriesFoundError
from .models import BibEntry, ErrorKind, SortResult
from .sorter import render_entries, sort_entries
from .utils.file_io import read_text, write_text

logger = logging.getLogger(__name__)

NO_ENTRIES_MESSAGE = (
    "No valid BibTeX entries found. "
    "Ensure your format is correct (e.g., @article{someId, ...})."
)


def sort_bibtex(text: str) -> SortResult:
    """
    Sort the entries of a BibTeX string by citation key.
    
    Never raises: blank input, input without entries and unexpected
    failures are all reported through the ``error`` field of the result.
    
    Args:
        text: Raw BibTeX text
    
    Returns:
        SortResult holding the sorted entries and their rendered text
    """
    if not text or not text.strip():
        return SortResult(error=ErrorKind.EMPTY_INPUT)

    try:
        entries = extract_entries(text)
        if not entries:
            logger.warning("No valid BibTeX entries found in input")
            return SortResult(error=ErrorKind.NO_ENTRIES_FOUND, message=NO_ENTRIES_MESSAGE)

        sorted_entries = sort_entries(entries)
        rendered = render_entries(sorted_entries)
    except Exception as e:
        logger.exception("Failed to sort BibTeX input")
        return SortResult(
            error=ErrorKind.UNEXPECTED_FAILURE,
            message=f"An error occurred during parsing: {e}"
        )

    logger.info(f"Sorted {len(sorted_entries)} entries")
    return SortResult(entries=tuple(sorted_entries), rendered_text=rendered)


def sort_bibtex_file(input_file: Optional[str], output_file: Optional[str] = None) -> SortResult:
    """
    Sort a BibTeX file and optionally save the result.
    
    Args:
        input_file: Path to the input BibTeX file, or None/'-' for stdin
        output_file: Optional path to save the sorted text
    
    Returns:
        SortResult for the file contents
    """
    text = read_text(input_file)
    result = sort_bibtex(text)

    if output_file and result.ok:
        write_text(result.rendered_text + "\n", output_file)
        logger.info(f"Saved {len(result.entries)} sorted entries to {output_file}")

    return result


def load_entries(input_file: Optional[str]) -> List[BibEntry]:
    """
    Extract the entries of a BibTeX file in file order.
    
    Args:
        input_file: Path to the input BibTeX file, or None/'-' for stdin
    
    Returns:
        Entries in the order they appear; empty for a blank file
    
    Raises:
        NoEntriesFoundError: If the file has content but no valid entries
    """
    text = read_text(input_file)
    if not text.strip():
        return []
    entries = extract_entries(text)
    if not entries:
        raise NoEntriesFoundError(f"{input_file or 'stdin'}: {NO_ENTRIES_MESSAGE}")
    return entries
