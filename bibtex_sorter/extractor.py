"""Split raw BibTeX text into entries.

Extraction runs in two phases. ``scan_boundaries`` cuts the text into spans
that each begin at an entry-opening marker (``@type{``), and
``parse_header`` reads the citation key from the start of each span. Entry
boundaries come only from the next marker, so brace nesting inside field
values is not tracked: a value containing ``@word{`` starts a new entry.
"""

import logging
import re
from typing import List, Optional, Tuple

from .models import BibEntry
from .utils.text_processing import preview_text

logger = logging.getLogger(__name__)

# Entry type words are ASCII letters, digits and underscores.
ENTRY_MARKER_RE = re.compile(r'@[A-Za-z0-9_]+\s*\{')
ENTRY_HEADER_RE = re.compile(r'@([A-Za-z0-9_]+)\s*\{\s*([^,]+),')


def scan_boundaries(text: str) -> List[Tuple[int, int]]:
    """Partition text into spans that start at entry-opening markers.

    The first span runs from the beginning of the text to the first marker
    and holds any leading non-entry text; it is omitted when the text starts
    with a marker. Every other span runs from one marker to the next, or to
    the end of the text.

    Args:
        text: Raw BibTeX text

    Returns:
        List of (start, end) offsets covering the whole text in order
    """
    starts = [match.start() for match in ENTRY_MARKER_RE.finditer(text)]
    if not starts or starts[0] != 0:
        starts.insert(0, 0)

    spans = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else len(text)
        spans.append((start, end))
    return spans


def parse_header(segment: str) -> Optional[Tuple[str, str]]:
    """Read the entry type and citation key from the start of a segment.

    Args:
        segment: Entry text beginning with its ``@`` marker

    Returns:
        (entry_type, key) with the key trimmed, or None when the segment has
        no ``@type{key,`` header or the key is blank
    """
    match = ENTRY_HEADER_RE.match(segment)
    if not match:
        return None
    key = match.group(2).strip()
    if not key:
        return None
    return match.group(1), key


def extract_entries(text: str) -> List[BibEntry]:
    """Extract BibTeX entries from text in the order they appear.

    Segments without a recognisable header are skipped without raising.

    Args:
        text: Raw BibTeX text

    Returns:
        List of entries; empty when nothing matches
    """
    entries = []
    dropped = 0

    for start, end in scan_boundaries(text):
        segment = text[start:end]
        content = segment.strip()
        if not content:
            continue

        header = parse_header(content)
        if header is None:
            dropped += 1
            logger.debug(f"Skipping segment at offset {start}: {preview_text(content)!r}")
            continue

        entry_type, key = header
        content_start = start + (len(segment) - len(segment.lstrip()))
        entries.append(BibEntry(
            id=key,
            content=content,
            entry_type=entry_type,
            start=content_start,
            end=content_start + len(content),
        ))

    if dropped:
        logger.info(f"Skipped {dropped} segment(s) without a valid entry header")
    logger.debug(f"Extracted {len(entries)} entries")
    return entries
