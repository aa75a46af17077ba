"""Data structures shared by the extractor, the sorter and the front ends."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ErrorKind(Enum):
    """Ways a sort request can fail to produce output."""
    EMPTY_INPUT = "empty_input"
    NO_ENTRIES_FOUND = "no_entries_found"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True)
class BibEntry:
    """A single BibTeX entry as it appeared in the input.

    Attributes:
        id: Citation key, trimmed and never empty
        content: Verbatim entry text from the ``@`` marker, trimmed
        entry_type: Word following the ``@`` (e.g. ``article``), as written
        start: Offset of the entry span in the input text
        end: Offset just past the entry span
    """
    id: str
    content: str
    entry_type: str = ""
    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class SortResult:
    """Outcome of one sort request.

    ``rendered_text`` is empty whenever ``error`` is set.
    """
    entries: Tuple[BibEntry, ...] = field(default_factory=tuple)
    rendered_text: str = ""
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CopyResult:
    """Outcome of a clipboard write."""
    success: bool
    error: Optional[str] = None
