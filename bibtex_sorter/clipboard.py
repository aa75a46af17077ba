"""
Clipboard operations for sorted BibTeX output.

Writes are best-effort: failures are logged and reported through a
CopyResult, and never touch the sorted text itself.
"""

import asyncio
import logging

import pyperclip

from .exceptions import ClipboardError
from .models import CopyResult

logger = logging.getLogger(__name__)


def write_clipboard(text: str) -> None:
    """Write text to the system clipboard.
    
    Args:
        text: Text to write to clipboard
        
    Raises:
        ClipboardError: If clipboard access fails
    """
    try:
        pyperclip.copy(text)
    except Exception as e:
        raise ClipboardError(f"Failed to write to clipboard: {e}") from e


def copy_to_clipboard(text: str) -> CopyResult:
    """Copy sorted output to the clipboard.
    
    Args:
        text: Text to copy
        
    Returns:
        CopyResult describing whether the write succeeded
    """
    if not text:
        return CopyResult(success=False, error="Nothing to copy")

    try:
        write_clipboard(text)
    except ClipboardError as e:
        logger.error(f"Failed to copy text: {e}")
        return CopyResult(success=False, error=str(e))

    logger.debug(f"Copied {len(text)} characters to clipboard")
    return CopyResult(success=True)


async def copy_to_clipboard_async(text: str) -> CopyResult:
    """Copy sorted output to the clipboard without blocking the caller."""
    return await asyncio.to_thread(copy_to_clipboard, text)
