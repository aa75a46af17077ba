"""
Tests for clipboard writes.
"""

import asyncio
from unittest.mock import patch

import pyperclip
import pytest

from bibtex_sorter.clipboard import copy_to_clipboard, copy_to_clipboard_async, write_clipboard
from bibtex_sorter.exceptions import ClipboardError


@patch('bibtex_sorter.clipboard.pyperclip.copy')
def test_copy_to_clipboard(mock_copy):
    """Test a successful copy."""
    result = copy_to_clipboard("@misc{a, x}")

    assert result.success
    assert result.error is None
    mock_copy.assert_called_once_with("@misc{a, x}")


@patch('bibtex_sorter.clipboard.pyperclip.copy')
def test_copy_to_clipboard_failure(mock_copy, caplog):
    """A clipboard failure is logged and reported, not raised."""
    mock_copy.side_effect = pyperclip.PyperclipException("no clipboard mechanism")

    result = copy_to_clipboard("@misc{a, x}")

    assert not result.success
    assert "no clipboard mechanism" in result.error
    assert "Failed to copy text" in caplog.text


@patch('bibtex_sorter.clipboard.pyperclip.copy')
def test_copy_to_clipboard_empty(mock_copy):
    """Empty text is never sent to the clipboard."""
    result = copy_to_clipboard("")

    assert not result.success
    assert result.error == "Nothing to copy"
    mock_copy.assert_not_called()


@patch('bibtex_sorter.clipboard.pyperclip.copy')
def test_write_clipboard_raises(mock_copy):
    """write_clipboard wraps backend errors in ClipboardError."""
    mock_copy.side_effect = pyperclip.PyperclipException("boom")

    with pytest.raises(ClipboardError):
        write_clipboard("text")


@patch('bibtex_sorter.clipboard.pyperclip.copy')
def test_copy_to_clipboard_async(mock_copy):
    """The async copy returns the same result as the blocking one."""
    result = asyncio.run(copy_to_clipboard_async("@misc{a, x}"))

    assert result.success
    mock_copy.assert_called_once_with("@misc{a, x}")
