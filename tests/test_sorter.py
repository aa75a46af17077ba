"""
Tests for ordering and rendering entries.
"""

import pytest

from bibtex_sorter.models import BibEntry
from bibtex_sorter.sorter import is_sorted, render_entries, sort_and_render, sort_entries


def make_entry(key, body="x"):
    return BibEntry(id=key, content=f"@misc{{{key}, note={{{body}}}}}", entry_type="misc")


def test_sort_entries_ignores_case():
    """Test case-insensitive ordering."""
    entries = [make_entry("Bravo"), make_entry("alpha"), make_entry("Charlie")]
    assert [e.id for e in sort_entries(entries)] == ["alpha", "Bravo", "Charlie"]


def test_sort_entries_is_stable():
    """Keys that compare equal keep their input order."""
    first = make_entry("Key1", "first")
    second = make_entry("key1", "second")

    assert sort_entries([first, second]) == [first, second]
    assert sort_entries([second, first]) == [second, first]


def test_sort_entries_ignores_accents():
    """Accented keys sort next to their base letters."""
    entries = [make_entry("zoe"), make_entry("Émile"), make_entry("emile"), make_entry("Dupont")]
    assert [e.id for e in sort_entries(entries)] == ["Dupont", "Émile", "emile", "zoe"]


def test_sort_entries_does_not_mutate_input():
    """Sorting returns a new list."""
    entries = [make_entry("b"), make_entry("a")]
    sort_entries(entries)
    assert [e.id for e in entries] == ["b", "a"]


def test_render_entries():
    """Entries are joined by exactly one blank line."""
    entries = [make_entry("a"), make_entry("b")]
    rendered = render_entries(entries)

    assert rendered == "@misc{a, note={x}}\n\n@misc{b, note={x}}"
    assert not rendered.endswith("\n")
    assert render_entries([]) == ""


def test_sort_and_render():
    """Test sorting and rendering in one step."""
    entries = [make_entry("zzz"), make_entry("aaa")]
    assert sort_and_render(entries) == "@misc{aaa, note={x}}\n\n@misc{zzz, note={x}}"


def test_is_sorted():
    """Test detecting already-sorted entries."""
    assert is_sorted([])
    assert is_sorted([make_entry("a")])
    assert is_sorted([make_entry("alpha"), make_entry("Bravo")])
    assert is_sorted([make_entry("Key1"), make_entry("key1")])
    assert not is_sorted([make_entry("Bravo"), make_entry("alpha")])


@pytest.mark.parametrize("keys, expected", [
    (["smith2020", "smith_2020", "doe1998", "doe:1999"],
     ["doe:1999", "doe1998", "smith_2020", "smith2020"]),
    (["a-b", "ab", "a_b"], ["a_b", "a-b", "ab"]),
    (["Knuth1984", "DBLP:journals/cacm/Knuth74", "dblp2020"],
     ["DBLP:journals/cacm/Knuth74", "dblp2020", "Knuth1984"]),
])
def test_sort_entries_locale_order(keys, expected):
    """Punctuation in keys sorts before digits and letters."""
    entries = [make_entry(key) for key in keys]
    assert [e.id for e in sort_entries(entries)] == expected


def test_is_sorted_with_punctuation():
    """is_sorted agrees with sort_entries on punctuated keys."""
    assert is_sorted([make_entry("doe:1999"), make_entry("doe1998")])
    assert not is_sorted([make_entry("smith2020"), make_entry("smith_2020")])
