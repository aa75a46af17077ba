"""Text processing utilities for Bibtex Sorter."""

import icu

# Root-locale collator at primary strength: case and accent differences
# compare equal, punctuation sorts before digits and letters.
_COLLATOR = icu.Collator.createInstance(icu.Locale.getRoot())
_COLLATOR.setStrength(icu.Collator.PRIMARY)


def collation_key(text: str) -> bytes:
    """Build a comparison key that ignores case and accents.
    
    Two strings that differ only in letter case or diacritics get the same
    key, so ``"Émile"``, ``"emile"`` and ``"EMILE"`` compare equal. Keys
    order the way a locale-aware string comparison does, so ``"doe:1999"``
    sorts before ``"doe1998"``.
    
    Args:
        text: Text to convert
        
    Returns:
        ICU sort key; compare keys with the usual bytes ordering
    """
    return _COLLATOR.getSortKey(text)


def preview_text(text: str, limit: int = 40) -> str:
    """Collapse whitespace and shorten text for log messages.
    
    Args:
        text: Text to shorten
        limit: Maximum number of characters to keep
        
    Returns:
        Single-line preview, ending in '...' when truncated
    """
    if not text:
        return ""
    
    text = ' '.join(text.split())
    if len(text) > limit:
        return text[:limit].rstrip() + "..."
    return text
