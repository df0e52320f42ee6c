"""Utility for removing accents from text."""

import unicodedata


def strip_diacritics(text: str) -> str:
    """Decompose text (NFKD) and drop combining marks, so 'é' becomes 'e'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
