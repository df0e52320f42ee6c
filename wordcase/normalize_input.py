"""Logic for coercing raw input values into canonical text."""

import numbers
import unicodedata

from wordcase.invalid_input_type import InvalidInputType
from wordcase.strip_diacritics import strip_diacritics


def normalize_input(value: object, strip_accents: bool = True) -> str:
    """Coerce a string or number to trimmed, Unicode-normalized text.

    Returns an empty string for None and whitespace-only input. Any other kind
    of value raises InvalidInputType.
    """
    if value is None:
        return ""
    # bool is an int subclass but is not a number to callers
    if isinstance(value, bool):
        raise InvalidInputType(type(value).__name__)
    if isinstance(value, str):
        text = value
    elif isinstance(value, numbers.Real):
        text = str(value)
    else:
        raise InvalidInputType(type(value).__name__)

    text = text.strip()
    if not text:
        return ""

    if strip_accents:
        return strip_diacritics(text)
    return unicodedata.normalize("NFC", text)
