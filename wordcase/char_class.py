"""Character classification used by the tokenizer scan."""

import unicodedata
from enum import Enum


class CharClass(Enum):
    """Role a single character plays in word splitting."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SEPARATOR = "separator"


# Caseless letters (CJK, modifier letters) continue a word like lowercase does.
_CATEGORY_CLASSES = {
    "Lu": CharClass.UPPER,
    "Lt": CharClass.UPPER,
    "Ll": CharClass.LOWER,
    "Lm": CharClass.LOWER,
    "Lo": CharClass.LOWER,
    "Nd": CharClass.DIGIT,
}


def classify_char(ch: str) -> CharClass:
    """Classify one character as lower, upper, digit, or separator."""
    return _CATEGORY_CLASSES.get(unicodedata.category(ch), CharClass.SEPARATOR)
