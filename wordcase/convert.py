"""Public conversion entry points: normalize, tokenize, render."""

import logging
from collections.abc import Iterable

from wordcase.case_style import CaseStyle, parse_case_style
from wordcase.normalize_input import normalize_input
from wordcase.render_tokens import render_tokens
from wordcase.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

_TOKENIZER = Tokenizer()


def tokenize(value: object, strip_accents: bool = True) -> list[str]:
    """Normalize a raw value and split it into lowercase word tokens."""
    text = normalize_input(value, strip_accents=strip_accents)
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def convert(
    value: object, style: str | CaseStyle, strip_accents: bool = True
) -> str:
    """Convert a string or number to the given case style.

    None, empty, whitespace-only and separator-only input give "". Values that
    are neither text nor numbers raise InvalidInputType.
    """
    case_style = parse_case_style(style)
    return render_tokens(tokenize(value, strip_accents), case_style)


def convert_all(
    values: Iterable[object], style: str | CaseStyle, strip_accents: bool = True
) -> list[str]:
    """Convert every value in order; the first invalid value raises."""
    case_style = parse_case_style(style)
    results = [convert(v, case_style, strip_accents) for v in values]
    logger.debug("Converted %d values to %s", len(results), case_style.value)
    return results
