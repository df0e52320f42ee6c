"""Supported output case styles."""

from enum import Enum


class CaseStyle(str, Enum):
    """Named rendering convention for a token sequence."""

    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    DOT = "dot"
    SNAKE = "snake"


def parse_case_style(name: str | CaseStyle) -> CaseStyle:
    """Resolve a style name (case-insensitive) to a CaseStyle member."""
    if isinstance(name, CaseStyle):
        return name
    try:
        return CaseStyle(name.strip().lower())
    except ValueError:
        choices = ", ".join(style.value for style in CaseStyle)
        msg = f"Unknown case style {name!r} (choose from: {choices})"
        raise ValueError(msg) from None
