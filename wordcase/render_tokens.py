"""Logic for joining word tokens in a given case style."""

from collections.abc import Callable, Sequence

from wordcase.capitalize_first import capitalize_first
from wordcase.case_style import CaseStyle


def _render_camel(tokens: Sequence[str]) -> str:
    first, *rest = tokens
    return first + "".join(capitalize_first(t) for t in rest)


def _render_pascal(tokens: Sequence[str]) -> str:
    return "".join(capitalize_first(t) for t in tokens)


def _joiner(sep: str) -> Callable[[Sequence[str]], str]:
    return lambda tokens: sep.join(tokens)


RENDERERS: dict[CaseStyle, Callable[[Sequence[str]], str]] = {
    CaseStyle.CAMEL: _render_camel,
    CaseStyle.PASCAL: _render_pascal,
    CaseStyle.KEBAB: _joiner("-"),
    CaseStyle.DOT: _joiner("."),
    CaseStyle.SNAKE: _joiner("_"),
}


def render_tokens(tokens: Sequence[str], style: CaseStyle) -> str:
    """Render lowercase tokens as a single string in the requested style."""
    if not tokens:
        return ""
    return RENDERERS[style](tokens)
