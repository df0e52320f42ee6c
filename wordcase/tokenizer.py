"""Logic for splitting normalized text into lowercase word tokens."""

import logging
from enum import Enum

from wordcase.char_class import CharClass, classify_char

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """Position of the scanner relative to the current word."""

    START = "start"
    IN_LOWER = "in_lower"
    IN_UPPER = "in_upper"
    IN_UPPER_RUN = "in_upper_run"
    IN_DIGIT = "in_digit"
    IN_SEPARATOR = "in_separator"


class Tokenizer:
    """Splits camelCase, PascalCase, acronyms, and separated text into words."""

    def tokenize(self, text: str) -> list[str]:
        """Split text into lowercase tokens in a single forward scan.

        Boundary precedence:
        1. Case boundary: an uppercase letter after a lowercase letter or digit
           starts a new word (fooBar -> foo, bar).
        2. Acronym boundary: a lowercase letter or digit after a run of 2+
           uppercase letters takes the run's last letter with it
           (XMLHttp -> xml, http; HTTP2Server -> htt, p2, server).
        3. Any run of non-alphanumeric characters is one boundary and is dropped.
        """
        tokens: list[str] = []
        current: list[str] = []
        state = ScanState.START

        for ch in text:
            kind = classify_char(ch)

            if kind is CharClass.SEPARATOR:
                self._emit(current, tokens)
                state = ScanState.IN_SEPARATOR
                continue

            if kind is CharClass.UPPER:
                if state in (ScanState.IN_LOWER, ScanState.IN_DIGIT):
                    self._emit(current, tokens)
                    state = ScanState.IN_UPPER
                elif state is ScanState.IN_UPPER:
                    state = ScanState.IN_UPPER_RUN
                elif state is not ScanState.IN_UPPER_RUN:
                    state = ScanState.IN_UPPER
                current.append(ch)
                continue

            if state is ScanState.IN_UPPER_RUN:
                # Last capital of the run opens the next word
                head = current.pop()
                self._emit(current, tokens)
                current.append(head)
            current.append(ch)
            if kind is CharClass.LOWER:
                state = ScanState.IN_LOWER
            else:
                state = ScanState.IN_DIGIT

        self._emit(current, tokens)
        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return tokens

    def _emit(self, current: list[str], tokens: list[str]) -> None:
        """Flush the pending characters as one lowercase token, if any."""
        if current:
            tokens.append("".join(current).lower())
            current.clear()
