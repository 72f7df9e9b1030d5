from __future__ import annotations

from dataclasses import dataclass

from intcnv.word import INPUT_MASK, fits64, wrap64

WHITESPACE = " \t\n\r\f\v"
DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class ParsedValue:
    value: int
    digits: str
    trailing: str
    malformed: bool = False
    wrapped: bool = False


class ValueScanner:
    """Scans a decimal prefix the way C's ``atoi`` does.

    Leading whitespace and one sign character are accepted, then the longest
    run of decimal digits. Whatever follows is kept as ``trailing``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._text[self._pos]

    def _advance(self) -> str:
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def scan(self) -> ParsedValue:
        while self._peek() in WHITESPACE:
            self._advance()

        start = self._pos
        negative = False
        if self._peek() in "+-":
            negative = self._advance() == "-"

        digit_start = self._pos
        magnitude = 0
        overflow = False
        while self._peek() in DIGITS:
            magnitude = magnitude * 10 + int(self._advance())
            # past 2**64 the value fits neither u64 nor i64; keep only the residue
            if magnitude > INPUT_MASK + 1:
                overflow = True
                magnitude &= INPUT_MASK
        digits = self._text[digit_start:self._pos]

        if not digits:
            # no number at all: atoi yields 0 and consumes nothing
            return ParsedValue(
                value=0,
                digits="",
                trailing=self._text[start:],
                malformed=True,
            )

        number = -magnitude if negative else magnitude

        return ParsedValue(
            value=wrap64(number),
            digits=digits,
            trailing=self._text[self._pos:],
            wrapped=overflow or not fits64(number),
        )


def parse_value(text: str) -> ParsedValue:
    scanner = ValueScanner(text)
    return scanner.scan()
