from __future__ import annotations

from enum import Enum
from typing import Protocol

ROMAN_DIGITS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)
ROMAN_VALUES = {"i": 1, "v": 5, "x": 10, "l": 50, "c": 100, "d": 500, "m": 1000}


class Bulleting(Protocol):
    def next(self) -> str:
        ...


class _NoBulleting:
    def next(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "NO_BULLETING"


NO_BULLETING: Bulleting = _NoBulleting()


def _letters(value: int) -> str:
    result = ""
    while value > 0:
        value, remainder = divmod(value - 1, 26)
        result = chr(ord("a") + remainder) + result
    return result


def _parse_letters(label: str) -> int:
    if not label or not label.isascii() or not label.isalpha():
        raise ValueError(f"Not a letter label: {label!r}")
    result = 0
    for char in label.lower():
        result = 26 * result + (ord(char) - ord("a") + 1)
    return result


def _roman(value: int) -> str:
    parts = []
    for amount, digits in ROMAN_DIGITS:
        count, value = divmod(value, amount)
        parts.append(digits * count)
    return "".join(parts)


def _parse_roman(label: str) -> int:
    lowered = label.lower()
    if not lowered or any(char not in ROMAN_VALUES for char in lowered):
        raise ValueError(f"Not a roman numeral: {label!r}")
    total = 0
    for index, char in enumerate(lowered):
        value = ROMAN_VALUES[char]
        if index + 1 < len(lowered) and ROMAN_VALUES[lowered[index + 1]] > value:
            total -= value
        else:
            total += value
    return total


class NumberingType(Enum):
    ARABIC_DIGITS = "1"
    LOWERCASE_LETTERS = "a"
    UPPERCASE_LETTERS = "A"
    LOWERCASE_ROMAN_NUMERALS = "i"
    UPPERCASE_ROMAN_NUMERALS = "I"

    @classmethod
    def from_type_attribute(cls, value: str) -> NumberingType:
        for member in cls:
            if member.value == value.strip():
                return member
        return cls.ARABIC_DIGITS

    def format(self, value: int) -> str:
        if self is NumberingType.ARABIC_DIGITS or value <= 0:
            return str(value)
        if self is NumberingType.LOWERCASE_LETTERS:
            return _letters(value)
        if self is NumberingType.UPPERCASE_LETTERS:
            return _letters(value).upper()
        if self is NumberingType.LOWERCASE_ROMAN_NUMERALS:
            return _roman(value)
        return _roman(value).upper()

    def parse(self, label: str) -> int:
        if self is NumberingType.ARABIC_DIGITS:
            return int(label)
        if self in (NumberingType.LOWERCASE_LETTERS, NumberingType.UPPERCASE_LETTERS):
            return _parse_letters(label)
        return _parse_roman(label)


class ConstantBulleting:
    def __init__(self, bullet: str) -> None:
        self.bullet = bullet

    def next(self) -> str:
        return self.bullet


class NumberedBulleting:
    def __init__(self, numbering_type: NumberingType, start: int = 1) -> None:
        self.numbering_type = numbering_type
        self.next_value = start

    def next(self) -> str:
        label = self.numbering_type.format(self.next_value) + "."
        self.next_value += 1
        return label


class OneShotBulleting:
    """Hands out one label of the wrapped bulleting, then blanks."""

    def __init__(self, delegate: Bulleting) -> None:
        self._delegate = delegate
        self.consumed = False

    def next(self) -> str:
        if self.consumed:
            return ""
        self.consumed = True
        return self._delegate.next()
