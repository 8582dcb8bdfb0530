"""
Spoken input parsing.

Speech-to-text transcripts arrive as words ("two point four metres").
Numeric fields need a decimal string ("2.4"); anything that doesn't
parse comes back as None and the caller ignores it.
"""

import re
from typing import Optional

NUMBER_WORDS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11,
    "twelve": 12, "fifteen": 15, "twenty": 20, "thirty": 30, "forty": 40,
    "fifty": 50, "hundred": 100,
}
_TENS = (20, 30, 40, 50)

_UNIT_WORDS = re.compile(r"metres?|meters?|\bm\b")
_TOKEN = re.compile(r"[a-z]+|\d+(?:\.\d+)?|\S")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _compose(pending: Optional[int], value: int) -> Optional[int]:
    """Fold a number word into the group being built, or None to start a new group."""
    if pending is None:
        return value
    if value == 100:
        return pending * 100 if pending < 100 else None
    if value < 10 and pending % 100 in _TENS:
        return pending + value               # twenty five
    if pending >= 100 and pending % 100 == 0:
        return pending + value               # one hundred twenty
    return None


def _words_to_digits(text: str) -> str:
    pieces = []
    pending = None
    for token in _TOKEN.findall(text):
        if token == "and":
            continue
        value = NUMBER_WORDS.get(token)
        if value is not None:
            composed = _compose(pending, value)
            if composed is None:
                pieces.append(str(pending))
                composed = value
            pending = composed
            continue
        if pending is not None:
            pieces.append(str(pending))
            pending = None
        pieces.append("." if token == "point" else token)
    if pending is not None:
        pieces.append(str(pending))
    return "".join(pieces)


def _format_number(number: float) -> str:
    """2.0 → '2', 2.5 → '2.5'."""
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def parse_spoken_value(raw: Optional[str], numeric: bool) -> Optional[str]:
    """
    Convert a transcript into a field value.

    Text fields get the trimmed transcript. Numeric fields drop unit words,
    turn number words and "point" into digits, and return the leading
    decimal number as a string, or None when there isn't one.
    """
    if raw is None:
        return None
    if not numeric:
        return raw.strip()

    text = _UNIT_WORDS.sub("", raw.lower())
    match = _LEADING_NUMBER.match(_words_to_digits(text))
    if not match:
        return None
    return _format_number(float(match.group()))
