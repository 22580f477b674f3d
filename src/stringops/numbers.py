"""Currency formatting, digit spelling and digit detection.

`to_currency` only understands plain numeric strings: an integer part made
of digits, optionally followed by `.` and a fractional part. There is no
locale handling; thousands are always separated with `,`.
"""

__docformat__ = 'google'

__all__ = [
    'to_currency',
    'from_currency',
    'number_words',
    'is_digit'
]

import re
from stringops.core import requires_string
from stringops.patterns import (
    DIGIT_PATTERN,
    DIGIT_WORDS,
    COMMA_RUN_PATTERN,
    TRAILING_COMMA_PATTERN,
    DECIMAL_SEPARATOR,
    THOUSANDS_SEPARATOR,
    thousands_group_pattern
)

@requires_string
def to_currency(text: str) -> str:
    """
    Insert thousands separators into a numeric string.

    The first group holds `len % 3` digits (three when the length is a multiple
    of three) and every later group holds three. Anything after the first `.`
    up to the next `.` is kept as the fractional part.

    Args:
        text: Numeric string, e.g. '1234567.89'

    Returns:
        Comma-grouped string

    Example:
        >>> to_currency('1234567.89')
        '1,234,567.89'
        >>> to_currency('999')
        '999'
        >>> to_currency('1000')
        '1,000'
    """
    parts = text.split(DECIMAL_SEPARATOR)
    integer = parts[0]
    leading = len(integer) % 3 or 3

    grouped = thousands_group_pattern(leading).sub(
        lambda match: match.group() + THOUSANDS_SEPARATOR, integer
    )
    grouped = TRAILING_COMMA_PATTERN.sub('', grouped)

    if len(parts) > 1 and parts[1]:
        return grouped + DECIMAL_SEPARATOR + parts[1]
    return grouped

@requires_string
def from_currency(text: str) -> str:
    """
    Remove thousands separators.

    Example:
        >>> from_currency('1,234,567.89')
        '1234567.89'
        >>> from_currency('1,,000')
        '1000'
    """
    return COMMA_RUN_PATTERN.sub('', text)

@requires_string
def number_words(text: str) -> str:
    """
    Spell out every digit as an English word.

    A digit at index 0 is replaced by its bare word; every other digit is
    replaced by a space followed by its word, even if it is the first digit
    in the string. Other characters stay where they are.

    Example:
        >>> number_words('5')
        'five'
        >>> number_words('a5')
        'a five'
        >>> number_words('123')
        'one two three'
        >>> number_words('a1b22')
        'a one b two two'
    """
    def spell(match: re.Match) -> str:
        word = DIGIT_WORDS[match.group()]
        if match.start() == 0:
            return word
        return ' ' + word

    return DIGIT_PATTERN.sub(spell, text)

@requires_string
def is_digit(text: str) -> bool:
    """
    Check whether a string is exactly one digit.

    Example:
        >>> is_digit('7')
        True
        >>> is_digit('77')
        False
        >>> is_digit('')
        False
    """
    return DIGIT_PATTERN.fullmatch(text) is not None
