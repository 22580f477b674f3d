"""Case conversion.

Only the ASCII letters are affected. Every function here shifts a letter by a
fixed 32 code points (`stringops.patterns.CASE_SHIFT`) instead of using
`str.upper` / `str.lower`, so accented and non-Latin letters pass through
unchanged. This is a deliberate limitation, not a missing feature.
"""

__docformat__ = 'google'

__all__ = [
    'to_upper',
    'to_lower',
    'uc_first',
    'inverse_case',
    'alternating_case'
]

import re
from stringops.core import requires_string
from stringops.patterns import (
    CASE_SHIFT,
    LOWER_PATTERN,
    UPPER_PATTERN,
    LETTER_PATTERN
)

def _shift_up(match: re.Match) -> str:
    return chr(ord(match.group()) - CASE_SHIFT)

def _shift_down(match: re.Match) -> str:
    return chr(ord(match.group()) + CASE_SHIFT)

@requires_string
def to_upper(text: str) -> str:
    """
    Convert ASCII lowercase letters to uppercase.

    Example:
        >>> to_upper('Hello, World!')
        'HELLO, WORLD!'
        >>> to_upper('café')
        'CAFé'
    """
    return LOWER_PATTERN.sub(_shift_up, text)

@requires_string
def to_lower(text: str) -> str:
    """
    Convert ASCII uppercase letters to lowercase.

    Example:
        >>> to_lower('Hello, World!')
        'hello, world!'
    """
    return UPPER_PATTERN.sub(_shift_down, text)

@requires_string
def uc_first(text: str) -> str:
    """
    Uppercase the first character.

    The first character is located by value and its first occurrence is replaced,
    which is always the character at index 0. Later repeats keep their case.

    Example:
        >>> uc_first('anna')
        'Anna'
        >>> uc_first('')
        ''
    """
    first = text[:1]
    return text.replace(first, to_upper(first), 1)

@requires_string
def inverse_case(text: str) -> str:
    """
    Swap the case of every ASCII letter.

    Example:
        >>> inverse_case('Hello World')
        'hELLO wORLD'
    """
    def invert(match: re.Match) -> str:
        letter = match.group()
        if UPPER_PATTERN.match(letter):
            return to_lower(letter)
        return to_upper(letter)

    return LETTER_PATTERN.sub(invert, text)

@requires_string
def alternating_case(text: str) -> str:
    """
    Lowercase letters at even positions and uppercase letters at odd positions.

    Positions are counted over the whole string, so spaces and punctuation
    take up a position even though they are left as they are.

    Example:
        >>> alternating_case('anonymous')
        'aNoNyMoUs'
        >>> alternating_case('a bc')
        'a bC'
    """
    def alternate(match: re.Match) -> str:
        if match.start() % 2 == 0:
            return to_lower(match.group())
        return to_upper(match.group())

    return LETTER_PATTERN.sub(alternate, text)
