"""Compiled regex patterns and lookup tables used by the string operations.

All case handling is restricted to the ASCII letters `A-Z` and `a-z`.

Whitespace is Python's `\\s`, which is close to but not the same as the
JavaScript class: it also matches the separators `\\x1c`-`\\x1f`, and it does
not match the byte order mark `\\ufeff`.
"""

__docformat__ = 'google'

import re
from functools import cache
from typing import Dict

# Building blocks
LOWER: str = "[a-z]"
UPPER: str = "[A-Z]"
LETTER: str = "[A-Za-z]"
DIGIT: str = "[0-9]"

## Case
LOWER_PATTERN: re.Pattern = re.compile(LOWER)
"""Compiled regex matching a single ASCII lowercase letter.

Used in `stringops.casing.to_upper`."""

UPPER_PATTERN: re.Pattern = re.compile(UPPER)
"""Compiled regex matching a single ASCII uppercase letter.

Used in `stringops.casing.to_lower` and `stringops.casing.inverse_case`."""

LETTER_PATTERN: re.Pattern = re.compile(LETTER)
"""Compiled regex matching a single ASCII letter of either case.

Used in `stringops.casing.inverse_case` and `stringops.casing.alternating_case`."""

CASE_SHIFT: int = ord('a') - ord('A')
"""Code point distance between an uppercase ASCII letter and its lowercase form (32)."""

## Whitespace and words
EDGE_WHITESPACE_PATTERN: re.Pattern = re.compile(r"\A\s+|\s+\Z")
"""Compiled regex matching leading or trailing whitespace.

Used in `stringops.segments.trim_space`."""

WHITESPACE_RUN_PATTERN: re.Pattern = re.compile(r"\s+")
"""Compiled regex matching one or more consecutive whitespace characters.

Used in `stringops.segments.words` to split word tokens."""

SPECIAL_CHARACTERS_PATTERN: re.Pattern = re.compile(r"[^A-Za-z0-9\s]")
"""Compiled regex matching anything that is not an ASCII letter, digit or whitespace.

Underscores are matched as well. Used in `stringops.segments.remove_special_chars`."""

## Checks
VOWEL_PATTERN: re.Pattern = re.compile("[aeiou]", re.I)
"""Used in `stringops.checks.has_vowels`."""

QUESTION_PATTERN: re.Pattern = re.compile(r"\?\Z")
"""Compiled regex matching a question mark at the very end of a string.

Used in `stringops.checks.is_question`."""

DOUBLE_CHARACTER_PATTERN: re.Pattern = re.compile(r"(.)\1", re.DOTALL)
"""Compiled regex matching any character immediately followed by itself.

Compiled with `re.DOTALL` so that repeated line breaks (`'\\n\\n'`, `'\\r\\r'`) count.
Used in `stringops.checks.double_check`."""

## Numbers
DIGIT_PATTERN: re.Pattern = re.compile(DIGIT)
"""Compiled regex matching a single ASCII digit.

Used in `stringops.numbers.number_words` and, with `fullmatch`, `stringops.numbers.is_digit`."""

DIGIT_WORDS: Dict[str, str] = {
    '0': 'zero',
    '1': 'one',
    '2': 'two',
    '3': 'three',
    '4': 'four',
    '5': 'five',
    '6': 'six',
    '7': 'seven',
    '8': 'eight',
    '9': 'nine'
}
"""English word for each digit character.

Used in `stringops.numbers.number_words`."""

DECIMAL_SEPARATOR: str = "."
THOUSANDS_SEPARATOR: str = ","

COMMA_RUN_PATTERN: re.Pattern = re.compile(",+")
"""Used in `stringops.numbers.from_currency`."""

TRAILING_COMMA_PATTERN: re.Pattern = re.compile(r",\Z")
"""Used in `stringops.numbers.to_currency`."""

@cache
def thousands_group_pattern(leading: int) -> re.Pattern:
    """
    Build the regex that splits an integer string into comma-delimited groups.

    The first group is anchored to the start of the string and holds `leading`
    digits; every later match holds exactly three.

    Args:
        leading: Number of digits in the first group (1, 2 or 3)

    Returns:
        Compiled pattern

    Example:
        >>> thousands_group_pattern(1).pattern
        '^[0-9]{1}|[0-9]{3}'
    """
    return re.compile(f"^{DIGIT}{{{leading}}}|{DIGIT}{{3}}")
