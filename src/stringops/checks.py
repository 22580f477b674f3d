"""Simple pattern predicates."""

__docformat__ = 'google'

__all__ = [
    'has_vowels',
    'is_question',
    'double_check'
]

from stringops.core import requires_string
from stringops.segments import trim_space
from stringops.patterns import (
    VOWEL_PATTERN,
    QUESTION_PATTERN,
    DOUBLE_CHARACTER_PATTERN
)

@requires_string
def has_vowels(text: str) -> bool:
    """
    Check for at least one of a, e, i, o, u in either case.

    Example:
        >>> has_vowels('Ink')
        True
        >>> has_vowels('xyz')
        False
    """
    return VOWEL_PATTERN.search(text) is not None

@requires_string
def is_question(text: str) -> bool:
    """
    Check whether the string ends with '?' once surrounding whitespace is trimmed.

    Example:
        >>> is_question('  Are we there yet?  ')
        True
        >>> is_question('Stop.')
        False
    """
    return QUESTION_PATTERN.search(trim_space(text)) is not None

@requires_string
def double_check(text: str) -> bool:
    """
    Check whether any character is immediately repeated.

    Example:
        >>> double_check('hello')
        True
        >>> double_check('world')
        False
    """
    return DOUBLE_CHARACTER_PATTERN.search(text) is not None
