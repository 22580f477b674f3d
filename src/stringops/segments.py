"""Whitespace trimming, special-character stripping and word segmentation."""

__docformat__ = 'google'

__all__ = [
    'trim_space',
    'remove_special_chars',
    'words',
    'word_count',
    'get_middle'
]

from typing import List
from stringops.core import requires_string
from stringops.patterns import (
    EDGE_WHITESPACE_PATTERN,
    WHITESPACE_RUN_PATTERN,
    SPECIAL_CHARACTERS_PATTERN
)

@requires_string
def trim_space(text: str) -> str:
    """
    Remove leading and trailing whitespace. Interior whitespace is untouched.

    Example:
        >>> trim_space('\\t  two  words \\n')
        'two  words'
    """
    return EDGE_WHITESPACE_PATTERN.sub('', text)

@requires_string
def remove_special_chars(text: str) -> str:
    """
    Drop every character that is not an ASCII letter, a digit or whitespace.

    Underscores are dropped too.

    Example:
        >>> remove_special_chars('snake_case, #1!')
        'snakecase 1'
    """
    return SPECIAL_CHARACTERS_PATTERN.sub('', text)

@requires_string
def words(text: str) -> List[str]:
    """
    Split a string into word tokens.

    The string is trimmed and stripped of special characters before being split
    on runs of whitespace.

    Args:
        text: Any string

    Returns:
        List of non-empty tokens in order of appearance; empty if there are none

    Example:
        >>> words('  Hello, World! 123  ')
        ['Hello', 'World', '123']
        >>> words(' ?! ')
        []
        >>> words('-- dashes --')
        ['dashes']
    """
    cleaned = remove_special_chars(trim_space(text))
    if cleaned == '':
        return []
    # stripping can expose whitespace at either end, e.g. '! a'
    return [token for token in WHITESPACE_RUN_PATTERN.split(cleaned) if token]

@requires_string
def word_count(text: str) -> int:
    """
    Count the tokens returned by `words`.

    Example:
        >>> word_count('one, two,  three')
        3
    """
    return len(words(text))

@requires_string
def get_middle(text: str) -> str:
    """
    Return the middle character, or the middle two characters of an even-length string.

    Example:
        >>> get_middle('middy')
        'd'
        >>> get_middle('middle')
        'dl'
        >>> get_middle('')
        ''
    """
    middle = len(text) // 2
    if len(text) % 2 == 0:
        return text[middle - 1:middle + 1]
    return text[middle]
