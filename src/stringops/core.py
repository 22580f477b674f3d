"""Shared helpers: argument validation, errors, and operation chaining."""

__docformat__ = 'google'

__all__ = [
    'StringOpsError',
    'InvalidArgumentError',
    'UnknownOperationError',
    'PipelineConfigError',
    'requires_string',
    'chain_operations'
]

import logging
from functools import wraps
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

class StringOpsError(Exception):
    """Base class for errors raised by `stringops`."""

class InvalidArgumentError(StringOpsError, TypeError):
    """An operation received something other than a `str`.

    Operations never coerce their argument; `None`, numbers and bytes are rejected.
    """

class UnknownOperationError(StringOpsError, LookupError):
    """A pipeline step names an operation that is not registered."""

class PipelineConfigError(StringOpsError, ValueError):
    """A pipeline document is missing required keys or has the wrong shape."""

def requires_string(f: Callable) -> Callable:
    """
    Decorate a single-argument string operation so that non-`str` input fails fast.

    Example:
        >>> @requires_string
        ... def shout(text):
        ...     return text + '!'
        >>> shout(None)
        Traceback (most recent call last):
        ...
        stringops.core.InvalidArgumentError: shout() expects a str, got NoneType
    """
    @wraps(f)
    def wrapper(text, *args, **kwargs):
        if not isinstance(text, str):
            message = f"{f.__name__}() expects a str, got {type(text).__name__}"
            logger.warning(message)
            raise InvalidArgumentError(message)
        return f(text, *args, **kwargs)
    return wrapper

def chain_operations(text: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Apply each operation to the result of the previous one.

    Args:
        text: Starting string
        operations: Functions taking and returning a string, applied in order

    Returns:
        Result of the last operation, or `text` if there are none

    Example:
        >>> chain_operations('  hi ', [str.strip, str.upper])
        'HI'
    """
    for operation in operations:
        text = operation(text)
    return text
