"""Named chains of string operations and helpers for applying them to pandas data.

This module is the only part of the package that reads or writes files; the
operations it chains are pure and never import it.

A pipeline is an ordered list of operation names from `OPERATIONS`. Pipelines
can be stored as YAML:

```yaml
name: shout
steps:
  - trim_space
  - to_upper
```
"""

__docformat__ = 'google'

__all__ = [
    # Constants
    'OPERATIONS',
    # Classes
    'Pipeline',
    # Functions
    'profile'
]

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional
import pandas as pd
import yaml
from stringops import casing, checks, numbers, segments
from stringops.core import (
    chain_operations,
    UnknownOperationError,
    PipelineConfigError
)

logger = logging.getLogger(__name__)

OPERATIONS: Dict[str, Callable[[str], str]] = {
    'to_upper': casing.to_upper,
    'to_lower': casing.to_lower,
    'uc_first': casing.uc_first,
    'inverse_case': casing.inverse_case,
    'alternating_case': casing.alternating_case,
    'trim_space': segments.trim_space,
    'remove_special_chars': segments.remove_special_chars,
    'get_middle': segments.get_middle,
    'to_currency': numbers.to_currency,
    'from_currency': numbers.from_currency,
    'number_words': numbers.number_words
}
"""Operations that take a string and return a string, by name.

Only these can be used as pipeline steps."""

PROFILE_COLUMNS: Dict[str, Callable] = {
    'has_vowels': checks.has_vowels,
    'is_question': checks.is_question,
    'is_digit': numbers.is_digit,
    'double_check': checks.double_check,
    'word_count': segments.word_count
}
"""@private"""

@dataclass
class Pipeline:
    """
    An ordered chain of string operations.

    Args:
        steps: Operation names, applied first to last
        name: Optional label, kept when saving to YAML

    Raises:
        UnknownOperationError: A step is not a key of `OPERATIONS`

    Example:
        >>> Pipeline(['trim_space', 'to_currency']).apply(' 1234567 ')
        '1,234,567'
    """
    steps: List[str] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self):
        self.steps = list(self.steps)
        unknown = [step for step in self.steps if step not in OPERATIONS]
        if unknown:
            logger.warning("Rejected pipeline %r with unknown steps %s", self.name, unknown)
            raise UnknownOperationError(', '.join(unknown))

    @property
    def operations(self) -> List[Callable[[str], str]]:
        return [OPERATIONS[step] for step in self.steps]

    def apply(self, text: str) -> str:
        """Run `text` through every step in order."""
        return chain_operations(text, self.operations)

    def apply_series(self, series: pd.Series) -> pd.Series:
        """
        Apply the pipeline to each element of a Series.

        Missing values stay missing; every other element must be a string.

        Example:
            >>> Pipeline(['to_upper']).apply_series(pd.Series(['a', None])).tolist()
            ['A', None]
        """
        return series.map(self.apply, na_action='ignore')

    @classmethod
    def from_yaml(cls, file_path):
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict) or 'steps' not in data:
            raise PipelineConfigError(f"{file_path}: expected a mapping with a 'steps' key")
        if not isinstance(data['steps'], list):
            raise PipelineConfigError(f"{file_path}: 'steps' must be a list")
        if not all(isinstance(step, str) for step in data['steps']):
            raise PipelineConfigError(f"{file_path}: every step must be an operation name")

        pipeline = cls(steps=data['steps'], name=data.get('name'))
        logger.info("Loaded pipeline %r (%d steps) from %s", pipeline.name, len(pipeline.steps), file_path)
        return pipeline

    def to_yaml(self, file_path):
        serializable_data = {'steps': self.steps}
        if self.name is not None:
            serializable_data = {'name': self.name, **serializable_data}

        with open(Path(file_path), 'w') as f:
            yaml.safe_dump(serializable_data, f, sort_keys=False)
        logger.info("Saved pipeline %r to %s", self.name, file_path)

def profile(series: pd.Series) -> pd.DataFrame:
    """
    Evaluate the predicates and word count for each element of a Series.

    Args:
        series: Series of strings

    Returns:
        DataFrame with the same index as `series` and one column per check:
        `has_vowels`, `is_question`, `is_digit`, `double_check`, `word_count`

    Example:
        >>> profile(pd.Series(['Why?', '7']))['is_question'].tolist()
        [True, False]
    """
    return pd.DataFrame(
        {column: series.map(check) for column, check in PROFILE_COLUMNS.items()},
        index=series.index
    )
