from dataclasses import dataclass
from typing import List
from stringops import casing, checks, numbers, segments
from stringops.core import InvalidArgumentError

@dataclass(frozen=True)
class Text:
    """
    An immutable string value exposing every string operation as a method.

    Methods return plain values (`str`, `bool`, `int` or `list`) rather than new
    `Text` objects, and never modify `value`. Wrap a result again to keep chaining.

    Args:
        value: The wrapped string. Anything that is not a `str` is rejected.

    Example:
        >>> Text('  how many words?  ').word_count()
        3
        >>> Text(Text('hello').to_upper()).get_middle()
        'L'
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"Text() expects a str, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    # Case
    def to_upper(self) -> str:
        return casing.to_upper(self.value)

    def to_lower(self) -> str:
        return casing.to_lower(self.value)

    def uc_first(self) -> str:
        return casing.uc_first(self.value)

    def inverse_case(self) -> str:
        return casing.inverse_case(self.value)

    def alternating_case(self) -> str:
        return casing.alternating_case(self.value)

    # Words
    def trim_space(self) -> str:
        return segments.trim_space(self.value)

    def remove_special_chars(self) -> str:
        return segments.remove_special_chars(self.value)

    def words(self) -> List[str]:
        return segments.words(self.value)

    def word_count(self) -> int:
        return segments.word_count(self.value)

    def get_middle(self) -> str:
        return segments.get_middle(self.value)

    # Numbers
    def to_currency(self) -> str:
        return numbers.to_currency(self.value)

    def from_currency(self) -> str:
        return numbers.from_currency(self.value)

    def number_words(self) -> str:
        return numbers.number_words(self.value)

    def is_digit(self) -> bool:
        return numbers.is_digit(self.value)

    # Checks
    def has_vowels(self) -> bool:
        return checks.has_vowels(self.value)

    def is_question(self) -> bool:
        return checks.is_question(self.value)

    def double_check(self) -> bool:
        return checks.double_check(self.value)
