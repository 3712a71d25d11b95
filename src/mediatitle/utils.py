import itertools
import re
from typing import Callable, Optional

from .constants import INVALID_FILE_NAME_CHARS

_word = re.compile(r"\w+")
_invalid_file_name_chars = re.compile("[" + re.escape(INVALID_FILE_NAME_CHARS) + "]")


def titlize(word: str) -> str:
    """Upper-case the first character of a word and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def transform_each_word(string: str, transformer: Callable[[str, int], str]) -> str:
    """Apply transformer(word, index) to each word of a string.

    Words are runs of Unicode word characters; everything between them is
    left untouched.

    Args:
        string: String to transform
        transformer: Called with each word and its 0-based index

    Returns:
        The transformed string
    """
    counter = itertools.count()
    return _word.sub(lambda match: transformer(match.group(0), next(counter)), string)


def title_case(string: str) -> str:
    return transform_each_word(string, lambda word, i: titlize(word))


def title_upper_case(string: str) -> str:
    return transform_each_word(string, lambda word, i: titlize(word) if i == 0 else word.upper())


def title_lower_case(string: str) -> str:
    return transform_each_word(string, lambda word, i: titlize(word) if i == 0 else word.lower())


def sanitize_filename(name: str) -> str:
    """Remove characters that are not allowed in file names."""
    return _invalid_file_name_chars.sub("", name)


def int_or_string(value, can_convert: bool = True) -> Optional[object]:
    """Convert an integer-like string to int, leaving other strings as they are.

    Returns None for None and for negative integers, which callers use to
    mean "no value".
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"Not a number or string: {value!r}")
    if isinstance(value, int):
        return value if value >= 0 else None
    value = str(value)
    if can_convert:
        try:
            number = int(value)
        except ValueError:
            return value
        return number if number >= 0 else None
    return value
