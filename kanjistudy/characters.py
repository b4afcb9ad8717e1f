"""
Character handling for kanjistudy.

Kanji classification and validation of lookup queries.
"""

import re
from typing import Any, List

from kanjistudy.constants import KANJI_QUERY_REGEX
from kanjistudy.errors import InvalidKanjiError
from kanjistudy.settings import MAX_QUERY_LENGTH

_KANJI_CHAR_PATTERN = re.compile(KANJI_QUERY_REGEX)
_KANJI_QUERY_PATTERN = re.compile(rf"{KANJI_QUERY_REGEX}+")


def is_kanji(char: str) -> bool:
    """Check if a single character is a CJK ideograph."""
    return len(char) == 1 and bool(_KANJI_CHAR_PATTERN.match(char))


def extract_kanji(text: str) -> List[str]:
    """
    Extract kanji characters from text.

    Args:
        text: Text to scan.

    Returns:
        Unique kanji in order of first appearance.
    """
    seen = set()
    result = []
    for char in text:
        if is_kanji(char) and char not in seen:
            seen.add(char)
            result.append(char)
    return result


def validate_kanji_query(value: Any, max_length: int = MAX_QUERY_LENGTH) -> str:
    """
    Validate a lookup query.

    Args:
        value: Raw query value from the caller.
        max_length: Maximum number of kanji allowed.

    Returns:
        The query, unchanged.

    Raises:
        InvalidKanjiError: If the value is not a string of 1 to max_length
            CJK ideographs.
    """
    if not value or not isinstance(value, str):
        raise InvalidKanjiError('Invalid input: "kanji" field is required and must be a string.')
    if not _KANJI_QUERY_PATTERN.fullmatch(value):
        raise InvalidKanjiError("Invalid input: Field must contain only Kanji characters.")
    if len(value) > max_length:
        raise InvalidKanjiError(f"Invalid input: Please provide 1 to {max_length} Kanji characters.")
    return value
