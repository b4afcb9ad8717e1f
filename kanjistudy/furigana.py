"""
Furigana transcription segmenter for kanjistudy.

Parses sentences written in the bracket convention used by annotated
example corpora:

    [電車|でんしゃ]に[乗|の]る

into an ordered list of Segments, where bracket spans carry a reading and
plain runs do not.
"""

import logging
import re
from typing import Iterable, List, Optional

from kanjistudy.models import Segment

logger = logging.getLogger(__name__)

# Bracket token first, plain run second. Anything else (a stray '[' or ']')
# matches neither alternative and is skipped by finditer.
_TOKEN_PATTERN = re.compile(
    r"\[(?P<base>[^|]*)\|(?P<annotation>[^\]]*)\]"
    r"|(?P<plain>[^\[\]]+)"
)


def segment(text: Optional[str]) -> List[Segment]:
    """
    Split an annotated transcription into segments.

    Args:
        text: Sentence in `[base|annotation]` notation. None or empty
            yields an empty list.

    Returns:
        Segments in input order. Bracket spans with a blank base and
        whitespace-only plain runs are dropped.

    Example:
        >>> segment("[電車|でんしゃ]に乗る")
        [Segment(text='電車', reading='でんしゃ'), Segment(text='に乗る', reading=None)]
    """
    if not text:
        return []

    segments: List[Segment] = []
    for match in _TOKEN_PATTERN.finditer(text):
        plain = match.group('plain')
        if plain is not None:
            if plain.strip():
                segments.append(Segment(text=plain))
            continue

        base = match.group('base')
        if not base.strip():
            logger.debug(f"Dropping bracket token with empty base: {match.group(0)!r}")
            continue
        # Extra '|' inside the annotation are collapsed, not delimiters
        reading = match.group('annotation').replace('|', '')
        segments.append(Segment(text=base, reading=reading))

    return segments


def segments_to_plain(segments: Iterable[Segment]) -> str:
    """Join segment texts, i.e. the sentence with annotations removed."""
    return ''.join(s.text for s in segments)


def segments_to_reading(segments: Iterable[Segment]) -> str:
    """Join readings, using the text itself for unannotated segments."""
    return ''.join(s.reading if s.reading is not None else s.text for s in segments)
