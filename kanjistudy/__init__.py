"""
kanjistudy: furigana parsing and compound word selection for kanji study cards.
"""

from kanjistudy.compounds import select
from kanjistudy.errors import (
    InvalidKanjiError,
    InvalidRequestError,
    KanjiNotFoundError,
    KanjiStudyError,
)
from kanjistudy.furigana import segment
from kanjistudy.lookup import KanjiLookup, build_study_card
from kanjistudy.models import (
    CompoundWord,
    ExampleSentence,
    KanjiInfo,
    KanjiStudyCard,
    Segment,
    Variant,
    WordCandidate,
)

__version__ = "0.1.0"

__all__ = [
    "segment",
    "select",
    "build_study_card",
    "KanjiLookup",
    "Segment",
    "Variant",
    "WordCandidate",
    "CompoundWord",
    "KanjiInfo",
    "ExampleSentence",
    "KanjiStudyCard",
    "KanjiStudyError",
    "InvalidKanjiError",
    "KanjiNotFoundError",
    "InvalidRequestError",
]
