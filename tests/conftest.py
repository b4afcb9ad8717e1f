"""
Shared fixtures for kanjistudy tests.
"""

import pytest

from kanjistudy.models import KanjiInfo
from tests.helpers import make_candidate


@pytest.fixture
def kuruma_info():
    """Kanji record for 車."""
    return KanjiInfo(query="車", meaning="Car", kunyomi=["くるま"], onyomi=["シャ"])


@pytest.fixture
def kuruma_candidates():
    """Dictionary entries for 車, in upstream order."""
    return [
        make_candidate("車", "くるま", ["car"], ["ichi1", "news1"]),
        make_candidate("電車", "でんしゃ", ["train"], ["ichi1", "nf02"]),
        make_candidate("自動車", "じどうしゃ", ["automobile"], ["ichi1"]),
        make_candidate("車庫", "しゃこ", ["garage"], ["nf20"]),
        make_candidate("自動車教習所", "じどうしゃきょうしゅうじょ", ["driving school"], ["spec1"]),
        make_candidate("下車", "げしゃ", ["getting off"], []),
    ]
