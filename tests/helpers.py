"""
Builders for kanjistudy test data.
"""

from typing import Optional, Sequence

from kanjistudy.models import Variant, WordCandidate


def make_candidate(
    written: Optional[str],
    pronounced: Optional[str] = "よみ",
    glosses: Sequence[Optional[str]] = ("meaning",),
    priorities: Sequence[Optional[str]] = ("ichi1",),
) -> WordCandidate:
    """Single-variant candidate with sensible defaults."""
    return WordCandidate(
        variants=[Variant(written=written, pronounced=pronounced, priorities=list(priorities))],
        glosses=list(glosses),
    )
