"""
Study card composition and per-kanji lookup for kanjistudy.

build_study_card() is pure: it combines a kanji record, its dictionary
candidates and annotated example sentences into a KanjiStudyCard.

KanjiLookup is the boundary helper the web layer wraps around its own
fetchers. It validates the query, memoizes finished cards per kanji for a
limited time and never performs I/O itself.
"""

import logging
import threading
import time
from typing import Callable, Dict, Generic, Iterable, Optional, Sequence, Tuple, TypeVar

from kanjistudy.characters import validate_kanji_query
from kanjistudy.compounds import select
from kanjistudy.constants import NOT_AVAILABLE
from kanjistudy.errors import KanjiNotFoundError
from kanjistudy.furigana import segment
from kanjistudy.models import ExampleSentence, KanjiInfo, KanjiStudyCard, WordCandidate
from kanjistudy.settings import CACHE_TTL

logger = logging.getLogger(__name__)

T = TypeVar('T')

# (transcription, translation) as produced by a sentence source
SentencePair = Tuple[str, Optional[str]]

KanjiFetcher = Callable[[str], Optional[KanjiInfo]]
CandidateFetcher = Callable[[str], Sequence[WordCandidate]]
SentenceFetcher = Callable[[str], Iterable[SentencePair]]


# ============================================================================
# Card Composition
# ============================================================================

def primary_reading(info: KanjiInfo) -> str:
    """First kun'yomi, else first on'yomi, else N/A."""
    if info.kunyomi:
        return info.kunyomi[0]
    if info.onyomi:
        return info.onyomi[0]
    return NOT_AVAILABLE


def build_study_card(
    kanji: str,
    info: KanjiInfo,
    candidates: Sequence[WordCandidate],
    sentences: Iterable[SentencePair] = (),
) -> KanjiStudyCard:
    """
    Compose the study card for one kanji query.

    Args:
        kanji: The validated query.
        info: Kanji dictionary record.
        candidates: Dictionary entries to pick compounds from.
        sentences: (transcription, translation) pairs in bracket notation.

    Returns:
        The composed card.
    """
    anchor_meaning = info.meaning.lower() if info.meaning else None

    examples = [
        ExampleSentence(
            transcription=transcription,
            segments=segment(transcription),
            translation=translation,
        )
        for transcription, translation in sentences
    ]

    return KanjiStudyCard(
        kanji=info.query or kanji,
        reading=primary_reading(info),
        meaning=info.meaning or NOT_AVAILABLE,
        compound_words=select(candidates, kanji, anchor_meaning),
        example_sentences=examples,
    )


# ============================================================================
# Expiring Memo
# ============================================================================

class TTLCache(Generic[T]):
    """
    Thread-safe mapping whose entries expire after a fixed time.

    Expired entries are dropped lazily on access.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        """
        Create a new cache.

        Args:
            ttl: Seconds an entry stays valid.
            clock: Monotonic time source.
        """
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[float, T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires, value = entry
            if self._clock() >= expires:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: T):
        with self._lock:
            self._entries[key] = (self._clock() + self.ttl, value)

    def invalidate(self, key: Optional[str] = None):
        """Drop one entry, or everything if key is None."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# ============================================================================
# Lookup
# ============================================================================

class KanjiLookup:
    """
    Memoized study card lookup over caller-supplied fetchers.

    Example:
        >>> lookup = KanjiLookup(fetch_kanji=jisho_kanji, fetch_candidates=jmdict_words)
        >>> card = lookup.lookup("車")
        >>> card.to_dict()["compound_words"][0]
        {'word': '電車', 'reading': 'でんしゃ', 'meaning': 'train'}
    """

    def __init__(
        self,
        fetch_kanji: KanjiFetcher,
        fetch_candidates: CandidateFetcher,
        fetch_sentences: Optional[SentenceFetcher] = None,
        ttl: float = CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.fetch_kanji = fetch_kanji
        self.fetch_candidates = fetch_candidates
        self.fetch_sentences = fetch_sentences
        self._cache: TTLCache[KanjiStudyCard] = TTLCache(ttl, clock=clock)

    def lookup(self, kanji: str) -> KanjiStudyCard:
        """
        Get the study card for a kanji query.

        Args:
            kanji: 1 to MAX_QUERY_LENGTH kanji.

        Returns:
            The study card, from the memo if still fresh.

        Raises:
            InvalidKanjiError: If the query is not valid.
            KanjiNotFoundError: If the kanji dictionary has no record.
        """
        validate_kanji_query(kanji)

        cached = self._cache.get(kanji)
        if cached is not None:
            logger.info(f"Cache hit for kanji: {kanji}")
            return cached
        logger.info(f"Cache miss for kanji: {kanji}")

        info = self.fetch_kanji(kanji)
        if info is None or not info.found:
            logger.info(f"Kanji not found: {kanji}")
            raise KanjiNotFoundError(kanji)

        candidates = self.fetch_candidates(kanji)
        sentences = self.fetch_sentences(kanji) if self.fetch_sentences else ()

        card = build_study_card(kanji, info, candidates, sentences)
        self._cache.set(kanji, card)
        return card

    def invalidate(self, kanji: Optional[str] = None):
        """Forget the card for one kanji, or all cards."""
        self._cache.invalidate(kanji)
