"""
Compound word selection for kanjistudy.

Given the dictionary entries returned for a kanji, picks a short list of
compounds worth showing a learner: short common words that visibly
contain the kanji and add something beyond its own meaning.

Selection works in two tiers. Variants whose priority tags mark them as
high-frequency (see constants.DEFAULT_PREFERRED_TAG_PATTERNS) go into the
preferred tier; anything else with a priority tag goes into the other
tier; untagged variants are ignored. Scanning stops early once either
tier budget is exhausted, so earlier entries win.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from kanjistudy.constants import DEFAULT_PREFERRED_TAG_PATTERNS
from kanjistudy.models import CompoundWord, Variant, WordCandidate
from kanjistudy.settings import (
    COMPOUND_LIMIT,
    MAX_COMPOUND_LENGTH,
    PREFERRED_CAP,
    PREFERRED_TAGS,
    SCAN_CAP,
)

logger = logging.getLogger(__name__)

TagMatcher = Callable[[str], bool]
TagPattern = Union[str, re.Pattern, TagMatcher]


# ============================================================================
# Tag Matchers
# ============================================================================

def compile_tag_matchers(patterns: Iterable[TagPattern]) -> Tuple[TagMatcher, ...]:
    """
    Build tag matchers from regex strings, compiled patterns or callables.

    Strings and compiled patterns must match the whole tag.

    Args:
        patterns: Preferred tag patterns.

    Returns:
        Tuple of predicates over a single tag.
    """
    matchers = []
    for pattern in patterns:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        if isinstance(pattern, re.Pattern):
            matchers.append(lambda tag, _p=pattern: _p.fullmatch(tag) is not None)
        else:
            matchers.append(pattern)
    return tuple(matchers)


DEFAULT_TAG_MATCHERS: Tuple[TagMatcher, ...] = compile_tag_matchers(
    PREFERRED_TAGS or DEFAULT_PREFERRED_TAG_PATTERNS
)


def is_preferred(tags: Sequence[str], matchers: Sequence[TagMatcher] = DEFAULT_TAG_MATCHERS) -> bool:
    """Check if any tag matches any preferred matcher."""
    return any(matcher(tag) for tag in tags for matcher in matchers)


# ============================================================================
# Eligibility
# ============================================================================

def _priority_tags(variant: Variant) -> List[str]:
    return [tag for tag in (variant.priorities or ()) if tag]


def is_eligible(
    variant: Variant,
    candidate: WordCandidate,
    anchor_char: str,
    anchor_meaning: Optional[str] = None,
    max_length: int = MAX_COMPOUND_LENGTH,
) -> bool:
    """
    Check whether a variant may be offered as a compound of anchor_char.

    Args:
        variant: The variant under consideration.
        candidate: The entry the variant belongs to (supplies glosses).
        anchor_char: The queried kanji.
        anchor_meaning: The kanji's primary meaning, or None if unknown.
        max_length: Longest written form accepted.

    Returns:
        True if the variant passes every relevance filter.
    """
    written = variant.written
    if not written or not variant.pronounced:
        return False
    glosses = candidate.glosses
    if not glosses or not glosses[0]:
        return False
    if written == anchor_char or anchor_char not in written:
        return False
    if len(written) > max_length:
        return False
    if anchor_meaning and glosses[0].lower() == anchor_meaning.lower():
        return False
    return bool(_priority_tags(variant))


# ============================================================================
# Selection
# ============================================================================

def select(
    candidates: Optional[Sequence[WordCandidate]],
    anchor_char: str,
    anchor_meaning: Optional[str] = None,
    *,
    preferred: Optional[Sequence[TagPattern]] = None,
    limit: int = COMPOUND_LIMIT,
    preferred_cap: int = PREFERRED_CAP,
    scan_cap: int = SCAN_CAP,
    max_length: int = MAX_COMPOUND_LENGTH,
) -> List[CompoundWord]:
    """
    Select up to `limit` compound words for an anchor kanji.

    Args:
        candidates: Dictionary entries, in upstream relevance order.
        anchor_char: The queried kanji.
        anchor_meaning: The kanji's primary meaning (compared
            case-insensitively), or None.
        preferred: Preferred tag patterns; defaults to the configured set.
        limit: Maximum number of compounds returned.
        preferred_cap: Preferred tier size at which scanning stops.
        scan_cap: Combined tier size at which scanning stops.
        max_length: Longest written form accepted.

    Returns:
        Preferred-tier compounds followed by other-tier compounds, each in
        encounter order, deduplicated by written form.

    Example:
        >>> entry = WordCandidate(
        ...     variants=[Variant(written="電車", pronounced="でんしゃ", priorities=["ichi1"])],
        ...     glosses=["train"])
        >>> select([entry], "車", "car")
        [CompoundWord(word='電車', reading='でんしゃ', meaning='train')]
    """
    if not candidates or not anchor_char:
        return []

    matchers = DEFAULT_TAG_MATCHERS if preferred is None else compile_tag_matchers(preferred)

    preferred_tier: List[Tuple[Variant, WordCandidate]] = []
    other_tier: List[Tuple[Variant, WordCandidate]] = []

    for candidate in candidates:
        if len(preferred_tier) >= preferred_cap:
            break
        if len(preferred_tier) + len(other_tier) >= scan_cap:
            break

        for variant in candidate.variants or ():
            if len(preferred_tier) + len(other_tier) >= scan_cap:
                break
            if not is_eligible(variant, candidate, anchor_char, anchor_meaning, max_length):
                continue

            if is_preferred(_priority_tags(variant), matchers):
                if len(preferred_tier) < preferred_cap:
                    preferred_tier.append((variant, candidate))
            else:
                other_tier.append((variant, candidate))

    logger.debug(
        f"Compounds for {anchor_char}: {len(preferred_tier)} preferred, {len(other_tier)} other"
    )

    results: List[CompoundWord] = []
    seen = set()
    for variant, candidate in preferred_tier + other_tier:
        if variant.written in seen:
            continue
        seen.add(variant.written)
        results.append(CompoundWord(
            word=variant.written,
            reading=variant.pronounced,
            meaning=candidate.glosses[0],
        ))

    return results[:limit]
