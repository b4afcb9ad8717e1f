"""
Constants for kanjistudy.

JMdict priority tag vocabulary and the defaults used to rank compounds.
"""

from typing import Tuple

# ============================================================================
# JMdict Priority Tags
# ============================================================================
# ke_pri / re_pri values. nfXX is the frequency band in the wordfreq file
# (nf01 = top 500 words, nf48 = least frequent); the rest mark presence in
# a reference list, with "1" being the more common half.

# Tags that put a compound in the preferred tier. Full-match regexes.
DEFAULT_PREFERRED_TAG_PATTERNS: Tuple[str, ...] = (
    r"nf0[1-9]",
    r"nf1[0-2]",
    r"ichi1",
    r"news1",
    r"spec1",
)

# ============================================================================
# Kanji Query Validation
# ============================================================================

# CJK Unified Ideographs, Extension A, Compatibility Ideographs
KANJI_QUERY_REGEX = r"[一-鿿㐀-䶿豈-﫿]"

# Placeholder for missing reading or meaning on a study card
NOT_AVAILABLE = "N/A"
