"""
Settings and configuration for kanjistudy.

Values are read from environment variables once at import time.
"""

import os

# Debug mode
DEBUG = os.environ.get("KANJISTUDY_DEBUG", "").lower() in ("1", "true", "yes")

# Seconds a composed study card stays in the lookup memo (1 hour)
CACHE_TTL = float(os.environ.get("KANJISTUDY_CACHE_TTL", "3600"))

# Maximum number of kanji accepted in a single query
MAX_QUERY_LENGTH = int(os.environ.get("KANJISTUDY_MAX_QUERY_LENGTH", "3"))

# Comma-separated regexes overriding the preferred priority tags.
# Empty means use constants.DEFAULT_PREFERRED_TAG_PATTERNS.
PREFERRED_TAGS = [
    p.strip()
    for p in os.environ.get("KANJISTUDY_PREFERRED_TAGS", "").split(",")
    if p.strip()
]

# Compound selection limits
COMPOUND_LIMIT = 5
PREFERRED_CAP = 5
SCAN_CAP = 10
MAX_COMPOUND_LENGTH = 4
