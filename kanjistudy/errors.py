"""
Exceptions raised at the kanjistudy lookup boundary.

The segmenter and compound selector never raise; these cover query
validation and upstream misses in the study card layer.
"""


class KanjiStudyError(Exception):
    """Base class for kanjistudy errors."""


class InvalidKanjiError(KanjiStudyError, ValueError):
    """The query is not a string of 1 to MAX_QUERY_LENGTH kanji."""


class KanjiNotFoundError(KanjiStudyError, LookupError):
    """The kanji dictionary has no record for the query."""

    def __init__(self, kanji: str):
        super().__init__(f'Kanji "{kanji}" not found.')
        self.kanji = kanji


class InvalidRequestError(KanjiStudyError, ValueError):
    """A request file is valid JSON but not shaped like a request."""
