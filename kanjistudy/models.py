"""
Pydantic models for kanjistudy.

These models describe both what the core consumes (dictionary candidates)
and what it hands back to the calling layer (segments, compound words and
the composed study card). They serialize straight to JSON for API
responses.

Usage:
    from kanjistudy.models import Segment, WordCandidate, Variant, CompoundWord

    candidate = WordCandidate(
        variants=[Variant(written="電車", pronounced="でんしゃ", priorities=["ichi1"])],
        glosses=["train"],
    )
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Transcription Segments
# =============================================================================

class Segment(BaseModel):
    """
    One run of an annotated transcription.

    Segments produced from `[base|annotation]` spans carry a reading;
    plain runs do not.
    """
    text: str = Field(..., description="Surface text of the run")
    reading: Optional[str] = Field(None, description="Furigana over the text, if annotated")

    def to_dict(self) -> Dict[str, str]:
        """Serialize, omitting `reading` for plain runs."""
        return self.model_dump(exclude_none=True)


# =============================================================================
# Dictionary Candidates
# =============================================================================

class Variant(BaseModel):
    """One written/pronounced realization of a dictionary entry."""
    written: Optional[str] = Field(None, description="Written form (usually with kanji)")
    pronounced: Optional[str] = Field(None, description="Kana reading")
    priorities: List[Optional[str]] = Field(
        default_factory=list,
        description="Priority tags, e.g. ['ichi1', 'nf02']",
    )

    @field_validator("priorities", mode="before")
    @classmethod
    def _null_priorities(cls, value):
        return [] if value is None else value

    class Config:
        from_attributes = True


class WordCandidate(BaseModel):
    """
    A dictionary entry offered to the compound selector.

    The first gloss is the entry's primary meaning.
    """
    variants: List[Variant] = Field(default_factory=list, description="Written/pronounced variants")
    glosses: List[Optional[str]] = Field(default_factory=list, description="English meanings, primary first")
    seq: Optional[int] = Field(None, description="JMdict sequence number")

    @field_validator("variants", mode="before")
    @classmethod
    def _null_variants(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value

    @field_validator("glosses", mode="before")
    @classmethod
    def _null_glosses(cls, value):
        # A null first gloss makes the entry ineligible, not invalid
        return [] if value is None else value

    class Config:
        from_attributes = True

    @property
    def primary_gloss(self) -> Optional[str]:
        return self.glosses[0] if self.glosses else None


class CompoundWord(BaseModel):
    """A compound word selected for display next to its anchor kanji."""
    word: str = Field(..., description="Written form")
    reading: str = Field(..., description="Kana reading")
    meaning: str = Field(..., description="Primary English meaning")


# =============================================================================
# Study Card
# =============================================================================

class KanjiInfo(BaseModel):
    """Upstream kanji dictionary record, as fetched by the caller."""
    query: str = Field(..., description="The kanji that was looked up")
    found: bool = Field(True, description="False if the dictionary has no record")
    meaning: Optional[str] = Field(None, description="Primary English meaning")
    kunyomi: List[str] = Field(default_factory=list, description="Kun'yomi readings")
    onyomi: List[str] = Field(default_factory=list, description="On'yomi readings")

    class Config:
        from_attributes = True


class ExampleSentence(BaseModel):
    """An example sentence with its furigana segments."""
    transcription: str = Field(..., description="Raw bracket-annotated sentence")
    segments: List[Segment] = Field(default_factory=list, description="Parsed segments")
    translation: Optional[str] = Field(None, description="English translation")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transcription": self.transcription,
            "segments": [s.to_dict() for s in self.segments],
            "translation": self.translation,
        }


class KanjiStudyCard(BaseModel):
    """
    Everything the page needs to render one kanji.

    Example response:
        {
            "kanji": "車",
            "reading": "くるま",
            "meaning": "car",
            "compound_words": [
                {"word": "電車", "reading": "でんしゃ", "meaning": "train"}
            ],
            "example_sentences": []
        }
    """
    kanji: str = Field(..., description="The queried kanji")
    reading: str = Field(..., description="Primary reading (kun'yomi first)")
    meaning: str = Field(..., description="Primary meaning")
    compound_words: List[CompoundWord] = Field(default_factory=list, description="Up to 5 compounds")
    example_sentences: List[ExampleSentence] = Field(default_factory=list, description="Annotated sentences")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kanji": self.kanji,
            "reading": self.reading,
            "meaning": self.meaning,
            "compound_words": [c.model_dump() for c in self.compound_words],
            "example_sentences": [s.to_dict() for s in self.example_sentences],
        }
