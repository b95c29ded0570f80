"""
Data models for dialect translation.

Key components:
- Direction: The two supported conversion modes
- MatchResult: Outcome of a substitution attempt at one token position
- TranslationResult / TranslationError: The two shapes a translation call returns
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


NO_TEXT = "No text to translate"
INVALID_LOCALE = "Invalid value for locale field"
MISSING_FIELDS = "Required field(s) missing"
NOTHING_TO_TRANSLATE = "Everything looks good to me!"


class Direction(str, Enum):
    """Which way a sentence is being converted."""

    AMERICAN_TO_BRITISH = "american-to-british"
    BRITISH_TO_AMERICAN = "british-to-american"

    @classmethod
    def parse(cls, value: Any) -> Optional["Direction"]:
        """Return the member named by a locale literal, or None if unrecognised."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class MatchResult(BaseModel):
    """Outcome of trying to substitute at a position in the token stream.

    Attributes:
        replacement: Rendered replacement text (empty when nothing matched)
        consumed: Number of input tokens the replacement covers; 0 means no match
    """
    model_config = {"frozen": True}

    replacement: str = ""
    consumed: int = Field(default=0, ge=0, le=3)

    @classmethod
    def none(cls) -> "MatchResult":
        return cls()

    @property
    def matched(self) -> bool:
        return self.consumed > 0


class TranslationResult(BaseModel):
    """Successful translation of a sentence."""
    model_config = {"frozen": True}

    text: str = Field(description="The original sentence, verbatim")
    translation: str = Field(description="Rendered translation with highlight markup")


class TranslationError(BaseModel):
    """Validation failure reported instead of a translation."""
    model_config = {"frozen": True}

    error: str


Outcome = Union[TranslationResult, TranslationError]
