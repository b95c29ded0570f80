"""
Anglo Locale - American/British English translator with highlighted substitutions.
"""

from .dictionaries import DictionaryStore
from .models import Direction, MatchResult, Outcome, TranslationError, TranslationResult
from .translator import Translator, translate

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("anglo-locale")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "Direction",
    "DictionaryStore",
    "MatchResult",
    "Outcome",
    "TranslationError",
    "TranslationResult",
    "Translator",
    "translate",
]
