"""
Translation engine for American and British English.

Walks a sentence token by token and, at each position, applies the first
substitution that fits: time, title, exclusive expression (up to three
tokens), then spelling. Unmatched tokens pass through untouched.
"""

import logging
import re
from typing import Any, Optional

from .dictionaries import DictionaryStore
from .formatter import format_time, format_title, highlight, is_capitalized, split_punctuation
from .models import (
    INVALID_LOCALE,
    NO_TEXT,
    NOTHING_TO_TRANSLATE,
    Direction,
    MatchResult,
    Outcome,
    TranslationError,
    TranslationResult,
)
from .patterns import match_time, match_title
from .resolver import MAX_WINDOW, ExpressionResolver

logger = logging.getLogger("anglo-locale.translator")

_WHITESPACE = re.compile(r"(\s+)")


class Translator:
    """Converts sentences between American and British English.

    The translator holds no per-call state; a single instance may serve any
    number of concurrent callers.

    Example:
        >>> translator = Translator()
        >>> translator.translate("Lunch is at 12:15 today.", "american-to-british").translation
        'Lunch is at <span class="highlight">12.15</span> today.'
        >>> translator.translate("", "american-to-british").error
        'No text to translate'
    """

    def __init__(self, store: Optional[DictionaryStore] = None) -> None:
        self._store = store or DictionaryStore.default()
        self._resolver = ExpressionResolver(self._store)

    @property
    def store(self) -> DictionaryStore:
        return self._store

    def translate(self, text: Any, locale: Any) -> Outcome:
        """Translate a sentence in the direction named by ``locale``.

        Args:
            text: Sentence to translate
            locale: "american-to-british" or "british-to-american"

        Returns:
            TranslationResult with the original text and rendered translation,
            or TranslationError when the text is empty or the locale unknown.
            When nothing was substituted, the translation is
            "Everything looks good to me!".
        """
        if not isinstance(text, str) or not text.strip():
            return TranslationError(error=NO_TEXT)

        direction = Direction.parse(locale)
        if direction is None:
            logger.debug(f"Rejected locale {locale!r}")
            return TranslationError(error=INVALID_LOCALE)

        translation = self._translate_tokens(text, direction)
        if translation == text:
            translation = NOTHING_TO_TRANSLATE

        return TranslationResult(text=text, translation=translation)

    def _translate_tokens(self, text: str, direction: Direction) -> str:
        body = text.strip()
        leading = text[:len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]

        # Words sit at even positions, the whitespace between them at odd ones
        parts = _WHITESPACE.split(body)
        words = tuple(parts[0::2])
        separators = tuple(parts[1::2])

        pieces: list[tuple[int, str]] = []
        cursor = 0

        while cursor < len(words):
            head = words[cursor]

            if match_time(head, direction):
                logger.debug(f"Time substitution for '{head}'")
                pieces.append((cursor, format_time(head, direction)))
                cursor += 1
                continue

            title = match_title(head, direction)
            if title:
                logger.debug(f"Title substitution for '{head}'")
                pieces.append((cursor, format_title(head, title, direction)))
                cursor += 1
                continue

            expression = self._resolver.resolve(words[cursor:cursor + MAX_WINDOW], direction)
            if expression.matched:
                pieces.append((cursor, expression.replacement))
                cursor += expression.consumed
                continue

            pieces.append((cursor, self._translate_spelling(head, direction).replacement))
            cursor += 1

        rendered = [leading]
        for position, (start, piece) in enumerate(pieces):
            if position:
                rendered.append(separators[start - 1])
            rendered.append(piece)
        rendered.append(trailing)
        return "".join(rendered)

    def _translate_spelling(self, word: str, direction: Direction) -> MatchResult:
        body, punctuation = split_punctuation(word)
        replacement = self._store.spelling(direction).get(body.lower())
        if replacement is None:
            return MatchResult(replacement=word, consumed=1)

        logger.debug(f"Spelling '{body}' -> '{replacement}'")
        return MatchResult(
            replacement=highlight(replacement, is_capitalized(word), punctuation),
            consumed=1,
        )


_default_translator: Optional[Translator] = None


def get_translator() -> Translator:
    """Return the process-wide translator, building it on first use."""
    global _default_translator
    if _default_translator is None:
        _default_translator = Translator()
    return _default_translator


def translate(text: Any, locale: Any) -> Outcome:
    """Translate with the process-wide translator."""
    return get_translator().translate(text, locale)
