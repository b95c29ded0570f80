"""
Longest-match lookup of exclusive vocabulary over a window of tokens.
"""

import logging
from typing import Sequence

from .dictionaries import DictionaryStore
from .formatter import highlight, is_capitalized, split_punctuation
from .models import Direction, MatchResult

logger = logging.getLogger("anglo-locale.resolver")

MAX_WINDOW = 3


class ExpressionResolver:
    """Finds the longest exclusive phrase starting at the head of a token window.

    Tries three tokens, then two, then one. Only the last token of the window
    under test may shed a trailing punctuation character; punctuation on
    earlier tokens stays part of the probe.

    Example:
        >>> resolver = ExpressionResolver(DictionaryStore.default())
        >>> result = resolver.resolve(["Rube", "Goldberg", "machine."], Direction.AMERICAN_TO_BRITISH)
        >>> result.consumed
        3
        >>> result.replacement
        '<span class="highlight">Heath Robinson device</span>.'
    """

    def __init__(self, store: DictionaryStore) -> None:
        self._store = store

    def resolve(self, window: Sequence[str], direction: Direction) -> MatchResult:
        """Resolve the longest matching phrase at the start of ``window``.

        Args:
            window: Up to three consecutive tokens (extra tokens are ignored)
            direction: Which exclusive table to consult

        Returns:
            MatchResult with the rendered replacement, or MatchResult.none()
        """
        if not window:
            return MatchResult.none()

        table = self._store.exclusive(direction)
        capitalized = is_capitalized(window[0])

        for size in range(min(len(window), MAX_WINDOW), 0, -1):
            *leading, last = window[:size]
            body, punctuation = split_punctuation(last)
            phrase = " ".join([*leading, body]).lower()

            replacement = table.get(phrase)
            if replacement is not None:
                logger.debug(f"Expression '{phrase}' -> '{replacement}' ({size} tokens)")
                return MatchResult(
                    replacement=highlight(replacement, capitalized, punctuation),
                    consumed=size,
                )

        return MatchResult.none()
