"""
Rendering of substituted tokens.

Every substitution is wrapped in the same inline highlight marker. The
original token's capitalization and trailing punctuation are carried over.
"""

import re

from .models import Direction
from .patterns import TIME_SEPARATORS

HIGHLIGHT_OPEN = '<span class="highlight">'
HIGHLIGHT_CLOSE = "</span>"

PUNCTUATION = ".?!:,;"

_TRAILING_PUNCTUATION = re.compile(r"[.?!:,;]$")


def split_punctuation(token: str) -> tuple[str, str]:
    """Detach a single trailing punctuation character from a token.

    Example:
        >>> split_punctuation("fruit.")
        ('fruit', '.')
        >>> split_punctuation("condo")
        ('condo', '')
    """
    if _TRAILING_PUNCTUATION.search(token):
        return token[:-1], token[-1]
    return token, ""


def is_capitalized(token: str) -> bool:
    return token[:1].isupper()


def capitalize_first(text: str) -> str:
    """Upcase the first character only, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def highlight(replacement: str, capitalized: bool = False, punctuation: str = "") -> str:
    """Wrap a replacement in the highlight marker.

    Args:
        replacement: Replacement text, emitted verbatim unless capitalized
        capitalized: Whether the original span started with an uppercase letter
        punctuation: Trailing text to place after the closing marker

    Returns:
        The rendered span, e.g. ``<span class="highlight">Car park</span>.``
    """
    if capitalized:
        replacement = capitalize_first(replacement)
    return f"{HIGHLIGHT_OPEN}{replacement}{HIGHLIGHT_CLOSE}{punctuation}"


def format_time(token: str, direction: Direction) -> str:
    """Swap the time separator and highlight; trailing punctuation stays outside."""
    body, punctuation = split_punctuation(token)
    source, target = TIME_SEPARATORS[direction]
    return highlight(body.replace(source, target, 1), punctuation=punctuation)


def format_title(token: str, match: re.Match[str], direction: Direction) -> str:
    """Render an honorific in the target convention.

    American titles lose their period, British titles gain one. Whatever
    follows the honorific in the token is kept after the marker.
    """
    honorific = match.group(1)
    rest = token[match.end():]
    if direction is Direction.AMERICAN_TO_BRITISH:
        return highlight(honorific, punctuation=rest)
    return highlight(f"{honorific}.", punctuation=rest)
