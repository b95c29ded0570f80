"""
Recognizers for time-of-day notation and honorific titles.

Both families are structurally distinct from ordinary vocabulary, so they are
matched by shape before any dictionary lookup. Each direction has its own
compiled pattern, anchored at the start of the token.
"""

import re
from typing import Optional

from .models import Direction

HONORIFICS = ("mr", "mrs", "ms", "mx", "dr", "prof")

_HONORIFIC_GROUP = "|".join(HONORIFICS)

# American times use a colon separator, British times a dot
TIME_PATTERNS: dict[Direction, re.Pattern[str]] = {
    Direction.AMERICAN_TO_BRITISH: re.compile(r"^(?:1[0-2]|\d):[0-5]\d"),
    Direction.BRITISH_TO_AMERICAN: re.compile(r"^(?:1[0-2]|\d)\.[0-5]\d"),
}

# American titles always carry a period; British titles never do, and must
# not run on into a longer word ("Drive"), a possessive or an already-punctuated title
TITLE_PATTERNS: dict[Direction, re.Pattern[str]] = {
    Direction.AMERICAN_TO_BRITISH: re.compile(rf"^({_HONORIFIC_GROUP})\.", re.IGNORECASE),
    Direction.BRITISH_TO_AMERICAN: re.compile(rf"^({_HONORIFIC_GROUP})(?![\w.'])", re.IGNORECASE),
}

TIME_SEPARATORS: dict[Direction, tuple[str, str]] = {
    Direction.AMERICAN_TO_BRITISH: (":", "."),
    Direction.BRITISH_TO_AMERICAN: (".", ":"),
}


def match_time(token: str, direction: Direction) -> Optional[re.Match[str]]:
    """Match a leading ``H:MM`` / ``H.MM`` time for the given direction."""
    return TIME_PATTERNS[direction].match(token)


def match_title(token: str, direction: Direction) -> Optional[re.Match[str]]:
    """Match a leading honorific; group 1 is the honorific as written."""
    return TITLE_PATTERNS[direction].match(token)
