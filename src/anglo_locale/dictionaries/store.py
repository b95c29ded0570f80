"""
Read-only dictionary store for dialect vocabulary and spelling.

Builds the four lookup tables once from the YAML files shipped in ``data/``:
American-only vocabulary, British-only vocabulary, American to British
spelling, and British to American spelling (derived by inversion).
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from ..models import Direction

logger = logging.getLogger("anglo-locale.dictionaries")

DATA_DIR = Path(__file__).parent / "data"

AMERICAN_ONLY_FILE = "american_only.yaml"
BRITISH_ONLY_FILE = "british_only.yaml"
SPELLING_FILE = "american_to_british_spelling.yaml"


class DictionaryLoadError(Exception):
    """Raised when a dictionary file cannot be parsed into a table."""
    pass


def _normalize_key(key: str) -> str:
    return key.lower().strip()


def load_table(path: Path) -> dict[str, str]:
    """Load one dictionary table from a YAML file.

    Expected YAML format:
        entries:
          parking lot: car park
          soccer: football

    Keys are lowercased and stripped; values are kept verbatim.

    Args:
        path: Path to YAML file

    Returns:
        Mapping of normalized key to replacement text

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        DictionaryLoadError: If the file has no 'entries' mapping
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DictionaryLoadError(f"Malformed YAML in {path.name}: {e}") from e

    if not isinstance(data, dict) or "entries" not in data:
        raise DictionaryLoadError(f"{path.name} must contain an 'entries' key")

    entries = data["entries"] or {}
    if not isinstance(entries, dict):
        raise DictionaryLoadError(f"'entries' in {path.name} must be a mapping")

    table: dict[str, str] = {}
    for key, value in entries.items():
        normalized = _normalize_key(str(key))
        if not normalized:
            continue
        table[normalized] = str(value)
    return table


def invert(mapping: Mapping[str, str]) -> dict[str, str]:
    """Exchange keys and values of a spelling table.

    Inversion is only lossless when values are unique. A repeated value keeps
    the last key seen and logs a warning.
    """
    inverted: dict[str, str] = {}
    for key, value in mapping.items():
        reverse_key = _normalize_key(value)
        if reverse_key in inverted:
            logger.warning(
                f"Spelling '{value}' maps back to both '{inverted[reverse_key]}' and '{key}'; keeping '{key}'"
            )
        inverted[reverse_key] = key
    return inverted


class DictionaryStore:
    """Per-direction spelling and exclusive-vocabulary lookups.

    Tables are frozen behind ``MappingProxyType`` once built; lookups expect
    the caller to lowercase the probe and strip trailing punctuation.

    Example:
        >>> store = DictionaryStore.default()
        >>> store.spelling(Direction.AMERICAN_TO_BRITISH)["favorite"]
        'favourite'
        >>> store.exclusive(Direction.BRITISH_TO_AMERICAN)["bum bag"]
        'fanny pack'
    """

    def __init__(
        self,
        american_only: Mapping[str, str],
        british_only: Mapping[str, str],
        american_to_british_spelling: Mapping[str, str],
    ) -> None:
        british_to_american_spelling = invert(american_to_british_spelling)

        self._spelling: dict[Direction, Mapping[str, str]] = {
            Direction.AMERICAN_TO_BRITISH: MappingProxyType(dict(american_to_british_spelling)),
            Direction.BRITISH_TO_AMERICAN: MappingProxyType(british_to_american_spelling),
        }
        self._exclusive: dict[Direction, Mapping[str, str]] = {
            Direction.AMERICAN_TO_BRITISH: MappingProxyType(dict(american_only)),
            Direction.BRITISH_TO_AMERICAN: MappingProxyType(dict(british_only)),
        }

    @classmethod
    def from_data_dir(cls, data_dir: Path) -> "DictionaryStore":
        """Build a store from the three authored YAML files in a directory."""
        american_only = load_table(data_dir / AMERICAN_ONLY_FILE)
        british_only = load_table(data_dir / BRITISH_ONLY_FILE)
        spelling = load_table(data_dir / SPELLING_FILE)
        logger.info(
            f"📚 Loaded dictionaries from {data_dir} "
            f"({len(american_only)} american-only, {len(british_only)} british-only, "
            f"{len(spelling)} spelling entries)"
        )
        return cls(american_only, british_only, spelling)

    @classmethod
    def default(cls) -> "DictionaryStore":
        """Return the process-wide store built from the packaged data."""
        return _default_store()

    def spelling(self, direction: Direction) -> Mapping[str, str]:
        return self._spelling[direction]

    def exclusive(self, direction: Direction) -> Mapping[str, str]:
        return self._exclusive[direction]


@lru_cache(maxsize=1)
def _default_store() -> DictionaryStore:
    return DictionaryStore.from_data_dir(DATA_DIR)
