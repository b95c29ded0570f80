"""
Pytest configuration and fixtures for anglo-locale tests.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add src directory to Python path to allow importing anglo_locale
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from anglo_locale.dictionaries import DictionaryStore
from anglo_locale.translator import Translator


SMALL_DICTIONARIES = {
    "american_only.yaml": {
        "entries": {
            "parking lot": "car park",
            "rube goldberg machine": "Heath Robinson device",
            "rube goldberg": "Heath Robinson",
            "soccer": "football",
            "trashcan": "bin",
        }
    },
    "british_only.yaml": {
        "entries": {
            "car boot sale": "swap meet",
            "bum bag": "fanny pack",
            "footie": "soccer",
            "paracetamol": "Tylenol",
        }
    },
    "american_to_british_spelling.yaml": {
        "entries": {
            "favorite": "favourite",
            "color": "colour",
            "caramelize": "caramelise",
        }
    },
}


def write_dictionaries(directory: Path, tables: dict[str, dict]) -> Path:
    """Dump dictionary tables as YAML files into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    for filename, content in tables.items():
        with open(directory / filename, "w", encoding="utf-8") as f:
            yaml.dump(content, f, allow_unicode=True)
    return directory


@pytest.fixture
def small_data_dir(tmp_path: Path) -> Path:
    """Directory holding a small, known set of dictionary files."""
    return write_dictionaries(tmp_path / "data", SMALL_DICTIONARIES)


@pytest.fixture
def small_store(small_data_dir: Path) -> DictionaryStore:
    return DictionaryStore.from_data_dir(small_data_dir)


@pytest.fixture
def translator() -> Translator:
    """Translator over the packaged dictionaries."""
    return Translator()
