"""
Unit tests for the dictionary store.
"""

import logging
from pathlib import Path

import pytest

from anglo_locale.dictionaries import DictionaryLoadError, DictionaryStore, invert, load_table
from anglo_locale.dictionaries.store import DATA_DIR
from anglo_locale.models import Direction

from conftest import SMALL_DICTIONARIES, write_dictionaries


class TestLoadTable:
    """Test parsing of individual YAML tables."""

    def test_keys_are_normalized(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("entries:\n  '  Parking Lot ': Car park\n", encoding="utf-8")
        assert load_table(path) == {"parking lot": "Car park"}

    def test_values_kept_verbatim(self, small_data_dir: Path) -> None:
        table = load_table(small_data_dir / "british_only.yaml")
        assert table["paracetamol"] == "Tylenol"

    def test_blank_keys_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("entries:\n  ' ': nothing\n  soccer: football\n", encoding="utf-8")
        assert load_table(path) == {"soccer": "football"}

    def test_empty_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("entries:\n", encoding="utf-8")
        assert load_table(path) == {}

    def test_missing_entries_key(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("words:\n  a: b\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError):
            load_table(path)

    def test_entries_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("entries:\n  - soccer\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError):
            load_table(path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "table.yaml"
        path.write_text("entries: [unclosed\n", encoding="utf-8")
        with pytest.raises(DictionaryLoadError):
            load_table(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_table(tmp_path / "nope.yaml")


class TestInvert:
    """Test spelling table inversion."""

    def test_exchanges_keys_and_values(self) -> None:
        assert invert({"color": "colour", "favorite": "favourite"}) == {
            "colour": "color",
            "favourite": "favorite",
        }

    def test_every_forward_entry_has_one_reverse_entry(self) -> None:
        forward = {"color": "colour", "honor": "honour", "gray": "grey"}
        reverse = invert(forward)
        assert len(reverse) == len(forward)
        assert invert(reverse) == forward

    def test_duplicate_values_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="anglo-locale.dictionaries"):
            reverse = invert({"a": "x", "b": "x"})
        assert reverse == {"x": "b"}
        assert "maps back to both" in caplog.text


class TestDictionaryStore:
    """Test per-direction table selection."""

    def test_spelling_tables(self, small_store: DictionaryStore) -> None:
        forward = small_store.spelling(Direction.AMERICAN_TO_BRITISH)
        reverse = small_store.spelling(Direction.BRITISH_TO_AMERICAN)
        assert forward["favorite"] == "favourite"
        assert reverse["favourite"] == "favorite"
        assert len(forward) == len(reverse)

    def test_exclusive_tables(self, small_store: DictionaryStore) -> None:
        assert small_store.exclusive(Direction.AMERICAN_TO_BRITISH)["parking lot"] == "car park"
        assert small_store.exclusive(Direction.BRITISH_TO_AMERICAN)["bum bag"] == "fanny pack"
        assert "soccer" not in small_store.exclusive(Direction.BRITISH_TO_AMERICAN)

    def test_tables_are_read_only(self, small_store: DictionaryStore) -> None:
        table = small_store.exclusive(Direction.AMERICAN_TO_BRITISH)
        with pytest.raises(TypeError):
            table["new"] = "entry"

    def test_missing_file_in_data_dir(self, tmp_path: Path) -> None:
        tables = {k: v for k, v in SMALL_DICTIONARIES.items() if k != "british_only.yaml"}
        data_dir = write_dictionaries(tmp_path / "partial", tables)
        with pytest.raises(FileNotFoundError):
            DictionaryStore.from_data_dir(data_dir)

    def test_default_store_is_shared(self) -> None:
        assert DictionaryStore.default() is DictionaryStore.default()


class TestPackagedData:
    """Sanity checks on the dictionaries shipped with the package."""

    def test_data_files_exist(self) -> None:
        for name in ("american_only.yaml", "british_only.yaml", "american_to_british_spelling.yaml"):
            assert (DATA_DIR / name).exists(), f"{name} not found in {DATA_DIR}"

    def test_spelling_values_are_unique(self) -> None:
        spelling = load_table(DATA_DIR / "american_to_british_spelling.yaml")
        values = [value.lower() for value in spelling.values()]
        assert len(values) == len(set(values))

    def test_exclusive_keys_have_at_most_three_words(self) -> None:
        for name in ("american_only.yaml", "british_only.yaml"):
            for key in load_table(DATA_DIR / name):
                assert 1 <= len(key.split()) <= 3, key

    def test_default_store_contents(self) -> None:
        store = DictionaryStore.default()
        assert store.spelling(Direction.AMERICAN_TO_BRITISH)["yogurt"] == "yoghurt"
        assert store.spelling(Direction.BRITISH_TO_AMERICAN)["caramelised"] == "caramelized"
        assert store.exclusive(Direction.AMERICAN_TO_BRITISH)["rube goldberg machine"] == "Heath Robinson device"
        assert store.exclusive(Direction.BRITISH_TO_AMERICAN)["car boot sale"] == "swap meet"
