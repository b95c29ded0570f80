"""
Static dictionaries for American and British English vocabulary and spelling.
"""

from .store import DictionaryLoadError, DictionaryStore, invert, load_table

__all__ = ["DictionaryStore", "DictionaryLoadError", "invert", "load_table"]
