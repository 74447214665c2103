"""
trie_spellchecker.core

Contains:
 - the dictionary Trie and its correction search (Trie, TrieNode)
 - dictionary loading (load_dictionary, DictionaryLoadError)
 - the SpellChecker facade used by the CLI and tools
 - the random misspelling generator
"""

from .trie import Trie, TrieNode
from .loader import DictionaryLoadError, LoadStats, load_dictionary
from .spellchecker import CorrectionResult, SpellChecker

__all__ = [
    "Trie",
    "TrieNode",
    "DictionaryLoadError",
    "LoadStats",
    "load_dictionary",
    "CorrectionResult",
    "SpellChecker",
]
