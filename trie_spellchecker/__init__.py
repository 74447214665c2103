"""
trie_spellchecker

Dictionary spell checker built on a fixed-fanout Trie.
Corrections follow a narrow error model: doubled letters and
interchangeable vowels (case is ignored).
"""

from .core import CorrectionResult, SpellChecker, Trie, TrieNode

__all__ = ["CorrectionResult", "SpellChecker", "Trie", "TrieNode"]

__version__ = "0.1.0"
