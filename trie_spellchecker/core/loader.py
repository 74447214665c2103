# loader.py
# Reads a plain word list (whitespace separated, mixed case) into a Trie.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from trie_spellchecker.core.normalizer import iter_tokens
from trie_spellchecker.core.trie import Trie
from trie_spellchecker.utils.logger_utils import Log

DEFAULT_DICTIONARY = "/usr/share/dict/words"


class DictionaryLoadError(Exception):
    """Dictionary file missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to open {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class LoadStats:
    trie: Trie
    words: int
    nodes: int
    elapsed_ms: float

    def summary(self) -> str:
        return (
            f"{self.words} word(s) loaded into {self.nodes} node(s) "
            f"in {int(self.elapsed_ms)} millisecond(s)."
        )


def read_words(path: str) -> List[str]:
    """All whitespace tokens of the file, lowercased (some entries are capitalised)."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return [tok.lower() for tok in iter_tokens(f)]
    except OSError as e:
        raise DictionaryLoadError(path, e.strerror or str(e)) from e


def load_dictionary(path: str = DEFAULT_DICTIONARY, trie: Optional[Trie] = None) -> LoadStats:
    """Fill `trie` (a fresh one by default) from `path` and report counts/time."""
    trie = trie if trie is not None else Trie()
    words = read_words(path)
    with Log.time_block(f"dictionary load ({path})") as t:
        n = trie.insert_many(words)
    stats = LoadStats(trie=trie, words=n, nodes=trie.node_count, elapsed_ms=t.elapsed * 1000.0)
    Log.info(stats.summary())
    return stats
