# spellchecker.py
"""
SpellChecker - application facade over the Trie.

Purpose:
 - Own the Trie and the load statistics
 - Simple public API for the CLI/tools/tests:
     add_words(words), check(word), correct(word), correct_many(words), stats()
 - Time every query and keep running metrics
"""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from trie_spellchecker.core.loader import DEFAULT_DICTIONARY, LoadStats, load_dictionary
from trie_spellchecker.core.normalizer import normalize_word
from trie_spellchecker.core.trie import Trie
from trie_spellchecker.utils.logger_utils import Log
from trie_spellchecker.utils.metrics_tracker import Metrics
from trie_spellchecker.utils.threaded_runner import run_parallel
from trie_spellchecker.utils.timing_utils import timed


@dataclass(frozen=True)
class CorrectionResult:
    word: str
    corrections: Tuple[str, ...] = field(default_factory=tuple)  # sorted, display only
    elapsed_us: float = 0.0
    exact: bool = False

    @property
    def found(self) -> bool:
        return bool(self.corrections)

    def as_set(self) -> Set[str]:
        return set(self.corrections)


class SpellChecker:
    """Application facade exposing small API
    Public API:
      - add_words(words: Iterable[str]) -> int
      - check(word: str) -> CorrectionResult
      - correct(word: str) -> set[str]
      - correct_many(words, max_workers=4) -> dict[str, set[str]]
      - stats() -> Dict[str, Any]
    """

    def __init__(self, trie: Optional[Trie] = None, metrics: Optional[Metrics] = None):
        self.trie = trie if trie is not None else Trie()
        self.metrics = metrics if metrics is not None else Metrics()
        self.load_stats: Optional[LoadStats] = None
        self.words_loaded = 0
        self._started_at = time.time()

    @classmethod
    def from_file(cls, path: str = DEFAULT_DICTIONARY, metrics: Optional[Metrics] = None) -> "SpellChecker":
        """Build a checker from a dictionary file; DictionaryLoadError propagates."""
        stats = load_dictionary(path)
        sc = cls(trie=stats.trie, metrics=metrics)
        sc.load_stats = stats
        sc.words_loaded = stats.words
        return sc

    # building ---------------------------------------------------------
    def add_words(self, words: Iterable[str]) -> int:
        n = self.trie.insert_many(w.lower() for w in words)
        self.words_loaded += n
        return n

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    # queries ---------------------------------------------------------
    def correct(self, word: str) -> Set[str]:
        return self.trie.correct(normalize_word(word))

    def check(self, word: str) -> CorrectionResult:
        """Correct one word and time it (microseconds)."""
        w = normalize_word(word)
        found, elapsed = timed(self.trie.correct)(w)
        us = elapsed * 1_000_000.0
        self.metrics.record("correct_us", us)
        exact = found == {w} and w in self.trie
        if not found:
            self.metrics.record("no_suggestions", 1)
        return CorrectionResult(word=w, corrections=tuple(sorted(found)), elapsed_us=us, exact=exact)

    def correct_many(self, words: Iterable[str], max_workers: int = 4) -> Dict[str, Set[str]]:
        """
        Correct a batch concurrently. The trie is read-only after loading,
        so the queries share it without locks.
        """
        ws: List[str] = [normalize_word(w) for w in words]
        results = run_parallel(self.trie.correct, ws, max_workers=max_workers)
        return dict(zip(ws, results))

    def stats(self) -> Dict[str, Any]:
        return {
            "uptime_s": round(time.time() - self._started_at, 1),
            "words_loaded": self.words_loaded,
            "nodes": self.trie.node_count,
            "load_ms": round(self.load_stats.elapsed_ms, 1) if self.load_stats else 0.0,
            "queries": self.metrics.count("correct_us"),
            "mean_query_us": round(self.metrics.avg("correct_us"), 1),
            "no_suggestions": self.metrics.count("no_suggestions"),
        }

    def log_stats(self) -> None:
        for k, v in self.stats().items():
            Log.metric(k, v)
