# trie.py
# Fixed-fanout Trie (prefix tree) holding the spelling dictionary.
# Correction search is tuned to a narrow error model: doubled letters and
# interchangeable vowels (case is normalised away before searching).
# It is NOT general edit distance: no insertions, deletions, transpositions
# or consonant substitutions are ever tried.

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Set

ALPHABET = 26
VOWELS = "aeiou"


def _slot(letter: str) -> int:
    """Child slot index for an ASCII letter, -1 for anything else."""
    # raw range checks only: str.lower() can map one char to two ("İ") or
    # fold non-ASCII letters into a..z (Kelvin sign)
    if len(letter) != 1:
        return -1
    if "a" <= letter <= "z":
        return ord(letter) - 97
    if "A" <= letter <= "Z":
        return ord(letter) - 65
    return -1


def is_letter(ch: str) -> bool:
    return _slot(ch) >= 0


class TrieNode:
    """
    A single node in the Trie.
    children: 26 slots, one per letter, None when no word continues that way
    is_endpoint: True when an inserted word ends exactly here
    word: lowercase spelling of the path from the root to this node
    """

    __slots__ = ("children", "is_endpoint", "word")

    def __init__(self, word: str = "") -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET
        self.is_endpoint = False
        self.word = word

    def child(self, letter: str) -> Optional["TrieNode"]:
        """Child for `letter` (case-insensitive); None if absent or not a letter."""
        i = _slot(letter)
        if i < 0:
            return None
        return self.children[i]

    def set_child(self, letter: str, node: "TrieNode") -> None:
        self.children[_slot(letter)] = node

    def __repr__(self) -> str:
        return f"TrieNode(word={self.word!r}, is_endpoint={self.is_endpoint})"


class Trie:
    """
    Dictionary index used by the SpellChecker for:
     - insertion of dictionary words (load phase)
     - exact membership checks
     - fuzzy correction lookup for misspelled words
    Read-only once loaded, so concurrent queries need no locking.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self.node_count = 0  # non-root nodes only

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.
        Non-letters are skipped ("don't" == "dont"), letters lowercased one by one.
        Re-inserting a word creates no new nodes.
        An empty (or all-punctuation) word marks the root as an endpoint.
        """
        node = self._root
        prefix = ""
        for ch in word:
            if not is_letter(ch):
                continue
            ch = ch.lower()
            nxt = node.child(ch)
            if nxt is None:
                nxt = TrieNode()
                node.set_child(ch, nxt)
                self.node_count += 1
            prefix += ch
            nxt.word = prefix
            node = nxt
        node.is_endpoint = True

    def insert_many(self, words: Iterable[str]) -> int:
        """Bulk insert; returns how many words were consumed."""
        n = 0
        for w in words:
            self.insert(w)
            n += 1
        return n

    # exact lookup ---------------------------------------------------------
    def search(self, word: str) -> bool:
        """True if `word` was inserted (same skipping/lowercasing as insert)."""
        node = self._root
        for ch in word:
            if not is_letter(ch):
                continue
            node = node.child(ch)
            if node is None:
                return False
        return node.is_endpoint

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    # corrections ---------------------------------------------------------
    def correct(self, word: str) -> Set[str]:
        """
        Return the set of dictionary words `word` plausibly meant.
        An exact hit short-circuits: {word.lower()} and nothing else.
        Otherwise runs the fuzzy walk; no match gives an empty set.
        """
        w = word.lower()
        if self.search(w):
            return {w}
        results: Set[str] = set()
        self._fuzzy_search(w, self._root, results)
        return results

    get_corrections = correct

    def _fuzzy_search(self, remaining: str, node: TrieNode, results: Set[str]) -> None:
        """
        Recursive walk consuming `remaining` one letter per edge.
         - consonant: exact edge only
         - vowel: any vowel edge present at this node
         - either: a doubled letter may collapse onto a single edge
        Depth is bounded by len(remaining); absent children prune.
        """
        if not remaining:
            if node.is_endpoint:
                results.add(node.word)
            return

        c = remaining[0]
        rest = remaining[1:]

        if c in VOWELS:
            for v in VOWELS:
                nxt = node.child(v)
                if nxt is not None:
                    self._fuzzy_search(rest, nxt, results)
        else:
            nxt = node.child(c)
            if nxt is None:
                return
            self._fuzzy_search(rest, nxt, results)

        # doubled letter: "cc" walks the single 'c' edge
        if len(remaining) >= 2 and remaining[1] == c:
            nxt = node.child(c)
            if nxt is not None:
                self._fuzzy_search(remaining[2:], nxt, results)

    # convenience/debugging -----------------------------------------------------
    def words(self) -> Iterator[str]:
        """Yield every stored word in lexicographic order (DFS, explicit stack)."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_endpoint:
                yield node.word
            for child in reversed(node.children):
                if child is not None:
                    stack.append(child)

    def size(self) -> int:
        """
        Count words in the Trie.
        (Slow: O(N) walk. For inspection, not runtime.)
        """
        return sum(1 for _ in self.words())
