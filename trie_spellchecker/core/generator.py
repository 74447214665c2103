# generator.py
# Random misspellings of dictionary words, used to feed the checker in
# verification runs. The corruption model is the one the Trie is tuned for:
#  - vowels: ~30% chance to become a random vowel (possibly the same one)
#  - consonants: ~20% chance to be doubled, ~20% chance to be uppercased
# Randomness always comes from an explicit random.Random so runs are reproducible.

from __future__ import annotations
import random
from typing import List, Optional, Sequence

from trie_spellchecker.core.trie import VOWELS
from trie_spellchecker.utils.logger_utils import Log

DEFAULT_COUNT = 50


def misspell(word: str, rng: random.Random) -> str:
    """One corrupted copy of `word`."""
    out = []
    for c in word:
        r = rng.randrange(10)
        if c in VOWELS:
            out.append(rng.choice(VOWELS) if r < 3 else c)
        elif r in (4, 5):
            out.append(c + c)
        elif r in (8, 9):
            out.append(c.upper())
        else:
            out.append(c)
    return "".join(out)


def generate(
    words: Sequence[str],
    count: int = DEFAULT_COUNT,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[str]:
    """
    Pick `count` random words (with replacement) and misspell each.
    Pass either a ready rng or a seed; neither means a fresh unseeded Random.
    """
    if not words:
        raise ValueError("cannot generate misspellings from an empty word list")
    if rng is None:
        rng = random.Random(seed)
    out = [misspell(rng.choice(words), rng) for _ in range(count)]
    Log.info(f"generated {len(out)} misspelling(s) from {len(words)} word(s)")
    return out


def write_generated(path: str, misspellings: Sequence[str]) -> None:
    """One misspelling per line (wordsgenerated.txt style)."""
    with open(path, "w", encoding="utf-8") as f:
        for w in misspellings:
            f.write(w + "\n")
