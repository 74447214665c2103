# tools/verify.py
"""
Verification run: generate random misspellings of dictionary words, check
each one, and count how many came back with no suggestions.
Usage:
  python -m trie_spellchecker.tools.verify --dict /usr/share/dict/words --count 50 --seed 7
"""
import argparse
import time
from dataclasses import dataclass, field
from typing import List, Optional

from trie_spellchecker.core.generator import DEFAULT_COUNT, generate
from trie_spellchecker.core.loader import DEFAULT_DICTIONARY
from trie_spellchecker.core.spellchecker import SpellChecker
from trie_spellchecker.utils.logger_utils import Log


@dataclass
class VerificationReport:
    checked: int
    no_suggestions: int
    elapsed_s: float
    misses: List[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"{self.no_suggestions} occurrence(s) of 'No Suggestions' "
            f"in {self.checked} word(s); execution time {self.elapsed_s:.3f} second(s)."
        )


def run_verification(
    checker: SpellChecker,
    count: int = DEFAULT_COUNT,
    seed: Optional[int] = None,
    words: Optional[List[str]] = None,
) -> VerificationReport:
    """Misspell `count` words (from `words` or the checker's own trie) and check them all."""
    source = words if words is not None else list(checker.trie.words())
    t0 = time.perf_counter()
    queries = generate(source, count=count, seed=seed)
    misses = [q for q in queries if not checker.check(q).found]
    report = VerificationReport(
        checked=len(queries),
        no_suggestions=len(misses),
        elapsed_s=time.perf_counter() - t0,
        misses=misses,
    )
    Log.info(report.summary())
    return report


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--dict", dest="dictionary", default=DEFAULT_DICTIONARY, help="word list")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="misspellings to check")
    parser.add_argument("--seed", type=int, default=None, help="rng seed")
    args = parser.parse_args()

    print("Engaging Verification...")
    checker = SpellChecker.from_file(args.dictionary)
    report = run_verification(checker, count=args.count, seed=args.seed)
    print(report.summary())
    for m in report.misses:
        print("  no suggestions:", m)
    print("Verification Complete.")


if __name__ == "__main__":
    main()
