# tests/test_generator.py
import random
import re

import pytest

from trie_spellchecker.core.generator import generate, misspell, write_generated
from trie_spellchecker.core.trie import Trie, VOWELS


def _shape_ok(original, corrupted):
    """Every letter kept, swapped for a vowel, doubled or uppercased."""
    parts = []
    for c in original:
        if c in VOWELS:
            parts.append("[aeiou]")
        else:
            parts.append(f"(?:{c}{c}|{c}|{c.upper()})")
    assert re.fullmatch("".join(parts), corrupted), (original, corrupted)


def test_misspell_is_reproducible():
    a = misspell("abracadabra", random.Random(3))
    b = misspell("abracadabra", random.Random(3))
    assert a == b


def test_misspell_shape():
    rng = random.Random(11)
    for _ in range(200):
        w = rng.choice(["strength", "banana", "queue", "balloon"])
        _shape_ok(w, misspell(w, rng))


def test_generate_seeded():
    words = ["alpha", "beta", "gamma"]
    assert generate(words, count=20, seed=5) == generate(words, count=20, seed=5)
    assert len(generate(words, count=7, rng=random.Random(1))) == 7


def test_generate_empty_words():
    with pytest.raises(ValueError):
        generate([], count=3)


def test_generated_words_always_corrected():
    words = ["balloon", "strength", "banana", "letter", "queue", "rhythm", "book"]
    t = Trie()
    t.insert_many(words)
    for bad in generate(words, count=300, seed=42):
        assert t.correct(bad), bad


def test_each_misspelling_finds_its_source():
    words = ["balloon", "strength", "banana", "letter", "queue", "rhythm", "book"]
    t = Trie()
    t.insert_many(words)
    rng = random.Random(9)
    for _ in range(50):
        for w in words:
            bad = misspell(w, rng)
            assert w in t.correct(bad), (w, bad)


def test_write_generated(tmp_path):
    out = tmp_path / "wordsgenerated.txt"
    write_generated(str(out), ["aa", "bb"])
    assert out.read_text(encoding="utf-8") == "aa\nbb\n"
