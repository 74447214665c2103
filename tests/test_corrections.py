# tests/test_corrections.py
# fuzzy correction search: vowel interchange + doubled letters only

import pytest

from trie_spellchecker.core.trie import Trie, VOWELS


def test_vowel_substitution(toy_trie):
    assert toy_trie.correct("cit") == {"cat", "cot"}


def test_exact_match_short_circuit(toy_trie):
    # "cot" would also be reachable fuzzily, but exact hits stop the search
    assert toy_trie.correct("coot") == {"coot"}
    assert toy_trie.correct("cat") == {"cat"}


def test_exact_match_is_case_insensitive(toy_trie):
    assert toy_trie.correct("DoG") == {"dog"}


def test_doubled_first_consonant(toy_trie):
    out = toy_trie.correct("ccat")
    assert "cat" in out
    # the vowel after the collapsed 'c' is free, so "cot" is reached too
    assert out == {"cat", "cot"}


def test_doubled_last_consonant(toy_trie):
    assert toy_trie.correct("dogg") == {"dog"}


def test_no_path(toy_trie):
    assert toy_trie.correct("xyz") == set()


def test_consonant_substitution_not_attempted(toy_trie):
    assert toy_trie.correct("cap") == set()
    assert toy_trie.correct("bat") == set()


def test_no_insertion_or_deletion(toy_trie):
    assert toy_trie.correct("ct") == set()
    assert toy_trie.correct("cats") == set()


def test_empty_query(toy_trie):
    assert toy_trie.correct("") == set()


def test_empty_query_after_empty_insert(toy_trie):
    toy_trie.insert("")
    assert toy_trie.correct("") == {""}


def test_doubled_vowel_collapses():
    t = Trie()
    t.insert("bet")
    assert t.correct("beet") == {"bet"}
    # the collapse only matches the typed vowel, never a substitute
    assert t.correct("biit") == set()


def test_doubled_letter_inside_double():
    t = Trie()
    t.insert("hello")
    assert t.correct("helllo") == {"hello"}
    assert t.correct("hellllo") == {"hello"}
    assert t.correct("hhello") == {"hello"}


def test_results_are_dictionary_words():
    t = Trie()
    words = ["bat", "bet", "bit", "bot", "but", "boat", "beat", "bait"]
    t.insert_many(words)
    out = t.correct("baet")
    assert out
    assert out <= set(words)


def test_multi_vowel_substitution():
    t = Trie()
    t.insert("balloon")
    assert t.correct("bolluun") == {"balloon"}
    assert t.correct("BILLeen") == {"balloon"}


@pytest.mark.parametrize("word", ["book", "banana", "queue", "strength", "rhythm"])
def test_no_false_negatives_for_vowel_swaps(word):
    t = Trie()
    t.insert_many(["book", "banana", "queue", "strength", "rhythm", "bake", "quote"])
    positions = [i for i, c in enumerate(word) if c in VOWELS]
    for i in positions:
        for v in VOWELS:
            corrupted = word[:i] + v + word[i + 1:]
            assert word in t.correct(corrupted), corrupted


@pytest.mark.parametrize("word", ["book", "banana", "strength"])
def test_no_false_negatives_for_one_doubling(word):
    t = Trie()
    t.insert_many(["book", "banana", "strength", "bank"])
    for i, c in enumerate(word):
        corrupted = word[:i] + c + word[i:]
        assert word in t.correct(corrupted), corrupted


def test_vowel_swap_plus_doubling():
    t = Trie()
    t.insert_many(["letter", "litter", "latter"])
    out = t.correct("lotttir")
    assert out == {"letter", "litter", "latter"}
