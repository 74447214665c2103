# trie_spellchecker/core/normalizer.py
# query/dictionary token clean-up done before anything reaches the Trie
import re
from typing import Iterable, Iterator, Union

_word_re = re.compile(r"[A-Za-z]+")
_split_re = re.compile(r"\s+")


def normalize_word(s: str) -> str:
    if not s:
        return ""
    return s.strip().lower()


def is_valid_input(s: str) -> bool:
    """True for a non-empty token made only of ASCII letters."""
    if not s:
        return False
    return _word_re.fullmatch(s) is not None


def iter_tokens(source: Union[str, Iterable[str]]) -> Iterator[str]:
    """
    Whitespace-separated tokens from a string or a line iterable (e.g. an open file).
    Empty tokens dropped, nothing else touched.
    """
    lines = [source] if isinstance(source, str) else source
    for line in lines:
        for tok in _split_re.split(line):
            if tok:
                yield tok
