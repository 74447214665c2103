# tests/conftest.py - shared fixtures
import pytest

from trie_spellchecker.core.trie import Trie
from trie_spellchecker.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def quiet_log(tmp_path):
    # keep log files out of the working tree
    old_path, old_enabled = Log.path, Log.enabled
    Log.set_path(str(tmp_path / "logs" / "test.log"))
    Log.enabled = True
    yield
    Log.path, Log.enabled = old_path, old_enabled


@pytest.fixture
def toy_trie():
    t = Trie()
    for w in ["cat", "cot", "coot", "dog"]:
        t.insert(w)
    return t


@pytest.fixture
def dict_file(tmp_path):
    p = tmp_path / "words"
    p.write_text("Cat\ncot\ncoot\ndog\nHello\nbook\nballoon\n", encoding="utf-8")
    return p
