import itertools

import pytest
from inline_snapshot import snapshot

from boggle_solver.test_utils import get_trie, data_path
from boggle_solver.trie import Trie


def test_trie():
    t = Trie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.is_word("")

    assert t.size() == 6
    assert t.is_word("agriculture")
    assert t.is_word("culture")
    assert t.is_word("boggle")
    assert t.is_word("tea")
    assert t.is_word("sea")
    assert t.is_word("teapot")

    assert not t.is_word("teap")
    assert not t.is_word("random")
    assert not t.is_word("cultur")

    wd = t.find_node("tea")
    assert wd is not None
    assert wd.letter == "a"
    assert wd.is_word()
    assert t.find_node("teap") is not None
    assert t.find_node("teax") is None

    child = t.find_node("agriculture")
    assert child is not None
    assert Trie.reverse_lookup(t.root, child) == "agriculture"


def test_case_insensitive():
    t = Trie.create_from_wordlist(["Cat", "DOG"])
    assert t.is_word("cat")
    assert t.is_word("CAT")
    assert t.is_word("dog")
    assert t.has_words_with_prefix("Ca")
    assert [*t.words()] == ["cat", "dog"]


def test_prefixes_of_longer_words():
    t = Trie.create_from_wordlist(["cat"])
    assert not t.is_word("c")
    assert not t.is_word("ca")
    assert t.has_words_with_prefix("c")
    assert t.has_words_with_prefix("ca")
    assert t.is_word("cat")
    assert not t.has_words_with_prefix("cat")
    assert not t.has_words_with_prefix("cats")
    assert not t.has_words_with_prefix("x")


def test_empty_string():
    t = Trie()
    assert not t.is_word("")
    assert not t.has_words_with_prefix("")
    t.add_word("a")
    assert not t.is_word("")
    assert t.has_words_with_prefix("")


def test_rejects_non_letters():
    t = Trie()
    for word in ("", "it's", "héllo", "abc1", "two words"):
        with pytest.raises(ValueError):
            t.add_word(word)
    assert t.num_nodes() == 1
    assert t.find_node("a1") is None
    assert not t.is_word("it's")
    assert not t.has_words_with_prefix("it'")


def test_add_word_is_idempotent():
    once = Trie.create_from_wordlist(["tea", "teapot", "sea"])
    twice = Trie.create_from_wordlist(["tea", "teapot", "sea", "tea", "TEA", "sea"])
    assert once.size() == twice.size() == 3
    assert once.num_nodes() == twice.num_nodes() == 10
    assert [*once.words()] == [*twice.words()] == ["sea", "tea", "teapot"]


def test_prefix_query_matches_word_list():
    words = ["a", "as", "at", "cat", "cats", "cast", "sat", "tacs"]
    t = Trie.create_from_wordlist(words)
    for n in range(0, 5):
        for letters in itertools.product("acst", repeat=n):
            s = "".join(letters)
            assert t.is_word(s) == (s in words), s
            assert t.has_words_with_prefix(s) == any(
                w.startswith(s) and w != s for w in words
            ), s


def test_load_file():
    t = get_trie()
    assert not t.is_word("")
    assert t.size() == 98

    assert t.is_word("stream")
    assert not t.is_word("strea")
    assert t.has_words_with_prefix("strea")
    assert not t.is_word("streams")


def test_load_file_twice():
    t = Trie()
    assert t.load_dictionary(data_path("words.txt"))
    size = t.size()
    num_nodes = t.num_nodes()
    assert t.load_dictionary(data_path("words.txt"))
    assert t.size() == size
    assert t.num_nodes() == num_nodes


def test_load_skips_blank_and_invalid_lines(tmp_path, capsys):
    path = tmp_path / "dict.txt"
    path.write_text("Cat\n\n  dog  \ndon't\nx-ray\nEMU\n")
    t = Trie()
    assert t.load_dictionary(str(path))
    assert [*t.words()] == snapshot(["cat", "dog", "emu"])
    assert "skipped 2 non-alphabetic lines" in capsys.readouterr().err


def test_load_missing_file(tmp_path):
    t = Trie()
    assert not t.load_dictionary(str(tmp_path / "no-such-file.txt"))
    assert t.size() == 0
    assert t.num_nodes() == 1
    assert not t.is_word("cat")
    assert not t.has_words_with_prefix("c")

    with pytest.raises(OSError):
        Trie.create_from_file(str(tmp_path / "no-such-file.txt"))


def test_failed_load_keeps_existing_words(tmp_path):
    t = Trie.create_from_wordlist(["cat"])
    assert not t.load_dictionary(str(tmp_path / "missing.txt"))
    assert [*t.words()] == ["cat"]


def test_test_utils_helpers_are_not_collected():
    from boggle_solver import test_utils

    assert [name for name in vars(test_utils) if name.startswith("test")] == []
