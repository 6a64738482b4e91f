import pytest
from inline_snapshot import snapshot

from wordgrid.board import Board
from wordgrid.report import found_words, missing_words
from wordgrid.searcher import BoardSearcher, WildcardPolicy
from wordgrid.trie import Trie

# A B C
# D E F
# G H I
WORDS_3X3 = ["abe", "aei", "bad", "ebc", "fed", "hie", "ghi", "abc", "adg", "ceg"]


def search(words, rows, cols, letters, **kwargs) -> Trie:
    t = Trie.create_from_wordlist(words)
    BoardSearcher(t, Board(rows, cols, letters), **kwargs).search()
    return t


def test_2x2():
    # A B
    # C D
    t = search(["ab", "ac", "ad", "abc"], 2, 2, "abcd", no_reuse=True)
    assert list(found_words(t)) == snapshot(
        [("ab", 1), ("abc", 1), ("ac", 1), ("ad", 1)]
    )
    # Prefixes are counted as well as words.
    assert t.find_word("a").count() == 1


def test_3x3():
    t = search(WORDS_3X3 + ["cat", "aia", "aba"], 3, 3, "abcdefghi")
    assert list(found_words(t)) == snapshot(
        [
            ("abc", 1),
            ("abe", 1),
            ("adg", 1),
            ("aei", 1),
            ("bad", 1),
            ("ceg", 1),
            ("ebc", 1),
            ("fed", 1),
            ("ghi", 1),
            ("hie", 1),
        ]
    )
    assert list(missing_words(t)) == snapshot(["aba", "aia", "cat"])


def test_reuse():
    t = search(["aba", "abab"], 2, 2, "abcd", no_reuse=True)
    assert list(found_words(t)) == []

    t = search(["aba", "abab"], 2, 2, "abcd", no_reuse=False)
    assert list(found_words(t)) == snapshot([("aba", 1), ("abab", 1)])


def test_reuse_never_stays_put():
    # A cell is never its own neighbor, even when reuse is allowed.
    t = search(["aa", "aaa"], 1, 1, "a", no_reuse=False)
    assert list(found_words(t)) == []
    assert t.find_word("a").count() == 1

    t = search(["aa", "aaa"], 1, 2, "ab", no_reuse=False)
    assert list(found_words(t)) == []


def test_sibling_branches_are_independent():
    # Exploring a-b-e must not stop a-e-b from using the same cells.
    t = search(["abe", "aeb"], 3, 3, "abcdefghi")
    assert list(found_words(t)) == [("abe", 1), ("aeb", 1)]


def test_multiple_paths():
    # E E
    # E E
    t = search(["eee", "eeee", "eeeee"], 2, 2, "eeee")
    assert list(t.report()) == [("eee", 24), ("eeee", 24), ("eeeee", 0)]


@pytest.mark.parametrize("no_reuse, expected", [(True, 24), (False, 36)])
def test_all_wildcards(no_reuse, expected):
    t = search(["abc"], 2, 2, "____", no_reuse=no_reuse)
    assert list(found_words(t)) == [("abc", expected)]
    assert t.find_word("a").count() == 4
    assert t.find_word("ab").count() == 12


def test_wildcard_policy():
    t = search(["ab", "ba"], 1, 2, "a_")
    assert list(t.report()) == [("ab", 1), ("ba", 1)]

    t = search(["ab", "ba"], 1, 2, "a_", wildcard_policy=WildcardPolicy.NEIGHBORS_ONLY)
    assert list(t.report()) == [("ab", 1), ("ba", 0)]

    t = search(["abc"], 2, 2, "____", wildcard_policy=WildcardPolicy.NEIGHBORS_ONLY)
    assert list(found_words(t)) == []


def test_single_cell_board():
    t = search(["a", "ab", "ba"], 1, 1, "a", no_reuse=False)
    assert list(found_words(t)) == [("a", 1)]
    assert list(missing_words(t)) == ["ab", "ba"]


def test_missing_letter():
    t = search(["ab", "xyz"], 2, 2, "abcd")
    assert list(found_words(t)) == [("ab", 1)]
    assert list(missing_words(t)) == ["xyz"]
    assert t.find_word("x").count() == 0


def test_deterministic():
    t1 = search(WORDS_3X3, 3, 3, "abcdefghi", no_reuse=False)
    t2 = search(WORDS_3X3, 3, 3, "abcdefghi", no_reuse=False)
    assert list(t1.report()) == list(t2.report())


def test_repeated_search_accumulates():
    t = Trie.create_from_wordlist(["abc", "abe", "eee"])
    searcher = BoardSearcher(t, Board(3, 3, "abceeeeee"), no_reuse=True)
    visits = searcher.search()
    once = dict(t.report())
    assert searcher.search() == visits
    assert dict(t.report()) == {word: 2 * count for word, count in once.items()}

    t.reset_counts()
    searcher.search()
    assert dict(t.report()) == once


def test_only_dictionary_words_reported():
    t = search(["fed", "zebra"], 3, 3, "abcdefghi")
    assert {w for w, _ in t.report()} == {"fed", "zebra"}
    assert t.find_word("bed") is None


@pytest.mark.parametrize("no_reuse", [True, False])
def test_witness_paths(no_reuse):
    letters = "abcdefghi"
    bd = Board(3, 3, letters)
    t = Trie.create_from_wordlist(WORDS_3X3 + ["aba", "ebeb", "abed", "edeb"])
    searcher = BoardSearcher(t, bd, no_reuse=no_reuse)
    searcher.collect_paths = True
    searcher.search()

    assert searcher.paths
    counts = dict(found_words(t))
    assert counts.keys() == searcher.paths.keys()
    for word, paths in searcher.paths.items():
        assert len(paths) == counts[word]
        for path in paths:
            assert "".join(letters[i] for i in path) == word
            for a, b in zip(path, path[1:]):
                assert b in bd.neighbor_indices(a)
            if no_reuse:
                assert len(set(path)) == len(path)

    if no_reuse:
        assert "aba" not in searcher.paths
    else:
        assert searcher.paths["aba"] == [(0, 1, 0)]
        assert searcher.paths["ebeb"] == [(4, 1, 4, 1)]


def test_witness_paths_with_wildcards():
    bd = Board(2, 2, "a___")
    t = Trie.create_from_wordlist(["abc"])
    searcher = BoardSearcher(t, bd)
    searcher.collect_paths = True
    searcher.search()
    assert sorted(searcher.paths["abc"]) == snapshot(
        [
            (0, 1, 2),
            (0, 1, 3),
            (0, 2, 1),
            (0, 2, 3),
            (0, 3, 1),
            (0, 3, 2),
            (1, 2, 3),
            (1, 3, 2),
            (2, 1, 3),
            (2, 3, 1),
            (3, 1, 2),
            (3, 2, 1),
        ]
    )


def test_progress():
    bd = Board(3, 3, "abcdefghi")
    t1 = Trie.create_from_wordlist(WORDS_3X3)
    t2 = Trie.create_from_wordlist(WORDS_3X3)
    visits = BoardSearcher(t1, bd).search(progress=True)
    assert visits == BoardSearcher(t2, bd).search()
    assert list(found_words(t1)) == list(found_words(t2))
