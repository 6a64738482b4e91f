import logging
from typing import Callable, Iterable, Iterator, Self

from wordgrid.util import partition

LETTER_A = ord("a")
ALPHABET_SIZE = 26

logger = logging.getLogger("wordgrid")


class Trie:
    """26-way prefix tree whose nodes also count board-search visits."""

    _children: list[Self | None]
    _count: int
    _is_word: bool
    word: str | None

    def __init__(self):
        self._is_word = False
        self._count = 0
        self._children = [None] * ALPHABET_SIZE
        self.word = None

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int) -> Self | None:
        return self._children[i]

    def is_word(self):
        return self._is_word

    def count(self):
        return self._count

    def increment(self):
        self._count += 1

    # ---

    def add_word(self, word: str) -> Self | None:
        """Insert word, returning its terminal node (None for "")."""
        if word == "":
            return None
        node = self
        for let in word:
            c = ord(let) - LETTER_A
            if not 0 <= c < ALPHABET_SIZE:
                raise ValueError(f"Can't add {word!r}: {let!r} is not in a-z")
            if not node.starts_word(c):
                node._children[c] = Trie()
            node = node.descend(c)
        if not node._is_word:
            node._is_word = True
            node.word = word
        return node

    def nodes(self) -> Iterator[Self]:
        """Pre-order walk of this node and its descendants, in letter order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(c for c in reversed(node._children) if c)

    def size(self):
        return sum(1 for node in self.nodes() if node.is_word())

    def num_nodes(self):
        return sum(1 for _ in self.nodes())

    def find_word(self, word: str):
        """Find the node for a word or prefix, or None."""
        node = self
        for let in word:
            c = ord(let) - LETTER_A
            if not (0 <= c < ALPHABET_SIZE and node.starts_word(c)):
                return None
            node = node.descend(c)
        return node

    def reset_counts(self):
        for node in self.nodes():
            node._count = 0

    def report(self) -> Iterator[tuple[str, int]]:
        """Yield (word, count) for every word in the trie, alphabetically."""
        for node in self.nodes():
            if node._is_word:
                yield node.word, node._count

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """words should already be filtered and lowercase."""
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie


def normalize_word(line: str) -> str:
    return line.strip().lower()


def is_dictionary_word(word: str, min_length: int = 3):
    if not word or len(word) < min_length:
        return False
    for let in word:
        if let < "a" or let > "z":
            return False
    return True


def min_length_filter(min_length: int) -> Callable[[str], bool]:
    return lambda word: is_dictionary_word(word, min_length)


def make_trie(
    lines: Iterable[str], accept: Callable[[str], bool] = is_dictionary_word
) -> tuple[Trie, list[str]]:
    """Build a Trie from raw dictionary lines.

    Blank lines are skipped. Words that fail `accept` are returned in the
    second element, in input order; they never enter the Trie.
    """
    words = [w for w in (normalize_word(line) for line in lines) if w]
    rejected, accepted = partition(words, accept)
    t = Trie.create_from_wordlist(accepted)
    logger.debug(
        "Built trie: %d words, %d nodes, %d rejected",
        t.size(),
        t.num_nodes(),
        len(rejected),
    )
    return t, rejected
