import logging
from enum import Enum

from tqdm import tqdm

from wordgrid.board import WILDCARD_CELL, Board
from wordgrid.trie import ALPHABET_SIZE, Trie

ALL_LETTERS = tuple(range(ALPHABET_SIZE))

logger = logging.getLogger("wordgrid")


class WildcardPolicy(Enum):
    """Where a wildcard cell fans out to all 26 letters."""

    EVERYWHERE = "everywhere"
    NEIGHBORS_ONLY = "neighbors_only"

    def __str__(self):
        return self.value


class BoardSearcher:
    """Walks a Board and a Trie in lockstep, counting trie node visits.

    Every live path bumps the count of each trie node it passes through, so a
    word's count is the number of distinct board paths that spell it.
    Counts accumulate across calls to search(); call trie.reset_counts() to
    start over.
    """

    _trie: Trie
    _board: Board

    def __init__(
        self,
        trie: Trie,
        board: Board,
        no_reuse: bool = True,
        wildcard_policy: WildcardPolicy = WildcardPolicy.EVERYWHERE,
    ):
        self._trie = trie
        self._board = board
        self._cells = board.cells
        self._n = len(board)
        self.no_reuse = no_reuse
        self.wildcard_policy = wildcard_policy
        self.collect_paths = False
        self.paths = None
        self._visits = 0
        assert not self._trie.is_word()

    def letters_for(self, i: int, is_start: bool) -> tuple[int, ...]:
        c = self._cells[i]
        if c != WILDCARD_CELL:
            return (c,)
        if is_start and self.wildcard_policy == WildcardPolicy.NEIGHBORS_ONLY:
            return ()
        return ALL_LETTERS

    def search(self, progress=False) -> int:
        """Search from every cell. Returns the number of trie node visits."""
        self._visits = 0
        if self.collect_paths:
            self.paths = {}
        t = self._trie
        starts = range(0, self._n)
        if progress:
            starts = tqdm(starts, smoothing=0)
        for i in starts:
            for c in self.letters_for(i, is_start=True):
                d = t.descend(c)
                if d:
                    self.explore(i, d, 1 << i, (i,))
        logger.debug(
            "Searched %dx%d board %s: %d node visits",
            self._board.rows,
            self._board.cols,
            self._board.letters,
            self._visits,
        )
        return self._visits

    def explore(self, i: int, t: Trie, used: int, path: tuple[int, ...]):
        t.increment()
        self._visits += 1
        if self.collect_paths and t.is_word():
            self.paths.setdefault(t.word, []).append(path)

        for idx in self._board.neighbor_indices(i):
            if self.no_reuse and used & (1 << idx):
                continue
            for c in self.letters_for(idx, is_start=False):
                d = t.descend(c)
                if d:
                    self.explore(idx, d, used | (1 << idx), path + (idx,))
