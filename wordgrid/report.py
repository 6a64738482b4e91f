from enum import Enum
from typing import Iterable, Iterator

from wordgrid.trie import Trie


class ReportMode(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


def found_words(trie: Trie) -> Iterator[tuple[str, int]]:
    """Words reached on the board, with their path counts, alphabetically."""
    for word, count in trie.report():
        if count > 0:
            yield word, count


def missing_words(trie: Trie, rejected: Iterable[str] | None = None) -> Iterator[str]:
    """Dictionary words never reached on the board, alphabetically.

    If rejected is given, words the dictionary filter kept out of the trie are
    merged into the listing as well.
    """
    missing = (word for word, count in trie.report() if count == 0)
    if rejected is None:
        yield from missing
        return
    # rejected may be unsorted and contain duplicates.
    yield from sorted({*missing, *rejected})


def format_report(
    trie: Trie, mode: ReportMode, rejected: Iterable[str] | None = None
) -> Iterator[str]:
    if mode == ReportMode.FOUND:
        for word, count in found_words(trie):
            yield f"{word}: {count}"
    else:
        yield from missing_words(trie, rejected)
