from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def partition(seq: Iterable[T], fn: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    trues = []
    falses = []
    for x in seq:
        if fn(x):
            trues.append(x)
        else:
            falses.append(x)
    return falses, trues
