# src/molsig/core/utils/permutations.py

"""Permutation helpers used by the canonicity checker."""

from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def next_permutation(items: List[T]) -> bool:
    """
    Rearrange items in place into the next lexicographic permutation.

    Repeated values are handled, so only distinct arrangements are visited.

    Args:
        items: Mutable sequence of mutually comparable values

    Returns:
        False if items was already the last permutation (it is then reset to
        ascending order), True otherwise
    """
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i < 0:
        items.reverse()
        return False
    j = len(items) - 1
    while items[j] <= items[i]:
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return True


def distinct_permutations(items: Sequence[T]) -> Iterator[Tuple[T, ...]]:
    """Yield each distinct arrangement of items once, in lexicographic order."""
    current = sorted(items)
    yield tuple(current)
    while next_permutation(current):
        yield tuple(current)

