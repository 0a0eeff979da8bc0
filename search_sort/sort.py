"""Sorting algorithms.

Every sort reorders a mutable sequence in place into non-decreasing order.
Elements are compared with ``<`` only, plus ``==`` in :func:`quick_partition`.
"""

from collections.abc import MutableSequence, Sequence

from more_itertools import pairwise

from .common.ordering import T


def is_sorted(sequence: Sequence[T]) -> bool:
    """Check that no element is smaller than its predecessor.

    >>> is_sorted([1, 2, 2, 5])
    True
    >>> is_sorted([2, 1])
    False
    """
    return not any(b < a for a, b in pairwise(sequence))


test = is_sorted


def bubble(sequence: MutableSequence[T]) -> None:
    """Bubble sort.

    Swaps adjacent out-of-order elements, pass after pass. Each pass stops at the
    position of the last swap of the previous one, since everything after it is
    already in place. Stable.

    >>> data = [1, 6, 3, -44, 11, 2]
    >>> bubble(data)
    >>> data
    [-44, 1, 2, 3, 6, 11]
    """
    n = len(sequence)
    while n > 1:
        last_swap = 0
        for i in range(1, n):
            if sequence[i] < sequence[i - 1]:
                sequence[i - 1], sequence[i] = sequence[i], sequence[i - 1]
                last_swap = i
        n = last_swap


def quick_partition(sequence: MutableSequence[T], start: int = 0, end: int | None = None) -> int:
    """Partition ``sequence[start:end]`` around its last element.

    Smaller elements end up before the pivot and greater ones after it. The pivot
    takes part in the swaps, so its current position is tracked as it moves.
    Returns the final absolute position of the pivot.

    This function is used in :func:`quick`.
    """
    if end is None:
        end = len(sequence)
    if not 0 <= start < end <= len(sequence):
        raise ValueError(f"Cannot partition range [{start}, {end}) of a sequence of length {len(sequence)}")

    lo = start
    hi = end - 1
    pivot = end - 1

    equal = False
    while True:
        # step over a pair of equal elements instead of swapping them
        if equal:
            lo += 1
            equal = False

        while sequence[lo] < sequence[pivot]:
            lo += 1

        while hi > start and sequence[pivot] < sequence[hi]:
            hi -= 1

        if lo >= hi:
            break
        elif sequence[lo] == sequence[hi]:
            equal = True
        else:
            if lo == pivot:
                pivot = hi
            elif hi == pivot:
                pivot = lo
            sequence[lo], sequence[hi] = sequence[hi], sequence[lo]

    sequence[lo], sequence[pivot] = sequence[pivot], sequence[lo]
    return lo


def quick(sequence: MutableSequence[T]) -> None:
    """Quick sort.

    Partitions with :func:`quick_partition`, then sorts both sides of the pivot.
    Pending ranges live on an explicit stack, so already sorted input does not
    exhaust the recursion limit. Not stable.

    >>> data = [5, 1, -5, 3, 9, 2, 19]
    >>> quick(data)
    >>> data
    [-5, 1, 2, 3, 5, 9, 19]
    """
    pending = [(0, len(sequence))]
    while pending:
        start, end = pending.pop()
        if end - start > 1:
            pos = quick_partition(sequence, start, end)
            pending.append((pos + 1, end))
            pending.append((start, pos))


def _merge_sort(sequence: MutableSequence[T], start: int, end: int) -> None:
    """Sort ``sequence[start:end]`` with a temporary copy of its left half."""
    if end - start <= 1:
        return

    mid = start + (end - start) // 2
    left = [sequence[k] for k in range(start, mid)]
    _merge_sort(left, 0, len(left))
    _merge_sort(sequence, mid, end)

    i = j = 0
    right_len = end - mid
    while i < len(left):
        if j == right_len:
            for k in range(i, len(left)):
                sequence[start + k + j] = left[k]
            break
        if sequence[mid + j] < left[i]:
            sequence[start + i + j] = sequence[mid + j]
            j += 1
        else:
            # ties take the left element first
            sequence[start + i + j] = left[i]
            i += 1


def merge(sequence: MutableSequence[T]) -> None:
    """Top-down merge sort.

    The left half is copied into a temporary list while the right half is sorted
    in place, so the extra space is half of the input. Stable.

    >>> data = [6, 1, 2, 99, -1, 13, 7, 1]
    >>> merge(data)
    >>> data
    [-1, 1, 1, 2, 6, 7, 13, 99]
    """
    _merge_sort(sequence, 0, len(sequence))
