"""Searching algorithms over read-only sequences.

All functions return the 0-based index of a matching element, or ``None`` when
the value is absent. ``binary``, ``binary_first``, ``jump_step`` and ``jump``
expect the sequence sorted in ascending order; on unsorted input they return an
unspecified result.
"""

import math
from collections.abc import Sequence
from typing import Any

from .common.ordering import T


def _linear_range(sequence: Sequence[Any], value: Any, start: int, end: int) -> int | None:
    """Linear search restricted to ``sequence[start:end]``, returning an absolute index."""
    for i in range(start, end):
        if sequence[i] == value:
            return i
    return None


def linear(sequence: Sequence[Any], value: Any) -> int | None:
    """Return the position of the first element equal to ``value``.

    Only equality is needed, so the elements do not have to be ordered.

    >>> linear([1, 85, 23, -4, 8], 23)
    2
    >>> linear([1, 85, 23, -4, 8], -77) is None
    True
    """
    return _linear_range(sequence, value, 0, len(sequence))


def binary(sequence: Sequence[T], value: T) -> int | None:
    """Binary search in an ascending sequence.

    Compares ``value`` with the middle of the current range and continues on the
    left or right part. The returned position belongs to the first matching
    element met, which is not necessarily the first one in the sequence; use
    :func:`binary_first` for that.

    >>> binary([1, 2, 4, 8, 16, 32], 8)
    3
    >>> binary([1, 1, 2, 3], 1)
    1
    """
    start, end = 0, len(sequence)
    while start < end:
        mid = start + (end - start) // 2
        current = sequence[mid]
        if value == current:
            return mid
        if value < current:
            if mid == start:
                return None
            end = mid
        else:
            if mid == end - 1:
                return None
            start = mid + 1
    return None


def binary_first(sequence: Sequence[T], value: T) -> int | None:
    """Binary search returning the very first position of ``value``.

    >>> binary_first([1, 1, 2, 3], 1)
    0
    """
    pos = binary(sequence, value)
    if pos is None:
        return None
    for i in range(pos - 1, -1, -1):
        if sequence[i] < value:
            return i + 1
    return 0


def jump_step(sequence: Sequence[T], value: T, step: int) -> int | None:
    """Jump search with a custom ``step``.

    Jumps over the sequence by ``step`` until it passes ``value``, then scans the
    block between the last two jump points. A step of 1 is a linear search and a
    step of 0 only looks at the first element.
    """
    if step < 0:
        raise ValueError(f"Jump step must be non-negative, got {step}")
    if not sequence:
        return None
    if step == 1:
        return linear(sequence, value)
    if step == 0:
        return 0 if sequence[0] == value else None

    block_start: int | None = None
    block_end = len(sequence)
    for index in range(0, len(sequence) // step * step, step):
        current = sequence[index]
        if value == current:
            return index
        if value < current:
            if block_start is None:
                # smaller than every element
                return None
            block_end = index
            break
        block_start = index

    # the block start itself was already compared
    scan_from = 0 if block_start is None else block_start + 1
    return _linear_range(sequence, value, scan_from, block_end)


def jump(sequence: Sequence[T], value: T) -> int | None:
    """Jump search with the optimal step, the square root of the length.

    >>> jump([1, 5, 7, 15, 31, 32, 45], 15)
    3
    """
    return jump_step(sequence, value, math.isqrt(len(sequence)))
