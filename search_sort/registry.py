"""Lookup tables of the available algorithms by name."""

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

from . import search, sort

SortFunction = Callable[[MutableSequence[Any]], None]
SearchFunction = Callable[[Sequence[Any], Any], int | None]

SORTS: dict[str, SortFunction] = {
    "bubble": sort.bubble,
    "quick": sort.quick,
    "merge": sort.merge,
}

SEARCHES: dict[str, SearchFunction] = {
    "linear": search.linear,
    "binary": search.binary,
    "binary_first": search.binary_first,
    "jump": search.jump,
}

# searches that only give a meaningful answer on ascending input
ORDERED_SEARCHES = frozenset({"binary", "binary_first", "jump"})


def get_sort(name: str) -> SortFunction:
    """Return the sort registered under ``name``."""
    try:
        return SORTS[name]
    except KeyError:
        raise KeyError(f"Unknown sort {name!r}, expected one of {sorted(SORTS)}") from None


def get_search(name: str) -> SearchFunction:
    """Return the search registered under ``name``."""
    try:
        return SEARCHES[name]
    except KeyError:
        raise KeyError(f"Unknown search {name!r}, expected one of {sorted(SEARCHES)}") from None
