"""A few classic searching and sorting algorithms.

Supported algorithms:
- search: ``linear``, ``binary``, ``binary_first``, ``jump_step`` and ``jump``
- sort: ``bubble``, ``quick`` and ``merge``, plus the ``is_sorted`` check

>>> from search_sort import search, sort
>>> data = [5, 1, 91, -45, 11, 5]
>>> sort.quick(data)
>>> data
[-45, 1, 5, 5, 11, 91]
>>> search.binary_first(data, 5)
2
>>> search.binary_first(data, 42) is None
True
"""

from . import search, sort

__all__ = ["search", "sort"]
