"""Ordering protocol shared by the algorithms."""

from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Protocol for elements that can be compared with ``<`` and ``==``."""

    def __lt__(self, other: Any, /) -> bool:
        """Return whether this element orders before ``other``."""
        ...

    def __eq__(self, other: object, /) -> bool:
        """Return whether this element is equal to ``other``."""
        ...


T = TypeVar("T", bound=SupportsOrdering)
