"""Pytest configuration and fixtures for the test suite."""

import numpy as np
import pytest

from search_sort.common.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    """Route structured logs through the standard library logger."""
    configure_logging("WARNING", "console")


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_lists(rng: np.random.Generator) -> list[list[int]]:
    """Provide integer lists of varied lengths, including heavy duplicates."""
    lists: list[list[int]] = [[], [0], [1, 1], [2, 1]]
    for size in (3, 5, 8, 13, 50, 200):
        lists.append(rng.integers(-100, 100, size=size).tolist())
        lists.append(rng.integers(0, 3, size=size).tolist())
    return lists
