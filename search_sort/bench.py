"""Timing harness for the sorts."""

import statistics
import time
from typing import Literal

import numpy as np
from pydantic import BaseModel, Field, field_validator
from tqdm.auto import tqdm

from .common.logging import get_logger
from .common.pydantic import BenchResult
from .registry import SORTS, get_sort
from .sort import is_sorted

logger = get_logger(__name__)

Distribution = Literal["random", "sorted", "reversed", "few_unique"]


class BenchConfig(BaseModel):
    """Benchmark settings."""

    sizes: list[int] = Field(default_factory=lambda: [100, 1000], description="Input lengths to time.")
    repeats: int = Field(default=3, ge=1, description="Timed runs per algorithm and size.")
    seed: int = Field(default=0, description="Seed of the input generator.")
    distribution: Distribution = Field(default="random", description="Shape of the generated inputs.")
    algorithms: list[str] = Field(default_factory=lambda: list(SORTS), description="Sorts to time.")

    @field_validator("sizes")
    @classmethod
    def _check_sizes(cls, sizes: list[int]) -> list[int]:
        if any(size < 0 for size in sizes):
            raise ValueError("Input sizes must be non-negative")
        return sizes

    @field_validator("algorithms")
    @classmethod
    def _check_algorithms(cls, algorithms: list[str]) -> list[str]:
        unknown = [name for name in algorithms if name not in SORTS]
        if unknown:
            raise ValueError(f"Unknown sorts {unknown}, expected some of {sorted(SORTS)}")
        return algorithms


def generate_input(size: int, distribution: Distribution, rng: np.random.Generator) -> list[int]:
    """Generate a list of integers of the given shape."""
    if distribution == "few_unique":
        values = rng.integers(0, 8, size=size)
    else:
        values = rng.integers(-size * 10 - 1, size * 10 + 1, size=size)
    if distribution == "sorted":
        values = np.sort(values)
    elif distribution == "reversed":
        values = np.sort(values)[::-1]
    return values.tolist()


def run_bench(config: BenchConfig, progress: bool = False) -> list[BenchResult]:
    """Time every configured sort on every configured size.

    Each run sorts a fresh copy of the same input. The output is checked against
    ``sorted`` so a broken sort fails loudly instead of being timed.
    """
    rng = np.random.default_rng(config.seed)
    inputs = {size: generate_input(size, config.distribution, rng) for size in config.sizes}
    jobs = [(name, size) for size in config.sizes for name in config.algorithms]

    logger.info("Starting benchmark", sizes=config.sizes, algorithms=config.algorithms, repeats=config.repeats)
    results = []
    for name, size in tqdm(jobs, desc="Benchmarking", disable=not progress):
        sort_fn = get_sort(name)
        data = inputs[size]
        expected = sorted(data)
        timings = []
        for _ in range(config.repeats):
            work = list(data)
            started = time.perf_counter()
            sort_fn(work)
            timings.append(time.perf_counter() - started)
            if not is_sorted(work) or work != expected:
                raise RuntimeError(f"{name} sort produced an incorrect result for size {size}")

        result = BenchResult(
            algorithm=name,
            size=size,
            distribution=config.distribution,
            best_seconds=min(timings),
            mean_seconds=statistics.fmean(timings),
        )
        logger.debug("Measured sort", algorithm=name, size=size, best_seconds=result.best_seconds)
        results.append(result)

    logger.info("Benchmark completed", measurements=len(results))
    return results
