"""Test suite for the searching algorithms."""

import numpy as np
import pytest

from search_sort.search import binary, binary_first, jump, jump_step, linear


class TestLinear:
    """Test linear search."""

    def test_finds_value(self):
        """Finds a value in unsorted input."""
        assert linear([0, 5, -7, 100, 67, -23], -7) == 2

    def test_missing_value(self):
        """Missing values return None."""
        assert linear([11, -25, 12, 85, -8], 6) is None
        assert linear([1, 85, 23, -4, 8], -77) is None

    def test_first_occurrence(self):
        """Returns the first of several equal elements."""
        assert linear([3, 1, 3, 1], 1) == 1

    def test_empty(self):
        """Empty input returns None."""
        assert linear([], 1) is None

    def test_strings(self):
        """Works on any sequence with equality."""
        assert linear("abcabc", "c") == 2
        assert linear(("x", "y"), "y") == 1

    def test_unordered_elements(self):
        """Elements only need equality, not an order."""
        assert linear([{"a": 1}, {"b": 2}], {"b": 2}) == 1
        assert linear([1j, 2j, 3j], 3j) == 2
        assert linear([1j, 2j], 5j) is None


class TestBinary:
    """Test binary search."""

    def test_fibonacci(self):
        """Finds values in a sorted sequence with duplicates."""
        fib = [1, 1, 2, 3, 5, 8, 13, 21]
        assert binary(fib, 5) == 4
        assert binary(fib, 21) == 7

    def test_missing(self):
        """Values between, below and above the elements are absent."""
        primes = [1, 2, 3, 5, 7, 11, 13, 17]
        assert binary(primes, 8) is None
        assert binary(primes, 0) is None
        assert binary(primes, 18) is None

    def test_any_match_for_duplicates(self):
        """The returned match is not necessarily the first one."""
        assert binary([1, 1, 2, 3], 1) == 1

    def test_empty_and_single(self):
        """Empty and single-element inputs."""
        assert binary([], 3) is None
        assert binary([3], 3) == 0
        assert binary([3], 2) is None
        assert binary([3], 4) is None

    def test_every_element_found(self):
        """Every element of a strictly increasing sequence is found at its position."""
        data = list(range(0, 200, 3))
        for i, v in enumerate(data):
            assert binary(data, v) == i

    def test_unsorted_does_not_raise(self):
        """Unsorted input gives an unspecified answer, not an error."""
        result = binary([9, 1, 8, 2, 7], 2)
        assert result is None or isinstance(result, int)


class TestBinaryFirst:
    """Test first-occurrence binary search."""

    def test_first_of_run(self):
        """Walks back to the first equal element."""
        assert binary_first([1, 1, 2, 3], 1) == 0

    def test_run_in_middle(self):
        """Stops right after the last smaller element."""
        assert binary_first([-45, 1, 5, 5, 11, 91], 5) == 2
        assert binary_first([0, 2, 2, 2, 2, 2, 2, 9], 2) == 1

    def test_missing(self):
        """Missing values return None."""
        assert binary_first([-45, 1, 5, 5, 11, 91], 42) is None
        assert binary_first([], 42) is None

    def test_all_equal(self):
        """A run covering the whole sequence starts at zero."""
        assert binary_first([7] * 10, 7) == 0


class TestJump:
    """Test jump search."""

    def test_example(self):
        """Finds a value inside a block."""
        assert jump([1, 5, 7, 15, 31, 32, 45], 15) == 3

    def test_jump_points_and_ends(self):
        """Finds values on jump points, the first and the last element."""
        data = [1, 5, 7, 15, 31, 32, 45]
        for i, v in enumerate(data):
            assert jump(data, v) == i

    def test_missing(self):
        """Values below, between and above the elements are absent."""
        data = [1, 5, 7, 15, 31, 32, 45]
        assert jump(data, 0) is None
        assert jump(data, 16) is None
        assert jump(data, 46) is None

    def test_short_inputs(self):
        """Short inputs use a step of zero or one."""
        assert jump([], 1) is None
        assert jump([4], 4) == 0
        assert jump([4], 5) is None
        assert jump([4, 6, 8], 8) == 2

    def test_step_zero_checks_first_element(self):
        """A zero step only looks at the first element."""
        assert jump_step([3, 4, 5], 3, 0) == 0
        assert jump_step([3, 4, 5], 4, 0) is None
        assert jump_step([], 4, 0) is None

    def test_step_one_is_linear(self):
        """A unit step is a linear search."""
        assert jump_step([3, 4, 4, 5], 4, 1) == 1

    def test_step_larger_than_length(self):
        """Without any jump point the whole sequence is scanned."""
        data = [2, 4, 6]
        assert jump_step(data, 2, 10) == 0
        assert jump_step(data, 6, 10) == 2
        assert jump_step(data, 5, 10) is None

    def test_last_jump_lands_on_last_index(self):
        """The last jump point may be the last element."""
        data = [10, 20, 30, 40, 50, 60]
        assert jump_step(data, 60, 3) == 5
        assert jump_step(data, 50, 3) == 4
        assert jump_step(data, 60, 2) == 5

    def test_negative_step(self):
        """A negative step is a contract violation."""
        with pytest.raises(ValueError):
            jump_step([1, 2, 3], 2, -1)

    @pytest.mark.parametrize("step", [2, 3, 4, 5, 7, 11, 50])
    def test_agrees_with_linear(self, rng: np.random.Generator, step: int):
        """Presence and absence match linear search for every step."""
        for size in (1, 2, 6, 17, 40):
            data = sorted(rng.integers(0, 30, size=size).tolist())
            for v in range(-1, 32):
                found = jump_step(data, v, step)
                if linear(data, v) is None:
                    assert found is None
                else:
                    assert found is not None and data[found] == v
