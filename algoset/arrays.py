"""Array and number puzzles: gaps, rotation, counting and games."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Sequence
from functools import lru_cache
from itertools import accumulate

__all__ = [
    "maximum_gap",
    "rotate",
    "majority_elements",
    "find_duplicate",
    "find_duplicates",
    "max_chunks_to_sorted",
    "is_power_of_two",
    "my_pow",
    "predict_the_winner",
]


def maximum_gap(nums: Sequence[int]) -> int:
    """Largest difference between neighbours in sorted order; 0 for fewer than two."""
    if len(nums) < 2:
        return 0
    ordered = sorted(nums)
    return max(high - low for low, high in zip(ordered, ordered[1:]))


def rotate(nums: list, k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k :] + nums[: len(nums) - k]


def majority_elements(nums: Sequence[Hashable]) -> list:
    """Values occurring more than ``len(nums) // 3`` times, in first-seen order."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def find_duplicate(nums: Sequence[Hashable]):
    """The first value seen more than once, or -1 when all are distinct."""
    return next((value for value, count in Counter(nums).items() if count > 1), -1)


def find_duplicates(nums: Sequence[Hashable]) -> list:
    """Values occurring exactly twice, in first-seen order."""
    return [value for value, count in Counter(nums).items() if count == 2]


def max_chunks_to_sorted(arr: Sequence[int]) -> int:
    """Most chunks a permutation of 0..n-1 splits into so sorting each sorts it all."""
    return sum(1 for index, peak in enumerate(accumulate(arr, max)) if peak == index)


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n``, saturating to infinity on overflow."""
    if n == 0:
        return 1.0
    base = float(x)
    odd = n % 2 == 1
    if base == 0.0 and n < 0:
        return math.copysign(math.inf, base) if odd else math.inf
    try:
        return base**n
    except OverflowError:
        return math.copysign(math.inf, base) if odd else math.inf


def predict_the_winner(nums: Sequence[int]) -> bool:
    """Whether the first player, taking from either end, can at least tie."""
    values = tuple(nums)
    if not values:
        raise ValueError("nums must not be empty")

    @lru_cache(maxsize=None)
    def margin(start: int, end: int) -> int:
        if start == end:
            return values[start]
        return max(
            values[start] - margin(start + 1, end),
            values[end] - margin(start, end - 1),
        )

    return margin(0, len(values) - 1) >= 0