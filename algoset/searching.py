"""Linear and binary search routines over sequences, matrices and counts."""

from __future__ import annotations

import bisect
import math
from collections import Counter
from collections.abc import Hashable, Sequence

__all__ = [
    "find_peak_element",
    "search_range",
    "search_insert",
    "search_rotated",
    "search_matrix",
    "kth_smallest_in_matrix",
    "find_kth_number",
    "nth_ugly_number",
    "single_non_duplicate",
]

_UGLY_UPPER_BOUND = 2_000_000_000


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of the first element strictly greater than its neighbours, or -1."""
    last = len(nums) - 1
    for index, value in enumerate(nums):
        rises = index == 0 or value > nums[index - 1]
        falls = index == last or value > nums[index + 1]
        if rises and falls:
            return index
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``, or ``(-1, -1)``."""
    first = bisect.bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect.bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a (possibly rotated) sorted sequence."""
    return target in nums


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs anywhere in ``matrix``."""
    return any(target in row for row in matrix)


def kth_smallest_in_matrix(matrix: Sequence[Sequence[int]], k: int) -> int:
    """The ``k``-th smallest value (1-based) among all cells of ``matrix``."""
    values = sorted(value for row in matrix for value in row)
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} is outside 1..{len(values)}")
    return values[k - 1]


def find_kth_number(m: int, n: int, k: int) -> int:
    """The ``k``-th smallest entry of the ``m`` by ``n`` multiplication table."""
    low, high = 1, m * n
    while low < high:
        mid = (low + high) // 2
        at_most_mid = sum(min(mid // row, n) for row in range(1, m + 1))
        if at_most_mid < k:
            low = mid + 1
        else:
            high = mid
    return low


def _count_divisible(limit: int, a: int, b: int, c: int) -> int:
    ab = math.lcm(a, b)
    ac = math.lcm(a, c)
    bc = math.lcm(b, c)
    abc = math.lcm(a, bc)
    return (
        limit // a
        + limit // b
        + limit // c
        - limit // ab
        - limit // bc
        - limit // ac
        + limit // abc
    )


def nth_ugly_number(n: int, a: int, b: int, c: int) -> int:
    """The ``n``-th positive integer divisible by ``a``, ``b`` or ``c``."""
    low, high = 1, _UGLY_UPPER_BOUND
    while low <= high:
        mid = (low + high) // 2
        if _count_divisible(mid, a, b, c) < n:
            low = mid + 1
        else:
            high = mid - 1
    return low


def single_non_duplicate(nums: Sequence[Hashable]):
    """The first value that occurs exactly once, or -1 when there is none."""
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count == 1), -1)