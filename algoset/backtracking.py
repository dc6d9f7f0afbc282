"""Enumeration of combinations, bracket strings and permutations."""

from __future__ import annotations

import itertools
import math
from collections import Counter
from collections.abc import Iterator, Sequence

__all__ = [
    "combination_sum3",
    "generate_parenthesis",
    "combination_sum",
    "permute_unique",
    "next_permutation",
    "get_permutation",
]


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1..9 adding up to ``n``, in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in itertools.combinations(range(1, 10), k) if sum(combo) == n]


def generate_parenthesis(n: int) -> list[str]:
    """Every balanced string of ``n`` bracket pairs, with '(' ordered before ')'."""

    def extend(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened == n and closed == n:
            yield prefix
            return
        if opened < n:
            yield from extend(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from extend(prefix + ")", opened, closed + 1)

    return list(extend("", 0, 0))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of ``candidates`` (each reusable) that add up to ``target``.

    Combinations keep the order of ``candidates``; candidates must be positive.
    """
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")

    def extend(start: int, chosen: tuple[int, ...], remaining: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0:
            return
        for index, value in enumerate(pool[start:], start):
            yield from extend(index, chosen + (value,), remaining - value)

    return list(extend(0, (), target))


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct ordering of ``nums``, in lexicographic order."""
    remaining = Counter(nums)
    values = sorted(remaining)
    size = len(nums)

    def extend(prefix: tuple[int, ...]) -> Iterator[list[int]]:
        if len(prefix) == size:
            yield list(prefix)
            return
        for value in values:
            if remaining[value]:
                remaining[value] -= 1
                yield from extend(prefix + (value,))
                remaining[value] += 1

    return list(extend(()))


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending) one.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = reversed(nums[pivot + 1 :])


def get_permutation(n: int, k: int) -> str:
    """The ``k``-th (1-based, wrapping) permutation of the symbols for 1..n."""
    if n <= 0:
        return ""
    symbols = [chr(ord("0") + value) for value in range(1, n + 1)]
    index = max(k - 1, 0) % math.factorial(n)
    result = []
    for position in range(n - 1, -1, -1):
        choice, index = divmod(index, math.factorial(position))
        result.append(symbols.pop(choice))
    return "".join(result)