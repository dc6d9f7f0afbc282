"""Two-pointer and sliding-window algorithms over sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence

__all__ = [
    "subarrays_with_at_most_k_distinct",
    "subarrays_with_k_distinct",
    "longest_ones",
    "character_replacement",
    "find_anagrams",
    "length_of_longest_substring",
    "check_inclusion",
    "num_subarrays_with_sum",
]


def subarrays_with_at_most_k_distinct(nums: Sequence[Hashable], k: int) -> int:
    """Count contiguous subarrays holding at most ``k`` distinct values."""
    if k < 0:
        return 0
    counts: Counter = Counter()
    budget = k
    left = 0
    total = 0
    for right, value in enumerate(nums):
        if counts[value] == 0:
            budget -= 1
        counts[value] += 1
        while budget < 0:
            leaving = nums[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                budget += 1
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[Hashable], k: int) -> int:
    """Count contiguous subarrays holding exactly ``k`` distinct values."""
    return subarrays_with_at_most_k_distinct(nums, k) - subarrays_with_at_most_k_distinct(
        nums, k - 1
    )


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Length of the longest run of ones when up to ``k`` zeros may be flipped."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest substring made uniform by replacing at most ``k`` characters."""
    counts: Counter = Counter()
    left = 0
    most_frequent = 0
    best = 0
    for right, char in enumerate(s):
        counts[char] += 1
        most_frequent = max(most_frequent, counts[char])
        if (right - left + 1) - most_frequent > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    width = len(p)
    if width > len(s):
        return []
    target = Counter(p)
    window = Counter(s[:width])
    found = [0] if window == target else []
    for start, (incoming, outgoing) in enumerate(zip(s[width:], s), start=1):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == target:
            found.append(start)
    return found


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` occurs as a substring of ``s2``."""
    width = len(s1)
    if width > len(s2):
        return False
    target = Counter(s1)
    window = Counter(s2[:width])
    if window == target:
        return True
    for incoming, outgoing in zip(s2[width:], s2):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == target:
            return True
    return False


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Count contiguous subarrays whose elements add up to ``goal``."""
    prefix_counts: Counter = Counter({0: 1})
    running = 0
    total = 0
    for value in nums:
        running += value
        total += prefix_counts.get(running - goal, 0)
        prefix_counts[running] += 1
    return total