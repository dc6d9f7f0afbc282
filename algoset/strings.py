"""String checks: brackets, anagrams, character frequency and segmentation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import lru_cache
from itertools import accumulate

__all__ = [
    "is_valid_parentheses",
    "max_depth",
    "is_anagram",
    "frequency_sort",
    "word_break",
]

_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSER_TO_OPENER.values())


def is_valid_parentheses(s: str) -> bool:
    """Whether the brackets in ``s`` are properly matched and nested.

    Any character that is not an opening bracket closes the innermost open one;
    a closing bracket must match it.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        if _CLOSER_TO_OPENER.get(char, stack[-1]) != stack[-1]:
            return False
        stack.pop()
    return not stack


def max_depth(s: str) -> int:
    """The deepest nesting of round brackets in ``s``."""
    steps = (1 if char == "(" else -1 if char == ")" else 0 for char in s)
    return max(accumulate(steps), default=0) if s else 0 if not s else 0


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def frequency_sort(s: str) -> str:
    """``s`` with its characters grouped, most frequent first."""
    return "".join(char * count for char, count in Counter(s).most_common())


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` can be split into a sequence of words from ``word_dict``."""
    words = frozenset(word_dict)
    length = len(s)

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == length:
            return True
        return any(
            s[start:end] in words and breakable(end) for end in range(start + 1, length + 1)
        )

    return breakable(0)