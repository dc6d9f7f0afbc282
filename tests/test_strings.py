from collections import Counter
from itertools import groupby

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoset.strings import (
    frequency_sort,
    is_anagram,
    is_valid_parentheses,
    max_depth,
    word_break,
)

VALID = ["()", "()[]{}", "{[]}", "", "([]{})"]
INVALID = ["(]", "([)]", "(", ")", "]["]


@pytest.mark.parametrize("text", VALID)
def test_valid_parentheses(text):
    assert is_valid_parentheses(text)
    assert is_valid_parentheses("(" + text + ")")
    assert is_valid_parentheses(text + "[]")


@pytest.mark.parametrize("text", INVALID)
def test_invalid_parentheses(text):
    assert not is_valid_parentheses(text)


@pytest.mark.parametrize("text", VALID)
def test_unmatched_closer_is_invalid(text):
    assert not is_valid_parentheses(text + ")")


def test_max_depth_example():
    assert max_depth("(1+(2*3)+((8)/4))+1") == 3


@given(st.integers(0, 30), st.integers(0, 30))
def test_max_depth_nested(n, m):
    text = "(" * n + ")" * n + "(" * m + ")" * m
    assert max_depth(text) == max(n, m)


def test_max_depth_without_brackets():
    assert max_depth("abc") == max_depth("")
    assert not max_depth("")


def test_is_anagram_examples():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")


@given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=30))
def test_is_anagram_properties(s):
    assert is_anagram(s, "".join(sorted(s)))
    assert is_anagram(s, s[::-1])
    assert not is_anagram(s, s + "z")
    assert not is_anagram(s + "a", s + "b")


def test_frequency_sort_example():
    assert frequency_sort("tree") in {"eert", "eetr"}


@given(st.text(max_size=40))
def test_frequency_sort_properties(s):
    result = frequency_sort(s)
    assert Counter(result) == Counter(s)
    runs = [(char, len(list(group))) for char, group in groupby(result)]
    assert len({char for char, _ in runs}) == len(runs)
    lengths = [length for _, length in runs]
    assert lengths == sorted(lengths, reverse=True)


def test_word_break_examples():
    assert word_break("leetcode", ["leet", "code"])
    assert word_break("applepenapple", ["apple", "pen"])
    assert not word_break("catsandog", ["cats", "dog", "sand", "and", "cat"])


@given(st.data())
def test_word_break_joined_words(data):
    words = data.draw(st.lists(st.text(alphabet="ab", min_size=1, max_size=3), min_size=1))
    picks = data.draw(st.lists(st.sampled_from(words), max_size=6))
    s = "".join(picks)
    assert word_break(s, words)
    assert not word_break(s + "c", words)