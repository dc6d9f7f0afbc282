# algoset

A small library of well-known algorithm solutions. It is made of plain Python
functions and two small data structures, and it has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algoset.sliding_window`

- `subarrays_with_at_most_k_distinct(nums, k)` counts contiguous subarrays
  that hold at most `k` distinct values. It returns 0 for a negative `k`.
- `subarrays_with_k_distinct(nums, k)` counts contiguous subarrays that hold
  exactly `k` distinct values.
- `longest_ones(nums, k)` gives the longest run of ones when up to `k` zeros
  may be flipped. It raises `ValueError` for a negative `k`.
- `character_replacement(s, k)` gives the longest substring that can be made
  uniform by replacing at most `k` characters.
- `find_anagrams(s, p)` lists the start indices of the substrings of `s` that
  are anagrams of `p`.
- `length_of_longest_substring(s)` gives the length of the longest substring
  with no repeated character.
- `check_inclusion(s1, s2)` tells whether some permutation of `s1` occurs in
  `s2`.
- `num_subarrays_with_sum(nums, goal)` counts contiguous subarrays that sum to
  `goal`.

### `algoset.searching`

- `find_peak_element(nums)` returns the index of the first element that is
  strictly greater than its neighbours, or -1 when there is none.
- `search_range(nums, target)` returns the first and last index of `target`
  in sorted `nums` as a tuple, or `(-1, -1)` when it is absent.
- `search_insert(nums, target)` returns the index of `target`, or the index
  where it would be inserted.
- `search_rotated(nums, target)` and `search_matrix(matrix, target)` test
  whether `target` occurs.
- `kth_smallest_in_matrix(matrix, k)` returns the `k`-th smallest cell value,
  counting from 1. It raises `IndexError` when `k` is out of range.
- `find_kth_number(m, n, k)` returns the `k`-th smallest entry of an `m` by
  `n` multiplication table.
- `nth_ugly_number(n, a, b, c)` returns the `n`-th positive integer divisible
  by `a`, `b` or `c`. The search is bounded above by 2,000,000,000.
- `single_non_duplicate(nums)` returns the first value that occurs exactly
  once, or -1 when there is none.

### `algoset.structures`

- `MinStack` has `push`, `pop`, `top` and `get_min`. `get_min` runs in
  constant time.
- `TwoStackQueue` is a FIFO queue built from two lists. It has `push`, `pop`,
  `peek` and `is_empty`.

Both classes support `len()`. Both raise `IndexError` when an element is asked
of an empty container.

### `algoset.backtracking`

- `combination_sum3(k, n)` returns every set of `k` distinct digits from 1 to
  9 that adds up to `n`.
- `generate_parenthesis(n)` returns every balanced string of `n` bracket
  pairs.
- `combination_sum(candidates, target)` returns combinations of the
  candidates that add up to `target`. A candidate may be used more than once.
  It raises `ValueError` if any candidate is not positive.
- `permute_unique(nums)` returns every distinct ordering of `nums` in
  lexicographic order.
- `next_permutation(nums)` rearranges a list in place into its next
  permutation. The last permutation wraps around to the first.
- `get_permutation(n, k)` returns the `k`-th permutation of the digits `1..n`
  as a string. `k` counts from 1 and wraps around.

### `algoset.strings`

- `is_valid_parentheses(s)` checks that the brackets in `s` match and nest
  properly.
- `max_depth(s)` returns the deepest nesting of round brackets.
- `is_anagram(s, t)` tells whether `t` is a rearrangement of `s`.
- `frequency_sort(s)` groups the characters of `s`, most frequent first.
- `word_break(s, word_dict)` tells whether `s` can be split into words from
  `word_dict`.

### `algoset.arrays`

- `maximum_gap(nums)` returns the largest gap between neighbours in sorted
  order.
- `rotate(nums, k)` rotates a list to the right by `k` places, in place.
- `majority_elements(nums)` returns the values that occur more than
  `len(nums) // 3` times.
- `find_duplicate(nums)` returns the first repeated value, or -1 when there is
  none.
- `find_duplicates(nums)` returns the values that occur exactly twice.
- `max_chunks_to_sorted(arr)` returns how many chunks a permutation of `0..n-1`
  can be split into, such that sorting each chunk sorts the whole.
- `is_power_of_two(n)` tells whether `n` is a positive power of two.
- `my_pow(x, n)` raises `x` to an integer power. On overflow it gives
  infinity instead of raising.
- `predict_the_winner(nums)` tells whether the first player, taking numbers
  from either end, can at least tie. It raises `ValueError` for an empty
  input.

## Examples

```python
from algoset.sliding_window import length_of_longest_substring
from algoset.searching import search_range
from algoset.backtracking import generate_parenthesis
from algoset.strings import word_break
from algoset.structures import MinStack

length_of_longest_substring("abcabcbb")       # 3
search_range([5, 7, 7, 8, 8, 10], 8)          # (3, 4)
generate_parenthesis(2)                       # ['(())', '()()']
word_break("leetcode", ["leet", "code"])      # True

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()                               # -3
stack.pop()                                   # -3
stack.top()                                   # 0
stack.get_min()                               # -2
```

`rotate` and `next_permutation` change the list you pass them in place and
return `None`.

## What it does not provide

algoset is a library only. It has no command-line tool and no input or output
handling, so you call its functions from your own code.