"""In-place array operations: maximum, merging and element removal."""

from __future__ import annotations

from itertools import groupby
from typing import MutableSequence, Sequence


def find_max(values: Sequence[int]) -> int:
    """Return the largest value, or 0 for an empty sequence."""
    if not values:
        return 0
    return max(values)


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Copy the first ``n`` items of ``nums2`` into ``nums1`` after position ``m``
    and sort ``nums1`` in place."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if n > len(nums2):
        raise ValueError("nums2 holds fewer than n items")
    if m + n > len(nums1):
        raise ValueError("nums1 has no room for m + n items")
    nums1[m : m + n] = nums2[:n]
    nums1[:] = sorted(nums1)


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values to the front of ``nums``; return their count."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)