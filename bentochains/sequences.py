"""Splitting request lists, joining responses and nearest-time key lookup."""

from __future__ import annotations

from bisect import bisect_left
from itertools import chain
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def split_vector(items: Sequence[T], n_split: int) -> list[list[T]]:
    """Split items into roughly equal consecutive parts to keep requests small.

    A sequence no longer than n_split comes back as a single part.
    """
    if n_split <= 0:
        raise ValueError("n_split must be positive")
    if len(items) <= n_split:
        return [list(items)]
    n = len(items) // n_split
    segment = len(items) // (n + 1)
    parts = [list(items[i * segment:(i + 1) * segment]) for i in range(n)]
    parts.append(list(items[n * segment:]))
    return parts


def join_lists(lists: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate the parts of split responses in order."""
    return list(chain.from_iterable(lists))


def next_in_time_range(
    at: int, keys: Iterable[int], time_range: int
) -> tuple[int, bool]:
    """Find the key closest to at and whether it lies within time_range of it.

    Returns (0, False) when there are no keys.
    """
    ordered = sorted(keys)
    if not ordered:
        return 0, False
    index = bisect_left(ordered, at)
    if index == len(ordered):
        last = ordered[-1]
        return last, at - last < time_range
    above = ordered[index]
    if index > 0:
        below = ordered[index - 1]
        if at - below < above - at:
            return below, at - below < time_range
    return above, above - at < time_range