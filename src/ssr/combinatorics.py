"""k-subset enumeration over an ordered share list."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from typing import TypeVar

from scipy.special import comb

from ssr.errors import InvalidThreshold

T = TypeVar("T")


def subset_count(n: int, k: int) -> int:
    """Exact binomial coefficient C(n, k)."""
    return int(comb(n, k, exact=True))


def iter_combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Lazily yield every size-k subset of ``items``.

    Subsets come out lexicographically by index position and keep the input
    order of their members. The threshold is checked before anything is
    yielded.
    """
    n = len(items)
    if not 0 <= k <= n:
        raise InvalidThreshold(f"Need 0 <= k <= n, got k={k}, n={n}")
    return itertools.combinations(items, k)


def combinations(items: Sequence[T], k: int) -> list[tuple[T, ...]]:
    """All C(n, k) size-k subsets of ``items`` in lexicographic index order."""
    return list(iter_combinations(items, k))
