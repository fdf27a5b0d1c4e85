"""How many corrupted shares a majority vote over k-subsets can absorb.

With n shares of which c are corrupted, C(n - c, k) of the C(n, k) subsets
are drawn only from genuine shares and vote for the true secret. The rest
may vote for anything.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import hypergeom

from ssr.combinatorics import subset_count


def _check(n: int, k: int, corrupted: int) -> None:
    if not 1 <= k <= n:
        raise ValueError(f"Need 1 <= k <= n, got k={k}, n={n}")
    if not 0 <= corrupted <= n:
        raise ValueError(f"corrupted must be in [0, n], got {corrupted}")


def genuine_subset_count(n: int, k: int, corrupted: int) -> int:
    """Number of k-subsets containing no corrupted share."""
    _check(n, k, corrupted)
    return subset_count(n - corrupted, k)


def contaminated_subset_count(n: int, k: int, corrupted: int) -> int:
    """Number of k-subsets containing at least one corrupted share."""
    return subset_count(n, k) - genuine_subset_count(n, k, corrupted)


def genuine_subset_probability(n: int, k: int, corrupted: int) -> float:
    """P[a uniformly random k-subset is all-genuine] (hypergeometric)."""
    _check(n, k, corrupted)
    return float(hypergeom.pmf(k, n, n - corrupted, k))


def corruption_profile(n: int, k: int) -> np.ndarray:
    """All-genuine subset probability for every corrupted count c = 0..n."""
    return np.array([genuine_subset_probability(n, k, c) for c in range(n + 1)])


def majority_guaranteed(n: int, k: int, corrupted: int) -> bool:
    """Whether genuine subsets strictly outnumber contaminated ones.

    When this holds the true secret wins the vote even if every
    contaminated subset agreed on the same wrong value.
    """
    genuine = genuine_subset_count(n, k, corrupted)
    return genuine > contaminated_subset_count(n, k, corrupted)


def max_tolerable_corruption(n: int, k: int) -> int:
    """Largest corrupted count with a guaranteed majority.

    Zero always qualifies. The genuine count only shrinks as c grows, so the
    scan stops at the first failure.
    """
    best = 0
    for c in range(1, n + 1):
        if not majority_guaranteed(n, k, c):
            break
        best = c
    return best
