"""Tests for ssr.analysis module."""

from __future__ import annotations

import numpy as np
import pytest

from ssr.analysis import (
    contaminated_subset_count,
    corruption_profile,
    genuine_subset_count,
    genuine_subset_probability,
    majority_guaranteed,
    max_tolerable_corruption,
)


class TestSubsetCounts:
    def test_genuine(self):
        assert genuine_subset_count(6, 3, 0) == 20
        assert genuine_subset_count(6, 3, 1) == 10
        assert genuine_subset_count(6, 3, 4) == 0

    def test_contaminated(self):
        assert contaminated_subset_count(6, 3, 1) == 10
        assert contaminated_subset_count(5, 2, 1) == 4

    def test_counts_add_up(self):
        for c in range(8):
            total = genuine_subset_count(7, 3, c) + contaminated_subset_count(7, 3, c)
            assert total == 35

    @pytest.mark.parametrize("n, k, c", [(3, 4, 0), (3, 0, 0), (3, 2, 4), (3, 2, -1)])
    def test_invalid(self, n: int, k: int, c: int):
        with pytest.raises(ValueError):
            genuine_subset_count(n, k, c)


class TestProbability:
    def test_matches_ratio(self):
        assert genuine_subset_probability(6, 3, 1) == pytest.approx(0.5)
        assert genuine_subset_probability(6, 3, 0) == pytest.approx(1.0)

    def test_profile(self):
        profile = corruption_profile(4, 2)
        np.testing.assert_allclose(
            profile, [1.0, 0.5, 1 / 6, 0.0, 0.0], atol=1e-12
        )

    def test_profile_non_increasing(self):
        profile = corruption_profile(10, 4)
        assert len(profile) == 11
        assert np.all(np.diff(profile) <= 1e-12)


class TestMajority:
    def test_guaranteed(self):
        assert majority_guaranteed(5, 2, 1)
        assert majority_guaranteed(6, 3, 0)

    def test_not_guaranteed(self):
        # 10 genuine vs 10 contaminated subsets
        assert not majority_guaranteed(6, 3, 1)

    def test_max_tolerable(self):
        assert max_tolerable_corruption(7, 2) == 1
        assert max_tolerable_corruption(6, 3) == 0
        assert max_tolerable_corruption(3, 3) == 0

    def test_more_shares_tolerate_more(self):
        assert max_tolerable_corruption(12, 2) >= max_tolerable_corruption(7, 2)
