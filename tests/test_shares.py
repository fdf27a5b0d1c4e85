"""Tests for ssr.shares module."""

from __future__ import annotations

import dataclasses

import pytest

from ssr.errors import InvalidDigit, InvalidThreshold
from ssr.shares import (
    EncodedShare,
    Share,
    ThresholdConfig,
    decode_shares,
    evaluate_polynomial,
    shares_from_polynomial,
)


class TestShare:
    def test_value_equality(self):
        assert Share(1, 4) == Share(1, 4)
        assert Share(1, 4) != Share(1, 5)

    def test_hash_by_value(self):
        assert len({Share(1, 4), Share(1, 4), Share(2, 7)}) == 2

    def test_frozen(self):
        share = Share(1, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            share.y = 5  # type: ignore[misc]

    def test_str(self):
        assert str(Share(3, 12)) == "(3, 12)"


class TestEncodedShare:
    def test_decode(self):
        assert EncodedShare(index=6, radix=4, digits="213").decode() == Share(6, 39)

    def test_decode_shares_keeps_order(self):
        encoded = [EncodedShare(2, 2, "111"), EncodedShare(1, 10, "4")]
        assert decode_shares(encoded) == [Share(2, 7), Share(1, 4)]

    def test_bad_digit(self):
        with pytest.raises(InvalidDigit):
            EncodedShare(1, 2, "102").decode()


class TestThresholdConfig:
    def test_valid(self):
        config = ThresholdConfig(n=4, k=3)
        assert config.degree == 2

    def test_k_equals_n(self):
        assert ThresholdConfig(n=3, k=3).degree == 2

    @pytest.mark.parametrize("n, k", [(3, 0), (3, 4), (0, 0), (2, -1)])
    def test_invalid(self, n: int, k: int):
        with pytest.raises(InvalidThreshold, match="1 <= k <= n"):
            ThresholdConfig(n=n, k=k)


class TestPolynomial:
    def test_evaluate(self):
        assert evaluate_polynomial([3, 0, 1], 6) == 39
        assert evaluate_polynomial([3, 0, 1], 0) == 3
        assert evaluate_polynomial([], 5) == 0

    def test_shares_from_polynomial(self):
        shares = shares_from_polynomial([3, 0, 1], [1, 2, 3, 6])
        assert shares == [Share(1, 4), Share(2, 7), Share(3, 12), Share(6, 39)]
