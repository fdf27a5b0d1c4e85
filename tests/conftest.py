"""Shared test fixtures for the SSR test suite."""

from __future__ import annotations

import pytest

from ssr.shares import Share, shares_from_polynomial

# Every product of two nonzero differences of x values in 1..6 divides this,
# so degree-2 interpolation over multiples of it never leaves a remainder.
SCALE = 14400


@pytest.fixture
def scenario_a() -> list[Share]:
    """Points of f(x) = x^2 + 3 at x = 1, 2, 3, 6.

    Dividing each Lagrange term separately (rounding toward zero) gives
    3 for subset {1, 2, 3} and 2 for the other three subsets.
    """
    return [Share(1, 4), Share(2, 7), Share(3, 12), Share(6, 39)]


@pytest.fixture
def scenario_b() -> list[Share]:
    """Scenario A with the share at x=3 corrupted (12 -> 13)."""
    return [Share(1, 4), Share(2, 7), Share(3, 13), Share(6, 39)]


@pytest.fixture
def scenario_a_document() -> dict:
    """Share document encoding scenario A in mixed bases."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def scale() -> int:
    return SCALE


@pytest.fixture
def scaled_shares() -> list[Share]:
    """Six genuine shares of f(x) = SCALE * (7 + 3x + 2x^2); secret 7 * SCALE."""
    return shares_from_polynomial([7 * SCALE, 3 * SCALE, 2 * SCALE], range(1, 7))
