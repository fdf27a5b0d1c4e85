"""Lagrange interpolation at x = 0 over the integers.

No modular arithmetic: every intermediate value is an exact Python int (or a
Fraction in exact mode), so share values of hundreds of bits stay exact.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto
from fractions import Fraction

from ssr.errors import DegenerateSubset, InsufficientShares
from ssr.shares import Share

Candidate = int | Fraction


class Division(Enum):
    """How each Lagrange term y_i * num_i / den_i is divided."""

    TRUNCATE = auto()
    EXACT = auto()


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (unlike ``//``, which floors)."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _check_distinct(subset: Sequence[Share]) -> None:
    seen: set[int] = set()
    for share in subset:
        if share.x in seen:
            raise DegenerateSubset(share.x)
        seen.add(share.x)


def secret_at(
    subset: Sequence[Share],
    division: Division = Division.TRUNCATE,
) -> Candidate:
    """Interpolate the polynomial through ``subset`` and evaluate it at 0.

    For points (x_i, y_i) the Lagrange basis polynomial at x=0 is:
        L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)

    and the value at 0 is sum_i y_i * L_i(0). Numerator and denominator of
    each term are built as integer running products; the term is
    (y_i * numerator) / denominator.

    With ``Division.TRUNCATE`` each term is an integer division rounded toward
    zero. That is exact whenever the denominator divides y_i * numerator,
    which holds for points at x = 1..k or for y values divisible by the
    denominators; otherwise it is the conventional truncated result. With ``Division.EXACT`` the terms are summed as
    fractions and a non-integral value is returned as a Fraction.

    Raises:
        InsufficientShares: ``subset`` is empty.
        DegenerateSubset: two shares have the same x.
    """
    if not subset:
        raise InsufficientShares("Need at least one share to interpolate")
    _check_distinct(subset)

    k = len(subset)
    total: Candidate = 0 if division is Division.TRUNCATE else Fraction(0)

    for i in range(k):
        xi, yi = subset[i].x, subset[i].y
        numerator = 1
        denominator = 1
        for j in range(k):
            if i == j:
                continue
            xj = subset[j].x
            numerator *= -xj
            denominator *= xi - xj

        if division is Division.TRUNCATE:
            total += truncating_div(yi * numerator, denominator)
        else:
            total += Fraction(yi * numerator, denominator)

    if isinstance(total, Fraction) and total.denominator == 1:
        return total.numerator
    return total
