"""Share data model: decoded points, encoded triples, and threshold settings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ssr.errors import InvalidThreshold
from ssr.numerals import decode


@dataclass(frozen=True)
class Share:
    """A single point (x, y) on the secret polynomial."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class EncodedShare:
    """A share as it arrives from the loader: y still written in ``radix``.

    Attributes:
        index: Share index, used as the x coordinate.
        radix: Base the digits are written in (2-16).
        digits: Most-significant-first digit string.
    """

    index: int
    radix: int
    digits: str

    def decode(self) -> Share:
        return Share(x=self.index, y=decode(self.digits, self.radix))


@dataclass(frozen=True)
class ThresholdConfig:
    """Reconstruction parameters: n shares, any k of them determine the secret."""

    n: int
    k: int

    def __post_init__(self) -> None:
        if not 1 <= self.k <= self.n:
            raise InvalidThreshold(f"Need 1 <= k <= n, got k={self.k}, n={self.n}")

    @property
    def degree(self) -> int:
        """Degree of the secret polynomial."""
        return self.k - 1


def decode_shares(encoded: Iterable[EncodedShare]) -> list[Share]:
    """Decode every encoded share, in order. Fails on the first bad digit."""
    return [e.decode() for e in encoded]


def evaluate_polynomial(coeffs: Sequence[int], x: int) -> int:
    """Evaluate sum(coeffs[i] * x**i) over the integers (Horner)."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def shares_from_polynomial(coeffs: Sequence[int], xs: Iterable[int]) -> list[Share]:
    """Genuine shares of the polynomial with the given coefficients.

    ``coeffs[0]`` is the secret.
    """
    return [Share(x=x, y=evaluate_polynomial(coeffs, x)) for x in xs]
