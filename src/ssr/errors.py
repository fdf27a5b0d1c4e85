"""Error kinds raised while decoding shares and resolving the secret.

All of them are ``ValueError`` subclasses; none is recoverable within the run
that raised it.
"""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for every failure of a reconstruction run."""


class InvalidDigit(ReconstructionError):
    """A character is not a digit of the declared radix."""

    def __init__(self, char: str, radix: int) -> None:
        self.char = char
        self.radix = radix
        if char:
            msg = f"Invalid digit {char!r} for base {radix}"
        else:
            msg = f"Empty digit string for base {radix}"
        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.char, self.radix)


class InvalidRadix(ReconstructionError):
    """Radix outside [2, 16]."""


class InvalidThreshold(ReconstructionError):
    """Threshold k outside its allowed range."""


class DegenerateSubset(ReconstructionError):
    """Two shares of an evaluated subset have the same x value."""

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate evaluation point x={x} in subset")

    def __reduce__(self):
        return type(self), (self.x,)


class InsufficientShares(ReconstructionError):
    """Fewer shares than the threshold requires."""


class AmbiguousConsensus(ReconstructionError):
    """Two or more candidate secrets tie for the highest vote count."""

    def __init__(self, candidates: list, count: int) -> None:
        self.candidates = list(candidates)
        self.count = count
        super().__init__(
            f"{len(self.candidates)} candidate secrets tie with {count} votes each"
        )

    def __reduce__(self):
        return type(self), (self.candidates, self.count)


class ShareFileError(ReconstructionError):
    """A share document does not match the expected schema."""
