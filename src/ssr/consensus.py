"""Majority vote over all k-subsets to recover the secret and flag bad shares.

Every k-subset of the input is interpolated at 0. Subsets drawn only from
genuine shares agree on the true secret; subsets touching a corrupted share
scatter over other values. The most frequent candidate wins, and any share
that never took part in a subset voting for it is reported as wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import islice

from ssr.combinatorics import iter_combinations, subset_count
from ssr.errors import AmbiguousConsensus, InsufficientShares, InvalidThreshold
from ssr.interpolation import Candidate, Division, secret_at
from ssr.shares import Share

logger = logging.getLogger(__name__)

Subset = tuple[Share, ...]


@dataclass
class CandidateStats:
    """Votes for one candidate secret.

    Attributes:
        count: Number of subsets that interpolated to this candidate.
        shares: Every share appearing in at least one of those subsets.
    """

    count: int = 0
    shares: set[Share] = field(default_factory=set)


class SecretTally:
    """Candidate secret -> CandidateStats, in first-seen order."""

    def __init__(self) -> None:
        self._stats: dict[Candidate, CandidateStats] = {}

    def add(self, candidate: Candidate, subset: Iterable[Share]) -> None:
        stats = self._stats.get(candidate)
        if stats is None:
            stats = self._stats[candidate] = CandidateStats()
        stats.count += 1
        stats.shares.update(subset)

    def __getitem__(self, candidate: Candidate) -> CandidateStats:
        return self._stats[candidate]

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._stats

    def __len__(self) -> int:
        return len(self._stats)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._stats)

    @property
    def total(self) -> int:
        """Number of subsets counted."""
        return sum(s.count for s in self._stats.values())

    def leaders(self) -> list[Candidate]:
        """Candidates with the highest count, in first-seen order."""
        if not self._stats:
            return []
        best = max(s.count for s in self._stats.values())
        return [c for c, s in self._stats.items() if s.count == best]

    def frequencies(self) -> list[tuple[Candidate, int]]:
        """(candidate, count) pairs, most frequent first; ties keep first-seen order."""
        pairs = [(c, s.count) for c, s in self._stats.items()]
        return sorted(pairs, key=lambda p: p[1], reverse=True)


@dataclass
class ResolutionResult:
    """Outcome of one reconstruction run.

    Attributes:
        secret: The majority candidate.
        correct_shares: Shares appearing in a subset that voted for ``secret``.
        wrong_shares: Remaining input shares.
        tally: Full per-candidate vote table.
        ambiguous: True if another candidate tied with ``secret``.
    """

    secret: Candidate
    correct_shares: frozenset[Share]
    wrong_shares: frozenset[Share]
    tally: SecretTally
    ambiguous: bool = False

    @property
    def subsets_evaluated(self) -> int:
        return self.tally.total

    @property
    def votes(self) -> int:
        """Number of subsets that voted for ``secret``."""
        return self.tally[self.secret].count

    @property
    def support(self) -> float:
        """Fraction of all subsets that voted for ``secret``."""
        return self.votes / self.subsets_evaluated

    def frequencies(self) -> list[tuple[Candidate, int]]:
        return self.tally.frequencies()


def _evaluate_chunk(chunk: list[Subset], division: Division) -> list[Candidate]:
    return [secret_at(subset, division) for subset in chunk]


def _chunked(subsets: Iterator[Subset], size: int) -> Iterator[list[Subset]]:
    while chunk := list(islice(subsets, size)):
        yield chunk


class ConsensusResolver:
    """Recovers the secret from a share set that may contain corrupted shares.

    Args:
        threshold: Reconstruction threshold k (polynomial degree k - 1).
        division: Per-term division mode passed to the interpolator.
        workers: Evaluate subsets in this many processes; None or 1 runs
            sequentially. The tally is identical either way.
        strict: Raise AmbiguousConsensus on a tie instead of taking the
            first-seen leader.
        chunk_size: Subsets per work item when ``workers`` > 1.
    """

    def __init__(
        self,
        threshold: int,
        division: Division = Division.TRUNCATE,
        workers: int | None = None,
        strict: bool = False,
        chunk_size: int = 256,
    ) -> None:
        if threshold < 1:
            raise InvalidThreshold(f"Threshold must be >= 1, got {threshold}")
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self.k = threshold
        self.division = division
        self.workers = workers
        self.strict = strict
        self.chunk_size = chunk_size

    def tally(self, shares: Iterable[Share]) -> SecretTally:
        """Interpolate every k-subset of ``shares`` and count the candidates."""
        points = self._prepare(shares)
        return self._tally(points)

    def resolve(self, shares: Iterable[Share]) -> ResolutionResult:
        """Run the vote and split the input into correct and wrong shares.

        Raises:
            InsufficientShares: no shares, or fewer than k distinct ones.
            AmbiguousConsensus: tie for first place and ``strict`` is set.
            DegenerateSubset: two shares of some subset share an x value.
        """
        points = self._prepare(shares)
        tally = self._tally(points)

        leaders = tally.leaders()
        secret = leaders[0]
        ambiguous = len(leaders) > 1
        if ambiguous:
            if self.strict:
                raise AmbiguousConsensus(leaders, tally[secret].count)
            logger.warning(
                "%d candidates tie with %d votes; taking the first seen (%s)",
                len(leaders),
                tally[secret].count,
                secret,
            )

        correct = frozenset(tally[secret].shares)
        wrong = frozenset(points) - correct
        if wrong:
            logger.info("%d share(s) inconsistent with secret %s", len(wrong), secret)

        return ResolutionResult(
            secret=secret,
            correct_shares=correct,
            wrong_shares=wrong,
            tally=tally,
            ambiguous=ambiguous,
        )

    def _prepare(self, shares: Iterable[Share]) -> list[Share]:
        # dict.fromkeys drops value-equal duplicates and keeps first-seen order
        points = list(dict.fromkeys(shares))
        if not points:
            raise InsufficientShares("Need at least one share to reconstruct")
        if len(points) < self.k:
            raise InsufficientShares(
                f"Need at least k={self.k} shares, got {len(points)}"
            )
        return points

    def _tally(self, points: Sequence[Share]) -> SecretTally:
        expected = subset_count(len(points), self.k)
        logger.debug(
            "Evaluating %d subsets of %d shares (k=%d)", expected, len(points), self.k
        )

        tally = SecretTally()
        subsets = iter_combinations(points, self.k)

        if self.workers is None or self.workers == 1:
            for subset in subsets:
                tally.add(secret_at(subset, self.division), subset)
        else:
            chunks = list(_chunked(subsets, self.chunk_size))
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                results = executor.map(
                    _evaluate_chunk, chunks, [self.division] * len(chunks)
                )
                for chunk, candidates in zip(chunks, results, strict=True):
                    for subset, candidate in zip(chunk, candidates, strict=True):
                        tally.add(candidate, subset)

        assert tally.total == expected
        logger.debug("Tally holds %d distinct candidates", len(tally))
        return tally


def resolve(
    shares: Iterable[Share],
    k: int,
    division: Division = Division.TRUNCATE,
    workers: int | None = None,
    strict: bool = False,
) -> ResolutionResult:
    """Convenience: recover the secret from ``shares`` with threshold ``k``."""
    resolver = ConsensusResolver(k, division=division, workers=workers, strict=strict)
    return resolver.resolve(shares)
