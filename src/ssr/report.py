"""Plain-text and JSON rendering of a resolution run."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ssr.consensus import ResolutionResult
from ssr.shares import Share, ThresholdConfig

RULE = "=" * 60


def format_report(
    result: ResolutionResult,
    config: ThresholdConfig,
    shares: Sequence[Share],
    title: str | None = None,
    top: int = 5,
) -> str:
    """Human-readable summary of one run, ``top`` candidates listed."""
    lines: list[str] = []
    if title:
        lines += [RULE, f"Share set: {title}", RULE]

    lines += [
        "Configuration:",
        f"  shares available (n): {config.n}",
        f"  threshold (k):        {config.k}",
        f"  polynomial degree:    {config.degree}",
        "",
        "Decoded points:",
    ]
    lines += [f"  {i:2d}. {share}" for i, share in enumerate(shares, start=1)]

    lines += [
        "",
        f"Subsets evaluated: {result.subsets_evaluated}",
        "Candidate frequencies:",
    ]
    for candidate, count in result.frequencies()[:top]:
        lines.append(f"  {candidate}: {count}")

    lines.append("")
    if result.wrong_shares:
        lines.append("Wrong shares:")
        for share in sorted(result.wrong_shares, key=lambda s: s.x):
            lines.append(f"  x={share.x}, y={share.y}")
    else:
        lines.append("All shares are consistent.")

    if result.ambiguous:
        lines.append("Warning: tie for the most frequent candidate.")

    lines += ["", f"Secret: {result.secret}"]
    return "\n".join(lines)


def result_to_dict(result: ResolutionResult, top: int | None = None) -> dict[str, Any]:
    """JSON-safe view of a result. Big integers are written as strings."""
    freqs = result.frequencies()
    if top is not None:
        freqs = freqs[:top]
    return {
        "secret": str(result.secret),
        "ambiguous": result.ambiguous,
        "subsets_evaluated": result.subsets_evaluated,
        "wrong_shares": [
            {"x": s.x, "y": str(s.y)}
            for s in sorted(result.wrong_shares, key=lambda s: s.x)
        ],
        "frequencies": [
            {"candidate": str(c), "count": n} for c, n in freqs
        ],
    }
