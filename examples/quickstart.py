#!/usr/bin/env python3
"""Quick start example: recover a secret from a share set with a bad share.

Demonstrates the core workflow:
  1. Decode shares written in mixed bases
  2. Check how much corruption a majority vote can absorb
  3. Resolve the secret and flag inconsistent shares
"""

from ssr.analysis import majority_guaranteed, max_tolerable_corruption
from ssr.consensus import resolve
from ssr.shares import EncodedShare, Share, decode_shares

# --- 1. Decode the shares ---
# f(x) = 12 * (5 + 2x): secret 60, evaluated at x = 1..5
encoded = [
    EncodedShare(index=1, radix=10, digits="84"),
    EncodedShare(index=2, radix=2, digits="11000000"),  # 192, corrupted (should be 108)
    EncodedShare(index=3, radix=16, digits="84"),  # 132
    EncodedShare(index=4, radix=8, digits="234"),  # 156
    EncodedShare(index=5, radix=4, digits="2310"),  # 180
]
shares = decode_shares(encoded)
n, k = len(shares), 2

print("Decoded points:")
for share in shares:
    print(f"  {share}")

# --- 2. How many bad shares can the vote absorb? ---
print(f"\nn={n}, k={k}: majority guaranteed with 1 bad share: {majority_guaranteed(n, k, 1)}")
print(f"Max tolerable corrupted shares: {max_tolerable_corruption(n, k)}")

# --- 3. Resolve ---
result = resolve(shares, k)

print(f"\nEvaluated {result.subsets_evaluated} subsets")
for candidate, count in result.frequencies()[:5]:
    print(f"  {candidate}: {count}")

print(f"\nSecret: {result.secret}")
assert result.secret == 60
assert result.wrong_shares == {Share(2, 192)}
for share in sorted(result.wrong_shares, key=lambda s: s.x):
    print(f"Wrong share: x={share.x}, y={share.y}")
