"""Shamir Share-set Recovery (SSR).

Recovers the constant term of an integer polynomial from encoded shares,
some possibly corrupted, by Lagrange interpolation over every k-subset and a
majority vote over the results.
"""

__version__ = "0.1.0"
