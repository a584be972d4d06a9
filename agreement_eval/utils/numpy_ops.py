"""Numpy helpers shared by the agreement metrics.

This module keeps the floating-point conventions of the metrics in one place:
- IEEE division: a zero denominator yields NaN or infinity instead of raising
- Pair counting: C(n, 2) for group and element counts
- Entropy-style terms where 0 * log2(0) counts as 0
- Pair concordance of two rankings, scanned one row at a time

Example:
    >>> from agreement_eval.utils.numpy_ops import divide
    >>> divide(0, 0)
    nan
"""

from typing import Iterable, Sequence

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics.

    Degenerate inputs (all-tied or empty datasets) are reported as NaN or
    infinity rather than intercepted.

    Args:
        numerator: Dividend
        denominator: Divisor, may be zero

    Returns:
        The quotient as a plain float
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def pair_count(n: int) -> int:
    """Number of unordered pairs of distinct items among ``n``."""
    return n * (n - 1) // 2


def tied_pairs(group_sizes: Iterable[int]) -> int:
    """Number of unordered pairs that fall inside the same group."""
    return sum(pair_count(size) for size in group_sizes)


def xlog2x_sum(fractions: Sequence[float]) -> float:
    """Sum of ``p * log2(p)`` over ``fractions``, with zero terms contributing 0.

    NaN fractions (from an empty population) propagate.

    Args:
        fractions: Probabilities, typically marginals of a contingency table

    Returns:
        The (non-positive) sum
    """
    p = np.asarray(fractions, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = np.where(p == 0, 0.0, p * np.log2(np.where(p == 0, 1.0, p)))
    return float(terms.sum())


def concordance(ranks_a: np.ndarray, ranks_b: np.ndarray) -> int:
    """Concordant minus discordant pairs between two aligned rank vectors.

    Each row of the upper triangle is compared at once, so memory stays
    linear in the number of elements. Pairs tied on either side count 0.

    Args:
        ranks_a: Rank index of every element in the first ranking
        ranks_b: Rank index of the same elements in the second ranking

    Returns:
        The signed pair count, each unordered pair counted once
    """
    total = 0
    for i in range(len(ranks_a) - 1):
        signs_a = np.sign(ranks_a[i + 1 :] - ranks_a[i])
        signs_b = np.sign(ranks_b[i + 1 :] - ranks_b[i])
        total += int(np.dot(signs_a, signs_b))
    return total
