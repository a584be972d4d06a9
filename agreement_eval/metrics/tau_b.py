"""
Kendall's tau-b rank correlation over tied ranked lists.
"""
from typing import Optional

import numpy as np

from ..datasets import Result, TiedRankedList
from ..utils.numpy_ops import concordance, divide, pair_count, tied_pairs
from .checks import require_same_elements, require_type


def kendall_tau_b(a: TiedRankedList, b: TiedRankedList) -> float:
    """
    Calculates Kendall's tau-b between two tied ranked lists.

    Every unordered pair of distinct elements contributes the sign of
    ``(rank_a(x) - rank_a(y)) * (rank_b(x) - rank_b(y))``. Ties on either side are
    removed from the denominator. A fully tied side gives NaN.

    Raises:
        ShapeMismatchError: If an operand is not a TiedRankedList
        ElementSetMismatchError: If the lists rank different elements
    """
    require_type("kendall", a, b, TiedRankedList)
    require_same_elements("kendall", a, b)

    order = list(a.elements)
    ranks_a = np.fromiter((a.index_of(x) for x in order), dtype=np.int64, count=len(order))
    ranks_b = np.fromiter((b.index_of(x) for x in order), dtype=np.int64, count=len(order))

    numerator = concordance(ranks_a, ranks_b)

    n = pair_count(a.elements_count)
    n1 = tied_pairs(len(rank) for rank in a)
    n2 = tied_pairs(len(rank) for rank in b)

    return divide(numerator, np.sqrt(float((n - n1) * (n - n2))))


def max_kendall(x: TiedRankedList) -> float:
    """
    Returns the tau-b between ``x`` and ``x`` with its ties broken.

    Tied groups are flattened into singleton ranks in rank order, which gives
    the ceiling that ``x``'s own ties impose on its correlation with any
    tie-free ranking.
    """
    flattened = [element for rank in x for element in rank]
    return kendall_tau_b(x, TiedRankedList.from_singleton_ranks(flattened))


def kendall(a: Result, b: Result) -> Optional[float]:
    """Tau-b for any two rankable results, ``None`` if either is a partition."""
    if not (a.is_rankable and b.is_rankable):
        return None
    return kendall_tau_b(a.to_tied_ranked_list(), b.to_tied_ranked_list())


def max_kendall_of(result: Result) -> Optional[float]:
    """``max_kendall`` of a rankable result, ``None`` for partitions."""
    if not result.is_rankable:
        return None
    return max_kendall(result.to_tied_ranked_list())
