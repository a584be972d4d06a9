"""
Set-similarity measures over the connected pairs of two partitions.

All four share the pairwise-relation scan in :mod:`.pairwise`:
- Jaccard index
- Simple Matching Coefficient
- Sorensen-Dice coefficient (derived from Jaccard)
- Overlap coefficient
"""
from typing import Optional

from ..datasets import Partition, Result
from ..utils.numpy_ops import divide
from .pairwise import pair_contingency


def jaccard_index(a: Partition, b: Partition) -> float:
    """Pairs connected in both over pairs connected in either."""
    table = pair_contingency("jaccard", a, b)
    return divide(table.both, table.both + table.a_only + table.b_only)


def simple_matching(a: Partition, b: Partition) -> float:
    """Pairs on which the partitions agree over all pairs."""
    table = pair_contingency("smc", a, b)
    return divide(table.both + table.neither, table.total)


def sorensen_dice(a: Partition, b: Partition) -> float:
    """Sorensen-Dice coefficient, ``2J / (1 + J)`` for Jaccard index J."""
    j = jaccard_index(a, b)
    return divide(2 * j, 1 + j)


def overlap_coefficient(a: Partition, b: Partition) -> float:
    """Pairs connected in both over the smaller connected-pair count."""
    table = pair_contingency("overlap", a, b)
    return divide(table.both, min(table.degree_a, table.degree_b))


def jaccard(a: Result, b: Result) -> Optional[float]:
    if a.is_partition and b.is_partition:
        return jaccard_index(a.partition, b.partition)
    return None


def smc(a: Result, b: Result) -> Optional[float]:
    if a.is_partition and b.is_partition:
        return simple_matching(a.partition, b.partition)
    return None


def sorensen(a: Result, b: Result) -> Optional[float]:
    if a.is_partition and b.is_partition:
        return sorensen_dice(a.partition, b.partition)
    return None


def overlap(a: Result, b: Result) -> Optional[float]:
    if a.is_partition and b.is_partition:
        return overlap_coefficient(a.partition, b.partition)
    return None
