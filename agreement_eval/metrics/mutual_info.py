"""
Normalized mutual information between the pair connectivity of two partitions.
"""
from typing import Optional

import numpy as np

from ..datasets import Partition, Result
from ..utils.numpy_ops import divide, xlog2x_sum
from .pairwise import pair_contingency


def normalized_mutual_information(a: Partition, b: Partition) -> float:
    """
    Calculates the normalized mutual information of two partitions.

    The 2x2 pair contingency table is treated as a joint distribution. Each
    cell contributes ``(N_k / N) * log2(N * N_k / (row_k * col_k))``, empty
    cells contributing 0. The entropies of both marginals are computed as
    ``sum(p * log2(p))``, which is non-positive, hence the sign flip in
    ``-2 * MI / (H1 + H2)``.

    Raises:
        ShapeMismatchError: If an operand is not a Partition
        ElementSetMismatchError: If the partitions cover different elements
    """
    table = pair_contingency("mi", a, b)
    n = table.total

    rows = (table.degree_a, n - table.degree_a)
    cols = (table.degree_b, n - table.degree_b)
    cells = (
        (table.both, rows[0], cols[0]),
        (table.a_only, rows[0], cols[1]),
        (table.b_only, rows[1], cols[0]),
        (table.neither, rows[1], cols[1]),
    )

    mi = 0.0
    for count, row, col in cells:
        if count == 0:
            continue
        mi += divide(count, n) * float(np.log2(divide(n * count, row * col)))

    h1 = xlog2x_sum([divide(m, n) for m in rows])
    h2 = xlog2x_sum([divide(m, n) for m in cols])

    return divide(-(2 * mi), h1 + h2)


def mi(a: Result, b: Result) -> Optional[float]:
    if a.is_partition and b.is_partition:
        return normalized_mutual_information(a.partition, b.partition)
    return None
