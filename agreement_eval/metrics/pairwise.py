"""
Pairwise-relation scan over two partitions.

Every unordered pair of distinct elements is classified by whether it is
connected (same group) in each partition. The counts form a 2x2 contingency
table that every partition metric is computed from.
"""
from dataclasses import dataclass

import numpy as np

from ..datasets import Partition
from ..utils.numpy_ops import pair_count
from .checks import require_same_elements, require_type


@dataclass(frozen=True)
class PairContingency:
    """
    Contingency table of pair connectivity.

    Attributes:
        both: Pairs connected in both partitions
        a_only: Pairs connected only in the first partition
        b_only: Pairs connected only in the second partition
        neither: Pairs connected in neither
    """

    both: int
    a_only: int
    b_only: int
    neither: int

    @property
    def total(self) -> int:
        return self.both + self.a_only + self.b_only + self.neither

    @property
    def degree_a(self) -> int:
        """Pairs connected in the first partition."""
        return self.both + self.a_only

    @property
    def degree_b(self) -> int:
        """Pairs connected in the second partition."""
        return self.both + self.b_only

    def transposed(self) -> "PairContingency":
        return PairContingency(self.both, self.b_only, self.a_only, self.neither)


def pair_contingency(metric: str, a: Partition, b: Partition) -> PairContingency:
    """
    Scan all unordered pairs of elements and count their connectivity.

    Each row of the upper triangle is compared at once, so memory stays
    linear in the number of elements.

    Args:
        metric: Name of the calling metric, used in error context
        a: First partition
        b: Second partition

    Returns:
        The filled contingency table

    Raises:
        ShapeMismatchError: If an operand is not a Partition
        ElementSetMismatchError: If the partitions cover different elements
    """
    require_type(metric, a, b, Partition)
    require_same_elements(metric, a, b)

    order = list(a.elements)
    labels_a = a.labels(order)
    labels_b = b.labels(order)

    both = 0
    a_only = 0
    b_only = 0
    for i in range(len(order) - 1):
        in_a = labels_a[i + 1 :] == labels_a[i]
        in_b = labels_b[i + 1 :] == labels_b[i]
        both += int(np.count_nonzero(in_a & in_b))
        a_only += int(np.count_nonzero(in_a & ~in_b))
        b_only += int(np.count_nonzero(~in_a & in_b))

    neither = pair_count(len(order)) - both - a_only - b_only
    return PairContingency(both=both, a_only=a_only, b_only=b_only, neither=neither)
