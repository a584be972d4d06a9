"""
Cosine similarity for value lists and for partitions.
"""
from typing import Optional

import numpy as np

from ..datasets import Partition, Result, ValueList
from ..utils.numpy_ops import divide
from .checks import require_same_elements, require_type
from .pairwise import pair_contingency


def cosine_values(a: ValueList, b: ValueList) -> float:
    """Cosine of the two value vectors aligned by element."""
    require_type("cosine", a, b, ValueList)
    require_same_elements("cosine", a, b)

    order = list(a.elements)
    values_a = np.array([a.get(x) for x in order], dtype=np.float64)
    values_b = np.array([b.get(x) for x in order], dtype=np.float64)

    return divide(values_a @ values_b, np.linalg.norm(values_a) * np.linalg.norm(values_b))


def cosine_partitions(a: Partition, b: Partition) -> float:
    """
    Cosine of the pair incidence vectors of two partitions.

    Equals ``|A & B| / sqrt(|A| * |B|)`` where A and B are the sets of
    connected pairs.
    """
    table = pair_contingency("cosine", a, b)
    return divide(table.both, np.sqrt(float(table.degree_a * table.degree_b)))


def cosine(a: Result, b: Result) -> Optional[float]:
    """Cosine for two value lists or two partitions, otherwise ``None``."""
    if a.is_value_list and b.is_value_list:
        return cosine_values(a.value_list, b.value_list)
    if a.is_partition and b.is_partition:
        return cosine_partitions(a.partition, b.partition)
    return None
