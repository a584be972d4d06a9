"""
Pearson correlation for value lists and for partitions.
"""
from typing import Optional

import numpy as np

from ..datasets import Partition, Result, ValueList
from ..types.types import EvaluationError
from ..utils.numpy_ops import divide
from .checks import require_same_elements, require_type
from .pairwise import pair_contingency


def pearson_values(a: ValueList, b: ValueList) -> float:
    """
    Calculates the Pearson correlation of two value lists.

    Values are aligned by element. Each side is centered on its own mean and
    the population standard deviation (divide by N) is used.

    Raises:
        ShapeMismatchError: If an operand is not a ValueList
        ElementSetMismatchError: If the lists cover different elements
        EvaluationError: If the lists are empty
    """
    require_type("pearson", a, b, ValueList)
    require_same_elements("pearson", a, b)
    if len(a) == 0:
        raise EvaluationError("Cannot get the average of an empty value list")

    order = list(a.elements)
    values_a = np.array([a.get(x) for x in order], dtype=np.float64)
    values_b = np.array([b.get(x) for x in order], dtype=np.float64)

    centered_a = values_a - values_a.mean()
    centered_b = values_b - values_b.mean()

    cov = np.mean(centered_a * centered_b)
    var_a = np.mean(centered_a**2)
    var_b = np.mean(centered_b**2)

    return divide(cov, np.sqrt(var_a * var_b))


def pearson_partitions(a: Partition, b: Partition) -> float:
    """
    Calculates the Pearson correlation of pair connectivity in two partitions.

    Connectivity of each of the C(N, 2) pairs is a Bernoulli indicator with
    mean ``p = connected pairs / total pairs`` and variance ``p * (1 - p)``.

    Raises:
        ShapeMismatchError: If an operand is not a Partition
        ElementSetMismatchError: If the partitions cover different elements
    """
    table = pair_contingency("pearson", a, b)
    total = table.total

    p_a = divide(table.degree_a, total)
    p_b = divide(table.degree_b, total)

    var_a = divide(
        table.degree_a * (1 - p_a) ** 2 + (total - table.degree_a) * p_a**2, total
    )
    var_b = divide(
        table.degree_b * (1 - p_b) ** 2 + (total - table.degree_b) * p_b**2, total
    )

    # Sum of (i_a - p_a) * (i_b - p_b) grouped by contingency cell
    cov_sum = (
        table.both * (1 - p_a) * (1 - p_b)
        + table.a_only * (1 - p_a) * (-p_b)
        + table.b_only * (-p_a) * (1 - p_b)
        + table.neither * p_a * p_b
    )
    cov = divide(cov_sum, total)

    return divide(cov, np.sqrt(var_a * var_b))


def pearson(a: Result, b: Result) -> Optional[float]:
    """Pearson for two value lists or two partitions, otherwise ``None``."""
    if a.is_value_list and b.is_value_list:
        return pearson_values(a.value_list, b.value_list)
    if a.is_partition and b.is_partition:
        return pearson_partitions(a.partition, b.partition)
    return None
