"""
Spearman's rank correlation over strict ranked lists.
"""
from typing import Optional

from ..datasets import RankedList, Result, ValueList
from .checks import require_same_elements, require_type
from .correlation import pearson_values


def spearman_rho(a: RankedList, b: RankedList) -> float:
    """Pearson correlation of the 1-based positions of two tie-free rankings."""
    require_type("spearman", a, b, RankedList)
    require_same_elements("spearman", a, b)

    positions_a = ValueList.from_mapping({x: a.index_of(x) + 1.0 for x in a})
    positions_b = ValueList.from_mapping({x: b.index_of(x) + 1.0 for x in a})
    return pearson_values(positions_a, positions_b)


def spearman(a: Result, b: Result) -> Optional[float]:
    if a.is_ranked_list and b.is_ranked_list:
        return spearman_rho(a.ranked_list, b.ranked_list)
    return None
