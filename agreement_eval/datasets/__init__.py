"""
Dataset shapes accepted by agreement-eval.

This module provides the immutable data model:
- ValueList: elements mapped to finite values
- RankedList: strict total order without ties
- TiedRankedList: ordered ranks that may hold several tied elements
- Partition: disjoint unordered groups
- Result: tagged union holding exactly one of the above
"""

from .partition import Partition
from .ranked_list import RankedList
from .result import Dataset, Result, Shape
from .tied_ranked_list import TiedRankedList
from .value_list import ValueList

__all__ = [
    "ValueList",
    "RankedList",
    "TiedRankedList",
    "Partition",
    "Result",
    "Shape",
    "Dataset",
]
