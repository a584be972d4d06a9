"""
agreement-eval: agreement metrics between a ground truth and candidate datasets.

This package compares rankings, scores and clusterings with rank correlation
(Kendall tau-b, Spearman), value correlation (Pearson, Cosine), pair-based set
similarity (Jaccard, SMC, Sorensen-Dice, Overlap) and normalized mutual
information.
"""

__version__ = "0.1.0"

from .datasets import Partition, RankedList, Result, Shape, TiedRankedList, ValueList  # noqa: F401
from .formats import format_result, parse_lines, read_result, write_result  # noqa: F401
from .metrics import (  # noqa: F401
    METRICS,
    cosine,
    jaccard,
    kendall,
    max_kendall,
    mi,
    overlap,
    pearson,
    smc,
    sorensen,
    spearman,
)
from .types import AgreementError  # noqa: F401

__all__ = [
    # Version
    "__version__",
    # Data model
    "ValueList",
    "RankedList",
    "TiedRankedList",
    "Partition",
    "Result",
    "Shape",
    # File format
    "read_result",
    "parse_lines",
    "format_result",
    "write_result",
    # Metrics
    "METRICS",
    "kendall",
    "max_kendall",
    "spearman",
    "pearson",
    "cosine",
    "jaccard",
    "smc",
    "sorensen",
    "overlap",
    "mi",
    # Errors
    "AgreementError",
]
