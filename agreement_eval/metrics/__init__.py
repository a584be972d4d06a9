"""
Agreement metrics for agreement-eval.

Each metric has a typed entry point taking two datasets of the required shape
and a wrapper taking two :class:`~agreement_eval.datasets.Result` objects that
returns ``None`` when the metric is not defined for their shapes:
- Rank correlation: Kendall tau-b, Spearman rho
- Value correlation: Pearson, Cosine
- Pair-based partition measures: Jaccard, SMC, Sorensen-Dice, Overlap, NMI
"""

from .correlation import pearson, pearson_partitions, pearson_values
from .cosine_similarity import cosine, cosine_partitions, cosine_values
from .mutual_info import mi, normalized_mutual_information
from .pairwise import PairContingency, pair_contingency
from .registry import METRIC_NAMES, METRICS, Metric, get_metric, select_metrics
from .rho import spearman, spearman_rho
from .set_similarity import (
    jaccard,
    jaccard_index,
    overlap,
    overlap_coefficient,
    simple_matching,
    smc,
    sorensen,
    sorensen_dice,
)
from .tau_b import kendall, kendall_tau_b, max_kendall, max_kendall_of

__all__ = [
    # Result-level wrappers
    "kendall",
    "spearman",
    "pearson",
    "cosine",
    "jaccard",
    "smc",
    "sorensen",
    "overlap",
    "mi",
    "max_kendall_of",
    # Typed entry points
    "kendall_tau_b",
    "max_kendall",
    "spearman_rho",
    "pearson_values",
    "pearson_partitions",
    "cosine_values",
    "cosine_partitions",
    "jaccard_index",
    "simple_matching",
    "sorensen_dice",
    "overlap_coefficient",
    "normalized_mutual_information",
    # Pair scan
    "PairContingency",
    "pair_contingency",
    # Registry
    "Metric",
    "METRICS",
    "METRIC_NAMES",
    "get_metric",
    "select_metrics",
]
