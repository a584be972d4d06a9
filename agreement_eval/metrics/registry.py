"""Ordered table of the agreement metrics shown in reports."""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..datasets import Result
from ..types.types import ConfigurationError, MetricFunction
from .correlation import pearson
from .cosine_similarity import cosine
from .mutual_info import mi
from .rho import spearman
from .set_similarity import jaccard, overlap, smc, sorensen
from .tau_b import kendall


@dataclass(frozen=True)
class Metric:
    """
    A metric as it appears in a report.

    Attributes:
        name: Identifier used in configuration and on the command line
        label: Column header
        func: Dispatch wrapper taking (truth, candidate) results
        description: One-line help text
    """

    name: str
    label: str
    func: MetricFunction
    description: str

    def __call__(self, truth: Result, candidate: Result) -> Optional[float]:
        return self.func(truth, candidate)


METRICS: Tuple[Metric, ...] = (
    Metric("kendall", "Kendall", kendall, "Kendall tau-b over any rankable datasets"),
    Metric("spearman", "Spearman", spearman, "Spearman rho over strict ranked lists"),
    Metric("pearson", "Pearson", pearson, "Pearson over value lists or partitions"),
    Metric("cosine", "Cosine", cosine, "Cosine similarity over value lists or partitions"),
    Metric("jaccard", "Jaccard", jaccard, "Jaccard index of connected pairs"),
    Metric("mi", "MI", mi, "Normalized mutual information of pair connectivity"),
    Metric("smc", "SMC", smc, "Simple matching coefficient of pair connectivity"),
    Metric("sorensen", "Sorensen", sorensen, "Sorensen-Dice coefficient of connected pairs"),
    Metric("overlap", "Overlap", overlap, "Overlap coefficient of connected pairs"),
)

METRIC_NAMES: Tuple[str, ...] = tuple(metric.name for metric in METRICS)

_BY_NAME: Dict[str, Metric] = {metric.name: metric for metric in METRICS}


def get_metric(name: str) -> Metric:
    """Look up a metric by name; raises ``ConfigurationError`` for unknown names."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown metric: {name!r}", context={"known": list(METRIC_NAMES)}
        ) from None


def select_metrics(names: Optional[Iterable[str]] = None) -> List[Metric]:
    """Return the named metrics in registry order, or all of them."""
    if names is None:
        return list(METRICS)
    wanted = {get_metric(name).name for name in names}
    return [metric for metric in METRICS if metric.name in wanted]
