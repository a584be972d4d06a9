"""
Evaluate candidate datasets against a ground truth.

Candidates are processed one at a time; every metric call is a pure function
of the truth and one candidate.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence

from .datasets import Result
from .metrics.registry import Metric, select_metrics
from .types.types import ScoresDict
from .utils.logging_config import get_logger, get_performance_logger, logging_context

logger = get_logger(__name__)


@dataclass
class ComparisonRow:
    """
    Scores of one candidate against the truth.

    Attributes:
        name: Candidate name, usually its file name
        scores: Metric name -> coefficient, ``None`` where not applicable
    """

    name: str
    scores: ScoresDict = field(default_factory=dict)


def evaluate_candidate(
    truth: Result, candidate: Result, metrics: Sequence[Metric]
) -> ScoresDict:
    """Run every metric on one candidate; element-set mismatches propagate."""
    scores: ScoresDict = {}
    perf = get_performance_logger()
    for metric in metrics:
        with perf.timer(metric.name):
            scores[metric.name] = metric(truth, candidate)
    return scores


def evaluate_candidates(
    truth: Result,
    candidates: Mapping[str, Result],
    metric_names: Optional[Iterable[str]] = None,
) -> List[ComparisonRow]:
    """
    Compare each candidate with the truth through the selected metrics.

    Args:
        truth: The reference dataset
        candidates: Candidate datasets by name, evaluated in mapping order
        metric_names: Metrics to run, all registered metrics by default

    Returns:
        One row per candidate, in input order
    """
    metrics = select_metrics(metric_names)
    rows = []
    for name, candidate in candidates.items():
        with logging_context(dataset_name=name):
            logger.info(
                "Evaluating %s (%s) against truth (%s)",
                name,
                candidate.shape.value,
                truth.shape.value,
            )
            rows.append(ComparisonRow(name=name, scores=evaluate_candidate(truth, candidate, metrics)))
    return rows
