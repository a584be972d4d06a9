"""Utility functions and helpers for agreement-eval."""

from .error_handling import handle_errors
from .logging_config import (
    get_logger,
    get_performance_logger,
    get_structured_logger,
    logging_context,
    setup_logging,
)
from .numpy_ops import concordance, divide, pair_count, tied_pairs, xlog2x_sum

__all__ = [
    # Error handling
    "handle_errors",
    # Logging
    "get_logger",
    "get_performance_logger",
    "get_structured_logger",
    "logging_context",
    "setup_logging",
    # Numeric helpers
    "divide",
    "pair_count",
    "tied_pairs",
    "concordance",
    "xlog2x_sum",
]
