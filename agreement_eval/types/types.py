"""
Type system for agreement-eval.

This module provides the shared type aliases and the exception hierarchy used
across the data model, the comparison metrics and the command line.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Hashable, Optional, TypeVar

from typing_extensions import TypeAlias

# Type Variables for Generics
T = TypeVar("T", bound=Hashable)  # Element type

# Type Aliases and Custom Types
MaybeCoefficient: TypeAlias = Optional[float]  # None means "not applicable"
ScoresDict = Dict[str, MaybeCoefficient]  # metric name -> coefficient

# Function Types
MetricFunction = Callable[[Any, Any], MaybeCoefficient]  # (truth, candidate) -> coefficient


# Exception Hierarchy
class AgreementError(Exception):
    """Base exception class for agreement-eval."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None,
        }


class InvalidDatasetError(AgreementError):
    """
    Raised when a dataset violates one of its invariants at construction.

    Examples:
        - Duplicate element
        - Empty rank or group
        - Non-finite value in a value list
    """


class DatasetFormatError(InvalidDatasetError):
    """
    Raised when a dataset file does not follow the line grammar.

    Examples:
        - Missing or unknown shape marker
        - Wrong number of tokens on a line
        - Value that is not a number
    """


class DatasetReadError(AgreementError):
    """Raised when a dataset file cannot be opened or decoded."""


class NotConvertibleError(AgreementError):
    """Raised when a dataset has no lossless conversion to a tied ranked list."""


class EvaluationError(AgreementError):
    """
    Raised when a metric cannot be computed.

    Examples:
        - Empty value list (cannot average)
    """


class ShapeMismatchError(EvaluationError):
    """Raised when a typed metric receives the wrong kind of dataset."""


class ElementSetMismatchError(EvaluationError):
    """Raised when the two compared datasets cover different elements."""


class ConfigurationError(AgreementError):
    """
    Raised when there's an issue with configuration.

    Examples:
        - Invalid config values
        - Config file not found
        - Unknown metric name
    """
