"""Type definitions for agreement-eval."""

from .types import (
    AgreementError,
    ConfigurationError,
    DatasetFormatError,
    DatasetReadError,
    ElementSetMismatchError,
    EvaluationError,
    InvalidDatasetError,
    MaybeCoefficient,
    MetricFunction,
    NotConvertibleError,
    ScoresDict,
    ShapeMismatchError,
)

__all__ = [
    "MaybeCoefficient",
    "ScoresDict",
    "MetricFunction",
    "AgreementError",
    "InvalidDatasetError",
    "DatasetFormatError",
    "DatasetReadError",
    "NotConvertibleError",
    "EvaluationError",
    "ShapeMismatchError",
    "ElementSetMismatchError",
    "ConfigurationError",
]
