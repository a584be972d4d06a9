"""Argument checks shared by the typed metric entry points."""
from typing import Any, Type

from ..types.types import ElementSetMismatchError, ShapeMismatchError


def require_type(metric: str, a: Any, b: Any, expected: Type) -> None:
    """Raise ``ShapeMismatchError`` unless both operands are ``expected`` instances."""
    for operand in (a, b):
        if not isinstance(operand, expected):
            raise ShapeMismatchError(
                f"{metric} requires two {expected.__name__} operands, got {type(operand).__name__}",
                context={"metric": metric, "expected": expected.__name__},
            )


def require_same_elements(metric: str, a: Any, b: Any) -> None:
    """Raise ``ElementSetMismatchError`` unless both datasets cover the same elements."""
    if a.elements != b.elements:
        only_a = a.elements - b.elements
        only_b = b.elements - a.elements
        raise ElementSetMismatchError(
            "a and b must have the same elements",
            context={
                "metric": metric,
                "only_in_a": sorted(map(str, only_a))[:10],
                "only_in_b": sorted(map(str, only_b))[:10],
            },
        )
