"""
Tagged union over the four dataset shapes.

A :class:`Result` holds exactly one of :class:`ValueList`, :class:`RankedList`,
:class:`TiedRankedList` or :class:`Partition`, together with a :class:`Shape`
tag. The tag values are the markers used on the first line of dataset files.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Union

from ..types.types import NotConvertibleError, ShapeMismatchError, T
from .partition import Partition
from .ranked_list import RankedList
from .tied_ranked_list import TiedRankedList
from .value_list import ValueList

Dataset = Union[ValueList, RankedList, TiedRankedList, Partition]


class Shape(Enum):
    """Dataset shapes, valued by their file marker."""

    VALUES = "values"
    RANKS = "ranks"
    TIE_RANKS = "tie-ranks"
    PARTITION = "partition"

    @classmethod
    def from_marker(cls, marker: str) -> "Shape":
        """Return the shape for an exact marker literal; raises ``ValueError`` otherwise."""
        return cls(marker)


_SHAPES = {
    ValueList: Shape.VALUES,
    RankedList: Shape.RANKS,
    TiedRankedList: Shape.TIE_RANKS,
    Partition: Shape.PARTITION,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Immutable holder of exactly one dataset.

    Attributes:
        dataset: The owned dataset
        shape: Tag derived from the dataset type
    """

    dataset: Dataset
    shape: Shape = field(init=False)

    def __post_init__(self) -> None:
        shape = _SHAPES.get(type(self.dataset))
        if shape is None:
            raise TypeError(f"Not a dataset: {type(self.dataset).__name__}")
        object.__setattr__(self, "shape", shape)

    @property
    def is_value_list(self) -> bool:
        return self.shape is Shape.VALUES

    @property
    def is_ranked_list(self) -> bool:
        return self.shape is Shape.RANKS

    @property
    def is_tied_ranked_list(self) -> bool:
        return self.shape is Shape.TIE_RANKS

    @property
    def is_partition(self) -> bool:
        return self.shape is Shape.PARTITION

    @property
    def is_rankable(self) -> bool:
        """True when :meth:`to_tied_ranked_list` can succeed."""
        return self.shape is not Shape.PARTITION

    def _expect(self, shape: Shape) -> Dataset:
        if self.shape is not shape:
            raise ShapeMismatchError(
                f"Result holds {self.shape.value}, not {shape.value}",
                context={"expected": shape.value, "actual": self.shape.value},
            )
        return self.dataset

    @property
    def value_list(self) -> ValueList[T]:
        return self._expect(Shape.VALUES)  # type: ignore[return-value]

    @property
    def ranked_list(self) -> RankedList[T]:
        return self._expect(Shape.RANKS)  # type: ignore[return-value]

    @property
    def tied_ranked_list(self) -> TiedRankedList[T]:
        return self._expect(Shape.TIE_RANKS)  # type: ignore[return-value]

    @property
    def partition(self) -> Partition[T]:
        return self._expect(Shape.PARTITION)  # type: ignore[return-value]

    def to_tied_ranked_list(self) -> TiedRankedList[T]:
        """
        Upgrade the dataset to a tied ranked list without losing information.

        Raises:
            NotConvertibleError: If the dataset is a partition
        """
        if self.shape is Shape.TIE_RANKS:
            return self.dataset  # type: ignore[return-value]
        if self.shape is Shape.RANKS or self.shape is Shape.VALUES:
            return self.dataset.to_tied_ranked_list()  # type: ignore[union-attr]
        raise NotConvertibleError(
            "A partition has no ranked form", context={"shape": self.shape.value}
        )

    def __str__(self) -> str:
        return str(self.dataset)
