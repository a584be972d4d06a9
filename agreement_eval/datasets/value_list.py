"""Value lists: a map of unique elements to finite real values."""
from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, Generic, ItemsView, Iterator, List, Mapping

from ..types.types import InvalidDatasetError, T

if TYPE_CHECKING:
    from .tied_ranked_list import TiedRankedList


@dataclass(frozen=True)
class ValueList(Generic[T]):
    """
    Immutable map of unique elements into finite values.

    Attributes:
        values: Read-only mapping from element to value. NaN and infinities
            are rejected at construction.
    """

    values: Mapping[T, float]

    def __post_init__(self) -> None:
        checked: Dict[T, float] = {}
        for element, value in self.values.items():
            if element is None or value is None:
                raise InvalidDatasetError("Value lists cannot contain None")
            value = float(value)
            if not math.isfinite(value):
                raise InvalidDatasetError(
                    f"A value in the map was not finite: {element!r} -> {value!r}",
                    context={"element": repr(element)},
                )
            checked[element] = value
        object.__setattr__(self, "values", MappingProxyType(checked))

    @classmethod
    def from_mapping(cls, mapping: Mapping[T, float]) -> "ValueList[T]":
        """Build a value list from a key -> value mapping."""
        return cls(mapping)

    @property
    def elements(self) -> FrozenSet[T]:
        return frozenset(self.values)

    def get(self, element: T) -> float:
        """Return the value of ``element``; raises ``KeyError`` if absent."""
        if element not in self.values:
            raise KeyError(f"Element is not in this value list: {element!r}")
        return self.values[element]

    def items(self) -> ItemsView[T, float]:
        return self.values.items()

    def to_tied_ranked_list(self) -> "TiedRankedList[T]":
        """
        Rank the elements by increasing value.

        Elements sharing a value end up tied in the same rank.
        """
        from .tied_ranked_list import TiedRankedList

        by_value: Dict[float, List[T]] = {}
        for element, value in self.values.items():
            by_value.setdefault(value, []).append(element)
        return TiedRankedList.from_ranks([by_value[value] for value in sorted(by_value)])

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, element: object) -> bool:
        return element in self.values

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    def __str__(self) -> str:
        lines = [f"  {element} {value}" for element, value in self.values.items()]
        return "ValueList[%d] {\n%s\n}" % (len(self), "\n".join(lines))
