"""Strict ranked lists: a total order over unique elements without ties."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Generic, Iterable, Iterator, Tuple

from ..types.types import InvalidDatasetError, T
from .tied_ranked_list import TiedRankedList


@dataclass(frozen=True)
class RankedList(Generic[T]):
    """
    Immutable ranked list without ties.

    Attributes:
        items: Elements in rank order; position 0 is the top
    """

    items: Tuple[T, ...]
    _positions: Dict[T, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        items = tuple(self.items)
        positions: Dict[T, int] = {}
        for position, element in enumerate(items):
            if element is None:
                raise InvalidDatasetError("Ranked lists cannot contain None")
            if element in positions:
                raise InvalidDatasetError(
                    f"Input contains duplicate elements: {element!r}",
                    context={"position": position},
                )
            positions[element] = position
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_sequence(cls, elements: Iterable[T]) -> "RankedList[T]":
        """Build from elements given in rank order."""
        return cls(tuple(elements))

    @property
    def elements(self) -> FrozenSet[T]:
        return frozenset(self._positions)

    def index_of(self, element: T) -> int:
        """Return the 0-based position of ``element``; raises ``KeyError`` if absent."""
        if element not in self._positions:
            raise KeyError(f"Element is not in this ranked list: {element!r}")
        return self._positions[element]

    def to_tied_ranked_list(self) -> TiedRankedList[T]:
        return TiedRankedList.from_singleton_ranks(self.items)

    def __getitem__(self, position: int) -> T:
        return self.items[position]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, element: object) -> bool:
        return element in self._positions

    def __str__(self) -> str:
        lines = [f"  {element}" for element in self.items]
        return "RankedList[%d] {\n%s\n}" % (len(self), "\n".join(lines))
