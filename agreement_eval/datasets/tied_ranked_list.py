"""Ranked lists of unique elements that may contain ties."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Dict, FrozenSet, Generic, Iterable, Iterator, Sequence, Tuple

from ..types.types import InvalidDatasetError, T


@dataclass(frozen=True)
class TiedRankedList(Generic[T]):
    """
    Immutable ordered sequence of ranks.

    Each rank is a non-empty set of elements considered equally ranked. An
    element appears in exactly one rank. Iterating yields the ranks in
    increasing rank order, and can be repeated.

    Attributes:
        ranks: The rank groups, best (index 0) first
    """

    ranks: Tuple[FrozenSet[T], ...]
    _indices: Dict[T, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        indices: Dict[T, int] = {}
        ranks = []
        for index, rank in enumerate(self.ranks):
            members = list(rank)
            if not members:
                raise InvalidDatasetError("Input contains empty ranks", context={"rank": index})
            for element in members:
                if element is None:
                    raise InvalidDatasetError("Ranked lists cannot contain None")
                if element in indices:
                    raise InvalidDatasetError(
                        f"Input contains duplicate elements: {element!r}",
                        context={"rank": index},
                    )
                indices[element] = index
            ranks.append(frozenset(members))
        object.__setattr__(self, "ranks", tuple(ranks))
        object.__setattr__(self, "_indices", indices)

    @classmethod
    def from_ranks(cls, ranks: Iterable[Collection[T]]) -> "TiedRankedList[T]":
        """Build from an ordered sequence of rank groups."""
        return cls(tuple(ranks))

    @classmethod
    def from_singleton_ranks(cls, elements: Sequence[T]) -> "TiedRankedList[T]":
        """Build a tie-free list where every element is its own rank."""
        return cls(tuple((element,) for element in elements))

    @property
    def elements(self) -> FrozenSet[T]:
        return frozenset(self._indices)

    @property
    def ranks_count(self) -> int:
        """Number of ranks, never greater than ``elements_count``."""
        return len(self.ranks)

    @property
    def elements_count(self) -> int:
        return len(self._indices)

    def index_of(self, element: T) -> int:
        """Return the rank index of ``element``; raises ``KeyError`` if absent."""
        if element not in self._indices:
            raise KeyError(f"Element is not in this ranked list: {element!r}")
        return self._indices[element]

    def get(self, index: int) -> FrozenSet[T]:
        return self.ranks[index]

    def get_single(self, index: int) -> T:
        """Return the only element at ``index``; fails if the rank is tied."""
        rank = self.ranks[index]
        if len(rank) != 1:
            raise ValueError(f"Rank {index} holds {len(rank)} elements")
        return next(iter(rank))

    def __iter__(self) -> Iterator[FrozenSet[T]]:
        return iter(self.ranks)

    def __len__(self) -> int:
        return len(self.ranks)

    def __contains__(self, element: object) -> bool:
        return element in self._indices

    def __str__(self) -> str:
        lines = ["  " + " ".join(sorted(str(element) for element in rank)) for rank in self.ranks]
        return "TiedRankedList[%d] {\n%s\n}" % (self.elements_count, "\n".join(lines))
