"""Partitions of unique elements into disjoint groups."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Dict, FrozenSet, Generic, Iterable, Iterator, Sequence

import numpy as np

from ..types.types import InvalidDatasetError, T


@dataclass(frozen=True)
class Partition(Generic[T]):
    """
    Immutable partition of unique elements.

    Groups carry no order, so two partitions with the same groups compare
    equal whatever order they were given in.

    Attributes:
        groups: The disjoint, non-empty groups
    """

    groups: FrozenSet[FrozenSet[T]]
    _membership: Dict[T, FrozenSet[T]] = field(init=False, repr=False, compare=False)
    _labels: Dict[T, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        membership: Dict[T, FrozenSet[T]] = {}
        labels: Dict[T, int] = {}
        groups = []
        for label, group in enumerate(self.groups):
            members = list(group)
            if not members:
                raise InvalidDatasetError("A group was empty")
            frozen = frozenset(members)
            for element in members:
                if element is None:
                    raise InvalidDatasetError("Partitions cannot contain None")
                if element in membership:
                    raise InvalidDatasetError(
                        f"An element had duplicate entries: {element!r}",
                        context={"element": repr(element)},
                    )
                membership[element] = frozen
                labels[element] = label
            groups.append(frozen)
        object.__setattr__(self, "groups", frozenset(groups))
        object.__setattr__(self, "_membership", membership)
        object.__setattr__(self, "_labels", labels)

    @classmethod
    def from_groups(cls, groups: Iterable[Collection[T]]) -> "Partition[T]":
        """Build from an unordered collection of element groups."""
        return cls(tuple(groups))

    @property
    def elements(self) -> FrozenSet[T]:
        return frozenset(self._membership)

    def _check(self, element: T) -> None:
        if element not in self._membership:
            raise KeyError(f"Element is not in this partition: {element!r}")

    def connected(self, a: T, b: T) -> bool:
        """Return True if ``a`` and ``b`` belong to the same group."""
        self._check(a)
        self._check(b)
        return self._labels[a] == self._labels[b]

    def group_of(self, element: T) -> FrozenSet[T]:
        self._check(element)
        return self._membership[element]

    def labels(self, order: Sequence[T]) -> np.ndarray:
        """Return the group label of every element of ``order``, aligned by position."""
        for element in order:
            self._check(element)
        return np.fromiter((self._labels[element] for element in order), dtype=np.int64, count=len(order))

    def __iter__(self) -> Iterator[FrozenSet[T]]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __contains__(self, element: object) -> bool:
        return element in self._membership

    def __str__(self) -> str:
        lines = sorted("  " + " ".join(sorted(str(element) for element in group)) for group in self.groups)
        return "Partition[%d] {\n%s\n}" % (len(self._membership), "\n".join(lines))
