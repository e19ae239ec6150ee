"""
Module: selection

Purpose:
    Provides SelectionSet, the per-stage set of plant ids the user has
    toggled on. Membership has set semantics: no duplicates and no
    ordering significance.

Key Functions:
    - SelectionSet.toggle(plant_id): Flip membership, return new state

Dependencies:
    - dataclasses (std)
    - .plants.PlantKind

Used By:
    - engine.state.EvaluationState
    - engine.controller: Toggle operations
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Set

from .plants import PlantKind


@dataclass
class SelectionSet:
    """
    Mutable set of selected plant ids for one stage.

    Attributes:
        kind: Which plant kind this set accepts
        _ids: Selected plant ids

    Invariants:
        - Only ids of plants matching `kind` are inserted. The set itself
          does not know the catalog; engine.controller checks this.

    Example:
        >>> selection = SelectionSet(PlantKind.QUALITY)
        >>> selection.toggle("p01")
        True
        >>> selection.toggle("p01")
        False
        >>> len(selection)
        0
    """
    kind: PlantKind
    _ids: Set[str] = field(default_factory=set)

    @classmethod
    def of(cls, kind: PlantKind, plant_ids: Iterable[str]) -> SelectionSet:
        """Create a set pre-filled with the given ids."""
        return cls(kind, set(plant_ids))

    def toggle(self, plant_id: str) -> bool:
        """
        Insert the id if absent, remove it if present.

        Returns:
            The new membership of plant_id
        """
        if plant_id in self._ids:
            self._ids.discard(plant_id)
            return False
        self._ids.add(plant_id)
        return True

    def contains(self, plant_id: str) -> bool:
        return plant_id in self._ids

    def clear(self) -> None:
        self._ids.clear()

    @property
    def ids(self) -> FrozenSet[str]:
        """Snapshot of the selected ids."""
        return frozenset(self._ids)

    def __contains__(self, plant_id: object) -> bool:
        return plant_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))

    def __repr__(self) -> str:
        return f"SelectionSet({self.kind.value}, {sorted(self._ids)})"
