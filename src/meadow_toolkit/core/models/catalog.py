"""
Module: catalog

Purpose:
    Immutable reference catalog combining plant and measure records.
    Supplied once at startup by catalog.loader and only read afterwards.

Key Classes:
    - ReferenceCatalog: Plants and measures with lookup helpers

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .plants

Used By:
    - catalog.loader.load_catalog
    - engine.controller.AssessmentController
    - gui.main_window
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional, Tuple

from .plants import MeasureRecord, PlantKind, PlantRecord


@dataclass(frozen=True)
class ReferenceCatalog:
    """
    Plant and measure records in catalog order.

    Attributes:
        plants: All plant records
        measures: All measure records

    Invariants:
        - Plant ids are unique (later duplicates are ignored by lookups)
    """
    plants: Tuple[PlantRecord, ...] = ()
    measures: Tuple[MeasureRecord, ...] = ()

    @cached_property
    def _plants_by_id(self) -> Dict[str, PlantRecord]:
        index: Dict[str, PlantRecord] = {}
        for plant in self.plants:
            index.setdefault(plant.id, plant)
        return index

    def get_plant(self, plant_id: str) -> Optional[PlantRecord]:
        """Return the plant with this id, or None if it is not catalogued."""
        return self._plants_by_id.get(plant_id)

    def plants_of_kind(self, kind: PlantKind) -> Tuple[PlantRecord, ...]:
        return tuple(p for p in self.plants if p.kind is kind)

    @property
    def quality_plants(self) -> Tuple[PlantRecord, ...]:
        """Q2 indicator plants offered on the first stage."""
        return self.plants_of_kind(PlantKind.QUALITY)

    @property
    def potential_plants(self) -> Tuple[PlantRecord, ...]:
        """Potential indicator plants offered on the second stage."""
        return self.plants_of_kind(PlantKind.POTENTIAL)

    def __repr__(self) -> str:
        return f"ReferenceCatalog(plants={len(self.plants)}, measures={len(self.measures)})"
