"""
Module: plants

Purpose:
    Immutable reference records for the plant and measure catalogs.
    A plant is either a Quality Level II (Q2) indicator or a potential
    indicator, never both.

Key Classes:
    - PlantKind: Which selection stage a plant belongs to
    - PlantRecord: One catalog plant
    - MeasureRecord: One management measure (display only)

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.catalog.ReferenceCatalog
    - catalog.parser: JSON record parsing
    - engine.controller: Selection kind checks
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PlantKind(str, Enum):
    """Selection stage a plant is offered in."""
    QUALITY = "quality"
    POTENTIAL = "potential"


@dataclass(frozen=True, slots=True)
class PlantRecord:
    """
    A single plant from the reference catalog.

    Attributes:
        id: Unique catalog identifier
        name: Common (German) name
        botanical_name: Latin name
        image: Optional image reference, relative to the catalog directory
        is_q2: True for Q2 indicators, False for potential indicators

    Example:
        >>> plant = PlantRecord("p01", "Wiesen-Salbei", "Salvia pratensis", is_q2=True)
        >>> plant.kind
        <PlantKind.QUALITY: 'quality'>
    """
    id: str
    name: str
    botanical_name: str
    image: Optional[str] = None
    is_q2: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("plant id must not be empty")

    @property
    def kind(self) -> PlantKind:
        return PlantKind.QUALITY if self.is_q2 else PlantKind.POTENTIAL

    @property
    def has_image(self) -> bool:
        """True when an image reference is set and not blank."""
        return bool(self.image and self.image.strip())


@dataclass(frozen=True, slots=True)
class MeasureRecord:
    """
    A management measure shown on the management stage.

    The engine never reads measure content; it scores the five candidate
    measures by their fixed identifiers.

    Attributes:
        id: Fixed identifier like "meas-hay"
        name: Short label
        description: Longer explanation shown under the label
        points: Display hint for the commitment points
    """
    id: str
    name: str
    description: str = ""
    points: int = 1
