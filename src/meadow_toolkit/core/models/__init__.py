"""
Core Models Package

Immutable reference records, selection sets, input records and the
outcome taxonomy shared by the catalog loader, engine and front-ends.

| Model | Mutability | Role |
|-------|------------|------|
| `PlantRecord` / `MeasureRecord` | frozen | Catalog entries |
| `ReferenceCatalog` | frozen | Loaded once at startup |
| `SelectionSet` | mutable | Per-stage toggled plant ids |
| `SiteFactors` / `ManagementMeasures` / `ExclusionCriteria` | frozen | Stage inputs |
| `StageResult` | frozen | Terminal outcome |
"""

from .plants import PlantKind, PlantRecord, MeasureRecord
from .catalog import ReferenceCatalog
from .selection import SelectionSet
from .inputs import SiteFactors, ManagementMeasures, ExclusionCriteria
from .outcomes import Stage, OutcomeKind, StageResult

__all__ = [
    "PlantKind",
    "PlantRecord",
    "MeasureRecord",
    "ReferenceCatalog",
    "SelectionSet",
    "SiteFactors",
    "ManagementMeasures",
    "ExclusionCriteria",
    "Stage",
    "OutcomeKind",
    "StageResult",
]
