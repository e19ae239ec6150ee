"""
Meadow Toolkit Core Package

Shared data models for the catalog, engine and front-ends. Nothing here
imports Qt or PIL; the models are plain dataclasses.
"""

from .models import (
    PlantKind,
    PlantRecord,
    MeasureRecord,
    ReferenceCatalog,
    SelectionSet,
    SiteFactors,
    ManagementMeasures,
    ExclusionCriteria,
    Stage,
    OutcomeKind,
    StageResult,
)

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
