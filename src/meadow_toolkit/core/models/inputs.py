"""
Module: inputs

Purpose:
    Boolean input records for the management and seeding stages.
    Decouples the decision rules from whatever collected the checkboxes
    (GUI toggles, CLI flags, test fixtures).

Key Classes:
    - SiteFactors: Two site factors, 2 points each
    - ManagementMeasures: Five candidate measures, 1 point each
    - ExclusionCriteria: Four reseeding exclusion flags

Dependencies:
    - dataclasses (std)

Used By:
    - engine.stages: Scoring and exclusion rules
    - cli, gui.main_window: Input collection
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Iterable, Tuple


def _count_true(record) -> int:
    return sum(1 for f in fields(record) if getattr(record, f.name))


@dataclass(frozen=True)
class SiteFactors:
    """
    Site factors read on the management stage.

    Attributes:
        neighbors: A neighbouring parcel already has Q2 quality (seed source)
        structure: The parcel has structural diversity (edges, hedges, slopes)
    """
    neighbors: bool = False
    structure: bool = False

    NAMES: ClassVar[Tuple[str, ...]] = ("neighbors", "structure")

    @property
    def true_count(self) -> int:
        return _count_true(self)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SiteFactors:
        """Build from factor names; unknown names raise ValueError."""
        return cls(**_flags_from_names(cls.NAMES, names, "site factor"))


@dataclass(frozen=True)
class ManagementMeasures:
    """
    Management measures the farmer commits to.

    Attributes:
        hay: Hay making instead of silage
        cut_time: Later first cut
        late_use: Late first use of the parcel
        autumn_grazing: Autumn grazing only
        early: Early-season use restricted
    """
    hay: bool = False
    cut_time: bool = False
    late_use: bool = False
    autumn_grazing: bool = False
    early: bool = False

    # Fixed measure identifiers as used in measures.json
    MEASURE_IDS: ClassVar[Dict[str, str]] = {
        "meas-hay": "hay",
        "meas-cut-time": "cut_time",
        "meas-late-use": "late_use",
        "meas-autumn-grazing": "autumn_grazing",
        "meas-early": "early",
    }

    @property
    def true_count(self) -> int:
        return _count_true(self)

    @classmethod
    def from_ids(cls, measure_ids: Iterable[str]) -> ManagementMeasures:
        """
        Build from catalog measure ids like "meas-hay".

        Raises:
            ValueError: If an id is not one of the five candidate measures
        """
        flags: Dict[str, bool] = {}
        for measure_id in measure_ids:
            try:
                flags[cls.MEASURE_IDS[measure_id]] = True
            except KeyError:
                raise ValueError(f"Unknown measure id: {measure_id!r}") from None
        return cls(**flags)


@dataclass(frozen=True)
class ExclusionCriteria:
    """
    Site conditions that rule out reseeding.

    Attributes:
        shade: Unsuitable exposition or shade
        wet: Excess wetness
        high_yield: Excess yield / fertility
        weeds: Problematic weed pressure
    """
    shade: bool = False
    wet: bool = False
    high_yield: bool = False
    weeds: bool = False

    NAMES: ClassVar[Tuple[str, ...]] = ("shade", "wet", "high_yield", "weeds")

    @property
    def any(self) -> bool:
        """True if at least one exclusion applies."""
        return self.shade or self.wet or self.high_yield or self.weeds

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ExclusionCriteria:
        """Build from flag names; "yield" is accepted for high_yield."""
        aliased = ["high_yield" if name == "yield" else name for name in names]
        return cls(**_flags_from_names(cls.NAMES, aliased, "exclusion criterion"))


def _flags_from_names(allowed: Tuple[str, ...], names: Iterable[str], label: str) -> Dict[str, bool]:
    flags: Dict[str, bool] = {}
    for name in names:
        if name not in allowed:
            raise ValueError(f"Unknown {label}: {name!r} (expected one of {', '.join(allowed)})")
        flags[name] = True
    return flags
