"""
Module: catalog.loader

Purpose:
    Load the reference catalog at startup. plants.json and measures.json
    are read jointly; if either fails, loading aborts and no stage of the
    assessment becomes reachable.

Key Functions:
    - load_catalog(): Load both resources into a ReferenceCatalog
    - resolve_data_dir(): Pick the catalog directory

Key Classes:
    - CatalogLoadError: The single startup failure, naming the resource

Dependencies:
    - concurrent.futures (std)
    - pathlib (std)
    - catalog.parser: Record parsing

Used By:
    - cli: Headless assessment
    - gui.main_window: Wizard startup
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, TypeVar

from meadow_toolkit.core.models import MeasureRecord, PlantRecord, ReferenceCatalog

from .parser import ParseError, parse_measure_from_dict, parse_plant_from_dict, read_records

logger = logging.getLogger(__name__)

PLANTS_FILE = "plants.json"
MEASURES_FILE = "measures.json"
DATA_DIR_ENV = "MEADOW_DATA_DIR"

T = TypeVar("T")


class CatalogLoadError(Exception):
    """
    Loading a catalog resource failed.

    Attributes:
        resource: File name of the failing resource ("plants.json" or
            "measures.json")
    """

    def __init__(self, resource: str, message: str):
        super().__init__(message)
        self.resource = resource

    @property
    def user_message(self) -> str:
        """Static message shown to the user instead of the wizard."""
        return (
            f"Fehler beim Laden der Daten ({self.resource}). "
            f"Bitte prüfen Sie, ob die Dateien {PLANTS_FILE} und {MEASURES_FILE} vorhanden sind."
        )


def resolve_data_dir(data_dir: Optional[Path] = None) -> Path:
    """
    Return the catalog directory.

    Order: explicit argument, $MEADOW_DATA_DIR, bundled package data.
    """
    if data_dir is not None:
        return Path(data_dir)
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path(__file__).resolve().parent.parent / "data"


def load_catalog(
    data_dir: Optional[Path] = None,
    *,
    plants_path: Optional[Path] = None,
    measures_path: Optional[Path] = None,
) -> ReferenceCatalog:
    """
    Load plants and measures into an immutable catalog.

    Both files are read concurrently and awaited together. Failures are
    not retried.

    Args:
        data_dir: Directory holding plants.json and measures.json
        plants_path: Override for the plants file
        measures_path: Override for the measures file

    Returns:
        ReferenceCatalog with records in file order

    Raises:
        CatalogLoadError: If either resource is missing or malformed.
            When both fail, the plants failure is reported.

    Example:
        >>> catalog = load_catalog()
        >>> len(catalog.quality_plants) > 0
        True
    """
    base = resolve_data_dir(data_dir)
    plants_path = Path(plants_path) if plants_path else base / PLANTS_FILE
    measures_path = Path(measures_path) if measures_path else base / MEASURES_FILE

    with ThreadPoolExecutor(max_workers=2) as executor:
        plants_future = executor.submit(_load_resource, plants_path, parse_plant_from_dict)
        measures_future = executor.submit(_load_resource, measures_path, parse_measure_from_dict)
        futures = ((PLANTS_FILE, plants_future), (MEASURES_FILE, measures_future))

        results = {}
        for resource, future in futures:
            try:
                results[resource] = future.result()
            except ParseError as e:
                logger.error(f"Failed to load {resource}: {e}")
                raise CatalogLoadError(resource, f"Failed to load {resource}: {e}") from e

    plants: List[PlantRecord] = results[PLANTS_FILE]
    measures: List[MeasureRecord] = results[MEASURES_FILE]
    catalog = ReferenceCatalog(plants=tuple(plants), measures=tuple(measures))

    logger.info(
        f"Loaded {len(plants)} plants ({len(catalog.quality_plants)} Q2 indicators) "
        f"and {len(measures)} measures from {base}"
    )
    return catalog


def _load_resource(path: Path, parse: Callable[..., T]) -> List[T]:
    records = read_records(path)
    return [parse(record, source=f"{path.name}[{i}]") for i, record in enumerate(records)]
