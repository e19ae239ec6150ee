"""
Module: catalog.parser

Purpose:
    Parse plants.json and measures.json into typed records. Only the
    structure needed to build records is checked; the botanical content
    of the catalog is taken as given.

Key Functions:
    - read_records(): Read a JSON array file
    - parse_plant_from_dict(): Build a PlantRecord
    - parse_measure_from_dict(): Build a MeasureRecord

Key Classes:
    - ParseError: Exception for parse failures

Dependencies:
    - json (std)
    - pathlib (std)
    - meadow_toolkit.core.models: PlantRecord, MeasureRecord

Used By:
    - catalog.loader: Catalog loading
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from meadow_toolkit.core.models import MeasureRecord, PlantRecord

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error parsing a catalog file or record."""
    pass


def read_records(path: Path) -> List[Dict[str, Any]]:
    """
    Read a catalog file holding a JSON array of objects.

    Args:
        path: Path to plants.json or measures.json

    Returns:
        List of raw record dicts in file order

    Raises:
        ParseError: If file missing, unreadable, invalid JSON, or not an array
    """
    if not path.exists():
        raise ParseError(f"Catalog file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}")
    except UnicodeDecodeError as e:
        raise ParseError(f"Not valid UTF-8: {path}: {e}")
    except OSError as e:
        raise ParseError(f"Cannot read {path}: {e}")

    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array in {path}, got {type(data).__name__}")

    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ParseError(f"Record {i} in {path} is not an object")

    return data


def parse_plant_from_dict(data: Dict[str, Any], *, source: str = "plants.json") -> PlantRecord:
    """
    Parse one plant record.

    Expected keys: id, name, botanical_name, is_q2 and optionally image.

    Raises:
        ParseError: If required fields are missing or is_q2 is not a boolean
    """
    required = ["id", "name", "botanical_name", "is_q2"]
    missing = [field for field in required if field not in data]
    if missing:
        raise ParseError(f"Missing required fields in {source}: {missing}")

    is_q2 = data["is_q2"]
    if not isinstance(is_q2, bool):
        raise ParseError(f"is_q2 must be a boolean in {source}: {is_q2!r}")

    image = data.get("image")
    try:
        return PlantRecord(
            id=str(data["id"]),
            name=str(data["name"]),
            botanical_name=str(data["botanical_name"]),
            image=str(image) if image else None,
            is_q2=is_q2,
        )
    except ValueError as e:
        raise ParseError(f"Invalid plant record in {source}: {e}")


def parse_measure_from_dict(data: Dict[str, Any], *, source: str = "measures.json") -> MeasureRecord:
    """Parse one measure record (id and name required)."""
    missing = [field for field in ("id", "name") if field not in data]
    if missing:
        raise ParseError(f"Missing required fields in {source}: {missing}")

    try:
        return MeasureRecord(
            id=str(data["id"]),
            name=str(data["name"]),
            description=str(data.get("description", "")),
            points=int(data.get("points", 1)),
        )
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid field type in {source}: {e}")
