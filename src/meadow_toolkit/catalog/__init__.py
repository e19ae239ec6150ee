"""
Module: catalog

Purpose:
    Reference catalog loading from plants.json / measures.json and plant
    thumbnail access.

Key Functions:
    - load_catalog(): Load both catalog resources
    - load_thumbnail(): Plant image with placeholder fallback

Used By:
    - cli, gui
"""

from .loader import (
    load_catalog,
    resolve_data_dir,
    CatalogLoadError,
    PLANTS_FILE,
    MEASURES_FILE,
    DATA_DIR_ENV,
)
from .parser import ParseError, parse_plant_from_dict, parse_measure_from_dict
from .images import load_thumbnail, resolve_image_path

__all__ = [
    "load_catalog",
    "resolve_data_dir",
    "CatalogLoadError",
    "PLANTS_FILE",
    "MEASURES_FILE",
    "DATA_DIR_ENV",
    "ParseError",
    "parse_plant_from_dict",
    "parse_measure_from_dict",
    "load_thumbnail",
    "resolve_image_path",
]
