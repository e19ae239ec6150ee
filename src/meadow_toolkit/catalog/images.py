"""
Module: catalog.images

Purpose:
    Load plant thumbnails for selection cards. A plant without an image,
    or whose image cannot be opened, gets None so the caller can show a
    placeholder instead.

Key Functions:
    - resolve_image_path(): Catalog image reference to filesystem path
    - load_thumbnail(): Open and shrink a plant image

Dependencies:
    - PIL: Image loading and resizing

Used By:
    - gui.widgets.plant_card: Card image
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from meadow_toolkit.core.models import PlantRecord

logger = logging.getLogger(__name__)

DEFAULT_THUMBNAIL_SIZE: Tuple[int, int] = (240, 180)


def resolve_image_path(plant: PlantRecord, base_dir: Path) -> Optional[Path]:
    """
    Resolve the plant's image reference against the catalog directory.

    Returns None when the plant has no image or references a remote URL.
    """
    if not plant.has_image:
        return None
    ref = plant.image.strip()
    if "://" in ref:
        return None
    path = Path(ref)
    return path if path.is_absolute() else base_dir / path


def load_thumbnail(
    plant: PlantRecord,
    base_dir: Path,
    size: Tuple[int, int] = DEFAULT_THUMBNAIL_SIZE,
) -> Optional[Image.Image]:
    """
    Load a thumbnail no larger than `size`, keeping the aspect ratio.

    Args:
        plant: Plant whose image to load
        base_dir: Catalog directory that relative references resolve against
        size: Maximum (width, height)

    Returns:
        RGB PIL image, or None for the placeholder
    """
    path = resolve_image_path(plant, base_dir)
    if path is None:
        return None
    if not path.exists():
        logger.warning(f"Image for {plant.id} not found: {path}")
        return None

    try:
        with Image.open(path) as img:
            thumb = img.convert("RGB")
            thumb.thumbnail(size)
    except OSError as e:
        logger.warning(f"Cannot open image for {plant.id} ({path}): {e}")
        return None
    return thumb
