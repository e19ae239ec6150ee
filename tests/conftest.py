import json
import os
import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import meadow_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from meadow_toolkit.core.models import MeasureRecord, PlantRecord, ReferenceCatalog


Q2_IDS = [f"q{i:02d}" for i in range(1, 13)]
POTENTIAL_IDS = [f"p{i:02d}" for i in range(1, 11)]
MEASURE_IDS = ["meas-hay", "meas-cut-time", "meas-late-use", "meas-autumn-grazing", "meas-early"]


def make_plant_dicts() -> list[dict]:
    plants = [
        {"id": pid, "name": f"Q2 Pflanze {pid}", "botanical_name": f"Planta {pid}", "image": "", "is_q2": True}
        for pid in Q2_IDS
    ]
    plants += [
        {"id": pid, "name": f"Potenzial {pid}", "botanical_name": f"Herba {pid}", "is_q2": False}
        for pid in POTENTIAL_IDS
    ]
    return plants


def make_measure_dicts() -> list[dict]:
    return [{"id": mid, "name": mid.replace("meas-", "").title(), "points": 1} for mid in MEASURE_IDS]


# Common test fixtures
@pytest.fixture
def catalog() -> ReferenceCatalog:
    """Catalog with 12 Q2 and 10 potential plants."""
    plants = tuple(
        PlantRecord(d["id"], d["name"], d["botanical_name"], d.get("image") or None, d["is_q2"])
        for d in make_plant_dicts()
    )
    measures = tuple(MeasureRecord(d["id"], d["name"]) for d in make_measure_dicts())
    return ReferenceCatalog(plants=plants, measures=measures)


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Directory holding plants.json and measures.json."""
    (tmp_path / "plants.json").write_text(json.dumps(make_plant_dicts()), encoding="utf-8")
    (tmp_path / "measures.json").write_text(json.dumps(make_measure_dicts()), encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (800, 400), color="green")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
