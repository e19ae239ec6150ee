"""
Tests for plant thumbnail loading.
"""

from pathlib import Path

from meadow_toolkit.catalog.images import load_thumbnail, resolve_image_path
from meadow_toolkit.core.models import PlantRecord


class TestResolveImagePath:

    def test_no_image_then_none(self, tmp_path):
        assert resolve_image_path(PlantRecord("a", "b", "c"), tmp_path) is None

    def test_remote_url_then_none(self, tmp_path):
        plant = PlantRecord("a", "b", "c", image="https://example.org/salvia.jpg")
        assert resolve_image_path(plant, tmp_path) is None

    def test_relative_resolves_against_base(self, tmp_path):
        plant = PlantRecord("a", "b", "c", image="img/salvia.jpg")
        assert resolve_image_path(plant, tmp_path) == tmp_path / "img" / "salvia.jpg"


class TestLoadThumbnail:

    def test_load_when_image_exists_then_fits_size(self, sample_image: Path):
        # Arrange
        plant = PlantRecord("a", "b", "c", image=sample_image.name)

        # Act
        thumb = load_thumbnail(plant, sample_image.parent, size=(200, 200))

        # Assert
        assert thumb is not None
        assert thumb.mode == "RGB"
        assert thumb.size == (200, 100)  # aspect ratio kept

    def test_load_when_file_missing_then_none(self, tmp_path):
        plant = PlantRecord("a", "b", "c", image="missing.png")
        assert load_thumbnail(plant, tmp_path) is None

    def test_load_when_not_an_image_then_none(self, tmp_path, caplog):
        (tmp_path / "broken.png").write_bytes(b"not a png")
        plant = PlantRecord("a", "b", "c", image="broken.png")

        assert load_thumbnail(plant, tmp_path) is None
        assert "Cannot open image" in caplog.text

    def test_load_when_no_image_then_none(self, tmp_path):
        assert load_thumbnail(PlantRecord("a", "b", "c"), tmp_path) is None
