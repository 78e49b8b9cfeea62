"""
Unit tests for CatalogImage and display-name derivation.
"""

from pathlib import Path

import pytest

from image_catalog.core.models import CatalogImage, display_name


class TestDisplayName:
    """Tests for display_name()."""

    def test_display_name_when_multiple_dots_then_strips_last_only(self):
        assert display_name("/a/b/photo.final.JPG") == "photo.final"

    def test_display_name_when_no_extension_then_whole_name(self):
        assert display_name("noext") == "noext"

    @pytest.mark.parametrize("path, expected", [
        ("a.b.jpg", "a.b"),
        ("plate.tif", "plate"),
        ("/scans/2020/plate_01.tiff", "plate_01"),
        ("C:\\scans\\plate_02.psd", "plate_02"),
        ("dir.with.dots/shot", "shot"),
        ("trailing.", "trailing"),
        (".hidden", ".hidden"),
    ])
    def test_display_name_when_various_paths_then_expected(self, path, expected):
        assert display_name(path) == expected

    def test_display_name_when_path_object_then_same_as_string(self):
        assert display_name(Path("/x/y/img.png")) == "img"


class TestCatalogImage:
    """Tests for CatalogImage dataclass."""

    def test_from_path_when_string_then_derives_display_name(self):
        image = CatalogImage.from_path("/photos/beach.day.jpg")
        assert image.path == Path("/photos/beach.day.jpg")
        assert image.display_name == "beach.day"
        assert image.filename == "beach.day.jpg"

    def test_catalog_image_is_immutable(self):
        image = CatalogImage.from_path("a.png")
        with pytest.raises(AttributeError):
            image.display_name = "b"
