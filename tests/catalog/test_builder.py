"""
Tests for CatalogBuilder on the in-memory surface.

Covers page count, image/frame/label pairing, empty trailing frames and
per-image placement failures.
"""

from pathlib import Path

import pytest

from image_catalog.catalog import (
    UNPLACED_MARK,
    CatalogBuilder,
    EmptyInputError,
    PlacementError,
    page_count,
)
from image_catalog.core.models import CatalogImage, FitMode, RegionRole
from image_catalog.layout import LayoutConfig, build_template
from image_catalog.output import InMemorySurface


@pytest.fixture
def template():
    return build_template(LayoutConfig())


class TestPageCount:
    """Tests for page_count()."""

    @pytest.mark.parametrize(
        "n, expected",
        [(1, 1), (8, 1), (9, 1), (10, 2), (18, 2), (19, 3)],
    )
    def test_page_count_when_n_images_then_ceiling_of_n_over_nine(self, n, expected):
        assert page_count(n, 9) == expected

    def test_page_count_when_zero_images_then_zero(self):
        assert page_count(0, 9) == 0

    def test_page_count_when_per_page_invalid_then_raises_error(self):
        with pytest.raises(ValueError):
            page_count(3, 0)


class TestCatalogBuilder:
    """Builder scenarios on the in-memory surface."""

    def test_build_when_ten_images_then_two_pages_and_eight_empty_frames(self, catalog_images, template):
        # Arrange
        images = catalog_images(10)
        surface = InMemorySurface()

        # Act
        result = CatalogBuilder(surface).build(images, template)

        # Assert
        doc = result.document
        assert result.page_count == doc.page_count == 2
        assert result.total_frames == 18
        assert len(result.assignments) == 10
        assert result.ok
        assert result.placed_count == 10
        assert result.empty_frame_count == 8

        frames = surface.find_regions_by_role(doc, RegionRole.IMAGE_FRAME)
        page_two = [f for f in frames if f.page_index == 1]
        assert len(page_two) == 9
        assert page_two[0].image_path == images[9].path
        assert all(f.image_path is None for f in page_two[1:])

    def test_build_when_images_placed_then_frame_and_label_follow_image_order(self, catalog_images, template):
        images = catalog_images(12)
        surface = InMemorySurface()
        result = CatalogBuilder(surface).build(images, template)

        frames = surface.find_regions_by_role(result.document, RegionRole.IMAGE_FRAME)
        labels = surface.find_regions_by_role(result.document, RegionRole.IMAGE_LABEL)
        for i, image in enumerate(images):
            assert frames[i].image_path == image.path
            assert frames[i].fit is FitMode.PROPORTIONAL
            assert labels[i].text == image.display_name
            assert labels[i].page_index == frames[i].page_index

    def test_build_when_labels_written_then_centered(self, catalog_images, template):
        surface = InMemorySurface()
        result = CatalogBuilder(surface).build(catalog_images(3), template)
        for a in result.assignments:
            assert a.label.justification.value == "center"

    def test_build_when_exactly_nine_images_then_single_full_page(self, catalog_images, template):
        result = CatalogBuilder(InMemorySurface()).build(catalog_images(9), template)
        assert result.page_count == 1
        assert result.empty_frame_count == 0

    def test_build_when_no_images_then_raises_error_and_creates_no_document(self, template):
        surface = InMemorySurface()
        with pytest.raises(EmptyInputError):
            CatalogBuilder(surface).build([], template)
        assert surface.documents == []

    def test_build_when_file_missing_then_failure_recorded_and_batch_continues(self, catalog_images, template):
        # Arrange
        images = catalog_images(3)
        missing = CatalogImage.from_path(Path(images[0].path).parent / "gone.png")
        batch = [images[0], missing, images[1]]
        surface = InMemorySurface()

        # Act
        result = CatalogBuilder(surface).build(batch, template)

        # Assert
        assert not result.ok
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert isinstance(failure, PlacementError)
        assert failure.frame_index == 1
        assert failure.image is missing
        assert "gone.png" in str(failure)

        frame, label = result.assignments[1].frame, result.assignments[1].label
        assert frame.image_path is None
        assert label.text == "gone" + UNPLACED_MARK
        assert result.assignments[2].frame.image_path == images[1].path
        assert result.placed_count == 2
        assert result.empty_frame_count == 7

    def test_build_when_document_built_then_master_keeps_static_regions(self, catalog_images, template):
        surface = InMemorySurface()
        result = CatalogBuilder(surface).build(catalog_images(2), template)
        doc = result.document

        master_roles = [r.role for r in doc.master.regions]
        assert master_roles.count(RegionRole.HEADER) == 1
        assert master_roles.count(RegionRole.COLUMN_LABEL) == 3
        assert master_roles.count(RegionRole.FOOTER) == 1
        assert doc.facing_pages is False

        shown = {r.role for r in surface.master_regions_for_page(doc, doc.pages[0])}
        assert shown == {RegionRole.HEADER, RegionRole.COLUMN_LABEL, RegionRole.FOOTER}

    def test_build_when_custom_grid_then_frames_per_page_follow_layout(self, catalog_images):
        template = build_template(LayoutConfig(rows=2, cols=2))
        result = CatalogBuilder(InMemorySurface()).build(catalog_images(5), template)
        assert result.frames_per_page == 4
        assert result.page_count == 2
