"""
Unit tests for positional image/frame/label pairing.
"""

import pytest

from image_catalog.catalog import assign
from image_catalog.core.models import Bounds, CatalogImage, Region, RegionRole


def _regions(role, count, per_page=9):
    return [
        Region(region_id=i, role=role, bounds=Bounds(0, 0, 1, 1), page_index=i // per_page)
        for i in range(count)
    ]


def _images(count):
    return [CatalogImage.from_path(f"/imgs/{i:02d}.png") for i in range(count)]


class TestAssign:
    """Tests for assign()."""

    @pytest.mark.parametrize("k", [0, 1, 8, 9, 17, 18])
    def test_assign_when_k_images_then_k_pairs_in_order(self, k):
        # Arrange
        frames = _regions(RegionRole.IMAGE_FRAME, 18)
        labels = _regions(RegionRole.IMAGE_LABEL, 18)
        images = _images(k)

        # Act
        pairs = assign(images, frames, labels)

        # Assert
        assert len(pairs) == k
        for i, pair in enumerate(pairs):
            assert pair.index == i
            assert pair.image is images[i]
            assert pair.frame is frames[i]
            assert pair.label is labels[i]

    def test_assign_when_fewer_images_then_remaining_regions_untouched(self):
        frames = _regions(RegionRole.IMAGE_FRAME, 9)
        labels = _regions(RegionRole.IMAGE_LABEL, 9)
        assign(_images(4), frames, labels)
        assert all(f.is_empty for f in frames)
        assert all(l.is_empty for l in labels)

    def test_assign_when_more_images_than_frames_then_raises_error(self):
        with pytest.raises(ValueError, match="Not enough frames"):
            assign(_images(10), _regions(RegionRole.IMAGE_FRAME, 9), _regions(RegionRole.IMAGE_LABEL, 9))

    def test_assign_when_frame_label_counts_differ_then_raises_error(self):
        with pytest.raises(ValueError, match="mismatch"):
            assign(_images(1), _regions(RegionRole.IMAGE_FRAME, 9), _regions(RegionRole.IMAGE_LABEL, 8))

    def test_assign_when_roles_swapped_then_raises_error(self):
        frames = _regions(RegionRole.IMAGE_LABEL, 9)
        labels = _regions(RegionRole.IMAGE_LABEL, 9)
        with pytest.raises(ValueError, match="expected imageFrame"):
            assign(_images(1), frames, labels)

    def test_assign_when_frame_and_label_on_different_pages_then_raises_error(self):
        frames = _regions(RegionRole.IMAGE_FRAME, 9)
        labels = _regions(RegionRole.IMAGE_LABEL, 9, per_page=1)
        with pytest.raises(ValueError, match="different pages"):
            assign(_images(2), frames, labels)

    def test_assignment_page_index_follows_frame(self):
        pairs = assign(_images(10), _regions(RegionRole.IMAGE_FRAME, 18), _regions(RegionRole.IMAGE_LABEL, 18))
        assert [p.page_index for p in pairs] == [0] * 9 + [1]
