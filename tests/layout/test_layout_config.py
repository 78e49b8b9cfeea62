"""
Unit tests for LayoutConfig.
"""

import pytest

from image_catalog.layout import LayoutConfig, page_size_in_units


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_defaults_then_reference_layout(self):
        """Default parameters describe the reference layout."""
        # Act
        config = LayoutConfig()

        # Assert
        assert config.page_width == pytest.approx(51)
        assert config.page_height == pytest.approx(66)
        assert config.margin == 3
        assert config.gutter == 1
        assert config.caption_height == 2
        assert config.frames_per_page == 9
        assert config.resolved_column_labels == ("Column 1", "Column 2", "Column 3")

    def test_page_size_pt_when_defaults_then_letter(self):
        assert LayoutConfig().page_size_pt == pytest.approx((612, 792))

    @pytest.mark.parametrize("field, value, message", [
        ("page_width", 0, "page_width must be positive"),
        ("page_height", -1, "page_height must be positive"),
        ("unit_pt", 0, "unit_pt must be positive"),
        ("margin", -1, "margin must be non-negative"),
        ("header_height", 0, "header_height must be positive"),
        ("rows", 0, "rows must be >= 1"),
        ("cols", 0, "cols must be >= 1"),
        ("gutter", -0.5, "gutter must be non-negative"),
        ("caption_height", 0, "caption_height must be positive"),
    ])
    def test_init_when_out_of_range_then_raises_error(self, field, value, message):
        with pytest.raises(ValueError, match=message):
            LayoutConfig(**{field: value})

    def test_init_when_label_count_differs_from_cols_then_raises_error(self):
        with pytest.raises(ValueError, match="Expected 3 column labels"):
            LayoutConfig(column_labels=("A", "B"))

    def test_init_when_labels_given_as_list_then_stored_as_tuple(self):
        config = LayoutConfig(column_labels=["A", "B", "C"])
        assert config.column_labels == ("A", "B", "C")
        hash(config)

    def test_init_when_huge_margin_then_accepted(self):
        """Fit against the page is checked when the template is built."""
        assert LayoutConfig(margin=30).margin == 30

    def test_from_dict_when_unknown_key_then_ignored(self, caplog):
        config = LayoutConfig.from_dict({"rows": 2, "colour": "red"})
        assert config.rows == 2
        assert "colour" in caplog.text

    def test_from_dict_when_page_size_then_sets_dimensions(self):
        config = LayoutConfig.from_dict({"page_size": "A4"})
        assert config.page_width == pytest.approx(595.2756 / 12, rel=1e-4)
        assert config.page_height == pytest.approx(841.8898 / 12, rel=1e-4)

    def test_from_dict_when_explicit_width_and_page_size_then_width_wins(self):
        config = LayoutConfig.from_dict({"page_size": "letter", "page_width": 40})
        assert config.page_width == 40
        assert config.page_height == pytest.approx(66)

    def test_from_dict_when_labels_list_then_tuple(self):
        config = LayoutConfig.from_dict({"column_labels": ["x", "y", "z"]})
        assert config.column_labels == ("x", "y", "z")

    def test_from_dict_when_numeric_strings_then_converted(self):
        config = LayoutConfig.from_dict({"rows": "2", "gutter": "0.5", "margin": 2})
        assert config.rows == 2
        assert isinstance(config.rows, int)
        assert config.gutter == 0.5
        assert isinstance(config.margin, float)

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"rows": "two"}, "rows must be a number"),
            ({"rows": 2.5}, "rows must be a whole number"),
            ({"cols": True}, "cols must be a number"),
            ({"margin": None}, "margin must be a number"),
            ({"gutter": [1]}, "gutter must be a number"),
            ({"caption_height": "nan"}, "caption_height must be finite"),
            ({"title": {"text": "x"}}, "title must be text"),
            ({"column_labels": "ABC"}, "column_labels must be a list"),
            ({"page_size": 4}, "page_size must be a paper name"),
        ],
    )
    def test_from_dict_when_wrong_type_then_raises_value_error(self, data, message):
        with pytest.raises(ValueError, match=message):
            LayoutConfig.from_dict(data)

    def test_from_dict_when_numeric_title_then_text(self):
        assert LayoutConfig.from_dict({"title": 2024}).title == "2024"

    def test_to_dict_when_default_labels_then_resolved(self):
        data = LayoutConfig().to_dict()
        assert data["column_labels"] == ["Column 1", "Column 2", "Column 3"]
        assert data["rows"] == 3


class TestPageSizeInUnits:

    def test_page_size_when_letter_then_picas(self):
        assert page_size_in_units("letter") == pytest.approx((51, 66))

    def test_page_size_when_points_unit_then_points(self):
        assert page_size_in_units("LETTER", unit_pt=1) == pytest.approx((612, 792))

    def test_page_size_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown page size"):
            page_size_in_units("b5")
