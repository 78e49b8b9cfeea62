"""
Module: layout.config

Purpose:
    Configuration for the catalog page template.
    Defines page dimensions, margins, band heights, grid shape and the
    fixed text shown on every page.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Key Functions:
    - page_size_in_units(): Named paper size converted to page units

Dependencies:
    - reportlab.lib.pagesizes: Standard paper sizes
    - dataclasses (std)

Used By:
    - layout.template: Template construction
    - controller: Build pipeline
    - cli: Command-line overrides
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional, Tuple

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER

logger = logging.getLogger(__name__)


# Page units are picas by default (12pt each); Letter is 51p x 66p.
DEFAULT_UNIT_PT = 12.0
DEFAULT_PAGE_WIDTH = LETTER[0] / DEFAULT_UNIT_PT
DEFAULT_PAGE_HEIGHT = LETTER[1] / DEFAULT_UNIT_PT

DEFAULT_TITLE = "TITLE\nDESCRIPTION"

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "letter": LETTER,
    "legal": LEGAL,
    "a3": A3,
    "a4": A4,
    "a5": A5,
}


def page_size_in_units(name: str, unit_pt: float = DEFAULT_UNIT_PT) -> Tuple[float, float]:
    """
    Look up a named paper size and convert it from points to page units.

    Args:
        name: Paper name, case-insensitive ("letter", "a4", ...)
        unit_pt: Points per page unit

    Returns:
        (width, height) in page units

    Raises:
        ValueError: If the paper name is unknown

    Example:
        >>> page_size_in_units("letter")
        (51.0, 66.0)
    """
    try:
        width_pt, height_pt = PAGE_SIZES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(PAGE_SIZES))
        raise ValueError(f"Unknown page size {name!r} (expected one of: {known})") from None
    return (width_pt / unit_pt, height_pt / unit_pt)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for the catalog page layout (immutable).

    Field values are only range-checked here. Whether the bands and grid
    actually fit on the page is checked when the template is built, which
    raises InvalidGridError.

    Attributes:
        page_width: Page width in page units
        page_height: Page height in page units
        unit_pt: Points per page unit (12 = picas)
        margin: Margin on all four sides
        header_height: Height of the title strip
        column_label_height: Height of the column-label band
        footer_height: Height of the page-number strip
        rows: Image grid rows
        cols: Image grid columns (also the number of column labels)
        gutter: Spacing between grid cells
        caption_height: Height of the caption band under each image
        title: Header text
        column_labels: Column titles, left to right (None = "Column N")

    Example:
        >>> config = LayoutConfig()
        >>> config.frames_per_page
        9
    """

    # Page
    page_width: float = DEFAULT_PAGE_WIDTH
    page_height: float = DEFAULT_PAGE_HEIGHT
    unit_pt: float = DEFAULT_UNIT_PT
    margin: float = 3.0

    # Bands
    header_height: float = 3.0
    column_label_height: float = 3.0
    footer_height: float = 3.0

    # Image grid
    rows: int = 3
    cols: int = 3
    gutter: float = 1.0
    caption_height: float = 2.0

    # Text
    title: str = DEFAULT_TITLE
    column_labels: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.unit_pt <= 0:
            raise ValueError(f"unit_pt must be positive: {self.unit_pt}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        for name in ("header_height", "column_label_height", "footer_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1: {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1: {self.cols}")
        if self.gutter < 0:
            raise ValueError(f"gutter must be non-negative: {self.gutter}")
        if self.caption_height <= 0:
            raise ValueError(f"caption_height must be positive: {self.caption_height}")
        if self.column_labels is not None:
            if not isinstance(self.column_labels, tuple):
                # Keep the dataclass hashable when built from lists
                object.__setattr__(self, "column_labels", tuple(self.column_labels))
            if len(self.column_labels) != self.cols:
                raise ValueError(
                    f"Expected {self.cols} column labels, got {len(self.column_labels)}"
                )

    @property
    def frames_per_page(self) -> int:
        """Number of image frames on each page."""
        return self.rows * self.cols

    @property
    def resolved_column_labels(self) -> Tuple[str, ...]:
        """Column titles, defaulting to "Column 1".."Column N"."""
        if self.column_labels is not None:
            return self.column_labels
        return tuple(f"Column {i}" for i in range(1, self.cols + 1))

    @property
    def page_size_pt(self) -> Tuple[float, float]:
        """Page size in PDF points."""
        return (self.page_width * self.unit_pt, self.page_height * self.unit_pt)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        data = asdict(self)
        data["column_labels"] = list(self.resolved_column_labels)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LayoutConfig:
        """
        Build a config from a dict (e.g. a parsed JSON file).

        Unknown keys are ignored with a warning. A ``page_size`` key names a
        paper size and sets page_width/page_height unless those are given
        explicitly.

        Raises:
            ValueError: If a value has the wrong type, is out of range, or
                names an unknown paper
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "page_size":
                continue
            if key not in known:
                logger.warning(f"Ignoring unknown layout setting: {key}")
                continue
            kwargs[key] = _coerce_setting(key, value)

        if "page_size" in data:
            if not isinstance(data["page_size"], str):
                raise ValueError(f"page_size must be a paper name: {data['page_size']!r}")
            unit_pt = kwargs.get("unit_pt", DEFAULT_UNIT_PT)
            width, height = page_size_in_units(data["page_size"], unit_pt)
            kwargs.setdefault("page_width", width)
            kwargs.setdefault("page_height", height)

        return cls(**kwargs)


_INT_SETTINGS = frozenset({"rows", "cols"})
_TEXT_SETTINGS = frozenset({"title"})


def _coerce_setting(name: str, value: Any) -> Any:
    """
    Convert one JSON setting to its field type.

    Numbers given as numeric strings ("2", "1.5") are accepted. Booleans,
    nulls and containers are rejected for scalar fields.

    Raises:
        ValueError: If the value cannot be converted
    """
    if name == "column_labels":
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"column_labels must be a list of strings: {value!r}")
        return tuple(str(label) for label in value)

    if name in _TEXT_SETTINGS:
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            raise ValueError(f"{name} must be text: {value!r}")
        return str(value)

    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{name} must be a number: {value!r}")
    try:
        number = float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite: {value!r}")

    if name in _INT_SETTINGS:
        if not number.is_integer():
            raise ValueError(f"{name} must be a whole number: {value!r}")
        return int(number)
    return number
