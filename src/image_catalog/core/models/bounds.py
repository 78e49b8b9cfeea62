"""
Module: bounds

Purpose:
    Provides the Bounds dataclass - an axis-aligned rectangle on a page,
    expressed in page units as (top, left, bottom, right). The y axis
    grows downward, so ``top`` is the smaller vertical coordinate.

Key Functions:
    - Bounds.contains_point(x, y): Check if a point is inside the rectangle
    - Bounds.inset(amount): Shrink the rectangle on all sides
    - Bounds.split_bottom(height): Split off a band from the bottom edge
    - Bounds.to_dict(): Serialize for JSON
    - Bounds.from_dict(data): Deserialize from JSON

Dependencies:
    - dataclasses (std)

Used By:
    - layout.grid: Cell geometry
    - layout.template: Region bounds
    - output surfaces: Region placement
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Rectangle on a page in page units.

    Attributes:
        top: Y-coordinate of the top edge
        left: X-coordinate of the left edge
        bottom: Y-coordinate of the bottom edge
        right: X-coordinate of the right edge

    Invariants:
        - top < bottom
        - left < right

    Example:
        >>> b = Bounds(top=3, left=3, bottom=6, right=48)
        >>> b.width, b.height
        (45, 3)
    """

    top: float
    left: float
    bottom: float
    right: float

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.bottom <= self.top:
            raise ValueError(f"bottom must be > top: {self.bottom} <= {self.top}")
        if self.right <= self.left:
            raise ValueError(f"right must be > left: {self.right} <= {self.left}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def width(self) -> float:
        """Horizontal extent of the rectangle."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """Vertical extent of the rectangle."""
        return self.bottom - self.top

    @property
    def center(self) -> Tuple[float, float]:
        """(x, y) of the rectangle's center."""
        return (self.left + self.width / 2, self.top + self.height / 2)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def contains_point(self, x: float, y: float) -> bool:
        """
        Check if a point lies inside the rectangle (edges included).

        Example:
            >>> Bounds(0, 0, 10, 10).contains_point(10, 5)
            True
        """
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def contains(self, other: Bounds, tolerance: float = 1e-9) -> bool:
        """Check if another rectangle lies fully inside this one."""
        return (
            other.top >= self.top - tolerance
            and other.left >= self.left - tolerance
            and other.bottom <= self.bottom + tolerance
            and other.right <= self.right + tolerance
        )

    def overlaps(self, other: Bounds) -> bool:
        """Check if two rectangles share any interior area."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Rectangles
    # ─────────────────────────────────────────────────────────────────────────

    def inset(self, amount: float) -> Bounds:
        """
        Return a rectangle shrunk by ``amount`` on every side.

        Raises:
            ValueError: If the inset rectangle would be empty
        """
        return Bounds(
            top=self.top + amount,
            left=self.left + amount,
            bottom=self.bottom - amount,
            right=self.right - amount,
        )

    def split_bottom(self, height: float) -> Tuple[Bounds, Bounds]:
        """
        Split off a band of ``height`` from the bottom edge.

        Returns:
            (upper, lower) where lower is the bottom band and the two
            rectangles abut exactly.

        Raises:
            ValueError: If height is not strictly between 0 and self.height
        """
        if not 0 < height < self.height:
            raise ValueError(
                f"split height must be in (0, {self.height}): {height}"
            )
        boundary = self.bottom - height
        upper = Bounds(self.top, self.left, boundary, self.right)
        lower = Bounds(boundary, self.left, self.bottom, self.right)
        return upper, lower

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_list(self) -> list[float]:
        """[top, left, bottom, right], the geometric-bounds ordering."""
        return [self.top, self.left, self.bottom, self.right]

    def to_dict(self) -> Dict[str, float]:
        """Serialize to a JSON-compatible dict."""
        return {
            "top": self.top,
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Bounds:
        """
        Deserialize from a dict produced by to_dict().

        Raises:
            KeyError: If a required key is missing
            ValueError: If the values violate the invariants
        """
        return cls(
            top=float(data["top"]),
            left=float(data["left"]),
            bottom=float(data["bottom"]),
            right=float(data["right"]),
        )
