"""
Geometric Zone
==============
Axis-aligned rectangle with position (top, left) and extent (width, height).

All queries are pure. `merge` is the only mutation: it grows the zone in
place to the bounding box of itself and another zone.
"""

import json
from dataclasses import dataclass
from typing import Dict, Any

from ..types import Point


@dataclass
class GeometricZone:
    """
    Rectangle in page coordinates (y grows downwards).

    Attributes:
        top: Upper edge
        left: Left edge
        width: Horizontal extent (callers must not pass negative values)
        height: Vertical extent (callers must not pass negative values)
    """
    top: float
    left: float
    width: float
    height: float

    OVERLAP_TOLERANCE = 1e-5

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def midpoint(self) -> Point:
        """Center of the zone as (x, y)"""
        return (self.left + self.width / 2, self.top + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def merge(self, other: 'GeometricZone') -> None:
        """Grow this zone in place to the bounding box of self and other."""
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        # top/left must be final before width/height are derived from them
        self.top = min(self.top, other.top)
        self.left = min(self.left, other.left)
        self.width = right - self.left
        self.height = bottom - self.top

    def horizontal_distance(self, other: 'GeometricZone') -> float:
        """Gap from this zone's right edge to other's left edge (not symmetric)."""
        return abs(other.left - self.right)

    def vertical_distance(self, other: 'GeometricZone') -> float:
        return abs(other.bottom - self.bottom)

    def vertically_overlaps(self, other: 'GeometricZone') -> bool:
        """Roughly, detects if self and other belong to the same line"""
        overlap = max(0, min(self.bottom, other.bottom) - max(self.top, other.top))
        return overlap > 0

    def horizontally_overlaps(self, other: 'GeometricZone') -> bool:
        """Detects if self and other belong to the same column"""
        overlap = max(0, min(self.right, other.right) - max(self.left, other.left))
        return overlap > 0

    def overlap_ratio(self, other: 'GeometricZone') -> float:
        """
        Intersection-over-union of the two rectangles.

        Returns 0.0 when the union area is zero (two empty, disjoint zones).
        """
        intersection_width = max(0, min(self.right, other.right) - max(self.left, other.left))
        intersection_height = max(0, min(self.bottom, other.bottom) - max(self.top, other.top))
        intersection_area = max(0, intersection_width * intersection_height)

        union_area = self.area + other.area - intersection_area
        if union_area <= 0:
            return 0.0
        return intersection_area / union_area

    def overlaps(self, other: 'GeometricZone', ratio_tolerance: float = OVERLAP_TOLERANCE) -> bool:
        return self.overlap_ratio(other) > ratio_tolerance

    def contains_zone(self, other: 'GeometricZone') -> bool:
        """True if other lies entirely within this zone (edges inclusive)"""
        return (
            self.top <= other.top and self.left <= other.left and
            other.bottom <= self.bottom and other.right <= self.right
        )

    def to_dict(self) -> Dict[str, Any]:
        """External projection: {top, left, width, height}"""
        return {
            'top': self.top,
            'left': self.left,
            'width': self.width,
            'height': self.height,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
