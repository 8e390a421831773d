"""
Text Fragment
=============
A positioned glyph run with font metrics, the atomic unit of reconstructed
text. Decides whether two neighbouring fragments are one run, are separated
by a space, or are unrelated, and concatenates them in reading order.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..geometry import GeometricZone
from ..types import TypeMismatchError


@dataclass
class TextFragment(GeometricZone):
    """
    Text placed on a page.

    Attributes:
        font: Font identifier as reported by the extractor
        font_size: Font size in points
        text: Text content, grows in place as neighbours are merged in
        width_of_space: Width of one space glyph in this font and size
    """
    font: str
    font_size: float
    text: str
    width_of_space: float

    TOLERANCE_FACTOR = 0.25
    SPACE_DOWN_TOLERANCE = 0.95

    def _tolerance(self, other: 'TextFragment') -> float:
        return ((self.font_size + other.font_size) / 2) * self.TOLERANCE_FACTOR

    def should_merge(self, other: 'TextFragment') -> bool:
        """
        More or less returns True if distance < tolerance.

        The horizontal gap test is always required, even when the fragments
        overlap vertically or exactly one of them has zero height:
        (overlaps or one_zero_height) and gap < tolerance.
        """
        if not isinstance(other, TextFragment):
            raise TypeMismatchError('should_merge', other)
        overlaps = self.vertically_overlaps(other)
        tolerance = self._tolerance(other)

        one_zero_height = (
            (self.height == 0 and other.height != 0) or
            (other.height == 0 and self.height != 0)
        )
        return (overlaps or one_zero_height) and self.horizontal_distance(other) < tolerance

    def should_add_space(self, other: 'TextFragment') -> bool:
        """More or less returns True if space_width * 0.95 <= distance <= space_width + tolerance"""
        if not isinstance(other, TextFragment):
            raise TypeMismatchError('should_add_space', other)
        overlaps = self.vertically_overlaps(other)

        up_tolerance = self._tolerance(other)
        down_tolerance = self.SPACE_DOWN_TOLERANCE

        dist = abs(self.horizontal_distance(other))
        lower = self.width_of_space * down_tolerance
        upper = self.width_of_space + up_tolerance
        return overlaps and lower <= dist <= upper

    def merge(self, other: 'TextFragment') -> None:
        """
        Absorb other: concatenate its text and grow to the union bounding box.

        other's text is prepended when it shares the column and starts above
        self (stacked or superscript glyphs); otherwise it is appended.
        """
        if not isinstance(other, TextFragment):
            raise TypeMismatchError('merge', other)
        if self.horizontally_overlaps(other) and other.top < self.top:
            self.text = other.text + self.text
        else:
            self.text = self.text + other.text
        super().merge(other)

    def to_dict(self) -> Dict[str, Any]:
        """Zone fields plus font and text (font_size and width_of_space stay internal)"""
        d = super().to_dict()
        d['font'] = self.font
        d['text'] = self.text
        return d
