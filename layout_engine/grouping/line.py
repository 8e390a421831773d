"""
Line Accumulator
================
Folds fragments fed by the caller into one visual text line, keeping one
member per column slot.
"""

from typing import List, Optional, Dict, Any, Tuple

from ..geometry import GeometricZone
from ..page_model import TextFragment


class LineAccumulator(GeometricZone):
    """
    A text line whose bounding box is the union of its fragments.

    A fragment that horizontally overlaps an existing member is merged into
    that member; otherwise it becomes a new member. Each incoming fragment
    is checked against the members as they stand; members are not re-folded
    when a merge widens one until it reaches a neighbour.
    """

    def __init__(self):
        super().__init__(0, 0, 0, 0)
        self.fragments: List[TextFragment] = []

    def __len__(self) -> int:
        return len(self.fragments)

    def __repr__(self) -> str:
        texts = [f.text for f in sorted(self.fragments, key=lambda f: f.top)]
        return (
            f"<LineAccumulator: top={self.top}, left={self.left}, width={self.width}, "
            f"height={self.height}, fragments=[{'], ['.join(texts)}]>"
        )

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    @property
    def bbox(self) -> Optional[Tuple[float, float, float, float]]:
        """(top, left, bottom, right), or None before the first append"""
        if self.is_empty:
            return None
        return (self.top, self.left, self.bottom, self.right)

    @property
    def text(self) -> str:
        """Member texts left to right, separated by a single space"""
        return ' '.join(f.text for f in sorted(self.fragments, key=lambda f: f.left))

    def append(self, fragment: TextFragment) -> None:
        if self.is_empty:
            self.fragments.append(fragment)
            self.top = fragment.top
            self.left = fragment.left
            self.width = fragment.width
            self.height = fragment.height
            return

        in_same_column = next(
            (f for f in self.fragments if f.horizontally_overlaps(fragment)), None
        )
        if in_same_column is not None:
            in_same_column.merge(fragment)
        else:
            self.fragments.append(fragment)
        self.merge(fragment)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d['texts'] = [f.to_dict() for f in self.fragments]
        return d
