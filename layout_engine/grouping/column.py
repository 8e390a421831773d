"""
Column Accumulator
==================
Collects the fragments of one table column, top to bottom. Fragments are
never merged at this level; each line keeps its own entry.
"""

from typing import List, Optional, Dict, Any

from ..geometry import GeometricZone
from ..page_model import TextFragment


class ColumnAccumulator(GeometricZone):
    """
    A column band defined by left/width; top/height grow as fragments arrive.

    Members stay sorted ascending by top after every append. The sort is
    stable, so fragments with equal tops keep their arrival order.
    """

    def __init__(self, left: float, width: float, fragments: Optional[List[TextFragment]] = None):
        super().__init__(0, left, width, 0)
        self.fragments: List[TextFragment] = []
        for f in fragments or []:
            self.append(f)

    def __len__(self) -> int:
        return len(self.fragments)

    def __repr__(self) -> str:
        texts = [f.text for f in self.fragments]
        return (
            f"<ColumnAccumulator: top={self.top}, left={self.left}, width={self.width}, "
            f"height={self.height}, fragments=[{'], ['.join(texts)}]>"
        )

    def append(self, fragment: TextFragment) -> None:
        if not self.fragments:
            # vertical extent starts at the first fragment, not at the page top
            self.top = fragment.top
            self.height = 0
        self.fragments.append(fragment)
        self.update_boundaries(fragment)
        self.fragments.sort(key=lambda f: f.top)

    def update_boundaries(self, fragment: TextFragment) -> None:
        self.merge(fragment)

    def contains(self, other: 'ColumnAccumulator') -> bool:
        """This column can be merged with other_column?"""
        return self.horizontally_overlaps(other)

    def average_line_distance(self) -> Optional[float]:
        """
        Average distance between the tops of consecutive members.

        The sum of gaps is divided by the member count, not the gap count.
        Returns None for fewer than two members.
        """
        n = len(self.fragments)
        if n < 2:
            return None
        total = sum(
            self.fragments[i].top - self.fragments[i - 1].top
            for i in range(1, n)
        )
        return total / n

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d['texts'] = [f.to_dict() for f in self.fragments]
        return d
