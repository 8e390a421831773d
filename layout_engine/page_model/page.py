"""
Page and Ruling
===============
Page-level containers handed over by the extractor: the page rectangle with
its text fragments and detected rule lines.
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from ..geometry import GeometricZone
from ..types import Area
from .fragment import TextFragment


@dataclass
class Ruling(GeometricZone):
    """A detected straight border or rule segment."""
    color: Any = None

    @property
    def is_horizontal(self) -> bool:
        return self.height == 0 and self.width > 0

    @property
    def is_vertical(self) -> bool:
        return self.width == 0 and self.height > 0

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d['color'] = self.color
        return d


class Page(GeometricZone):
    """
    A page anchored at (0, 0).

    Attributes:
        rotation: Page rotation in degrees
        number: 1-indexed page number
        texts: Text fragments in extractor order
        rulings: Rule lines found on the page
    """

    def __init__(
        self,
        width: float,
        height: float,
        rotation: int = 0,
        number: int = 1,
        texts: Optional[List[TextFragment]] = None,
        rulings: Optional[List[Ruling]] = None,
    ):
        super().__init__(0, 0, width, height)
        self.rotation = rotation
        self.number = number
        self.texts = texts if texts is not None else []
        self.rulings = rulings if rulings is not None else []

    def __repr__(self) -> str:
        return (
            f"Page(number={self.number}, width={self.width}, height={self.height}, "
            f"rotation={self.rotation}, texts={len(self.texts)}, rulings={len(self.rulings)})"
        )

    def get_text(self, area: Optional[Area] = None) -> List[TextFragment]:
        """
        Fragments lying strictly inside area = (top, left, bottom, right).

        Edges are exclusive: a fragment touching the area border is left out.
        Defaults to the whole page.
        """
        if area is None:
            area = (0, 0, self.height, self.width)
        top, left, bottom, right = area
        return [
            t for t in self.texts
            if t.top > top and t.bottom < bottom and t.left > left and t.right < right
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'number': self.number,
            'rotation': self.rotation,
            'texts': [t.to_dict() for t in self.texts],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
