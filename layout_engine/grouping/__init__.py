"""
Grouping Module
===============
Stateful accumulation of fragments into lines, columns and words.
- line: LineAccumulator (one member per column slot)
- column: ColumnAccumulator (members sorted by top)
- words: row grouping and word merging
"""

from .line import LineAccumulator
from .column import ColumnAccumulator
from .words import group_rows, merge_fragments

__all__ = [
    'LineAccumulator', 'ColumnAccumulator',
    'group_rows', 'merge_fragments',
]
