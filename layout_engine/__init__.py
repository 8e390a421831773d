"""
Layout Reconstruction Engine
============================
Rebuilds lines and columns from positioned text fragments, as a precursor
to table-structure detection.

Architecture:
- geometry: GeometricZone rectangle math (overlap, IoU, bounding-box union)
- page_model: TextFragment merge rules, Page/Ruling, pdfplumber adapter
- grouping: LineAccumulator, ColumnAccumulator, word assembly
- pipeline: Page -> lines -> columns orchestration

Usage:
    from layout_engine import LayoutPipeline
    pipeline = LayoutPipeline()
    layout = pipeline.run_from_page(page)
"""

from .types import Area, Point, TypeMismatchError
from .geometry import GeometricZone
from .page_model import TextFragment, Page, Ruling, build_page
from .grouping import LineAccumulator, ColumnAccumulator
from .pipeline import (
    LayoutPipeline, LayoutConfig, LayoutStats, PageLayout, run_layout_pipeline,
)

__all__ = [
    'Area',
    'Point',
    'TypeMismatchError',
    'GeometricZone',
    'TextFragment',
    'Page',
    'Ruling',
    'build_page',
    'LineAccumulator',
    'ColumnAccumulator',
    'LayoutPipeline',
    'LayoutConfig',
    'LayoutStats',
    'PageLayout',
    'run_layout_pipeline',
]

__version__ = '0.1.0'
