"""
Layout Pipeline
===============
Single entry point for reconstructing lines and columns from a page.
Orchestrates: Page -> rows -> words -> LineAccumulator -> ColumnAccumulator
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from .types import Area
from .page_model import Page, FragmentConfig, build_page
from .grouping import LineAccumulator, ColumnAccumulator, group_rows, merge_fragments


logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Complete pipeline configuration"""
    # Restrict to fragments strictly inside (top, left, bottom, right)
    area: Optional[Area] = None

    # Feature toggles
    merge_words: bool = True
    merge_columns: bool = True

    # pdfplumber adapter
    fragment_config: FragmentConfig = field(default_factory=FragmentConfig)


@dataclass
class LayoutStats:
    """Counters from one pipeline run"""
    page_number: int = 0
    fragments_in: int = 0
    words_out: int = 0
    lines_count: int = 0
    columns_count: int = 0
    line_distances: List[Optional[float]] = field(default_factory=list)

    def summary(self) -> str:
        """Generate summary string"""
        lines = [
            "=" * 60,
            f"LAYOUT SUMMARY (page {self.page_number})",
            "=" * 60,
            f"Fragments In: {self.fragments_in}",
            f"Words Out: {self.words_out}",
            f"Lines: {self.lines_count}",
            f"Columns: {self.columns_count}",
        ]
        if self.line_distances:
            lines.append("")
            lines.append("Average Line Distance per Column:")
            for i, dist in enumerate(self.line_distances):
                shown = "n/a" if dist is None else f"{dist:.2f}"
                lines.append(f"  column {i}: {shown}")
        lines.append("=" * 60)
        return "\n".join(lines)


@dataclass
class PageLayout:
    """Lines and columns reconstructed from one page"""
    page: Page
    lines: List[LineAccumulator] = field(default_factory=list)
    columns: List[ColumnAccumulator] = field(default_factory=list)
    stats: LayoutStats = field(default_factory=LayoutStats)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number': self.page.number,
            'width': self.page.width,
            'height': self.page.height,
            'rotation': self.page.rotation,
            'lines': [ln.to_dict() for ln in self.lines],
            'columns': [col.to_dict() for col in self.columns],
            'rulings': [r.to_dict() for r in self.page.rulings],
        }


def build_columns(lines: List[LineAccumulator], merge: bool = True) -> List[ColumnAccumulator]:
    """
    Distribute line fragments into columns.

    Each fragment goes to the first column whose band it horizontally
    overlaps, else opens a new column. With merge, overlapping columns are
    folded together until none overlap. Result is sorted by left.
    """
    columns: List[ColumnAccumulator] = []
    for line in lines:
        for fragment in line.fragments:
            target = next((c for c in columns if c.horizontally_overlaps(fragment)), None)
            if target is None:
                target = ColumnAccumulator(fragment.left, fragment.width)
                columns.append(target)
            target.append(fragment)

    if merge:
        merged = True
        while merged:
            merged = False
            for i, a in enumerate(columns):
                j = next((k for k in range(i + 1, len(columns)) if a.contains(columns[k])), None)
                if j is None:
                    continue
                # zones compare by extent, so drop by position
                for fragment in columns.pop(j).fragments:
                    a.append(fragment)
                merged = True
                break

    columns.sort(key=lambda c: c.left)
    return columns


class LayoutPipeline:
    """
    Main layout reconstruction pipeline.

    Usage:
        pipeline = LayoutPipeline()
        layout = pipeline.run_from_page(page)
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def run_from_page(self, page: Page) -> PageLayout:
        """
        Reconstruct lines and columns of a page.

        The page's own fragments are copied first and are left untouched.
        """
        stats = LayoutStats(page_number=page.number)

        if self.config.area is not None:
            selected = page.get_text(self.config.area)
        else:
            selected = list(page.texts)
        fragments = [copy.copy(f) for f in selected]
        stats.fragments_in = len(fragments)

        lines: List[LineAccumulator] = []
        for row in group_rows(fragments):
            if self.config.merge_words:
                row = merge_fragments(row)
            line = LineAccumulator()
            for fragment in row:
                line.append(fragment)
            stats.words_out += len(line)
            lines.append(line)
        stats.lines_count = len(lines)

        columns = build_columns(lines, merge=self.config.merge_columns)
        stats.columns_count = len(columns)
        stats.line_distances = [c.average_line_distance() for c in columns]

        logger.debug(
            "page %d: %d fragments -> %d words, %d lines, %d columns",
            page.number, stats.fragments_in, stats.words_out,
            stats.lines_count, stats.columns_count,
        )
        return PageLayout(page=page, lines=lines, columns=columns, stats=stats)

    def run_from_pages(self, pages: List[Page]) -> List[PageLayout]:
        return [self.run_from_page(p) for p in pages]


def run_layout_pipeline(
    pdf_path: str,
    config: Optional[LayoutConfig] = None
) -> List[PageLayout]:
    """
    Single entry point for running the pipeline on a PDF path.
    """
    import pdfplumber

    cfg = config or LayoutConfig()
    pages: List[Page] = []

    with pdfplumber.open(pdf_path) as pdf:
        for i, pdf_page in enumerate(pdf.pages):
            page = build_page(
                pdf_page.chars,
                page_num=i + 1,
                page_width=pdf_page.width or 612.0,
                page_height=pdf_page.height or 792.0,
                rotation=getattr(pdf_page, 'rotation', 0) or 0,
                page_lines=pdf_page.lines,
                config=cfg.fragment_config,
            )
            pages.append(page)

    logger.info("Loaded %d pages from %s", len(pages), pdf_path)
    pipeline = LayoutPipeline(cfg)
    return pipeline.run_from_pages(pages)
