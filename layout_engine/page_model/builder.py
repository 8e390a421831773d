"""
pdfplumber Adapter
==================
Builds Page / TextFragment / Ruling objects from pdfplumber char and line
dictionaries.

pdfplumber does not report the width of a space for a font, so it is taken
from the space glyphs the page actually draws in that font and size, with a
font-size ratio as fallback.
"""

from dataclasses import dataclass
from collections import defaultdict
from typing import List, Dict, Any, Tuple, Optional

from .fragment import TextFragment
from .page import Page, Ruling


SpaceKey = Tuple[str, float]


@dataclass
class FragmentConfig:
    """Configuration for turning pdfplumber objects into layout entities"""
    default_space_ratio: float = 0.25  # space width / font size when no space glyph is drawn
    keep_whitespace: bool = False      # spaces are synthesized by word merging instead
    min_ruling_length: float = 0.0


def _space_key(char: Dict[str, Any]) -> SpaceKey:
    return (char.get('fontname', 'Unknown'), round(char.get('size', 0), 1))


def estimate_space_widths(chars: List[Dict[str, Any]]) -> Dict[SpaceKey, float]:
    """Mean width of the " " glyphs drawn per (fontname, size)."""
    widths: Dict[SpaceKey, List[float]] = defaultdict(list)
    for c in chars:
        if c.get('text') == ' ':
            w = c.get('x1', 0) - c.get('x0', 0)
            if w > 0:
                widths[_space_key(c)].append(w)
    return {k: sum(v) / len(v) for k, v in widths.items()}


def fragment_from_pdfplumber(
    char: Dict[str, Any],
    space_widths: Optional[Dict[SpaceKey, float]] = None,
    config: Optional[FragmentConfig] = None,
) -> TextFragment:
    """Create a TextFragment from a pdfplumber char (or word) dictionary"""
    cfg = config or FragmentConfig()
    size = char.get('size', 0) or 0
    width_of_space = (space_widths or {}).get(_space_key(char))
    if width_of_space is None:
        width_of_space = size * cfg.default_space_ratio

    top = char.get('top', 0)
    x0 = char.get('x0', 0)
    return TextFragment(
        top=top,
        left=x0,
        width=char.get('x1', 0) - x0,
        height=char.get('bottom', 0) - top,
        font=char.get('fontname', 'Unknown'),
        font_size=size,
        text=char.get('text', ''),
        width_of_space=width_of_space,
    )


def build_rulings(
    lines: List[Dict[str, Any]],
    config: Optional[FragmentConfig] = None,
) -> List[Ruling]:
    """Create Rulings from pdfplumber line/edge dictionaries"""
    cfg = config or FragmentConfig()
    rulings = []
    for ln in lines:
        top = ln.get('top', 0)
        x0 = ln.get('x0', 0)
        ruling = Ruling(
            top=top,
            left=x0,
            width=ln.get('x1', 0) - x0,
            height=ln.get('bottom', 0) - top,
            color=ln.get('stroking_color'),
        )
        if max(ruling.width, ruling.height) < cfg.min_ruling_length:
            continue
        rulings.append(ruling)
    return rulings


def build_page(
    page_chars: List[Dict[str, Any]],
    page_num: int,
    page_width: float = 612.0,
    page_height: float = 792.0,
    rotation: int = 0,
    page_lines: Optional[List[Dict[str, Any]]] = None,
    config: Optional[FragmentConfig] = None,
) -> Page:
    """
    Build a Page from pdfplumber chars.

    Args:
        page_chars: List of char dicts from pdfplumber
        page_num: 1-indexed page number
        page_width: Page width in points
        page_height: Page height in points
        rotation: Page rotation in degrees
        page_lines: Optional pdfplumber line dicts, turned into Rulings
        config: Builder configuration

    Returns:
        Page with one TextFragment per char, in extractor order
    """
    cfg = config or FragmentConfig()
    space_widths = estimate_space_widths(page_chars)

    texts = []
    for c in page_chars:
        if not cfg.keep_whitespace and not c.get('text', '').strip():
            continue
        texts.append(fragment_from_pdfplumber(c, space_widths, cfg))

    return Page(
        width=page_width,
        height=page_height,
        rotation=rotation,
        number=page_num,
        texts=texts,
        rulings=build_rulings(page_lines or [], cfg),
    )
