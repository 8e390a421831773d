"""
Word Assembly
=============
Splits a page's fragments into visual rows and folds each row left to right
into words, synthesizing spaces where the gap looks like one space glyph.
"""

import copy
from typing import List

from ..geometry import GeometricZone
from ..page_model import TextFragment


def _joins_row(row_box: GeometricZone, fragment: TextFragment) -> bool:
    if row_box.vertically_overlaps(fragment):
        return True
    # zero-height glyphs (e.g. spaces) never overlap; attach them by position
    return fragment.height == 0 and row_box.top <= fragment.top <= row_box.bottom


def group_rows(fragments: List[TextFragment]) -> List[List[TextFragment]]:
    """
    Group fragments into rows by vertical overlap.

    Fragments are visited by (top, left); each row keeps a running bounding
    box that a fragment must overlap to join. Rows are sorted by left.
    """
    if not fragments:
        return []

    ordered = sorted(fragments, key=lambda f: (f.top, f.left))
    rows: List[List[TextFragment]] = []
    current = [ordered[0]]
    row_box = GeometricZone(ordered[0].top, ordered[0].left, ordered[0].width, ordered[0].height)

    for f in ordered[1:]:
        if _joins_row(row_box, f):
            current.append(f)
            row_box.merge(f)
            continue
        rows.append(sorted(current, key=lambda x: x.left))
        current = [f]
        row_box = GeometricZone(f.top, f.left, f.width, f.height)

    rows.append(sorted(current, key=lambda x: x.left))
    return rows


def merge_fragments(row: List[TextFragment]) -> List[TextFragment]:
    """
    Fold a left-to-right row into words.

    Adjacent fragments that should merge are concatenated directly; those
    separated by a gap of about one space width are joined with " ";
    anything else, including overlapping glyphs, starts a new word.
    The input fragments are copied, never mutated.
    """
    words: List[TextFragment] = []
    current = None
    for f in row:
        nxt = copy.copy(f)
        if current is None:
            current = nxt
            continue
        if current.should_merge(nxt):
            current.merge(nxt)
        elif nxt.left >= current.right and current.should_add_space(nxt):
            current.text += ' '
            current.merge(nxt)
        else:
            words.append(current)
            current = nxt

    if current is not None:
        words.append(current)
    return words
