"""
Page Model Module
=================
Text fragments, pages and rulings, plus the pdfplumber adapter that builds them.
"""

from .fragment import TextFragment
from .page import Page, Ruling
from .builder import (
    FragmentConfig,
    build_page,
    build_rulings,
    estimate_space_widths,
    fragment_from_pdfplumber,
)

__all__ = [
    'TextFragment', 'Page', 'Ruling',
    'FragmentConfig', 'build_page', 'build_rulings',
    'estimate_space_widths', 'fragment_from_pdfplumber',
]
