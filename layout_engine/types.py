"""
Shared Types for the Layout Engine
==================================
Primitive aliases and errors used across geometry, page_model and grouping.

Type Hierarchy:
- Point: (x, y) coordinate pair
- Area: Query rectangle as (top, left, bottom, right)
- TypeMismatchError: A fragment operation received a non-fragment
"""

from typing import Tuple


# ============================================================
# Primitive Types
# ============================================================

# Point: (x, y) in page coordinates
Point = Tuple[float, float]

# Area: (top, left, bottom, right) in page coordinates
Area = Tuple[float, float, float, float]


# ============================================================
# Errors
# ============================================================

class TypeMismatchError(TypeError):
    """Raised when a fragment-only operation is given another kind of zone."""

    def __init__(self, operation: str, other: object):
        self.operation = operation
        self.other_type = type(other).__name__
        super().__init__(
            f"{operation}: argument is not a TextFragment (got {self.other_type})"
        )
