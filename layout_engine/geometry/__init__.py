"""
Geometry Module
===============
Axis-aligned rectangle primitives shared by every layout entity.
"""

from .zone import GeometricZone

__all__ = ['GeometricZone']
