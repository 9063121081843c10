"""Geometric analyses over an antenna graph."""

from .intersections import Crossing, FrequencyIntersectionFinder, find_intersections
from .interference import is_aligned, projected_points, project_interference

__all__ = [
    "Crossing",
    "FrequencyIntersectionFinder",
    "find_intersections",
    "is_aligned",
    "projected_points",
    "project_interference",
]
