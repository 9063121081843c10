"""Antenna graph store, geometry and error types."""

from .errors import (
    AntennaError,
    FrequencyMismatch,
    VertexNotFound,
    InvalidStart,
    DuplicateAntenna,
    MapFormatError,
)
from .geometry import Point, segment_intersection
from .graph_utils import EMPTY_CELL, Antenna, AntennaGraph

__all__ = [
    "AntennaError",
    "FrequencyMismatch",
    "VertexNotFound",
    "InvalidStart",
    "DuplicateAntenna",
    "MapFormatError",
    "Point",
    "segment_intersection",
    "EMPTY_CELL",
    "Antenna",
    "AntennaGraph",
]
