"""Exception types raised by the antenna graph engine."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

__all__ = [
    "AntennaError",
    "FrequencyMismatch",
    "VertexNotFound",
    "InvalidStart",
    "DuplicateAntenna",
    "MapFormatError",
]


class AntennaError(Exception):
    """Base class for every recoverable engine error."""


class FrequencyMismatch(AntennaError, ValueError):
    """Two antennas of different frequencies were used where one is required."""

    def __init__(self, u, v) -> None:
        self.u = u
        self.v = v
        super().__init__(
            f"antennas {u.freq}({u.x},{u.y}) and {v.freq}({v.x},{v.y}) "
            f"have different frequencies ({u.freq} and {v.freq})"
        )


class VertexNotFound(AntennaError, LookupError):
    """A coordinate or endpoint does not resolve to an antenna of the graph.

    ``missing`` lists the roles that failed to resolve (``"source"``,
    ``"destination"``), ``position`` the coordinate when one was given.
    """

    def __init__(
        self,
        missing: Sequence[str] = (),
        position: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.missing = tuple(missing)
        self.position = position
        if position is not None:
            msg = f"no antenna at ({position[0]},{position[1]})"
        elif len(self.missing) > 1:
            msg = "neither antenna exists in the map"
        elif self.missing:
            msg = f"{self.missing[0]} antenna does not exist in the map"
        else:
            msg = "antenna does not exist in the map"
        super().__init__(msg)


class InvalidStart(AntennaError, ValueError):
    """A traversal was started from an antenna the graph does not own."""


class DuplicateAntenna(AntennaError, ValueError):
    """An antenna already occupies the requested position."""

    def __init__(self, existing, freq: str) -> None:
        self.existing = existing
        self.freq = freq
        super().__init__(
            f"position ({existing.x},{existing.y}) already holds antenna "
            f"{existing.freq}; cannot add {freq}"
        )


class MapFormatError(AntennaError, ValueError):
    """A stored map could not be parsed."""
