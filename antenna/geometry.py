from fractions import Fraction
from typing import Optional, Tuple

__all__ = [
    'Point',
    'segment_intersection',
]

Point = Tuple[int, int]


def segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Optional[Point]:
    """Return the crossing point of segments ``p1-p2`` and ``p3-p4``.

    The point is computed exactly with rationals and truncated toward zero,
    so the result does not depend on the order of the arguments.
    Parallel segments give ``None``, and so do collinear ones even when
    they overlap; only a single crossing point is ever reported.
    """
    (x1, y1), (x2, y2), (x3, y3), (x4, y4) = p1, p2, p3, p4
    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        return None
    ua = Fraction((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3), denom)
    ub = Fraction((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3), denom)
    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None
    return int(x1 + ua * (x2 - x1)), int(y1 + ua * (y2 - y1))
