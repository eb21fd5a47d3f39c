"""
Batch intersection queries over heterogeneous collections of segments.

Every pair is tested; there is no broad phase.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import Vec
from .segments import Line, Segment

logger = logging.getLogger(__name__)


def polyline_to_lines(points: Sequence[Vec], closed: bool = False) -> List[Line]:
    """
    Convert a sequence of points to consecutive line segments.

    Args:
        points: Path vertices.
        closed: If True, also connect the last point back to the first.

    Returns:
        List of Line segments, empty for fewer than two points.
    """
    if len(points) < 2:
        return []

    lines = [Line(points[i], points[i + 1]) for i in range(len(points) - 1)]
    if closed and len(points) > 2:
        lines.append(Line(points[-1], points[0]))
    return lines


def find_intersections(
    segments: Sequence[Segment],
    skip_adjacent: bool = False
) -> List[Tuple[int, int, Vec]]:
    """
    Intersect every pair of segments.

    Args:
        segments: Lines and arcs in any mix.
        skip_adjacent: If True, skip pairs ``(i, i + 1)``; consecutive pieces
            of a path share an endpoint and would always report it.

    Returns:
        ``(i, j, point)`` for every intersecting pair with ``i < j``.
    """
    hits = []
    for i in range(len(segments)):
        for j in range(i + 1, len(segments)):
            if skip_adjacent and j == i + 1:
                continue
            p = segments[i].intersect(segments[j])
            if p is not None:
                hits.append((i, j, p))
    logger.debug("tested %d segments, %d intersecting pairs", len(segments), len(hits))
    return hits


def first_intersection(
    segment: Segment,
    others: Sequence[Segment]
) -> Optional[Tuple[int, Vec]]:
    """
    Find the first segment in ``others`` that ``segment`` intersects.

    Returns:
        ``(index, point)`` of the first hit, or None.
    """
    for i, other in enumerate(others):
        p = segment.intersect(other)
        if p is not None:
            logger.debug("hit segment %d at (%g, %g)", i, p.x, p.y)
            return i, p
    return None


def intersection_matrix(segments: Sequence[Segment]) -> np.ndarray:
    """
    Pairwise intersection flags.

    Returns:
        Symmetric ``(n, n)`` boolean array, ``False`` on the diagonal.
    """
    n = len(segments)
    matrix = np.zeros((n, n), dtype=bool)
    for i, j, _ in find_intersections(segments):
        matrix[i, j] = matrix[j, i] = True
    return matrix
