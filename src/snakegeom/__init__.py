"""2D line and arc segment intersection."""

from .constants import EPSILON
from .geometry import Vec, Interval
from .segments import Segment, Line, Arc, intersect
from .collision import (
    polyline_to_lines,
    find_intersections,
    first_intersection,
    intersection_matrix
)

__all__ = [
    'EPSILON',
    'Vec',
    'Interval',
    'Segment',
    'Line',
    'Arc',
    'intersect',
    'polyline_to_lines',
    'find_intersections',
    'first_intersection',
    'intersection_matrix'
]
