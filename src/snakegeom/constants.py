"""Numeric tolerances shared by the intersection routines."""

import math

# Absolute tolerance for coordinate, length and angle comparisons.
EPSILON = 1e-9

TAU = 2 * math.pi
