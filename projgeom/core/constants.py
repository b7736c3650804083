"""
Centralized constants for projgeom.

This module defines the default tolerances and the fixed homogeneous triples
used throughout the library.

Usage:
    from projgeom.core.constants import DEFAULT_ATOL

    def my_check(a, b, atol: float = DEFAULT_ATOL):
        ...
"""

# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for float comparisons (cross products, incidences)
DEFAULT_ATOL: float = 1e-8

# Number of homogeneous coordinates of a point or line in the plane
NUM_COORDS: int = 3


# =============================================================================
# Coordinate Indices
# =============================================================================

IDX_X = 0
IDX_Y = 1
IDX_Z = 2


# =============================================================================
# Fixed Elements of the Perspective Plane
# =============================================================================

# Line at infinity of the perspective plane
PERSP_L_INF = (0, -1, 1)

# Fixed points on the perspective line at infinity
PERSP_I_RE = (0, 1, 1)
PERSP_I_IM = (1, 0, 0)


# =============================================================================
# Fixed Elements of the Euclidean Plane
# =============================================================================

EUCLID_L_INF = (0, 0, 1)
EUCLID_I_RE = (0, 1, 0)
EUCLID_I_IM = (1, 0, 0)
