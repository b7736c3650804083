"""
Core module for projgeom.

Contains:
- Constants: Default tolerances and fixed homogeneous triples
- Types: Type aliases for coordinate storage
- Base: Structural protocols for scalars and plane tags
"""

from .constants import (
    DEFAULT_ATOL,
    NUM_COORDS,
    IDX_X,
    IDX_Y,
    IDX_Z,
    PERSP_L_INF,
    PERSP_I_RE,
    PERSP_I_IM,
    EUCLID_L_INF,
    EUCLID_I_RE,
    EUCLID_I_IM,
)

from .types import (
    Scalar,
    Coord,
    CoordLike,
    Triangle,
    Trilateral,
    Triple,
)

from .base import (
    DegenerateError,
    Ring,
    OrderedRing,
    Integral,
    CKPlane,
    check_ring,
    check_integral,
    fraction,
)

__all__ = [
    # Constants
    "DEFAULT_ATOL",
    "NUM_COORDS",
    "IDX_X",
    "IDX_Y",
    "IDX_Z",
    "PERSP_L_INF",
    "PERSP_I_RE",
    "PERSP_I_IM",
    "EUCLID_L_INF",
    "EUCLID_I_RE",
    "EUCLID_I_IM",
    # Types
    "Scalar",
    "Coord",
    "CoordLike",
    "Triangle",
    "Trilateral",
    "Triple",
    # Base
    "DegenerateError",
    "Ring",
    "OrderedRing",
    "Integral",
    "CKPlane",
    "check_ring",
    "check_integral",
    "fraction",
]
