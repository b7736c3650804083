"""
CK (Cayley-Klein) module.

Extends the projective plane with a polarity (perp) chosen by a plane tag,
and derives perpendicularity, altitudes, orthocenters, reflections and the
rational measures quadrance and spread from it.

Euclidean measurement lives in projgeom.ck.euclid.
"""

from .objects import (
    Elliptic,
    Hyperbolic,
    MyCK,
    Perspective,
    Euclidean,
    PLANES,
)

from .plane import (
    perp,
    is_perpendicular,
    altitude,
    orthocenter,
    tri_altitude,
    reflect,
)

from .measure import (
    sq,
    omega,
    measure,
    quadrance,
    spread,
    tri_quadrance,
    tri_spread,
    archimedes,
    check_cross_tqf,
    check_cross_law,
)

from . import euclid

__all__ = [
    # Planes
    "Elliptic",
    "Hyperbolic",
    "MyCK",
    "Perspective",
    "Euclidean",
    "PLANES",
    # Constructions
    "perp",
    "is_perpendicular",
    "altitude",
    "orthocenter",
    "tri_altitude",
    "reflect",
    # Measures
    "sq",
    "omega",
    "measure",
    "quadrance",
    "spread",
    "tri_quadrance",
    "tri_spread",
    "archimedes",
    "check_cross_tqf",
    "check_cross_law",
    "euclid",
]
