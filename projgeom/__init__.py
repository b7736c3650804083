"""
projgeom: Projective and Cayley-Klein Plane Geometry

A library of points and lines in homogeneous coordinates over any scalar
ring, with the duality-aware constructions of the projective plane and the
metric constructions of Cayley-Klein planes.

Key Features:
- Generic over the scalar: int, numpy.int64, Fraction, float
- Batched geometry with torch tensors of shape (..., 3)
- Join/meet, harmonic conjugates, Desargues and Pappus checks
- Elliptic, hyperbolic, perspective and Euclidean planes from one polarity
- Rational measures: cross ratio, quadrance, spread

API Design:
- Points and lines are PgPoint / PgLine; each names the other as its Dual
- Projective constructions are free functions in projgeom.pg
- Metric constructions take a plane tag first: altitude(Hyperbolic, p, l)

Example:
    >>> from projgeom.pg import PgPoint, tri_dual
    >>> from projgeom.ck import Elliptic, orthocenter
    >>> tri = (PgPoint((1, 3, 1)), PgPoint((4, 2, 1)), PgPoint((1, 1, -1)))
    >>> o = orthocenter(Elliptic, tri)
"""

__version__ = "0.1.0"
__author__ = "projgeom Contributors"

from . import core
from . import utils
from . import pg
from . import ck

__all__ = [
    "core",
    "utils",
    "pg",
    "ck",
]
