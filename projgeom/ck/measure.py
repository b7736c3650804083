"""
Rational measurement in Cayley-Klein planes.

Quadrance (between points) and spread (between lines) are the rational
analogues of squared distance and squared sine of an angle. For a plane with
a non-degenerate polarity both are the same measure:

    measure(a, b) = 1 - (a · perp(b))^2 / (omega(a) * omega(b)),
    omega(x) = x · perp(x)

Integral coordinates give exact Fraction results. The laws checked here
(triple quad formula, cross law) hold as identities in every such plane.
The perspective and Euclidean planes have a degenerate polarity; use
projgeom.ck.euclid for Euclidean measurement.
"""

from __future__ import annotations
from typing import Sequence

from ..core.base import CKPlane, fraction
from ..core.types import Scalar, Triple
from ..pg.object import PgObject, PgPoint, PgLine
from .plane import perp


def sq(x: Scalar) -> Scalar:
    return x * x


def omega(plane: CKPlane, x: PgObject) -> Scalar:
    """
    Self-measurement x · perp(x).

    Raises:
        NotImplementedError: For planes tagged degenerate = True
    """
    if getattr(plane, "degenerate", False):
        raise NotImplementedError(f"{plane.name} plane has a degenerate polarity")
    return x.dot(perp(plane, x))


def measure(plane: CKPlane, a1: PgObject, a2: PgObject) -> Scalar:
    """Common measure behind quadrance and spread."""
    return 1 - fraction(sq(a1.dot(perp(plane, a2))), omega(plane, a1) * omega(plane, a2))


def quadrance(plane: CKPlane, a1: PgPoint, a2: PgPoint) -> Scalar:
    """Quadrance between two points; 0 for equal points."""
    return measure(plane, a1, a2)


def spread(plane: CKPlane, l1: PgLine, l2: PgLine) -> Scalar:
    """Spread between two lines; 0 for equal lines, 1 for perpendicular ones."""
    return measure(plane, l1, l2)


def tri_quadrance(plane: CKPlane, tri: Sequence[PgPoint]) -> Triple:
    """Quadrances (q1, q2, q3) of the sides opposite a1, a2, a3."""
    a1, a2, a3 = tri
    return quadrance(plane, a2, a3), quadrance(plane, a1, a3), quadrance(plane, a1, a2)


def tri_spread(plane: CKPlane, trilateral: Sequence[PgLine]) -> Triple:
    """Spreads (s1, s2, s3) at the vertices opposite l1, l2, l3."""
    l1, l2, l3 = trilateral
    return spread(plane, l2, l3), spread(plane, l1, l3), spread(plane, l1, l2)


def archimedes(a: Scalar, b: Scalar, c: Scalar) -> Scalar:
    """
    Archimedes function 4ab - (a + b - c)^2.

    Symmetric in its arguments; for three quadrances it is 16 times the
    squared area of the Euclidean triangle.
    """
    return 4 * a * b - sq(a + b - c)


def check_cross_tqf(q: Triple) -> Scalar:
    """
    Triple quad formula residue; 0 when the quadrances come from collinear points.

    (q1 + q2 + q3)^2 = 2(q1^2 + q2^2 + q3^2) + 4 q1 q2 q3
    """
    q1, q2, q3 = q
    return archimedes(q1, q2, q3) - 4 * q1 * q2 * q3


def check_cross_law(s: Triple, q3: Scalar) -> Scalar:
    """
    Cross law residue; 0 for the spreads of a triangle and a matching quadrance.

    (s1 s2 q3 - s1 - s2 - s3 + 2)^2 = 4 (1 - s1)(1 - s2)(1 - s3)

    Applies with the roles of quadrance and spread exchanged as well.
    """
    s1, s2, s3 = s
    return sq(s1 * s2 * q3 - (s1 + s2 + s3) + 2) - 4 * (1 - s1) * (1 - s2) * (1 - s3)
