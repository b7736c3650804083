"""
Euclidean measurement in homogeneous coordinates.

The Euclidean plane is the Cayley-Klein plane whose polarity collapses onto
the line at infinity z = 0 (the Euclidean tag in projgeom.ck.objects), so
perpendicularity, altitudes and reflections come from projgeom.ck.plane.
Quadrance and spread, however, are not given by the general measure and are
defined here from the affine coordinates:

    quadrance(a, b) = (xa/za - xb/zb)^2 + (ya/za - yb/zb)^2
    spread(l, m)    = cross2(l, m)^2 / (dot1(l, l) * dot1(m, m))

Integral coordinates give exact Fraction results.
"""

from __future__ import annotations
import math
from typing import Any, Sequence

import torch

from ..core.base import fraction
from ..core.constants import IDX_X, IDX_Y, IDX_Z
from ..core.types import Scalar, Triple
from ..pg.object import PgPoint, PgLine, triple
from .measure import sq, archimedes


def dot1(l: PgLine, m: PgLine) -> Scalar:
    """Dot product of the normal directions of two lines."""
    return l[0] * m[0] + l[1] * m[1]


def cross2(l: PgLine, m: PgLine) -> Scalar:
    """Cross product of the normal directions of two lines."""
    return l[0] * m[1] - l[1] * m[0]


def is_parallel(l: PgLine, m: PgLine) -> Any:
    return cross2(l, m) == 0


def midpoint(a: PgPoint, b: PgPoint) -> PgPoint:
    return PgPoint.plucker(b[IDX_Z], a, a[IDX_Z], b)


def tri_midpoint(tri: Sequence[PgPoint]):
    """Midpoints (m12, m23, m13) of the sides of a triangle."""
    a1, a2, a3 = tri
    return midpoint(a1, a2), midpoint(a2, a3), midpoint(a1, a3)


def uc_point(ld: Scalar, mu: Scalar) -> PgPoint:
    """Rational point on the unit circle with parameter ld : mu."""
    ld2 = ld * ld
    mu2 = mu * mu
    return PgPoint(triple(ld2 - mu2, 2 * ld * mu, ld2 + mu2))


def quadrance(a1: PgPoint, a2: PgPoint) -> Scalar:
    """Squared Euclidean distance between two finite points."""
    dx = a1[IDX_X] * a2[IDX_Z] - a2[IDX_X] * a1[IDX_Z]
    dy = a1[IDX_Y] * a2[IDX_Z] - a2[IDX_Y] * a1[IDX_Z]
    return fraction(sq(dx) + sq(dy), sq(a1[IDX_Z] * a2[IDX_Z]))


def spread(l1: PgLine, l2: PgLine) -> Scalar:
    """Squared sine of the angle between two finite lines."""
    return fraction(sq(cross2(l1, l2)), dot1(l1, l1) * dot1(l2, l2))


def tri_quadrance(tri: Sequence[PgPoint]) -> Triple:
    a1, a2, a3 = tri
    return quadrance(a2, a3), quadrance(a1, a3), quadrance(a1, a2)


def tri_spread(trilateral: Sequence[PgLine]) -> Triple:
    l1, l2, l3 = trilateral
    return spread(l2, l3), spread(l1, l3), spread(l1, l2)


def check_sine_law(q: Triple, s: Triple) -> Any:
    """Spread law: s1 / q1 == s2 / q2 == s3 / q3, checked without division."""
    q1, q2, q3 = q
    s1, s2, s3 = s
    return (s1 * q2 == s2 * q1) & (s2 * q3 == s3 * q2)


def check_ptolemy(quadrances: Sequence[Scalar]) -> Scalar:
    """
    Ptolemy residue for four points; 0 when they lie on a circle.

    Args:
        quadrances: (q12, q23, q34, q14, q24, q13)

    Returns:
        archimedes(q12 * q34, q23 * q14, q13 * q24)
    """
    q12, q23, q34, q14, q24, q13 = quadrances
    return archimedes(q12 * q34, q23 * q14, q13 * q24)


def distance(a1: PgPoint, a2: PgPoint) -> Scalar:
    """Euclidean distance (floating point)."""
    q = quadrance(a1, a2)
    if isinstance(q, torch.Tensor):
        return torch.sqrt(q)
    return math.sqrt(q)


def angle(l1: PgLine, l2: PgLine) -> Scalar:
    """Signed angle from l1 to l2 in radians (floating point)."""
    c = cross2(l1, l2)
    d = dot1(l1, l2)
    if isinstance(c, torch.Tensor) or isinstance(d, torch.Tensor):
        return torch.atan2(torch.as_tensor(c), torch.as_tensor(d))
    return math.atan2(c, d)
