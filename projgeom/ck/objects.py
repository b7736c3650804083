"""
Concrete Cayley-Klein planes.

Each plane is a stateless tag class whose only job is to supply the polarity
between points and lines:

- Elliptic:    point (x, y, z) <-> line (x, y, z)
- Hyperbolic:  point (x, y, z) <-> line (x, y, -z)
- MyCK:        point (x, y, z) -> line (-2x, y, -2z),
               line (x, y, z) -> point (-x, 2y, -z)
- Perspective: every point -> the line at infinity (0, -1, 1); a line goes to
               the point on the line at infinity spanned by two fixed points
- Euclidean:   the perspective construction with the standard line at
               infinity (0, 0, 1), i.e. line (a, b, c) -> point (a, b, 0)

The first three polarities are involutions on equivalence classes. The last
two are degenerate: perp(perp(x)) collapses onto the fixed elements, which
are unsupported input for the metric constructions.

Usage:
    >>> from projgeom.ck import Hyperbolic, perp
    >>> perp(Hyperbolic, PgPoint((1, 3, 1)))
    PgLine((1, 3, -1))
"""

from __future__ import annotations
from typing import Dict

from ..core.constants import (
    PERSP_L_INF, PERSP_I_RE, PERSP_I_IM,
    EUCLID_L_INF, EUCLID_I_RE, EUCLID_I_IM,
)
from ..pg.object import PgPoint, PgLine, triple


def _polar_of_line(l: PgLine, i_re: PgPoint, i_im: PgPoint) -> PgPoint:
    alpha = l.dot(i_re)
    beta = l.dot(i_im)
    return PgPoint.plucker(alpha, i_re, beta, i_im)


class Elliptic:
    """Elliptic plane: the polarity keeps the coordinates."""

    name = "elliptic"

    @staticmethod
    def perp_point(p: PgPoint) -> PgLine:
        return PgLine(p.coord)

    @staticmethod
    def perp_line(l: PgLine) -> PgPoint:
        return PgPoint(l.coord)


class Hyperbolic:
    """Hyperbolic plane: the polarity negates the third coordinate."""

    name = "hyperbolic"

    @staticmethod
    def perp_point(p: PgPoint) -> PgLine:
        return PgLine(triple(p[0], p[1], -p[2]))

    @staticmethod
    def perp_line(l: PgLine) -> PgPoint:
        return PgPoint(triple(l[0], l[1], -l[2]))


class MyCK:
    """
    A Cayley-Klein plane with an asymmetric polarity.

    The point and line maps are different scalings, inverse to each other
    up to a factor, so perp(perp(x)) == x still holds up to scale.
    """

    name = "myck"

    @staticmethod
    def perp_point(p: PgPoint) -> PgLine:
        return PgLine(triple(-2 * p[0], p[1], -2 * p[2]))

    @staticmethod
    def perp_line(l: PgLine) -> PgPoint:
        return PgPoint(triple(-l[0], 2 * l[1], -l[2]))


class Perspective:
    """
    Euclidean plane seen in perspective.

    The line at infinity is L_INF; I_RE and I_IM are fixed points on it.
    """

    name = "perspective"
    degenerate = True

    L_INF = PgLine(PERSP_L_INF)
    I_RE = PgPoint(PERSP_I_RE)
    I_IM = PgPoint(PERSP_I_IM)

    @staticmethod
    def perp_point(p: PgPoint) -> PgLine:
        return Perspective.L_INF

    @staticmethod
    def perp_line(l: PgLine) -> PgPoint:
        return _polar_of_line(l, Perspective.I_RE, Perspective.I_IM)


class Euclidean:
    """Euclidean plane with the line at infinity z = 0."""

    name = "euclidean"
    degenerate = True

    L_INF = PgLine(EUCLID_L_INF)
    I_RE = PgPoint(EUCLID_I_RE)
    I_IM = PgPoint(EUCLID_I_IM)

    @staticmethod
    def perp_point(p: PgPoint) -> PgLine:
        return Euclidean.L_INF

    @staticmethod
    def perp_line(l: PgLine) -> PgPoint:
        return _polar_of_line(l, Euclidean.I_RE, Euclidean.I_IM)


PLANES: Dict[str, type] = {
    plane.name: plane
    for plane in (Elliptic, Hyperbolic, MyCK, Perspective, Euclidean)
}
