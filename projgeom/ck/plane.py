"""
Cayley-Klein plane constructions.

A Cayley-Klein plane is a projective plane together with a polarity perp
sending points to lines and lines to points. Perpendicularity, altitudes,
orthocenters and reflections all follow from perp and the projective
protocol; the plane tag (see projgeom.ck.objects) only chooses the polarity.
"""

from __future__ import annotations
from typing import Optional

from ..core.base import CKPlane
from ..core.types import Triangle, Trilateral
from ..pg.object import PgObject, PgPoint, PgLine
from ..pg.plane import coincident, tri_dual, involution, require_nondegenerate


def perp(plane: CKPlane, obj: PgObject) -> PgObject:
    """
    Polarity of a point (its polar line) or of a line (its pole).

    Args:
        plane: Plane tag, e.g. Elliptic
        obj: PgPoint or PgLine

    Returns:
        Object of the dual type
    """
    if isinstance(obj, PgPoint):
        return plane.perp_point(obj)
    if isinstance(obj, PgLine):
        return plane.perp_line(obj)
    raise TypeError(f"Expected PgPoint or PgLine, got {type(obj).__name__}")


def is_perpendicular(plane: CKPlane, m1: PgLine, m2: PgLine):
    """Whether m2 passes through the pole of m1."""
    return perp(plane, m1).incident(m2)


def altitude(plane: CKPlane, p: PgPoint, m: PgLine) -> PgLine:
    """Line through p perpendicular to m."""
    return perp(plane, m).circ(p)


def orthocenter(plane: CKPlane, tri: Triangle) -> PgPoint:
    """
    Meet of the altitudes of a triangle.

    Args:
        plane: Plane tag
        tri: Vertices (a1, a2, a3), not collinear

    Returns:
        The orthocenter
    """
    a1, a2, a3 = tri
    require_nondegenerate(lambda: coincident(a1, a2, a3), "triangle vertices are collinear")
    t1 = altitude(plane, a1, a2.circ(a3))
    t2 = altitude(plane, a2, a3.circ(a1))
    return t1.circ(t2)


def tri_altitude(plane: CKPlane, tri: Triangle) -> Trilateral:
    """The three altitudes, each through a vertex against the opposite side."""
    l1, l2, l3 = tri_dual(tri)
    a1, a2, a3 = tri
    t1 = altitude(plane, a1, l1)
    t2 = altitude(plane, a2, l2)
    t3 = altitude(plane, a3, l3)
    return t1, t2, t3


def reflect(
    plane: CKPlane,
    mirror: PgLine,
    p: PgPoint,
    centre: Optional[PgPoint] = None
) -> PgPoint:
    """
    Reflect p in the line mirror.

    Args:
        plane: Plane tag
        mirror: Mirror line
        p: Point to reflect
        centre: Centre of the harmonic homology. Defaults to the pole of the
            mirror, which gives the metric reflection of the plane; any other
            point gives a different map

    Returns:
        Reflected point
    """
    if centre is None:
        centre = perp(plane, mirror)
    return involution(centre, mirror, p)
