"""
Projective plane protocol.

Every function here is built only from the primitive operators of
projgeom.pg.object (incident, circ, dot, aux, plucker), so each one applies
to points and, by duality, to lines: passing three lines to coincident asks
whether they are concurrent, passing a trilateral to tri_dual returns its
triangle of vertices, and so on.

Degenerate input (collinear triangles, coincident points where a join is
needed) is an unchecked precondition and yields zero triples. Setting
Config.check_preconditions turns the checks on; they raise DegenerateError.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Sequence

import torch

from ..core.base import DegenerateError
from ..core.types import Scalar, Triangle, Trilateral
from ..utils.config import get_config
from .object import PgObject

logger = logging.getLogger(__name__)


def _any(flag: Any) -> bool:
    if isinstance(flag, torch.Tensor):
        return bool(flag.any())
    return bool(flag)


def _not(flag: Any) -> Any:
    if isinstance(flag, torch.Tensor):
        return ~flag
    return not flag


def _all(flag: Any) -> bool:
    if isinstance(flag, torch.Tensor):
        return bool(flag.all())
    return bool(flag)


def require_nondegenerate(is_degenerate: Callable[[], Any], message: str) -> None:
    """
    Debug check of a non-degeneracy precondition.

    The predicate is only evaluated when Config.check_preconditions is set.
    For batched input the check fails if any batch element is degenerate.

    Raises:
        DegenerateError: If the check is enabled and the predicate holds
    """
    if not get_config().check_preconditions:
        return
    if _any(is_degenerate()):
        logger.debug(f"Precondition violated: {message}")
        raise DegenerateError(message)


def check_axiom(p: PgObject, q: PgObject, l: PgObject) -> bool:
    """
    Check the projective plane axioms on a sample.

    Args:
        p, q: Two objects of one type (points, or lines)
        l: An object of the dual type

    Returns:
        True if equality is reflexive and symmetric, incidence is symmetric,
        the join is symmetric and incident with both of its arguments
    """
    m = p.circ(q)
    return _all(
        (p == p)
        & ((p == q) == (q == p))
        & (p.incident(l) == l.incident(p))
        & (m == q.circ(p))
        & m.incident(p)
        & m.incident(q)
    )


def check_axiom2(p: PgObject, q: PgObject, l: PgObject, a: Scalar, b: Scalar) -> bool:
    """Check the measurement axioms: symmetric dot, aux, and plucker on the join."""
    return _all(
        (p.dot(l) == l.dot(p))
        & _not(p.aux().incident(p))
        & p.circ(q).incident(type(p).plucker(a, p, b, q))
    )


def coincident(p: PgObject, q: PgObject, r: PgObject) -> Any:
    """
    Whether three points are collinear (or three lines are concurrent).

    Returns:
        bool, or a bool tensor of the batch shape
    """
    return p.circ(q).incident(r)


def check_pappus(co1: Sequence[PgObject], co2: Sequence[PgObject]) -> Any:
    """
    Check Pappus' theorem.

    Args:
        co1: Three collinear points (a, b, c)
        co2: Three collinear points (d, e, f)

    Returns:
        True if the cross joins (ae, bd), (af, cd), (bf, ce) meet in three
        collinear points
    """
    a, b, c = co1
    d, e, f = co2
    g = (a.circ(e)).circ(b.circ(d))
    h = (a.circ(f)).circ(c.circ(d))
    i = (b.circ(f)).circ(c.circ(e))
    return coincident(g, h, i)


def tri_dual(tri: Triangle) -> Trilateral:
    """
    Sides of a triangle (or vertices of a trilateral).

    Args:
        tri: Vertices (a1, a2, a3), not collinear

    Returns:
        (a2∘a3, a1∘a3, a1∘a2), the side opposite each vertex
    """
    a1, a2, a3 = tri
    require_nondegenerate(lambda: coincident(a1, a2, a3), "triangle vertices are collinear")
    return a2.circ(a3), a1.circ(a3), a1.circ(a2)


def persp(tri1: Triangle, tri2: Triangle) -> Any:
    """Whether two triangles are perspective from a point."""
    a, b, c = tri1
    d, e, f = tri2
    o = a.circ(d).circ(b.circ(e))
    return c.circ(f).incident(o)


def check_desargue(tri1: Triangle, tri2: Triangle) -> Any:
    """
    Check Desargues' theorem.

    Two triangles are perspective from a point exactly when they are
    perspective from a line, i.e. when their trilaterals are perspective.
    """
    trid1 = tri_dual(tri1)
    trid2 = tri_dual(tri2)
    b1 = persp(tri1, tri2)
    b2 = persp(trid1, trid2)
    return b1 == b2


def harm_conj(a: PgObject, b: PgObject, c: PgObject) -> PgObject:
    """
    Harmonic conjugate of c with respect to a and b.

    With c = ld*a + mu*b the result is ld*a - mu*b, so the cross ratio
    (a, b; c, d) is -1 and applying harm_conj twice gives back c.

    Args:
        a, b: Distinct points (or lines)
        c: Point on the line a∘b (or line through the meet a∘b)

    Returns:
        The harmonic conjugate d
    """
    require_nondegenerate(lambda: _not(coincident(a, b, c)), "harm_conj needs coincident a, b, c")
    ab = a.circ(b)
    lc = ab.aux().circ(c)
    return type(a).plucker(lc.dot(b), a, lc.dot(a), b)


def involution(origin: PgObject, mirror: PgObject, p: PgObject) -> PgObject:
    """
    Harmonic homology with centre origin and axis mirror applied to p.

    p is sent to the harmonic conjugate of p with respect to origin and
    the point where the line p∘origin crosses the mirror.
    """
    po = p.circ(origin)
    b = po.circ(mirror)
    return harm_conj(origin, b, p)
