"""
Projective measurement: the cross ratio.

The cross ratio of four collinear points (or four concurrent lines) is the
one projective invariant of the plane. It is computed through a single
auxiliary object so that it works for points and lines alike.
"""

from __future__ import annotations
from typing import Any

from ..core.base import fraction
from ..core.types import Scalar
from .object import PgObject


def x_ratio(a: PgObject, b: PgObject, l: PgObject, m: PgObject) -> Scalar:
    """
    Ratio of ratios (a·l)(b·m) / ((a·m)(b·l)).

    Integral scalars give an exact Fraction; a zero denominator raises
    ZeroDivisionError for them and saturates to inf / nan for tensors.
    """
    return fraction(a.dot(l) * b.dot(m), a.dot(m) * b.dot(l))


def cross_ratio(a: PgObject, b: PgObject, c: PgObject, d: PgObject) -> Scalar:
    """
    Cross ratio (a, b; c, d).

    Args:
        a, b, c, d: Four collinear points or four concurrent lines

    Returns:
        The cross ratio; -1 when d is the harmonic conjugate of c
    """
    o = a.circ(b).aux()
    return x_ratio(a, b, o.circ(c), o.circ(d))


def is_harmonic(a: PgObject, b: PgObject, c: PgObject, d: PgObject) -> Any:
    """Whether (a, b; c, d) == -1, decided without division."""
    o = a.circ(b).aux()
    l = o.circ(c)
    m = o.circ(d)
    return a.dot(l) * b.dot(m) + a.dot(m) * b.dot(l) == 0
