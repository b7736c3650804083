"""
PG (projective geometry) module.

Implements the homogeneous object model of the projective plane and the
duality-aware constructions built from its primitive operators.
"""

from .object import (
    PgObject,
    PgPoint,
    PgLine,
    dot,
    cross,
    plucker,
    triple,
    is_zero,
    approx_equal,
    is_degenerate,
)

from .plane import (
    require_nondegenerate,
    check_axiom,
    check_axiom2,
    coincident,
    check_pappus,
    tri_dual,
    persp,
    check_desargue,
    harm_conj,
    involution,
)

from .measure import (
    x_ratio,
    cross_ratio,
    is_harmonic,
)

__all__ = [
    # Object model
    "PgObject",
    "PgPoint",
    "PgLine",
    "dot",
    "cross",
    "plucker",
    "triple",
    "is_zero",
    "approx_equal",
    "is_degenerate",
    # Plane protocol
    "require_nondegenerate",
    "check_axiom",
    "check_axiom2",
    "coincident",
    "check_pappus",
    "tri_dual",
    "persp",
    "check_desargue",
    "harm_conj",
    "involution",
    # Measurement
    "x_ratio",
    "cross_ratio",
    "is_harmonic",
]
