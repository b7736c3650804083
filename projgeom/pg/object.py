"""
Homogeneous object model for the projective plane.

Points and lines are both stored as homogeneous triples (x, y, z); two triples
describe the same object iff their cross product vanishes. The two types are
dual to each other: joining two points gives a line, meeting two lines gives a
point, and both are the same cross product.

Coordinates are either a tuple of scalars (any ring: int, numpy.int64,
Fraction, float) or a torch.Tensor of shape (..., 3) holding a batch. The
primitive operators below dispatch on the storage, so every derived
construction works unchanged for both.

Key operations:
- dot(a, b): sum of a_i * b_i (incidence and measurement)
- cross(a, b): join of two points / meet of two lines
- plucker(ld, p, mu, q): the combination ld*p + mu*q
"""

from __future__ import annotations
from typing import Any, Optional, Type

import numpy as np
import torch

from ..core.constants import NUM_COORDS
from ..core.types import Coord, CoordLike, Scalar
from ..utils.config import get_config


def _to_coord(coord: CoordLike) -> Coord:
    """Validate and normalize coordinate storage."""
    if isinstance(coord, np.ndarray):
        coord = torch.from_numpy(coord)
    if isinstance(coord, torch.Tensor):
        if coord.dim() == 0 or coord.shape[-1] != NUM_COORDS:
            raise ValueError(
                f"Expected {NUM_COORDS} coordinates, got shape {tuple(coord.shape)}"
            )
        return coord
    coord = tuple(coord)
    if len(coord) != NUM_COORDS:
        raise ValueError(f"Expected {NUM_COORDS} coordinates, got {len(coord)}")
    return coord


def _reference(tensors: list) -> torch.Tensor:
    # Widest operand decides the dtype for converted tuples
    return max(tensors, key=lambda t: (t.is_floating_point(), t.element_size()))


def _like(c: Any, ref: torch.Tensor) -> torch.Tensor:
    """Convert c to a tensor on ref's device, in ref's dtype when ref is floating."""
    if isinstance(c, torch.Tensor):
        return c
    dtype = ref.dtype if ref.is_floating_point() else None
    return torch.as_tensor(c, dtype=dtype, device=ref.device)


def _as_tensors(*coords: Coord) -> tuple:
    """Promote tuple operands to tensors when any operand is a tensor."""
    tensors = [c for c in coords if isinstance(c, torch.Tensor)]
    if not tensors:
        return coords
    ref = _reference(tensors)
    return tuple(_like(c, ref) for c in coords)


def _scale(k: Scalar, v: Coord) -> Coord:
    if isinstance(k, torch.Tensor) and not isinstance(v, torch.Tensor):
        v = _like(v, k)
    if isinstance(v, torch.Tensor):
        if isinstance(k, torch.Tensor) and k.dim() > 0:
            k = k.unsqueeze(-1)
        return k * v
    return tuple(k * x for x in v)


def dot(a: Coord, b: Coord) -> Scalar:
    """
    Dot product of two homogeneous triples.

    Args:
        a, b: Triples (tuples or (..., 3) tensors)

    Returns:
        a[0]*b[0] + a[1]*b[1] + a[2]*b[2], a tensor of the batch shape
        for tensor input

    Example:
        >>> dot((1, 2, 3), (3, 4, 5))
        26
    """
    if isinstance(a, torch.Tensor) or isinstance(b, torch.Tensor):
        a, b = _as_tensors(a, b)
        return (a * b).sum(dim=-1)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Coord, b: Coord) -> Coord:
    """
    Cross product of two homogeneous triples.

    Example:
        >>> cross((1, 2, 3), (3, 4, 5))
        (-2, 4, -2)
    """
    if isinstance(a, torch.Tensor) or isinstance(b, torch.Tensor):
        a, b = _as_tensors(a, b)
        a0, a1, a2 = a.unbind(dim=-1)
        b0, b1, b2 = b.unbind(dim=-1)
        return torch.stack(torch.broadcast_tensors(
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        ), dim=-1)
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def plucker(ld: Scalar, p: Coord, mu: Scalar, q: Coord) -> Coord:
    """
    Plucker combination ld*p + mu*q.

    The result lies on the line through p and q (or, dually, passes through
    the meet of two lines p and q).

    Example:
        >>> plucker(1, (1, 2, 3), -1, (3, 4, 5))
        (-2, -2, -2)
    """
    u = _scale(ld, p)
    v = _scale(mu, q)
    if isinstance(u, torch.Tensor) or isinstance(v, torch.Tensor):
        u, v = _as_tensors(u, v)
        return u + v
    return tuple(x + y for x, y in zip(u, v))


def triple(x: Scalar, y: Scalar, z: Scalar) -> Coord:
    """Assemble a triple from components, stacking when they are tensors."""
    tensors = [c for c in (x, y, z) if isinstance(c, torch.Tensor)]
    if tensors:
        ref = _reference(tensors)
        x, y, z = (_like(c, ref) for c in (x, y, z))
        return torch.stack(torch.broadcast_tensors(x, y, z), dim=-1)
    return (x, y, z)


def _all_zero(v: Coord) -> Any:
    if isinstance(v, torch.Tensor):
        return (v == 0).all(dim=-1)
    return all(x == 0 for x in v)


def _coord_of(x: Any) -> Coord:
    return x.coord if isinstance(x, PgObject) else x


def is_zero(v: Any, atol: Optional[float] = None) -> Any:
    """
    Tolerance-based test that a triple is the zero triple.

    Args:
        v: Triple or PgObject
        atol: Absolute tolerance (defaults to the configured atol)

    Returns:
        bool, or a bool tensor of the batch shape
    """
    atol = get_config().atol if atol is None else atol
    v = _coord_of(v)
    if isinstance(v, torch.Tensor):
        return (v.abs() <= atol).all(dim=-1)
    return all(abs(x) <= atol for x in v)


def approx_equal(a: Any, b: Any, atol: Optional[float] = None) -> Any:
    """Equality up to scale with a tolerance on the cross product."""
    return is_zero(cross(_coord_of(a), _coord_of(b)), atol)


def is_degenerate(obj: PgObject) -> Any:
    """True for the all-zero triple, which names no point or line."""
    return _all_zero(obj.coord)


class PgObject:
    """
    A point or line of the projective plane in homogeneous coordinates.

    Subclasses declare their dual type in the class attribute `Dual`;
    joins and meets of two objects produce an instance of the dual type.
    Equality is equality up to a nonzero scalar multiple, so objects are
    not hashable.
    """

    __slots__ = ("coord",)

    Dual: Type[PgObject]

    def __init__(self, coord: CoordLike):
        """
        Initialize from homogeneous coordinates.

        Args:
            coord: Sequence of 3 scalars, or array/tensor of shape (..., 3).
                The zero triple is accepted but is degenerate.
        """
        self.coord = _to_coord(coord)

    @property
    def is_batched(self) -> bool:
        return isinstance(self.coord, torch.Tensor)

    def to_tensor(self, dtype: Optional[torch.dtype] = None) -> PgObject:
        """Return the same object with tensor coordinate storage."""
        return type(self)(torch.as_tensor(self.coord, dtype=dtype))

    def __getitem__(self, i: int) -> Scalar:
        if isinstance(self.coord, torch.Tensor):
            return self.coord[..., i]
        return self.coord[i]

    # === Primitive operators ===

    def dot(self, other: PgObject) -> Scalar:
        """Basic measurement between this object and one of the dual type."""
        return dot(self.coord, other.coord)

    def incident(self, other: PgObject) -> Any:
        """Point lies on line (or line passes through point)."""
        return dot(self.coord, other.coord) == 0

    def circ(self, other: PgObject) -> PgObject:
        """Join of two points or meet of two lines."""
        return self.Dual(cross(self.coord, other.coord))

    def aux(self) -> PgObject:
        """An object of the dual type not incident with this one."""
        return self.Dual(self.coord)

    @classmethod
    def plucker(cls, ld: Scalar, p: PgObject, mu: Scalar, q: PgObject) -> PgObject:
        return cls(plucker(ld, p.coord, mu, q.coord))

    # === Equality up to scale ===

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, PgObject) or type(other) is not type(self):
            return NotImplemented
        return _all_zero(cross(self.coord, other.coord))

    def __ne__(self, other: object) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        if isinstance(result, torch.Tensor):
            return ~result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coord!r})"


class PgPoint(PgObject):
    """Point of the projective plane."""

    __slots__ = ()


class PgLine(PgObject):
    """Line of the projective plane."""

    __slots__ = ()


PgPoint.Dual = PgLine
PgLine.Dual = PgPoint
