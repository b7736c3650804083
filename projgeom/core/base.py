"""
Structural interfaces for projgeom.

This module defines the contracts the rest of the library relies on. They are
structural (typing.Protocol): a scalar or plane type qualifies by providing
the operations, not by inheriting from anything here.

Interface Hierarchy:
    Ring
    └── OrderedRing
        └── Integral

    CKPlane (stateless plane tag providing the polarity)
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Protocol, runtime_checkable


class DegenerateError(ValueError):
    """Raised by precondition checks on degenerate configurations."""


@runtime_checkable
class Ring(Protocol):
    """
    Scalar ring: equality, +, -, * and unary -.

    Integer literals 0, 1 and -1 must mix with the type, i.e. ``a + 0``,
    ``a * 1`` and ``a * -1`` are elements of the ring.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...


@runtime_checkable
class OrderedRing(Ring, Protocol):
    """Ring with a total order compatible with + and * by non-negatives."""

    def __lt__(self, other: Any) -> Any: ...

    def __le__(self, other: Any) -> Any: ...


@runtime_checkable
class Integral(OrderedRing, Protocol):
    """Ordered ring with exact division: (a // b) * b + a % b == a."""

    def __floordiv__(self, other: Any) -> Any: ...

    def __mod__(self, other: Any) -> Any: ...


@runtime_checkable
class CKPlane(Protocol):
    """
    Cayley-Klein plane tag.

    A tag owns no data; it only selects the polarity used by the derived
    operations in projgeom.ck.plane. Tags whose polarity collapses set a
    class attribute degenerate = True, which disables the measures in
    projgeom.ck.measure.
    """

    @staticmethod
    def perp_point(p: Any) -> Any: ...

    @staticmethod
    def perp_line(l: Any) -> Any: ...


def check_ring(a: Any, b: Any) -> bool:
    """
    Check the ring laws the library depends on for a pair of scalars.

    Args:
        a, b: Scalars of the same ring

    Returns:
        True if subtraction, the additive and the multiplicative identity agree
    """
    return (a - b == a + (-b)) and (a + 0 == a) and (a * 1 == a) and (a * -1 == -a)


def check_integral(a: Any, b: Any) -> bool:
    """Ring laws plus exact division with remainder (skipped when b == 0)."""
    if not check_ring(a, b):
        return False
    if b == 0:
        return True
    return (a // b) * b + a % b == a


def fraction(num: Any, den: Any) -> Any:
    """
    Quotient of two scalars in the smallest field containing them.

    Integral operands are promoted to Fraction, so an exact ring stays exact
    (and a zero denominator raises ZeroDivisionError). Any other operands
    use their own true division; tensors saturate to inf / nan.
    """
    if isinstance(num, numbers.Integral) and isinstance(den, numbers.Integral):
        return Fraction(int(num), int(den))
    return num / den
