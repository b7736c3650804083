"""
Tests for rational measurement in Cayley-Klein planes.

These tests define:
1. omega, quadrance and spread from the polarity
2. The triple quad formula for collinear points
3. The cross law and its dual with quadrances and spreads exchanged
4. Division semantics: exact Fractions for integral scalars, saturating
   inf / nan for float tensors
"""

from fractions import Fraction

import numpy as np
import pytest
import torch

from projgeom.core import fraction
from projgeom.pg import PgPoint, PgLine, tri_dual
from projgeom.ck import (
    Elliptic,
    Hyperbolic,
    Perspective,
    Euclidean,
    altitude,
    sq,
    omega,
    measure,
    quadrance,
    spread,
    tri_quadrance,
    tri_spread,
    archimedes,
    check_cross_tqf,
    check_cross_law,
)


# =============================================================================
# Basic Measures
# =============================================================================

class TestMeasures:
    """Tests for omega, quadrance and spread."""

    def test_sq(self):
        assert sq(3) == 9
        assert sq(Fraction(-1, 2)) == Fraction(1, 4)

    def test_omega(self):
        p = PgPoint((1, 3, 1))
        assert omega(Elliptic, p) == 11
        assert omega(Hyperbolic, p) == 9

    @pytest.mark.parametrize("plane", [Perspective, Euclidean], ids=lambda p: p.name)
    def test_degenerate_polarity_has_no_omega(self, plane):
        with pytest.raises(NotImplementedError, match="degenerate polarity"):
            omega(plane, PgPoint((1, 3, 1)))
        with pytest.raises(NotImplementedError):
            quadrance(plane, PgPoint((1, 3, 1)), PgPoint((4, 2, 1)))

    def test_degenerate_flag(self):
        assert Perspective.degenerate and Euclidean.degenerate
        assert not getattr(Elliptic, "degenerate", False)

    def test_user_plane_flagged_degenerate(self):
        """A caller-defined tag opts out of the measures by the same flag."""

        class Affine:
            name = "affine"
            degenerate = True

            @staticmethod
            def perp_point(p):
                return PgLine((0, 0, 1))

            @staticmethod
            def perp_line(l):
                return PgPoint((l[0], l[1], 0))

        with pytest.raises(NotImplementedError, match="affine plane"):
            omega(Affine, PgPoint((1, 3, 1)))

    def test_quadrance_of_equal_points(self, triangle, involutive_plane):
        a1, _, _ = triangle
        assert quadrance(involutive_plane, a1, a1) == 0

    def test_quadrance_is_symmetric(self, triangle, involutive_plane):
        a1, a2, _ = triangle
        assert quadrance(involutive_plane, a1, a2) == quadrance(involutive_plane, a2, a1)

    def test_elliptic_quadrance_value(self):
        """1 - (a.b)^2 / (|a|^2 |b|^2) = 1 - 121 / 231."""
        q = quadrance(Elliptic, PgPoint((1, 3, 1)), PgPoint((4, 2, 1)))
        assert q == Fraction(10, 21)

    def test_quadrance_is_exact(self, triangle, involutive_plane):
        a1, a2, _ = triangle
        assert isinstance(quadrance(involutive_plane, a1, a2), Fraction)

    def test_spread_of_perpendicular_lines(self, triangle, involutive_plane):
        a1, _, _ = triangle
        l1, _, _ = tri_dual(triangle)
        t = altitude(involutive_plane, a1, l1)
        assert spread(involutive_plane, t, l1) == 1

    def test_measure_is_scale_invariant(self, involutive_plane):
        a, b = PgPoint((1, 3, 1)), PgPoint((4, 2, 1))
        assert measure(involutive_plane, a, b) == measure(involutive_plane, PgPoint((-2, -6, -2)), b)

    def test_tri_quadrance_order(self, triangle):
        a1, a2, a3 = triangle
        q1, q2, q3 = tri_quadrance(Hyperbolic, triangle)
        assert q1 == quadrance(Hyperbolic, a2, a3)
        assert q2 == quadrance(Hyperbolic, a1, a3)
        assert q3 == quadrance(Hyperbolic, a1, a2)

    def test_tri_spread_order(self, triangle):
        l1, l2, l3 = tri_dual(triangle)
        s1, s2, s3 = tri_spread(Hyperbolic, (l1, l2, l3))
        assert s1 == spread(Hyperbolic, l2, l3)
        assert s3 == spread(Hyperbolic, l1, l2)


# =============================================================================
# Triple Quad Formula and Cross Law
# =============================================================================

class TestLaws:
    """Identities that hold exactly in every non-degenerate plane."""

    def test_archimedes(self):
        assert archimedes(25, 45, 10) == 900
        assert archimedes(45, 10, 25) == 900
        assert archimedes(10, 25, 45) == 900

    def test_tqf_collinear(self, collinear, involutive_plane):
        q = tri_quadrance(involutive_plane, collinear)
        assert check_cross_tqf(q) == 0

    def test_tqf_triangle_is_nonzero(self, triangle):
        assert check_cross_tqf(tri_quadrance(Elliptic, triangle)) != 0

    def test_cross_law(self, triangle, involutive_plane):
        trilateral = tri_dual(triangle)
        q = tri_quadrance(involutive_plane, triangle)
        s = tri_spread(involutive_plane, trilateral)
        assert check_cross_law(s, q[2]) == 0

    def test_dual_cross_law(self, triangle, involutive_plane):
        trilateral = tri_dual(triangle)
        q = tri_quadrance(involutive_plane, triangle)
        s = tri_spread(involutive_plane, trilateral)
        assert check_cross_law(q, s[2]) == 0

    def test_tqf_batched_float(self, batch_coords):
        coords = batch_coords.to(torch.float64)
        a = PgPoint(coords)
        b = PgPoint(coords.roll(1, dims=0))
        c = PgPoint.plucker(2.0, a, 3.0, b)
        residue = check_cross_tqf(tri_quadrance(Elliptic, (a, b, c)))
        assert residue.shape == (coords.shape[0],)
        assert bool((residue.abs() < 1e-9).all())


# =============================================================================
# Division Semantics
# =============================================================================

class TestFraction:
    """Exact promotion for integral scalars, saturation for tensors."""

    def test_integral_promotes_to_fraction(self):
        assert fraction(3, 6) == Fraction(1, 2)
        assert isinstance(fraction(3, 6), Fraction)

    def test_numpy_integers_promote(self):
        r = fraction(np.int64(3), np.int64(6))
        assert r == Fraction(1, 2)
        assert isinstance(r, Fraction)

    def test_float_division(self):
        assert fraction(1.0, 4) == 0.25

    def test_zero_denominator_raises(self):
        with pytest.raises(ZeroDivisionError):
            fraction(1, 0)
        with pytest.raises(ZeroDivisionError):
            fraction(Fraction(1, 2), Fraction(0))

    def test_tensor_saturates(self):
        inf = fraction(torch.tensor(1.0), torch.tensor(0.0))
        nan = fraction(torch.tensor(0.0), torch.tensor(0.0))
        assert torch.isinf(inf)
        assert torch.isnan(nan)

    def test_integer_tensor_uses_true_division(self):
        r = fraction(torch.tensor([1, 3]), torch.tensor([2, 0]))
        assert r[0].item() == 0.5
        assert torch.isinf(r[1])

    def test_absorption_laws(self):
        inf = fraction(torch.tensor(1.0), torch.tensor(0.0))
        nan = fraction(torch.tensor(0.0), torch.tensor(0.0))
        assert inf == inf * 3
        assert inf == inf * torch.tensor(0.5)
        assert torch.isnan(inf * 0)
        assert torch.isnan(inf - inf)
        assert torch.isnan(nan * 5)
        assert torch.isnan(nan + inf)
