"""
Pytest configuration and fixtures for projgeom tests.
"""

from fractions import Fraction

import numpy as np
import pytest
import torch

from projgeom.pg import PgPoint
from projgeom.ck import Elliptic, Hyperbolic, MyCK
from projgeom.utils import get_config, set_config


# Coordinates shared by the elliptic / hyperbolic scenarios
A1 = (1, 3, 1)
A2 = (4, 2, 1)
A3 = (1, 1, -1)


@pytest.fixture(autouse=True)
def restore_config():
    """Restore the active config after each test."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture(params=[int, np.int64, Fraction], ids=["int", "int64", "fraction"])
def exact_scalar(request):
    """Exact scalar types: arbitrary precision, machine integers, rationals."""
    return request.param


@pytest.fixture(params=[Elliptic, Hyperbolic, MyCK], ids=lambda p: p.name)
def involutive_plane(request):
    """Planes whose polarity is an involution."""
    return request.param


@pytest.fixture
def triangle(exact_scalar):
    """Triangle (a1, a2, a3) over an exact scalar type."""
    return tuple(PgPoint([exact_scalar(x) for x in a]) for a in (A1, A2, A3))


@pytest.fixture
def float_triangle():
    """The same triangle with float coordinates."""
    return tuple(PgPoint([float(x) for x in a]) for a in (A1, A2, A3))


@pytest.fixture
def collinear(triangle):
    """a1, a2 and a4 = 2*a1 + 3*a2, collinear by construction."""
    a1, a2, _ = triangle
    return a1, a2, PgPoint.plucker(2, a1, 3, a2)


@pytest.fixture
def batch_coords():
    """Random integer coordinates of shape (64, 3), zero triples removed."""
    generator = torch.Generator().manual_seed(0)
    coords = torch.randint(-9, 10, (64, 3), generator=generator, dtype=torch.int64)
    return coords[(coords != 0).any(dim=-1)]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
