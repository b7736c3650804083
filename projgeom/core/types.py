"""
Type aliases for projgeom.

Coordinate storage conventions:
==============================

A point or line stores its homogeneous coordinates in one of two forms:
    - a tuple of three scalars (int, numpy.int64, Fraction, float, ...)
    - a torch.Tensor of shape (..., 3) for a batch of objects

Tensor batches broadcast like any other torch operation, so a batch of
shape (B, 3) may be joined with a single tensor of shape (3,).
"""

from typing import Any, Sequence, Tuple, Union

import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

Scalar = Any

# Homogeneous triple as stored: tuple of scalars or (..., 3) tensor
Coord = Union[Tuple[Scalar, Scalar, Scalar], torch.Tensor]

# Anything a point or line can be constructed from
CoordLike = Union[Sequence[Scalar], torch.Tensor]

# Three vertices / three sides
Triangle = Tuple[Any, Any, Any]
Trilateral = Tuple[Any, Any, Any]

# Three quadrances or three spreads
Triple = Tuple[Scalar, Scalar, Scalar]
