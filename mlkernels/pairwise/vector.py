# mlkernels/pairwise/vector.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Scalar product and squared distance between two vectors.

Both statistics accept an optional weight vector `w`, in which case
each coordinate is scaled by :math:`w_i^2`:

.. math::
    \\langle x, y \\rangle_w = \\sum_i w_i^2 x_i y_i, \\qquad
    \\|x - y\\|_w^2 = \\sum_i w_i^2 (x_i - y_i)^2

Inputs are promoted to 1-D floating point arrays (scalars become
vectors of length one).
"""
import mlkernels.num as gnp
from mlkernels.errors import DimensionMismatch


def check_vectors(x, y, w=None):
    """Convert x, y (and w) to 1-D arrays of equal, nonzero length.

    Raises
    ------
    DimensionMismatch
        If the inputs are not 1-D or if their lengths differ or are zero.
    """
    x = gnp.asfloat(x)
    y = gnp.asfloat(y)
    if x.ndim != 1 or y.ndim != 1:
        raise DimensionMismatch("x and y must be vectors")
    if x.shape[0] != y.shape[0]:
        raise DimensionMismatch(
            f"x has length {x.shape[0]} but y has length {y.shape[0]}"
        )
    if x.shape[0] == 0:
        raise DimensionMismatch("x and y must have nonzero length")
    if w is None:
        return x, y, None
    w = gnp.asfloat(w)
    if w.ndim != 1 or w.shape[0] != x.shape[0]:
        raise DimensionMismatch(
            f"weights have shape {w.shape} but x and y have length {x.shape[0]}"
        )
    return x, y, w


# -- scalar product

def _dot(x, y, w=None):
    if w is None:
        return gnp.sum(x * y)
    return gnp.sum(w**2 * x * y)


def _dot_dx(x, y, w=None):
    if w is None:
        return gnp.copy(y)
    return w**2 * y


def _dot_dw(x, y, w):
    return 2.0 * w * x * y


def dot(x, y, w=None):
    """Scalar product of x and y, optionally weighted by w**2."""
    return _dot(*check_vectors(x, y, w))


def dot_dx(x, y, w=None):
    """Gradient of :func:`dot` with respect to x."""
    return _dot_dx(*check_vectors(x, y, w))


def dot_dy(x, y, w=None):
    """Gradient of :func:`dot` with respect to y."""
    x, y, w = check_vectors(x, y, w)
    return _dot_dx(y, x, w)


def dot_dw(x, y, w):
    """Gradient of the weighted :func:`dot` with respect to w."""
    return _dot_dw(*check_vectors(x, y, w))


# -- squared distance

def _sqdist(x, y, w=None):
    if w is None:
        return gnp.sum((x - y) ** 2)
    return gnp.sum((w * (x - y)) ** 2)


def _sqdist_dx(x, y, w=None):
    if w is None:
        return 2.0 * (x - y)
    return 2.0 * w**2 * (x - y)


def _sqdist_dw(x, y, w):
    return 2.0 * w * (x - y) ** 2


def sqdist(x, y, w=None):
    """Squared Euclidean distance between x and y, optionally weighted by w**2."""
    return _sqdist(*check_vectors(x, y, w))


def sqdist_dx(x, y, w=None):
    """Gradient of :func:`sqdist` with respect to x."""
    return _sqdist_dx(*check_vectors(x, y, w))


def sqdist_dy(x, y, w=None):
    """Gradient of :func:`sqdist` with respect to y."""
    x, y, w = check_vectors(x, y, w)
    return _sqdist_dx(y, x, w)


def sqdist_dw(x, y, w):
    """Gradient of the weighted :func:`sqdist` with respect to w."""
    return _sqdist_dw(*check_vectors(x, y, w))
