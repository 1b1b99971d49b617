# mlkernels/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for mlkernels.

This module defines the pure NumPy implementation of the mlkernels.num
API. The two level-3 primitives used to assemble Gram matrices,
:func:`syrk` and :func:`gemm`, are written with ``numpy.matmul`` so
that this backend satisfies the full contract without SciPy. The
``scipy`` backend reuses everything here and only replaces them.
"""

from typing import Any, Callable, Union
from mlkernels.config import get_config
from .shared import derivative_finite_diff

Scalar = Union[int, float]
ArrayLike = Any

_config = get_config()


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.dtype(_config.dtype).type
if not numpy.issubdtype(_np_dtype, numpy.floating):
    _np_dtype = numpy.float64
_config.dtype_resolved = _np_dtype

from numpy import (
    copy,
    array_equal,
    isfinite,
    allclose,
    concatenate,
    zeros_like,
    diag,
    sqrt,
    exp,
    log,
    tanh,
    sum,
    maximum,
    outer,
    matmul,
    triu,
    tril_indices,
    triu_indices,
    all,
    float64,
)

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asfloat(x):
    """Convert to a floating point array of the configured dtype.

    Scalars, including NumPy scalars and 0-d arrays, become vectors of
    length one.
    """
    if numpy.ndim(x) == 0:
        return numpy.array([x], dtype=_np_dtype)
    return numpy.asarray(x).astype(_np_dtype, copy=False)

def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def xlogy(x, y):
    """x * log(y), with the convention 0 * log(0) = 0."""
    x = numpy.asarray(x, dtype=_np_dtype)
    y = numpy.asarray(y, dtype=_np_dtype)
    safe_y = numpy.where(x == 0, 1.0, y)
    with numpy.errstate(divide="ignore", invalid="ignore"):
        return numpy.where(x == 0, 0.0, x * numpy.log(safe_y))

def isarray(x):
    return isinstance(x, numpy.ndarray)

def readonly_copy(x):
    """Return a copy of x that cannot be written to."""
    out = numpy.array(x, dtype=_np_dtype)
    out.setflags(write=False)
    return out

# ..................................................
#
#  Level-3 primitives for Gram matrices
#

def syrk(a: ArrayLike, trans: bool = False) -> ArrayLike:
    """Symmetric rank-k product ``a a^T`` (or ``a^T a`` if `trans`).

    Only the upper triangle is filled and the strict lower triangle is
    zero, as with the BLAS routine of the same name. See :func:`copytri`.
    """
    if trans:
        return triu(matmul(a.T, a))
    return triu(matmul(a, a.T))

def gemm(
    a: ArrayLike, b: ArrayLike, trans_a: bool = False, trans_b: bool = False
) -> ArrayLike:
    """General matrix product ``op(a) op(b)``."""
    a_ = a.T if trans_a else a
    b_ = b.T if trans_b else b
    return matmul(a_, b_)

def copytri(G: ArrayLike) -> ArrayLike:
    """Copy the strict upper triangle of square G into its lower triangle, in place."""
    il = tril_indices(G.shape[0], -1)
    G[il] = G.T[il]
    return G

# ..................................................

def grad(f: Callable[[ArrayLike], ArrayLike], h: Scalar = 1e-5) -> Callable[[ArrayLike], ArrayLike]:
    """
    Return function that computes gradient of scalar f via finite differences.

    Uses 5-point central difference formula for accuracy.
    Suitable for low to moderate dimensional problems.

    Parameters
    ----------
    f : callable
        Scalar-valued function taking an array and returning a scalar.
    h : float, optional
        Step size.

    Returns
    -------
    callable
        Function grad_f(x) that computes nabla f(x) using finite differences.
    """

    def grad_f(x: ArrayLike) -> ArrayLike:
        x_arr = asfloat(x)
        grad_vec = zeros_like(x_arr)

        for i in range(x_arr.shape[0]):

            def f_i(xi_scalar):
                x_copy = copy(x_arr)
                x_copy[i] = xi_scalar
                return f(x_copy)

            # derivative_finite_diff expects scalar input
            grad_vec[i] = derivative_finite_diff(f_i, float(x_arr[i]), h)

        return grad_vec

    return grad_f

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=1234)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)

def randn(*shape: int) -> ArrayLike:
    return _np_rng.normal(loc=0, scale=1, size=shape).astype(_np_dtype, copy=False)
