# mlkernels/core/derivatives.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Derivatives of kernel matrices.

For data sets of n and m observations with d features:

- kernel_matrix_dx, kernel_matrix_dy: shape (n, m, d), entry [i, j]
  is the gradient of k(x_i, y_j) with respect to x_i (resp. y_j).
- kernel_matrix_dxdy: shape (n, m, d, d), entry [i, j] is the matrix
  of mixed derivatives of k(x_i, y_j).
- kernel_matrix_dp: shape (n, m), or (n, m, d) for a vector parameter
  such as ARD weights.
"""
import mlkernels.num as gnp
from .utils import check_kernel, ensure_data, observations


def _pairs(X, Y, layout):
    xs = observations(X, layout)
    ys = xs if Y is None else observations(Y, layout)
    return xs, ys


def _fill(f, xs, ys, n, m, shape):
    out = gnp.empty((n, m) + shape)
    for i in range(n):
        for j in range(m):
            out[i, j] = f(xs[i], ys[j])
    return out


def kernel_matrix_dx(kernel, X, Y=None, layout="row"):
    """Gradients of k(x_i, y_j) with respect to x_i, shape (n, m, d)."""
    check_kernel(kernel)
    X, Y, n, m, d = ensure_data(X, Y, layout)
    xs, ys = _pairs(X, Y, layout)
    return _fill(kernel._dx, xs, ys, n, m, (d,))


def kernel_matrix_dy(kernel, X, Y=None, layout="row"):
    """Gradients of k(x_i, y_j) with respect to y_j, shape (n, m, d)."""
    check_kernel(kernel)
    X, Y, n, m, d = ensure_data(X, Y, layout)
    xs, ys = _pairs(X, Y, layout)
    return _fill(kernel._dy, xs, ys, n, m, (d,))


def kernel_matrix_dxdy(kernel, X, Y=None, layout="row"):
    """Mixed second derivatives of k(x_i, y_j), shape (n, m, d, d)."""
    check_kernel(kernel)
    X, Y, n, m, d = ensure_data(X, Y, layout)
    xs, ys = _pairs(X, Y, layout)
    return _fill(kernel._dxdy, xs, ys, n, m, (d, d))


def kernel_matrix_dp(kernel, param, X, Y=None, layout="row"):
    """Derivative of the kernel matrix with respect to one parameter.

    Parameters
    ----------
    kernel : Kernel
    param : str or int
        Parameter name, dotted path, or index into
        ``kernel.param_names()``.
    X, Y : array_like
        Data matrices, see :func:`kernel_matrix`.
    layout : {"row", "col"}

    Returns
    -------
    gnp.array, shape (n, m) or (n, m, d)
    """
    check_kernel(kernel)
    path = kernel.param_path(param)
    X, Y, n, m, d = ensure_data(X, Y, layout)
    if n == 0 or m == 0:
        return gnp.zeros((n, m))
    xs, ys = _pairs(X, Y, layout)

    def f(x, y):
        return kernel._dp(path, x, y)

    shape = getattr(f(xs[0], ys[0]), "shape", ())
    if Y is not None:
        return _fill(f, xs, ys, n, m, shape)

    # kernels are symmetric: fill the upper triangle and mirror it
    out = gnp.empty((n, n) + shape)
    for i in range(n):
        for j in range(i, n):
            out[i, j] = f(xs[i], xs[j])
            out[j, i] = out[i, j]
    return out


def kernel_matrix_grad(kernel, X, Y=None, layout="row"):
    """List of :func:`kernel_matrix_dp` over all parameters, in flattened order."""
    check_kernel(kernel)
    return [
        kernel_matrix_dp(kernel, name, X, Y, layout) for name in kernel.param_names()
    ]
