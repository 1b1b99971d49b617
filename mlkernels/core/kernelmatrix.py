# mlkernels/core/kernelmatrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel (Gram) matrices.

Three assembly paths are used, in order of preference:

1. statistic: the kernel is a function of a single batch statistic
   (scalar products or squared distances, possibly ARD-weighted).
   The statistic matrix is computed once with syrk / gemm, then the
   kernel's transform is applied elementwise.
2. separable: the kernel is a separable primitive, and its matrix is
   the Gram matrix of the transformed data.
3. pairwise: anything else (e.g. a sum of a scalar product kernel and
   a squared distance kernel) is evaluated pair by pair. In the
   symmetric case only the upper triangle is evaluated.
"""
import mlkernels.num as gnp
from mlkernels.config import get_logger
from mlkernels.kernel import SeparableKernel
from mlkernels.pairwise.matrix import gram, gram_xy
from .utils import check_kernel, check_output, ensure_data, observations

_logger = get_logger()


def kernel_matrix(kernel, X, Y=None, layout="row", symmetrize=True, out=None):
    """Matrix of kernel values between observations.

    Parameters
    ----------
    kernel : Kernel
    X : array_like, shape (n, d) or (d, n)
        Data matrix, see `layout`.
    Y : array_like, optional
        Second data matrix. If omitted, the symmetric matrix K(X, X)
        is computed.
    layout : {"row", "col"}
        Whether observations are the rows or the columns of X and Y.
    symmetrize : bool
        Symmetric case only. If False, only the upper triangle of the
        result is meaningful.
    out : gnp.array, shape (n, n) or (n, m), optional
        Buffer receiving the result. Its shape is checked before any
        computation.

    Returns
    -------
    gnp.array, shape (n, n) or (n, m)

    Raises
    ------
    DimensionMismatch
        If X and Y have different numbers of features, if `out` has
        the wrong shape, or if ARD weights do not match the features.
    """
    check_kernel(kernel)
    X, Y, n, m, _d = ensure_data(X, Y, layout)
    check_output(out, (n, m))
    K = _assemble(kernel, X, Y, n, m, layout, symmetrize)
    if out is None:
        return K
    out[...] = K
    return out


def _assemble(kernel, X, Y, n, m, layout, symmetrize):
    if n == 0 or m == 0:
        return gnp.zeros((n, m))

    stat = kernel.statistic
    if stat is not None:
        _logger.debug("kernel_matrix: %s statistic path for %s", stat.kind, type(kernel).__name__)
        Z = stat.matrix(X, Y, layout, symmetrize)
        return kernel.kappa_map(Z)

    if isinstance(kernel, SeparableKernel):
        _logger.debug("kernel_matrix: separable path for %s", type(kernel).__name__)
        F = kernel.feature_map(X)
        if Y is None:
            return gram(F, layout, symmetrize)
        return gram_xy(F, kernel.feature_map(Y), layout)

    _logger.debug("kernel_matrix: pairwise path for %s", type(kernel).__name__)
    return _pairwise(kernel, X, Y, n, m, layout, symmetrize)


def _pairwise(kernel, X, Y, n, m, layout, symmetrize):
    xs = observations(X, layout)
    K = gnp.zeros((n, m))
    if Y is None:
        for i in range(n):
            for j in range(i, n):
                K[i, j] = kernel._value(xs[i], xs[j])
        if symmetrize:
            gnp.copytri(K)
        return K
    ys = observations(Y, layout)
    for i in range(n):
        for j in range(m):
            K[i, j] = kernel._value(xs[i], ys[j])
    return K
