# mlkernels/num/scipy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""SciPy/BLAS numerical backend for mlkernels.

Same API as :mod:`mlkernels.num.numpy_backend`, with the Gram matrix
primitives routed to the BLAS ``?syrk`` and ``?gemm`` routines exposed
by :mod:`scipy.linalg.blas`.
"""

import numpy
from scipy.linalg.blas import get_blas_funcs

from .numpy_backend import *  # noqa: F401,F403
from .numpy_backend import ArrayLike, _np_dtype

# BLAS needs single or double precision
_blas_dtype = _np_dtype if _np_dtype in (numpy.float32, numpy.float64) else numpy.float64


def _blas_operand(a):
    a = numpy.asarray(a)
    if a.dtype != _blas_dtype:
        a = a.astype(_blas_dtype)
    return a


def syrk(a: ArrayLike, trans: bool = False) -> ArrayLike:
    """Symmetric rank-k product ``a a^T`` (or ``a^T a`` if `trans`).

    Only the upper triangle of the result is computed, the strict lower
    triangle is left at zero. See :func:`copytri`.
    """
    a = _blas_operand(a)
    f = get_blas_funcs("syrk", (a,))
    return f(1.0, a, trans=int(trans), lower=0)


def gemm(
    a: ArrayLike, b: ArrayLike, trans_a: bool = False, trans_b: bool = False
) -> ArrayLike:
    """General matrix product ``op(a) op(b)``."""
    a = _blas_operand(a)
    b = _blas_operand(b)
    f = get_blas_funcs("gemm", (a, b))
    return f(1.0, a, b, trans_a=int(trans_a), trans_b=int(trans_b))
