# mlkernels/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the mlkernels package.

This subpackage assembles kernel matrices and their derivatives from
the kernels of :mod:`mlkernels.kernel`, and offers a function-style
interface to single kernel evaluations.

Public API
----------
kernel, kernel_dx, kernel_dy, kernel_dxdy, kernel_dp, describe
    Evaluation for one pair of vectors.
kernel_matrix
    Kernel (Gram) matrix.
kernel_matrix_dx, kernel_matrix_dy, kernel_matrix_dxdy,
kernel_matrix_dp, kernel_matrix_grad
    Derivatives of kernel matrices.
"""

from .evaluate import kernel, kernel_dx, kernel_dy, kernel_dxdy, kernel_dp, describe
from .kernelmatrix import kernel_matrix
from .derivatives import (
    kernel_matrix_dx,
    kernel_matrix_dy,
    kernel_matrix_dxdy,
    kernel_matrix_dp,
    kernel_matrix_grad,
)

__all__ = [
    "kernel",
    "kernel_dx",
    "kernel_dy",
    "kernel_dxdy",
    "kernel_dp",
    "describe",
    "kernel_matrix",
    "kernel_matrix_dx",
    "kernel_matrix_dy",
    "kernel_matrix_dxdy",
    "kernel_matrix_dp",
    "kernel_matrix_grad",
]
