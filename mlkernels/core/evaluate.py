# mlkernels/core/evaluate.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Function-style access to kernel values and derivatives for one pair
of vectors, equivalent to the corresponding Kernel methods.
"""
from .utils import check_kernel


def kernel(k, x, y):
    """Value k(x, y)."""
    return check_kernel(k).value(x, y)


def kernel_dx(k, x, y):
    """Gradient of k(x, y) with respect to x."""
    return check_kernel(k).dx(x, y)


def kernel_dy(k, x, y):
    """Gradient of k(x, y) with respect to y."""
    return check_kernel(k).dy(x, y)


def kernel_dxdy(k, x, y):
    """Matrix H of mixed derivatives, H[i, j] = d^2 k / dx_i dy_j."""
    return check_kernel(k).dxdy(x, y)


def kernel_dp(k, param, x, y):
    """Derivative of k(x, y) with respect to a parameter (name, path or index)."""
    return check_kernel(k).dp(param, x, y)


def describe(k):
    """Structured description (name, parameters, children) of a kernel."""
    return check_kernel(k).describe()
