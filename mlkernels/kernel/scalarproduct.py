# mlkernels/kernel/scalarproduct.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Scalar product kernels, k(x, y) = kappa(z) with z = x^T y.
"""
import mlkernels.num as gnp
from mlkernels.errors import DomainError
from .base import (
    ScalarProductKernel,
    check_positive,
    check_nonnegative,
)


class LinearKernel(ScalarProductKernel):
    """Linear kernel.

    .. math::
        \\kappa(z) = z + c

    Parameters
    ----------
    c : float, >= 0
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, c=0.0):
        self._init_params(c=check_nonnegative("c", c))

    def kappa(self, z):
        return z + self.c

    def kappa_dz(self, z):
        return 0.0 * z + 1.0

    def kappa_dz2(self, z):
        return 0.0 * z

    def kappa_dp(self, name, z):
        if name == "c":
            return 0.0 * z + 1.0
        return super().kappa_dp(name, z)


class PolynomialKernel(ScalarProductKernel):
    """Polynomial kernel.

    .. math::
        \\kappa(z) = (\\alpha z + c)^d

    Parameters
    ----------
    alpha : float, > 0
    c : float, >= 0
    d : int, >= 1
        Degree. It is a fixed setting, not a differentiable parameter.
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, alpha=1.0, c=1.0, d=2):
        if isinstance(d, bool) or int(d) != d or d < 1:
            raise DomainError(f"d = {d} must be an integer greater than zero.")
        self._init_params(
            fixed={"d": int(d)},
            alpha=check_positive("alpha", alpha),
            c=check_nonnegative("c", c),
        )

    def kappa(self, z):
        return (self.alpha * z + self.c) ** self.d

    def kappa_dz(self, z):
        return self.alpha * self.d * (self.alpha * z + self.c) ** (self.d - 1)

    def kappa_dz2(self, z):
        if self.d == 1:
            return 0.0 * z
        d = self.d
        return self.alpha**2 * d * (d - 1) * (self.alpha * z + self.c) ** (d - 2)

    def kappa_dp(self, name, z):
        d = self.d
        if name == "alpha":
            return d * z * (self.alpha * z + self.c) ** (d - 1)
        if name == "c":
            return d * (self.alpha * z + self.c) ** (d - 1)
        return super().kappa_dp(name, z)


class SigmoidKernel(ScalarProductKernel):
    """Sigmoid (hyperbolic tangent) kernel, not positive definite.

    .. math::
        \\kappa(z) = \\tanh(\\alpha z + c)

    Parameters
    ----------
    alpha : float, > 0
    c : float, >= 0
    """

    def __init__(self, alpha=1.0, c=0.0):
        self._init_params(
            alpha=check_positive("alpha", alpha),
            c=check_nonnegative("c", c),
        )

    def kappa(self, z):
        return gnp.tanh(self.alpha * z + self.c)

    def kappa_dz(self, z):
        t = gnp.tanh(self.alpha * z + self.c)
        return self.alpha * (1.0 - t**2)

    def kappa_dz2(self, z):
        t = gnp.tanh(self.alpha * z + self.c)
        return -2.0 * self.alpha**2 * t * (1.0 - t**2)

    def kappa_dp(self, name, z):
        t = gnp.tanh(self.alpha * z + self.c)
        if name == "alpha":
            return z * (1.0 - t**2)
        if name == "c":
            return 1.0 - t**2
        return super().kappa_dp(name, z)
