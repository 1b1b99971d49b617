# mlkernels/kernel/separable.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Separable kernels, k(x, y) = sum_i kappa(x_i) kappa(y_i).
"""
import mlkernels.num as gnp
from .base import SeparableKernel, check_positive, check_real


class MercerSigmoidKernel(SeparableKernel):
    """Mercer sigmoid kernel.

    .. math::
        \\kappa(t) = \\tanh\\left(\\frac{t - d}{b}\\right)

    Parameters
    ----------
    d : float
        Shift.
    b : float, > 0
        Scale.
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, d=0.0, b=1.0):
        self._init_params(d=check_real("d", d), b=check_positive("b", b))

    def kappa(self, t):
        return gnp.tanh((t - self.d) / self.b)

    def kappa_dz(self, t):
        s = gnp.tanh((t - self.d) / self.b)
        return (1.0 - s**2) / self.b

    def kappa_dz2(self, t):
        s = gnp.tanh((t - self.d) / self.b)
        return -2.0 * s * (1.0 - s**2) / self.b**2

    def kappa_dp(self, name, t):
        s = gnp.tanh((t - self.d) / self.b)
        if name == "d":
            return -(1.0 - s**2) / self.b
        if name == "b":
            return -(t - self.d) * (1.0 - s**2) / self.b**2
        return super().kappa_dp(name, t)
