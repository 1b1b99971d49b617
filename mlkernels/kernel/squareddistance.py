# mlkernels/kernel/squareddistance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Squared distance kernels, k(x, y) = kappa(z) with z = ||x - y||^2.
"""
import mlkernels.num as gnp
from .base import (
    SquaredDistanceKernel,
    check_positive,
    check_unit_interval,
)


class GaussianKernel(SquaredDistanceKernel):
    """Gaussian kernel.

    .. math::
        \\kappa(z) = \\exp(-\\alpha z)

    Parameters
    ----------
    alpha : float, > 0
        Inverse squared length scale.
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, alpha=1.0):
        self._init_params(alpha=check_positive("alpha", alpha))

    def kappa(self, z):
        return gnp.exp(-self.alpha * z)

    def kappa_dz(self, z):
        return -self.alpha * gnp.exp(-self.alpha * z)

    def kappa_dz2(self, z):
        return self.alpha**2 * gnp.exp(-self.alpha * z)

    def kappa_dp(self, name, z):
        if name == "alpha":
            return -z * gnp.exp(-self.alpha * z)
        return super().kappa_dp(name, z)


SquaredExponentialKernel = GaussianKernel


class LaplacianKernel(SquaredDistanceKernel):
    """Laplacian (exponential) kernel.

    .. math::
        \\kappa(z) = \\exp(-\\alpha \\sqrt{z})

    The derivatives with respect to the inputs are not defined at x = y.

    Parameters
    ----------
    alpha : float, > 0
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, alpha=1.0):
        self._init_params(alpha=check_positive("alpha", alpha))

    def kappa(self, z):
        return gnp.exp(-self.alpha * gnp.sqrt(z))

    def kappa_dz(self, z):
        s = gnp.sqrt(z)
        return -self.alpha * gnp.exp(-self.alpha * s) / (2.0 * s)

    def kappa_dz2(self, z):
        s = gnp.sqrt(z)
        e = gnp.exp(-self.alpha * s)
        return e * (self.alpha**2 / (4.0 * z) + self.alpha / (4.0 * z * s))

    def kappa_dp(self, name, z):
        if name == "alpha":
            s = gnp.sqrt(z)
            return -s * gnp.exp(-self.alpha * s)
        return super().kappa_dp(name, z)


ExponentialKernel = LaplacianKernel


class RationalQuadraticKernel(SquaredDistanceKernel):
    """Rational quadratic kernel.

    .. math::
        \\kappa(z) = (1 + \\alpha z)^{-\\beta}

    Parameters
    ----------
    alpha : float, > 0
    beta : float, > 0
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, alpha=1.0, beta=1.0):
        self._init_params(
            alpha=check_positive("alpha", alpha),
            beta=check_positive("beta", beta),
        )

    def kappa(self, z):
        return (1.0 + self.alpha * z) ** (-self.beta)

    def kappa_dz(self, z):
        a, b = self.alpha, self.beta
        return -a * b * (1.0 + a * z) ** (-b - 1.0)

    def kappa_dz2(self, z):
        a, b = self.alpha, self.beta
        return a**2 * b * (b + 1.0) * (1.0 + a * z) ** (-b - 2.0)

    def kappa_dp(self, name, z):
        a, b = self.alpha, self.beta
        if name == "alpha":
            return -b * z * (1.0 + a * z) ** (-b - 1.0)
        if name == "beta":
            u = 1.0 + a * z
            return -gnp.log(u) * u ** (-b)
        return super().kappa_dp(name, z)


class MultiQuadraticKernel(SquaredDistanceKernel):
    """Multiquadratic kernel.

    .. math::
        \\kappa(z) = \\sqrt{z + c^2}

    Parameters
    ----------
    c : float, > 0
    """

    def __init__(self, c=1.0):
        self._init_params(c=check_positive("c", c))

    def kappa(self, z):
        return gnp.sqrt(z + self.c**2)

    def kappa_dz(self, z):
        return 0.5 / gnp.sqrt(z + self.c**2)

    def kappa_dz2(self, z):
        return -0.25 * (z + self.c**2) ** (-1.5)

    def kappa_dp(self, name, z):
        if name == "c":
            return self.c / gnp.sqrt(z + self.c**2)
        return super().kappa_dp(name, z)


class InverseMultiQuadraticKernel(SquaredDistanceKernel):
    """Inverse multiquadratic kernel.

    .. math::
        \\kappa(z) = (z + c^2)^{-1/2}

    Parameters
    ----------
    c : float, > 0
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, c=1.0):
        self._init_params(c=check_positive("c", c))

    def kappa(self, z):
        return (z + self.c**2) ** (-0.5)

    def kappa_dz(self, z):
        return -0.5 * (z + self.c**2) ** (-1.5)

    def kappa_dz2(self, z):
        return 0.75 * (z + self.c**2) ** (-2.5)

    def kappa_dp(self, name, z):
        if name == "c":
            return -self.c * (z + self.c**2) ** (-1.5)
        return super().kappa_dp(name, z)


class PowerKernel(SquaredDistanceKernel):
    """Power kernel, conditionally positive definite.

    .. math::
        \\kappa(z) = -z^{\\gamma}

    Parameters
    ----------
    gamma : float, in (0, 1]
    """

    is_cond_psd = True

    def __init__(self, gamma=1.0):
        self._init_params(gamma=check_unit_interval("gamma", gamma))

    def kappa(self, z):
        return -(z**self.gamma)

    def kappa_dz(self, z):
        g = self.gamma
        if g == 1.0:
            return 0.0 * z - 1.0
        return -g * z ** (g - 1.0)

    def kappa_dz2(self, z):
        g = self.gamma
        if g == 1.0:
            return 0.0 * z
        return -g * (g - 1.0) * z ** (g - 2.0)

    def kappa_dp(self, name, z):
        if name == "gamma":
            return -gnp.xlogy(z**self.gamma, z)
        return super().kappa_dp(name, z)


class LogKernel(SquaredDistanceKernel):
    """Log kernel, conditionally positive definite.

    .. math::
        \\kappa(z) = -\\log(\\alpha z^{\\gamma} + 1)

    Parameters
    ----------
    alpha : float, > 0
    gamma : float, in (0, 1]
    """

    is_cond_psd = True

    def __init__(self, alpha=1.0, gamma=1.0):
        self._init_params(
            alpha=check_positive("alpha", alpha),
            gamma=check_unit_interval("gamma", gamma),
        )

    def kappa(self, z):
        return -gnp.log(self.alpha * z**self.gamma + 1.0)

    def kappa_dz(self, z):
        a, g = self.alpha, self.gamma
        du = a if g == 1.0 else a * g * z ** (g - 1.0)
        return -du / (a * z**g + 1.0)

    def kappa_dz2(self, z):
        a, g = self.alpha, self.gamma
        u1 = a * z**g + 1.0
        if g == 1.0:
            du, d2u = a, 0.0
        else:
            du = a * g * z ** (g - 1.0)
            d2u = a * g * (g - 1.0) * z ** (g - 2.0)
        return -(d2u * u1 - du**2) / u1**2

    def kappa_dp(self, name, z):
        a, g = self.alpha, self.gamma
        u1 = a * z**g + 1.0
        if name == "alpha":
            return -(z**g) / u1
        if name == "gamma":
            return -a * gnp.xlogy(z**g, z) / u1
        return super().kappa_dp(name, z)


class ConstantKernel(SquaredDistanceKernel):
    """Constant kernel, k(x, y) = c.

    Parameters
    ----------
    c : float, > 0
    """

    is_psd = True
    is_cond_psd = True

    def __init__(self, c=1.0):
        self._init_params(c=check_positive("c", c))

    def kappa(self, z):
        return 0.0 * z + self.c

    def kappa_dz(self, z):
        return 0.0 * z

    def kappa_dz2(self, z):
        return 0.0 * z

    def kappa_dp(self, name, z):
        if name == "c":
            return 0.0 * z + 1.0
        return super().kappa_dp(name, z)
