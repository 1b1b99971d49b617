# mlkernels/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel functions.

This subpackage provides the kernel class hierarchy, the closed-form
kernels and the composition algebra.

Modules
-------
base
    Kernel protocol, statistic families and their generic derivatives.
squareddistance
    Gaussian, Laplacian, rational quadratic, (inverse) multiquadratic,
    power, log and constant kernels.
scalarproduct
    Linear, polynomial and sigmoid kernels.
separable
    Mercer sigmoid kernel.
ard
    Automatic relevance determination weighting.
composite
    Scaled kernels, kernel products and kernel sums.

Public API
-----------
- Base classes:
    Kernel, StandardKernel, ScalarProductKernel, SquaredDistanceKernel,
    SeparableKernel, CompositeKernel, KernelDescription, Statistic
- Squared distance kernels:
    GaussianKernel (SquaredExponentialKernel), LaplacianKernel
    (ExponentialKernel), RationalQuadraticKernel, MultiQuadraticKernel,
    InverseMultiQuadraticKernel, PowerKernel, LogKernel, ConstantKernel
- Scalar product kernels:
    LinearKernel, PolynomialKernel, SigmoidKernel
- Separable kernels:
    MercerSigmoidKernel
- Wrappers:
    ARD, ScaledKernel, KernelProduct, KernelSum
"""

from .base import (
    Kernel,
    KernelDescription,
    Statistic,
    StandardKernel,
    ScalarProductKernel,
    SquaredDistanceKernel,
    SeparableKernel,
)
from .squareddistance import (
    GaussianKernel,
    SquaredExponentialKernel,
    LaplacianKernel,
    ExponentialKernel,
    RationalQuadraticKernel,
    MultiQuadraticKernel,
    InverseMultiQuadraticKernel,
    PowerKernel,
    LogKernel,
    ConstantKernel,
)
from .scalarproduct import LinearKernel, PolynomialKernel, SigmoidKernel
from .separable import MercerSigmoidKernel
from .ard import ARD
from .composite import CompositeKernel, ScaledKernel, KernelProduct, KernelSum

__all__ = [
    # Base classes
    "Kernel",
    "KernelDescription",
    "Statistic",
    "StandardKernel",
    "ScalarProductKernel",
    "SquaredDistanceKernel",
    "SeparableKernel",
    "CompositeKernel",
    # Squared distance kernels
    "GaussianKernel",
    "SquaredExponentialKernel",
    "LaplacianKernel",
    "ExponentialKernel",
    "RationalQuadraticKernel",
    "MultiQuadraticKernel",
    "InverseMultiQuadraticKernel",
    "PowerKernel",
    "LogKernel",
    "ConstantKernel",
    # Scalar product kernels
    "LinearKernel",
    "PolynomialKernel",
    "SigmoidKernel",
    # Separable kernels
    "MercerSigmoidKernel",
    # Wrappers
    "ARD",
    "ScaledKernel",
    "KernelProduct",
    "KernelSum",
]
