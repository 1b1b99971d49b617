# mlkernels/kernel/ard.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Automatic relevance determination.

``ARD(k, w)`` evaluates the scalar product or squared distance kernel
`k` on the weighted statistic

.. math::
    \\sum_i w_i^2 x_i y_i \\quad \\text{or} \\quad \\sum_i w_i^2 (x_i - y_i)^2,

so that each feature gets its own scale. The weights are checked
against the input dimension at every call.
"""
import copy
import numbers

import mlkernels.num as gnp
from mlkernels.errors import DomainError, UnrecognizedParameterError
from .base import (
    Kernel,
    KernelDescription,
    ScalarProductKernel,
    SquaredDistanceKernel,
    Statistic,
    check_weights_length,
)


class ARD(Kernel):
    """ARD-weighted kernel.

    Parameters
    ----------
    kernel : ScalarProductKernel or SquaredDistanceKernel
        Kernel to weight. It is copied.
    weights : array_like or int
        Non-negative weights, one per input dimension. An integer d
        stands for ``ones(d)``.

    Notes
    -----
    The flattened parameters are those of `kernel` followed by
    ``"weights"``, whose derivative is a vector.
    """

    def __init__(self, kernel, weights):
        if not isinstance(kernel, (ScalarProductKernel, SquaredDistanceKernel)):
            raise TypeError(
                "ARD only implemented for ScalarProductKernel and SquaredDistanceKernel, "
                f"got {type(kernel).__name__}"
            )
        if isinstance(weights, numbers.Integral):
            weights = gnp.ones((int(weights),))
        w = gnp.readonly_copy(weights)
        if w.ndim != 1:
            raise DomainError("weights must be a vector")
        if not gnp.all(gnp.isfinite(w) & (w >= 0)):
            raise DomainError(f"weights = {w} must all be finite and >= 0.")
        self._set(kernel=copy.deepcopy(kernel), weights=w)

    def __deepcopy__(self, memo):
        return ARD(self.kernel, self.weights)

    @property
    def is_psd(self):
        return self.kernel.is_psd

    @property
    def is_cond_psd(self):
        return self.kernel.is_cond_psd

    # -- parameters

    def param_names(self):
        return self.kernel.param_names() + ("weights",)

    def param_values(self):
        return self.kernel.param_values() + (self.weights,)

    def resolve(self, path):
        if path == "weights":
            return self, path
        try:
            return self.kernel.resolve(path)
        except UnrecognizedParameterError:
            raise UnrecognizedParameterError(
                f"ARD has no parameter {path!r}; valid names are {self.param_names()}"
            ) from None

    def with_param(self, param, value):
        name = self.param_path(param)
        if name == "weights":
            return ARD(self.kernel, value)
        return ARD(self.kernel.with_param(name, value), self.weights)

    def describe(self):
        return KernelDescription(
            "ARD", (("weights", self.weights),), (self.kernel.describe(),)
        )

    # -- evaluation

    def _w(self, x):
        check_weights_length(self.weights, x)
        return self.weights

    def _value(self, x, y):
        return self.kernel._value(x, y, self._w(x))

    def _dx(self, x, y):
        return self.kernel._dx(x, y, self._w(x))

    def _dy(self, x, y):
        return self.kernel._dy(x, y, self._w(x))

    def _dxdy(self, x, y):
        return self.kernel._dxdy(x, y, self._w(x))

    def _dp(self, name, x, y):
        w = self._w(x)
        if name == "weights":
            return self.kernel._dw(x, y, w)
        return self.kernel._dp(name, x, y, w)

    @property
    def statistic(self):
        return Statistic(self.kernel.family, self.weights)

    def kappa_map(self, Z):
        return self.kernel.kappa(Z)
