# mlkernels/kernel/composite.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Composite kernels.

ScaledKernel(a, k)            a k(x, y)
KernelProduct(a, k1, k2)      a k1(x, y) k2(x, y)
KernelSum(a1, k1, a2, k2)     a1 k1(x, y) + a2 k2(x, y)

Composite kernels own deep copies of their children, which may be
composite themselves. Parameters are flattened as the coefficients
first, then the parameters of k1 prefixed with ``"k1."`` (``"k."`` for
a scaled kernel), then those of k2 prefixed with ``"k2."``. For
instance, ``KernelSum(1, GaussianKernel(), 2, LinearKernel())`` has
parameters ``("a1", "a2", "k1.alpha", "k2.c")``.

The operators build composite kernels as well::

    2.0 * k          ScaledKernel(2.0, k)
    k1 * k2          KernelProduct(1.0, k1, k2)
    k1 + k2          KernelSum(1.0, k1, 1.0, k2)

with the coefficients of scaled operands absorbed into the result.
"""
import copy

import mlkernels.num as gnp
from mlkernels.errors import UnrecognizedParameterError
from .base import Kernel, KernelDescription, check_positive


def _check_kernel(k):
    if not isinstance(k, Kernel):
        raise TypeError(f"expected a Kernel, got {type(k).__name__}")
    return copy.deepcopy(k)


class CompositeKernel(Kernel):
    """Common parameter handling of composite kernels.

    Subclasses set `_coefficients` and `_children` to the attribute
    names of their coefficients and sub-kernels.
    """

    _coefficients = ()
    _children = ()

    def _args(self):
        return {name: getattr(self, name) for name in self._coefficients + self._children}

    def children(self):
        return tuple(getattr(self, name) for name in self._children)

    @property
    def is_psd(self):
        return all(k.is_psd for k in self.children())

    @property
    def is_cond_psd(self):
        return all(k.is_cond_psd for k in self.children())

    def param_names(self):
        names = self._coefficients
        for child in self._children:
            names += tuple(f"{child}.{p}" for p in getattr(self, child).param_names())
        return names

    def param_values(self):
        values = tuple(getattr(self, name) for name in self._coefficients)
        for k in self.children():
            values += k.param_values()
        return values

    def _split(self, path):
        if isinstance(path, str):
            head, sep, rest = path.partition(".")
            if not sep and head in self._coefficients:
                return head, None
            if sep and head in self._children:
                return head, rest
        raise UnrecognizedParameterError(
            f"{type(self).__name__} has no parameter {path!r}; "
            f"valid names are {self.param_names()}"
        )

    def resolve(self, path):
        head, rest = self._split(path)
        if rest is None:
            return self, head
        return getattr(self, head).resolve(rest)

    def with_param(self, param, value):
        head, rest = self._split(self.param_path(param))
        args = self._args()
        if rest is None:
            args[head] = value
        else:
            args[head] = args[head].with_param(rest, value)
        return type(self)(**args)

    def describe(self):
        params = tuple((name, getattr(self, name)) for name in self._coefficients)
        return KernelDescription(
            type(self).__name__, params, tuple(k.describe() for k in self.children())
        )

    def _child_dp(self, path, x, y):
        head, rest = self._split(path)
        if rest is None:
            return head, None
        return head, getattr(self, head)._dp(rest, x, y)


# ----------------------------------------------------------------------

class ScaledKernel(CompositeKernel):
    """Kernel multiplied by a positive coefficient.

    Parameters
    ----------
    a : float, > 0
    k : Kernel
    """

    _coefficients = ("a",)
    _children = ("k",)

    def __init__(self, a, k):
        self._set(a=check_positive("a", a), k=_check_kernel(k))

    def _value(self, x, y):
        return self.a * self.k._value(x, y)

    def _dx(self, x, y):
        return self.a * self.k._dx(x, y)

    def _dy(self, x, y):
        return self.a * self.k._dy(x, y)

    def _dxdy(self, x, y):
        return self.a * self.k._dxdy(x, y)

    def _dp(self, path, x, y):
        head, dk = self._child_dp(path, x, y)
        if head == "a":
            return self.k._value(x, y)
        return self.a * dk

    @property
    def statistic(self):
        return self.k.statistic

    def kappa_map(self, Z):
        return self.a * self.k.kappa_map(Z)


class KernelProduct(CompositeKernel):
    """Scaled product of two kernels.

    Parameters
    ----------
    a : float, > 0
    k1, k2 : Kernel
    """

    _coefficients = ("a",)
    _children = ("k1", "k2")

    def __init__(self, a, k1, k2):
        self._set(a=check_positive("a", a), k1=_check_kernel(k1), k2=_check_kernel(k2))

    def _value(self, x, y):
        return self.a * self.k1._value(x, y) * self.k2._value(x, y)

    def _dx(self, x, y):
        k1, k2 = self.k1, self.k2
        return self.a * (k1._dx(x, y) * k2._value(x, y) + k1._value(x, y) * k2._dx(x, y))

    def _dy(self, x, y):
        k1, k2 = self.k1, self.k2
        return self.a * (k1._dy(x, y) * k2._value(x, y) + k1._value(x, y) * k2._dy(x, y))

    def _dxdy(self, x, y):
        k1, k2 = self.k1, self.k2
        return self.a * (
            k1._dxdy(x, y) * k2._value(x, y)
            + gnp.outer(k1._dx(x, y), k2._dy(x, y))
            + gnp.outer(k2._dx(x, y), k1._dy(x, y))
            + k1._value(x, y) * k2._dxdy(x, y)
        )

    def _dp(self, path, x, y):
        head, dk = self._child_dp(path, x, y)
        if head == "a":
            return self.k1._value(x, y) * self.k2._value(x, y)
        if head == "k1":
            return self.a * dk * self.k2._value(x, y)
        return self.a * self.k1._value(x, y) * dk

    @property
    def statistic(self):
        s1, s2 = self.k1.statistic, self.k2.statistic
        if s1 is not None and s1 == s2:
            return s1
        return None

    def kappa_map(self, Z):
        return self.a * self.k1.kappa_map(Z) * self.k2.kappa_map(Z)


class KernelSum(CompositeKernel):
    """Weighted sum of two kernels.

    Parameters
    ----------
    a1 : float, > 0
    k1 : Kernel
    a2 : float, > 0
    k2 : Kernel
    """

    _coefficients = ("a1", "a2")
    _children = ("k1", "k2")

    def __init__(self, a1, k1, a2, k2):
        self._set(
            a1=check_positive("a1", a1),
            a2=check_positive("a2", a2),
            k1=_check_kernel(k1),
            k2=_check_kernel(k2),
        )

    def _value(self, x, y):
        return self.a1 * self.k1._value(x, y) + self.a2 * self.k2._value(x, y)

    def _dx(self, x, y):
        return self.a1 * self.k1._dx(x, y) + self.a2 * self.k2._dx(x, y)

    def _dy(self, x, y):
        return self.a1 * self.k1._dy(x, y) + self.a2 * self.k2._dy(x, y)

    def _dxdy(self, x, y):
        return self.a1 * self.k1._dxdy(x, y) + self.a2 * self.k2._dxdy(x, y)

    def _dp(self, path, x, y):
        head, dk = self._child_dp(path, x, y)
        if head == "a1":
            return self.k1._value(x, y)
        if head == "a2":
            return self.k2._value(x, y)
        if head == "k1":
            return self.a1 * dk
        return self.a2 * dk

    @property
    def statistic(self):
        s1, s2 = self.k1.statistic, self.k2.statistic
        if s1 is not None and s1 == s2:
            return s1
        return None

    def kappa_map(self, Z):
        return self.a1 * self.k1.kappa_map(Z) + self.a2 * self.k2.kappa_map(Z)


# ----------------------------------------------------------------------
#  Operators

def _unscale(k):
    if isinstance(k, ScaledKernel):
        return k.a, k.k
    return 1.0, k


def scale(a, k):
    """a * k, folding the coefficient into scaled, product and sum kernels."""
    a = check_positive("a", a)
    if isinstance(k, ScaledKernel):
        return ScaledKernel(a * k.a, k.k)
    if isinstance(k, KernelProduct):
        return KernelProduct(a * k.a, k.k1, k.k2)
    if isinstance(k, KernelSum):
        return KernelSum(a * k.a1, k.k1, a * k.a2, k.k2)
    return ScaledKernel(a, k)


def multiply(k1, k2):
    """k1 * k2 as a KernelProduct, absorbing scaled operands."""
    a1, k1 = _unscale(k1)
    a2, k2 = _unscale(k2)
    return KernelProduct(a1 * a2, k1, k2)


def add(k1, k2):
    """k1 + k2 as a KernelSum, absorbing scaled operands."""
    a1, k1 = _unscale(k1)
    a2, k2 = _unscale(k2)
    return KernelSum(a1, k1, a2, k2)
