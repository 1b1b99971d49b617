# mlkernels/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel base classes.

Class hierarchy
---------------
Kernel
    StandardKernel               closed-form kernel with scalar parameters
        ScalarProductKernel      k(x, y) = kappa(x^T y)
        SquaredDistanceKernel    k(x, y) = kappa(||x - y||^2)
        SeparableKernel          k(x, y) = sum_i kappa(x_i) kappa(y_i)
    ARD                          weighted statistic (see ard.py)
    CompositeKernel              Scaled, Product, Sum (see composite.py)

A concrete kernel of one of the three statistic families only defines
the scalar transform ``kappa`` and its derivatives ``kappa_dz``,
``kappa_dz2`` and ``kappa_dp``. The derivatives of k with respect to x,
y and the parameters are written once per family below.

Conventions
-----------
- ``dx(x, y)`` and ``dy(x, y)`` return vectors of length d.
- ``dxdy(x, y)`` returns the (d, d) matrix H with
  H[i, j] = d^2 k / dx_i dy_j.
- ``dp(param, x, y)`` accepts a parameter name (a dotted path for
  composite kernels) or an index into :meth:`Kernel.param_names`.
- Kernels are immutable: attribute assignment raises AttributeError.
  Use :meth:`Kernel.with_param` to obtain a modified copy.
"""
import numbers
from collections import namedtuple

import mlkernels.num as gnp
from mlkernels.errors import (
    DomainError,
    DimensionMismatch,
    UnrecognizedParameterError,
    ParameterIndexError,
)
from mlkernels.pairwise.vector import (
    check_vectors,
    _dot,
    _dot_dx,
    _dot_dw,
    _sqdist,
    _sqdist_dx,
    _sqdist_dw,
)
from mlkernels.pairwise.matrix import scprod_matrix, sqdist_matrix

KernelDescription = namedtuple("KernelDescription", ["name", "params", "children"])
KernelDescription.__doc__ = """Structured description of a kernel.

name : str
    Class name.
params : tuple of (str, value)
    Local parameters (coefficients for composite kernels).
children : tuple of KernelDescription
    Descriptions of the sub-kernels, in order.
"""


# ----------------------------------------------------------------------
#  Parameter domain checks
# ----------------------------------------------------------------------

def check_positive(name, value):
    value = check_real(name, value)
    if not value > 0:
        raise DomainError(f"{name} = {value} must be greater than zero.")
    return value


def check_nonnegative(name, value):
    value = check_real(name, value)
    if not value >= 0:
        raise DomainError(f"{name} = {value} must be greater than or equal to zero.")
    return value


def check_unit_interval(name, value):
    """0 < value <= 1"""
    value = check_real(name, value)
    if not 0 < value <= 1:
        raise DomainError(f"{name} = {value} must be in (0, 1].")
    return value


def check_real(name, value):
    value = float(value)
    if not gnp.isfinite(value):
        raise DomainError(f"{name} = {value} must be finite.")
    return value


# ----------------------------------------------------------------------
#  Batch statistic
# ----------------------------------------------------------------------

class Statistic:
    """The batch quantity a kernel is a function of.

    Parameters
    ----------
    kind : {"scprod", "sqdist"}
    weights : gnp.array, optional
        ARD weights, or None for the plain statistic.
    """

    def __init__(self, kind, weights=None):
        if kind not in ("scprod", "sqdist"):
            raise ValueError(f"unknown statistic {kind!r}")
        self.kind = kind
        self.weights = weights

    def __eq__(self, other):
        if not isinstance(other, Statistic) or self.kind != other.kind:
            return False
        if self.weights is None or other.weights is None:
            return self.weights is None and other.weights is None
        return gnp.array_equal(self.weights, other.weights)

    __hash__ = None

    def __repr__(self):
        return f"Statistic({self.kind!r}, weights={self.weights})"

    def matrix(self, X, Y=None, layout="row", symmetrize=True):
        if self.kind == "scprod":
            return scprod_matrix(X, Y, self.weights, layout, symmetrize)
        return sqdist_matrix(X, Y, self.weights, layout, symmetrize)


# ----------------------------------------------------------------------
#  Kernel
# ----------------------------------------------------------------------

class Kernel:
    """Abstract kernel.

    Subclasses implement the private methods ``_value``, ``_dx``, ``_dy``,
    ``_dxdy`` and ``_dp``, which take already validated vectors, as well
    as :meth:`param_names`, :meth:`param_values`, :meth:`resolve`,
    :meth:`with_param` and :meth:`describe`.
    """

    is_psd = False
    is_cond_psd = False

    # keep numpy scalars from broadcasting over kernels in a * k
    __array_ufunc__ = None

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def _set(self, **attrs):
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    # -- parameters

    def param_names(self):
        """Flattened parameter names, in indexing order."""
        raise NotImplementedError

    def param_values(self):
        """Flattened parameter values, in the order of :meth:`param_names`."""
        raise NotImplementedError

    @property
    def nparams(self):
        return len(self.param_names())

    def resolve(self, path):
        """Return ``(owner, local_name)`` for a parameter path.

        Raises
        ------
        UnrecognizedParameterError
            If the path does not name a parameter of this kernel.
        """
        raise NotImplementedError

    def param_path(self, param):
        """Return the parameter path for a name or an integer index."""
        if isinstance(param, str):
            self.resolve(param)
            return param
        if isinstance(param, numbers.Integral) and not isinstance(param, bool):
            names = self.param_names()
            if not 0 <= param < len(names):
                raise ParameterIndexError(
                    f"param must be between 0 and {len(names) - 1}, got {param}"
                )
            return names[param]
        raise TypeError(f"param must be a str or an int, got {type(param).__name__}")

    def with_param(self, param, value):
        """Return a copy of the kernel with one parameter replaced."""
        raise NotImplementedError

    # -- evaluation

    def value(self, x, y):
        """Kernel value k(x, y)."""
        x, y, _ = check_vectors(x, y)
        return self._value(x, y)

    __call__ = value

    def dx(self, x, y):
        """Gradient of k(x, y) with respect to x."""
        x, y, _ = check_vectors(x, y)
        return self._dx(x, y)

    def dy(self, x, y):
        """Gradient of k(x, y) with respect to y."""
        x, y, _ = check_vectors(x, y)
        return self._dy(x, y)

    def dxdy(self, x, y):
        """Matrix of mixed second derivatives d^2 k / dx_i dy_j."""
        x, y, _ = check_vectors(x, y)
        return self._dxdy(x, y)

    def dp(self, param, x, y):
        """Derivative of k(x, y) with respect to a parameter.

        Parameters
        ----------
        param : str or int
            Parameter name, dotted path, or index into :meth:`param_names`.
        x, y : array_like
            Input vectors.
        """
        path = self.param_path(param)
        x, y, _ = check_vectors(x, y)
        return self._dp(path, x, y)

    # -- batch evaluation

    @property
    def statistic(self):
        """:class:`Statistic` the kernel is a function of, or None."""
        return None

    def kappa_map(self, Z):
        """Kernel values from a matrix of the kernel's statistic."""
        raise NotImplementedError

    # -- description

    def describe(self):
        """Return a :class:`KernelDescription`."""
        raise NotImplementedError

    def __repr__(self):
        return _render(self.describe())

    # -- algebra

    def __mul__(self, other):
        from .composite import scale, multiply

        if isinstance(other, Kernel):
            return multiply(self, other)
        if isinstance(other, numbers.Real):
            return scale(other, self)
        return NotImplemented

    def __rmul__(self, other):
        from .composite import scale

        if isinstance(other, numbers.Real):
            return scale(other, self)
        return NotImplemented

    def __add__(self, other):
        from .composite import add

        if isinstance(other, Kernel):
            return add(self, other)
        return NotImplemented


def _render(desc):
    items = [f"{name}={value}" for name, value in desc.params]
    items += [_render(child) for child in desc.children]
    return f"{desc.name}({', '.join(items)})"


# ----------------------------------------------------------------------
#  Standard kernels
# ----------------------------------------------------------------------

class StandardKernel(Kernel):
    """Kernel defined by a closed-form scalar transform kappa.

    Subclasses call :meth:`_init_params` from their constructor with
    their validated parameters. Settings that are not differentiable
    (e.g. a polynomial degree) are passed in `fixed` and do not appear
    in :meth:`param_names`.
    """

    family = None

    def _init_params(self, fixed=None, **params):
        self._set(_params=dict(params), _fixed=dict(fixed or {}))

    def __getattr__(self, name):
        d = self.__dict__
        if "_params" in d and name in d["_params"]:
            return d["_params"][name]
        if "_fixed" in d and name in d["_fixed"]:
            return d["_fixed"][name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def param_names(self):
        return tuple(self._params)

    def param_values(self):
        return tuple(self._params.values())

    def resolve(self, path):
        if isinstance(path, str) and path in self._params:
            return self, path
        raise UnrecognizedParameterError(
            f"{type(self).__name__} has no parameter {path!r}; "
            f"valid names are {self.param_names()}"
        )

    def with_param(self, param, value):
        name = self.param_path(param)
        args = {**self._params, **self._fixed, name: value}
        return type(self)(**args)

    def describe(self):
        params = tuple(self._params.items()) + tuple(self._fixed.items())
        return KernelDescription(type(self).__name__, params, ())

    # scalar transform, to be defined by concrete kernels

    def kappa(self, z):
        raise NotImplementedError

    def kappa_dz(self, z):
        raise NotImplementedError

    def kappa_dz2(self, z):
        raise NotImplementedError

    def kappa_dp(self, name, z):
        raise UnrecognizedParameterError(
            f"{type(self).__name__} has no parameter {name!r}"
        )

    def kappa_map(self, Z):
        return self.kappa(Z)


class ScalarProductKernel(StandardKernel):
    """Kernels of the form k(x, y) = kappa(x^T y).

    All methods accept optional ARD weights `w`, in which case the
    statistic is sum_i w_i^2 x_i y_i.
    """

    family = "scprod"

    @property
    def statistic(self):
        return Statistic("scprod")

    def _value(self, x, y, w=None):
        return self.kappa(_dot(x, y, w))

    def _dx(self, x, y, w=None):
        return self.kappa_dz(_dot(x, y, w)) * _dot_dx(x, y, w)

    def _dy(self, x, y, w=None):
        return self.kappa_dz(_dot(x, y, w)) * _dot_dx(y, x, w)

    def _dxdy(self, x, y, w=None):
        z = _dot(x, y, w)
        w2 = gnp.ones(x.shape) if w is None else w**2
        return self.kappa_dz2(z) * gnp.outer(w2 * y, w2 * x) + self.kappa_dz(z) * gnp.diag(w2)

    def _dp(self, name, x, y, w=None):
        return self.kappa_dp(name, _dot(x, y, w))

    def _dw(self, x, y, w):
        return self.kappa_dz(_dot(x, y, w)) * _dot_dw(x, y, w)


class SquaredDistanceKernel(StandardKernel):
    """Kernels of the form k(x, y) = kappa(||x - y||^2).

    All methods accept optional ARD weights `w`, in which case the
    statistic is sum_i w_i^2 (x_i - y_i)^2.
    """

    family = "sqdist"

    @property
    def statistic(self):
        return Statistic("sqdist")

    def _value(self, x, y, w=None):
        return self.kappa(_sqdist(x, y, w))

    def _dx(self, x, y, w=None):
        return self.kappa_dz(_sqdist(x, y, w)) * _sqdist_dx(x, y, w)

    def _dy(self, x, y, w=None):
        return self.kappa_dz(_sqdist(x, y, w)) * _sqdist_dx(y, x, w)

    def _dxdy(self, x, y, w=None):
        z = _sqdist(x, y, w)
        w2 = gnp.ones(x.shape) if w is None else w**2
        e = w2 * (x - y)
        return -4.0 * self.kappa_dz2(z) * gnp.outer(e, e) - 2.0 * self.kappa_dz(z) * gnp.diag(w2)

    def _dp(self, name, x, y, w=None):
        return self.kappa_dp(name, _sqdist(x, y, w))

    def _dw(self, x, y, w):
        return self.kappa_dz(_sqdist(x, y, w)) * _sqdist_dw(x, y, w)


class SeparableKernel(StandardKernel):
    """Kernels of the form k(x, y) = kappa(x)^T kappa(y), kappa elementwise."""

    family = "separable"

    def feature_map(self, X):
        """Apply kappa elementwise to a data matrix."""
        return self.kappa(X)

    def _value(self, x, y):
        return gnp.sum(self.kappa(x) * self.kappa(y))

    def _dx(self, x, y):
        return self.kappa_dz(x) * self.kappa(y)

    def _dy(self, x, y):
        return self.kappa(x) * self.kappa_dz(y)

    def _dxdy(self, x, y):
        return gnp.diag(self.kappa_dz(x) * self.kappa_dz(y))

    def _dp(self, name, x, y):
        return gnp.sum(
            self.kappa_dp(name, x) * self.kappa(y) + self.kappa(x) * self.kappa_dp(name, y)
        )


def check_weights_length(w, x):
    if w.shape[0] != x.shape[0]:
        raise DimensionMismatch(
            f"ARD weights have length {w.shape[0]} but inputs have length {x.shape[0]}"
        )
