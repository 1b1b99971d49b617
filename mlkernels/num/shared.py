# mlkernels/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for mlkernels.num."""

from typing import Any, Callable, Union

from mlkernels.config import get_config

Scalar = Union[int, float]
ArrayLike = Any

LAYOUTS = ("row", "col")


def get_dtype():
    return get_config().dtype_resolved


def check_layout(layout: str) -> str:
    """Return `layout` if it names a supported data layout."""
    if layout not in LAYOUTS:
        raise ValueError(f"layout must be 'row' or 'col', got {layout!r}")
    return layout


def derivative_finite_diff(
    f: Callable[[Scalar], ArrayLike], x: Scalar, h: Scalar
) -> ArrayLike:
    """
    5-point central difference derivative of f w.r.t. scalar x.
    f(x) must return a NumPy (or similar) array/matrix/tensor.
    """
    f_x_p2 = f(x + 2 * h)
    f_x_p1 = f(x + h)
    f_x_m1 = f(x - h)
    f_x_m2 = f(x - 2 * h)
    return (-f_x_p2 + 8 * f_x_p1 - 8 * f_x_m1 + f_x_m2) / (12.0 * h)
