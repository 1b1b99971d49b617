# mlkernels/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `mlkernels.core` modules.

This file hosts:
- Kernel argument validation
- Shape/type validation & conversion helpers for (X, Y)
- Output buffer validation
"""
from mlkernels.errors import DimensionMismatch
from mlkernels.kernel import Kernel
from mlkernels.pairwise.matrix import check_data


def check_kernel(kernel):
    if not isinstance(kernel, Kernel):
        raise TypeError(f"expected a Kernel, got {type(kernel).__name__}")
    return kernel


def ensure_data(X, Y=None, layout="row"):
    """Validate and convert one or two data matrices.

    Parameters
    ----------
    X : array_like
        Data matrix, observations in rows (``layout="row"``) or in
        columns (``layout="col"``).
    Y : array_like, optional
        Second data matrix with the same layout and number of features.
    layout : {"row", "col"}

    Returns
    -------
    tuple
        (X, Y, n, m, d) where m = n if Y is None.

    Notes
    -----
    - A 1-D array is read as a set of scalar observations.
    - Y, when given, must have as many features as X.
    """
    X, n, d = check_data(X, layout)
    if Y is None:
        return X, None, n, n, d
    Y, m, dy = check_data(Y, layout)
    if dy != d:
        raise DimensionMismatch(f"X has {d} features but Y has {dy}")
    return X, Y, n, m, d


def observations(X, layout="row"):
    """View of X with one observation per row."""
    return X if layout == "row" else X.T


def check_output(out, shape):
    """Check that a caller-supplied buffer has exactly the given shape."""
    if out is not None and tuple(out.shape) != tuple(shape):
        raise DimensionMismatch(
            f"output has shape {tuple(out.shape)}, expected {tuple(shape)}"
        )
