# mlkernels/pairwise/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Pairwise statistics feeding the kernels.

Modules
-------
vector
    Scalar product and squared distance between two vectors, and
    their gradients.
matrix
    Squared norms, Gram matrices and squared-distance matrices for a
    whole data set, built on the backend's syrk / gemm primitives.
"""

from .vector import (
    dot,
    dot_dx,
    dot_dy,
    dot_dw,
    sqdist,
    sqdist_dx,
    sqdist_dy,
    sqdist_dw,
)
from .matrix import (
    squared_norms,
    gram,
    gram_xy,
    squared_distance_from_gram,
    scprod_matrix,
    sqdist_matrix,
)

__all__ = [
    "dot",
    "dot_dx",
    "dot_dy",
    "dot_dw",
    "sqdist",
    "sqdist_dx",
    "sqdist_dy",
    "sqdist_dw",
    "squared_norms",
    "gram",
    "gram_xy",
    "squared_distance_from_gram",
    "scprod_matrix",
    "sqdist_matrix",
]
