# mlkernels/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by mlkernels.

All of them are usage errors. They are raised before any computation
or write into a caller-supplied buffer takes place, so no partial
result is ever returned.
"""


class DomainError(ValueError):
    """A kernel parameter or coefficient lies outside its domain."""


class DimensionMismatch(ValueError):
    """Vector, matrix or output buffer shapes disagree."""


class UnrecognizedParameterError(ValueError):
    """A parameter name or path does not resolve within a kernel."""


class ParameterIndexError(UnrecognizedParameterError, IndexError):
    """An integer parameter index lies outside the flattened parameter list."""
