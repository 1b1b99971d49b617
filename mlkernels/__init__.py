# mlkernels/__init__.py

from . import config
from . import num
from . import errors
from . import pairwise
from . import kernel
from . import core
from .errors import (
    DomainError,
    DimensionMismatch,
    UnrecognizedParameterError,
    ParameterIndexError,
)
from .kernel import *  # noqa: F401,F403
# mlkernels.kernel is the subpackage, the function kernel(k, x, y) is
# exported as kernel_value (also available as mlkernels.core.kernel)
from .core import kernel as kernel_value
from .core import (
    kernel_dx,
    kernel_dy,
    kernel_dxdy,
    kernel_dp,
    describe,
    kernel_matrix,
    kernel_matrix_dx,
    kernel_matrix_dy,
    kernel_matrix_dxdy,
    kernel_matrix_dp,
    kernel_matrix_grad,
)
from .pairwise import scprod_matrix, sqdist_matrix

__version__ = config.__version__

__all__ = [
    "num",
    "kernel",
    "core",
    "pairwise",
    "DomainError",
    "DimensionMismatch",
    "UnrecognizedParameterError",
    "ParameterIndexError",
    "kernel_value",
    "kernel_dx",
    "kernel_dy",
    "kernel_dxdy",
    "kernel_dp",
    "describe",
    "kernel_matrix",
    "kernel_matrix_dx",
    "kernel_matrix_dy",
    "kernel_matrix_dxdy",
    "kernel_matrix_dp",
    "kernel_matrix_grad",
    "scprod_matrix",
    "sqdist_matrix",
    "__version__",
]
