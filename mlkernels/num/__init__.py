# mlkernels/num/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Numerical backend dispatcher for mlkernels."""

from mlkernels.config import init_backend, get_logger

from . import shared as _shared

_mlk_backend_ = init_backend()

if _mlk_backend_ == "scipy":
    from . import scipy_backend as _backend
elif _mlk_backend_ == "numpy":
    from . import numpy_backend as _backend
else:
    raise RuntimeError(
        "Please set the MLKERNELS_BACKEND environment variable to 'scipy' or 'numpy'."
    )

get_logger().info("Using backend: %s", _mlk_backend_)

# Re-export backend API.
for _name in dir(_backend):
    if _name.startswith("__"):
        continue
    globals()[_name] = getattr(_backend, _name)

# Re-export backend-independent helpers from shared.py.
get_dtype = _shared.get_dtype
check_layout = _shared.check_layout
derivative_finite_diff = _shared.derivative_finite_diff
