# mlkernels/config.py
import os
import logging
from importlib.util import find_spec

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_BACKENDS = ("scipy", "numpy")


class _MLKernelsConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = float
        # logger lives in config
        self.logger = logging.getLogger("mlkernels")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"MLKernelsConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype})"
        )

    def __repr__(self):
        return (
            f"<MLKernelsConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self


_config = _MLKernelsConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("MLKERNELS_BACKEND")
    if env in _BACKENDS:
        return env
    if find_spec("scipy") is not None:
        return "scipy"
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["MLKERNELS_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend ('scipy'|'numpy') before importing mlkernels.num."""
    if backend not in _BACKENDS:
        raise ValueError("backend must be 'scipy' or 'numpy'")
    _config.backend = backend
    os.environ["MLKERNELS_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_dtype(dtype):
    """Floating point type used for arrays created by mlkernels.num.

    Must be called before mlkernels.num is imported.
    """
    _config.dtype = dtype


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
