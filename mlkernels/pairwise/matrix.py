# mlkernels/pairwise/matrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Batch scalar products and squared distances between observations.

A data matrix holds one observation per row (``layout="row"``, the
default) or per column (``layout="col"``). Inner-product matrices are
obtained with a single symmetric rank-k update (:func:`gnp.syrk`) or a
single matrix product (:func:`gnp.gemm`), and squared distances are
derived from them with the expansion

.. math::
    \\|x - y\\|^2 = x^T x - 2 x^T y + y^T y.
"""
import mlkernels.num as gnp
from mlkernels.errors import DimensionMismatch


def check_data(X, layout="row"):
    """Convert X to a 2-D floating point data matrix.

    A 1-D array is read as a set of scalar observations.

    Returns
    -------
    X : gnp.array
        Data matrix.
    n : int
        Number of observations.
    d : int
        Number of features.
    """
    gnp.check_layout(layout)
    X = gnp.asfloat(X)
    if X.ndim == 1:
        X = X.reshape(-1, 1) if layout == "row" else X.reshape(1, -1)
    if X.ndim != 2:
        raise DimensionMismatch(f"data must be a matrix, got {X.ndim} dimensions")
    n, d = X.shape if layout == "row" else X.shape[::-1]
    if d == 0:
        raise DimensionMismatch("observations must have at least one feature")
    return X, n, d


def _check_out(out, shape):
    if out is not None and tuple(out.shape) != tuple(shape):
        raise DimensionMismatch(
            f"output has shape {tuple(out.shape)}, expected {tuple(shape)}"
        )


def _write(out, values):
    if out is None:
        return values
    out[...] = values
    return out


def weighted(X, w, layout="row"):
    """Scale every feature of X by the corresponding entry of w."""
    w = gnp.asfloat(w)
    d = X.shape[1] if layout == "row" else X.shape[0]
    if w.ndim != 1 or w.shape[0] != d:
        raise DimensionMismatch(
            f"weights have shape {w.shape} but observations have {d} features"
        )
    return X * w if layout == "row" else X * w.reshape(-1, 1)


def squared_norms(X, layout="row", out=None):
    """Squared Euclidean norm of every observation of X.

    Parameters
    ----------
    X : array_like, shape (n, d) or (d, n)
        Data matrix, see `layout`.
    layout : {"row", "col"}
        Whether observations are the rows or the columns of X.
    out : gnp.array, shape (n,), optional
        Buffer receiving the result.

    Returns
    -------
    gnp.array, shape (n,)
    """
    X, n, _d = check_data(X, layout)
    if out is not None and (out.ndim != 1 or out.shape[0] != n):
        raise DimensionMismatch(
            f"output has length {out.shape[0] if out.ndim == 1 else out.shape}, expected {n}"
        )
    axis = 1 if layout == "row" else 0
    return _write(out, gnp.sum(X**2, axis=axis))


def gram(X, layout="row", symmetrize=True, out=None):
    """Matrix of scalar products between the observations of X.

    Parameters
    ----------
    X : array_like
        Data matrix.
    layout : {"row", "col"}
    symmetrize : bool
        If False, only the upper triangle of the result is meaningful.
    out : gnp.array, shape (n, n), optional

    Returns
    -------
    gnp.array, shape (n, n)
    """
    X, n, _d = check_data(X, layout)
    _check_out(out, (n, n))
    if n == 0:
        return _write(out, gnp.zeros((0, 0)))
    G = gnp.syrk(X, trans=(layout == "col"))
    if symmetrize:
        gnp.copytri(G)
    return _write(out, G)


def gram_xy(X, Y, layout="row", out=None):
    """Matrix of scalar products between the observations of X and Y.

    Returns
    -------
    gnp.array, shape (n, m)
    """
    X, n, dx = check_data(X, layout)
    Y, m, dy = check_data(Y, layout)
    if dx != dy:
        raise DimensionMismatch(
            f"X has {dx} features but Y has {dy}"
        )
    _check_out(out, (n, m))
    if n == 0 or m == 0:
        return _write(out, gnp.zeros((n, m)))
    if layout == "row":
        G = gnp.gemm(X, Y, trans_b=True)
    else:
        G = gnp.gemm(X, Y, trans_a=True)
    return _write(out, G)


def squared_distance_from_gram(G, xtx, yty=None, symmetrize=True):
    """Turn a matrix of scalar products into squared distances, in place.

    Parameters
    ----------
    G : gnp.array, shape (n, n) or (n, m)
        Scalar products, overwritten.
    xtx : gnp.array, shape (n,)
        Squared norms of the row observations.
    yty : gnp.array, shape (m,), optional
        Squared norms of the column observations. If omitted, G is the
        symmetric Gram matrix of a single data set and only its upper
        triangle is read.
    symmetrize : bool
        Symmetric case only: mirror the upper triangle, or else set the
        strict lower triangle to zero.

    Returns
    -------
    G : gnp.array
        The same array, holding squared distances.

    Notes
    -----
    Negative values caused by round-off are clamped to zero.
    """
    if yty is None:
        n = xtx.shape[0]
        if not (G.ndim == 2 and G.shape[0] == G.shape[1] == n):
            raise DimensionMismatch(
                f"Gram matrix must be square of size {n}, got shape {G.shape}"
            )
        iu = gnp.triu_indices(n)
        G[iu] = gnp.maximum(xtx[iu[0]] - 2.0 * G[iu] + xtx[iu[1]], 0.0)
        if symmetrize:
            gnp.copytri(G)
        else:
            G[gnp.tril_indices(n, -1)] = 0.0
        return G

    if G.ndim != 2 or G.shape[0] != xtx.shape[0]:
        raise DimensionMismatch("length of xtx must match the rows of G")
    if G.shape[1] != yty.shape[0]:
        raise DimensionMismatch("length of yty must match the columns of G")
    G[...] = gnp.maximum(xtx.reshape(-1, 1) - 2.0 * G + yty.reshape(1, -1), 0.0)
    return G


def scprod_matrix(X, Y=None, w=None, layout="row", symmetrize=True):
    """Matrix of (optionally weighted) scalar products.

    Parameters
    ----------
    X : array_like
        Data matrix.
    Y : array_like, optional
        Second data matrix. If omitted, the symmetric matrix for X is
        returned.
    w : array_like, shape (d,), optional
        Feature weights, each coordinate is scaled by w**2.
    layout : {"row", "col"}
    symmetrize : bool

    Returns
    -------
    gnp.array, shape (n, n) or (n, m)
    """
    X, _n, _d = check_data(X, layout)
    if w is not None:
        X = weighted(X, w, layout)
    if Y is None:
        return gram(X, layout, symmetrize)
    Y, _m, _dy = check_data(Y, layout)
    if w is not None:
        Y = weighted(Y, w, layout)
    return gram_xy(X, Y, layout)


def sqdist_matrix(X, Y=None, w=None, layout="row", symmetrize=True):
    """Matrix of (optionally weighted) squared distances.

    See :func:`scprod_matrix` for the parameters.
    """
    X, _n, _d = check_data(X, layout)
    if w is not None:
        X = weighted(X, w, layout)
    xtx = squared_norms(X, layout)
    if Y is None:
        G = gram(X, layout, symmetrize=False)
        return squared_distance_from_gram(G, xtx, symmetrize=symmetrize)
    Y, _m, _dy = check_data(Y, layout)
    if w is not None:
        Y = weighted(Y, w, layout)
    G = gram_xy(X, Y, layout)
    return squared_distance_from_gram(G, xtx, squared_norms(Y, layout))
