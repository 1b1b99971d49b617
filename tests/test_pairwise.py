import unittest

import numpy
import pytest

import mlkernels.num as gnp
from mlkernels.errors import DimensionMismatch
from mlkernels.num import numpy_backend
from mlkernels.pairwise import (
    dot,
    dot_dx,
    dot_dy,
    dot_dw,
    sqdist,
    sqdist_dx,
    sqdist_dy,
    sqdist_dw,
    squared_norms,
    gram,
    gram_xy,
    squared_distance_from_gram,
    scprod_matrix,
    sqdist_matrix,
)

from kernel_checks import assert_close


class TestVectorStatistics(unittest.TestCase):
    def setUp(self):
        self.x = gnp.array([1.0, 2.0, 3.0])
        self.y = gnp.array([0.5, -1.0, 2.0])
        self.w = gnp.array([2.0, 0.5, 1.0])

    def test_dot(self):
        self.assertAlmostEqual(float(dot(self.x, self.y)), 0.5 - 2.0 + 6.0)
        self.assertAlmostEqual(float(dot(self.x, self.y, self.w)), 4 * 0.5 - 0.25 * 2.0 + 6.0)

    def test_sqdist(self):
        self.assertAlmostEqual(float(sqdist(self.x, self.y)), 0.25 + 9.0 + 1.0)
        self.assertAlmostEqual(float(sqdist(self.x, self.y, self.w)), 4 * 0.25 + 0.25 * 9.0 + 1.0)

    def test_scalars_are_vectors_of_length_one(self):
        self.assertAlmostEqual(float(sqdist(1.0, 3.0)), 4.0)
        self.assertAlmostEqual(float(dot(2.0, 3.0)), 6.0)

    def test_numpy_scalars_and_zero_dimensional_arrays(self):
        d = dot(numpy.float32(2.0), numpy.int64(3))
        self.assertEqual(d.shape, ())
        self.assertAlmostEqual(float(d), 6.0)
        self.assertAlmostEqual(float(sqdist(gnp.array(1.0), gnp.float64(3.0))), 4.0)
        assert_close(sqdist_dx(gnp.array(1.0), numpy.int64(3)), [-4.0])

    def test_length_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            dot([1, 2, 3], [1, 2])
        with self.assertRaises(DimensionMismatch):
            sqdist([1.0, 2.0], [1.0, 2.0], [1.0])

    def test_empty_and_non_vector_inputs(self):
        with self.assertRaises(DimensionMismatch):
            dot(gnp.zeros((0,)), gnp.zeros((0,)))
        with self.assertRaises(DimensionMismatch):
            sqdist(gnp.ones((2, 2)), gnp.ones((2, 2)))

    def test_gradients_match_finite_differences(self):
        x, y, w = self.x, self.y, self.w
        for f, df in ((dot, dot_dx), (sqdist, sqdist_dx)):
            for weights in (None, w):
                assert_close(df(x, y, weights), gnp.grad(lambda x_: f(x_, y, weights))(x))
        for f, df in ((dot, dot_dy), (sqdist, sqdist_dy)):
            for weights in (None, w):
                assert_close(df(x, y, weights), gnp.grad(lambda y_: f(x, y_, weights))(y))
        assert_close(dot_dw(x, y, w), gnp.grad(lambda w_: dot(x, y, w_))(w))
        assert_close(sqdist_dw(x, y, w), gnp.grad(lambda w_: sqdist(x, y, w_))(w))


def brute_force(f, X, Y, w=None):
    return gnp.array([[float(f(x, y, w)) for y in Y] for x in X])


class TestMatrixStatistics(unittest.TestCase):
    def setUp(self):
        gnp.set_seed(42)
        self.X = gnp.randn(6, 3)
        self.Y = gnp.randn(4, 3)
        self.w = gnp.array([0.3, 1.0, 2.0])

    def test_squared_norms(self):
        expected = gnp.sum(self.X**2, axis=1)
        assert_close(squared_norms(self.X), expected)
        assert_close(squared_norms(self.X.T, layout="col"), expected)
        out = gnp.zeros((6,))
        self.assertIs(squared_norms(self.X, out=out), out)
        assert_close(out, expected)
        with self.assertRaises(DimensionMismatch):
            squared_norms(self.X, out=gnp.zeros((5,)))

    def test_gram(self):
        G = gram(self.X)
        assert_close(G, gnp.matmul(self.X, self.X.T))
        assert_close(gram(self.X.T, layout="col"), G)

    def test_gram_upper_triangle_only(self):
        G = gram(self.X, symmetrize=False)
        iu = gnp.triu_indices(6)
        assert_close(G[iu], gnp.matmul(self.X, self.X.T)[iu])

    def test_gram_xy(self):
        expected = gnp.matmul(self.X, self.Y.T)
        assert_close(gram_xy(self.X, self.Y), expected)
        assert_close(gram_xy(self.X.T, self.Y.T, layout="col"), expected)
        with self.assertRaises(DimensionMismatch):
            gram_xy(self.X, gnp.ones((4, 2)))

    def test_gram_out_buffer(self):
        out = gnp.full((6, 6), -1.0)
        self.assertIs(gram(self.X, out=out), out)
        with self.assertRaises(DimensionMismatch):
            gram(self.X, out=gnp.zeros((6, 5)))

    def test_squared_distance_from_gram(self):
        G = gnp.matmul(self.X, self.Y.T)
        D = squared_distance_from_gram(G, squared_norms(self.X), squared_norms(self.Y))
        self.assertIs(D, G)
        assert_close(D, brute_force(sqdist, self.X, self.Y))

        G = gram(self.X, symmetrize=False)
        D = squared_distance_from_gram(G, squared_norms(self.X))
        assert_close(D, brute_force(sqdist, self.X, self.X))

    def test_squared_distance_from_full_gram_without_symmetrize(self):
        G = gnp.matmul(self.X, self.X.T)
        D = squared_distance_from_gram(G, squared_norms(self.X), symmetrize=False)
        iu = gnp.triu_indices(6)
        il = gnp.tril_indices(6, -1)
        assert_close(D[iu], brute_force(sqdist, self.X, self.X)[iu])
        self.assertTrue(gnp.all(D[il] == 0.0))

    def test_squared_distance_from_gram_shape_errors(self):
        xtx = squared_norms(self.X)
        with self.assertRaises(DimensionMismatch):
            squared_distance_from_gram(gnp.zeros((5, 5)), xtx)
        with self.assertRaises(DimensionMismatch):
            squared_distance_from_gram(gnp.zeros((6, 4)), xtx, gnp.zeros((3,)))
        with self.assertRaises(DimensionMismatch):
            squared_distance_from_gram(gnp.zeros((5, 4)), xtx, squared_norms(self.Y))

    def test_squared_distances_are_nonnegative(self):
        X = gnp.concatenate([self.X, self.X]) * 1e3
        D = sqdist_matrix(X)
        self.assertTrue(gnp.all(D >= 0.0))
        self.assertTrue(gnp.all(gnp.diag(D) >= 0.0))

    def test_weighted_matrices(self):
        w = self.w
        assert_close(scprod_matrix(self.X, w=w), brute_force(dot, self.X, self.X, w))
        assert_close(scprod_matrix(self.X, self.Y, w=w), brute_force(dot, self.X, self.Y, w))
        assert_close(sqdist_matrix(self.X, w=w), brute_force(sqdist, self.X, self.X, w))
        assert_close(sqdist_matrix(self.X, self.Y, w=w), brute_force(sqdist, self.X, self.Y, w))
        assert_close(
            sqdist_matrix(self.X.T, self.Y.T, w=w, layout="col"),
            brute_force(sqdist, self.X, self.Y, w),
        )
        with self.assertRaises(DimensionMismatch):
            sqdist_matrix(self.X, w=gnp.ones((2,)))

    def test_one_dimensional_data_are_scalar_observations(self):
        x = gnp.array([0.0, 1.0, 3.0])
        assert_close(sqdist_matrix(x), [[0.0, 1.0, 9.0], [1.0, 0.0, 4.0], [9.0, 4.0, 0.0]])


def test_invalid_layout():
    with pytest.raises(ValueError):
        gram(gnp.ones((3, 2)), layout="diag")


def test_empty_data():
    G = gram(gnp.zeros((0, 3)))
    assert G.shape == (0, 0)
    with pytest.raises(DimensionMismatch):
        gram(gnp.zeros((3, 0)))


@pytest.mark.parametrize("trans", [False, True])
def test_numpy_syrk_matches_backend(trans):
    gnp.set_seed(0)
    A = gnp.randn(5, 3)
    iu = gnp.triu_indices(3 if trans else 5)
    assert_close(gnp.syrk(A, trans=trans)[iu], numpy_backend.syrk(A, trans=trans)[iu])


@pytest.mark.parametrize("trans_a,trans_b", [(False, False), (True, False), (False, True), (True, True)])
def test_numpy_gemm_matches_backend(trans_a, trans_b):
    gnp.set_seed(1)
    A = gnp.randn(4, 4)
    B = gnp.randn(4, 4)
    assert_close(
        gnp.gemm(A, B, trans_a=trans_a, trans_b=trans_b),
        numpy_backend.gemm(A, B, trans_a=trans_a, trans_b=trans_b),
    )


def test_copytri():
    G = gnp.array([[1.0, 2.0, 3.0], [0.0, 4.0, 5.0], [0.0, 0.0, 6.0]])
    gnp.copytri(G)
    assert gnp.array_equal(G, G.T)


@pytest.mark.parametrize("trans", [False, True])
def test_numpy_syrk_fills_upper_triangle_only(trans):
    gnp.set_seed(0)
    A = gnp.randn(5, 3)
    n = 3 if trans else 5
    G = numpy_backend.syrk(A, trans=trans)
    assert G.shape == (n, n)
    assert gnp.all(G[gnp.tril_indices(n, -1)] == 0.0)
