import copy
import unittest

import pytest

import mlkernels as mlk
import mlkernels.num as gnp
from mlkernels.errors import (
    DomainError,
    UnrecognizedParameterError,
    ParameterIndexError,
)

from kernel_checks import sample_pair, assert_close


class TestIdentities(unittest.TestCase):
    def setUp(self):
        self.x, self.y = sample_pair(seed=11)
        self.k = mlk.RationalQuadraticKernel(0.8, 1.5)

    def test_product_with_unit_constant(self):
        k = self.k
        p = mlk.KernelProduct(1.0, k, mlk.ConstantKernel(1.0))
        x, y = self.x, self.y
        assert_close(p.value(x, y), k.value(x, y))
        assert_close(p.dx(x, y), k.dx(x, y))
        assert_close(p.dy(x, y), k.dy(x, y))
        assert_close(p.dxdy(x, y), k.dxdy(x, y))

    def test_sum_of_same_kernel_is_scaled(self):
        k = self.k
        s = mlk.KernelSum(1.0, k, 1.0, k)
        t = mlk.ScaledKernel(2.0, k)
        x, y = self.x, self.y
        assert_close(s.value(x, y), t.value(x, y))
        assert_close(s.dx(x, y), t.dx(x, y))
        assert_close(s.dxdy(x, y), t.dxdy(x, y))
        assert_close(s.dp("k1.alpha", x, y) + s.dp("k2.alpha", x, y), t.dp("k.alpha", x, y))

    def test_scaled_coefficient_derivative(self):
        x, y = self.x, self.y
        s = mlk.ScaledKernel(3.0, self.k)
        assert_close(s.dp(0, x, y), self.k.value(x, y))
        assert_close(s.value(x, y), 3.0 * self.k.value(x, y))

    def test_product_parameter_derivatives(self):
        x, y = self.x, self.y
        g = mlk.GaussianKernel(0.6)
        m = mlk.InverseMultiQuadraticKernel(1.3)
        p = mlk.KernelProduct(2.0, g, m)
        self.assertEqual(p.param_names(), ("a", "k1.alpha", "k2.c"))
        assert_close(p.dp(0, x, y), g.value(x, y) * m.value(x, y))
        assert_close(p.dp(1, x, y), 2.0 * g.dp("alpha", x, y) * m.value(x, y))
        assert_close(p.dp(2, x, y), 2.0 * g.value(x, y) * m.dp("c", x, y))

    def test_product_mixed_derivative_is_not_symmetrized(self):
        # cross terms outer(dk1/dx, dk2/dy) + outer(dk2/dx, dk1/dy)
        x, y = self.x, self.y
        k1 = mlk.GaussianKernel(0.6)
        k2 = mlk.LinearKernel(0.5)
        p = mlk.KernelProduct(1.0, k1, k2)
        expected = (
            k1.dxdy(x, y) * k2.value(x, y)
            + gnp.outer(k1.dx(x, y), k2.dy(x, y))
            + gnp.outer(k2.dx(x, y), k1.dy(x, y))
            + k1.value(x, y) * k2.dxdy(x, y)
        )
        assert_close(p.dxdy(x, y), expected)


class TestParameterPaths(unittest.TestCase):
    def setUp(self):
        self.sum = mlk.KernelSum(
            1.0, mlk.GaussianKernel(), 2.0, mlk.LinearKernel(0.5)
        )
        self.nested = mlk.KernelSum(
            1.0,
            mlk.ScaledKernel(2.0, mlk.GaussianKernel(0.3)),
            3.0,
            mlk.KernelProduct(1.5, mlk.ARD(mlk.LinearKernel(), [1.0, 2.0]), mlk.SigmoidKernel()),
        )

    def test_flattened_order(self):
        self.assertEqual(self.sum.param_names(), ("a1", "a2", "k1.alpha", "k2.c"))
        self.assertEqual(self.sum.param_values(), (1.0, 2.0, 1.0, 0.5))
        self.assertEqual(
            self.nested.param_names(),
            (
                "a1",
                "a2",
                "k1.a",
                "k1.k.alpha",
                "k2.a",
                "k2.k1.c",
                "k2.k1.weights",
                "k2.k2.alpha",
                "k2.k2.c",
            ),
        )
        self.assertEqual(self.nested.nparams, 9)
        self.assertEqual(mlk.ScaledKernel(2.0, mlk.GaussianKernel()).param_names(), ("a", "k.alpha"))

    def test_resolve(self):
        owner, name = self.nested.resolve("k1.k.alpha")
        self.assertIsInstance(owner, mlk.GaussianKernel)
        self.assertEqual(name, "alpha")
        self.assertEqual(getattr(owner, name), 0.3)
        owner, name = self.nested.resolve("k2.a")
        self.assertIsInstance(owner, mlk.KernelProduct)
        self.assertEqual(name, "a")

    def test_index_and_name_agree(self):
        x, y = [0.2, 0.4], [1.0, -0.5]
        for i, name in enumerate(self.nested.param_names()):
            assert_close(self.nested.dp(i, x, y), self.nested.dp(name, x, y))

    def test_unknown_paths(self):
        x, y = [0.2, 0.4], [1.0, -0.5]
        for path in ("a", "k3.alpha", "k1.beta", "k1", "k1.k.alpha.x", "alpha", ""):
            with self.assertRaises(UnrecognizedParameterError):
                self.nested.dp(path, x, y)
        with self.assertRaises(UnrecognizedParameterError):
            mlk.KernelProduct(1.0, mlk.GaussianKernel(), mlk.GaussianKernel()).dp("a1", x, y)

    def test_index_out_of_range(self):
        with self.assertRaisesRegex(ParameterIndexError, "between 0 and 8"):
            self.nested.dp(9, [1.0, 2.0], [0.0, 1.0])

    def test_with_param(self):
        k = self.nested.with_param("k1.k.alpha", 2.0)
        self.assertEqual(k.k1.k.alpha, 2.0)
        self.assertEqual(self.nested.k1.k.alpha, 0.3)
        self.assertEqual(k.with_param(1, 5.0).a2, 5.0)
        with self.assertRaises(DomainError):
            self.nested.with_param("a2", 0.0)


class TestConstruction(unittest.TestCase):
    def test_invalid_coefficients(self):
        g = mlk.GaussianKernel()
        with self.assertRaises(DomainError):
            mlk.ScaledKernel(0.0, g)
        with self.assertRaises(DomainError):
            mlk.KernelProduct(-1.0, g, g)
        with self.assertRaises(DomainError):
            mlk.KernelSum(1.0, g, -1.0, g)

    def test_invalid_children(self):
        with self.assertRaises(TypeError):
            mlk.ScaledKernel(1.0, "gaussian")
        with self.assertRaises(TypeError):
            mlk.KernelSum(1.0, mlk.GaussianKernel(), 1.0, None)

    def test_children_are_copies(self):
        g = mlk.GaussianKernel()
        a = mlk.ARD(mlk.GaussianKernel(), [1.0, 2.0])
        p = mlk.KernelProduct(1.0, g, a)
        self.assertIsNot(p.k1, g)
        self.assertIsNot(p.k2, a)
        self.assertIsNot(p.k2.weights, a.weights)
        assert_close(p.k2.weights, a.weights)
        q = copy.deepcopy(p)
        self.assertIsNot(q.k2.kernel, p.k2.kernel)

    def test_immutable(self):
        s = mlk.ScaledKernel(2.0, mlk.GaussianKernel())
        with self.assertRaises(AttributeError):
            s.a = 3.0
        with self.assertRaises(AttributeError):
            s.k = mlk.LinearKernel()

    def test_flags(self):
        g, lin = mlk.GaussianKernel(), mlk.LinearKernel()
        self.assertTrue(mlk.KernelProduct(1.0, g, lin).is_psd)
        self.assertFalse(mlk.KernelSum(1.0, g, 1.0, mlk.SigmoidKernel()).is_psd)
        scaled_power = mlk.ScaledKernel(2.0, mlk.PowerKernel())
        self.assertFalse(scaled_power.is_psd)
        self.assertTrue(scaled_power.is_cond_psd)


class TestDescription(unittest.TestCase):
    def test_sum_describes_both_children(self):
        s = mlk.KernelSum(1.0, mlk.GaussianKernel(), 2.0, mlk.LinearKernel())
        desc = mlk.describe(s)
        self.assertEqual(desc.name, "KernelSum")
        self.assertEqual(desc.params, (("a1", 1.0), ("a2", 2.0)))
        self.assertEqual([c.name for c in desc.children], ["GaussianKernel", "LinearKernel"])
        self.assertEqual(
            repr(s), "KernelSum(a1=1.0, a2=2.0, GaussianKernel(alpha=1.0), LinearKernel(c=0.0))"
        )

    def test_nested(self):
        k = mlk.ScaledKernel(2.0, mlk.KernelProduct(1.0, mlk.GaussianKernel(), mlk.LinearKernel()))
        desc = k.describe()
        self.assertEqual(desc.children[0].name, "KernelProduct")
        self.assertEqual(len(desc.children[0].children), 2)


# ----------------------------------------------------------------------
#  Operators

def test_scalar_times_kernel():
    g = mlk.GaussianKernel()
    for k in (2.0 * g, g * 2.0, 2 * g, gnp.float64(2.0) * g):
        assert isinstance(k, mlk.ScaledKernel)
        assert k.a == 2.0


def test_scaling_folds_coefficients():
    g, lin = mlk.GaussianKernel(), mlk.LinearKernel()
    k = 3.0 * (2.0 * g)
    assert isinstance(k, mlk.ScaledKernel)
    assert k.a == 6.0
    assert isinstance(k.k, mlk.GaussianKernel)

    k = 2.0 * (g + lin)
    assert isinstance(k, mlk.KernelSum)
    assert (k.a1, k.a2) == (2.0, 2.0)

    k = 2.0 * (g * lin)
    assert isinstance(k, mlk.KernelProduct)
    assert k.a == 2.0


def test_kernel_product_operator():
    g, lin = mlk.GaussianKernel(), mlk.LinearKernel()
    k = g * lin
    assert isinstance(k, mlk.KernelProduct)
    assert k.a == 1.0
    k = (2.0 * g) * (3.0 * lin)
    assert k.a == 6.0
    assert isinstance(k.k1, mlk.GaussianKernel)
    assert isinstance(k.k2, mlk.LinearKernel)


def test_kernel_sum_operator():
    g, lin = mlk.GaussianKernel(), mlk.LinearKernel()
    k = g + 3.0 * lin
    assert isinstance(k, mlk.KernelSum)
    assert (k.a1, k.a2) == (1.0, 3.0)
    assert isinstance(k.k2, mlk.LinearKernel)
    x, y = sample_pair(seed=2)
    assert_close(k.value(x, y), g.value(x, y) + 3.0 * lin.value(x, y))


def test_unsupported_operands():
    g = mlk.GaussianKernel()
    with pytest.raises(TypeError):
        g * "a"
    with pytest.raises(TypeError):
        g + 1.0
    with pytest.raises(DomainError):
        -1.0 * g
