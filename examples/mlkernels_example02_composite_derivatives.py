""" Derivatives of a composite kernel, checked against finite differences

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import mlkernels.num as gnp
import mlkernels as mlk


def main():
    k = 2.0 * mlk.GaussianKernel(alpha=0.5) * mlk.LinearKernel(c=1.0) + mlk.InverseMultiQuadraticKernel()

    gnp.set_seed(1)
    x = gnp.randn(3)
    y = gnp.randn(3)

    print(k)
    print("k(x, y) =", k(x, y))

    dx = k.dx(x, y)
    dx_fd = gnp.grad(lambda x_: k(x_, y))(x)
    print("dk/dx        :", dx)
    print("finite diff. :", dx_fd)

    print("d2k/dxdy =")
    print(k.dxdy(x, y))

    h = 1e-5
    for i, name in enumerate(k.param_names()):
        owner, local = k.resolve(name)
        value = getattr(owner, local)
        fd = gnp.derivative_finite_diff(lambda t: k.with_param(name, t)(x, y), value, h)
        print("[{}] {:<10s} dk/dp = {: .6f}   finite diff. = {: .6f}".format(i, name, float(k.dp(i, x, y)), float(fd)))

    X = gnp.randn(5, 3)
    grads = mlk.kernel_matrix_grad(k, X)
    print("kernel matrix gradient shapes:", [D.shape for D in grads])


if __name__ == '__main__':
    main()
