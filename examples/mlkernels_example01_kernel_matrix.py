""" Kernel matrices of a few kernels on random data

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""
import mlkernels.num as gnp
import mlkernels as mlk


def main():
    gnp.set_seed(0)
    X = gnp.randn(6, 2)
    Y = gnp.randn(3, 2)

    kernels = [
        mlk.GaussianKernel(alpha=0.5),
        mlk.LaplacianKernel(alpha=1.0),
        mlk.PolynomialKernel(alpha=1.0, c=1.0, d=3),
        mlk.ARD(mlk.RationalQuadraticKernel(), [0.5, 2.0]),
        mlk.MercerSigmoidKernel(d=0.0, b=2.0),
        mlk.GaussianKernel() + 0.1 * mlk.LinearKernel(),
    ]

    for k in kernels:
        K = mlk.kernel_matrix(k, X)
        print(k)
        print("  psd: {}, conditionally psd: {}".format(k.is_psd, k.is_cond_psd))
        print("  K(X, X) diagonal:", gnp.diag(K))
        print("  K(X, Y) shape:", mlk.kernel_matrix(k, X, Y).shape)

    # observations as columns
    K_col = mlk.kernel_matrix(kernels[0], X.T, layout="col")
    print("row and col layouts agree:", gnp.allclose(K_col, mlk.kernel_matrix(kernels[0], X)))


if __name__ == '__main__':
    main()
