"""Benchmark polynomial multiplication.

Compares the out-of-place product with the in-place ``*=`` form across
polynomial degrees. Both use the O(n*m) direct convolution.
"""

import time

import torch

from torchpoly.polynomial import (
    polynomial_from_coefficients,
    polynomial_multiply,
    polynomial_multiply_,
)


def benchmark_multiply(
    degree: int,
    n_iterations: int = 100,
    device: str = "cpu",
    method: str = "binary",
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'binary' for ``p * q`` or 'in_place' for ``p *= q``.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial_from_coefficients(
        torch.randint(-100, 100, (degree + 1,)), device=device
    )
    b = polynomial_from_coefficients(
        torch.randint(-100, 100, (degree + 1,)), device=device
    )

    if method == "binary":

        def multiply_fn():
            return polynomial_multiply(a, b)

    elif method == "in_place":

        def multiply_fn():
            return polynomial_multiply_(a.clone(), b)

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        _ = multiply_fn()

    # Synchronize before timing (important for CUDA)
    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = multiply_fn()

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 512, 1024]

    print("Polynomial Multiplication Benchmark")
    print("=" * 50)
    print(f"{'Degree':>8} {'Binary (ms)':>14} {'In-place (ms)':>16}")
    print("-" * 50)

    for degree in degrees:
        ms_binary = benchmark_multiply(degree, method="binary")
        ms_in_place = benchmark_multiply(degree, method="in_place")

        print(f"{degree:>8} {ms_binary:>14.4f} {ms_in_place:>16.4f}")

    print()
    print("Notes:")
    print("- In-place timing includes copying the left operand")


if __name__ == "__main__":
    main()
