"""Benchmark coefficient buffer growth.

Builds a polynomial term by term in ascending exponent order, which grows
the buffer on every write, and compares it with descending order, which
allocates once.
"""

import time

from torchpoly.polynomial import Polynomial


def benchmark_set_coefficient(degree: int, ascending: bool = True) -> float:
    """Time building a polynomial of ``degree`` with set_coefficient.

    Returns
    -------
    float
        Total time in milliseconds.
    """
    exponents = range(degree + 1)
    if not ascending:
        exponents = reversed(exponents)

    start = time.perf_counter()
    p = Polynomial()
    for exponent in exponents:
        p.set_coefficient(exponent + 1, exponent)
    elapsed = time.perf_counter() - start

    return elapsed * 1000


def main():
    degrees = [16, 64, 256, 1024, 4096]

    print("Polynomial set_coefficient Benchmark")
    print("=" * 50)
    print(f"{'Degree':>8} {'Ascending (ms)':>16} {'Descending (ms)':>16}")
    print("-" * 50)

    for degree in degrees:
        ms_ascending = benchmark_set_coefficient(degree, ascending=True)
        ms_descending = benchmark_set_coefficient(degree, ascending=False)

        print(f"{degree:>8} {ms_ascending:>16.4f} {ms_descending:>16.4f}")


if __name__ == "__main__":
    main()
