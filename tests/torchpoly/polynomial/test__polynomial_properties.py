"""Property-based tests for polynomial arithmetic."""

import hypothesis
import hypothesis.strategies

from torchpoly.polynomial import (
    Polynomial,
    polynomial_format,
    polynomial_from_coefficients,
    polynomial_parse,
)
from torchpoly.testing.strategies import coefficients, exponents, polynomials


def _assert_same_values(p: Polynomial, q: Polynomial) -> None:
    # Compare over the union of exponents; stored degrees may differ.
    for exponent in range(max(p.max_exponent, q.max_exponent) + 2):
        assert p.get_coefficient(exponent) == q.get_coefficient(exponent)


class TestArithmeticProperties:
    @hypothesis.given(polynomials(), polynomials())
    def test_add_subtract_inverse(self, a, b):
        _assert_same_values((a + b) - b, a)

    @hypothesis.given(polynomials(), polynomials())
    def test_add_commutative(self, a, b):
        _assert_same_values(a + b, b + a)

    @hypothesis.given(polynomials(), polynomials())
    def test_multiply_commutative(self, a, b):
        _assert_same_values(a * b, b * a)

    @hypothesis.given(polynomials(), polynomials(), polynomials())
    def test_multiply_distributes(self, a, b, c):
        _assert_same_values(a * (b + c), (a * b) + (a * c))

    @hypothesis.given(polynomials())
    def test_multiply_identity(self, a):
        _assert_same_values(a * Polynomial(1, 0), a)

    @hypothesis.given(polynomials(), polynomials())
    def test_add_degree(self, a, b):
        assert (a + b).max_exponent == max(a.max_exponent, b.max_exponent)

    @hypothesis.given(polynomials(), polynomials())
    def test_multiply_degree(self, a, b):
        assert (a * b).max_exponent == a.max_exponent + b.max_exponent

    @hypothesis.given(polynomials(), polynomials())
    def test_multiply_matches_convolution(self, a, b):
        product = a * b
        for k in range(product.max_exponent + 1):
            expected = sum(
                a.get_coefficient(i) * b.get_coefficient(k - i)
                for i in range(k + 1)
            )
            assert product.get_coefficient(k) == expected


class TestAccessorProperties:
    @hypothesis.given(polynomials(), exponents(min_value=-50, max_value=-1))
    def test_negative_exponent_reads_zero(self, p, exponent):
        assert p.get_coefficient(exponent) == 0

    @hypothesis.given(polynomials(), exponents(min_value=1, max_value=50))
    def test_beyond_degree_reads_zero(self, p, offset):
        assert p.get_coefficient(p.max_exponent + offset) == 0

    @hypothesis.given(polynomials(), coefficients(), exponents())
    def test_set_then_get(self, p, coeff, exponent):
        before = p.max_exponent
        p.set_coefficient(coeff, exponent)
        assert p.get_coefficient(exponent) == coeff
        assert p.max_exponent == max(before, exponent)

    @hypothesis.given(polynomials())
    def test_self_assignment(self, p):
        values = p.coeffs.tolist()
        p.assign(p)
        assert p.coeffs.tolist() == values

    @hypothesis.given(polynomials())
    def test_copy_equal(self, p):
        assert p.clone() == p


class TestTextProperties:
    @hypothesis.given(
        hypothesis.strategies.lists(
            coefficients(min_value=-1000, max_value=1000).filter(
                lambda c: c != 0
            ),
            min_size=1,
            max_size=8,
        )
    )
    def test_format_term_count(self, values):
        p = polynomial_from_coefficients(values)
        assert len(polynomial_format(p).split()) == len(values)

    @hypothesis.given(polynomials())
    def test_parse_stored_pairs(self, p):
        pairs = " ".join(
            f"{coeff} {exponent}"
            for exponent, coeff in enumerate(p.coeffs.tolist())
        )
        assert polynomial_parse(pairs + " -1 -1") == p
