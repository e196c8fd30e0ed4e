"""Dense integer polynomials backed by growable coefficient tensors."""

from torchpoly.polynomial._exceptions import (
    CoefficientOverflowError,
    CoefficientTypeError,
    LargeAllocationWarning,
    TruncatedInputError,
)
from torchpoly.polynomial._polynomial import (
    DEFAULT_DTYPE,
    LARGE_ALLOCATION_THRESHOLD,
    SENTINEL,
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_add_,
    polynomial_assign,
    polynomial_copy,
    polynomial_degree,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_format,
    polynomial_from_coefficients,
    polynomial_get_coefficient,
    polynomial_multiply,
    polynomial_multiply_,
    polynomial_parse,
    polynomial_read,
    polynomial_set_coefficient,
    polynomial_subtract,
    polynomial_subtract_,
    polynomial_write,
)
from torchpoly.polynomial._polynomial_error import PolynomialError
from torchpoly.polynomial._token_reader import TokenReader

__all__ = [
    # Exceptions
    "CoefficientOverflowError",
    "CoefficientTypeError",
    "LargeAllocationWarning",
    "PolynomialError",
    "TruncatedInputError",
    # Constants
    "DEFAULT_DTYPE",
    "LARGE_ALLOCATION_THRESHOLD",
    "SENTINEL",
    # Polynomial
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_add_",
    "polynomial_assign",
    "polynomial_copy",
    "polynomial_degree",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_from_coefficients",
    "polynomial_get_coefficient",
    "polynomial_multiply",
    "polynomial_multiply_",
    "polynomial_parse",
    "polynomial_read",
    "polynomial_set_coefficient",
    "polynomial_subtract",
    "polynomial_subtract_",
    "polynomial_write",
    # Text input
    "TokenReader",
]
