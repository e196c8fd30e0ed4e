"""Hypothesis strategies for polynomial testing."""

from ._coefficients import coefficients
from ._exponents import exponents
from ._polynomials import polynomials

__all__ = [
    "coefficients",
    "exponents",
    "polynomials",
]
