"""Exception hierarchy for polynomial operations."""

from torchpoly.polynomial._polynomial_error import PolynomialError


class CoefficientOverflowError(PolynomialError, OverflowError):
    """Coefficient does not fit the coefficient dtype.

    Raised when a coefficient passed to the constructor or to
    ``set_coefficient`` lies outside ``torch.iinfo(dtype)``.
    """

    pass


class CoefficientTypeError(PolynomialError, TypeError):
    """Non-integral coefficient, exponent, or dtype.

    Raised for values such as ``1.5`` or ``"3"`` and for dtypes that are
    not signed integer types.
    """

    pass


class TruncatedInputError(PolynomialError, EOFError):
    """Text source ended before the ``-1 -1`` terminator."""

    pass


class LargeAllocationWarning(UserWarning):
    """Coefficient buffer grown past ``LARGE_ALLOCATION_THRESHOLD``."""

    pass
