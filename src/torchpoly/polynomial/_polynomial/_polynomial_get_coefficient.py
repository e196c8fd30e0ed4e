from ._polynomial import Polynomial, _as_integer


def polynomial_get_coefficient(p: Polynomial, exponent: int) -> int:
    """Return the coefficient of x^exponent.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    exponent : int
        Exponent to look up.

    Returns
    -------
    int
        Stored coefficient, or 0 if ``exponent`` is negative or above
        ``p.max_exponent``.

    Notes
    -----
    Invalid exponents are never an error, so a return value of 0 does not
    distinguish an absent term from an invalid exponent.
    """
    exponent = _as_integer(exponent, "exponent")

    if exponent < 0 or exponent > p.max_exponent:
        return 0

    return int(p.coeffs[exponent].item())
