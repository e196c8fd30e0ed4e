from ._polynomial import Polynomial, _as_integer, _check_range, _grow


def polynomial_set_coefficient(
    p: Polynomial, coeff: int, exponent: int
) -> None:
    """Set the coefficient of x^exponent in place.

    Grows the coefficient buffer when ``exponent > p.max_exponent``. The
    buffer never shrinks: storing 0 keeps its size.

    Parameters
    ----------
    p : Polynomial
        Polynomial to modify.
    coeff : int
        New coefficient.
    exponent : int
        Exponent of the term. Negative exponents are ignored.

    Raises
    ------
    CoefficientOverflowError
        If ``coeff`` does not fit ``p.dtype``. ``p`` is left unchanged.
    MemoryError
        If the grown buffer cannot be allocated. ``p`` is left unchanged.

    Examples
    --------
    >>> p = polynomial(2, 0)
    >>> polynomial_set_coefficient(p, 7, 4)
    >>> p.coeffs
    tensor([2, 0, 0, 0, 7])
    """
    _set_coefficient(p, coeff, exponent)


def _set_coefficient(p: Polynomial, coeff: int, exponent: int) -> None:
    # Shared by polynomial_set_coefficient and Polynomial.set_coefficient so
    # both sit at the same depth above _grow's warning.
    coeff = _as_integer(coeff, "coeff")
    exponent = _as_integer(exponent, "exponent")

    if exponent < 0:
        return

    _check_range(coeff, p.dtype)

    if exponent > p.max_exponent:
        p._replace(_grow(p.coeffs, exponent + 1))

    p.coeffs[exponent] = coeff
