from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return the formal degree of a polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        ``p.max_exponent``.

    Notes
    -----
    This is the size of the coefficient buffer minus 1, not the actual
    degree, which would require skipping trailing zeros. A polynomial built
    with ``polynomial(0, 5)`` has formal degree 5.
    """
    return p.max_exponent
