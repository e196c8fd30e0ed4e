from ._polynomial import Polynomial, _copy_buffer


def polynomial_assign(p: Polynomial, q: Polynomial) -> Polynomial:
    """Replace the contents of ``p`` with a copy of ``q``.

    Parameters
    ----------
    p : Polynomial
        Polynomial to overwrite.
    q : Polynomial
        Source polynomial.

    Returns
    -------
    Polynomial
        ``p``, now with ``q``'s ``max_exponent``, dtype and coefficients in
        a newly allocated buffer.

    Notes
    -----
    Assigning a polynomial to itself leaves it unchanged.
    """
    if p is q:
        return p

    p._replace(_copy_buffer(q.coeffs))
    return p
