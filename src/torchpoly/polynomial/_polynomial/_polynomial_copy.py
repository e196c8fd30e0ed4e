from ._polynomial import Polynomial, _copy_buffer


def polynomial_copy(p: Polynomial) -> Polynomial:
    """Copy a polynomial into independently owned storage.

    Parameters
    ----------
    p : Polynomial
        Polynomial to copy.

    Returns
    -------
    Polynomial
        New polynomial with the same ``max_exponent`` and coefficients.
        Mutating either polynomial does not affect the other.
    """
    return Polynomial._from_buffer(_copy_buffer(p.coeffs))
