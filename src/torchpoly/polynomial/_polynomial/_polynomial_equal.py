import torch

from ._polynomial import Polynomial, _promote


def polynomial_equal(p: Polynomial, q: Polynomial) -> bool:
    """Check structural equality of two polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.

    Returns
    -------
    bool
        True iff ``p.max_exponent == q.max_exponent`` and every stored
        coefficient matches.

    Notes
    -----
    Equality is on stored degree, not on mathematical value: trailing zero
    coefficients are not trimmed before comparing, so
    ``polynomial_equal(polynomial(0, 5), polynomial())`` is False.
    """
    if p is q:
        return True

    if p.max_exponent != q.max_exponent:
        return False

    p_coeffs, q_coeffs = _promote(p, q)

    return torch.equal(p_coeffs, q_coeffs)
