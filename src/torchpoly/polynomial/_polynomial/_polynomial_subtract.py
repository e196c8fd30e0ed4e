from ._polynomial import Polynomial, _allocate, _cast, _promote


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Computes element-wise difference of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q, with ``max_exponent == max(p.max_exponent,
        q.max_exponent)``.
    """
    p_coeffs, q_coeffs = _promote(p, q)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    result = _allocate(
        max(n_p, n_q), dtype=p_coeffs.dtype, device=p_coeffs.device
    )
    result[:n_p] = p_coeffs
    result[:n_q] -= q_coeffs

    return Polynomial._from_buffer(result)


def polynomial_subtract_(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract ``q`` from ``p`` in place.

    Parameters
    ----------
    p : Polynomial
        Polynomial to modify. Keeps its dtype.
    q : Polynomial
        Polynomial to subtract.

    Returns
    -------
    Polynomial
        ``p``.
    """
    result = _cast(polynomial_subtract(p, q).coeffs, p.dtype)

    p._replace(result)
    return p
