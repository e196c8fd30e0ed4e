from ._polynomial import Polynomial, _allocate, _cast, _promote


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q, with ``max_exponent == max(p.max_exponent,
        q.max_exponent)``.
    """
    p_coeffs, q_coeffs = _promote(p, q)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    result = _allocate(
        max(n_p, n_q), dtype=p_coeffs.dtype, device=p_coeffs.device
    )
    result[:n_p] = p_coeffs
    result[:n_q] += q_coeffs

    return Polynomial._from_buffer(result)


def polynomial_add_(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add ``q`` to ``p`` in place.

    Parameters
    ----------
    p : Polynomial
        Polynomial to modify. Keeps its dtype.
    q : Polynomial
        Polynomial to add.

    Returns
    -------
    Polynomial
        ``p``.
    """
    result = _cast(polynomial_add(p, q).coeffs, p.dtype)

    p._replace(result)
    return p
