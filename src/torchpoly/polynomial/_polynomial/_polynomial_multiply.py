import torch

from ._polynomial import Polynomial, _allocate, _cast, _promote


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q, with ``max_exponent == p.max_exponent +
        q.max_exponent`` even when the leading coefficients are zero.
    """
    p_coeffs, q_coeffs = _promote(p, q)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    result = _allocate(
        n_p + n_q - 1, dtype=p_coeffs.dtype, device=p_coeffs.device
    )

    # Shift-and-add rows of the longer operand, one per nonzero
    # coefficient of the shorter one. Accumulates in place in result.
    if n_p < n_q:
        shorter, longer = p_coeffs, q_coeffs
    else:
        shorter, longer = q_coeffs, p_coeffs
    n_longer = longer.shape[-1]

    for i in torch.nonzero(shorter).flatten().tolist():
        result[i : i + n_longer].add_(longer, alpha=shorter[i].item())

    return Polynomial._from_buffer(result)


def polynomial_multiply_(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply ``p`` by ``q`` in place.

    The product is computed into a new buffer which then replaces the
    buffer of ``p``.

    Parameters
    ----------
    p : Polynomial
        Polynomial to modify. Keeps its dtype.
    q : Polynomial
        Polynomial to multiply by.

    Returns
    -------
    Polynomial
        ``p``.
    """
    result = _cast(polynomial_multiply(p, q).coeffs, p.dtype)

    p._replace(result)
    return p
