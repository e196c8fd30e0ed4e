from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, _as_integer, _check_range


def polynomial_evaluate(
    p: Polynomial, x: Union[int, Tensor]
) -> Union[int, Tensor]:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : int or Tensor
        Evaluation point, or tensor of evaluation points of any shape.

    Returns
    -------
    int or Tensor
        p(x). An int for an integer ``x``; otherwise a tensor with the shape
        of ``x`` in the common dtype of ``p`` and ``x``.

    Notes
    -----
    Integer evaluation is carried out in ``p.dtype`` and wraps on overflow
    like any other fixed-width tensor arithmetic.

    Examples
    --------
    >>> p = polynomial_from_coefficients([1, 2, 3])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, 2)
    17
    >>> polynomial_evaluate(p, torch.tensor([0, 1, 2]))
    tensor([ 1,  6, 17])
    """
    coeffs = p.coeffs

    if not isinstance(x, Tensor):
        x = _as_integer(x, "x")
        _check_range(x, coeffs.dtype)

        points = torch.tensor(x, dtype=coeffs.dtype, device=coeffs.device)

        return int(polynomial_evaluate(p, points).item())

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = torch.zeros_like(x)
    for coeff in coeffs.flip(0):
        result = result * x + coeff

    return result
