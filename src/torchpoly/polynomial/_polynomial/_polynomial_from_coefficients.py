from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchpoly.polynomial._exceptions import CoefficientTypeError
from torchpoly.polynomial._polynomial_error import PolynomialError

from ._polynomial import (
    DEFAULT_DTYPE,
    _SIGNED_INTEGER_DTYPES,
    Polynomial,
    _as_integer,
    _check_dtype,
    _check_range,
    _copy_buffer,
)


def polynomial_from_coefficients(
    coeffs: Union[Sequence[int], Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Polynomial:
    """Create polynomial from ascending coefficients.

    Parameters
    ----------
    coeffs : sequence of int or Tensor
        Coefficients in ascending order, coeffs[i] is the coefficient of
        x^i. Must be one-dimensional with at least one element.
    dtype : torch.dtype, optional
        Signed integer coefficient dtype. Defaults to the dtype of a signed
        integer tensor input, or ``torch.int64``. Unsigned integer tensors
        are accepted and cast after a range check.
    device : torch.device, optional
        Device of the coefficient buffer.

    Returns
    -------
    Polynomial
        Polynomial with ``max_exponent == len(coeffs) - 1``. The buffer is
        always a copy; the input is never aliased.

    Raises
    ------
    PolynomialError
        If coeffs is empty or not one-dimensional.
    CoefficientTypeError
        If a coefficient or the dtype is not integral.
    CoefficientOverflowError
        If a coefficient does not fit ``dtype``.

    Examples
    --------
    >>> polynomial_from_coefficients([5, -1, 3]).coeffs
    tensor([ 5, -1,  3])
    """
    if isinstance(coeffs, Tensor):
        if coeffs.dim() != 1:
            raise PolynomialError(
                f"Coefficients must be one-dimensional, got shape "
                f"{tuple(coeffs.shape)}"
            )
        if coeffs.shape[-1] == 0:
            raise PolynomialError(
                "Polynomial must have at least one coefficient"
            )

        if (
            coeffs.dtype.is_floating_point
            or coeffs.dtype.is_complex
            or coeffs.dtype == torch.bool
        ):
            raise CoefficientTypeError(
                f"Coefficients must be integers, got {coeffs.dtype}"
            )

        if dtype is None:
            dtype = (
                coeffs.dtype
                if coeffs.dtype in _SIGNED_INTEGER_DTYPES
                else DEFAULT_DTYPE
            )
        dtype = _check_dtype(dtype)

        # Unsigned and wider inputs are range-checked before casting.
        if coeffs.dtype != dtype:
            for coeff in (coeffs.min().item(), coeffs.max().item()):
                _check_range(coeff, dtype)

        buffer = _copy_buffer(coeffs.to(device=device, dtype=dtype))
        return Polynomial._from_buffer(buffer)

    dtype = _check_dtype(DEFAULT_DTYPE if dtype is None else dtype)

    values = [_as_integer(coeff, "coeff") for coeff in coeffs]
    if len(values) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    for value in values:
        _check_range(value, dtype)

    return Polynomial._from_buffer(
        torch.tensor(values, dtype=dtype, device=device)
    )
