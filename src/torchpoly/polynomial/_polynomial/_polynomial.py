import operator
import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from torchpoly.polynomial._exceptions import (
    CoefficientOverflowError,
    CoefficientTypeError,
    LargeAllocationWarning,
)

DEFAULT_DTYPE = torch.int64

LARGE_ALLOCATION_THRESHOLD = 2**24

_SIGNED_INTEGER_DTYPES = (torch.int8, torch.int16, torch.int32, torch.int64)


class Polynomial:
    """Dense univariate polynomial with signed integer coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + ... + coeffs[n]*x^n where
    n = max_exponent.

    The coefficient buffer is owned by the instance. It grows when a
    coefficient is set above ``max_exponent`` and never shrinks, so
    ``max_exponent`` is the highest exponent with allocated storage, not
    necessarily the highest exponent with a nonzero coefficient.

    Parameters
    ----------
    coeff : int
        Coefficient stored at ``exponent``.
    exponent : int
        Exponent of the seeded term. Negative exponents are clamped to 0.
    dtype : torch.dtype
        Signed integer coefficient dtype.
    device : torch.device, optional
        Device of the coefficient buffer.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (max_exponent + 1,).
        coeffs[i] is the coefficient of x^i.

    Examples
    --------
    >>> p = Polynomial(3, 2)
    >>> p.set_coefficient(-1, 1)
    >>> p.set_coefficient(5, 0)
    >>> str(p)
    ' +3x^2 -1x +5'

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p += q   # polynomial_add_(p, q)
        p == q   # polynomial_equal(p, q)
        p(x)     # polynomial_evaluate(p, x)
    """

    __hash__ = None

    def __init__(
        self,
        coeff: int = 0,
        exponent: int = 0,
        *,
        dtype: torch.dtype = DEFAULT_DTYPE,
        device: Optional[Union[str, torch.device]] = None,
    ):
        dtype = _check_dtype(dtype)
        coeff = _as_integer(coeff, "coeff")
        exponent = max(_as_integer(exponent, "exponent"), 0)
        _check_range(coeff, dtype)

        coeffs = _allocate(exponent + 1, dtype=dtype, device=device)
        coeffs[exponent] = coeff

        self._coeffs = coeffs

    @classmethod
    def _from_buffer(cls, coeffs: Tensor) -> "Polynomial":
        # Takes ownership of coeffs, which must not be referenced elsewhere.
        p = cls.__new__(cls)
        p._coeffs = coeffs
        return p

    def _replace(self, coeffs: Tensor) -> None:
        self._coeffs = coeffs

    @property
    def coeffs(self) -> Tensor:
        return self._coeffs

    @property
    def max_exponent(self) -> int:
        return self._coeffs.shape[-1] - 1

    @property
    def dtype(self) -> torch.dtype:
        return self._coeffs.dtype

    @property
    def device(self) -> torch.device:
        return self._coeffs.device

    def get_coefficient(self, exponent: int) -> int:
        from ._polynomial_get_coefficient import polynomial_get_coefficient

        return polynomial_get_coefficient(self, exponent)

    def set_coefficient(self, coeff: int, exponent: int) -> None:
        from ._polynomial_set_coefficient import _set_coefficient

        _set_coefficient(self, coeff, exponent)

    def clone(self) -> "Polynomial":
        from ._polynomial_copy import polynomial_copy

        return polynomial_copy(self)

    def assign(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_assign import polynomial_assign

        return polynomial_assign(self, other)

    def __copy__(self) -> "Polynomial":
        return self.clone()

    def __deepcopy__(self, memo) -> "Polynomial":
        return self.clone()

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_add(self, other)

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add_

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_add_(self, other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_subtract(self, other)

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract_

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_subtract_(self, other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_multiply(self, other)

    def __imul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply_

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_multiply_(self, other)

    def __eq__(self, other: object) -> bool:
        from ._polynomial_equal import polynomial_equal

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_equal(self, other)

    def __ne__(self, other: object) -> bool:
        from ._polynomial_equal import polynomial_equal

        if not isinstance(other, Polynomial):
            return NotImplemented
        return not polynomial_equal(self, other)

    def __call__(self, x: Union[int, Tensor]) -> Union[int, Tensor]:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    def __str__(self) -> str:
        from ._polynomial_format import polynomial_format

        return polynomial_format(self)

    def __repr__(self) -> str:
        if self.dtype == DEFAULT_DTYPE:
            return f"Polynomial({self._coeffs.tolist()})"
        return f"Polynomial({self._coeffs.tolist()}, dtype={self.dtype})"


def polynomial(
    coeff: int = 0,
    exponent: int = 0,
    *,
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[Union[str, torch.device]] = None,
) -> Polynomial:
    """Create polynomial holding a single term.

    Parameters
    ----------
    coeff : int
        Coefficient of the term.
    exponent : int
        Exponent of the term. Negative exponents are clamped to 0.
    dtype : torch.dtype
        Signed integer coefficient dtype.
    device : torch.device, optional
        Device of the coefficient buffer.

    Returns
    -------
    Polynomial
        Polynomial with ``max_exponent == max(exponent, 0)``.

    Raises
    ------
    CoefficientTypeError
        If ``coeff`` or ``exponent`` is not integral, or ``dtype`` is not a
        signed integer dtype.
    CoefficientOverflowError
        If ``coeff`` does not fit ``dtype``.

    Examples
    --------
    >>> polynomial(7, 3).coeffs
    tensor([0, 0, 0, 7])
    """
    return Polynomial(coeff, exponent, dtype=dtype, device=device)


def _as_integer(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError as error:
        raise CoefficientTypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from error


def _check_dtype(dtype: torch.dtype) -> torch.dtype:
    if dtype not in _SIGNED_INTEGER_DTYPES:
        raise CoefficientTypeError(
            f"Coefficient dtype must be a signed integer dtype, got {dtype}"
        )
    return dtype


def _check_range(coeff: int, dtype: torch.dtype) -> None:
    info = torch.iinfo(dtype)
    if not info.min <= coeff <= info.max:
        raise CoefficientOverflowError(
            f"Coefficient {coeff} does not fit {dtype} "
            f"[{info.min}, {info.max}]"
        )


def _allocate(
    size: int,
    *,
    dtype: torch.dtype,
    device: Optional[Union[str, torch.device]] = None,
) -> Tensor:
    """Allocate a zero-filled coefficient buffer."""
    try:
        return torch.zeros(size, dtype=dtype, device=device)
    except RuntimeError as error:
        if "alloc" not in str(error).lower():
            raise
        raise MemoryError(
            f"Unable to allocate {size} coefficients of dtype {dtype}"
        ) from error


def _copy_buffer(coeffs: Tensor) -> Tensor:
    """Copy a coefficient buffer into freshly allocated storage."""
    result = _allocate(
        coeffs.shape[-1], dtype=coeffs.dtype, device=coeffs.device
    )
    result.copy_(coeffs)
    return result


def _grow(coeffs: Tensor, size: int) -> Tensor:
    """Return a new buffer of ``size`` holding ``coeffs`` in its low range.

    The input buffer is left untouched, so a failed allocation leaves the
    owning polynomial unchanged.
    """
    if size > LARGE_ALLOCATION_THRESHOLD:
        warnings.warn(
            f"Growing coefficient buffer to {size} elements "
            f"(threshold {LARGE_ALLOCATION_THRESHOLD})",
            LargeAllocationWarning,
            stacklevel=4,
        )

    result = _allocate(size, dtype=coeffs.dtype, device=coeffs.device)
    result[: coeffs.shape[-1]] = coeffs
    return result


def _cast(coeffs: Tensor, dtype: torch.dtype) -> Tensor:
    """Return ``coeffs`` in ``dtype``, copying only when the dtype differs."""
    if coeffs.dtype == dtype:
        return coeffs

    result = _allocate(coeffs.shape[-1], dtype=dtype, device=coeffs.device)
    result.copy_(coeffs)
    return result


def _promote(p: Polynomial, q: Polynomial):
    """Return coefficient buffers of ``p`` and ``q`` in their common dtype."""
    common_dtype = torch.promote_types(p.dtype, q.dtype)
    return _cast(p.coeffs, common_dtype), _cast(q.coeffs, common_dtype)
