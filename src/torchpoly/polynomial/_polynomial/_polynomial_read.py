from typing import Iterable, Optional, Tuple, Union

from torchpoly.polynomial._token_reader import TokenReader

from ._polynomial import Polynomial
from ._polynomial_assign import polynomial_assign
from ._polynomial_copy import polynomial_copy
from ._polynomial_set_coefficient import polynomial_set_coefficient

SENTINEL: Tuple[int, int] = (-1, -1)


def polynomial_read(
    source: Union[str, Iterable[str], TokenReader],
    p: Optional[Polynomial] = None,
) -> Polynomial:
    """Read coefficient/exponent pairs into a polynomial.

    Pairs are read until the pair ``-1 -1``, which is consumed and not
    stored. Each other pair is applied with ``set_coefficient``, so pairs
    with a negative exponent are ignored and a later pair for the same
    exponent overwrites an earlier one.

    Parameters
    ----------
    source : str, TextIO, iterable of str, or TokenReader
        Text holding whitespace-separated integers. A text stream is read
        only up to the terminator, so several polynomials can be read from
        one stream by repeated calls. For an iterable of lines, pass the
        same :class:`TokenReader` to each call instead.
    p : Polynomial, optional
        Polynomial to read into. Its existing coefficients are kept unless
        overwritten by a pair. A new polynomial is created if omitted.

    Returns
    -------
    Polynomial
        ``p``, or the new polynomial.

    Raises
    ------
    TruncatedInputError
        If the source ends before the terminator.
    ValueError
        If a token is not an integer literal.

    Notes
    -----
    Pairs are applied to a copy and written back once the terminator is
    read, so ``p`` is unchanged if reading fails.

    Examples
    --------
    >>> str(polynomial_read("3 2 -1 1 5 0 -1 -1"))
    ' +3x^2 -1x +5'
    """
    reader = source if isinstance(source, TokenReader) else TokenReader(source)

    if p is None:
        p = Polynomial()

    staged = polynomial_copy(p)
    while True:
        coeff = reader.read_int()
        exponent = reader.read_int()

        if (coeff, exponent) == SENTINEL:
            break

        polynomial_set_coefficient(staged, coeff, exponent)

    return polynomial_assign(p, staged)


def polynomial_parse(text: str) -> Polynomial:
    """Create polynomial from a string of coefficient/exponent pairs.

    Parameters
    ----------
    text : str
        Whitespace-separated integers terminated by ``-1 -1``. Tokens after
        the terminator are ignored.

    Returns
    -------
    Polynomial
        New polynomial.

    Examples
    --------
    >>> polynomial_parse("7 4 2 0 -1 -1").coeffs
    tensor([2, 0, 0, 0, 7])
    """
    return polynomial_read(TokenReader(text))
