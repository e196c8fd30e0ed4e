from typing import TextIO

from ._polynomial import Polynomial


def polynomial_format(
    p: Polynomial,
    *,
    variable: str = "x",
    exponent_marker: str = "^",
) -> str:
    """Format polynomial as a single line of terms.

    Terms are written from the highest exponent down to 0. Each term with a
    nonzero coefficient is a space, the signed coefficient, then nothing
    for exponent 0, ``variable`` for exponent 1, or ``variable``,
    ``exponent_marker`` and the exponent otherwise. Zero coefficients are
    skipped.

    Parameters
    ----------
    p : Polynomial
        Polynomial to format.
    variable : str
        Symbol of the variable.
    exponent_marker : str
        Separator between the variable and its exponent.

    Returns
    -------
    str
        Formatted polynomial, ``" 0"`` if every coefficient is zero. No
        trailing newline.

    Examples
    --------
    >>> polynomial_format(polynomial_from_coefficients([5, -1, 3]))
    ' +3x^2 -1x +5'
    >>> polynomial_format(polynomial(0, 5))
    ' 0'
    """
    coeffs = p.coeffs.tolist()

    terms = []
    for exponent in range(p.max_exponent, -1, -1):
        coeff = coeffs[exponent]
        if coeff == 0:
            continue

        if exponent == 0:
            terms.append(f" {coeff:+d}")
        elif exponent == 1:
            terms.append(f" {coeff:+d}{variable}")
        else:
            terms.append(f" {coeff:+d}{variable}{exponent_marker}{exponent}")

    if not terms:
        return " 0"

    return "".join(terms)


def polynomial_write(
    p: Polynomial,
    sink: TextIO,
    *,
    variable: str = "x",
    exponent_marker: str = "^",
) -> TextIO:
    """Write the formatted polynomial to a text sink.

    Parameters
    ----------
    p : Polynomial
        Polynomial to write.
    sink : TextIO
        Any object with a ``write(str)`` method.
    variable, exponent_marker : str
        See :func:`polynomial_format`.

    Returns
    -------
    TextIO
        ``sink``, so writes can be chained.
    """
    sink.write(
        polynomial_format(
            p, variable=variable, exponent_marker=exponent_marker
        )
    )
    return sink
