from ._polynomial import (
    DEFAULT_DTYPE,
    LARGE_ALLOCATION_THRESHOLD,
    Polynomial,
    polynomial,
)
from ._polynomial_add import polynomial_add, polynomial_add_
from ._polynomial_assign import polynomial_assign
from ._polynomial_copy import polynomial_copy
from ._polynomial_degree import polynomial_degree
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_format import polynomial_format, polynomial_write
from ._polynomial_from_coefficients import polynomial_from_coefficients
from ._polynomial_get_coefficient import polynomial_get_coefficient
from ._polynomial_multiply import polynomial_multiply, polynomial_multiply_
from ._polynomial_read import SENTINEL, polynomial_parse, polynomial_read
from ._polynomial_set_coefficient import polynomial_set_coefficient
from ._polynomial_subtract import polynomial_subtract, polynomial_subtract_

__all__ = [
    "DEFAULT_DTYPE",
    "LARGE_ALLOCATION_THRESHOLD",
    "Polynomial",
    "SENTINEL",
    "polynomial",
    "polynomial_add",
    "polynomial_add_",
    "polynomial_assign",
    "polynomial_copy",
    "polynomial_degree",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_format",
    "polynomial_from_coefficients",
    "polynomial_get_coefficient",
    "polynomial_multiply",
    "polynomial_multiply_",
    "polynomial_parse",
    "polynomial_read",
    "polynomial_set_coefficient",
    "polynomial_subtract",
    "polynomial_subtract_",
    "polynomial_write",
]
