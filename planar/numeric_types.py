"""Groupings of numeric types and tools for working with them"""

from typing import *
import numpy as np

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "REAL_NUMBER_TYPES", "is_real_number"]


FloatLike = Union[float, np.float16, np.float32, np.float64, np.longdouble]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike]

# Runtime counterpart of NumberLike, usable with isinstance and attrs.validators.instance_of
REAL_NUMBER_TYPES = (int, float, np.integer, np.floating)


def is_real_number(value: Any) -> bool:
    """Determine whether the given value is a (builtin or numpy) real number, excluding Booleans."""
    # Instance check of Boolean against int is True, so handle that separately.
    return isinstance(value, REAL_NUMBER_TYPES) and not isinstance(value, bool)
