"""Import helpers for validating the numeric values held by states."""

from .vectors import DEFAULT_ATOL as DEFAULT_ATOL
from .vectors import DEFAULT_RTOL as DEFAULT_RTOL
from .vectors import check_divisor as check_divisor
from .vectors import to_vector as to_vector
