"""Define utility functions for validating the numeric vectors stored in states."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np

from state_representation.exceptions import DimensionMismatchException, DivisionByZeroException

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

DEFAULT_RTOL = 1e-05
"""Default relative tolerance used when comparing states."""

DEFAULT_ATOL = 1e-08
"""Default absolute tolerance used when comparing states."""

VectorLike = Union["Sequence[float]", "NDArray[np.float64]"]
"""A raw numeric vector given as a sequence of floats or a 1-D NumPy array."""


def to_vector(values: VectorLike, expected_size: int | None = None) -> NDArray[np.float64]:
    """Convert the given values into a new one-dimensional array of floats.

    :param values: Sequence or array of numeric values
    :param expected_size: Required number of values (ignored if None)
    :return: Newly allocated NumPy array of the values
    :raises DimensionMismatchException: If the values are not 1-D or have an unexpected size
    """
    vector = np.array(values, dtype=np.float64)
    if vector.ndim != 1:
        raise DimensionMismatchException(f"Expected a 1-D vector, got shape {vector.shape}.")
    if expected_size is not None and vector.shape[0] != expected_size:
        raise DimensionMismatchException(
            f"Expected a vector of size {expected_size}, got size {vector.shape[0]}.",
        )
    return vector


def check_divisor(divisor: float | NDArray[np.float64]) -> None:
    """Raise a `DivisionByZeroException` if the divisor is zero or contains a zero.

    :param divisor: Scalar or array of gains by which values will be divided
    """
    if np.any(np.asarray(divisor) == 0):
        raise DivisionByZeroException(f"Cannot divide by zero (divisor: {divisor}).")
