"""Define the element-wise arithmetic shared by states whose values form a numeric vector.

Each state supporting vector arithmetic flattens its active values into a single vector (see
`array()`) and accepts a vector of the same layout back (see `_assign_array()`). The functions
in this module implement the arithmetic once in terms of that layout, and `VectorArithmetic`
exposes them as Python operators.
"""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from state_representation.math.vectors import check_divisor, to_vector
from state_representation.state import State

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from state_representation.math.vectors import VectorLike

VectorStateT = TypeVar("VectorStateT", bound="VectorArithmetic")
"""A state type supporting element-wise vector arithmetic."""


def is_scalar(value: Any) -> bool:
    """Evaluate whether the given value is a real scalar (including NumPy scalars)."""
    return isinstance(value, Real)


def is_vector_like(value: Any) -> bool:
    """Evaluate whether the given value can be interpreted as a raw numeric vector."""
    return isinstance(value, (np.ndarray, list, tuple))


def _operand_vector(state: VectorStateT, operand: VectorStateT | VectorLike, operation: str) -> NDArray:
    """Retrieve the vector of values of an operand after validating it against the state.

    :param state: State on the left-hand side of the operation (assumed to be non-empty)
    :param operand: Another state of the same type or a raw numeric vector
    :param operation: Description of the attempted operation, used in error messages
    :return: Vector of values with the same layout as `state.array()`
    :raises TypeError: If the operand is a state of a different type than the given state
    """
    if isinstance(operand, State):
        if type(operand) is not type(state):
            raise TypeError(f"Cannot {operation}: {type(state).__name__} and {type(operand).__name__}.")
        operand.assert_not_empty(operation)
        state.assert_compatible(operand, operation)
        return operand.array()
    return to_vector(operand, expected_size=state.array().shape[0])


def _factor_values(state: VectorStateT, factor: float | VectorLike) -> float | NDArray:
    """Validate a scalar or an array of gains used to scale the given state."""
    if is_scalar(factor):
        return float(factor)
    return to_vector(factor, expected_size=state.array().shape[0])


def add(state: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
    """Compute the element-wise sum of a state and another state or raw vector.

    :param state: Non-empty state providing the identity of the result
    :param operand: Compatible state of the same type, or a raw vector matching `state.array()`
    :return: New state holding the sum; neither input is modified
    """
    state.assert_not_empty("add to the state")
    values = state.array() + _operand_vector(state, operand, "add the states")
    result = state.copy()
    result._assign_array(values)
    return result


def add_in_place(state: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
    """Add another state or raw vector to the given state, modifying it in place."""
    state.assert_not_empty("add to the state")
    state._assign_array(state.array() + _operand_vector(state, operand, "add the states"))
    return state


def subtract(state: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
    """Compute the element-wise difference `state - operand` as a new state."""
    state.assert_not_empty("subtract from the state")
    values = state.array() - _operand_vector(state, operand, "subtract the states")
    result = state.copy()
    result._assign_array(values)
    return result


def subtract_in_place(state: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
    """Subtract another state or raw vector from the given state, modifying it in place."""
    state.assert_not_empty("subtract from the state")
    state._assign_array(state.array() - _operand_vector(state, operand, "subtract the states"))
    return state


def reverse_subtract(vector: VectorLike, state: VectorStateT) -> VectorStateT:
    """Compute the element-wise difference `vector - state` as a new state.

    :param vector: Raw vector on the left-hand side of the subtraction
    :param state: Non-empty state providing the identity of the result
    :return: New state holding the difference
    """
    state.assert_not_empty("subtract the state")
    values = _operand_vector(state, vector, "subtract the state") - state.array()
    result = state.copy()
    result._assign_array(values)
    return result


def scale(state: VectorStateT, factor: float | VectorLike) -> VectorStateT:
    """Scale a state by a scalar or element-wise by an array of gains.

    :param state: Non-empty state to be scaled
    :param factor: Scalar, or array of gains matching the layout of `state.array()`
    :return: New state holding the scaled values
    """
    state.assert_not_empty("scale the state")
    values = state.array() * _factor_values(state, factor)
    result = state.copy()
    result._assign_array(values)
    return result


def scale_in_place(state: VectorStateT, factor: float | VectorLike) -> VectorStateT:
    """Scale a state by a scalar or an array of gains, modifying it in place."""
    state.assert_not_empty("scale the state")
    state._assign_array(state.array() * _factor_values(state, factor))
    return state


def divide(state: VectorStateT, factor: float | VectorLike) -> VectorStateT:
    """Divide a state by a scalar or element-wise by an array of gains.

    :param state: Non-empty state to be divided
    :param factor: Non-zero scalar, or array of non-zero gains matching `state.array()`
    :return: New state holding the divided values
    :raises DivisionByZeroException: If the scalar or any of the gains is zero
    """
    state.assert_not_empty("divide the state")
    divisor = _factor_values(state, factor)
    check_divisor(divisor)
    result = state.copy()
    result._assign_array(state.array() / divisor)
    return result


def divide_in_place(state: VectorStateT, factor: float | VectorLike) -> VectorStateT:
    """Divide a state by a scalar or an array of gains, modifying it in place."""
    state.assert_not_empty("divide the state")
    divisor = _factor_values(state, factor)
    check_divisor(divisor)
    state._assign_array(state.array() / divisor)
    return state


class VectorArithmetic(State):
    """A state whose active values form a numeric vector supporting element-wise arithmetic.

    Subclasses provide `array()`, `_assign_array()`, and `copy()`. Operands must be states of
    exactly the same class (other state types are rejected) or raw numeric vectors.
    """

    __array_ufunc__ = None  # NumPy arrays on the left defer to the reflected operators

    def array(self) -> NDArray[np.float64]:
        """Retrieve the active values of the state as a new vector."""
        raise NotImplementedError

    def _assign_array(self, values: NDArray[np.float64]) -> None:
        """Set the active values of the state from a vector laid out as in `array()`."""
        raise NotImplementedError

    def copy(self: VectorStateT) -> VectorStateT:
        """Return a deep copy of the state."""
        raise NotImplementedError

    def to_list(self) -> list[float]:
        """Retrieve the active values of the state as a list of floats."""
        return [float(v) for v in self.array()]

    def _is_additive_operand(self, other: Any) -> bool:
        """Evaluate whether the given value may be added to or subtracted from this state."""
        if isinstance(other, State):
            return type(other) is type(self)
        return is_vector_like(other)

    def _is_factor(self, other: Any) -> bool:
        """Evaluate whether the given value may scale this state."""
        return is_scalar(other) or is_vector_like(other)

    def add(self: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
        """Return the sum of this state and another compatible state or raw vector."""
        return add(self, operand)

    def subtract(self: VectorStateT, operand: VectorStateT | VectorLike) -> VectorStateT:
        """Return the difference of this state and another compatible state or raw vector."""
        return subtract(self, operand)

    def scale(self: VectorStateT, factor: float | VectorLike) -> VectorStateT:
        """Return this state scaled by a scalar or element-wise by an array of gains."""
        return scale(self, factor)

    def divide(self: VectorStateT, factor: float | VectorLike) -> VectorStateT:
        """Return this state divided by a scalar or element-wise by an array of gains."""
        return divide(self, factor)

    def __add__(self, other: Any) -> Any:
        if not self._is_additive_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> Any:
        if not is_vector_like(other):
            return NotImplemented
        return add(self, other)

    def __iadd__(self, other: Any) -> Any:
        if not self._is_additive_operand(other):
            return NotImplemented
        return add_in_place(self, other)

    def __sub__(self, other: Any) -> Any:
        if not self._is_additive_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> Any:
        if not is_vector_like(other):
            return NotImplemented
        return reverse_subtract(other, self)

    def __isub__(self, other: Any) -> Any:
        if not self._is_additive_operand(other):
            return NotImplemented
        return subtract_in_place(self, other)

    def __mul__(self, other: Any) -> Any:
        if not self._is_factor(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other: Any) -> Any:
        if not self._is_factor(other):
            return NotImplemented
        return scale(self, other)

    def __imul__(self, other: Any) -> Any:
        if not self._is_factor(other):
            return NotImplemented
        return scale_in_place(self, other)

    def __truediv__(self, other: Any) -> Any:
        if not self._is_factor(other):
            return NotImplemented
        return divide(self, other)

    def __itruediv__(self, other: Any) -> Any:
        if not self._is_factor(other):
            return NotImplemented
        return divide_in_place(self, other)

    def __neg__(self: VectorStateT) -> VectorStateT:
        return scale(self, -1.0)
