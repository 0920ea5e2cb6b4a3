"""Define a class to represent the full Cartesian state of a frame in 3D space."""

from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING, ClassVar, TypeVar

import numpy as np

from state_representation.exceptions import DimensionMismatchException
from state_representation.math.vectors import DEFAULT_ATOL, DEFAULT_RTOL, to_vector
from state_representation.space.frames import DEFAULT_FRAME
from state_representation.space.rotations import Quaternion
from state_representation.space.spatial_state import SpatialState
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from state_representation.math.vectors import VectorLike

CartesianStateT = TypeVar("CartesianStateT", bound="CartesianState")
"""A type of Cartesian state."""

CARTESIAN_STATE_VARIABLES = (
    "position",
    "orientation",
    "linear_velocity",
    "angular_velocity",
    "linear_acceleration",
    "angular_acceleration",
    "force",
    "torque",
)
"""Names of the variables carried by every Cartesian state, in storage order."""

VARIABLE_SIZES = {var: 4 if var == "orientation" else 3 for var in CARTESIAN_STATE_VARIABLES}
"""Number of values used by each variable; orientations are stored as [x,y,z,w] quaternions."""


class CartesianState(SpatialState):
    """The pose, twist, acceleration, and wrench of a named frame, expressed in a reference frame.

    Specialized subclasses (e.g., `CartesianPose`) carry all variables but only read, write, and
        operate on the variables relevant to the physical quantity they represent.
    """

    STATE_TYPE: ClassVar[StateType] = StateType.CARTESIAN_STATE
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = CARTESIAN_STATE_VARIABLES

    def __init__(self, name: str = DEFAULT_NAME, reference_frame: str = DEFAULT_FRAME) -> None:
        """Initialize an empty Cartesian state of the named frame.

        :param name: Name of the frame described by the state
        :param reference_frame: Frame in which the state is expressed (defaults to "world")
        """
        super().__init__(self.STATE_TYPE, name, reference_frame, empty=True)
        self._values: dict[str, NDArray[np.float64]] = {
            var: np.zeros(VARIABLE_SIZES[var]) for var in CARTESIAN_STATE_VARIABLES
        }
        self._values["orientation"] = Quaternion.identity().to_array()

    @classmethod
    def from_cartesian_state(
        cls: type[CartesianStateT],
        state: CartesianState,
    ) -> CartesianStateT:
        """Construct a state of this type holding a copy of all values of another Cartesian state."""
        result = cls(state.name, state.reference_frame)
        result._values = {var: vector.copy() for var, vector in state._values.items()}
        if not state.is_empty():
            result._mark_filled()
        return result

    def _get_variable(self, variable: str) -> NDArray[np.float64]:
        """Retrieve a copy of one of the stored variables, failing if the state is empty."""
        self.assert_not_empty(f"get the {variable.replace('_', ' ')}")
        return self._values[variable].copy()

    def _set_variable(self, variable: str, values: VectorLike) -> None:
        """Set one of the stored 3D vectors, marking the state as filled if the vector is relevant."""
        self._values[variable] = to_vector(values, expected_size=VARIABLE_SIZES[variable])
        if variable in self.ACTIVE_VARIABLES:
            self._mark_filled()

    @property
    def position(self) -> NDArray[np.float64]:
        """Retrieve the (x,y,z) position (m)."""
        return self._get_variable("position")

    @position.setter
    def position(self, position: VectorLike) -> None:
        self._set_variable("position", position)

    @property
    def orientation(self) -> Quaternion:
        """Retrieve the orientation as a unit quaternion."""
        return Quaternion.from_array(self._get_variable("orientation"))

    @orientation.setter
    def orientation(self, orientation: Quaternion | VectorLike) -> None:
        """Set the orientation from a Quaternion or an [x,y,z,w] vector (normalized on assignment)."""
        if not isinstance(orientation, Quaternion):
            orientation = Quaternion.from_array(to_vector(orientation, expected_size=4))
        self._values["orientation"] = orientation.to_array()
        if "orientation" in self.ACTIVE_VARIABLES:
            self._mark_filled()

    @property
    def linear_velocity(self) -> NDArray[np.float64]:
        """Retrieve the linear velocity (m/s)."""
        return self._get_variable("linear_velocity")

    @linear_velocity.setter
    def linear_velocity(self, linear_velocity: VectorLike) -> None:
        self._set_variable("linear_velocity", linear_velocity)

    @property
    def angular_velocity(self) -> NDArray[np.float64]:
        """Retrieve the angular velocity (rad/s)."""
        return self._get_variable("angular_velocity")

    @angular_velocity.setter
    def angular_velocity(self, angular_velocity: VectorLike) -> None:
        self._set_variable("angular_velocity", angular_velocity)

    @property
    def linear_acceleration(self) -> NDArray[np.float64]:
        """Retrieve the linear acceleration (m/s^2)."""
        return self._get_variable("linear_acceleration")

    @linear_acceleration.setter
    def linear_acceleration(self, linear_acceleration: VectorLike) -> None:
        self._set_variable("linear_acceleration", linear_acceleration)

    @property
    def angular_acceleration(self) -> NDArray[np.float64]:
        """Retrieve the angular acceleration (rad/s^2)."""
        return self._get_variable("angular_acceleration")

    @angular_acceleration.setter
    def angular_acceleration(self, angular_acceleration: VectorLike) -> None:
        self._set_variable("angular_acceleration", angular_acceleration)

    @property
    def force(self) -> NDArray[np.float64]:
        """Retrieve the force (N)."""
        return self._get_variable("force")

    @force.setter
    def force(self, force: VectorLike) -> None:
        self._set_variable("force", force)

    @property
    def torque(self) -> NDArray[np.float64]:
        """Retrieve the torque (Nm)."""
        return self._get_variable("torque")

    @torque.setter
    def torque(self, torque: VectorLike) -> None:
        self._set_variable("torque", torque)

    def set_zero(self) -> None:
        """Zero the relevant variables (identity orientation), marking the state as filled."""
        for var in self.ACTIVE_VARIABLES:
            if var == "orientation":
                self._values[var] = Quaternion.identity().to_array()
            else:
                self._values[var] = np.zeros(VARIABLE_SIZES[var])
        self._mark_filled()

    @classmethod
    def array_size(cls) -> int:
        """Compute the length of the vector returned by `array()` for this type of state."""
        return sum(VARIABLE_SIZES[var] for var in cls.ACTIVE_VARIABLES)

    def array(self) -> NDArray[np.float64]:
        """Retrieve the relevant variables of the state, concatenated in storage order."""
        self.assert_not_empty("get the values")
        return np.concatenate([self._values[var] for var in self.ACTIVE_VARIABLES])

    def to_list(self) -> list[float]:
        """Retrieve the relevant variables of the state as a list of floats."""
        return [float(v) for v in self.array()]

    def set_array(self, values: VectorLike) -> None:
        """Set the relevant variables of the state from a vector laid out as in `array()`."""
        self._assign_array(to_vector(values, expected_size=self.array_size()))

    def _assign_array(self, values: NDArray[np.float64]) -> None:
        """Split a vector laid out as in `array()` into the relevant variables."""
        if values.shape[0] != self.array_size():
            raise DimensionMismatchException(
                f"Cannot assign {values.shape[0]} values to {self.describe_identity()}.",
            )

        # Normalize the orientation (if any) before modifying the state
        split: dict[str, NDArray[np.float64]] = {}
        start = 0
        for var in self.ACTIVE_VARIABLES:
            end = start + VARIABLE_SIZES[var]
            split[var] = values[start:end].copy()
            start = end
        if "orientation" in split:
            split["orientation"] = Quaternion.from_array(split["orientation"]).to_array()

        self._values.update(split)
        self._mark_filled()

    def copy(self: CartesianStateT) -> CartesianStateT:
        """Return a deep copy of the Cartesian state."""
        return deepcopy(self)

    def approx_equal(
        self,
        other: CartesianState,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Evaluate whether another Cartesian state of the same type is approximately equal to this one.

        Orientations are compared as rotations, so a quaternion equals its negation.
        """
        if type(other) is not type(self) or not self.is_compatible(other):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()

        for var in self.ACTIVE_VARIABLES:
            if var == "orientation":
                same = self.orientation.approx_equal(other.orientation, rtol=rtol, atol=atol)
            else:
                same = np.allclose(self._values[var], other._values[var], rtol=rtol, atol=atol)
            if not same:
                return False
        return True

    def describe(self) -> str:
        """Describe the state and its relevant variables."""
        if self.is_empty():
            return f"{self.describe_identity()}: empty"

        lines = [self.describe_identity()]
        for var in self.ACTIVE_VARIABLES:
            values = ", ".join(f"{v:g}" for v in self._values[var])
            lines.append(f"  {var}: [{values}]")
        return "\n".join(lines)
