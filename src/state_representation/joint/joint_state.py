"""Define a class to represent the joint-space state of a robot."""

from __future__ import annotations

from copy import deepcopy
from numbers import Integral
from typing import TYPE_CHECKING, ClassVar, TypeVar

import numpy as np

from state_representation.arithmetic import VectorArithmetic
from state_representation.exceptions import DimensionMismatchException
from state_representation.math.vectors import DEFAULT_ATOL, DEFAULT_RTOL, to_vector
from state_representation.state import DEFAULT_NAME, State, StateType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from state_representation.math.vectors import VectorLike

JointStateT = TypeVar("JointStateT", bound="JointState")
"""A type of joint-space state."""

JOINT_STATE_VARIABLES = ("positions", "velocities", "accelerations", "torques")
"""Names of the per-joint vectors carried by every joint-space state, in storage order."""


def make_joint_names(joint_names: int | Sequence[str]) -> tuple[str, ...]:
    """Create the tuple of joint names for a joint-space state.

    :param joint_names: Number of joints (names are generated as "joint0", "joint1", ...)
        or a sequence of unique joint names
    :return: Tuple of joint names in joint order
    :raises TypeError: If a single string is given instead of a sequence of names
    :raises ValueError: If the count is negative or the given names are not unique
    """
    if isinstance(joint_names, Integral):
        if joint_names < 0:
            raise ValueError(f"Cannot create a negative number of joints: {joint_names}")
        return tuple(f"joint{i}" for i in range(int(joint_names)))
    if isinstance(joint_names, str):
        raise TypeError(f"Expected a sequence of joint names, got the string '{joint_names}'")

    names = tuple(joint_names)
    if len(set(names)) != len(names):
        raise ValueError(f"Joint names must be unique, got {names}")
    return names


class JointState(VectorArithmetic):
    """The positions, velocities, accelerations, and torques of the named joints of a robot.

    All four vectors always have one entry per joint, indexed in the order of `joint_names`.
    Specialized subclasses (e.g., `JointPositions`) carry the same four vectors but only read,
    write, and operate on the one vector relevant to the physical quantity they represent.
    """

    STATE_TYPE: ClassVar[StateType] = StateType.JOINT_STATE
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = JOINT_STATE_VARIABLES

    def __init__(
        self,
        robot_name: str = DEFAULT_NAME,
        joint_names: int | Sequence[str] = 0,
        *,
        positions: VectorLike | None = None,
        velocities: VectorLike | None = None,
        accelerations: VectorLike | None = None,
        torques: VectorLike | None = None,
    ) -> None:
        """Initialize the joint state, which is empty unless initial values are provided.

        :param robot_name: Name of the robot owning the joints
        :param joint_names: Number of joints or sequence of unique joint names (defaults to 0)
        :param positions: Optional initial joint positions (rad or m)
        :param velocities: Optional initial joint velocities (rad/s or m/s)
        :param accelerations: Optional initial joint accelerations (rad/s^2 or m/s^2)
        :param torques: Optional initial joint torques or forces (Nm or N)
        :raises DimensionMismatchException: If a value vector doesn't have one entry per joint
        """
        super().__init__(self.STATE_TYPE, robot_name, empty=True)

        initial_values = {
            "positions": positions,
            "velocities": velocities,
            "accelerations": accelerations,
            "torques": torques,
        }
        given_values = {var: v for var, v in initial_values.items() if v is not None}

        # Infer the number of joints from the values if neither names nor a count were given
        if isinstance(joint_names, Integral) and joint_names == 0 and given_values:
            joint_names = len(next(iter(given_values.values())))

        self._joint_names = make_joint_names(joint_names)
        self._values: dict[str, NDArray[np.float64]] = {
            var: np.zeros(self.size) for var in JOINT_STATE_VARIABLES
        }

        # Validate every initial vector before assigning any of them
        validated = {var: to_vector(v, expected_size=self.size) for var, v in given_values.items()}
        for var, vector in validated.items():
            self._values[var] = vector
        if any(var in self.ACTIVE_VARIABLES for var in validated):
            self._mark_filled()

    @classmethod
    def from_joint_state(cls: type[JointStateT], state: JointState) -> JointStateT:
        """Construct a state of this type holding a copy of all values of another joint state.

        The vectors not relevant to the source's type are copied as-is, so their meaning
            depends on where the source got them from.

        :param state: Joint state (of any joint-space type) to copy from
        :return: Constructed state, empty if and only if the source state is empty
        """
        result = cls(state.name, state.joint_names)
        result._values = {var: vector.copy() for var, vector in state._values.items()}
        if not state.is_empty():
            result._mark_filled()
        return result

    @property
    def joint_names(self) -> tuple[str, ...]:
        """Retrieve the names of the joints, in the order used by the value vectors."""
        return self._joint_names

    @property
    def size(self) -> int:
        """Retrieve the number of joints in the state."""
        return len(self._joint_names)

    def __len__(self) -> int:
        """Return the number of joints in the state."""
        return self.size

    def joint_index(self, joint_name: str) -> int:
        """Retrieve the index of the named joint within the value vectors.

        :raises KeyError: If the state has no joint with the given name
        """
        try:
            return self._joint_names.index(joint_name)
        except ValueError as e:
            raise KeyError(f"{self.describe_identity()} has no joint named '{joint_name}'.") from e

    def _get_variable(self, variable: str) -> NDArray[np.float64]:
        """Retrieve a copy of one of the per-joint vectors, failing if the state is empty."""
        self.assert_not_empty(f"get the {variable}")
        return self._values[variable].copy()

    def _set_variable(self, variable: str, values: VectorLike) -> None:
        """Set one of the per-joint vectors, marking the state as filled if the vector is relevant."""
        self._values[variable] = to_vector(values, expected_size=self.size)
        if variable in self.ACTIVE_VARIABLES:
            self._mark_filled()

    @property
    def positions(self) -> NDArray[np.float64]:
        """Retrieve the joint positions (rad or m)."""
        return self._get_variable("positions")

    @positions.setter
    def positions(self, positions: VectorLike) -> None:
        """Set the joint positions (rad or m)."""
        self._set_variable("positions", positions)

    @property
    def velocities(self) -> NDArray[np.float64]:
        """Retrieve the joint velocities (rad/s or m/s)."""
        return self._get_variable("velocities")

    @velocities.setter
    def velocities(self, velocities: VectorLike) -> None:
        """Set the joint velocities (rad/s or m/s)."""
        self._set_variable("velocities", velocities)

    @property
    def accelerations(self) -> NDArray[np.float64]:
        """Retrieve the joint accelerations (rad/s^2 or m/s^2)."""
        return self._get_variable("accelerations")

    @accelerations.setter
    def accelerations(self, accelerations: VectorLike) -> None:
        """Set the joint accelerations (rad/s^2 or m/s^2)."""
        self._set_variable("accelerations", accelerations)

    @property
    def torques(self) -> NDArray[np.float64]:
        """Retrieve the joint torques (Nm) or forces (N)."""
        return self._get_variable("torques")

    @torques.setter
    def torques(self, torques: VectorLike) -> None:
        """Set the joint torques (Nm) or forces (N)."""
        self._set_variable("torques", torques)

    def set_zero(self) -> None:
        """Set the vectors relevant to this type of state to zero, marking the state as filled."""
        for var in self.ACTIVE_VARIABLES:
            self._values[var] = np.zeros(self.size)
        self._mark_filled()

    def array(self) -> NDArray[np.float64]:
        """Retrieve the values relevant to this type of state as a new vector.

        For a generic JointState, the vector concatenates positions, velocities, accelerations,
            and torques (in that order); specialized states return only their own vector.
        """
        self.assert_not_empty("get the values")
        return np.concatenate([self._values[var] for var in self.ACTIVE_VARIABLES])

    def set_array(self, values: VectorLike) -> None:
        """Set the values relevant to this type of state from a vector laid out as in `array()`."""
        expected_size = self.size * len(self.ACTIVE_VARIABLES)
        self._assign_array(to_vector(values, expected_size=expected_size))

    def _assign_array(self, values: NDArray[np.float64]) -> None:
        """Split a vector laid out as in `array()` into the relevant per-joint vectors."""
        if values.shape[0] != self.size * len(self.ACTIVE_VARIABLES):
            raise DimensionMismatchException(
                f"Cannot assign {values.shape[0]} values to {self.describe_identity()}.",
            )
        for i, var in enumerate(self.ACTIVE_VARIABLES):
            self._values[var] = values[i * self.size : (i + 1) * self.size].copy()
        self._mark_filled()

    def copy(self: JointStateT) -> JointStateT:
        """Return a deep copy of the joint state."""
        return deepcopy(self)

    def is_compatible(self, other: State) -> bool:
        """Evaluate whether another state belongs to the same robot with the same joint order."""
        if not isinstance(other, JointState):
            return False
        return self.name == other.name and self._joint_names == other.joint_names

    def approx_equal(
        self,
        other: JointState,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Evaluate whether another joint state of the same type is approximately equal to this one."""
        if type(other) is not type(self) or not self.is_compatible(other):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return bool(np.allclose(self.array(), other.array(), rtol=rtol, atol=atol))

    def describe_identity(self) -> str:
        """Describe the kind, owner, and number of joints of the state."""
        return f"{super().describe_identity()} with {self.size} joints"

    def describe(self) -> str:
        """Describe the state and its relevant values, listed per joint in joint order."""
        if self.is_empty():
            return f"{self.describe_identity()}: empty"

        lines = [self.describe_identity()]
        for i, joint_name in enumerate(self._joint_names):
            values = ", ".join(f"{var}={self._values[var][i]:g}" for var in self.ACTIVE_VARIABLES)
            lines.append(f"  {joint_name}: {values}")
        return "\n".join(lines)
