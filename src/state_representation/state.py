"""Define the base class shared by all robot state representations."""

from __future__ import annotations

from enum import Enum

from state_representation.exceptions import EmptyStateException, IncompatibleStatesException

DEFAULT_NAME = "none"
"""Name given to states constructed without an owning entity."""


class StateType(Enum):
    """An enumeration of the kinds of states that can be represented."""

    STATE = "State"
    SPATIAL_STATE = "SpatialState"
    JOINT_STATE = "JointState"
    JOINT_POSITIONS = "JointPositions"
    JOINT_VELOCITIES = "JointVelocities"
    JOINT_ACCELERATIONS = "JointAccelerations"
    JOINT_TORQUES = "JointTorques"
    CARTESIAN_STATE = "CartesianState"
    CARTESIAN_POSE = "CartesianPose"
    CARTESIAN_TWIST = "CartesianTwist"
    CARTESIAN_WRENCH = "CartesianWrench"


class State:
    """A named state of some entity (e.g., a robot), which may not have been assigned a value yet.

    A state starts out empty and becomes filled the first time a value is assigned to it.
    Operations that read or modify the value of an empty state raise an `EmptyStateException`.
    """

    def __init__(self, state_type: StateType, name: str = DEFAULT_NAME, empty: bool = True) -> None:
        """Initialize the state with its kind, the name of its owner, and whether it is empty.

        :param state_type: Kind of the state, fixed for the lifetime of the state
        :param name: Name of the entity owning the state (defaults to "none")
        :param empty: Whether the state begins without a value (defaults to True)
        """
        self._state_type = state_type
        self._name = name
        self._empty = empty

    @property
    def state_type(self) -> StateType:
        """Retrieve the kind of the state."""
        return self._state_type

    @property
    def name(self) -> str:
        """Retrieve the name of the entity owning the state."""
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        """Update the name of the entity owning the state."""
        self._name = name

    def is_empty(self) -> bool:
        """Evaluate whether the state has not yet been assigned a value."""
        return self._empty

    def _mark_filled(self) -> None:
        """Record that the state now holds a value."""
        self._empty = False

    def assert_not_empty(self, operation: str) -> None:
        """Raise an `EmptyStateException` if the state is empty.

        :param operation: Description of the attempted operation, used in the error message
        :raises EmptyStateException: If the state has not been assigned a value
        """
        if self._empty:
            raise EmptyStateException(
                f"Cannot {operation}: {self._state_type.value} '{self._name}' is empty.",
            )

    def is_compatible(self, other: State) -> bool:
        """Evaluate whether another state can be an operand in operations with this state."""
        return self._name == other.name

    def assert_compatible(self, other: State, operation: str) -> None:
        """Raise an `IncompatibleStatesException` unless the other state is compatible.

        :param other: State used as the other operand of the operation
        :param operation: Description of the attempted operation, used in the error message
        :raises IncompatibleStatesException: If the two states are not compatible
        """
        if not self.is_compatible(other):
            raise IncompatibleStatesException(
                f"Cannot {operation}: {self.describe_identity()} is not compatible "
                f"with {other.describe_identity()}.",
            )

    def describe_identity(self) -> str:
        """Describe the kind and owner of the state in a single short string."""
        return f"{self._state_type.value} '{self._name}'"

    def describe(self) -> str:
        """Describe the state in a human-readable form (for diagnostics, not serialization)."""
        description = self.describe_identity()
        return f"{description}: empty" if self._empty else description

    def __str__(self) -> str:
        """Return the human-readable description of the state."""
        return self.describe()
