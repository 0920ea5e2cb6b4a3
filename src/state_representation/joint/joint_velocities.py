"""Define a class to represent the velocities of the joints of a robot."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from state_representation.io.logging import log_debug
from state_representation.joint.joint_positions import JointPositions
from state_representation.joint.joint_state import JointState
from state_representation.math.vectors import to_vector
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from state_representation.math.vectors import VectorLike


class JointVelocities(JointState):
    """The velocities (rad/s or m/s) of the named joints of a robot.

    Multiplying joint velocities by a `datetime.timedelta` (on either side) yields the
        `JointPositions` displacement covered over that duration.
    """

    STATE_TYPE: ClassVar[StateType] = StateType.JOINT_VELOCITIES
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("velocities",)

    def __init__(
        self,
        robot_name: str = DEFAULT_NAME,
        joint_names: int | Sequence[str] = 0,
        velocities: VectorLike | None = None,
    ) -> None:
        """Initialize the joint velocities, which are empty unless values are provided.

        :param robot_name: Name of the robot owning the joints
        :param joint_names: Number of joints or sequence of unique joint names (defaults to 0)
        :param velocities: Optional vector of joint velocities, one per joint
        """
        super().__init__(robot_name, joint_names, velocities=velocities)

    @classmethod
    def from_positions(cls, positions: JointPositions) -> JointVelocities:
        """Construct joint velocities equal to the given positions divided by one second.

        The position values are copied unchanged into the velocities; this is a unit convention,
            not a derivative.

        :param positions: Non-empty joint positions to convert
        :return: Joint velocities with the same robot, joints, and numeric values
        """
        position_values = positions.array()  # Raises if the positions are empty
        result = cls.from_joint_state(positions)
        result.velocities = position_values
        return result

    def as_displacement(self, dt: timedelta) -> JointPositions:
        """Compute the joint displacement obtained by moving at these velocities for a duration.

        :param dt: Duration over which the velocities are applied
        :return: JointPositions equal to the velocities multiplied by the duration in seconds
        """
        if not isinstance(dt, timedelta):
            raise TypeError(f"Expected a timedelta duration, got {type(dt)}: {dt}")
        self.assert_not_empty("compute a displacement")
        displacement = self.array() * dt.total_seconds()
        return JointPositions(self.name, self.joint_names, displacement)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self.as_displacement(other)
        return super().__mul__(other)

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self.as_displacement(other)
        return super().__rmul__(other)

    def __imul__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            raise TypeError("Cannot multiply JointVelocities by a duration in place.")
        return super().__imul__(other)

    def clamp(self, max_absolute_value: float | VectorLike, noise_ratio: float = 0.0) -> JointVelocities:
        """Clamp the magnitude of each joint velocity in place.

        :param max_absolute_value: Maximum speed, as a scalar or as one value per joint
        :param noise_ratio: Components slower than this fraction of their maximum are set to zero
        :return: This instance, after clamping
        """
        self.assert_not_empty("clamp the velocities")
        if np.isscalar(max_absolute_value):
            limits = np.full(self.size, float(max_absolute_value))
        else:
            limits = to_vector(max_absolute_value, expected_size=self.size)
        if np.any(limits < 0):
            raise ValueError(f"Velocity limits must be non-negative, got {limits}")

        original = self.array()
        clamped = np.clip(original, -limits, limits)
        clamped = np.where(np.abs(clamped) < noise_ratio * limits, 0.0, clamped)

        if not np.array_equal(original, clamped):
            log_debug(f"Clamped the velocities of {self.describe_identity()}.")
        self._assign_array(clamped)
        return self

    def clamped(self, max_absolute_value: float | VectorLike, noise_ratio: float = 0.0) -> JointVelocities:
        """Return a copy of the velocities with the magnitude of each joint velocity clamped."""
        return self.copy().clamp(max_absolute_value, noise_ratio)
