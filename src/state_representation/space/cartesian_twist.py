"""Define a class to represent the twist (linear and angular velocity) of a frame."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from state_representation.arithmetic import VectorArithmetic
from state_representation.io.logging import log_debug
from state_representation.space.cartesian_pose import CartesianPose
from state_representation.space.cartesian_state import CartesianState
from state_representation.space.frames import DEFAULT_FRAME
from state_representation.space.rotations import Quaternion
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from state_representation.math.vectors import VectorLike


def _clamp_magnitude(vector: NDArray[np.float64], max_norm: float, noise_ratio: float) -> NDArray:
    """Scale a 3D vector down to a maximum norm, zeroing it if its norm is within the deadzone."""
    norm = float(np.linalg.norm(vector))
    if norm > max_norm:
        return vector * (max_norm / norm)
    if norm < noise_ratio * max_norm:
        return np.zeros(3)
    return vector


class CartesianTwist(CartesianState, VectorArithmetic):
    """The linear (m/s) and angular (rad/s) velocity of a named frame w.r.t. a reference frame.

    Twists support element-wise arithmetic on the vector [vx, vy, vz, wx, wy, wz]. Multiplying a
        twist by a `datetime.timedelta` (on either side) yields the `CartesianPose` displacement
        covered over that duration.
    """

    STATE_TYPE: ClassVar[StateType] = StateType.CARTESIAN_TWIST
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("linear_velocity", "angular_velocity")

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        reference_frame: str = DEFAULT_FRAME,
        linear_velocity: VectorLike | None = None,
        angular_velocity: VectorLike | None = None,
    ) -> None:
        """Initialize the twist, which is empty unless a linear or angular velocity is provided."""
        super().__init__(name, reference_frame)
        if linear_velocity is not None:
            self.linear_velocity = linear_velocity
        if angular_velocity is not None:
            self.angular_velocity = angular_velocity

    @classmethod
    def from_pose(cls, pose: CartesianPose) -> CartesianTwist:
        """Construct a twist equal to the given pose divided by one second.

        The position becomes the linear velocity and the orientation's rotation vector becomes
            the angular velocity.

        :param pose: Non-empty pose to convert
        :return: Twist of the same frame, expressed in the same reference frame
        """
        pose.assert_not_empty("convert the pose into a twist")
        result = cls.from_cartesian_state(pose)
        result.linear_velocity = pose.position
        result.angular_velocity = pose.orientation.to_rotation_vector()
        return result

    def as_displacement(self, dt: timedelta) -> CartesianPose:
        """Compute the pose displacement obtained by moving at this twist for a duration.

        :param dt: Duration over which the twist is applied
        :return: Pose translated by the linear velocity times the duration and rotated by the
            rotation vector equal to the angular velocity times the duration
        """
        if not isinstance(dt, timedelta):
            raise TypeError(f"Expected a timedelta duration, got {type(dt)}: {dt}")
        self.assert_not_empty("compute a displacement")
        seconds = dt.total_seconds()
        position = self.linear_velocity * seconds
        orientation = Quaternion.from_rotation_vector(self.angular_velocity * seconds)
        return CartesianPose(self.name, self.reference_frame, position, orientation)

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
            raise TypeError("Cannot multiply a CartesianTwist by a duration in place.")
        return super().__imul__(other)

    def clamp(self, max_linear: float, max_angular: float, noise_ratio: float = 0.0) -> CartesianTwist:
        """Clamp the magnitudes of the linear and angular velocities in place.

        :param max_linear: Maximum magnitude of the linear velocity (m/s)
        :param max_angular: Maximum magnitude of the angular velocity (rad/s)
        :param noise_ratio: Velocities slower than this fraction of their maximum are set to zero
        :return: This instance, after clamping
        """
        self.assert_not_empty("clamp the twist")
        if max_linear < 0 or max_angular < 0:
            raise ValueError(f"Twist limits must be non-negative, got {max_linear}, {max_angular}")

        linear = _clamp_magnitude(self.linear_velocity, max_linear, noise_ratio)
        angular = _clamp_magnitude(self.angular_velocity, max_angular, noise_ratio)
        clamped = np.concatenate([linear, angular])

        if not np.array_equal(self.array(), clamped):
            log_debug(f"Clamped the twist of {self.describe_identity()}.")
        self._assign_array(clamped)
        return self

    def clamped(self, max_linear: float, max_angular: float, noise_ratio: float = 0.0) -> CartesianTwist:
        """Return a copy of the twist with its linear and angular velocities clamped."""
        return self.copy().clamp(max_linear, max_angular, noise_ratio)
