"""Define a class to represent the accelerations of the joints of a robot."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from state_representation.joint.joint_state import JointState
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from state_representation.math.vectors import VectorLike


class JointAccelerations(JointState):
    """The accelerations (rad/s^2 or m/s^2) of the named joints of a robot."""

    STATE_TYPE: ClassVar[StateType] = StateType.JOINT_ACCELERATIONS
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("accelerations",)

    def __init__(
        self,
        robot_name: str = DEFAULT_NAME,
        joint_names: int | Sequence[str] = 0,
        accelerations: VectorLike | None = None,
    ) -> None:
        """Initialize the joint accelerations, which are empty unless values are provided."""
        super().__init__(robot_name, joint_names, accelerations=accelerations)
