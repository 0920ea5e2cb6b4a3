"""Define a class to represent the positions of the joints of a robot."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from state_representation.joint.joint_state import JointState
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from state_representation.math.vectors import VectorLike


class JointPositions(JointState):
    """The positions (rad or m) of the named joints of a robot."""

    STATE_TYPE: ClassVar[StateType] = StateType.JOINT_POSITIONS
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("positions",)

    def __init__(
        self,
        robot_name: str = DEFAULT_NAME,
        joint_names: int | Sequence[str] = 0,
        positions: VectorLike | None = None,
    ) -> None:
        """Initialize the joint positions, which are empty unless values are provided.

        :param robot_name: Name of the robot owning the joints
        :param joint_names: Number of joints or sequence of unique joint names (defaults to 0)
        :param positions: Optional vector of joint positions, one per joint
        """
        super().__init__(robot_name, joint_names, positions=positions)
