"""Define a class to represent the torques applied at the joints of a robot."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from state_representation.joint.joint_state import JointState
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from state_representation.math.vectors import VectorLike


class JointTorques(JointState):
    """The torques (Nm) or forces (N) applied at the named joints of a robot."""

    STATE_TYPE: ClassVar[StateType] = StateType.JOINT_TORQUES
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("torques",)

    def __init__(
        self,
        robot_name: str = DEFAULT_NAME,
        joint_names: int | Sequence[str] = 0,
        torques: VectorLike | None = None,
    ) -> None:
        super().__init__(robot_name, joint_names, torques=torques)
