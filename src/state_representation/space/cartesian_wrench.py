"""Define a class to represent the wrench (force and torque) applied at a frame."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from state_representation.arithmetic import VectorArithmetic
from state_representation.space.cartesian_state import CartesianState
from state_representation.space.frames import DEFAULT_FRAME
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from state_representation.math.vectors import VectorLike


class CartesianWrench(CartesianState, VectorArithmetic):
    """The force (N) and torque (Nm) applied at a named frame, expressed in a reference frame.

    Wrenches support element-wise arithmetic on the vector [fx, fy, fz, tx, ty, tz].
    """

    STATE_TYPE: ClassVar[StateType] = StateType.CARTESIAN_WRENCH
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("force", "torque")

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        reference_frame: str = DEFAULT_FRAME,
        force: VectorLike | None = None,
        torque: VectorLike | None = None,
    ) -> None:
        """Initialize the wrench, which is empty unless a force or torque is provided."""
        super().__init__(name, reference_frame)
        if force is not None:
            self.force = force
        if torque is not None:
            self.torque = torque
