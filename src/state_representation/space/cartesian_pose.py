"""Define a class to represent the pose of a frame in 3D space."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import numpy as np

from state_representation.exceptions import IncompatibleReferenceFramesException
from state_representation.space.cartesian_state import CartesianState
from state_representation.space.frames import DEFAULT_FRAME
from state_representation.space.rotations import Quaternion
from state_representation.state import DEFAULT_NAME, StateType

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from state_representation.math.vectors import VectorLike


class CartesianPose(CartesianState):
    """The position (m) and orientation of a named frame with respect to a reference frame.

    Consider: pose_a_b * pose_b_c = pose_a_c, where pose_x_y is the pose of frame y expressed in
        frame x. Composition therefore requires the right operand to be expressed in the frame
        named by the left operand.
    """

    STATE_TYPE: ClassVar[StateType] = StateType.CARTESIAN_POSE
    ACTIVE_VARIABLES: ClassVar[tuple[str, ...]] = ("position", "orientation")

    __array_ufunc__ = None

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        reference_frame: str = DEFAULT_FRAME,
        position: VectorLike | None = None,
        orientation: Quaternion | VectorLike | None = None,
    ) -> None:
        """Initialize the pose, which is empty unless a position or orientation is provided.

        :param name: Name of the frame whose pose is represented
        :param reference_frame: Frame in which the pose is expressed (defaults to "world")
        :param position: Optional (x,y,z) position (m)
        :param orientation: Optional orientation, as a Quaternion or an [x,y,z,w] vector
        """
        super().__init__(name, reference_frame)
        if position is not None:
            self.position = position
        if orientation is not None:
            self.orientation = orientation

    @classmethod
    def from_homogeneous_matrix(
        cls,
        matrix: NDArray[np.float64],
        name: str = DEFAULT_NAME,
        reference_frame: str = DEFAULT_FRAME,
    ) -> CartesianPose:
        """Construct a pose from a 4x4 homogeneous transformation matrix."""
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix but received shape {matrix.shape}")

        position = matrix[:3, 3]
        orientation = Quaternion.from_homogeneous_matrix(matrix)
        return CartesianPose(name, reference_frame, position, orientation)

    def to_homogeneous_matrix(self) -> NDArray[np.float64]:
        """Convert the pose into a 4x4 homogeneous transformation matrix."""
        matrix = self.orientation.to_homogeneous_matrix()
        matrix[:3, 3] = self.position
        return matrix

    def inverse(self) -> CartesianPose:
        """Return the inverse transformation: the reference frame's pose w.r.t. this pose's frame."""
        self.assert_not_empty("invert the pose")
        inverse_orientation = self.orientation.conjugate()
        inverse_position = -inverse_orientation.rotate(self.position)
        return CartesianPose(self.reference_frame, self.name, inverse_position, inverse_orientation)

    def compose(self, other: CartesianPose) -> CartesianPose:
        """Compose this pose (of frame b w.r.t. frame a) with a pose expressed in frame b.

        :param other: Pose of some frame c expressed in the frame named by this pose
        :return: Pose of frame c expressed in this pose's reference frame
        :raises IncompatibleReferenceFramesException: If `other` is not expressed in this frame
        """
        self.assert_not_empty("compose the poses")
        other.assert_not_empty("compose the poses")
        if other.reference_frame != self.name:
            raise IncompatibleReferenceFramesException(
                f"Cannot compose {self.describe_identity()} with {other.describe_identity()}: "
                f"expected the right-hand pose to be expressed in '{self.name}'.",
            )

        orientation = self.orientation
        position = self.position + orientation.rotate(other.position)
        return CartesianPose(other.name, self.reference_frame, position, orientation * other.orientation)

    def add(self, other: CartesianPose) -> CartesianPose:
        """Add the position of a compatible pose and apply its rotation after this orientation."""
        self.assert_not_empty("add the poses")
        other.assert_not_empty("add the poses")
        self.assert_compatible(other, "add the poses")

        position = self.position + other.position
        orientation = self.orientation * other.orientation
        return CartesianPose(self.name, self.reference_frame, position, orientation)

    def subtract(self, other: CartesianPose) -> CartesianPose:
        """Subtract the position of a compatible pose and undo its rotation."""
        self.assert_not_empty("subtract the poses")
        other.assert_not_empty("subtract the poses")
        self.assert_compatible(other, "subtract the poses")

        position = self.position - other.position
        orientation = self.orientation * other.orientation.conjugate()
        return CartesianPose(self.name, self.reference_frame, position, orientation)

    def _update_from(self, other: CartesianPose) -> CartesianPose:
        """Copy the values of another pose into this one, returning this pose."""
        self._values["position"] = other._values["position"].copy()
        self._values["orientation"] = other._values["orientation"].copy()
        self._mark_filled()
        return self

    def __mul__(self, other: Any) -> Any:
        if not isinstance(other, CartesianPose):
            return NotImplemented
        return self.compose(other)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, CartesianPose):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Any) -> Any:
        if not isinstance(other, CartesianPose):
            return NotImplemented
        return self._update_from(self.add(other))

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, CartesianPose):
            return NotImplemented
        return self.subtract(other)

    def __isub__(self, other: Any) -> Any:
        if not isinstance(other, CartesianPose):
            return NotImplemented
        return self._update_from(self.subtract(other))
