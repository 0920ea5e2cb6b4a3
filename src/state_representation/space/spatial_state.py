"""Define the base class for states expressed with respect to a reference frame."""

from __future__ import annotations

from state_representation.exceptions import IncompatibleReferenceFramesException
from state_representation.io.logging import log_debug
from state_representation.space.frames import DEFAULT_FRAME
from state_representation.state import DEFAULT_NAME, State, StateType


class SpatialState(State):
    """A state expressed with respect to a named reference frame."""

    def __init__(
        self,
        state_type: StateType,
        name: str = DEFAULT_NAME,
        reference_frame: str = DEFAULT_FRAME,
        empty: bool = True,
    ) -> None:
        """Initialize the spatial state with its kind, owner, and reference frame.

        :param state_type: Kind of the state, fixed for the lifetime of the state
        :param name: Name of the entity (usually a frame) described by the state
        :param reference_frame: Reference frame the state is expressed in (defaults to "world")
        :param empty: Whether the state begins without a value (defaults to True)
        """
        super().__init__(state_type, name, empty)
        self._reference_frame = reference_frame

    @property
    def reference_frame(self) -> str:
        """Retrieve the name of the frame the state is expressed in."""
        return self._reference_frame

    @reference_frame.setter
    def reference_frame(self, reference_frame: str) -> None:
        """Relabel the frame of the state (its values are not transformed)."""
        self.set_reference_frame(reference_frame)

    def set_reference_frame(self, reference_frame: str) -> None:
        """Relabel the frame the state is expressed in, leaving its values untouched.

        Changing the label is not a change of coordinates; callers needing the state expressed
            in another frame must transform its values themselves.

        :param reference_frame: Name of the new reference frame
        """
        if reference_frame != self._reference_frame:
            log_debug(
                f"Relabeling the frame of {self.describe_identity()} "
                f"from '{self._reference_frame}' to '{reference_frame}'.",
            )
        self._reference_frame = reference_frame

    def is_compatible(self, other: State) -> bool:
        """Evaluate whether another state has the same name and reference frame as this state."""
        if not isinstance(other, SpatialState):
            return False
        return self.name == other.name and self._reference_frame == other.reference_frame

    def assert_compatible(self, other: State, operation: str) -> None:
        """Raise an exception unless the other state shares this state's name and frame.

        :raises IncompatibleReferenceFramesException: If the names match but the frames differ
        :raises IncompatibleStatesException: If the states are otherwise incompatible
        """
        if (
            isinstance(other, SpatialState)
            and self.name == other.name
            and self._reference_frame != other.reference_frame
        ):
            raise IncompatibleReferenceFramesException(
                f"Cannot {operation}: {self.describe_identity()} is not compatible "
                f"with {other.describe_identity()}.",
            )
        super().assert_compatible(other, operation)

    def describe_identity(self) -> str:
        """Describe the kind, owner, and reference frame of the state."""
        return f"{super().describe_identity()} expressed in '{self._reference_frame}'"
