"""Unit tests for JointState, the generic joint-space state of a robot."""

import numpy as np
import pytest

from state_representation import (
    DimensionMismatchException,
    EmptyStateException,
    IncompatibleStatesException,
    JointPositions,
    JointState,
    JointTorques,
    JointVelocities,
    StateType,
)
from state_representation.io import print_state


def test_joint_state_with_count_generates_names() -> None:
    """Verify that giving a joint count generates names and leaves the state empty."""
    # Arrange/Act - Construct a joint state from a number of joints
    state = JointState("robot", 3)

    # Assert - Expect generated names, the generic type, and an empty state
    assert state.joint_names == ("joint0", "joint1", "joint2")
    assert state.size == len(state) == 3
    assert state.state_type is StateType.JOINT_STATE
    assert state.is_empty()


def test_joint_state_accepts_numpy_integer_count() -> None:
    """Verify that a NumPy integer is accepted as the number of joints."""
    # Arrange/Act - Construct a joint state from a NumPy integer count
    state = JointState("robot", np.int64(2))

    # Assert - Expect one generated name per joint
    assert state.joint_names == ("joint0", "joint1")


def test_joint_state_rejects_a_single_string_as_joint_names() -> None:
    """Verify that a bare string is not split into one joint per character."""
    # Arrange/Act/Assert - Expect a TypeError instead of the joints ("j", "0")
    with pytest.raises(TypeError):
        JointPositions("robot", "j0")


def test_empty_joint_state_never_returns_zeros() -> None:
    """Verify that reading any vector of an empty JointState raises instead of returning zeros."""
    # Arrange - Create an empty joint state with two joints
    state = JointState("robot", ["a", "b"])

    # Act/Assert - Expect every vector, and the full array, to be unavailable
    for variable in ("positions", "velocities", "accelerations", "torques"):
        with pytest.raises(EmptyStateException):
            getattr(state, variable)
    with pytest.raises(EmptyStateException):
        state.array()


def test_setting_a_vector_fills_the_state() -> None:
    """Verify that assigning any vector marks the JointState as filled."""
    # Arrange - Create an empty joint state with two joints
    state = JointState("robot", 2)

    # Act - Assign only the torques
    state.torques = [1.0, -1.0]

    # Assert - Expect a filled state whose other vectors are zero
    assert not state.is_empty()
    assert np.array_equal(state.torques, [1.0, -1.0])
    assert np.array_equal(state.positions, [0.0, 0.0])


def test_setting_a_vector_of_wrong_size_fails_without_change() -> None:
    """Verify that a failed assignment leaves the JointState unchanged."""
    # Arrange - Create a joint state with two joint positions
    state = JointState("robot", 2, positions=[1.0, 2.0])

    # Act/Assert - Expect three positions for two joints to be rejected
    with pytest.raises(DimensionMismatchException):
        state.positions = [1.0, 2.0, 3.0]

    # Assert - Expect the original positions to be kept
    assert np.array_equal(state.positions, [1.0, 2.0])


def test_duplicate_joint_names_are_rejected() -> None:
    """Verify that joint names must be unique."""
    # Arrange/Act/Assert - Expect a repeated joint name to be rejected
    with pytest.raises(ValueError, match="unique"):
        JointState("robot", ["j0", "j0"])


def test_joint_index_lookup() -> None:
    """Verify that joints can be located by name."""
    # Arrange - Create a joint state with two named joints
    state = JointState("robot", ["shoulder", "elbow"])

    # Act/Assert - Expect known joints to be found and unknown joints to raise a KeyError
    assert state.joint_index("elbow") == 1
    with pytest.raises(KeyError):
        state.joint_index("wrist")


def test_joint_state_array_concatenates_all_vectors() -> None:
    """Verify that a generic JointState exposes all four vectors through `array()`."""
    # Arrange - Create a joint state with all four vectors
    state = JointState(
        "robot",
        ["j0", "j1"],
        positions=[1.0, 2.0],
        velocities=[3.0, 4.0],
        accelerations=[5.0, 6.0],
        torques=[7.0, 8.0],
    )

    # Act/Assert - Expect positions, velocities, accelerations, and torques in that order
    assert state.to_list() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]


def test_joint_state_arithmetic_applies_to_all_vectors() -> None:
    """Verify that adding and scaling generic JointStates acts on every vector."""
    # Arrange - Create two compatible joint states with different vectors assigned
    state = JointState("robot", 2, positions=[1.0, 1.0], velocities=[2.0, 2.0])
    other = JointState("robot", 2, torques=[1.0, 2.0])

    # Act - Add the states and double the sum
    total = (state + other) * 2.0

    # Assert - Expect every vector of the result to reflect the arithmetic
    assert np.array_equal(total.positions, [2.0, 2.0])
    assert np.array_equal(total.velocities, [4.0, 4.0])
    assert np.array_equal(total.torques, [2.0, 4.0])


def test_joint_states_of_different_robots_are_incompatible() -> None:
    """Verify that states of different robots cannot be combined."""
    # Arrange - Create joint states of two different robots
    state = JointState("left_arm", 2, positions=[1.0, 1.0])
    other = JointState("right_arm", 2, positions=[1.0, 1.0])

    # Act/Assert - Expect adding the states to raise
    with pytest.raises(IncompatibleStatesException):
        state + other


def test_set_zero_fills_only_the_relevant_vector() -> None:
    """Verify that `set_zero` zeroes the relevant vector and fills the state."""
    # Arrange - Create empty joint torques
    state = JointTorques("robot", 2)

    # Act - Zero the torques
    state.set_zero()

    # Assert - Expect a filled state with zero torques
    assert not state.is_empty()
    assert np.array_equal(state.array(), [0.0, 0.0])


def test_from_joint_state_copies_every_vector() -> None:
    """Verify that converting between joint-space types copies all four vectors."""
    # Arrange - Create a generic joint state with positions and velocities
    source = JointState("robot", 2, positions=[1.0, 2.0], velocities=[3.0, 4.0])

    # Act - Reinterpret the state as joint velocities
    velocities = JointVelocities.from_joint_state(source)

    # Assert - Expect the velocities type, with the other vectors still carried along
    assert velocities.state_type is StateType.JOINT_VELOCITIES
    assert velocities.to_list() == [3.0, 4.0]
    assert np.array_equal(velocities.positions, [1.0, 2.0])


def test_from_empty_joint_state_is_empty() -> None:
    """Verify that converting an empty joint state produces an empty state."""
    # Arrange/Act - Reinterpret an empty joint state as joint positions
    positions = JointPositions.from_joint_state(JointState("robot", 2))

    # Assert - Expect empty positions with the same joints
    assert positions.is_empty()
    assert positions.joint_names == ("joint0", "joint1")


def test_copy_is_independent() -> None:
    """Verify that modifying a copy does not modify the original state."""
    # Arrange - Create positions and a copy of them
    original = JointPositions("robot", 2, [1.0, 2.0])
    duplicate = original.copy()

    # Act - Modify the copy in place
    duplicate += [1.0, 1.0]

    # Assert - Expect only the copy to change
    assert original.to_list() == [1.0, 2.0]
    assert duplicate.to_list() == [2.0, 3.0]


def test_array_does_not_alias_storage() -> None:
    """Verify that modifying the array returned by `array()` does not modify the state."""
    # Arrange - Create positions for a two-joint robot
    state = JointPositions("robot", 2, [1.0, 2.0])

    # Act - Overwrite an entry of the retrieved array
    values = state.array()
    values[0] = 100.0

    # Assert - Expect the positions to be unchanged
    assert state.to_list() == [1.0, 2.0]


def test_describe_lists_joints_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that the description names the robot and lists each joint's value in order."""
    # Arrange - Create positions for two named joints
    state = JointPositions("robot", ["j0", "j1"], [1.0, 2.5])

    # Act - Describe the state and print it to the console
    description = state.describe()
    print_state(state)

    # Assert - Expect the type, robot, and joints in order, and an "empty" note for empty states
    assert "JointPositions 'robot'" in description
    assert description.index("j0: positions=1") < description.index("j1: positions=2.5")
    assert "robot" in capsys.readouterr().out
    assert str(JointPositions("robot", 2)).endswith("empty")


def test_set_array_fills_relevant_vector_from_raw_values() -> None:
    """Verify that raw values laid out as in `array()` can be written back into a state."""
    # Arrange - Create empty joint velocities
    velocities = JointVelocities("robot", ["j0", "j1"])

    # Act - Write raw values into the velocities
    velocities.set_array(np.array([0.5, -0.5]))

    # Assert - Expect filled velocities, and a rejection of values of the wrong size
    assert not velocities.is_empty()
    assert velocities.to_list() == [0.5, -0.5]
    with pytest.raises(DimensionMismatchException):
        velocities.set_array([1.0, 2.0, 3.0])
