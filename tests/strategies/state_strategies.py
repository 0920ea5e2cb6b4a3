"""Define strategies for generating robot states for property-based testing."""

from __future__ import annotations

import hypothesis.strategies as st

from state_representation import CartesianPose, CartesianTwist, JointPositions, JointVelocities

from .common_strategies import finite_floats, frame_names
from .spatial_strategies import positions, quaternions


@st.composite
def joint_names_lists(draw: st.DrawFn, min_size: int = 1, max_size: int = 8) -> list[str]:
    """Generate random lists of unique joint names."""
    return draw(st.lists(frame_names(), min_size=min_size, max_size=max_size, unique=True))


@st.composite
def value_vectors(draw: st.DrawFn, size: int) -> list[float]:
    """Generate random vectors of finite values with the given size."""
    return draw(st.lists(finite_floats(), min_size=size, max_size=size))


@st.composite
def joint_positions(draw: st.DrawFn, robot_name: str = "robot") -> JointPositions:
    """Generate random non-empty joint positions of the named robot."""
    names = draw(joint_names_lists())
    values = draw(value_vectors(len(names)))
    return JointPositions(robot_name, names, values)


@st.composite
def joint_velocities_pairs(draw: st.DrawFn) -> tuple[JointVelocities, JointVelocities]:
    """Generate random pairs of compatible joint velocities (same robot and joint order)."""
    names = draw(joint_names_lists())
    first = JointVelocities("robot", names, draw(value_vectors(len(names))))
    second = JointVelocities("robot", names, draw(value_vectors(len(names))))
    return first, second


@st.composite
def cartesian_poses(draw: st.DrawFn, name: str = "ee", reference_frame: str = "world") -> CartesianPose:
    """Generate random non-empty poses of the named frame."""
    return CartesianPose(name, reference_frame, draw(positions()), draw(quaternions()))


@st.composite
def cartesian_twists(draw: st.DrawFn, name: str = "ee", reference_frame: str = "world") -> CartesianTwist:
    """Generate random non-empty twists of the named frame."""
    linear = draw(value_vectors(3))
    angular = draw(value_vectors(3))
    return CartesianTwist(name, reference_frame, linear, angular)
