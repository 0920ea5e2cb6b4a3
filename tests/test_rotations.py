"""Unit tests for the Quaternion class representing 3D orientations."""

import numpy as np
import pytest
from hypothesis import given

from state_representation import Quaternion

from .strategies.spatial_strategies import quaternions, rotation_vectors


@given(quaternions())
def test_quaternion_to_homogeneous_matrix_and_back(quat: Quaternion) -> None:
    """Verify that a Quaternion is unchanged after converting to and from a homogeneous matrix."""
    # Arrange/Act - Given a unit quaternion, convert to and from a homogeneous matrix
    matrix = quat.to_homogeneous_matrix()
    result_quat = Quaternion.from_homogeneous_matrix(matrix)

    # Assert - Expect that the resulting quaternion equals the original (modulo negation)
    assert quat.approx_equal(result_quat)


@given(rotation_vectors())
def test_rotation_vector_to_quaternion_and_back(rotation_vector: list[float]) -> None:
    """Verify that rotation vectors (angles below pi) survive conversion through a Quaternion."""
    # Arrange/Act - Convert the rotation vector into a quaternion
    quat = Quaternion.from_rotation_vector(np.array(rotation_vector))

    # Assert - Expect the quaternion to convert back into the same rotation vector
    assert np.allclose(quat.to_rotation_vector(), rotation_vector, atol=1e-06)


@given(quaternions())
def test_quaternion_times_conjugate_is_identity(quat: Quaternion) -> None:
    """Verify that multiplying a quaternion by its conjugate gives the identity rotation."""
    # Arrange/Act - Multiply the quaternion by its conjugate
    result = quat * quat.conjugate()

    # Assert - Expect the identity rotation
    assert result.approx_equal(Quaternion.identity(), atol=1e-07)


def test_quaternion_rotates_vectors() -> None:
    """Verify that a quarter turn about z maps the x-axis onto the y-axis."""
    # Arrange - Create a quarter turn about the z-axis
    quarter_turn = Quaternion.from_rotation_vector(np.array([0.0, 0.0, np.pi / 2]))

    # Act - Rotate the x-axis
    rotated = quarter_turn.rotate(np.array([1.0, 0.0, 0.0]))

    # Assert - Expect the y-axis
    assert np.allclose(rotated, [0.0, 1.0, 0.0])


def test_zero_quaternion_raises_error() -> None:
    """Verify that attempting to construct an all-zero Quaternion raises a ValueError."""
    # Arrange/Act/Assert - Expect that constructing an all-zero Quaternion will raise an error
    with pytest.raises(ValueError, match="zero"):
        _ = Quaternion(0.0, 0.0, 0.0, 0.0)
