"""Define a class to represent 3D orientations as unit quaternions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from pyquaternion import Quaternion as Q
from trimesh.transformations import quaternion_from_matrix, quaternion_matrix

from state_representation.math.vectors import DEFAULT_ATOL, DEFAULT_RTOL

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from numpy.typing import NDArray


@dataclass
class Quaternion:
    """A unit quaternion representing a 3D orientation."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        """Normalize the quaternion after it is initialized."""
        self.normalize()

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the quaternion's (x,y,z,w) values."""
        yield from (self.x, self.y, self.z, self.w)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Return the Hamilton product of this quaternion and another.

        Reference: https://kieranwynn.github.io/pyquaternion/#quaternion-operations
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        product = self._to_pyquaternion() * other._to_pyquaternion()
        return Quaternion(product.x, product.y, product.z, product.w)

    def _to_pyquaternion(self) -> Q:
        return Q(self.w, self.x, self.y, self.z)

    def normalize(self) -> None:
        """Normalize the quaternion to ensure it is a unit quaternion."""
        norm = float(np.linalg.norm(self.to_array()))
        if norm == 0:
            raise ValueError(f"Cannot normalize a zero-valued quaternion: {self}")

        self.x = float(self.x) / norm
        self.y = float(self.y) / norm
        self.z = float(self.z) / norm
        self.w = float(self.w) / norm

    def conjugate(self) -> Quaternion:
        """Compute the conjugate of this quaternion, which is also its inverse rotation.

        Reference: https://mathworld.wolfram.com/QuaternionConjugate.html
        """
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    @classmethod
    def identity(cls) -> Quaternion:
        """Construct a Quaternion corresponding to the identity rotation."""
        return Quaternion(0, 0, 0, 1)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64] | Sequence[float]) -> Quaternion:
        """Construct a quaternion from an array of the form [x,y,z,w]."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion expects a 4-vector, got {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the quaternion to a NumPy array of the form [x,y,z,w]."""
        return np.array([self.x, self.y, self.z, self.w])

    @classmethod
    def from_rotation_vector(cls, rotation_vector: NDArray[np.float64]) -> Quaternion:
        """Construct a quaternion from a rotation vector (rotation axis scaled by its angle in radians)."""
        angle_rad = float(np.linalg.norm(rotation_vector))
        if angle_rad == 0:
            return Quaternion.identity()
        q = Q(axis=np.asarray(rotation_vector) / angle_rad, angle=angle_rad)
        return Quaternion(q.x, q.y, q.z, q.w)

    def to_rotation_vector(self) -> NDArray[np.float64]:
        """Convert the quaternion into a rotation vector (rotation axis scaled by its angle in radians)."""
        q = self._to_pyquaternion()
        return q.get_axis(undefined=np.zeros(3)) * q.angle

    def rotate(self, vector: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rotate a 3D vector by the rotation represented by this quaternion."""
        return np.array(self._to_pyquaternion().rotate(np.asarray(vector, dtype=np.float64)))

    @classmethod
    def from_homogeneous_matrix(cls, matrix: NDArray[np.float64]) -> Quaternion:
        """Construct a quaternion from a 4x4 homogeneous transformation matrix."""
        if matrix.shape != (4, 4):
            raise ValueError(f"Quaternion expects a 4x4 homogeneous matrix, got {matrix.shape}")
        w, x, y, z = quaternion_from_matrix(matrix)  # Note: trimesh puts w (q's real value) first
        return Quaternion(x=float(x), y=float(y), z=float(z), w=float(w))

    def to_homogeneous_matrix(self) -> NDArray[np.float64]:
        """Convert the quaternion to a 4x4 homogeneous transformation matrix."""
        return quaternion_matrix(quaternion=[self.w, self.x, self.y, self.z])

    def approx_equal(self, other: Quaternion, rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL) -> bool:
        """Evaluate whether another Quaternion is approximately equal to this one.

        Note: A quaternion is considered equal to its negation, as they express the same rotation.
        """
        self_array = self.to_array()
        other_array = other.to_array()

        return np.allclose(self_array, other_array, rtol=rtol, atol=atol) or np.allclose(
            -self_array,
            other_array,
            rtol=rtol,
            atol=atol,
        )
