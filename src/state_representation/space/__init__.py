"""Import classes representing states expressed in 3D reference frames."""

from .cartesian_pose import CartesianPose as CartesianPose
from .cartesian_state import CartesianState as CartesianState
from .cartesian_twist import CartesianTwist as CartesianTwist
from .cartesian_wrench import CartesianWrench as CartesianWrench
from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .rotations import Quaternion as Quaternion
from .spatial_state import SpatialState as SpatialState
