"""Represent robot states as named, frame-aware values supporting safe arithmetic."""

from .exceptions import DimensionMismatchException as DimensionMismatchException
from .exceptions import DivisionByZeroException as DivisionByZeroException
from .exceptions import EmptyStateException as EmptyStateException
from .exceptions import IncompatibleReferenceFramesException as IncompatibleReferenceFramesException
from .exceptions import IncompatibleStatesException as IncompatibleStatesException
from .exceptions import StateException as StateException
from .joint import JointAccelerations as JointAccelerations
from .joint import JointPositions as JointPositions
from .joint import JointState as JointState
from .joint import JointTorques as JointTorques
from .joint import JointVelocities as JointVelocities
from .space import DEFAULT_FRAME as DEFAULT_FRAME
from .space import CartesianPose as CartesianPose
from .space import CartesianState as CartesianState
from .space import CartesianTwist as CartesianTwist
from .space import CartesianWrench as CartesianWrench
from .space import Quaternion as Quaternion
from .space import SpatialState as SpatialState
from .state import State as State
from .state import StateType as StateType
