"""Import classes representing joint-space states of a robot."""

from .joint_accelerations import JointAccelerations as JointAccelerations
from .joint_positions import JointPositions as JointPositions
from .joint_state import JOINT_STATE_VARIABLES as JOINT_STATE_VARIABLES
from .joint_state import JointState as JointState
from .joint_torques import JointTorques as JointTorques
from .joint_velocities import JointVelocities as JointVelocities
