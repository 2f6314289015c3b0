from skeleton_ik.constraints import JOINT_CONSTRAINTS
from skeleton_ik.joint import Joint
from skeleton_ik.joint_chain import JointChain
from skeleton_ik.vector import Vector3D


def create_finger_chain(
    base_position, bone_lengths=(1.0, 0.8, 0.6), direction=None, constraints=None
):
    """
    One joint at `base_position` followed by one joint per bone, laid out
    along `direction`. The base keeps the full range, the following joints
    get the finger range.
    """
    constraints = constraints or JOINT_CONSTRAINTS
    if direction is None:
        direction = Vector3D(1.0, 0.0, 0.0)
    direction = direction.normalize()
    joints = [Joint(base_position)]
    current_position = base_position
    for length in bone_lengths:
        current_position = current_position + direction * length
        joints.append(
            Joint(
                current_position,
                constraints.min_finger_angle,
                constraints.max_finger_angle,
            )
        )
    return JointChain(joints)


def create_arm_chain(
    shoulder_position, upper_arm_length=1.0, forearm_length=1.0, constraints=None
):
    """
    Shoulder, elbow and wrist hanging straight down (-y) from the shoulder.
    """
    constraints = constraints or JOINT_CONSTRAINTS
    elbow_position = shoulder_position + Vector3D(0.0, -upper_arm_length, 0.0)
    wrist_position = shoulder_position + Vector3D(
        0.0, -(upper_arm_length + forearm_length), 0.0
    )
    return JointChain(
        [
            Joint(
                shoulder_position,
                constraints.min_shoulder_angle,
                constraints.max_shoulder_angle,
            ),
            Joint(
                elbow_position,
                constraints.min_elbow_angle,
                constraints.max_elbow_angle,
            ),
            Joint(
                wrist_position,
                constraints.min_wrist_angle,
                constraints.max_wrist_angle,
            ),
        ]
    )
