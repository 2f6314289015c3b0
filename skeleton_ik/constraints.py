from dataclasses import dataclass
import logging
from skeleton_ik.joint_chain import JointChain
from skeleton_ik.rotations import calculate_joint_angles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JointConstraints:
    """
    Anatomical interior angle limits in degrees.
    """

    min_finger_angle: float = -20.0
    max_finger_angle: float = 110.0
    min_shoulder_angle: float = -180.0
    max_shoulder_angle: float = 180.0
    min_elbow_angle: float = 0.0
    max_elbow_angle: float = 160.0
    min_wrist_angle: float = -90.0
    max_wrist_angle: float = 90.0


JOINT_CONSTRAINTS = JointConstraints()


@dataclass
class ConstraintViolation:
    index: int
    angle: float
    min_angle: float
    max_angle: float

    def __str__(self):
        return (
            f"Joint {self.index} angle {self.angle:.2f} outside limits "
            f"[{self.min_angle}, {self.max_angle}]"
        )


def constraint_violations(chain):
    violations = []
    for offset, angle in enumerate(calculate_joint_angles(chain)):
        index = offset + 1
        joint = chain[index]
        if angle < joint.min_angle or angle > joint.max_angle:
            violations.append(
                ConstraintViolation(index, angle, joint.min_angle, joint.max_angle)
            )
    return violations


def apply_constraints(chain):
    """
    Reports interior angles outside of each joint's limits and returns an
    unchanged copy of the chain. Positions are never corrected here, that
    would require re-solving the chain under the constraint.
    """
    constrained_chain = JointChain.copy_of(chain)
    for violation in constraint_violations(constrained_chain):
        logger.warning("%s", violation)
    return constrained_chain
