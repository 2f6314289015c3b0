from skeleton_ik.vector import Vector3D
from skeleton_ik.joint import Joint
from skeleton_ik.joint_chain import InvalidChainError, JointChain
from skeleton_ik.rotations import (
    calculate_bone_rotations,
    calculate_joint_angles,
    rotate_around_axis,
)
from skeleton_ik.constraints import (
    ConstraintViolation,
    JointConstraints,
    apply_constraints,
    constraint_violations,
)
from skeleton_ik.chains import create_arm_chain, create_finger_chain
from skeleton_ik.ccd_solver import solve_ccd
from skeleton_ik.fabrik_solver import solve_fabrik
from skeleton_ik.solver import IKSolver, solve_single_joint
