import logging
from skeleton_ik.ccd_solver import solve_ccd
from skeleton_ik.chains import create_arm_chain, create_finger_chain
from skeleton_ik.fabrik_solver import solve_fabrik
from skeleton_ik.joint import Joint
from skeleton_ik.landmarks import (
    manipulate_arm,
    manipulate_finger,
    simulated_hand_landmarks,
    simulated_pose_landmarks,
)
from skeleton_ik.rotations import calculate_joint_angles
from skeleton_ik.solver import solve_single_joint
from skeleton_ik.vector import Vector3D

logger = logging.getLogger(__name__)


def log_chain(title, chain):
    logger.info(title)
    for i, joint in enumerate(chain):
        logger.info("  Joint %d: %s", i, joint.position)


def single_joint_example():
    wrist = Joint(Vector3D(0.0, -2.0, 0.0))
    target_position = Vector3D(1.0, -1.5, 0.5)
    moved = solve_single_joint(wrist, target_position)
    logger.info("Moved wrist from %s to %s", wrist.position, moved.position)
    return moved


def arm_example(solve, target_position):
    arm_chain = create_arm_chain(Vector3D(0.0, 0.0, 0.0), 1.0, 0.9)
    log_chain("Initial arm chain:", arm_chain)
    solved = solve(arm_chain, target_position, 20, 0.01)
    log_chain("Solved arm chain:", solved)
    logger.info(
        "Distance to target: %.4f", solved.last().position.distance(target_position)
    )
    return solved


def finger_example():
    finger_chain = create_finger_chain(
        Vector3D(0.0, 0.0, 0.0), [0.4, 0.3, 0.25], Vector3D(1.0, 0.0, 0.0)
    )
    target_position = Vector3D(0.7, 0.5, 0.2)
    solved = solve_fabrik(finger_chain, target_position, 15, 0.01)
    log_chain("Solved finger chain:", solved)
    logger.info(
        "Distance to target: %.4f", solved.last().position.distance(target_position)
    )
    return solved


def hand_example():
    finger_offsets = {
        "Thumb": (Vector3D(-0.3, 0.0, 0.2), Vector3D(0.3, 0.5, 0.3)),
        "Index": (Vector3D(-0.15, 0.0, 0.0), Vector3D(0.5, 0.4, 0.1)),
        "Middle": (Vector3D(0.0, 0.0, 0.0), Vector3D(0.6, 0.3, 0.0)),
        "Ring": (Vector3D(0.15, 0.0, 0.0), Vector3D(0.5, 0.3, -0.1)),
        "Pinky": (Vector3D(0.3, 0.0, -0.1), Vector3D(0.4, 0.2, -0.2)),
    }
    solved_fingers = {}
    for name, (base_position, target_position) in finger_offsets.items():
        chain = create_finger_chain(base_position, [0.4, 0.3, 0.25])
        solved = solve_fabrik(chain, target_position, 15, 0.01)
        logger.info(
            "%s: Target distance = %.4f",
            name,
            solved.last().position.distance(target_position),
        )
        solved_fingers[name] = solved
    return solved_fingers


def main():
    single_joint_example()
    solved_arm = arm_example(solve_ccd, Vector3D(0.8, -1.5, 0.3))
    arm_example(solve_fabrik, Vector3D(1.2, -1.0, -0.5))
    finger_example()
    for i, angle in enumerate(calculate_joint_angles(solved_arm)):
        logger.info("Joint %d angle: %.2f degrees", i + 1, angle)
    hand_example()
    hand_landmarks = simulated_hand_landmarks()
    pose_landmarks = simulated_pose_landmarks()
    manipulate_finger(hand_landmarks, "index", Vector3D(60.0, 25.0, 5.0), "fabrik")
    manipulate_finger(hand_landmarks, "middle", Vector3D(62.0, 22.0, 3.0), "ccd")
    manipulate_arm(pose_landmarks, "left", Vector3D(55.0, 65.0, -5.0), "fabrik")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    main()
