"""
Builds joint chains from MediaPipe hand (21 points) and pose (33 points)
landmark sets and drives them towards new targets.
"""
from collections.abc import Mapping
from enum import IntEnum
import logging
from skeleton_ik.constraints import JOINT_CONSTRAINTS
from skeleton_ik.joint import Joint
from skeleton_ik.joint_chain import JointChain
from skeleton_ik.solver import IKSolver
from skeleton_ik.vector import Vector3D

logger = logging.getLogger(__name__)


class HandLandmarks(IntEnum):
    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_FINGER_MCP = 5
    INDEX_FINGER_PIP = 6
    INDEX_FINGER_DIP = 7
    INDEX_FINGER_TIP = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP = 13
    RING_FINGER_PIP = 14
    RING_FINGER_DIP = 15
    RING_FINGER_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


class PoseLandmarks(IntEnum):
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16


FINGER_LANDMARKS = {
    "thumb": (
        HandLandmarks.WRIST,
        HandLandmarks.THUMB_CMC,
        HandLandmarks.THUMB_MCP,
        HandLandmarks.THUMB_IP,
        HandLandmarks.THUMB_TIP,
    ),
    "index": (
        HandLandmarks.WRIST,
        HandLandmarks.INDEX_FINGER_MCP,
        HandLandmarks.INDEX_FINGER_PIP,
        HandLandmarks.INDEX_FINGER_DIP,
        HandLandmarks.INDEX_FINGER_TIP,
    ),
    "middle": (
        HandLandmarks.WRIST,
        HandLandmarks.MIDDLE_FINGER_MCP,
        HandLandmarks.MIDDLE_FINGER_PIP,
        HandLandmarks.MIDDLE_FINGER_DIP,
        HandLandmarks.MIDDLE_FINGER_TIP,
    ),
    "ring": (
        HandLandmarks.WRIST,
        HandLandmarks.RING_FINGER_MCP,
        HandLandmarks.RING_FINGER_PIP,
        HandLandmarks.RING_FINGER_DIP,
        HandLandmarks.RING_FINGER_TIP,
    ),
    "pinky": (
        HandLandmarks.WRIST,
        HandLandmarks.PINKY_MCP,
        HandLandmarks.PINKY_PIP,
        HandLandmarks.PINKY_DIP,
        HandLandmarks.PINKY_TIP,
    ),
}

ARM_LANDMARKS = {
    "left": (
        PoseLandmarks.LEFT_SHOULDER,
        PoseLandmarks.LEFT_ELBOW,
        PoseLandmarks.LEFT_WRIST,
    ),
    "right": (
        PoseLandmarks.RIGHT_SHOULDER,
        PoseLandmarks.RIGHT_ELBOW,
        PoseLandmarks.RIGHT_WRIST,
    ),
}


def landmark_to_vector(landmark, scale=1.0):
    """
    Accepts a MediaPipe landmark (x, y, z attributes), a mapping with
    x, y, z keys or a plain 3-sequence.
    """
    if isinstance(landmark, Mapping):
        x, y, z = landmark["x"], landmark["y"], landmark["z"]
    elif hasattr(landmark, "x"):
        x, y, z = landmark.x, landmark.y, landmark.z
    else:
        x, y, z = landmark
    return Vector3D(x * scale, y * scale, z * scale)


def extract_finger_chain(landmarks, finger_name, scale=100.0, constraints=None):
    constraints = constraints or JOINT_CONSTRAINTS
    indices = FINGER_LANDMARKS.get(finger_name.lower())
    if indices is None:
        raise ValueError(f"Unknown finger name: {finger_name}")
    return JointChain(
        [
            Joint(
                landmark_to_vector(landmarks[index], scale),
                constraints.min_finger_angle,
                constraints.max_finger_angle,
            )
            for index in indices
        ]
    )


def extract_arm_chain(landmarks, side="left", scale=100.0, constraints=None):
    constraints = constraints or JOINT_CONSTRAINTS
    indices = ARM_LANDMARKS.get(side.lower())
    if indices is None:
        raise ValueError(f"Unknown arm side: {side}")
    shoulder_index, elbow_index, wrist_index = indices
    return JointChain(
        [
            Joint(
                landmark_to_vector(landmarks[shoulder_index], scale),
                constraints.min_shoulder_angle,
                constraints.max_shoulder_angle,
            ),
            Joint(
                landmark_to_vector(landmarks[elbow_index], scale),
                constraints.min_elbow_angle,
                constraints.max_elbow_angle,
            ),
            Joint(
                landmark_to_vector(landmarks[wrist_index], scale),
                constraints.min_wrist_angle,
                constraints.max_wrist_angle,
            ),
        ]
    )


def _solve_and_report(chain, target_position, algorithm, iterations, label):
    logger.info("Manipulating %s", label)
    logger.info("Current tip position: %s", chain.last().position)
    logger.info("Target position: %s", target_position)
    solved = IKSolver(algorithm, iterations, 0.01).solve(chain, target_position)
    tip = solved.last()
    logger.info(
        "Solved with %s, distance to target: %.4f",
        algorithm.upper(),
        tip.position.distance(target_position),
    )
    logger.info("New tip position: %s", tip.position)
    logger.info("New tip rotation: %s", tip.rotation)
    return solved


def manipulate_finger(landmarks, finger_name, target_position, algorithm="fabrik"):
    finger_chain = extract_finger_chain(landmarks, finger_name)
    return _solve_and_report(
        finger_chain, target_position, algorithm, 15, f"{finger_name} finger"
    )


def manipulate_arm(landmarks, side, target_position, algorithm="fabrik"):
    arm_chain = extract_arm_chain(landmarks, side)
    return _solve_and_report(arm_chain, target_position, algorithm, 20, f"{side} arm")


def simulated_hand_landmarks():
    """
    Open hand in a neutral pose, normalized image coordinates.
    """
    return [
        (0.50, 0.50, 0.00),
        (0.45, 0.48, 0.01),
        (0.42, 0.45, 0.02),
        (0.40, 0.42, 0.03),
        (0.38, 0.39, 0.04),
        (0.52, 0.45, 0.00),
        (0.53, 0.40, 0.00),
        (0.54, 0.36, 0.00),
        (0.55, 0.33, 0.00),
        (0.54, 0.45, 0.00),
        (0.55, 0.39, 0.00),
        (0.56, 0.34, 0.00),
        (0.57, 0.30, 0.00),
        (0.56, 0.45, 0.00),
        (0.57, 0.40, 0.00),
        (0.58, 0.36, 0.00),
        (0.59, 0.33, 0.00),
        (0.58, 0.46, 0.00),
        (0.59, 0.42, 0.00),
        (0.60, 0.39, 0.00),
        (0.61, 0.37, 0.00),
    ]


def simulated_pose_landmarks():
    """
    Only the left arm landmarks are populated.
    """
    return {
        PoseLandmarks.LEFT_SHOULDER: (0.40, 0.30, 0.00),
        PoseLandmarks.LEFT_ELBOW: (0.45, 0.50, 0.00),
        PoseLandmarks.LEFT_WRIST: (0.50, 0.70, 0.00),
    }
