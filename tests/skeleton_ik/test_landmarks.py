import unittest
from types import SimpleNamespace
from skeleton_ik.landmarks import (
    HandLandmarks,
    PoseLandmarks,
    extract_arm_chain,
    extract_finger_chain,
    landmark_to_vector,
    manipulate_arm,
    manipulate_finger,
    simulated_hand_landmarks,
    simulated_pose_landmarks,
)
from skeleton_ik.vector import Vector3D


class TestLandmarkToVector(unittest.TestCase):
    def test_landmark_formats(self):
        expected = Vector3D(1.0, 2.0, 0.5)
        self.assertTrue(landmark_to_vector((0.5, 1.0, 0.25), 2.0).is_close(expected))
        self.assertTrue(
            landmark_to_vector({"x": 0.5, "y": 1.0, "z": 0.25}, 2.0).is_close(expected)
        )
        self.assertTrue(
            landmark_to_vector(SimpleNamespace(x=0.5, y=1.0, z=0.25), 2.0).is_close(
                expected
            )
        )
        self.assertEqual(landmark_to_vector((0.5, 1.0, 0.25)), Vector3D(0.5, 1.0, 0.25))


class TestExtractChains(unittest.TestCase):
    def test_finger_chain(self):
        landmarks = simulated_hand_landmarks()
        self.assertEqual(len(landmarks), 21)
        finger_chain = extract_finger_chain(landmarks, "Index")
        self.assertEqual(len(finger_chain), 5)
        self.assertTrue(finger_chain.root().position.is_close(Vector3D(50.0, 50.0, 0.0)))
        self.assertTrue(finger_chain.last().position.is_close(Vector3D(55.0, 33.0, 0.0)))
        for joint in finger_chain:
            self.assertEqual((joint.min_angle, joint.max_angle), (-20.0, 110.0))

    def test_unknown_finger(self):
        with self.assertRaises(ValueError):
            extract_finger_chain(simulated_hand_landmarks(), "toe")

    def test_arm_chain(self):
        arm_chain = extract_arm_chain(simulated_pose_landmarks(), "left", scale=10.0)
        shoulder, elbow, wrist = arm_chain
        self.assertTrue(shoulder.position.is_close(Vector3D(4.0, 3.0, 0.0)))
        self.assertTrue(elbow.position.is_close(Vector3D(4.5, 5.0, 0.0)))
        self.assertTrue(wrist.position.is_close(Vector3D(5.0, 7.0, 0.0)))
        self.assertEqual((shoulder.min_angle, shoulder.max_angle), (-180.0, 180.0))
        self.assertEqual((elbow.min_angle, elbow.max_angle), (0.0, 160.0))
        self.assertEqual((wrist.min_angle, wrist.max_angle), (-90.0, 90.0))

    def test_unknown_side(self):
        with self.assertRaises(ValueError):
            extract_arm_chain(simulated_pose_landmarks(), "middle")

    def test_landmark_indices(self):
        self.assertEqual(HandLandmarks.INDEX_FINGER_TIP, 8)
        self.assertEqual(HandLandmarks.PINKY_TIP, 20)
        self.assertEqual(PoseLandmarks.RIGHT_WRIST, 16)


class TestManipulate(unittest.TestCase):
    def test_manipulate_finger(self):
        landmarks = simulated_hand_landmarks()
        target = Vector3D(60.0, 25.0, 5.0)
        before = extract_finger_chain(landmarks, "index")
        for algorithm in ["fabrik", "ccd"]:
            with self.assertLogs("skeleton_ik.landmarks", level="INFO"):
                solved = manipulate_finger(landmarks, "index", target, algorithm)
            self.assertEqual(len(solved), 5)
            self.assertLessEqual(
                solved.last().position.distance(target),
                before.last().position.distance(target),
            )

    def test_manipulate_arm(self):
        landmarks = simulated_pose_landmarks()
        target = Vector3D(55.0, 65.0, -5.0)
        before = extract_arm_chain(landmarks, "left")
        with self.assertLogs("skeleton_ik.landmarks", level="INFO") as logs:
            solved = manipulate_arm(landmarks, "left", target, "fabrik")
        self.assertTrue(any("FABRIK" in line for line in logs.output))
        self.assertLess(
            solved.last().position.distance(target),
            before.last().position.distance(target),
        )
        self.assertEqual(solved.root().position, before.root().position)
