import unittest
from skeleton_ik.chains import create_arm_chain
from skeleton_ik.constraints import (
    JOINT_CONSTRAINTS,
    ConstraintViolation,
    apply_constraints,
    constraint_violations,
)
from skeleton_ik.vector import Vector3D


def folded_arm():
    # wrist folded back onto the upper arm: 180 degrees at the elbow
    arm_chain = create_arm_chain(Vector3D(0.0, 0.0, 0.0), 1.0, 0.9)
    arm_chain.set_position(2, Vector3D(0.0, -0.1, 0.0))
    return arm_chain


class TestConstraints(unittest.TestCase):
    def test_default_limits(self):
        self.assertEqual(JOINT_CONSTRAINTS.min_finger_angle, -20.0)
        self.assertEqual(JOINT_CONSTRAINTS.max_finger_angle, 110.0)
        self.assertEqual(JOINT_CONSTRAINTS.min_elbow_angle, 0.0)
        self.assertEqual(JOINT_CONSTRAINTS.max_elbow_angle, 160.0)

    def test_no_violations_within_limits(self):
        arm_chain = create_arm_chain(Vector3D(0.0, 0.0, 0.0), 1.0, 0.9)
        arm_chain.set_position(2, Vector3D(0.9, -1.0, 0.0))
        self.assertEqual(constraint_violations(arm_chain), [])

    def test_violation_is_reported(self):
        violations = constraint_violations(folded_arm())
        self.assertEqual(len(violations), 1)
        violation = violations[0]
        self.assertIsInstance(violation, ConstraintViolation)
        self.assertEqual(violation.index, 1)
        self.assertAlmostEqual(violation.angle, 180.0)
        self.assertEqual((violation.min_angle, violation.max_angle), (0.0, 160.0))

    def test_apply_constraints_only_reports(self):
        arm_chain = folded_arm()
        with self.assertLogs("skeleton_ik.constraints", level="WARNING") as logs:
            constrained_chain = apply_constraints(arm_chain)
        self.assertEqual(len(logs.output), 1)
        self.assertIn("Joint 1", logs.output[0])
        self.assertEqual(constrained_chain, arm_chain)
        self.assertIsNot(constrained_chain, arm_chain)
        for original, constrained in zip(arm_chain, constrained_chain):
            self.assertIsNot(original, constrained)
