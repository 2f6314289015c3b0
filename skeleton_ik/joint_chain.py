from collections.abc import Sequence


class InvalidChainError(ValueError):
    pass


class JointChain(Sequence):
    """
    Ordered joints from the root (index 0) to the end effector (last index).
    """

    def __init__(self, joints):
        self.joints = list(joints)

    @staticmethod
    def copy_of(joints):
        return JointChain([joint.copy() for joint in joints])

    def __len__(self):
        return len(self.joints)

    def __getitem__(self, i):
        return self.joints[i]

    def __setitem__(self, i, joint):
        self.joints[i] = joint

    def __eq__(self, other):
        if not isinstance(other, JointChain):
            return NotImplemented
        return self.joints == other.joints

    def __repr__(self):
        return f"{self}"

    def __str__(self):
        joints_as_string = [f"{joint}" for joint in self.joints]
        return f"Joints: {joints_as_string}"

    def copy(self):
        return JointChain.copy_of(self.joints)

    def positions(self):
        return [joint.position for joint in self.joints]

    def bone_lengths(self):
        return [
            self.joints[i].position.distance(self.joints[i + 1].position)
            for i in range(len(self.joints) - 1)
        ]

    def total_length(self):
        return sum(self.bone_lengths())

    def root(self):
        return self.joints[0]

    def last(self):
        return self.joints[len(self.joints) - 1]

    def set_position(self, index, position):
        self.joints[index] = self.joints[index].moved_to(position)


def working_copy(chain):
    """
    Independent copy of `chain` for a solver to mutate; a bone needs
    at least two joints.
    """
    if chain is None or len(chain) < 2:
        count = 0 if chain is None else len(chain)
        raise InvalidChainError(
            f"Chain must have at least 2 joints, got {count}"
        )
    return JointChain.copy_of(chain)
