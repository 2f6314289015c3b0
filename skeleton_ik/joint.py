from dataclasses import dataclass, field, replace
from skeleton_ik.vector import Vector3D


@dataclass
class Joint:
    """
    A joint of an articulated chain.

    `rotation` holds derived Euler angles (pitch, yaw, roll) in degrees and
    is only written by the rotation derivation, solvers never read it.
    `min_angle` and `max_angle` bound, in degrees, the interior angle between
    the incoming and outgoing bones. They are advisory.
    """

    position: Vector3D
    min_angle: float = -180.0
    max_angle: float = 180.0
    rotation: Vector3D = field(default_factory=Vector3D.zero)

    def copy(self):
        return replace(self)

    def moved_to(self, position):
        return replace(self, position=position)

    def __repr__(self):
        return f"{self}"

    def __str__(self):
        return (
            f"[ Position: {self.position}, Rotation: {self.rotation}, "
            f"Angle Constraint: ({self.min_angle}, {self.max_angle}) ]"
        )
