from dataclasses import dataclass
import math
import numpy as np

RESOLUTION = 1e-10


@dataclass(frozen=True)
class Vector3D:
    """
    Immutable 3D vector. Every operation returns a new vector.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero():
        return Vector3D(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(array):
        x, y, z = np.asarray(array, dtype=np.float64).tolist()
        return Vector3D(x, y, z)

    def to_array(self):
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def add(self, other):
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other):
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar):
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def divide(self, scalar):
        if abs(scalar) < RESOLUTION:
            return Vector3D.zero()
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self):
        return float(np.linalg.norm(self.to_array()))

    def normalize(self):
        # zero-length vectors have no direction
        magnitude = self.magnitude()
        if magnitude < RESOLUTION:
            return Vector3D.zero()
        return self.divide(magnitude)

    def dot(self, other):
        return float(np.dot(self.to_array(), other.to_array()))

    def cross(self, other):
        return Vector3D.from_array(np.cross(self.to_array(), other.to_array()))

    def distance(self, other):
        return self.subtract(other).magnitude()

    def is_close(self, other, tolerance=1e-9):
        return np.isclose(
            self.to_array(), other.to_array(), rtol=0.0, atol=tolerance
        ).all()

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return self.divide(scalar)

    def __neg__(self):
        return self.multiply(-1.0)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f"{self}"

    def __str__(self):
        return f"({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"


def angle_between(first_vector, second_vector):
    """
    Angle in radians between two vectors, robust to rounding
    outside of [-1, 1] in the cosine.
    """
    cosine = first_vector.normalize().dot(second_vector.normalize())
    return math.acos(max(-1.0, min(1.0, cosine)))
