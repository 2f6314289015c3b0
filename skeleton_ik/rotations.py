import math
from skeleton_ik.joint_chain import JointChain
from skeleton_ik.vector import RESOLUTION, Vector3D, angle_between


def rotate_around_axis(vector, axis, angle):
    """
    Rodrigues' rotation of `vector` about `axis` by `angle` radians:
        v' = v cos(a) + (axis x v) sin(a) + axis (axis . v)(1 - cos(a))
    The axis is expected to be normalized. A zero axis leaves the
    vector untouched.
    """
    if axis.magnitude() < RESOLUTION:
        return vector
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    return (
        vector * cos_angle
        + axis.cross(vector) * sin_angle
        + axis * (axis.dot(vector) * (1.0 - cos_angle))
    )


def rotate_around_pivot(point, pivot, axis, angle):
    return pivot + rotate_around_axis(point - pivot, axis, angle)


def bone_rotation(start, end):
    """
    Euler angles (pitch, yaw, roll) in degrees of the bone going from
    `start` to `end`. Twist along the bone is not tracked, roll is always 0.
    """
    direction = (end - start).normalize()
    yaw = math.degrees(math.atan2(direction.x, direction.z))
    pitch = math.degrees(math.asin(max(-1.0, min(1.0, -direction.y))))
    return Vector3D(pitch, yaw, 0.0)


def calculate_bone_rotations(chain):
    rotated_chain = JointChain.copy_of(chain)
    for i in range(len(rotated_chain) - 1):
        rotated_chain[i].rotation = bone_rotation(
            rotated_chain[i].position, rotated_chain[i + 1].position
        )
    # the end effector has no outgoing bone
    if len(rotated_chain) > 1:
        rotated_chain[-1].rotation = rotated_chain[-2].rotation
    return rotated_chain


def interior_angle(previous_position, position, next_position):
    incoming = position - previous_position
    outgoing = next_position - position
    return math.degrees(angle_between(incoming, outgoing))


def calculate_joint_angles(chain):
    """
    Angle in degrees between the incoming and outgoing bone of every joint
    except the root and the end effector.
    """
    return [
        interior_angle(
            chain[i - 1].position, chain[i].position, chain[i + 1].position
        )
        for i in range(1, len(chain) - 1)
    ]
