import logging
from skeleton_ik.joint_chain import working_copy
from skeleton_ik.rotations import calculate_bone_rotations, rotate_around_pivot
from skeleton_ik.vector import angle_between

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10
DEFAULT_TOLERANCE = 0.01
# rotations below this many radians are numerical noise
ANGLE_EPSILON = 0.001


def solve_ccd(
    chain, target_position, iterations=DEFAULT_ITERATIONS, tolerance=DEFAULT_TOLERANCE
):
    """
    Cyclic Coordinate Descent.

    Each pass sweeps from the joint before the end effector down to the
    root, rotating everything past the current joint so that the end
    effector points at the target as seen from that joint. Every update is
    a rigid rotation, so bone lengths are preserved.

    Returns a new chain with derived bone rotations; `chain` is untouched.
    """
    work_chain = working_copy(chain)
    end_effector_index = len(work_chain) - 1
    for iteration in range(iterations):
        distance = work_chain[end_effector_index].position.distance(target_position)
        if distance < tolerance:
            logger.debug("CCD converged after %d iterations", iteration)
            break
        for i in range(end_effector_index - 1, -1, -1):
            pivot = work_chain[i].position
            to_end = work_chain[end_effector_index].position - pivot
            to_target = target_position - pivot
            angle = angle_between(to_end, to_target)
            if abs(angle) < ANGLE_EPSILON:
                continue
            # anti-parallel vectors give a zero axis, which rotates nothing
            axis = to_end.normalize().cross(to_target.normalize()).normalize()
            for j in range(i + 1, end_effector_index + 1):
                work_chain.set_position(
                    j, rotate_around_pivot(work_chain[j].position, pivot, axis, angle)
                )
    else:
        logger.debug(
            "CCD stopped after %d iterations, distance to target %f",
            iterations,
            work_chain[end_effector_index].position.distance(target_position),
        )
    return calculate_bone_rotations(work_chain)
