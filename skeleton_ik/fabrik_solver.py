import logging
from skeleton_ik.ccd_solver import DEFAULT_ITERATIONS, DEFAULT_TOLERANCE
from skeleton_ik.joint_chain import working_copy
from skeleton_ik.rotations import calculate_bone_rotations

logger = logging.getLogger(__name__)


def stretch_towards(work_chain, root_position, target_position, bone_lengths):
    """
    Lays the chain out on the ray from the root to the target keeping
    every bone length.
    """
    direction = (target_position - root_position).normalize()
    for i in range(1, len(work_chain)):
        work_chain.set_position(
            i, work_chain[i - 1].position + direction * bone_lengths[i - 1]
        )
    return work_chain


def forward_reaching(work_chain, target_position, bone_lengths):
    last = len(work_chain) - 1
    work_chain.set_position(last, target_position)
    for i in range(last - 1, -1, -1):
        next_position = work_chain[i + 1].position
        direction = (work_chain[i].position - next_position).normalize()
        work_chain.set_position(i, next_position + direction * bone_lengths[i])


def backward_reaching(work_chain, root_position, bone_lengths):
    work_chain.set_position(0, root_position)
    for i in range(len(work_chain) - 1):
        position = work_chain[i].position
        direction = (work_chain[i + 1].position - position).normalize()
        work_chain.set_position(i + 1, position + direction * bone_lengths[i])


def solve_fabrik(
    chain, target_position, iterations=DEFAULT_ITERATIONS, tolerance=DEFAULT_TOLERANCE
):
    """
    Forward And Backward Reaching Inverse Kinematics.

    Input: the joint positions p_i, the target t and the bone lengths
    d_i = |p_i+1 - p_i| captured once at entry.
    Output: new joint positions with the same bone lengths.

    If t is further from the root than the sum of the bone lengths the
    chain is stretched straight towards t and returned as is: that path
    does not derive bone rotations, joints keep the rotations they came in
    with. Otherwise each iteration anchors the end effector at t walking
    towards the root (forward reaching) and then re-anchors the root at its
    original position walking towards the end effector (backward reaching).
    """
    work_chain = working_copy(chain)
    bone_lengths = work_chain.bone_lengths()
    root_position = work_chain.root().position
    total_length = sum(bone_lengths)
    if root_position.distance(target_position) > total_length:
        logger.debug(
            "Target %s out of reach (%f), stretching chain", target_position, total_length
        )
        return stretch_towards(work_chain, root_position, target_position, bone_lengths)
    for iteration in range(iterations):
        if work_chain.last().position.distance(target_position) < tolerance:
            logger.debug("FABRIK converged after %d iterations", iteration)
            break
        forward_reaching(work_chain, target_position, bone_lengths)
        backward_reaching(work_chain, root_position, bone_lengths)
    else:
        logger.debug(
            "FABRIK stopped after %d iterations, distance to target %f",
            iterations,
            work_chain.last().position.distance(target_position),
        )
    return calculate_bone_rotations(work_chain)
