from skeleton_ik.ccd_solver import DEFAULT_ITERATIONS, DEFAULT_TOLERANCE, solve_ccd
from skeleton_ik.fabrik_solver import solve_fabrik

ALGORITHMS = {
    "ccd": solve_ccd,
    "fabrik": solve_fabrik,
}


def solve_single_joint(joint, target_position):
    """
    A lone joint needs no IK, it is simply moved onto the target.
    """
    return joint.moved_to(target_position)


class IKSolver(object):
    """
    Holds the iteration budget, tolerance and default algorithm applied to
    every solve. Carries no chain state between calls.
    """

    def __init__(
        self,
        algorithm="fabrik",
        iterations=DEFAULT_ITERATIONS,
        tolerance=DEFAULT_TOLERANCE,
    ):
        algorithm = algorithm.lower()
        if algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm '{algorithm}', expected one of {sorted(ALGORITHMS)}"
            )
        if iterations < 0:
            raise ValueError(f"Iterations must be non negative, got {iterations}")
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non negative, got {tolerance}")
        self.algorithm = algorithm
        self.iterations = iterations
        self.tolerance = tolerance

    def solve_ccd(self, chain, target_position):
        return solve_ccd(chain, target_position, self.iterations, self.tolerance)

    def solve_fabrik(self, chain, target_position):
        return solve_fabrik(chain, target_position, self.iterations, self.tolerance)

    def solve(self, chain, target_position, algorithm=None):
        algorithm = (algorithm or self.algorithm).lower()
        if algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm '{algorithm}', expected one of {sorted(ALGORITHMS)}"
            )
        return ALGORITHMS[algorithm](
            chain, target_position, self.iterations, self.tolerance
        )

    def solve_single_joint(self, joint, target_position):
        return solve_single_joint(joint, target_position)

    def __repr__(self):
        return f"{self}"

    def __str__(self):
        return (
            f"IKSolver[ Algorithm: {self.algorithm}, Iterations: {self.iterations}, "
            f"Tolerance: {self.tolerance} ]"
        )
