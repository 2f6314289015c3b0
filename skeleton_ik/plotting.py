import matplotlib.pyplot as plt
import numpy as np
from pytransform3d.plot_utils import make_3d_axis


def chain_points(chain):
    return np.array([joint.position.to_array() for joint in chain])


def plot_target(ax, target):
    ax.scatter([target.x], [target.y], [target.z], marker="x", color="r")
    return ax


def plot_chain(chain, ax=None, target=None, label=None, ax_s=1.0):
    """
    Draws the joints and bones of `chain`, and `target` when given, on a
    3D matplotlib axis. Returns the axis.
    """
    if ax is None:
        ax = make_3d_axis(ax_s)
    points = chain_points(chain)
    ax.plot(points[:, 0], points[:, 1], points[:, 2], "o-", label=label)
    if target is not None:
        plot_target(ax, target)
    return ax


def display(chains, target=None):
    points = np.concatenate([chain_points(chain) for chain in chains])
    ax = make_3d_axis(max(float(np.abs(points).max()), 1.0))
    for index, chain in enumerate(chains):
        plot_chain(chain, ax=ax, label=f"chain {index}")
    if target is not None:
        plot_target(ax, target)
    ax.legend()
    plt.show()
    return ax
