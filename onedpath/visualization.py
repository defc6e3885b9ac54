"""
Visualization functions for two-segment paths.
"""

import matplotlib.pyplot as plt

from .constants import ACCELERATION_LIMIT
from .constraints import evaluate_all

SEGMENT_COLORS = ('#E74C3C', '#3498DB')  # (red, blue)


def plot_trajectory(ax, traj, n_samples=33):
    """
    Plot position against time for both segments.

    Args:
        ax: matplotlib axes
        traj: Trajectory
        n_samples: Samples per segment
    """
    offset = 0.0
    for i, seg in enumerate(traj.segments()):
        ts, ps = seg.sample(n_samples)
        ax.plot(ts + offset, ps, color=SEGMENT_COLORS[i], lw=2.0, label=f'Segment {i}')
        offset += seg.h

    # Node 1 guide lines
    ax.axvline(traj.duration0, color='0.6', lw=0.8, ls='--')
    ax.axhline(traj.pos1, color='0.6', lw=0.8, ls='--')

    ax.plot([0.0, traj.duration0, traj.total_duration],
            [traj.pos0, traj.pos1, traj.pos2], 'ko', ms=4)
    ax.set_xlim(0.0, traj.total_duration)
    ax.set_xlabel('Time')
    ax.set_ylabel('Position')
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8, loc='upper left')


def plot_acceleration(ax, traj):
    """
    Plot the piecewise-linear acceleration with the ±limit band.

    Endpoints that violate the bound are marked with a red ring.

    Args:
        ax: matplotlib axes
        traj: Trajectory
    """
    errors, _ = evaluate_all(traj)

    offset = 0.0
    for i, seg in enumerate(traj.segments()):
        a_start, a_end = seg.boundary_accelerations()
        ts = (offset, offset + seg.h)
        ax.plot(ts, (a_start, a_end), color=SEGMENT_COLORS[i], lw=2.0, label=f'Segment {i}')

        for t, a, err in zip(ts, (a_start, a_end), errors[2*i:2*i+2]):
            if err > 0:
                ax.plot(t, a, 'o', mfc='none', mec='red', ms=9, mew=1.5)
        offset += seg.h

    ax.axhline(0.0, color='0.6', lw=0.8)
    ax.axhline(ACCELERATION_LIMIT, color='0.3', lw=0.8, ls=':')
    ax.axhline(-ACCELERATION_LIMIT, color='0.3', lw=0.8, ls=':')
    ax.axvline(traj.duration0, color='0.6', lw=0.8, ls='--')

    ax.set_xlim(0.0, traj.total_duration)
    ax.set_ylim(-2.0 * ACCELERATION_LIMIT, 2.0 * ACCELERATION_LIMIT)
    ax.set_xlabel('Time')
    ax.set_ylabel('Acceleration')
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8, loc='upper right')


def create_path_figure(traj):
    """
    Create a 2-row figure: trajectory on top, acceleration below.

    Returns:
        (fig, (ax_pos, ax_acc))
    """
    fig, (ax_pos, ax_acc) = plt.subplots(2, 1, figsize=(8, 8), constrained_layout=True)
    draw_path_figure((ax_pos, ax_acc), traj)
    return fig, (ax_pos, ax_acc)


def draw_path_figure(axes, traj):
    """Clear and redraw both panels for the current trajectory."""
    ax_pos, ax_acc = axes
    ax_pos.clear()
    ax_acc.clear()
    plot_trajectory(ax_pos, traj)
    plot_acceleration(ax_acc, traj)
    ax_pos.set_title(f'Total time: {traj.total_duration:.4f}', fontsize=10)
