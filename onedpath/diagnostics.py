"""
Plain-text reports of constraint and trajectory state.
"""

from .constraints import evaluate_all


def format_vector(values):
    return " ".join(f"{v:g}" for v in values)


def format_constraints(errors, gradients, multipliers=None, flag_violated=True):
    """
    One line per constraint: gradient components, then the error.

    Violated constraints (error > 0) are flagged with '*'. When multipliers
    are given, each line also shows ``x <multiplier>``. With
    ``flag_violated=False`` every line gets a plain index column.

    Args:
        errors: (4,) constraint errors
        gradients: (4, 3) constraint gradients
        multipliers: Optional (4,) multipliers (0 for unselected constraints)
        flag_violated: Prefix violated constraints with '*'

    Returns:
        str: the report, newline separated
    """
    lines = []
    for i, (err, grad) in enumerate(zip(errors, gradients)):
        flag = '*' if flag_violated and err > 0 else ' '
        line = f"{flag}{i}: {format_vector(grad)} | {err:g}"
        if multipliers is not None:
            line += f" x {multipliers[i]:g}"
        lines.append(line)
    return "\n".join(lines)


def format_state(traj):
    """Node states, durations and the constraint report for a trajectory."""
    errors, gradients = evaluate_all(traj)
    lines = [
        f"Node 0: pos={traj.pos0:g} vel={traj.vel0:g}",
        f"Node 1: pos={traj.pos1:g} vel={traj.vel1:g}",
        f"Node 2: pos={traj.pos2:g} vel={traj.vel2:g}",
        f"Duration 0: {traj.duration0:g}",
        f"Duration 1: {traj.duration1:g}",
        "Constraints:",
        format_constraints(errors, gradients),
    ]
    return "\n".join(lines)
