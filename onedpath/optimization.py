"""
Single-step repair and improvement moves on a trajectory.

All three moves mutate the trajectory's free variables in place and return
None. Repeated improvement comes from calling them repeatedly.
"""

import numpy as np

from .constants import (
    ACTIVE_TOLERANCE,
    NORMALIZATION_FLOOR,
    NUM_CONSTRAINTS,
    OBJECTIVE_DIRECTION,
)
from .constraints import evaluate_all, get_constraint, select_active, select_violated
from .diagnostics import format_constraints, format_vector
from .linalg import solve_multipliers


def move_toward_feasibility(traj, verbose=False):
    """
    Take one Gauss-Newton-like step onto the violated constraints' boundary.

    With g the Jacobian of the violated constraints and e their errors, the
    multipliers m solve (g gᵀ) m = e and the step is dX = -gᵀ m, which cancels
    all violations to first order. No-op when nothing is violated.

    Args:
        traj: Trajectory, modified in place
        verbose: Print the constraint table and the step
    """
    errors, gradients = evaluate_all(traj)
    violated = select_violated(errors)

    multipliers = np.zeros(NUM_CONSTRAINTS)
    dX = np.zeros(gradients.shape[1])

    if violated:
        g = gradients[violated]
        m = solve_multipliers(g, errors[violated])
        dX = g.T @ -m
        multipliers[violated] = m

    if verbose:
        print("\nConstraints:")
        print(format_constraints(errors, gradients, multipliers, flag_violated=False))
        print(f"   {format_vector(dX)}")

    traj.step(dX)


def move_in_constrained_gradient_dir(traj, verbose=False):
    """
    Step along the objective direction with active constraints projected out.

    Active constraints (error > ACTIVE_TOLERANCE) are kept from growing to
    first order: x solves (g gᵀ) x = -g·obj and obj += gᵀ x. The result is
    divided by max(NORMALIZATION_FLOOR, ‖obj‖) before being applied.

    Args:
        traj: Trajectory, modified in place
        verbose: Print directional derivatives, multipliers and the final direction
    """
    obj = np.array(OBJECTIVE_DIRECTION, dtype=float)

    errors, gradients = evaluate_all(traj)

    if verbose:
        print()
        for i, (err, grad) in enumerate(zip(errors, gradients)):
            print(f"Constraint {i}: dot={grad @ obj:g}, err={err:g}")

    active = select_active(errors, ACTIVE_TOLERANCE)

    if active:
        g = gradients[active]
        x = solve_multipliers(g, -(g @ obj))

        obj += g.T @ x
        d = np.linalg.norm(obj)

        if verbose:
            lm = np.zeros(NUM_CONSTRAINTS)
            lm[active] = x
            print("Constraints:")
            for i, row in zip(active, g):
                print(f"{i:2d}: {format_vector(row)}")
            print(f"Constraint multipliers: {format_vector(lm)}")
            print(f"Constraint scale: {d:g}")

        obj /= max(NORMALIZATION_FLOOR, d)

    if verbose:
        print(f"Constrained objective dir: {format_vector(obj)}")

    traj.step(obj)


def fixup_constraint(traj, constraint_index):
    """
    Push one constraint back to its bound, ignoring all others.

    Steps along the negative gradient by error / ‖gradient‖², which zeroes the
    constraint's first-order error. No-op when the constraint is satisfied or
    its gradient vanishes.

    Args:
        traj: Trajectory, modified in place
        constraint_index: 0..3
    """
    constraint = get_constraint(constraint_index)
    error, grad = constraint.function(traj)

    if error <= 0.0:
        return

    d = grad @ grad
    if d == 0.0:
        return

    u = error / d
    traj.step(-grad * u)
