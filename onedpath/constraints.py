"""
Acceleration-bound constraints at the four segment endpoints.

Each constraint returns ``error = a² - limit²`` (feasible when error <= 0) and
the gradient of the error with respect to the free variables
(duration0, duration1, vel1). Fixed parameters get no gradient slot.
"""

import warnings
from collections import namedtuple

import numpy as np

from .constants import ACCELERATION_LIMIT, ACTIVE_TOLERANCE, NUM_VARS, NUM_CONSTRAINTS
from .segment import start_acceleration, end_acceleration
from .trajectory import DURATION0, DURATION1, VEL1


ConstraintDescriptor = namedtuple('ConstraintDescriptor', ['index', 'label', 'function'])


def _start_accel_and_dh(dpos, v_start, v_end, h):
    a = start_acceleration(dpos, v_start, v_end, h)
    dA_dh = (dpos * -12.0 / h + 4.0 * v_start + 2.0 * v_end) / h**2
    return a, dA_dh


def _end_accel_and_dh(dpos, v_start, v_end, h):
    a = end_acceleration(dpos, v_start, v_end, h)
    dA_dh = (dpos * 12.0 / h - 2.0 * v_start - 4.0 * v_end) / h**2
    return a, dA_dh


def segment0_start(traj):
    """Acceleration bound at node 0 (start of segment 0)."""
    h = np.float64(traj.duration0)
    a, dA_dh = _start_accel_and_dh(traj.pos1 - traj.pos0, traj.vel0, traj.vel1, h)

    grad = np.zeros(NUM_VARS)
    grad[DURATION0] = 2.0 * a * dA_dh
    grad[VEL1] = a * -4.0 / h  # vel1 is the end velocity: da/dv1 = -2/h
    return a**2 - ACCELERATION_LIMIT**2, grad


def segment0_end(traj):
    """Acceleration bound at node 1, approached from segment 0."""
    h = np.float64(traj.duration0)
    a, dA_dh = _end_accel_and_dh(traj.pos1 - traj.pos0, traj.vel0, traj.vel1, h)

    grad = np.zeros(NUM_VARS)
    grad[DURATION0] = 2.0 * a * dA_dh
    grad[VEL1] = a * 8.0 / h  # da/dv1 = 4/h
    return a**2 - ACCELERATION_LIMIT**2, grad


def segment1_start(traj):
    """Acceleration bound at node 1, leaving into segment 1."""
    h = np.float64(traj.duration1)
    a, dA_dh = _start_accel_and_dh(traj.pos2 - traj.pos1, traj.vel1, traj.vel2, h)

    grad = np.zeros(NUM_VARS)
    grad[DURATION1] = 2.0 * a * dA_dh
    grad[VEL1] = a * -8.0 / h  # vel1 is the start velocity: da/dv1 = -4/h
    return a**2 - ACCELERATION_LIMIT**2, grad


def segment1_end(traj):
    """Acceleration bound at node 2 (end of segment 1)."""
    h = np.float64(traj.duration1)
    a, dA_dh = _end_accel_and_dh(traj.pos2 - traj.pos1, traj.vel1, traj.vel2, h)

    grad = np.zeros(NUM_VARS)
    grad[DURATION1] = 2.0 * a * dA_dh
    grad[VEL1] = a * 4.0 / h  # da/dv1 = 2/h
    return a**2 - ACCELERATION_LIMIT**2, grad


CONSTRAINTS = (
    ConstraintDescriptor(0, 'segment 0 start', segment0_start),
    ConstraintDescriptor(1, 'segment 0 end', segment0_end),
    ConstraintDescriptor(2, 'segment 1 start', segment1_start),
    ConstraintDescriptor(3, 'segment 1 end', segment1_end),
)


def get_constraint(index):
    """Look up a constraint descriptor, raising IndexError when out of range."""
    if not 0 <= index < NUM_CONSTRAINTS:
        raise IndexError(f"constraint index must be in [0, {NUM_CONSTRAINTS - 1}], got {index}")
    return CONSTRAINTS[index]


def evaluate_all(traj):
    """
    Evaluate every constraint.

    Args:
        traj: Trajectory

    Returns:
        (errors, gradients): arrays of shape (4,) and (4, 3)
    """
    if traj.duration0 <= 0 or traj.duration1 <= 0:
        warnings.warn(
            f"non-positive segment duration (duration0={traj.duration0:g}, "
            f"duration1={traj.duration1:g}); accelerations are not meaningful",
            RuntimeWarning,
        )

    errors = np.zeros(NUM_CONSTRAINTS)
    gradients = np.zeros((NUM_CONSTRAINTS, NUM_VARS))
    # A zero duration yields inf/nan entries; the warning above already covers it
    with np.errstate(divide='ignore', invalid='ignore'):
        for c in CONSTRAINTS:
            errors[c.index], gradients[c.index] = c.function(traj)
    return errors, gradients


def select_violated(errors):
    """Indices of constraints with positive error."""
    return [i for i, e in enumerate(errors) if e > 0]


def select_active(errors, tolerance=ACTIVE_TOLERANCE):
    """Indices of constraints that are violated or within tolerance of the bound."""
    return [i for i, e in enumerate(errors) if e > tolerance]
