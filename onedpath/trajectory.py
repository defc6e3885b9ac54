"""
Trajectory state: three free variables and five fixed boundary parameters.
"""

import numpy as np

from .constants import (
    NUM_VARS,
    BASELINE_POSITIONS,
    BASELINE_VELOCITIES,
    BASELINE_DURATION,
)
from .segment import HermiteSegment

# Positions of the free variables in the flat vector view
DURATION0 = 0
DURATION1 = 1
VEL1 = 2

FREE_VARIABLE_NAMES = ('duration0', 'duration1', 'vel1')
FIXED_PARAMETER_NAMES = ('pos0', 'vel0', 'pos1', 'pos2', 'vel2')


class Trajectory:
    """
    Two cubic segments through nodes 0, 1, 2.

    The solver only moves ``duration0``, ``duration1`` and ``vel1``. The node
    positions and the outer velocities are constants for the optimization,
    although a driver may edit them directly (``pos1`` in particular).
    """

    def __init__(self, duration0, duration1, vel1,
                 pos0=0.0, vel0=0.0, pos1=0.0, pos2=0.0, vel2=0.0):
        self.duration0 = float(duration0)
        self.duration1 = float(duration1)
        self.vel1 = float(vel1)

        self.pos0 = float(pos0)
        self.vel0 = float(vel0)
        self.pos1 = float(pos1)
        self.pos2 = float(pos2)
        self.vel2 = float(vel2)

    @property
    def free_vars(self) -> np.ndarray:
        """Free variables as a (3,) vector: (duration0, duration1, vel1)."""
        return np.array([self.duration0, self.duration1, self.vel1], dtype=float)

    @free_vars.setter
    def free_vars(self, values):
        x = np.asarray(values, dtype=float)
        if x.shape != (NUM_VARS,):
            raise ValueError(f"free_vars must have shape ({NUM_VARS},), got {x.shape}")
        self.duration0 = float(x[DURATION0])
        self.duration1 = float(x[DURATION1])
        self.vel1 = float(x[VEL1])

    def step(self, dx):
        """Add a step to the free variables in place."""
        self.free_vars = self.free_vars + np.asarray(dx, dtype=float)

    @property
    def total_duration(self) -> float:
        return self.duration0 + self.duration1

    def segments(self):
        """Return the (segment 0, segment 1) pair as HermiteSegment objects."""
        seg0 = HermiteSegment(self.pos0, self.vel0, self.pos1, self.vel1, self.duration0)
        seg1 = HermiteSegment(self.pos1, self.vel1, self.pos2, self.vel2, self.duration1)
        return seg0, seg1

    def copy(self):
        return Trajectory(
            self.duration0, self.duration1, self.vel1,
            pos0=self.pos0, vel0=self.vel0, pos1=self.pos1,
            pos2=self.pos2, vel2=self.vel2,
        )

    def as_dict(self):
        names = FREE_VARIABLE_NAMES + FIXED_PARAMETER_NAMES
        return {name: getattr(self, name) for name in names}

    def __eq__(self, other):
        if not isinstance(other, Trajectory):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        fields = ", ".join(f"{k}={v:g}" for k, v in self.as_dict().items())
        return f"Trajectory({fields})"


def init_trajectory():
    """
    Build the baseline trajectory.

    Positions 0/200/400, zero velocities and equal durations of 3.4641, which
    puts every endpoint acceleration on the limit.
    """
    p0, p1, p2 = BASELINE_POSITIONS
    v0, v1, v2 = BASELINE_VELOCITIES
    return Trajectory(
        BASELINE_DURATION, BASELINE_DURATION, v1,
        pos0=p0, vel0=v0, pos1=p1, pos2=p2, vel2=v2,
    )
