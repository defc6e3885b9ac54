"""
Cubic Hermite segment evaluated through its Bézier form.

A segment from (p0, v0) to (p1, v1) over duration h is the cubic Bézier with
control points p0, p0 + v0*h/3, p1 - v1*h/3, p1. Derivatives come from the
derivative matrix D applied to the control points, then scaled by 1/h per order.
"""

import numpy as np
from scipy.special import comb
from typing import Union


def get_D_matrix(N):
    """
    Derivative matrix for a Bézier curve of degree N.

    [D]_i,j = N × { -1 if j=i, 1 if j=i+1, 0 otherwise }

    Returns:
        D: (N, N+1) matrix
    """
    D = np.zeros((N, N+1))
    for i in range(N):
        D[i, i] = -N
        D[i, i+1] = N
    return D


def start_acceleration(dpos, v_start, v_end, h):
    """Acceleration at the start of a cubic segment."""
    return (dpos * 6.0 / h - 4.0 * v_start - 2.0 * v_end) / h


def end_acceleration(dpos, v_start, v_end, h):
    """Acceleration at the end of a cubic segment."""
    return (dpos * -6.0 / h + 2.0 * v_start + 4.0 * v_end) / h


def _bernstein_eval(ctrl, tau):
    N = len(ctrl) - 1
    out = np.zeros_like(tau)
    for i in range(N + 1):
        out += comb(N, i) * (tau ** i) * ((1 - tau) ** (N - i)) * ctrl[i]
    return out


class HermiteSegment:
    """
    One cubic segment of the path, parameterized by time t in [0, h]
    (or [h, 0] when h is not positive).
    """

    def __init__(self, p0, v0, p1, v1, h):
        self.p0 = float(p0)
        self.v0 = float(v0)
        self.p1 = float(p1)
        self.v1 = float(v1)
        self.h = float(h)

        self.control_points = np.array([
            self.p0,
            self.p0 + self.v0 * self.h / 3.0,
            self.p1 - self.v1 * self.h / 3.0,
            self.p1,
        ])
        # Velocity (degree 2) and acceleration (degree 1) control points in tau
        self._vel_ctrl = get_D_matrix(3) @ self.control_points
        self._acc_ctrl = get_D_matrix(2) @ self._vel_ctrl

    def _to_tau(self, t):
        t = np.atleast_1d(np.asarray(t, dtype=float))
        # A non-positive duration is allowed; the segment then runs backward in t
        lo, hi = min(0.0, self.h), max(0.0, self.h)
        eps = 1e-12 * max(1.0, abs(self.h))
        if np.any((t < lo - eps) | (t > hi + eps)):
            raise ValueError(f"t must lie in [{lo:g}, {hi:g}]")
        return t / self.h

    @staticmethod
    def _unwrap(t, values):
        if np.ndim(t) == 0:
            return float(values[0])
        return values

    def position(self, t: Union[float, np.ndarray]):
        tau = self._to_tau(t)
        return self._unwrap(t, _bernstein_eval(self.control_points, tau))

    def velocity(self, t: Union[float, np.ndarray]):
        tau = self._to_tau(t)
        return self._unwrap(t, _bernstein_eval(self._vel_ctrl, tau) / self.h)

    def acceleration(self, t: Union[float, np.ndarray]):
        tau = self._to_tau(t)
        return self._unwrap(t, _bernstein_eval(self._acc_ctrl, tau) / self.h ** 2)

    def boundary_accelerations(self):
        """Closed-form (a_start, a_end); acceleration is linear in between."""
        dpos = self.p1 - self.p0
        return (start_acceleration(dpos, self.v0, self.v1, self.h),
                end_acceleration(dpos, self.v0, self.v1, self.h))

    def sample(self, n_samples=33):
        """Evenly spaced (times, positions) over the segment."""
        ts = np.linspace(0.0, self.h, n_samples)
        return ts, self.position(ts)
