"""Pytest fixtures for onedpath tests."""

import matplotlib
matplotlib.use("Agg")

import pytest

from onedpath import Trajectory, init_trajectory


@pytest.fixture
def baseline() -> Trajectory:
    """Baseline trajectory, every endpoint acceleration on the limit."""
    return init_trajectory()


@pytest.fixture
def feasible() -> Trajectory:
    """Longer durations: |a| = 75 at every endpoint."""
    return Trajectory(4.0, 4.0, 0.0, pos0=0.0, vel0=0.0, pos1=200.0, pos2=400.0, vel2=0.0)


@pytest.fixture
def one_violated() -> Trajectory:
    """Only constraint 0 is violated (a ≈ 104.1 at node 0)."""
    return Trajectory(3.3, 4.0, 10.0, pos0=0.0, vel0=0.0, pos1=200.0, pos2=400.0, vel2=0.0)


@pytest.fixture
def mildly_violated() -> Trajectory:
    """Only constraint 0 is violated, by about one percent in acceleration."""
    return Trajectory(3.35, 4.0, 10.0, pos0=0.0, vel0=0.0, pos1=200.0, pos2=400.0, vel2=0.0)
