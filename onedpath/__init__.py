"""
One-Dimensional Path Repair

This package keeps a two-segment, one-dimensional motion profile within an
acceleration bound. The free variables (both segment durations and the middle
node's velocity) are moved by single-step solvers: a least-squares projection
toward feasibility, a constrained gradient step that shortens the total time,
and a one-constraint fixup.
"""

from .trajectory import Trajectory, init_trajectory, DURATION0, DURATION1, VEL1
from .segment import HermiteSegment, start_acceleration, end_acceleration
from .constraints import (
    CONSTRAINTS,
    ConstraintDescriptor,
    evaluate_all,
    get_constraint,
    select_violated,
    select_active,
)
from .linalg import solve_least_squares, solve_multipliers
from .optimization import (
    move_toward_feasibility,
    move_in_constrained_gradient_dir,
    fixup_constraint,
)
from .diagnostics import format_constraints, format_state
from .session import Session
from .visualization import (
    plot_trajectory,
    plot_acceleration,
    create_path_figure,
    draw_path_figure,
)
from . import constants

__all__ = [
    # Trajectory state
    'Trajectory',
    'init_trajectory',
    'DURATION0',
    'DURATION1',
    'VEL1',

    # Segment evaluation
    'HermiteSegment',
    'start_acceleration',
    'end_acceleration',

    # Constraints
    'CONSTRAINTS',
    'ConstraintDescriptor',
    'evaluate_all',
    'get_constraint',
    'select_violated',
    'select_active',

    # Linear algebra
    'solve_least_squares',
    'solve_multipliers',

    # Solver moves
    'move_toward_feasibility',
    'move_in_constrained_gradient_dir',
    'fixup_constraint',

    # Diagnostics
    'format_constraints',
    'format_state',

    # Session
    'Session',

    # Visualization functions
    'plot_trajectory',
    'plot_acceleration',
    'create_path_figure',
    'draw_path_figure',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
