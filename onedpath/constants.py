"""
Limits, tolerances and baseline values for the one-dimensional path solver.
"""

# Acceleration bound shared by all four segment-endpoint constraints
ACCELERATION_LIMIT = 100.0

# Constraints with error above this are "active" for gradient projection
ACTIVE_TOLERANCE = -1.0e-4

# Floor on the norm used to rescale the projected direction
NORMALIZATION_FLOOR = 1.0 / 1024.0

# Unconstrained improvement direction over (duration0, duration1, vel1):
# shrink both durations equally
OBJECTIVE_DIRECTION = (-0.707107, -0.707107, 0.0)

NUM_VARS = 3
NUM_CONSTRAINTS = 4

# Baseline trajectory (sits on the acceleration limit: 200 * 6 / 3.4641² ≈ 100)
BASELINE_POSITIONS = (0.0, 200.0, 400.0)
BASELINE_VELOCITIES = (0.0, 0.0, 0.0)
BASELINE_DURATION = 3.4641

# Manual edit step sizes used by the interactive session
DURATION_STEP = 0.1
VELOCITY_STEP = 1.0
POSITION_STEP = 10.0

# Relative singular-value cutoff for the least-squares multiplier solves
LSTSQ_RCOND = 1.0e-10
