"""
Interactive session: owns one trajectory and maps key presses to edits and solver moves.
"""

from .constants import DURATION_STEP, VELOCITY_STEP, POSITION_STEP
from .diagnostics import format_state
from .optimization import (
    move_toward_feasibility,
    move_in_constrained_gradient_dir,
    fixup_constraint,
)
from .trajectory import init_trajectory


class Session:
    """
    Holds the trajectory being edited.

    Key names follow matplotlib's ``key_press_event`` naming ('left',
    'pageup', ' ' ...), so a figure can forward its events directly.
    """

    def __init__(self, trajectory=None, verbose=False):
        self.trajectory = trajectory if trajectory is not None else init_trajectory()
        self.verbose = verbose

        self._commands = {
            ' ': self.feasibility_step,
            'space': self.feasibility_step,
            'z': self.gradient_step,
            '1': lambda: self.fixup(0),
            '2': lambda: self.fixup(1),
            '3': lambda: self.fixup(2),
            '4': lambda: self.fixup(3),
            'end': lambda: self._nudge('duration0', -DURATION_STEP),
            'home': lambda: self._nudge('duration0', DURATION_STEP),
            'pagedown': lambda: self._nudge('duration1', -DURATION_STEP),
            'pageup': lambda: self._nudge('duration1', DURATION_STEP),
            'left': lambda: self._nudge('vel1', -VELOCITY_STEP),
            'right': lambda: self._nudge('vel1', VELOCITY_STEP),
            'up': lambda: self._nudge('pos1', POSITION_STEP),
            'down': lambda: self._nudge('pos1', -POSITION_STEP),
            'i': self.reset,
        }

    def _nudge(self, field, delta):
        setattr(self.trajectory, field, getattr(self.trajectory, field) + delta)

    def reset(self):
        """Replace the trajectory with the baseline."""
        self.trajectory = init_trajectory()

    def feasibility_step(self):
        move_toward_feasibility(self.trajectory, verbose=self.verbose)

    def gradient_step(self):
        move_in_constrained_gradient_dir(self.trajectory, verbose=self.verbose)

    def fixup(self, constraint_index):
        fixup_constraint(self.trajectory, constraint_index)

    def print_state(self):
        print()
        print(format_state(self.trajectory))

    def handle_key(self, key):
        """
        Apply the command bound to ``key``.

        Returns:
            bool: True if the trajectory may have changed (caller should redraw)
        """
        if key is None:
            return False
        key = key if key == ' ' else key.lower()

        if key == 's':
            self.print_state()
            return False

        command = self._commands.get(key)
        if command is None:
            return False
        command()
        return True
