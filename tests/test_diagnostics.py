"""Tests for the text reports."""

import numpy as np

from onedpath import Trajectory, format_constraints, format_state


class TestFormatConstraints:
    """Tests for the per-constraint report."""

    def setup_method(self) -> None:
        self.errors = np.array([1.5, -2.0, 0.0, 3.0])
        self.gradients = np.array([
            [1.0, 0.0, -2.0],
            [0.5, 0.0, 4.0],
            [0.0, -1.0, 2.0],
            [0.0, 2.0, 0.25],
        ])

    def test_flags_violated(self) -> None:
        lines = format_constraints(self.errors, self.gradients).splitlines()
        assert len(lines) == 4
        assert [line[:3] for line in lines] == ["*0:", " 1:", " 2:", "*3:"]

    def test_line_layout(self) -> None:
        lines = format_constraints(self.errors, self.gradients).splitlines()
        assert lines[0] == "*0: 1 0 -2 | 1.5"
        assert lines[3] == "*3: 0 2 0.25 | 3"

    def test_multipliers(self) -> None:
        multipliers = np.array([0.5, 0.0, 0.0, 0.125])
        lines = format_constraints(self.errors, self.gradients, multipliers).splitlines()
        assert lines[0] == "*0: 1 0 -2 | 1.5 x 0.5"
        assert lines[1].endswith("| -2 x 0")

    def test_without_flags(self) -> None:
        lines = format_constraints(self.errors, self.gradients, flag_violated=False).splitlines()
        assert [line[:3] for line in lines] == [" 0:", " 1:", " 2:", " 3:"]
        assert lines[0] == " 0: 1 0 -2 | 1.5"


class TestFormatState:
    """Tests for the full state report."""

    def test_contains_nodes_and_durations(self, baseline: Trajectory) -> None:
        report = format_state(baseline)
        assert "Node 0: pos=0 vel=0" in report
        assert "Node 1: pos=200 vel=0" in report
        assert "Node 2: pos=400 vel=0" in report
        assert "Duration 0: 3.4641" in report
        assert "Duration 1: 3.4641" in report
        assert "Constraints:" in report

    def test_feasible_state_has_no_flags(self, feasible: Trajectory) -> None:
        report = format_state(feasible)
        assert "*" not in report
