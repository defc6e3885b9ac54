"""
One-Dimensional Path Explorer

Drives the onedpath solvers on the baseline two-segment trajectory, either as a
batch of repeated steps or in an interactive matplotlib window.

Usage:
    Run 20 constrained-gradient steps and print the final state:
        python OneD_Path_Explorer.py --steps 20 --mode gradient

    Raise node 1 and restore feasibility, printing every step:
        python OneD_Path_Explorer.py --pos1 260 --mode feasibility --steps 5 --verbose

    Save a figure of the result:
        python OneD_Path_Explorer.py --steps 10 --plot

    Interactive window:
        python OneD_Path_Explorer.py --interactive

Interactive keys:
    space        move toward feasibility
    z            constrained gradient step (shorten total time)
    1-4          fix up a single constraint
    home / end   duration 0 up / down
    pageup/down  duration 1 up / down
    left/right   node 1 velocity down / up
    up/down      node 1 position up / down
    i            reset to baseline
    s            print state
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from onedpath import (
    Session,
    create_path_figure,
    draw_path_figure,
    format_state,
)

parser = argparse.ArgumentParser(
    description='Two-segment acceleration-bounded path explorer',
    formatter_class=argparse.RawDescriptionHelpFormatter
)
parser.add_argument('--steps', type=int, default=0,
                    help='Number of solver steps to run (default: 0)')
parser.add_argument('--mode', choices=['feasibility', 'gradient', 'fixup'], default='gradient',
                    help='Solver move to repeat (default: gradient)')
parser.add_argument('--constraint', type=int, choices=range(4), default=0,
                    help='Constraint index for --mode fixup (0-3)')
parser.add_argument('--pos1', type=float, default=None,
                    help='Override the position of node 1 before solving')
parser.add_argument('--verbose', action='store_true',
                    help='Print solver diagnostics for every step')
parser.add_argument('--plot', action='store_true',
                    help='Save a figure of the final trajectory')
parser.add_argument('--interactive', action='store_true',
                    help='Open an interactive window driven by key presses')
args = parser.parse_args()

session = Session(verbose=args.verbose)
if args.pos1 is not None:
    session.trajectory.pos1 = args.pos1

for step in range(args.steps):
    if args.mode == 'feasibility':
        session.feasibility_step()
    elif args.mode == 'gradient':
        session.gradient_step()
    else:
        session.fixup(args.constraint)

print("=" * 60)
print(f"Mode: {args.mode}, steps: {args.steps}")
print("=" * 60)
print(format_state(session.trajectory))

if args.plot:
    FIGURE_DIR = Path(__file__).parent / "figure" / "figures"
    FIGURE_DIR.mkdir(parents=True, exist_ok=True)
    fig, _ = create_path_figure(session.trajectory)
    out_path = FIGURE_DIR / "onedpath.png"
    fig.savefig(out_path, dpi=150)
    print(f"\nFigure saved: {out_path}")

if args.interactive:
    # Default matplotlib bindings would swallow some of the keys
    for name in ('keymap.home', 'keymap.back', 'keymap.forward', 'keymap.save',
                 'keymap.zoom', 'keymap.pan', 'keymap.yscale', 'keymap.xscale'):
        plt.rcParams[name] = []

    fig, axes = create_path_figure(session.trajectory)

    def on_key(event):
        if session.handle_key(event.key):
            draw_path_figure(axes, session.trajectory)
            fig.canvas.draw_idle()

    fig.canvas.mpl_connect('key_press_event', on_key)
    plt.show()
