"""Command-line entry point: load a heatmap and run the diffusion simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from heatsim.pgm import PgmError, load_heatmap, normalise
from heatsim.solver import SolverError, setup_solver

N_STEPS = 10
DX = 1.0
DY = 1.0
DT = 0.2
ALPHA = 1.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation on the heatmap file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Main arguments error")
        return 1

    path = args[0]
    try:
        heatmap = load_heatmap(path)
    except PgmError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"\nLoaded {path} -> {heatmap.width} x {heatmap.height} image")

    try:
        solver = setup_solver(
            heatmap.width, heatmap.height, DX, DY, DT, ALPHA, normalise(heatmap.pixels)
        )
    except SolverError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(solver.describe(), end="")

    for step in range(N_STEPS):
        print(f"Step {step}")
    solver.run(N_STEPS)
    return 0


if __name__ == "__main__":
    sys.exit(main())