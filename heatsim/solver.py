"""Implicit heat-diffusion solver state and time stepping."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

from heatsim.csr import CSRMatrix, coefficients_matrix

logger = logging.getLogger(__name__)

_RESET = "\033[0m"
_TITLE = "\033[92m"
_LABEL = "\033[32m"


class SolverError(RuntimeError):
    """Raised when the solver is set up or stepped with invalid state."""


def _matvec(matrix: CSRMatrix, vector: np.ndarray) -> np.ndarray:
    counts = np.diff(matrix.row_ptr)
    rows = np.repeat(np.arange(matrix.n_rows), counts)
    products = matrix.values.astype(np.float64) * vector[matrix.col_ind]
    return np.bincount(rows, weights=products, minlength=matrix.n_rows)


@dataclass
class Solver:
    """State of a square-grid heat simulation."""

    width: int
    height: int
    dx: float
    dy: float
    dt: float
    alpha: float
    rx: float
    ry: float
    u_current: Optional[np.ndarray]
    A: CSRMatrix
    u_next: np.ndarray = field(repr=False)
    b: np.ndarray = field(repr=False)
    time_step: int = 0

    @property
    def size(self) -> int:
        return self.width * self.height

    def _require_state(self) -> np.ndarray:
        if self.u_current is None:
            raise SolverError("initial state (u_curr) is NULL.")
        return self.u_current

    def update(self) -> None:
        """Compute the right-hand side vector ``b`` for the current state.

        ``b`` is ``(2I - A) u``, the explicit half of the implicit step; the
        current state itself is left as it is.
        """
        state = self._require_state()
        rhs = 2.0 * state.astype(np.float64) - _matvec(self.A, state.astype(np.float64))
        self.b = rhs.astype(np.float32)

    def run(self, steps: int) -> list[np.ndarray]:
        """Advance until ``time_step`` reaches ``steps``, returning every frame.

        The first frame is the state before stepping; one more frame follows
        each step taken.
        """
        frames = [self._require_state().copy()]
        while self.time_step < steps:
            logger.info("Step %d", self.time_step)
            self.update()
            self.time_step += 1
            frames.append(self._require_state().copy())
        return frames

    def describe(self) -> str:
        """Render the solver settings as coloured text."""
        return (
            f"{_TITLE}\nSolver settings:\n{_RESET}"
            f"{_LABEL}\tWidth: {_RESET}{self.width}\n"
            f"{_LABEL}\tHeight: {_RESET}{self.height}\n"
            f"{_LABEL}\tdx: {_RESET}{self.dx:.2f}\n"
            f"{_LABEL}\tdy: {_RESET}{self.dy:.2f}\n"
            f"{_LABEL}\trx: {_RESET}{self.rx:.2f}\n"
            f"{_LABEL}\try: {_RESET}{self.ry:.2f}\n"
            f"{_LABEL}\tdt: {_RESET}{self.dt:.2f}\n"
            f"{_LABEL}\talpha: {_RESET}{self.alpha:.2f}\n\n"
        )


def setup_solver(
    width: int,
    height: int,
    dx: float,
    dy: float,
    dt: float,
    alpha: float,
    u_current: Union[np.ndarray, Sequence[float], None],
) -> Solver:
    """Create a solver for a ``width`` x ``height`` grid starting from ``u_current``.

    Square cells are assumed, so both diffusion numbers come from ``dx``.
    """
    if width < 0 or height < 0:
        raise SolverError(f"invalid grid size {width} x {height}")
    size = width * height

    state: Optional[np.ndarray] = None
    if u_current is not None:
        state = np.array(u_current, dtype=np.float32).reshape(-1)
        if state.size != size:
            raise SolverError(
                f"initial state has {state.size} values, expected {size}"
            )

    rx = (alpha * dt) / (dx * dx)
    ry = rx
    if rx + ry > 1.0:
        warnings.warn(
            f"rx + ry = {rx + ry:.2f} > 1.0 — numerical oscillations may arise.",
            RuntimeWarning,
            stacklevel=2,
        )

    return Solver(
        width=width,
        height=height,
        dx=dx,
        dy=dy,
        dt=dt,
        alpha=alpha,
        rx=rx,
        ry=ry,
        u_current=state,
        A=coefficients_matrix(rx, width, height),
        u_next=np.zeros(size, dtype=np.float32),
        b=np.zeros(size, dtype=np.float32),
    )