"""Sparse matrices in compressed-sparse-row form for the implicit heat step."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class CSRMatrix:
    """A square sparse matrix in CSR layout."""

    row_ptr: np.ndarray
    col_ind: np.ndarray
    values: np.ndarray

    @property
    def n_rows(self) -> int:
        return len(self.row_ptr) - 1

    def row(self, index: int) -> tuple[np.ndarray, np.ndarray]:
        """Return the column indices and values stored for one row."""
        if not 0 <= index < self.n_rows:
            raise IndexError(f"row {index} out of range for {self.n_rows} rows")
        start, stop = self.row_ptr[index], self.row_ptr[index + 1]
        return self.col_ind[start:stop], self.values[start:stop]

    def to_dense(self) -> np.ndarray:
        """Expand into a dense square array."""
        dense = np.zeros((self.n_rows, self.n_rows), dtype=self.values.dtype)
        for r in range(self.n_rows):
            cols, vals = self.row(r)
            dense[r, cols] = vals
        return dense

    def describe(self, n: int) -> str:
        """Render the first ``n`` entries of each array, one array per line."""
        row_ptr = "".join(f"{v} " for v in self.row_ptr[:n])
        col_ind = "".join(f"{v} " for v in self.col_ind[:n])
        values = "".join(f"{v:.4f} " for v in self.values[:n])
        return f"row_ptr: {row_ptr}\ncol_ind: {col_ind}\nvalues: {values}\n"


def coefficients_matrix(rx: float, width: int, height: int) -> CSRMatrix:
    """Build the five-point implicit diffusion matrix for a ``width`` x ``height`` grid.

    Each row holds the diagonal first, then the left, right, upper and lower
    neighbours that exist inside the grid.
    """
    if width < 0 or height < 0:
        raise ValueError(f"invalid grid size {width} x {height}")

    diagonal = 1.0 + 2.0 * rx
    off = -rx / 2.0
    row_ptr = [0]
    col_ind: list[int] = []
    values: list[float] = []

    for j in range(height):
        for i in range(width):
            k = i + j * width
            neighbours = [(k, diagonal)]
            if i > 0:
                neighbours.append((k - 1, off))
            if i < width - 1:
                neighbours.append((k + 1, off))
            if j > 0:
                neighbours.append((k - width, off))
            if j < height - 1:
                neighbours.append((k + width, off))
            for col, value in neighbours:
                col_ind.append(col)
                values.append(value)
            row_ptr.append(len(col_ind))

    return CSRMatrix(
        row_ptr=np.array(row_ptr, dtype=np.int32),
        col_ind=np.array(col_ind, dtype=np.int32),
        values=np.array(values, dtype=np.float32),
    )