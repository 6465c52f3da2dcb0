# heatsim

`heatsim` sets up an implicit two-dimensional heat diffusion problem. It
starts from a grayscale heatmap. A text file gives the image size and then
one integer intensity per pixel. Each intensity is scaled to the range
`[0, 1]` and used as the starting temperature field.

The implicit scheme uses a sparse five-point stencil. Its coefficient
matrix is stored in compressed sparse row (CSR) form.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The heatmap file is plain text. It holds whitespace-separated integers:

```
4 4
  0  64 128 255
 32  96 160 224
 16  80 144 208
  8  72 136 200
```

The first two numbers are the width and the height. Exactly
`width * height` pixel values follow them, and any tokens after the last
pixel are ignored. A file that cannot be opened, lacks the size, or holds
too few or non-integer pixels raises `heatsim.pgm.PgmError`. Only square
heatmaps suit the simulation, because the grid spacing is the same in both
directions.

## Command line

```
heatsim heatmap.txt
```

The command does the following:

- loads the heatmap and prints its size;
- sets up the solver with `dx = dy = 1`, `dt = 0.2` and `alpha = 1.0`;
- prints the solver settings, with terminal colour codes;
- prints `Step 0` to `Step 9` and runs ten steps.

If the argument count is wrong or the file cannot be read, the command
writes an error to standard error and exits with status 1.

## Library use

```python
from heatsim.pgm import load_heatmap, normalise
from heatsim.solver import setup_solver

heatmap = load_heatmap("heatmap.txt")      # Heatmap(width, height, pixels)
field = normalise(heatmap.pixels)          # float32 values in [0, 1]

solver = setup_solver(heatmap.width, heatmap.height, 1.0, 1.0, 0.2, 1.0, field)
print(solver.describe())

frames = solver.run(10)
```

`parse_heatmap(text)` does the same parsing as `load_heatmap` but works on
a string.

`setup_solver` raises `heatsim.solver.SolverError` for a negative grid size
or an initial state with the wrong number of values. `Solver.update()`
computes the right-hand side vector `solver.b = (2I - A) u` from the current
state. `Solver.run(steps)` calls `update()` until `time_step` reaches
`steps` and returns a list of frames: the state before stepping, then one
more frame per step taken. Both raise `SolverError` if the solver has no
initial state.

The sparse system can also be built and inspected on its own:

```python
from heatsim.csr import coefficients_matrix

matrix = coefficients_matrix(0.2, 3, 3)
print(matrix.describe(10))      # first 10 entries of row_ptr, col_ind, values
cols, vals = matrix.row(4)      # stored entries of one row
dense = matrix.to_dense()
```

Each row holds the diagonal `1 + 2 * rx` first, then `-rx / 2` for the
left, right, upper and lower neighbours that lie inside the grid.

## Stability

The diffusion number `r = alpha * dt / dx**2` is used for both axes. When
`rx + ry` exceeds 1.0, `setup_solver` issues a `RuntimeWarning` that
numerical oscillations may appear.

## Limitations

- The linear system `A u_next = b` is built but never solved. A step
  computes `b` and leaves the temperature field unchanged, so every frame
  returned by `run` equals the initial state.
- Frames are returned in memory only. Nothing writes them back out as
  images or files, and the command line discards them.