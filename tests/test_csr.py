import numpy as np
import pytest

from heatsim.csr import CSRMatrix, coefficients_matrix


@pytest.mark.parametrize("width, height", [(1, 1), (3, 3), (4, 2), (5, 7)])
def test_row_pointer_invariants(width, height):
    matrix = coefficients_matrix(0.2, width, height)
    assert matrix.n_rows == width * height
    assert matrix.row_ptr[0] == 0
    assert matrix.row_ptr[-1] == len(matrix.values) == len(matrix.col_ind)
    assert np.all(np.diff(matrix.row_ptr) >= 1)
    assert np.all(np.diff(matrix.row_ptr) <= 5)


def test_zero_rx_gives_identity():
    matrix = coefficients_matrix(0.0, 4, 3)
    assert np.array_equal(np.abs(matrix.to_dense()), np.eye(12, dtype=np.float32))


def test_dense_is_symmetric():
    dense = coefficients_matrix(0.35, 4, 5).to_dense()
    assert np.array_equal(dense, dense.T)


def test_diagonal_first_and_uniform():
    matrix = coefficients_matrix(0.2, 3, 3)
    diagonals = [matrix.row(r)[1][0] for r in range(matrix.n_rows)]
    firsts = [matrix.row(r)[0][0] for r in range(matrix.n_rows)]
    assert firsts == list(range(9))
    assert len(set(diagonals)) == 1
    assert np.array_equal(np.diag(matrix.to_dense()), np.array(diagonals))


def test_off_diagonals_equal_and_negative():
    matrix = coefficients_matrix(0.2, 3, 3)
    off = [v for r in range(matrix.n_rows) for v in matrix.row(r)[1][1:]]
    assert all(v < 0 for v in off)
    assert len(set(off)) == 1


def test_interior_and_corner_row_sizes():
    matrix = coefficients_matrix(0.2, 3, 3)
    assert len(matrix.row(4)[0]) == 5
    assert len(matrix.row(0)[0]) == 3


def test_neighbour_order():
    width = 4
    matrix = coefficients_matrix(0.2, width, 3)
    k = 1 + 1 * width
    cols, _ = matrix.row(k)
    assert cols.tolist() == [k, k - 1, k + 1, k - width, k + width]


def test_interior_rows_conserve_heat():
    matrix = coefficients_matrix(0.3, 5, 5)
    sums = matrix.to_dense() @ np.ones(25, dtype=np.float32)
    interior = sums.reshape(5, 5)[1:-1, 1:-1]
    assert np.allclose(interior, 1.0)


def test_row_out_of_range():
    matrix = coefficients_matrix(0.2, 2, 2)
    with pytest.raises(IndexError):
        matrix.row(4)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        coefficients_matrix(0.2, -1, 3)


def test_describe_format():
    matrix = CSRMatrix(
        row_ptr=np.array([0, 1, 2], dtype=np.int32),
        col_ind=np.array([0, 1], dtype=np.int32),
        values=np.array([1.0, 0.5], dtype=np.float32),
    )
    text = matrix.describe(2)
    assert text == "row_ptr: 0 1 \ncol_ind: 0 1 \nvalues: 1.0000 0.5000 \n"


def test_describe_truncates():
    matrix = coefficients_matrix(0.2, 3, 3)
    lines = matrix.describe(4).splitlines()
    assert [line.split(":")[0] for line in lines] == ["row_ptr", "col_ind", "values"]
    assert all(len(line.split(":")[1].split()) == 4 for line in lines)