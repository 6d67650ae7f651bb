from __future__ import annotations

import numpy as np
import numpy.testing as npt
import pandas as pd
import pandas.testing as tm
import pytest

import dimselect.common.exceptions as com
from dimselect.matrix import Matrix
from dimselect.selection import COLUMNS, ROWS


@pytest.mark.parametrize("values", [[1, 2, 3], 1, np.zeros((2, 2, 2))])
def test_values_must_be_two_dimensional(values):
    with pytest.raises(com.MatrixShapeError, match="two-dimensional"):
        Matrix(values)


def test_label_lengths_must_match():
    with pytest.raises(com.MatrixShapeError, match="2 rows but 3 row labels"):
        Matrix([[1], [2]], rownames=["a", "b", "c"])
    with pytest.raises(com.MatrixShapeError, match="1 columns but 2 column labels"):
        Matrix([[1], [2]], colnames=["a", "b"])


def test_labels_are_strings():
    m = Matrix([[1, 2]], rownames=[10], colnames=["a", 2])
    assert m.rownames == ("10",)
    assert m.colnames == ("a", "2")


def test_values_are_copied_and_read_only():
    values = np.arange(4).reshape(2, 2)
    m = Matrix(values)
    values[0, 0] = 99
    assert m.values[0, 0] == 0
    with pytest.raises(ValueError):
        m.values[0, 0] = 1


def test_shape(matrix):
    assert matrix.shape == (4, 5)
    assert matrix.ndim == 2
    assert len(matrix) == 4
    assert matrix.dtype == np.float64


def test_take_columns(matrix):
    result = matrix.take([4, 0, 4], COLUMNS)
    assert result.colnames == ("e", "a", "e")
    assert result.rownames == matrix.rownames
    npt.assert_array_equal(result.values, matrix.values[:, [4, 0, 4]])


def test_take_rows_unlabeled():
    m = Matrix(np.arange(6).reshape(3, 2))
    result = m.take([2, 1], ROWS)
    assert result.rownames is None
    npt.assert_array_equal(result.values, [[4, 5], [2, 3]])


def test_row_and_column_collapse(matrix):
    assert matrix.row(0).shape == (5,)
    assert matrix.column(0).shape == (4,)


def test_equals(matrix):
    same = Matrix(matrix.values, rownames=matrix.rownames, colnames=matrix.colnames)
    assert matrix == same
    assert matrix != Matrix(matrix.values)
    assert matrix != Matrix(matrix.values.astype(np.float32), matrix.rownames, matrix.colnames)
    assert not matrix.equals(matrix.values)


def test_equals_with_nan():
    assert Matrix([[np.nan, 1.0]]) == Matrix([[np.nan, 1.0]])


def test_equals_object_dtype():
    assert Matrix([["a", None]], colnames=["x", "y"]).equals(
        Matrix([["a", None]], colnames=["x", "y"])
    )


def test_unhashable(matrix):
    with pytest.raises(TypeError):
        hash(matrix)


def test_frame_round_trip():
    df = pd.DataFrame({"a": [1.0, 2.0], "b": [3.0, 4.0]}, index=["x", "y"])
    m = Matrix.from_frame(df)
    assert m.rownames == ("x", "y")
    assert m.colnames == ("a", "b")
    tm.assert_frame_equal(m.to_frame(), df, check_index_type=False, check_column_type=False)


def test_from_frame_default_index():
    m = Matrix.from_frame(pd.DataFrame({"a": [1, 2]}))
    assert m.rownames is None
    assert m.colnames == ("a",)


def test_repr(matrix):
    assert repr(matrix).startswith("Matrix[4x5, float64]")
