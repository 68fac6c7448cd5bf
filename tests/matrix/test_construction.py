"""
Tests for Matrix construction, shape properties and element access.
"""

import numpy as np
import pytest

from pylinalg import Matrix, Vector
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    MatrixValidationError,
    StatusCode,
)
from pylinalg.numerical import COMPLEX, REAL


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_rows(self):
        A = Matrix([[1, 2, 3], [4, 5, 6]])
        assert A.rows == 2
        assert A.columns == 3
        assert A.size == 6
        assert A.shape == "(2,3)"
        assert A.orientation == 'row'
        assert A.numerical == REAL
        assert A.to_list() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_row_major_storage(self):
        A = Matrix([[1, 2, 3], [4, 5, 6]])
        np.testing.assert_array_equal(A._data, [1, 2, 3, 4, 5, 6])

    def test_from_numpy(self, rng):
        X = rng.standard_normal((3, 2))
        np.testing.assert_array_equal(Matrix(X).to_numpy(), X)

    def test_from_flat_with_dimensions(self):
        A = Matrix([1, 2, 3, 4, 5, 6], rows=3, columns=2)
        assert A.to_list() == [[1, 2], [3, 4], [5, 6]]

    def test_flat_length_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            Matrix([1, 2, 3], rows=2, columns=2)
        assert exc_info.value.status_code == StatusCode.RESHAPE

    def test_flat_needs_both_dimensions(self):
        with pytest.raises(InvalidArgumentError):
            Matrix([1, 2], rows=1)

    def test_from_row_vectors(self):
        A = Matrix([Vector([1, 2]), Vector([3, 4])])
        assert A.orientation == 'row'
        assert A.to_list() == [[1, 2], [3, 4]]

    def test_from_column_vectors(self):
        A = Matrix([Vector([[1], [3]]), Vector([[2], [4]])])
        assert A.orientation == 'column'
        assert A.to_list() == [[1, 2], [3, 4]]

    def test_mixed_vectors_rejected(self):
        with pytest.raises(MatrixValidationError):
            Matrix([Vector([1, 2]), Vector([[3], [4]])])

    def test_unequal_vectors_rejected(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([Vector([1, 2]), Vector([3])])
        assert exc_info.value.status_code == StatusCode.MATRIX_RAGGED

    def test_complex_inferred(self):
        A = Matrix([[1 + 0j, 2j], [3 + 0j, 4 - 1j]])
        assert A.numerical == COMPLEX
        assert A.get_element(0, 1) == 2j

    def test_mixed_real_and_complex_rejected(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[1, 2j]])
        assert exc_info.value.status_code == StatusCode.MATRIX_NON_NUMERIC
        assert exc_info.value.entry == 1

    def test_mixed_values_with_explicit_complex(self):
        A = Matrix([[1, 2j]], COMPLEX)
        assert A.to_list() == [[1 + 0j, 2j]]

    def test_real_and_complex_vectors_rejected(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([Vector([1, 2]), Vector([1j, 2j])])
        assert exc_info.value.status_code == StatusCode.MATRIX_NON_NUMERIC

    def test_explicit_complex(self):
        A = Matrix([[1, 2]], COMPLEX)
        assert A.numerical == COMPLEX
        assert A.to_numpy().dtype == np.complex128

    def test_copy_constructor_keeps_orientation(self):
        A = Matrix([[1, 2], [3, 4]]).to_column_matrix()
        B = Matrix(A)
        assert B.orientation == 'column'
        assert B == A


class TestConstructionErrors:

    def test_ragged(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[1, 2], [3]])
        assert exc_info.value.status_code == StatusCode.MATRIX_RAGGED
        assert exc_info.value.row == 1

    def test_empty(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([])
        assert exc_info.value.status_code == StatusCode.MATRIX_EMPTY

    def test_empty_rows(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[], []])
        assert exc_info.value.status_code == StatusCode.MATRIX_EMPTY

    @pytest.mark.parametrize("bad", ["a", None, True, [1]])
    def test_non_numeric(self, bad):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[1, 2], [3, bad]])
        assert exc_info.value.status_code == StatusCode.MATRIX_NON_NUMERIC

    def test_non_numeric_reports_row(self):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[1, 2], [3, "x"]])
        assert exc_info.value.row == 1
        assert exc_info.value.entry == "x"

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite(self, bad):
        with pytest.raises(MatrixValidationError) as exc_info:
            Matrix([[1.0, bad]])
        assert exc_info.value.status_code == StatusCode.MATRIX_NON_NUMERIC

    def test_complex_under_explicit_real(self):
        with pytest.raises(MatrixValidationError):
            Matrix([[1, 1j]], REAL)

    def test_flat_rows_rejected(self):
        with pytest.raises(MatrixValidationError):
            Matrix([1, 2, 3])

    def test_not_a_sequence(self):
        with pytest.raises(MatrixValidationError):
            Matrix(42)

    def test_three_dimensional_array(self):
        with pytest.raises(MatrixValidationError):
            Matrix(np.zeros((2, 2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Shape predicates
# ═══════════════════════════════════════════════════════════════════════


class TestShape:

    @pytest.mark.parametrize("rows, columns, square, tall, wide", [
        (2, 2, True, False, False),
        (3, 2, False, True, False),
        (2, 3, False, False, True),
    ])
    def test_exactly_one_holds(self, rows, columns, square, tall, wide):
        A = Matrix.zeros(rows, columns)
        assert (A.is_square, A.is_tall, A.is_wide) == (square, tall, wide)

    def test_vectors_follow_orientation(self):
        A = Matrix([[1, 2, 3], [4, 5, 6]])
        rows = A.vectors
        assert len(rows) == 2
        assert all(v.is_row for v in rows)
        columns = A.to_column_matrix().vectors
        assert len(columns) == 3
        assert columns[0] == Vector([[1], [4]])

    def test_str(self):
        assert str(Matrix([[1, 2], [3, 4]])) == "[1  2]\n[3  4]"

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix([[1.0, 2.0]])"


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_element(self):
        A = Matrix([[1, 2], [3, 4]])
        assert A.get_element(0, 1) == 2.0
        assert A[1, 0] == 3.0
        assert type(A.get_element(0, 0)) is float

    def test_set_element(self):
        A = Matrix([[1, 2], [3, 4]])
        A.set_element(1, 1, 9)
        A[0, 0] = -1
        assert A.to_list() == [[-1, 2], [3, 9]]

    @pytest.mark.parametrize("row, column", [(-1, 0), (0, -1), (2, 0), (0, 2)])
    def test_out_of_bounds(self, row, column):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix([[1, 2], [3, 4]]).get_element(row, column)

    def test_out_of_bounds_attributes(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            Matrix([[1, 2], [3, 4]]).get_element(5, 0)
        assert exc_info.value.row == 5
        assert exc_info.value.shape == "(2,2)"

    @pytest.mark.parametrize("row, column", [(0.0, 0), (0, "1"), (True, 0)])
    def test_non_integer_index(self, row, column):
        with pytest.raises(InvalidArgumentError):
            Matrix([[1, 2], [3, 4]]).get_element(row, column)

    @pytest.mark.parametrize("value", ["x", None, [1], 1j])
    def test_set_element_non_scalar(self, value):
        with pytest.raises(InvalidArgumentError):
            Matrix([[1, 2], [3, 4]]).set_element(0, 0, value)

    def test_bad_position_tuple(self):
        with pytest.raises(InvalidArgumentError):
            Matrix([[1]])[0]

    def test_get_row_and_column(self):
        A = Matrix([[1, 2], [3, 4]])
        assert A.get_row(1) == Vector([3, 4])
        assert A.get_column(0) == Vector([[1], [3]])

    def test_get_row_is_copy(self):
        A = Matrix([[1, 2], [3, 4]])
        row = A.get_row(0)
        row.add_element(5)
        assert A.columns == 2

    def test_get_row_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            Matrix([[1, 2]]).get_row(1)
        with pytest.raises(IndexOutOfBoundsError):
            Matrix([[1, 2]]).get_column(2)
