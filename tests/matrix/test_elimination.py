"""
Tests for Gaussian and Gauss-Jordan elimination, solve, invert and rank.
"""

import warnings

import numpy as np
import pytest

from pylinalg import Matrix, Vector
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    NotSquareError,
    SingularSystemError,
    StatusCode,
)


# ═══════════════════════════════════════════════════════════════════════
# Echelon forms
# ═══════════════════════════════════════════════════════════════════════


class TestGaussianElimination:

    def test_echelon_form_is_upper_triangular(self, square_matrix):
        E = square_matrix.gaussian_elimination()
        assert E.is_upper_triangular()
        assert E.shape == square_matrix.shape

    def test_partial_pivoting(self):
        E = Matrix([[1, 2], [3, 4]]).gaussian_elimination()
        # Row with the larger leading entry becomes the pivot row
        assert E.get_row(0) == Vector([3, 4])
        assert E.get_element(1, 0) == 0.0

    def test_input_unchanged(self):
        A = Matrix([[1, 2], [3, 4]])
        A.gaussian_elimination()
        assert A.to_list() == [[1, 2], [3, 4]]

    def test_zero_column_skipped(self):
        E = Matrix([[0, 1, 2], [0, 3, 4]]).gaussian_elimination()
        assert E.get_element(1, 1) == 0.0
        assert E.get_element(0, 1) == 3.0

    def test_solve(self):
        augmented = Matrix([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]])
        x = augmented.gaussian_elimination(solve=True)
        np.testing.assert_allclose(x.to_numpy(), [2, 3, -1], atol=1e-12)
        assert x.is_row

    def test_solve_matches_numpy(self, rng, square_matrix):
        b = rng.standard_normal(4)
        augmented = square_matrix.augment(Vector(b))
        x = augmented.gaussian_elimination(solve=True)
        np.testing.assert_allclose(x.to_numpy(), np.linalg.solve(square_matrix.to_numpy(), b), rtol=1e-10)

    def test_solve_singular(self):
        with pytest.raises(SingularSystemError) as exc_info:
            Matrix([[1, 2, 3], [2, 4, 6]]).gaussian_elimination(solve=True)
        assert exc_info.value.status_code == StatusCode.SINGULAR
        assert exc_info.value.pivot_index == 1

    def test_solve_inconsistent(self):
        with pytest.raises(SingularSystemError) as exc_info:
            Matrix([[1, 2, 3], [2, 4, 7]]).gaussian_elimination(solve=True)
        assert exc_info.value.status_code == StatusCode.UNSOLVABLE

    def test_solve_single_column(self):
        with pytest.raises(SingularSystemError):
            Matrix([[1], [2]]).gaussian_elimination(solve=True)

    def test_consistent_overdetermined(self):
        augmented = Matrix([[1, 0, 1], [0, 1, 2], [1, 1, 3]])
        x = augmented.gaussian_elimination(solve=True)
        np.testing.assert_allclose(x.to_numpy(), [1, 2], atol=1e-12)

    def test_ill_conditioned_warns(self):
        augmented = Matrix([[1, 0, 1], [0, 1e-11, 1e-11]])
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            augmented.gaussian_elimination(solve=True)

    def test_well_conditioned_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Matrix([[2, 0, 2], [0, 1, 3]]).gaussian_elimination(solve=True)

    def test_small_multipliers_still_eliminated(self):
        E = Matrix([[1e6, 0], [1e-7, 1]]).gaussian_elimination()
        assert E.is_upper_triangular()
        assert E.get_element(1, 0) == 0.0
        assert E.get_element(1, 1) == pytest.approx(1.0)

    def test_inconsistent_with_small_multiplier(self):
        with pytest.raises(SingularSystemError) as exc_info:
            Matrix([[1e6, 1e6, 1], [1e-7, 1e-7, 5]]).gaussian_elimination(solve=True)
        assert exc_info.value.status_code == StatusCode.UNSOLVABLE
        assert exc_info.value.pivot_index == 1


class TestGaussJordan:

    def test_reduced_form(self):
        R = Matrix([[2, 4], [1, 3]]).gauss_jordan()
        assert R.is_identity()

    def test_reduced_form_rank_deficient(self):
        R = Matrix([[1, 2, 3], [2, 4, 6], [1, 0, 1]]).gauss_jordan()
        expected = Matrix([[1, 0, 1], [0, 1, 1], [0, 0, 0]])
        assert R.equal(expected)

    def test_solve(self):
        augmented = Matrix([[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]])
        x = augmented.gauss_jordan(solve=True)
        np.testing.assert_allclose(x.to_numpy(), [2, 3, -1], atol=1e-12)

    def test_complex_solve(self):
        A = np.array([[1 + 1j, 2], [3, 4 - 1j]])
        b = np.array([1, 1j])
        augmented = Matrix(np.column_stack([A, b]))
        x = augmented.gauss_jordan(solve=True)
        np.testing.assert_allclose(x.to_numpy(), np.linalg.solve(A, b), rtol=1e-10)

    def test_solve_singular(self):
        with pytest.raises(SingularSystemError):
            Matrix([[1, 1, 1], [1, 1, 2]]).gauss_jordan(solve=True)


# ═══════════════════════════════════════════════════════════════════════
# solve / invert / rank
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_solve(self, rng, square_matrix):
        b = rng.standard_normal(4)
        x = square_matrix.solve(b)
        np.testing.assert_allclose(x.to_numpy(), np.linalg.solve(square_matrix.to_numpy(), b), rtol=1e-10)

    def test_residual(self, rng, square_matrix):
        b = rng.standard_normal(4)
        x = square_matrix.solve(Vector(b))
        residual = square_matrix.multiply_vector(x).to_numpy() - b
        assert np.max(np.abs(residual)) < 1e-10

    def test_rhs_length(self):
        with pytest.raises(DimensionMismatchError):
            Matrix([[1, 0], [0, 1]]).solve([1, 2, 3])

    def test_singular(self):
        with pytest.raises(SingularSystemError):
            Matrix([[1, 2], [2, 4]]).solve([1, 2])


class TestInvert:

    def test_matches_numpy(self, square_matrix):
        np.testing.assert_allclose(
            square_matrix.invert().to_numpy(), np.linalg.inv(square_matrix.to_numpy()), rtol=1e-10
        )

    def test_product_is_identity(self, complex_matrix):
        product = complex_matrix.naive_multiply(complex_matrix.invert())
        assert product.is_identity(threshold=1e-10)

    def test_singular(self):
        with pytest.raises(SingularSystemError) as exc_info:
            Matrix([[1, 2], [2, 4]]).invert()
        assert exc_info.value.status_code == StatusCode.SINGULAR

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix([[1, 2]]).invert()


class TestRank:

    @pytest.mark.parametrize("entries, expected", [
        ([[1, 0], [0, 1]], 2),
        ([[1, 2], [2, 4]], 1),
        ([[0, 0], [0, 0]], 0),
        ([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 2),
        ([[1, 2, 3, 4]], 1),
        ([[1e6, 1e6], [1e-7, 1e-7]], 1),
    ])
    def test_rank(self, entries, expected):
        assert Matrix(entries).rank() == expected

    def test_matches_numpy(self, tall_matrix):
        assert tall_matrix.rank() == np.linalg.matrix_rank(tall_matrix.to_numpy())


# ═══════════════════════════════════════════════════════════════════════
# Warning location
# ═══════════════════════════════════════════════════════════════════════


class TestIllConditionedWarningLocation:
    """The RuntimeWarning is attributed to the caller's line, not to pylinalg."""

    NEARLY_SINGULAR = [[1, 0], [0, 1e-11]]

    def test_gaussian_elimination(self):
        augmented = Matrix([[1, 0, 1], [0, 1e-11, 1e-11]])
        with pytest.warns(RuntimeWarning) as record:
            augmented.gaussian_elimination(solve=True)
        assert record[0].filename == __file__

    def test_gauss_jordan(self):
        augmented = Matrix([[1, 0, 1], [0, 1e-11, 1e-11]])
        with pytest.warns(RuntimeWarning) as record:
            augmented.gauss_jordan(solve=True)
        assert record[0].filename == __file__

    def test_solve(self):
        with pytest.warns(RuntimeWarning) as record:
            x = Matrix(self.NEARLY_SINGULAR).solve([1, 1e-11])
        assert record[0].filename == __file__
        np.testing.assert_allclose(x.to_numpy(), [1, 1], rtol=1e-6)

    def test_invert(self):
        with pytest.warns(RuntimeWarning) as record:
            Matrix(self.NEARLY_SINGULAR).invert()
        assert record[0].filename == __file__

    def test_cond(self):
        with pytest.warns(RuntimeWarning) as record:
            Matrix(self.NEARLY_SINGULAR).cond()
        assert record[0].filename == __file__
