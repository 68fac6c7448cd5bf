"""
Tests for RealNumerical and scalar-type inference.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import StatusCode, TypeMismatchError
from pylinalg.core.protocols import Numerical
from pylinalg.numerical import (
    COMPLEX,
    REAL,
    ComplexNumerical,
    RealNumerical,
    common_numerical,
    numerical_for,
    numerical_for_dtype,
)


# ═══════════════════════════════════════════════════════════════════════
# Field operations
# ═══════════════════════════════════════════════════════════════════════


class TestRealArithmetic:

    def test_satisfies_protocol(self):
        assert isinstance(REAL, Numerical)

    def test_identities(self):
        assert REAL.zero_value == 0.0
        assert REAL.one_value == 1.0
        assert REAL.dtype == np.float64

    def test_operations(self):
        assert REAL.add(2.0, 3.0) == 5.0
        assert REAL.subtract(2.0, 3.0) == -1.0
        assert REAL.multiply(2.0, 3.0) == 6.0
        assert REAL.divide(3.0, 2.0) == 1.5
        assert REAL.sqrt(9.0) == 3.0

    def test_elementwise_on_arrays(self):
        x = np.array([1.0, 4.0, 9.0])
        np.testing.assert_array_equal(REAL.add(x, 1.0), [2.0, 5.0, 10.0])
        np.testing.assert_array_equal(REAL.sqrt(x), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(REAL.abs(-x), x)

    def test_conjugate_is_identity(self):
        assert REAL.conjugate(-2.5) == -2.5

    def test_conversions(self):
        assert REAL.from_integral(3) == 3.0
        assert REAL.to_integral(np.float64(2.5)) == 2.5
        assert type(REAL.to_integral(np.float64(2.5))) is float

    @pytest.mark.parametrize("x, sign", [(-3.0, -1), (0.0, 0), (2.0, 1)])
    def test_sign_operator(self, x, sign):
        assert REAL.sign_operator(x) == sign

    def test_operations_do_not_mutate(self):
        x = np.array([1.0, 2.0])
        REAL.multiply(x, 3.0)
        np.testing.assert_array_equal(x, [1.0, 2.0])

    def test_to_string(self):
        assert REAL.to_string(2.0) == "2"
        assert REAL.to_string(0.5) == "0.5"


class TestRealIsScalar:

    @pytest.mark.parametrize("value", [1, 1.5, np.float64(2.0), np.int32(3)])
    def test_accepts(self, value):
        assert REAL.is_scalar(value)

    @pytest.mark.parametrize("value", [True, 1 + 1j, "1", None, [1.0]])
    def test_rejects(self, value):
        assert not REAL.is_scalar(value)


class TestEquality:

    def test_instances_equal(self):
        assert RealNumerical() == REAL
        assert ComplexNumerical() == COMPLEX
        assert REAL != COMPLEX

    def test_hashable(self):
        assert len({RealNumerical(), RealNumerical(), COMPLEX}) == 2


# ═══════════════════════════════════════════════════════════════════════
# Inference
# ═══════════════════════════════════════════════════════════════════════


class TestInference:

    def test_all_real(self):
        assert numerical_for([1, 2.5, np.float64(3)]) == REAL

    def test_empty_is_real(self):
        assert numerical_for([]) == REAL

    def test_any_complex_promotes(self):
        assert numerical_for([1.0, 2 + 1j]) == COMPLEX

    def test_numpy_complex(self):
        assert numerical_for([np.complex128(1 + 0j)]) == COMPLEX

    @pytest.mark.parametrize("value", ["a", None, True, object()])
    def test_unsupported(self, value):
        with pytest.raises(TypeMismatchError) as exc_info:
            numerical_for([1.0, value])
        assert exc_info.value.status_code == StatusCode.UNSUPPORTED_SCALAR

    def test_dtype(self):
        assert numerical_for_dtype(np.dtype(np.float64)) == REAL
        assert numerical_for_dtype(np.dtype(np.int64)) == REAL
        assert numerical_for_dtype(np.dtype(np.complex128)) == COMPLEX

    def test_dtype_unsupported(self):
        with pytest.raises(TypeMismatchError):
            numerical_for_dtype(np.dtype(object))

    def test_common_numerical(self):
        assert common_numerical(REAL, REAL) == REAL
        assert common_numerical(REAL, COMPLEX) == COMPLEX
        assert common_numerical(COMPLEX) == COMPLEX
