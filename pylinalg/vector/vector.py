"""
Vector: a row or column vector over a generic scalar field.

A flat sequence builds a row vector, a sequence of one-element sequences
builds a column vector. Orientation is never stored separately from the
data: it is recomputed from the input on construction and after every
mutation.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg._ops import dot as _dot
from pylinalg.core.compute.linalg._ops import norm as _norm
from pylinalg.core.compute.linalg._ops import to_python
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    InvalidElementError,
    LinearDependenceError,
    StatusCode,
    VectorValidationError,
)
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA
from pylinalg.core.validation import check_index, check_instance, check_scalar
from pylinalg.numerical import COMPLEX, common_numerical, numerical_for


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


def _check_element(value: Any, numerical: Numerical | None, index: int | None = None) -> None:
    acceptable = numerical.is_scalar(value) if numerical is not None else COMPLEX.is_scalar(value)
    if not acceptable:
        where = f" at index {index}" if index is not None else ""
        raise InvalidElementError(
            f"Vector element{where} must be a numeric scalar, "
            f"got {type(value).__name__} {value!r}",
            element=value,
        )
    if not np.isfinite(value):
        raise InvalidElementError(f"Vector element must be finite, got {value!r}", element=value)


def _classify(elements: Sequence[Any]) -> tuple[list[Any], bool]:
    """Split caller input into flat values and a row/column flag."""
    if not elements:
        return [], True

    nested = [_is_sequence(entry) for entry in elements]
    if all(nested):
        values = []
        for i, entry in enumerate(elements):
            if len(entry) != 1:
                raise VectorValidationError(
                    f"Column vector entry {i} must hold exactly one element, got {len(entry)}",
                    index=i,
                    entry=entry,
                    status_code=StatusCode.VECTOR_DIMENSION,
                )
            if _is_sequence(entry[0]):
                raise VectorValidationError(
                    f"Column vector entry {i} is nested more than one level deep",
                    index=i,
                    entry=entry,
                )
            values.append(entry[0])
        return values, False

    if any(nested):
        i = nested.index(True) if not nested[0] else nested.index(False)
        raise VectorValidationError(
            f"Vector mixes scalars and sequences (first mismatch at index {i}); "
            f"use a flat sequence for a row vector or one-element sequences for a column vector",
            index=i,
            entry=elements[i],
        )
    return list(elements), True


class Vector:
    """
    Row or column vector.

    Args:
        elements: Flat sequence (row vector), sequence of one-element
            sequences (column vector), or a 1-D / (n x 1) numpy array
        numerical: Scalar implementation; inferred from the values when None

    Raises:
        VectorValidationError: If the input is not a sequence, mixes
            scalars and sequences, or has column entries of length != 1
        InvalidElementError: If a value is not a finite numeric scalar

    Examples:
        >>> Vector([1, 2, 3]).shape
        '(1,3)'
        >>> Vector([[1], [2], [3]]).shape
        '(3,1)'
    """

    __hash__ = None

    def __init__(self, elements: Any, numerical: Numerical | None = None):
        if isinstance(elements, Vector):
            numerical = numerical or elements.numerical
            elements = elements.elements
        if isinstance(elements, np.ndarray):
            if elements.ndim == 0 or elements.ndim > 2 or (elements.ndim == 2 and elements.shape[1] != 1):
                raise VectorValidationError(
                    f"Array of shape {elements.shape} is neither a 1-D row nor an (n x 1) column",
                    entry=elements.shape,
                    status_code=StatusCode.VECTOR_DIMENSION,
                )
            elements = elements.tolist()
        if not isinstance(elements, (list, tuple)):
            raise VectorValidationError(
                f"Vector elements must be a sequence, got {type(elements).__name__}",
                entry=elements,
            )

        values, is_row = _classify(elements)
        for i, value in enumerate(values):
            _check_element(value, numerical, i)

        self._numerical: Numerical = numerical if numerical is not None else numerical_for(values)
        self._data: NDArray[Any] = np.array(values, dtype=self._numerical.dtype)
        self._is_row = is_row

    @classmethod
    def _from_array(cls, data: NDArray[Any], numerical: Numerical, is_row: bool) -> Vector:
        vector = cls.__new__(cls)
        vector._numerical = numerical
        vector._data = np.array(data, dtype=numerical.dtype).reshape(-1)
        vector._is_row = is_row
        return vector

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def numerical(self) -> Numerical:
        return self._numerical

    @property
    def is_row(self) -> bool:
        return self._is_row

    @property
    def is_column(self) -> bool:
        return not self._is_row

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    @property
    def rows(self) -> int:
        return 1 if self._is_row else self.size

    @property
    def columns(self) -> int:
        return self.size if self._is_row else 1

    @property
    def shape(self) -> str:
        return f"({self.rows},{self.columns})"

    @property
    def elements(self) -> list[Any]:
        """Flat list for a row vector, list of one-element lists for a column."""
        values = [to_python(x) for x in self._data]
        if self._is_row:
            return values
        return [[x] for x in values]

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the values as a 1-D array."""
        return self._data.copy()

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return (to_python(x) for x in self._data)

    def __getitem__(self, index: int) -> Any:
        index = check_index(index, self.size, 'index', shape=self.shape)
        return to_python(self._data[index])

    def __repr__(self) -> str:
        return f"Vector({self.elements!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_element(self, value: Any) -> None:
        """
        Append one value in place.

        Row vectors take a scalar. Column vectors take a scalar or a
        one-element sequence. An empty vector takes either and becomes a
        column vector when given a one-element sequence.

        Raises:
            InvalidElementError: If the value does not fit the orientation
        """
        if _is_sequence(value):
            if self._is_row and self.size > 0:
                raise InvalidElementError(
                    f"Row vector elements must be scalars, got {type(value).__name__} {value!r}",
                    element=value,
                )
            if len(value) != 1 or _is_sequence(value[0]):
                raise InvalidElementError(
                    f"Column vector elements must be one-element sequences, got {value!r}",
                    element=value,
                )
            if self.size == 0:
                self._is_row = False
            value = value[0]

        _check_element(value, self._numerical)
        self._data = np.append(self._data, np.array([value], dtype=self._numerical.dtype))

    def add_elements(self, values: Any) -> None:
        """
        Append several values in place, in input order.

        A plain scalar is treated as a one-value batch.
        """
        if not _is_sequence(values):
            values = [values]
        for value in values:
            self.add_element(value)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def _check_conformable(self, other: Any, operation: str, same_orientation: bool = True) -> None:
        check_instance(other, Vector, 'other', StatusCode.NOT_A_VECTOR)
        mismatch = self.shape != other.shape if same_orientation else self.size != other.size
        if mismatch:
            raise DimensionMismatchError(
                f"Invalid dimensions for {operation}: {self.shape} vs {other.shape}",
                expected=self.shape,
                actual=other.shape,
                status_code=StatusCode.VECTOR_DIMENSION,
            )

    def add(self, other: Vector) -> Vector:
        self._check_conformable(other, 'vector addition')
        numerical = common_numerical(self._numerical, other.numerical)
        return Vector._from_array(numerical.add(self._data, other._data), numerical, self._is_row)

    def subtract(self, other: Vector) -> Vector:
        self._check_conformable(other, 'vector subtraction')
        numerical = common_numerical(self._numerical, other.numerical)
        return Vector._from_array(numerical.subtract(self._data, other._data), numerical, self._is_row)

    def scale(self, scalar: Any) -> Vector:
        check_scalar(scalar, COMPLEX, 'scalar')
        numerical = common_numerical(self._numerical, numerical_for([scalar]))
        return Vector._from_array(numerical.multiply(self._data, scalar), numerical, self._is_row)

    def dot(self, other: Vector) -> Any:
        """
        Inner product sum(conj(self_i) * other_i).

        Orientation is ignored; only the sizes must agree.
        """
        self._check_conformable(other, 'dot product', same_orientation=False)
        numerical = common_numerical(self._numerical, other.numerical)
        return to_python(_dot(self._data, other._data, numerical))

    def norm(self) -> float:
        """Euclidean norm."""
        return _norm(self._data, self._numerical)

    def normalize(self) -> Vector:
        """
        Unit vector in the same direction.

        Raises:
            LinearDependenceError: If the vector is (numerically) zero
        """
        length = self.norm()
        if length < DELTA:
            raise LinearDependenceError(
                f"Cannot normalize a zero vector (norm {length:.3e} < {DELTA:g})",
                norm=length,
                threshold=DELTA,
                status_code=StatusCode.ZERO_VECTOR,
            )
        scaled = self._numerical.divide(self._data, self._numerical.from_integral(length))
        return Vector._from_array(scaled, self._numerical, self._is_row)

    def transpose(self) -> Vector:
        """Same values, opposite orientation."""
        return Vector._from_array(self._data, self._numerical, not self._is_row)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self._is_row != other._is_row or self.size != other.size:
            return False
        numerical = common_numerical(self._numerical, other.numerical)
        difference = numerical.subtract(self._data, other._data)
        return bool(np.all(numerical.abs(difference) < DELTA))
