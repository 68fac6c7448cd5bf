"""
Matrix: a dense rows x columns matrix over a generic scalar field.

Storage is one contiguous row-major buffer; element (i, j) lives at
index i * columns + j. A matrix also carries an orientation, "row" or
"column", recording whether it presents itself as a stack of row
vectors or of column vectors. Orientation is a view choice only; the
buffer layout never changes with it.

Design principles:
    - Validation happens once, eagerly, in __init__
    - Every arithmetic operation returns a new Matrix
    - Only the documented in-place helpers mutate the buffer
    - Errors carry the offending index, shape or value
"""

from __future__ import annotations

from typing import Any, Literal, Sequence
import warnings

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg import (
    back_substitution as _back_substitution,
    forward_substitution as _forward_substitution,
    gauss_jordan as _gauss_jordan,
    gaussian_elimination as _gaussian_elimination,
    gram_schmidt as _gram_schmidt,
    invert_square,
    lu_decomposition as _lu_decomposition,
    naive_multiply as _naive_multiply,
    qr_decomposition as _qr_decomposition,
    row_echelon,
    strassen_multiply as _strassen_multiply,
)
from pylinalg.core.compute.linalg._ops import (
    is_lower_triangular as _is_lower_triangular,
    is_upper_triangular as _is_upper_triangular,
    norm as _norm,
    to_python,
    total,
)
from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    MatrixValidationError,
    NotTriangularError,
    OrientationError,
    SingularSystemError,
    StatusCode,
)
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA
from pylinalg.core.validation import (
    check_finite,
    check_index,
    check_instance,
    check_integer,
    check_length,
    check_non_negative_int,
    check_positive_int,
    check_same_shape,
    check_scalar,
    check_square,
)
from pylinalg.matrix.solution import LUResult, QRResult
from pylinalg.numerical import COMPLEX, common_numerical, numerical_for
from pylinalg.vector import Vector

Orientation = Literal['row', 'column']


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


def _flatten_rows(entries: Sequence[Any]) -> tuple[list[Any], int, int]:
    """Validate a sequence of row sequences and flatten it row-major."""
    if len(entries) == 0:
        raise MatrixValidationError(
            "Matrix must have at least one row",
            status_code=StatusCode.MATRIX_EMPTY,
        )
    for i, row in enumerate(entries):
        if not _is_sequence(row):
            raise MatrixValidationError(
                f"Row {i} is not a sequence (got {type(row).__name__}); "
                f"a matrix is built from a sequence of rows",
                status_code=StatusCode.MATRIX_RAGGED,
                row=i,
                entry=row,
            )

    columns = len(entries[0])
    if columns == 0:
        raise MatrixValidationError(
            "Matrix rows must not be empty",
            status_code=StatusCode.MATRIX_EMPTY,
            row=0,
        )
    for i, row in enumerate(entries):
        if len(row) != columns:
            raise MatrixValidationError(
                f"Row {i} has {len(row)} entries, expected {columns} (ragged rows)",
                status_code=StatusCode.MATRIX_RAGGED,
                row=i,
                entry=row,
            )

    values = [value for row in entries for value in row]
    return values, len(entries), columns


def _reject_mixed_scalars(values: list[Any], columns: int) -> None:
    """Entries of an inferred complex matrix must all be complex."""
    for k, value in enumerate(values):
        if not isinstance(value, (complex, np.complexfloating)):
            raise MatrixValidationError(
                f"Entry ({k // columns}, {k % columns}) is real but other entries are complex; "
                f"pass numerical=COMPLEX to build a complex matrix from mixed values",
                status_code=StatusCode.MATRIX_NON_NUMERIC,
                row=k // columns,
                entry=value,
            )


def _to_buffer(values: list[Any], columns: int, numerical: Numerical | None) -> tuple[NDArray[Any], Numerical]:
    """Check every value is a finite scalar of one type and build the buffer."""
    for k, value in enumerate(values):
        acceptable = numerical.is_scalar(value) if numerical is not None else COMPLEX.is_scalar(value)
        if not acceptable:
            expected = type(numerical).__name__ if numerical is not None else 'real or complex'
            raise MatrixValidationError(
                f"Entry ({k // columns}, {k % columns}) is not a {expected} scalar: "
                f"{type(value).__name__} {value!r}",
                status_code=StatusCode.MATRIX_NON_NUMERIC,
                row=k // columns,
                entry=value,
            )
    if numerical is None:
        numerical = numerical_for(values)
        if numerical == COMPLEX:
            _reject_mixed_scalars(values, columns)
    data = np.array(values, dtype=numerical.dtype)
    check_finite(data, 'entries')
    return data, numerical


class Matrix:
    """
    Dense matrix over real or complex scalars.

    Args:
        entries: One of
            - a sequence of row sequences
            - a sequence of Vectors: all rows stack as rows, all columns
              stack as columns (orientation "column")
            - a 2-D numpy array
            - a flat sequence, together with `rows` and `columns`
        numerical: Scalar implementation; inferred from the values when None
        rows, columns: Dimensions for flat input

    Raises:
        MatrixValidationError: Empty, ragged or non-numeric entries, or a
            mix of real and complex values when numerical is not given
        DimensionMismatchError: Flat input whose length != rows * columns

    Examples:
        >>> A = Matrix([[1, 2], [3, 4]])
        >>> A.shape
        '(2,2)'
        >>> A.get_element(1, 0)
        3.0
    """

    __hash__ = None

    def __init__(
        self,
        entries: Any,
        numerical: Numerical | None = None,
        *,
        rows: int | None = None,
        columns: int | None = None,
    ):
        orientation: Orientation = 'row'

        if isinstance(entries, Matrix):
            numerical = numerical or entries.numerical
            orientation = entries.orientation
            entries = entries.to_list()
        if isinstance(entries, np.ndarray):
            if entries.ndim != 2 and (rows is None or columns is None):
                raise MatrixValidationError(
                    f"Expected a 2-D array, got {entries.ndim}-D with shape {entries.shape}",
                    status_code=StatusCode.MATRIX_RAGGED,
                )
            entries = entries.tolist()
        if not isinstance(entries, (list, tuple)):
            raise MatrixValidationError(
                f"Matrix entries must be a sequence, got {type(entries).__name__}",
                status_code=StatusCode.MATRIX_NON_NUMERIC,
                entry=entries,
            )

        if rows is not None or columns is not None:
            if rows is None or columns is None:
                raise InvalidArgumentError(
                    "Flat construction needs both rows and columns",
                    name='rows' if rows is None else 'columns',
                )
            rows = check_positive_int(rows, 'rows')
            columns = check_positive_int(columns, 'columns')
            values = list(entries)
            if any(_is_sequence(v) for v in values):
                raise MatrixValidationError(
                    "Flat construction with rows/columns expects a flat sequence of scalars",
                    status_code=StatusCode.MATRIX_NON_NUMERIC,
                )
            if len(values) != rows * columns:
                raise DimensionMismatchError(
                    f"Cannot shape {len(values)} values into ({rows},{columns})",
                    expected=rows * columns,
                    actual=len(values),
                    status_code=StatusCode.RESHAPE,
                )
        elif entries and all(isinstance(v, Vector) for v in entries):
            values, rows, columns, orientation = self._flatten_vectors(entries)
            if numerical is None:
                numerical = entries[0].numerical
                if any(v.numerical != numerical for v in entries):
                    raise MatrixValidationError(
                        "Cannot mix real and complex Vectors in one matrix",
                        status_code=StatusCode.MATRIX_NON_NUMERIC,
                    )
        elif any(isinstance(v, Vector) for v in entries):
            raise MatrixValidationError(
                "Cannot mix Vectors and plain rows in one matrix",
                status_code=StatusCode.MATRIX_NON_NUMERIC,
            )
        else:
            values, rows, columns = _flatten_rows(entries)
            nested = next((v for v in values if _is_sequence(v)), None)
            if nested is not None:
                raise MatrixValidationError(
                    f"Entries must be scalars, found nested sequence {nested!r}",
                    status_code=StatusCode.MATRIX_NON_NUMERIC,
                    entry=nested,
                )

        self._data, self._numerical = _to_buffer(values, columns, numerical)
        self._rows: int = rows
        self._columns: int = columns
        self._orientation: Orientation = orientation

    @staticmethod
    def _flatten_vectors(vectors: Sequence[Vector]) -> tuple[list[Any], int, int, Orientation]:
        if all(v.is_row for v in vectors):
            orientation: Orientation = 'row'
        elif all(v.is_column for v in vectors):
            orientation = 'column'
        else:
            raise MatrixValidationError(
                "Vectors must be all row vectors or all column vectors",
                status_code=StatusCode.MATRIX_RAGGED,
            )
        length = vectors[0].size
        if length == 0:
            raise MatrixValidationError(
                "Vectors must not be empty",
                status_code=StatusCode.MATRIX_EMPTY,
            )
        for i, v in enumerate(vectors):
            if v.size != length:
                raise MatrixValidationError(
                    f"Vector {i} has {v.size} entries, expected {length}",
                    status_code=StatusCode.MATRIX_RAGGED,
                    row=i,
                )
        stacked = [list(v) for v in vectors]
        if orientation == 'column':
            stacked = [list(row) for row in zip(*stacked)]
            return [x for row in stacked for x in row], length, len(vectors), orientation
        return [x for row in stacked for x in row], len(vectors), length, orientation

    @classmethod
    def _from_array(
        cls,
        array: NDArray[Any],
        numerical: Numerical,
        orientation: Orientation = 'row',
    ) -> Matrix:
        """Wrap an already-valid 2-D array (copied) without re-validation."""
        matrix = cls.__new__(cls)
        array = np.array(array, dtype=numerical.dtype)
        matrix._rows, matrix._columns = array.shape
        matrix._data = np.ascontiguousarray(array).reshape(-1)
        matrix._numerical = numerical
        matrix._orientation = orientation
        return matrix

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls, n: int, numerical: Numerical | None = None) -> Matrix:
        from pylinalg.matrix import factories
        return factories.identity(n, numerical)

    @classmethod
    def zeros(cls, rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
        from pylinalg.matrix import factories
        return factories.zeros(rows, columns, numerical)

    @classmethod
    def ones(cls, rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
        from pylinalg.matrix import factories
        return factories.ones(rows, columns, numerical)

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        seed: int | None = None,
        numerical: Numerical | None = None,
    ) -> Matrix:
        from pylinalg.matrix import factories
        return factories.random(rows, columns, seed=seed, numerical=numerical)

    @classmethod
    def reshape(cls, values: Any, rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
        from pylinalg.matrix import factories
        return factories.reshape(values, rows, columns, numerical)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def _array(self) -> NDArray[Any]:
        # 2-D view; writes go through to the buffer.
        return self._data.reshape(self._rows, self._columns)

    @property
    def numerical(self) -> Numerical:
        return self._numerical

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def size(self) -> int:
        return self._rows * self._columns

    @property
    def shape(self) -> str:
        return f"({self._rows},{self._columns})"

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def is_tall(self) -> bool:
        return self._rows > self._columns

    @property
    def is_wide(self) -> bool:
        return self._rows < self._columns

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def vectors(self) -> list[Vector]:
        """Row vectors for a row-oriented matrix, column vectors otherwise."""
        if self._orientation == 'row':
            return [self.get_row(i) for i in range(self._rows)]
        return [self.get_column(j) for j in range(self._columns)]

    def to_list(self) -> list[list[Any]]:
        return [[to_python(x) for x in row] for row in self._array]

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the entries as a 2-D array."""
        return self._array.copy()

    def copy(self) -> Matrix:
        return Matrix._from_array(self._array, self._numerical, self._orientation)

    def _like(self, array: NDArray[Any], numerical: Numerical | None = None) -> Matrix:
        return Matrix._from_array(array, numerical or self._numerical, self._orientation)

    def __repr__(self) -> str:
        if self._orientation == 'column':
            return f"Matrix({self.to_list()!r}, orientation='column')"
        return f"Matrix({self.to_list()!r})"

    def __str__(self) -> str:
        cells = [[self._numerical.to_string(x) for x in row] for row in self._array]
        width = max(len(cell) for row in cells for cell in row)
        return "\n".join("[" + "  ".join(cell.rjust(width) for cell in row) + "]" for row in cells)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _check_position(self, row: Any, column: Any) -> tuple[int, int]:
        row = check_index(row, self._rows, 'row', shape=self.shape)
        column = check_index(column, self._columns, 'column', shape=self.shape)
        return row, column

    def _check_value(self, value: Any, name: str) -> None:
        check_scalar(value, self._numerical, name)

    def get_element(self, row: int, column: int) -> Any:
        """
        Entry at (row, column), 0-indexed.

        Raises:
            InvalidArgumentError: If an index is not an integer
            IndexOutOfBoundsError: If an index is outside the matrix
        """
        row, column = self._check_position(row, column)
        return to_python(self._data[row * self._columns + column])

    def set_element(self, row: int, column: int, value: Any) -> None:
        """Overwrite one entry in place."""
        row, column = self._check_position(row, column)
        self._check_value(value, 'value')
        self._data[row * self._columns + column] = value

    def __getitem__(self, position: tuple[int, int]) -> Any:
        if not isinstance(position, tuple) or len(position) != 2:
            raise InvalidArgumentError(
                f"Matrix indices must be a (row, column) pair, got {position!r}",
                name='position',
                value=position,
            )
        return self.get_element(*position)

    def __setitem__(self, position: tuple[int, int], value: Any) -> None:
        if not isinstance(position, tuple) or len(position) != 2:
            raise InvalidArgumentError(
                f"Matrix indices must be a (row, column) pair, got {position!r}",
                name='position',
                value=position,
            )
        self.set_element(position[0], position[1], value)

    def get_row(self, index: int) -> Vector:
        """Copy of one row as a row Vector."""
        index = check_index(index, self._rows, 'row', shape=self.shape)
        return Vector._from_array(self._array[index, :], self._numerical, is_row=True)

    def get_column(self, index: int) -> Vector:
        """Copy of one column as a column Vector."""
        index = check_index(index, self._columns, 'column', shape=self.shape)
        return Vector._from_array(self._array[:, index], self._numerical, is_row=False)

    def _coerce_values(self, values: Any, length: int, name: str) -> NDArray[Any]:
        vector = values if isinstance(values, Vector) else Vector(values)
        check_length(vector.size, length, name)
        if common_numerical(self._numerical, vector.numerical) != self._numerical:
            raise InvalidArgumentError(
                f"{name}: cannot store {type(vector.numerical).__name__} values "
                f"in a {type(self._numerical).__name__} matrix",
                name=name,
            )
        return vector.to_numpy()

    def set_row(self, index: int, values: Any) -> None:
        """Overwrite one row in place."""
        index = check_index(index, self._rows, 'row', shape=self.shape)
        self._array[index, :] = self._coerce_values(values, self._columns, 'values')

    def set_column(self, index: int, values: Any) -> None:
        """Overwrite one column in place."""
        index = check_index(index, self._columns, 'column', shape=self.shape)
        self._array[:, index] = self._coerce_values(values, self._rows, 'values')

    def swap_rows(self, i: int, j: int) -> None:
        i = check_index(i, self._rows, 'row', shape=self.shape)
        j = check_index(j, self._rows, 'row', shape=self.shape)
        self._array[[i, j], :] = self._array[[j, i], :]

    def swap_columns(self, i: int, j: int) -> None:
        i = check_index(i, self._columns, 'column', shape=self.shape)
        j = check_index(j, self._columns, 'column', shape=self.shape)
        self._array[:, [i, j]] = self._array[:, [j, i]]

    def diag(self, k: int = 0) -> Vector:
        """
        The k-th diagonal as a row Vector (k > 0 above, k < 0 below the main one).

        Raises:
            InvalidArgumentError: If the k-th diagonal lies outside the matrix
        """
        k = check_integer(k, 'k')
        if k >= self._columns or -k >= self._rows:
            raise InvalidArgumentError(
                f"k: diagonal {k} does not exist in a {self.shape} matrix",
                name='k',
                value=k,
            )
        return Vector._from_array(np.diagonal(self._array, offset=k), self._numerical, is_row=True)

    def _check_range(self, start: Any, stop: Any, bound: int, name: str) -> tuple[int, int]:
        start = check_integer(start, f'{name}_start')
        stop = check_integer(stop, f'{name}_stop')
        if not 0 <= start < stop <= bound:
            raise IndexOutOfBoundsError(
                f"{name} range [{start}, {stop}) is empty or outside [0, {bound})",
                row=start if name == 'row' else None,
                column=start if name == 'column' else None,
                shape=self.shape,
            )
        return start, stop

    def get_sub_matrix(self, row_start: int, row_stop: int, column_start: int, column_stop: int) -> Matrix:
        """Copy of the block rows [row_start, row_stop) x columns [column_start, column_stop)."""
        r0, r1 = self._check_range(row_start, row_stop, self._rows, 'row')
        c0, c1 = self._check_range(column_start, column_stop, self._columns, 'column')
        return self._like(self._array[r0:r1, c0:c1])

    def set_sub_matrix(self, row: int, column: int, block: Matrix) -> None:
        """Overwrite, in place, the block whose top-left corner is (row, column)."""
        check_instance(block, Matrix, 'block')
        row, column = self._check_position(row, column)
        if row + block.rows > self._rows or column + block.columns > self._columns:
            raise IndexOutOfBoundsError(
                f"Block of shape {block.shape} at ({row}, {column}) "
                f"does not fit in a {self.shape} matrix",
                row=row,
                column=column,
                shape=self.shape,
            )
        if common_numerical(self._numerical, block.numerical) != self._numerical:
            raise InvalidArgumentError(
                f"block: cannot store {type(block.numerical).__name__} values "
                f"in a {type(self._numerical).__name__} matrix",
                name='block',
            )
        self._array[row:row + block.rows, column:column + block.columns] = block._array

    def remove_row(self, index: int) -> Matrix:
        index = check_index(index, self._rows, 'row', shape=self.shape)
        if self._rows == 1:
            raise MatrixValidationError(
                "Cannot remove the only row of a matrix",
                status_code=StatusCode.MATRIX_EMPTY,
                row=index,
            )
        return self._like(np.delete(self._array, index, axis=0))

    def remove_column(self, index: int) -> Matrix:
        index = check_index(index, self._columns, 'column', shape=self.shape)
        if self._columns == 1:
            raise MatrixValidationError(
                "Cannot remove the only column of a matrix",
                status_code=StatusCode.MATRIX_EMPTY,
            )
        return self._like(np.delete(self._array, index, axis=1))

    def _column_block(self, other: Any, name: str) -> tuple[NDArray[Any], Numerical]:
        """A Matrix, Vector or flat sequence as a 2-D block with `rows` rows."""
        if isinstance(other, Matrix):
            block, numerical = other._array, other.numerical
        else:
            vector = other if isinstance(other, Vector) else Vector(other)
            block, numerical = vector.to_numpy().reshape(-1, 1), vector.numerical
        if block.shape[0] != self._rows:
            raise DimensionMismatchError(
                f"{name}: expected {self._rows} rows, got {block.shape[0]}",
                expected=self._rows,
                actual=block.shape[0],
            )
        return block, numerical

    def augment(self, other: Any) -> Matrix:
        """[self | other] for a Matrix, Vector or sequence with the same row count."""
        block, numerical = self._column_block(other, 'other')
        numerical = common_numerical(self._numerical, numerical)
        return self._like(np.concatenate([self._array, block], axis=1), numerical)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_matrix(self, other: Any, name: str = 'other') -> None:
        check_instance(other, Matrix, name)

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            TypeMismatchError: If other is not a Matrix
            DimensionMismatchError: If the shapes differ
        """
        self._check_matrix(other)
        check_same_shape(self, other, 'addition')
        numerical = common_numerical(self._numerical, other.numerical)
        return self._like(numerical.add(self._array, other._array), numerical)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference self - other."""
        self._check_matrix(other)
        check_same_shape(self, other, 'subtraction')
        numerical = common_numerical(self._numerical, other.numerical)
        return self._like(numerical.subtract(self._array, other._array), numerical)

    def scale(self, scalar: Any) -> Matrix:
        """
        Every entry multiplied by scalar.

        Raises:
            InvalidArgumentError: If scalar is not a finite number
        """
        check_scalar(scalar, COMPLEX, 'scalar')
        numerical = common_numerical(self._numerical, numerical_for([scalar]))
        return self._like(numerical.multiply(self._array, scalar), numerical)

    def _check_multiplicable(self, other: Any) -> Numerical:
        self._check_matrix(other)
        if self._columns != other.rows:
            raise DimensionMismatchError(
                f"Invalid dimensions for multiplication: {self.shape} x {other.shape} "
                f"({self._columns} columns vs {other.rows} rows)",
                expected=self._columns,
                actual=other.rows,
                status_code=StatusCode.MULTIPLY_DIMENSION,
            )
        return common_numerical(self._numerical, other.numerical)

    def naive_multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product by the standard triple loop.

        Raises:
            TypeMismatchError: If other is not a Matrix
            DimensionMismatchError: If self.columns != other.rows
        """
        numerical = self._check_multiplicable(other)
        product = _naive_multiply(
            self._array.astype(numerical.dtype), other._array.astype(numerical.dtype), numerical
        )
        return self._like(product, numerical)

    def strassen_multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product by Strassen's recursion.

        Operands are zero-padded to the next power of two and the result
        cropped back to (self.rows x other.columns). Same errors as
        naive_multiply.
        """
        numerical = self._check_multiplicable(other)
        product = _strassen_multiply(
            self._array.astype(numerical.dtype), other._array.astype(numerical.dtype), numerical
        )
        return self._like(product, numerical)

    def multiply_vector(self, vector: Any) -> Vector:
        """
        Matrix times column vector; returns a column Vector of length rows.

        Raises:
            DimensionMismatchError: If the vector size != columns
        """
        vector = vector if isinstance(vector, Vector) else Vector(vector)
        if vector.size != self._columns:
            raise DimensionMismatchError(
                f"Invalid dimensions for matrix-vector product: {self.shape} x {vector.size}",
                expected=self._columns,
                actual=vector.size,
                status_code=StatusCode.MULTIPLY_DIMENSION,
            )
        numerical = common_numerical(self._numerical, vector.numerical)
        product = _naive_multiply(
            self._array.astype(numerical.dtype),
            vector.to_numpy().astype(numerical.dtype).reshape(-1, 1),
            numerical,
        )
        return Vector._from_array(product[:, 0], numerical, is_row=False)

    def pow(self, k: int) -> Matrix:
        """
        k-th power by repeated squaring; pow(0) is the identity.

        Raises:
            NotSquareError: If the matrix is not square
            InvalidArgumentError: If k is not a non-negative integer
        """
        check_square(self, 'pow')
        k = check_non_negative_int(k, 'k')
        numerical = self._numerical
        result = np.eye(self._rows, dtype=numerical.dtype)
        base = self._array.copy()
        while k:
            if k & 1:
                result = _naive_multiply(result, base, numerical)
            k >>= 1
            if k:
                base = _naive_multiply(base, base, numerical)
        return self._like(result)

    def __add__(self, other: Matrix) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.subtract(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.naive_multiply(other)

    def __mul__(self, scalar: Any) -> Matrix:
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Matrix:
        return self.scale(-1)

    # ------------------------------------------------------------------
    # Transposition and orientation
    # ------------------------------------------------------------------

    @staticmethod
    def _flipped(orientation: Orientation) -> Orientation:
        return 'column' if orientation == 'row' else 'row'

    def transpose(self) -> Matrix:
        """Rows become columns; the orientation flips as well."""
        return Matrix._from_array(self._array.T, self._numerical, self._flipped(self._orientation))

    def conjugate_transpose(self) -> Matrix:
        conjugated = self._numerical.conjugate(self._array.T)
        return Matrix._from_array(conjugated, self._numerical, self._flipped(self._orientation))

    def to_row_matrix(self) -> Matrix:
        """
        Same entries, presented as row vectors.

        Raises:
            OrientationError: If the matrix is already row-oriented
        """
        if self._orientation == 'row':
            raise OrientationError(
                "Matrix is already a row matrix",
                name='orientation',
                value=self._orientation,
            )
        return Matrix._from_array(self._array, self._numerical, 'row')

    def to_column_matrix(self) -> Matrix:
        """
        Same entries, presented as column vectors.

        Raises:
            OrientationError: If the matrix is already column-oriented
        """
        if self._orientation == 'column':
            raise OrientationError(
                "Matrix is already a column matrix",
                name='orientation',
                value=self._orientation,
            )
        return Matrix._from_array(self._array, self._numerical, 'column')

    # ------------------------------------------------------------------
    # Triangular systems
    # ------------------------------------------------------------------

    def _rhs(self, b: Any) -> tuple[NDArray[Any], Numerical]:
        vector = b if isinstance(b, Vector) else Vector(b)
        check_length(vector.size, self._rows, 'b')
        numerical = common_numerical(self._numerical, vector.numerical)
        return vector.to_numpy().astype(numerical.dtype), numerical

    def back_substitution(self, b: Any) -> Vector:
        """
        Solve U x = b where self is U.

        Args:
            b: Right-hand side (Vector or flat sequence) of length rows

        Returns:
            Solution as a row Vector

        Raises:
            NotSquareError: If the matrix is not square
            NotTriangularError: If the matrix is not upper triangular
            DimensionMismatchError: If len(b) != rows
            SingularSystemError: If a diagonal entry is (near) zero
        """
        check_square(self, 'back substitution')
        if not self.is_upper_triangular():
            raise NotTriangularError(
                "Back substitution requires an upper triangular matrix",
                name='matrix',
                status_code=StatusCode.NOT_UPPER_TRIANGULAR,
            )
        rhs, numerical = self._rhs(b)
        x = _back_substitution(self._array.astype(numerical.dtype), rhs, numerical)
        return Vector._from_array(x, numerical, is_row=True)

    def forward_substitution(self, b: Any) -> Vector:
        """
        Solve L x = b where self is L; the lower triangular mirror of
        back_substitution with the same errors.
        """
        check_square(self, 'forward substitution')
        if not self.is_lower_triangular():
            raise NotTriangularError(
                "Forward substitution requires a lower triangular matrix",
                name='matrix',
                status_code=StatusCode.NOT_LOWER_TRIANGULAR,
            )
        rhs, numerical = self._rhs(b)
        x = _forward_substitution(self._array.astype(numerical.dtype), rhs, numerical)
        return Vector._from_array(x, numerical, is_row=True)

    # ------------------------------------------------------------------
    # Decompositions and elimination
    # ------------------------------------------------------------------

    def gram_schmidt(self) -> Matrix:
        """
        Orthonormal basis for the column space, as the columns of Q.

        Raises:
            DimensionMismatchError: If the matrix is wide
            LinearDependenceError: If the columns are linearly dependent
        """
        self._check_not_wide('Gram-Schmidt')
        return self._like(_gram_schmidt(self._array, self._numerical))

    def qr_decomposition(self) -> QRResult:
        """
        QR decomposition by modified Gram-Schmidt.

        Returns:
            QRResult with Q (rows x columns, orthonormal columns),
            R (columns x columns, upper triangular) and rank

        Raises:
            DimensionMismatchError: If the matrix is wide
            LinearDependenceError: If the columns are linearly dependent,
                carrying the index of the offending column
        """
        self._check_not_wide('QR decomposition')
        Q, R = _qr_decomposition(self._array, self._numerical)
        return QRResult(Q=self._like(Q), R=self._like(R), rank=self._columns)

    def _check_not_wide(self, operation: str) -> None:
        if self.is_wide:
            raise DimensionMismatchError(
                f"{operation} requires rows >= columns, got shape {self.shape}",
                expected='rows >= columns',
                actual=self.shape,
            )

    def gaussian_elimination(self, solve: bool = False) -> Matrix | Vector:
        """
        Row-echelon form by Gaussian elimination with partial pivoting.

        Args:
            solve: Treat self as the augmented system [A | b] and return
                its solution instead of the echelon form

        Returns:
            Row-echelon Matrix, or the solution as a row Vector

        Raises:
            SingularSystemError: If solving a singular or inconsistent system
        """
        result = _gaussian_elimination(self._array, self._numerical, solve=solve, stacklevel=3)
        if solve:
            return Vector._from_array(result, self._numerical, is_row=True)
        return self._like(result)

    def gauss_jordan(self, solve: bool = False) -> Matrix | Vector:
        """
        Reduced row-echelon form by Gauss-Jordan elimination.

        With solve=True self is the augmented system [A | b] and the
        solution is returned as a row Vector. Same errors as
        gaussian_elimination.
        """
        result = _gauss_jordan(self._array, self._numerical, solve=solve, stacklevel=3)
        if solve:
            return Vector._from_array(result, self._numerical, is_row=True)
        return self._like(result)

    def solve(self, b: Any) -> Vector:
        """
        Solve A x = b by Gauss-Jordan on [A | b].

        Raises:
            DimensionMismatchError: If len(b) != rows
            SingularSystemError: If the system has no unique solution
        """
        vector = b if isinstance(b, Vector) else Vector(b)
        check_length(vector.size, self._rows, 'b')
        augmented = self.augment(vector)
        result = _gauss_jordan(augmented._array, augmented.numerical, solve=True, stacklevel=3)
        return Vector._from_array(result, augmented.numerical, is_row=True)

    def lu_decomposition(self) -> LUResult:
        """
        LU decomposition with partial pivoting, P A = L U.

        Raises:
            NotSquareError: If the matrix is not square
            SingularSystemError: If the matrix is singular
        """
        check_square(self, 'LU decomposition')
        L, U, P, count = _lu_decomposition(self._array, self._numerical)
        return LUResult(L=self._like(L), U=self._like(U), P=self._like(P), permutation_count=count)

    def det(self) -> Any:
        """Determinant from the LU factors; exactly zero for a singular matrix."""
        check_square(self, 'determinant')
        numerical = self._numerical
        try:
            _, U, _, count = _lu_decomposition(self._array, numerical)
        except SingularSystemError:
            return to_python(numerical.zero_value)
        determinant = numerical.one_value
        for pivot in np.diagonal(U):
            determinant = numerical.multiply(determinant, pivot)
        if count % 2:
            determinant = numerical.multiply(determinant, numerical.from_integral(-1))
        return to_python(determinant)

    def invert(self) -> Matrix:
        """
        Inverse by Gauss-Jordan on [A | I].

        Raises:
            NotSquareError: If the matrix is not square
            SingularSystemError: If the matrix is singular
        """
        return self._inverse(stacklevel=4)

    def _inverse(self, stacklevel: int) -> Matrix:
        check_square(self, 'inversion')
        return self._like(invert_square(self._array, self._numerical, stacklevel=stacklevel))

    def _invert_triangular(self, upper: bool) -> Matrix:
        n = self._rows
        numerical = self._numerical
        solver = _back_substitution if upper else _forward_substitution
        identity = np.eye(n, dtype=numerical.dtype)
        inverse = np.empty((n, n), dtype=numerical.dtype)
        for j in range(n):
            inverse[:, j] = solver(self._array, identity[:, j], numerical)
        return self._like(inverse)

    def invert_upper(self) -> Matrix:
        """Inverse of an upper triangular matrix, one back substitution per column."""
        check_square(self, 'upper triangular inversion')
        if not self.is_upper_triangular():
            raise NotTriangularError(
                "invert_upper requires an upper triangular matrix",
                name='matrix',
                status_code=StatusCode.NOT_UPPER_TRIANGULAR,
            )
        return self._invert_triangular(upper=True)

    def invert_lower(self) -> Matrix:
        """Inverse of a lower triangular matrix, one forward substitution per column."""
        check_square(self, 'lower triangular inversion')
        if not self.is_lower_triangular():
            raise NotTriangularError(
                "invert_lower requires a lower triangular matrix",
                name='matrix',
                status_code=StatusCode.NOT_LOWER_TRIANGULAR,
            )
        return self._invert_triangular(upper=False)

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------

    def rank(self) -> int:
        """Number of non-zero pivots in the row-echelon form."""
        return row_echelon(self._array, self._numerical).rank

    def trace(self) -> Any:
        check_square(self, 'trace')
        return to_python(total(np.diagonal(self._array), self._numerical))

    def norm(self) -> float:
        """Frobenius norm."""
        return _norm(self._data, self._numerical)

    def cond(self) -> float:
        """
        Frobenius condition number ||A|| * ||A^-1||.

        Raises:
            NotSquareError: If the matrix is not square
            SingularSystemError: If the matrix is singular
        """
        return self.norm() * self._inverse(stacklevel=4).norm()

    def sum(self) -> Any:
        return to_python(total(self._data, self._numerical))

    def _projected(self, reduction: str) -> list[float]:
        if self._numerical == COMPLEX:
            warnings.warn(
                f"{reduction}() on a complex matrix compares real parts only; "
                f"imaginary parts are discarded.",
                UserWarning,
                stacklevel=3,
            )
        return [self._numerical.to_integral(x) for x in self._data]

    def max(self) -> float:
        """Largest entry, comparing real parts for complex matrices."""
        return max(self._projected('max'))

    def min(self) -> float:
        """Smallest entry, comparing real parts for complex matrices."""
        return min(self._projected('min'))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_upper_triangular(self, threshold: float = DELTA) -> bool:
        return _is_upper_triangular(self._array, self._numerical, threshold)

    def is_lower_triangular(self, threshold: float = DELTA) -> bool:
        return _is_lower_triangular(self._array, self._numerical, threshold)

    def is_diagonal(self, threshold: float = DELTA) -> bool:
        return self.is_upper_triangular(threshold) and self.is_lower_triangular(threshold)

    def is_symmetric(self, threshold: float = DELTA) -> bool:
        if not self.is_square:
            return False
        difference = self._numerical.subtract(self._array, self._array.T)
        return bool(np.all(self._numerical.abs(difference) < threshold))

    def is_identity(self, threshold: float = DELTA) -> bool:
        if not self.is_square:
            return False
        difference = self._numerical.subtract(self._array, np.eye(self._rows, dtype=self._numerical.dtype))
        return bool(np.all(self._numerical.abs(difference) < threshold))

    def is_zero(self, threshold: float = DELTA) -> bool:
        return bool(np.all(self._numerical.abs(self._data) < threshold))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equal(self, other: Matrix, threshold: float = DELTA) -> bool:
        """
        Same shape and every entry within threshold (modulus of the difference).

        Orientation is ignored; use == to compare it as well.
        """
        self._check_matrix(other)
        if self._rows != other.rows or self._columns != other.columns:
            return False
        numerical = common_numerical(self._numerical, other.numerical)
        difference = numerical.subtract(self._array, other._array)
        return bool(np.all(numerical.abs(difference) < threshold))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._orientation == other.orientation and self.equal(other)
