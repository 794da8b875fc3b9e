import numbers
import numpy as np
import pandas as pd

from ..exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidDimensionError,
    NullOperandError,
)
from ..logger import Logger


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_left(first, operation):
    """checks on the left operand of the module-level forms, which has no
    logger to report through yet"""
    if first is None:
        raise NullOperandError(
            "{0}(): left operand is None".format(operation), operand="left"
        )
    if not isinstance(first, Matrix):
        raise InvalidArgumentError(
            "{0}(): left operand must be type Matrix, not: {1}".format(
                operation, type(first)
            )
        )


def add(first, second):
    """elementwise sum of two matrices

    Args:
        first (`Matrix`): left operand
        second (`Matrix`): right operand

    Returns:
        `Matrix`: a new `Matrix`, neither operand is changed

    Example::

        total = pymatrix.add(a, b)

    """
    _check_left(first, "add")
    return first.add(second)


def subtract(first, second):
    """elementwise difference `first - second` of two matrices"""
    _check_left(first, "subtract")
    return first.subtract(second)


def multiply(first, second):
    """matrix product `first * second`"""
    _check_left(first, "multiply")
    return first.multiply(second)


class Matrix(object):
    """Dense, fixed-shape matrix of 64-bit floats

    Args:
        rows (`int`): number of rows, must be positive
        columns (`int`): number of columns, must be positive
        logger (`pymatrix.Logger`, optional): logger the matrix (and the results
            of arithmetic on it) report through.  Default is a silent `Logger`

    Example::

        a = pymatrix.Matrix.from_array([[1, 2], [3, 4]])
        b = pymatrix.Matrix(2, 2)
        b[0, 0] = 5.0
        c = a * b + a
        print(c.shape, c[1, 1])

    Note:
        the shape is fixed at construction, cell values are freely mutable.

        `+`, `-` and `*` never modify their operands, a new `Matrix` is
        returned.  `*` is the matrix product, use `hadamard_product()` for
        elementwise multiplication.

    """

    double = np.float64

    # make numpy defer to the reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, rows, columns, logger=None):
        if not _is_integer(rows) or not _is_integer(columns) or rows <= 0 or columns <= 0:
            raise InvalidDimensionError(
                "Matrix.__init__(): rows and columns must be positive integers, "
                + "not: "
                + str(rows)
                + " "
                + str(columns),
                rows=rows,
                columns=columns,
            )
        self.__x = np.zeros((int(rows), int(columns)), dtype=self.double)
        self.logger = logger if logger is not None else Logger(False)

    @classmethod
    def from_array(cls, x, logger=None):
        """class method to create a new `Matrix` instance from a 2D array

        Args:
            x (`numpy.ndarray` or nested sequence): numeric values.  Always copied,
                the new `Matrix` never shares memory with `x`
            logger (`pymatrix.Logger`, optional): logger for the new matrix

        Returns:
            `Matrix`: `Matrix` instance with the shape of `x`

        Raises:
            `InvalidArgumentError`: if `x` is None, not numeric or not 2D
            `InvalidDimensionError`: if `x` has an empty dimension

        Example::

            m = pymatrix.Matrix.from_array(np.random.random((10, 3)))

        """
        if x is None:
            raise InvalidArgumentError("Matrix.from_array(): x is None")
        try:
            raw = np.asarray(x)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                "Matrix.from_array(): x cannot be converted to an array: " + str(e)
            ) from e
        if raw.dtype == object:
            # python ints beyond int64, Decimals and the like
            try:
                raw = np.asarray(x, dtype=cls.double)
            except (TypeError, ValueError, OverflowError) as e:
                raise InvalidArgumentError(
                    "Matrix.from_array(): x must hold real numbers: " + str(e)
                ) from e
        # timedelta64 counts as a numpy integer, datetime64 does not
        if (
            raw.dtype.kind in "mM"
            or not np.issubdtype(raw.dtype, np.number)
            or np.issubdtype(raw.dtype, np.complexfloating)
        ):
            raise InvalidArgumentError(
                "Matrix.from_array(): x must hold real numbers, not dtype: "
                + str(raw.dtype)
            )
        if raw.ndim != 2:
            raise InvalidArgumentError(
                "Matrix.from_array(): ndim != 2, ndim: " + str(raw.ndim)
            )
        if 0 in raw.shape:
            raise InvalidDimensionError(
                "Matrix.from_array(): empty dimension in shape " + str(raw.shape),
                rows=raw.shape[0],
                columns=raw.shape[1],
            )
        mat = cls(raw.shape[0], raw.shape[1], logger=logger)
        mat.__x[:, :] = raw
        if not np.isfinite(mat.__x).all():
            mat.logger.warn("Matrix.from_array(): nans or infs in matrix")
        return mat

    @classmethod
    def from_dataframe(cls, df, logger=None):
        """class method to create a new `Matrix` instance from a
         `pandas.DataFrame`.  index and column labels are not kept

        Args:
            df (`pandas.DataFrame`): dataframe of numeric values
            logger (`pymatrix.Logger`, optional): logger for the new matrix

        Returns:
            `Matrix`: `Matrix` instance derived from `df`.

        """
        if not isinstance(df, pd.DataFrame):
            raise InvalidArgumentError("Matrix.from_dataframe(): df is not a DataFrame")
        return cls.from_array(df.values, logger=logger)

    @classmethod
    def identity(cls, n, logger=None):
        """class method to create an `n` x `n` identity `Matrix`

        Args:
            n (`int`): number of rows (and columns)
            logger (`pymatrix.Logger`, optional): logger for the new matrix

        Returns:
            `Matrix`: ones on the diagonal, zeros elsewhere

        """
        mat = cls(n, n, logger=logger)
        np.fill_diagonal(mat.__x, 1.0)
        return mat

    def __str__(self):
        """overload of object.__str__()

        Returns:
            `str`: string representation

        """
        return "shape:{0}:{1}".format(*self.shape) + "\n" + str(self.__x)

    def __repr__(self):
        return "{0}.from_array({1})".format(type(self).__name__, self.__x.tolist())

    @property
    def x(self):
        """return a view of the `Matrix` values

        Returns:
            `numpy.ndarray`: writing cells of the view changes the `Matrix`,
            reshaping the view does not

        """
        return self.__x.view()

    @property
    def newx(self):
        """return a copy of `Matrix.x`

        Returns:
            `numpy.ndarray`: a copy `Matrix.x`

        """
        return self.__x.copy()

    @property
    def shape(self):
        """get the (rows, columns) shape of `Matrix`

        Returns:
            `int`: length of 2 tuple

        """
        return self.__x.shape

    @property
    def rows(self):
        """number of rows"""
        return self.__x.shape[0]

    @property
    def columns(self):
        """number of columns"""
        return self.__x.shape[1]

    @property
    def nrow(self):
        return self.rows

    @property
    def ncol(self):
        return self.columns

    def _check_index(self, row, column, method):
        if not _is_integer(row) or not _is_integer(column):
            raise InvalidArgumentError(
                "Matrix.{0}(): row and column must be integers, not: {1} {2}".format(
                    method, type(row), type(column)
                )
            )
        if not 0 <= row < self.rows or not 0 <= column < self.columns:
            raise IndexOutOfRangeError(
                "Matrix.{0}(): index ({1}, {2}) out of range for shape {3}".format(
                    method, row, column, self.shape
                ),
                row=row,
                column=column,
                shape=self.shape,
            )

    def get(self, row, column):
        """get the value of one cell

        Args:
            row (`int`): zero-based row index
            column (`int`): zero-based column index

        Returns:
            `float`: the cell value

        Raises:
            `IndexOutOfRangeError`: if `row` or `column` is outside the matrix.
                negative indices do not wrap around

        """
        self._check_index(row, column, "get")
        return float(self.__x[row, column])

    def set(self, row, column, value):
        """set the value of one cell, in place

        Args:
            row (`int`): zero-based row index
            column (`int`): zero-based column index
            value (`float`): new value

        """
        self._check_index(row, column, "set")
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                "Matrix.set(): value must be a real number, not: " + repr(value)
            ) from e
        self.__x[row, column] = value

    def __getitem__(self, item):
        row, column = self._unpack_item(item)
        return self.get(row, column)

    def __setitem__(self, item, value):
        row, column = self._unpack_item(item)
        self.set(row, column, value)

    @staticmethod
    def _unpack_item(item):
        if not isinstance(item, tuple) or len(item) != 2:
            raise InvalidArgumentError(
                "Matrix[]: index must be a (row, column) pair, not: " + repr(item)
            )
        return item

    def _check_operand(self, other, operation):
        if other is None:
            message = "Matrix.{0}(): right operand is None".format(operation)
            self.logger.lraise(message, NullOperandError(message, operand="right"))
        if not isinstance(other, Matrix):
            self.logger.lraise(
                "Matrix.{0}(): other argument must be type Matrix, not: {1}".format(
                    operation, type(other)
                ),
                InvalidArgumentError,
            )

    def _check_same_shape(self, other, operation):
        self._check_operand(other, operation)
        if self.shape != other.shape:
            message = "Matrix.{0}(): shape mismatch: {1} {2}".format(
                operation, self.shape, other.shape
            )
            self.logger.lraise(
                message,
                DimensionMismatchError(
                    message,
                    operation=operation,
                    left_shape=self.shape,
                    right_shape=other.shape,
                ),
            )

    def _elementwise(self, other, operation, ufunc):
        self._check_same_shape(other, operation)
        phrase = "Matrix.{0}() {1}".format(operation, self.shape)
        self.logger.log(phrase)
        result = type(self)(self.rows, self.columns, logger=self.logger)
        ufunc(self.__x, other.x, out=result.__x)
        self.logger.log(phrase)
        return result

    def add(self, other):
        """elementwise addition

        Args:
            other (`Matrix`): matrix with the same shape as this one

        Returns:
            `Matrix`: a new `Matrix`, neither operand is changed

        Raises:
            `NullOperandError`: if `other` is None
            `DimensionMismatchError`: if the shapes differ

        Example::

            total = a.add(b)  # same as a + b

        """
        return self._elementwise(other, "add", np.add)

    def subtract(self, other):
        """elementwise subtraction, `self - other`

        Args:
            other (`Matrix`): matrix with the same shape as this one

        Returns:
            `Matrix`: a new `Matrix`, neither operand is changed

        """
        return self._elementwise(other, "subtract", np.subtract)

    def hadamard_product(self, other):
        """element-wise (Hadamard) multiplication.

        Args:
            other (`Matrix`): matrix with the same shape as this one

        Returns:
            `Matrix`: the result of element-wise multiplication

        """
        return self._elementwise(other, "hadamard_product", np.multiply)

    def multiply(self, other):
        """matrix (dot) product, `self * other`

        Args:
            other (`Matrix`): matrix with as many rows as this one has columns

        Returns:
            `Matrix`: a new `self.rows` x `other.columns` `Matrix`

        Raises:
            `NullOperandError`: if `other` is None
            `DimensionMismatchError`: if `self.columns != other.rows`

        Example::

            a = pymatrix.Matrix.from_array(np.ones((4, 3)))
            b = pymatrix.Matrix.from_array(np.ones((3, 2)))
            c = a.multiply(b)  # same as a * b
            assert c.shape == (4, 2)

        """
        self._check_operand(other, "multiply")
        if self.columns != other.rows:
            message = "Matrix.multiply(): matrices are not aligned: {0} {1}".format(
                self.shape, other.shape
            )
            self.logger.lraise(
                message,
                DimensionMismatchError(
                    message,
                    operation="multiply",
                    left_shape=self.shape,
                    right_shape=other.shape,
                ),
            )
        phrase = "Matrix.multiply() {0} x {1}".format(self.shape, other.shape)
        self.logger.log(phrase)
        result = type(self)(self.rows, other.columns, logger=self.logger)
        np.dot(self.__x, other.x, out=result.__x)
        self.logger.log(phrase)
        return result

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def _reject_left(self, other, operation):
        # reflected operators are only reached when the left operand is not a Matrix
        if other is None:
            message = "Matrix.{0}(): left operand is None".format(operation)
            self.logger.lraise(message, NullOperandError(message, operand="left"))
        self.logger.lraise(
            "Matrix.{0}(): left operand must be type Matrix, not: {1}".format(
                operation, type(other)
            ),
            InvalidArgumentError,
        )

    def __radd__(self, other):
        self._reject_left(other, "add")

    def __rsub__(self, other):
        self._reject_left(other, "subtract")

    def __rmul__(self, other):
        self._reject_left(other, "multiply")

    @property
    def T(self):
        """wrapper function for `Matrix.transpose`

        Returns:
            `Matrix`: transpose of `Matrix`

        """
        return self.transpose

    @property
    def transpose(self):
        """transpose operation of self

        Returns:
            `Matrix`: a new `columns` x `rows` `Matrix`

        """
        result = type(self)(self.columns, self.rows, logger=self.logger)
        result.__x[:, :] = self.__x.transpose()
        return result

    def __eq__(self, other):
        """structural equality: same shape and exactly equal values in
        every cell.  never raises, anything that is not a `Matrix` is unequal
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.__x, other.x))

    def equals(self, other):
        """wrapper of `Matrix.__eq__()`"""
        return self == other

    def __hash__(self):
        # -0.0 + 0.0 is 0.0, so cells that compare equal hash alike
        return hash((self.shape, (self.__x + 0.0).tobytes()))

    def copy(self):
        """get a copy of `Matrix`

        Returns:
            `Matrix`: copy of this `Matrix` with its own values.  the
            logger is shared

        """
        result = type(self)(self.rows, self.columns, logger=self.logger)
        result.__x[:, :] = self.__x
        return result

    def clone(self):
        """wrapper of `Matrix.copy()`"""
        return self.copy()

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def df(self):
        """wrapper of Matrix.to_dataframe()"""
        return self.to_dataframe()

    def to_dataframe(self):
        """return a pandas.DataFrame representation of `Matrix`

        Returns:
            `pandas.DataFrame`: a dataframe holding a copy of the values,
            labelled with integer row and column positions

        """
        return pd.DataFrame(data=self.newx)
