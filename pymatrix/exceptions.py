"""Exception hierarchy for pymatrix.

All exceptions inherit from `MatrixError` so that any error raised by the
package can be caught in one place.  Each concrete class also inherits from
the builtin exception it refines (`ValueError`, `IndexError`) so callers that
only know the builtins still catch them.

Errors carry the offending values as attributes, and messages name the
method that raised them, e.g. ``"Matrix.multiply(): ..."``.
"""


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class InvalidDimensionError(MatrixError, ValueError):
    """
    Non-positive (or non-integer) size requested for a matrix.

    Attributes:
        rows: the requested number of rows
        columns: the requested number of columns
    """

    def __init__(self, message, rows=None, columns=None):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class InvalidArgumentError(MatrixError, ValueError):
    """A required input is missing or cannot be used."""
    pass


class NullOperandError(InvalidArgumentError):
    """
    An operand of a binary operation is None.

    Attributes:
        operand: which operand was missing, "left" or "right"
    """

    def __init__(self, message, operand=None):
        super().__init__(message)
        self.operand = operand


class IndexOutOfRangeError(MatrixError, IndexError):
    """
    Cell coordinates outside of the matrix.

    Attributes:
        row: requested row index
        column: requested column index
        shape: (rows, columns) of the matrix that was indexed
    """

    def __init__(self, message, row=None, column=None, shape=None):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class DimensionMismatchError(MatrixError, ValueError):
    """
    Operand shapes are incompatible for a binary operation.

    Attributes:
        operation: name of the operation, e.g. "add"
        left_shape: shape of the left operand
        right_shape: shape of the right operand
    """

    def __init__(self, message, operation=None, left_shape=None, right_shape=None):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
