"""pymatrix: a dense, fixed-shape matrix of 64-bit floats with checked
element access, addition, subtraction, multiplication, structural equality
and copying.

The primary object is `pymatrix.Matrix`...start there.  All errors derive
from `pymatrix.MatrixError`.
"""

from .exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidDimensionError,
    MatrixError,
    NullOperandError,
)
from .logger import Logger
from .mat import Matrix, add, subtract, multiply
from .pymatrix_warnings import PymatrixWarning

__version__ = "0.1.0"
__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "Logger",
    "PymatrixWarning",
    "MatrixError",
    "InvalidDimensionError",
    "InvalidArgumentError",
    "NullOperandError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
]
