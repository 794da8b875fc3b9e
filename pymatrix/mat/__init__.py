"""This module contains the dense `Matrix` class.  `Matrix` overloads `+`, `-`
and `*` (matrix product); every operation checks its operands up front and
returns a new `Matrix`."""

from .mat_handler import Matrix, add, subtract, multiply
