#!/usr/bin/env python3
"""
Numerical backend for single-qubit operations

Gives numpy matrix views of operations so they can be compared with a
tolerance, checked for unitarity, or handed to code that works on arrays.
Every function returns fresh arrays; nothing here keeps state.
"""

import numpy as np

from .scalar import InvalidArgumentError, to_scalar


def to_array(op) -> np.ndarray:
    """2x2 complex matrix of an operation: [[a, b], [c, d]]"""
    return np.array([[op.a, op.b], [op.c, op.d]], dtype=complex)


def coefficients_from_array(array) -> tuple:
    """Read the a-b-c-d coefficients out of a 2x2 array-like.

    Args:
        array: Nested lists or numpy array of shape (2, 2)

    Returns:
        Tuple (a, b, c, d) of complex values

    Raises:
        InvalidArgumentError: if the shape is wrong or an entry is not numeric
    """
    try:
        arr = np.asarray(array, dtype=object)
    except ValueError as e:
        # ragged nesting
        raise InvalidArgumentError(f"Expected a 2x2 matrix, got {array!r}") from e
    if arr.shape != (2, 2):
        raise InvalidArgumentError(
            f"Expected a 2x2 matrix, got shape {arr.shape}"
        )
    return tuple(to_scalar(entry) for entry in arr.flat)


def max_abs_difference(op1, op2) -> float:
    """Largest entry-wise distance |op1 - op2|."""
    return float(np.max(np.abs(to_array(op1) - to_array(op2))))


def is_unitary(op, tolerance: float) -> bool:
    """Check U U† = I up to tolerance."""
    U = to_array(op)
    error = np.max(np.abs(U @ U.conj().T - np.eye(2, dtype=complex)))
    return bool(error <= tolerance)
