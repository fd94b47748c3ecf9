"""
quop: single-qubit quantum operations

2x2 complex matrices with the algebra needed to build, combine and convert
them, including the exponential map from rotation vectors to unitaries.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from .scalar import InvalidArgumentError, format_scalar, to_scalar
from .operation import (
    Operation, IDENTITY, PAULI_X, PAULI_Y, PAULI_Z, HADAMARD,
    comm, acomm, conj_op, DEFAULT_TOLERANCE, SINC_SERIES_THRESHOLD,
)

__all__ = [
    # Core class
    'Operation',

    # Named operations
    'IDENTITY', 'PAULI_X', 'PAULI_Y', 'PAULI_Z', 'HADAMARD',

    # Algebra helpers
    'comm', 'acomm', 'conj_op',

    # Scalars and errors
    'InvalidArgumentError', 'format_scalar', 'to_scalar',
    'DEFAULT_TOLERANCE', 'SINC_SERIES_THRESHOLD',
]
