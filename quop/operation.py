"""
quop.operation: single-qubit quantum operations as 2x2 complex matrices

This module provides:
- The immutable Operation value type [[a, b], [c, d]]
- Matrix algebra (adjoint, scaling, sums, products, conjugation)
- Named constants: identity, the Pauli matrices and Hadamard
- Conversion from a rotation vector to the corresponding unitary
"""

from collections.abc import Sequence
import logging

import numpy as np
import sympy

from . import numeric_backend
from .scalar import (
    DEFAULT_DECIMALS, InvalidArgumentError, clean_real, format_scalar,
    is_scalar, to_scalar,
)

__all__ = [
    'Operation', 'IDENTITY', 'PAULI_X', 'PAULI_Y', 'PAULI_Z', 'HADAMARD',
    'comm', 'acomm', 'conj_op', 'DEFAULT_TOLERANCE', 'SINC_SERIES_THRESHOLD',
]

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-9
SINC_SERIES_THRESHOLD = 0.0002


# ============================================================================
# OPERATION
# ============================================================================

class Operation:
    """Single-qubit operation represented as a 2x2 matrix [[a, b], [c, d]].

    Operations are immutable: every algebraic method returns a new
    Operation. Unitarity is expected of operations built through the named
    constants and from_rotation_vector, but is not enforced, so sums,
    differences and arbitrary scalings are allowed to leave the unitary
    group.

    Attributes:
        a: Upper-left coefficient
        b: Upper-right coefficient
        c: Bottom-left coefficient
        d: Bottom-right coefficient
    """

    __slots__ = ('_a', '_b', '_c', '_d')

    def __init__(self, a, b, c, d):
        """Create an operation from its four coefficients.

        Args:
            a, b, c, d: Scalars (int, float, complex, numpy or sympy numbers)

        Raises:
            InvalidArgumentError: if a coefficient is not a scalar
        """
        for name, value in zip('abcd', (a, b, c, d)):
            if not is_scalar(value):
                raise InvalidArgumentError(
                    f"Coefficient {name} must be a scalar, got {value!r}"
                )
        self._a = to_scalar(a)
        self._b = to_scalar(b)
        self._c = to_scalar(c)
        self._d = to_scalar(d)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def c(self):
        return self._c

    @property
    def d(self):
        return self._d

    @property
    def coefficients(self):
        """The (a, b, c, d) tuple."""
        return (self._a, self._b, self._c, self._d)

    # ------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------

    @classmethod
    def from_coefficients(cls, coefs):
        """Convert a sequence of coefficients into an operation.

        Args:
            coefs: Ordered sequence of exactly 4 numbers or complex values,
                in a-b-c-d order

        Returns:
            Operation

        Raises:
            InvalidArgumentError: if coefs is not a sequence of 4 scalars

        Example:
            >>> Operation.from_coefficients([0, 1, 1, 0])  # Pauli X
        """
        if isinstance(coefs, (str, bytes)) or not (
                isinstance(coefs, Sequence) or isinstance(coefs, np.ndarray)):
            raise InvalidArgumentError(
                f"Don't know how to convert into a 2x2 matrix: {coefs!r}"
            )
        if len(coefs) != 4:
            raise InvalidArgumentError(
                f"Wrong number of coefficients, expected 4: {coefs!r}"
            )
        return cls(*(to_scalar(v) for v in coefs))

    @classmethod
    def from_array(cls, array):
        """Build an operation from a 2x2 array-like (nested lists or numpy)."""
        return cls(*numeric_backend.coefficients_from_array(array))

    @classmethod
    def from_sympy(cls, matrix):
        """Build an operation from a numeric 2x2 sympy matrix.

        Raises:
            InvalidArgumentError: if the matrix is not 2x2 or has symbolic
                entries
        """
        if not isinstance(matrix, sympy.MatrixBase):
            raise InvalidArgumentError(f"Not a sympy matrix: {matrix!r}")
        if matrix.shape != (2, 2):
            raise InvalidArgumentError(
                f"Expected a 2x2 matrix, got shape {matrix.shape}"
            )
        for entry in matrix:
            if entry.free_symbols:
                raise InvalidArgumentError(f"Symbolic entry in matrix: {entry}")
        return cls(*(to_scalar(entry) for entry in matrix))

    @classmethod
    def from_rotation_vector(cls, v):
        """Operation corresponding to the given rotation.

        The direction of v picks the rotation axis and its length picks what
        fraction of a whole turn to rotate. For example
        [sqrt(1/8), 0, sqrt(1/8)] is a half turn around the X+Z axis, which is
        the Hadamard operation {{1, 1}, {1, -1}}/sqrt(2).

        Args:
            v: [x, y, z] sequence of real numbers

        Returns:
            Operation

        Raises:
            InvalidArgumentError: if v is not three real numbers
        """
        if isinstance(v, (str, bytes)) or not (
                isinstance(v, Sequence) or isinstance(v, np.ndarray)):
            raise InvalidArgumentError(f"Expected an [x, y, z] vector, got {v!r}")
        if (isinstance(v, np.ndarray) and v.ndim != 1) or len(v) != 3:
            raise InvalidArgumentError(
                f"Wrong number of components, expected 3: {v!r}"
            )
        x, y, z = (_to_real(component) * np.pi * 2 for component in v)

        # Phase correction discontinuity sits on this awkward plane
        s = 1 if -11*x + -13*y + -17*z >= 0 else -1
        theta = np.sqrt(x*x + y*y + z*z)
        sigma_v = PAULI_X.scaled_by(x).plus(
                  PAULI_Y.scaled_by(y)).plus(
                  PAULI_Z.scaled_by(z))

        logger.debug(
            "rotation vector %r: theta=%g, sign=%d, series sinc=%s",
            v, theta, s, abs(theta / 2) < SINC_SERIES_THRESHOLD,
        )

        ci = 0.5 * complex(1 + np.cos(s * theta), np.sin(s * theta))
        cv = (s * 0.5) * complex(np.sin(theta / 2) * _sinc(theta / 2),
                                 -s * _sinc(theta))

        return IDENTITY.scaled_by(ci).minus(sigma_v.scaled_by(cv))

    # ------------------------------------------------------------------------
    # Equality and display
    # ------------------------------------------------------------------------

    def is_equal_to(self, other):
        """Exact coefficient-wise equality.

        Returns False, instead of raising, for values that are not
        operations.
        """
        return isinstance(other, Operation) and self.coefficients == other.coefficients

    def is_approximately_equal_to(self, other, tolerance=DEFAULT_TOLERANCE):
        """Coefficient-wise equality up to tolerance.

        Returns False for values that are not operations.
        """
        if not isinstance(other, Operation):
            return False
        return numeric_backend.max_abs_difference(self, other) <= tolerance

    def is_unitary(self, tolerance=DEFAULT_TOLERANCE):
        """Check U U† = I up to tolerance."""
        return numeric_backend.is_unitary(self, tolerance)

    def to_display_string(self, decimals=None):
        """Text form of the matrix, e.g. {{1, 0}, {0, 1}}.

        Uses curly braces so the result can be pasted into Wolfram Alpha.

        Args:
            decimals: If given, round coefficients to this many places
        """
        a, b, c, d = (format_scalar(v, decimals) for v in self.coefficients)
        return "{{" + a + ", " + b + "}, {" + c + ", " + d + "}}"

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"Operation({self.to_display_string()})"

    def __eq__(self, other):
        return self.is_equal_to(other)

    def __hash__(self):
        return hash(self.coefficients)

    # ------------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------------

    def to_array(self):
        """Fresh numpy array [[a, b], [c, d]] of dtype complex."""
        return numeric_backend.to_array(self)

    def to_sympy(self, decimals=DEFAULT_DECIMALS):
        """sympy Matrix of the coefficients.

        Numerical noise is cleaned first, so integral parts become exact
        sympy integers (PAULI_Y gives Matrix([[0, -I], [I, 0]])).
        """
        entries = [
            sympy.sympify(clean_real(v.real, decimals))
            + sympy.I * sympy.sympify(clean_real(v.imag, decimals))
            for v in self.coefficients
        ]
        return sympy.Matrix(2, 2, entries)

    # ------------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------------

    def adjoint(self):
        """Conjugate transpose (the inverse, for unitary operations)."""
        return Operation(
            self._a.conjugate(),
            self._c.conjugate(),
            self._b.conjugate(),
            self._d.conjugate())

    @property
    def H(self):
        """Hermitian conjugate shortcut: U.H (numpy convention)"""
        return self.adjoint()

    @property
    def dag(self):
        """Hermitian conjugate shortcut: U.dag"""
        return self.adjoint()

    def scaled_by(self, v):
        """Multiply every coefficient by a real or complex factor."""
        v = to_scalar(v)
        return Operation(
            self._a * v, self._b * v,
            self._c * v, self._d * v)

    def plus(self, other):
        """Element-wise sum."""
        _require_operation(other, "add")
        return Operation(
            self._a + other.a, self._b + other.b,
            self._c + other.c, self._d + other.d)

    def minus(self, other):
        """Element-wise difference."""
        _require_operation(other, "subtract")
        return Operation(
            self._a - other.a, self._b - other.b,
            self._c - other.c, self._d - other.d)

    def times(self, other):
        """Matrix product self * other (apply other first, then self)."""
        _require_operation(other, "multiply")
        a, b, c, d = self.coefficients
        e, f, g, h = other.coefficients

        return Operation(
            a*e + b*g, a*f + b*h,
            c*e + d*g, c*f + d*h)

    def conj_op(self, other):
        """Operator conjugation: self >> other = self† * other * self

        For unitary U: U >> A = U† A U
        """
        return self.adjoint().times(other).times(self)

    # ------------------------------------------------------------------------
    # Python operators
    # ------------------------------------------------------------------------

    def __add__(self, other):
        if isinstance(other, Operation):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Operation):
            return self.minus(other)
        return NotImplemented

    def __neg__(self):
        return self.scaled_by(-1)

    def __mul__(self, other):
        """Non-commutative product, or scaling when other is a number."""
        if isinstance(other, Operation):
            return self.times(other)
        if is_scalar(other):
            return self.scaled_by(other)
        return NotImplemented

    def __rmul__(self, other):
        """Right multiplication (for scalar * operation)."""
        if is_scalar(other):
            return self.scaled_by(other)
        return NotImplemented

    def __truediv__(self, other):
        """Division by scalar."""
        if is_scalar(other):
            return self.scaled_by(1 / to_scalar(other))
        return NotImplemented

    def __rshift__(self, other):
        """Operator conjugation: U >> A = U† A U"""
        if isinstance(other, Operation):
            return self.conj_op(other)
        return NotImplemented


def _to_real(value):
    """float() of a real scalar; complex and non-numeric values are rejected."""
    if (not is_scalar(value)
            or isinstance(value, (complex, np.complexfloating, np.ndarray))):
        raise InvalidArgumentError(f"Not a real number: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Not a real number: {value!r}") from e


def _require_operation(other, action):
    if not isinstance(other, Operation):
        raise TypeError(f"Cannot {action} Operation with {type(other)}")


def _sinc(t):
    """sin(t)/t, with a series expansion near zero."""
    if abs(t) < SINC_SERIES_THRESHOLD:
        return 1 - t*t / 6.0
    return np.sin(t) / t


# ============================================================================
# COMMUTATORS AND ANTICOMMUTATORS
# ============================================================================

def comm(A, B):
    """Compute commutator: [A, B] = AB - BA

    Example:
        >>> comm(PAULI_X, PAULI_Y)  # 2i Z
        >>> comm(PAULI_X, PAULI_X)  # zero matrix
    """
    return A.times(B).minus(B.times(A))


def acomm(A, B):
    """Compute anticommutator: {A, B} = AB + BA

    Distinct Pauli matrices anticommute: acomm(PAULI_X, PAULI_Z) is zero.
    """
    return A.times(B).plus(B.times(A))


def conj_op(U, A):
    """Operator conjugation: U >> A = U† A U."""
    return U.conj_op(A)


# ============================================================================
# NAMED OPERATIONS
# ============================================================================

IDENTITY = Operation.from_coefficients([1, 0, 0, 1])
PAULI_X = Operation.from_coefficients([0, 1, 1, 0])
PAULI_Y = Operation.from_coefficients([0, complex(0, -1), complex(0, 1), 0])
PAULI_Z = Operation.from_coefficients([1, 0, 0, -1])
HADAMARD = Operation.from_coefficients([1, 1, 1, -1]).scaled_by(np.sqrt(0.5))
