"""Construction, equality, display and algebra of operations."""
import numpy as np
import pytest

from quop import (
    HADAMARD, IDENTITY, PAULI_X, PAULI_Y, PAULI_Z, InvalidArgumentError,
    Operation, acomm, comm, conj_op,
)

ZERO = Operation(0, 0, 0, 0)
ARBITRARY = Operation(complex(0.3, 0.4), -1.5, complex(0, 2), complex(0.25, -0.75))


# ============================================================================
# CONSTRUCTION
# ============================================================================

def test_constructor_stores_complex_coefficients():
    op = Operation(1, 2.5, 3j, np.float64(-4))
    assert op.coefficients == (1 + 0j, 2.5 + 0j, 3j, -4 + 0j)
    assert all(isinstance(v, complex) for v in op.coefficients)


@pytest.mark.parametrize("bad", ["1", None, [1], True])
def test_constructor_rejects_non_scalars(bad):
    with pytest.raises(InvalidArgumentError):
        Operation(bad, 0, 0, 1)
    with pytest.raises(InvalidArgumentError):
        Operation(1, 0, 0, bad)


def test_from_coefficients():
    op = Operation.from_coefficients([1, 2j, 3, 4])
    assert op.a == 1 and op.b == 2j and op.c == 3 and op.d == 4
    assert Operation.from_coefficients((0, 1, 1, 0)) == PAULI_X
    assert Operation.from_coefficients(np.array([1, 0, 0, -1])) == PAULI_Z


@pytest.mark.parametrize("coefs", [
    [1, 0, 0],
    [1, 0, 0, 1, 0],
    [],
    [1, 0, "x", 1],
    [1, None, 0, 1],
    "abcd",
    1234,
    None,
    {1, 2, 3, 4},
])
def test_from_coefficients_rejects_malformed_input(coefs):
    with pytest.raises(InvalidArgumentError):
        Operation.from_coefficients(coefs)


def test_named_operations():
    assert IDENTITY.coefficients == (1, 0, 0, 1)
    assert PAULI_X.coefficients == (0, 1, 1, 0)
    assert PAULI_Y.coefficients == (0, -1j, 1j, 0)
    assert PAULI_Z.coefficients == (1, 0, 0, -1)
    s = np.sqrt(0.5)
    assert HADAMARD.is_approximately_equal_to(Operation(s, s, s, -s), 1e-15)


# ============================================================================
# EQUALITY AND DISPLAY
# ============================================================================

def test_is_equal_to():
    assert IDENTITY.is_equal_to(Operation(1, 0, 0, 1))
    assert not IDENTITY.is_equal_to(PAULI_Z)
    assert IDENTITY == Operation.from_coefficients([1.0, 0.0, 0.0, 1.0])
    assert IDENTITY != PAULI_X


@pytest.mark.parametrize("other", [None, 1, 0.0, "{{1, 0}, {0, 1}}", [1, 0, 0, 1], object()])
def test_is_equal_to_foreign_values_is_false(other):
    assert IDENTITY.is_equal_to(other) is False
    assert (IDENTITY == other) is False


def test_hash_matches_equality():
    assert hash(IDENTITY) == hash(Operation(1, 0, 0, 1))
    assert len({IDENTITY, Operation(1, 0, 0, 1), PAULI_X}) == 2


def test_display_string():
    assert IDENTITY.to_display_string() == "{{1, 0}, {0, 1}}"
    assert PAULI_Y.to_display_string() == "{{0, -i}, {i, 0}}"
    assert PAULI_Z.to_display_string() == "{{1, 0}, {0, -1}}"
    assert Operation(0.5, 1 + 1j, 1 - 1j, -2j).to_display_string() == "{{0.5, 1+i}, {1-i, -2i}}"


def test_display_string_with_decimals():
    assert HADAMARD.to_display_string(decimals=4) == "{{0.7071, 0.7071}, {0.7071, -0.7071}}"


def test_str_and_repr():
    assert str(PAULI_X) == "{{0, 1}, {1, 0}}"
    assert repr(PAULI_X) == "Operation({{0, 1}, {1, 0}})"


# ============================================================================
# ALGEBRA
# ============================================================================

def test_adjoint():
    op = Operation(1j, 2, 3j, 4 - 1j)
    assert op.adjoint() == Operation(-1j, -3j, 2, 4 + 1j)
    assert op.H == op.adjoint()
    assert op.dag == op.adjoint()
    assert PAULI_Y.adjoint() == PAULI_Y


@pytest.mark.parametrize("op", [IDENTITY, PAULI_X, PAULI_Y, PAULI_Z, HADAMARD, ARBITRARY])
def test_adjoint_is_involution(op):
    assert op.adjoint().adjoint().is_equal_to(op)


@pytest.mark.parametrize("op", [PAULI_X, PAULI_Y, PAULI_Z, HADAMARD, ARBITRARY])
def test_identity_is_neutral(op):
    assert IDENTITY.times(op) == op
    assert op.times(IDENTITY) == op


def test_scaled_by():
    assert PAULI_Z.scaled_by(2) == Operation(2, 0, 0, -2)
    assert PAULI_X.scaled_by(1j) == Operation(0, 1j, 1j, 0)
    with pytest.raises(InvalidArgumentError):
        PAULI_X.scaled_by("2")


def test_plus_and_minus():
    assert PAULI_X.plus(PAULI_Z) == Operation(1, 1, 1, -1)
    assert PAULI_X.minus(PAULI_Z) == Operation(-1, 1, 1, 1)
    assert ARBITRARY.minus(ARBITRARY) == ZERO


def test_non_unitary_results_are_allowed():
    total = PAULI_X.plus(PAULI_Z)
    assert not total.is_unitary()
    assert total.scaled_by(np.sqrt(0.5)).is_unitary()


def test_times():
    op1 = Operation(1, 2, 3, 4)
    op2 = Operation(5, 6, 7, 8)
    assert op1.times(op2) == Operation(19, 22, 43, 50)
    assert op2.times(op1) == Operation(23, 34, 31, 46)


def test_times_does_not_commute():
    assert PAULI_X.times(PAULI_Y) == PAULI_Z.scaled_by(1j)
    assert PAULI_Y.times(PAULI_X) == PAULI_Z.scaled_by(-1j)
    assert PAULI_X.times(PAULI_Y) != PAULI_Y.times(PAULI_X)


def test_methods_do_not_mutate_receiver():
    op = Operation(1, 2, 3, 4)
    op.scaled_by(3)
    op.plus(PAULI_X)
    op.times(PAULI_Y)
    op.adjoint()
    assert op == Operation(1, 2, 3, 4)


def test_python_operators():
    assert PAULI_X + PAULI_Z == PAULI_X.plus(PAULI_Z)
    assert PAULI_X - PAULI_Z == PAULI_X.minus(PAULI_Z)
    assert PAULI_X * PAULI_Y == PAULI_X.times(PAULI_Y)
    assert PAULI_Z * 2 == PAULI_Z.scaled_by(2)
    assert 2 * PAULI_Z == PAULI_Z.scaled_by(2)
    assert 1j * PAULI_Z == PAULI_Z.scaled_by(1j)
    assert PAULI_Z / 2 == Operation(0.5, 0, 0, -0.5)
    assert -PAULI_Z == Operation(-1, 0, 0, 1)


def test_python_operators_reject_foreign_types():
    with pytest.raises(TypeError):
        PAULI_X + 1
    with pytest.raises(TypeError):
        PAULI_X - [1, 0, 0, 1]
    with pytest.raises(TypeError):
        PAULI_X * None
    with pytest.raises(TypeError):
        PAULI_X >> 2


def test_algebra_methods_reject_foreign_types():
    with pytest.raises(TypeError, match="Cannot add"):
        PAULI_X.plus(1)
    with pytest.raises(TypeError, match="Cannot subtract"):
        PAULI_X.minus([1, 0, 0, 1])
    with pytest.raises(TypeError, match="Cannot multiply"):
        PAULI_X.times(None)
    with pytest.raises(TypeError):
        conj_op(HADAMARD, "Z")


def test_commutators():
    assert comm(PAULI_X, PAULI_Y) == PAULI_Z.scaled_by(2j)
    assert comm(PAULI_X, PAULI_X) == ZERO
    assert acomm(PAULI_X, PAULI_Z) == ZERO
    assert acomm(PAULI_X, PAULI_X) == IDENTITY.scaled_by(2)


def test_conjugation():
    assert (HADAMARD >> PAULI_Z).is_approximately_equal_to(PAULI_X)
    assert conj_op(HADAMARD, PAULI_X).is_approximately_equal_to(PAULI_Z)
    assert (PAULI_X >> PAULI_Z) == -PAULI_Z
