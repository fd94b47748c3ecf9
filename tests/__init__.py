# Tests for quop
#
# Test organization mirrors source structure:
#   - test_scalar.py: scalar coercion and display
#   - test_operation.py: construction, equality, display and algebra
#   - test_rotation.py: rotation-vector conversion
#   - test_numeric_backend.py: numpy and sympy matrix views
#
# Running tests:
#   pytest tests/
#   pytest tests/test_rotation.py -v
