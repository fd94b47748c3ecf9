"""
quop.scalar: the complex-number contract used by operations

Operations store their coefficients as Python ``complex`` values. This module
coerces user input into that type and renders it in the compact ``a+bi``
notation used by the nested-brace matrix display.
"""

import numbers

DEFAULT_DECIMALS = 10

__all__ = [
    'InvalidArgumentError', 'DEFAULT_DECIMALS',
    'is_scalar', 'to_scalar', 'clean_real', 'clean_scalar', 'format_scalar',
]


class InvalidArgumentError(ValueError):
    """Raised when a value cannot be used to build an operation.

    Always signals a programming error at the call site, never something a
    retry would fix.
    """


# ============================================================================
# COERCION
# ============================================================================


def is_scalar(value):
    """Check whether a value satisfies the scalar contract.

    Any ``numbers.Number`` qualifies (int, float, complex, numpy scalars),
    except ``bool``. Other objects qualify when they convert through
    ``__complex__`` (sympy numbers, for example).
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return True
    return hasattr(value, '__complex__') and not isinstance(value, (str, bytes))


def to_scalar(value):
    """Convert a real number or complex value into a ``complex``.

    Args:
        value: int, float, complex, numpy scalar or sympy number

    Returns:
        complex

    Raises:
        InvalidArgumentError: if the value is not numeric (symbolic sympy
            expressions included)
    """
    if not is_scalar(value):
        raise InvalidArgumentError(f"Not a scalar: {value!r}")
    try:
        return complex(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Not a scalar: {value!r}") from e


# ============================================================================
# NOISE CLEANING
# ============================================================================


def clean_real(num, decimals=DEFAULT_DECIMALS):
    """Clean numerical noise from a real number.

    Rounds to ``decimals`` places, turns values very close to zero into
    ``0`` and values very close to an integer into that ``int``.

    Args:
        num: float to clean
        decimals: Number of decimal places to round to (default 10)

    Returns:
        int or float
    """
    rounded = round(float(num), decimals)
    if abs(rounded) < 10**(-decimals):
        return 0
    if abs(rounded - round(rounded)) < 10**(-decimals):
        return int(round(rounded))
    return rounded


def clean_scalar(value, decimals=DEFAULT_DECIMALS):
    """Clean both parts of a scalar, returning a ``complex``."""
    value = to_scalar(value)
    return complex(clean_real(value.real, decimals),
                   clean_real(value.imag, decimals))


# ============================================================================
# DISPLAY
# ============================================================================


def _format_real(x):
    if x == 0:
        # also folds -0.0
        return "0"
    if float(x).is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(float(x))


def _format_imag(y):
    if y == 1:
        return "i"
    if y == -1:
        return "-i"
    return _format_real(y) + "i"


def format_scalar(value, decimals=None):
    """Render a scalar the way the matrix display expects.

    Real values print without an imaginary part and integral values without a
    decimal point. The imaginary unit is written ``i``.

    Example:
        >>> format_scalar(1)
        '1'
        >>> format_scalar(complex(0, -1))
        '-i'
        >>> format_scalar(complex(0.5, -0.5))
        '0.5-0.5i'

    Args:
        value: Scalar to render
        decimals: If given, round both parts to this many places first

    Returns:
        str
    """
    value = to_scalar(value)
    if decimals is not None:
        value = clean_scalar(value, decimals)

    re_part, im_part = value.real, value.imag
    if im_part == 0:
        return _format_real(re_part)
    if re_part == 0:
        return _format_imag(im_part)

    imag_text = _format_imag(abs(im_part))
    separator = "-" if im_part < 0 else "+"
    return _format_real(re_part) + separator + imag_text
