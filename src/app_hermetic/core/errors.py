"""
Simulation errors

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import math


class DomainError(ValueError):
    """
    Raised when a physical formula is evaluated outside its domain.

    Examples: crank radius longer than the connecting rod (negative value
    under the square root), zero torque in the acceleration time, zero
    compressor efficiency in the power formula.
    """


def require_finite(name: str, value: float) -> float:
    """
    Check that a computed quantity is a finite number.

    Args:
        name: Quantity name used in the error message
        value: Value to check

    Returns:
        The value unchanged

    Raises:
        DomainError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise DomainError(f"{name} is not finite ({value})")
    return value
