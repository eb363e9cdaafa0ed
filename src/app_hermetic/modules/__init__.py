"""Modules package - Mechanical and thermodynamic parts of the compressor"""

from app_hermetic.modules.refrigeration import (
    RefrigerationCycleModel,
    RefrigerationController,
    RefrigerationView,
)
from app_hermetic.modules.motor import (
    MotorModel,
    MotorController,
    MotorView,
)

__all__ = [
    "RefrigerationCycleModel",
    "RefrigerationController",
    "RefrigerationView",
    "MotorModel",
    "MotorController",
    "MotorView",
]
