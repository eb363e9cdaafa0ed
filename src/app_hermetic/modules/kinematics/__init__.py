"""
Kinematics Module - Slider-crank mechanics of the hermetic compressor

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Pure mechanical and thermal formulas
- controller.py: Frame-rate crank mechanism driver
- view.py: Console output and Tkinter canvas of the crank mechanism

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.modules.kinematics.model import (
    DEFAULT_PROPERTIES,
    PhysicalProperties,
    Vibration,
)
from app_hermetic.modules.kinematics.controller import (
    CrankFrame,
    CrankMechanism,
    CrankMechanismController,
)
from app_hermetic.modules.kinematics.view import CrankMechanismView

__all__ = [
    "DEFAULT_PROPERTIES",
    "PhysicalProperties",
    "Vibration",
    "CrankFrame",
    "CrankMechanism",
    "CrankMechanismController",
    "CrankMechanismView",
]
