"""
Motor Module - Simplified hermetic motor model

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Noisy per-tick motor update
- controller.py: Simulation engine preset and motor alert rules
- view.py: Console output and Tkinter window with crank animation

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.modules.motor.model import MotorConfig, MotorModel
from app_hermetic.modules.motor.controller import MotorController
from app_hermetic.modules.motor.view import MotorView

__all__ = [
    "MotorConfig",
    "MotorModel",
    "MotorController",
    "MotorView",
]
