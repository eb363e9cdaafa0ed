"""
Refrigeration Module - Detailed vapor-compression cycle

Architecture: MVC (Model-View-Controller)

Components:
- model.py: Cycle step (pressures, flow, power, COP, temperature, alerts)
- controller.py: Simulation engine preset and operator alert rules
- view.py: Console output and Tkinter dashboard with Matplotlib charts

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from app_hermetic.modules.refrigeration.model import (
    AlertThresholds,
    CycleConfig,
    RefrigerationCycleModel,
    evaluate_alerts,
)
from app_hermetic.modules.refrigeration.controller import RefrigerationController
from app_hermetic.modules.refrigeration.view import RefrigerationView

__all__ = [
    "AlertThresholds",
    "CycleConfig",
    "RefrigerationCycleModel",
    "evaluate_alerts",
    "RefrigerationController",
    "RefrigerationView",
]
