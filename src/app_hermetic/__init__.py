"""
app_hermetic - Hermetic Compressor & Refrigeration Cycle Simulator

Interactive simulation of a hermetic refrigeration compressor: slider-crank
kinematics, a simplified motor model and a detailed vapor-compression
cycle, driven by a periodic clock.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

__version__ = "0.1.0"

from app_hermetic.core.errors import DomainError
from app_hermetic.core.state import CycleState
from app_hermetic.core.engine import SimulationConfig, SimulationEngine

__all__ = [
    "DomainError",
    "CycleState",
    "SimulationConfig",
    "SimulationEngine",
]
