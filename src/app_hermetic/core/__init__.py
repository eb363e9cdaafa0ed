"""Core simulation components: state, history, noise and engine"""

from app_hermetic.core.errors import DomainError
from app_hermetic.core.state import AlertMessage, CycleState, motor_defaults, refrigeration_defaults
from app_hermetic.core.history import PerformanceDataPoint, PerformanceHistory
from app_hermetic.core.noise import NoiseSource, ZeroNoise
from app_hermetic.core.engine import (
    InputLimits,
    SimulationConfig,
    SimulationEngine,
    build_model,
)

__all__ = [
    "DomainError",
    "AlertMessage",
    "CycleState",
    "motor_defaults",
    "refrigeration_defaults",
    "PerformanceDataPoint",
    "PerformanceHistory",
    "NoiseSource",
    "ZeroNoise",
    "InputLimits",
    "SimulationConfig",
    "SimulationEngine",
    "build_model",
]
