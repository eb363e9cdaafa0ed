"""
Motor Controller - Orchestration layer

Owns the simplified motor-side simulation.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import time
from typing import Callable, Dict, List, Optional

from app_hermetic.core.engine import SimulationConfig, SimulationEngine
from app_hermetic.core.noise import NoiseSource
from app_hermetic.core.state import AlertMessage, CycleState, motor_defaults
from app_hermetic.modules.motor.model import MotorConfig, MotorModel


class MotorController(SimulationEngine):
    """
    Controller for the motor simulation.

    Runs independently of the refrigeration controller; the two share no
    state. Setpoint changes wait for the next tick.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        motor_config: Optional[MotorConfig] = None,
        state: Optional[CycleState] = None,
        noise: Optional[NoiseSource] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize controller with the simplified motor model."""
        config = config or SimulationConfig(
            fidelity="SIMPLE", start_rpm=1200.0, step_on_action=False
        )
        super().__init__(
            config=config,
            state=state or motor_defaults(),
            model=MotorModel(motor_config),
            noise=noise,
            clock=clock,
        )

    def get_default_params(self) -> Dict:
        """Get default parameter set for UI initialization."""
        defaults = motor_defaults()
        return {
            'target_temperature': defaults.target_temperature,   # °C
            'compressor_rpm': self.config.start_rpm,              # rpm
            'motor_balance': defaults.motor_balance,             # 0-1
            'friction_coefficient': defaults.friction_coefficient,
            'defrost_mode': False,
        }

    def alert_messages(self) -> List[AlertMessage]:
        """Operator alerts of the motor panel; empty while stopped."""
        s = self.state
        if not s.is_running:
            return []

        messages = []

        if s.motor_temperature > 80:
            messages.append(AlertMessage(
                "error", "Critical motor temperature",
                f"Motor temperature is {s.motor_temperature:.1f} °C. Immediate action required.",
            ))
        elif s.motor_temperature > 70:
            messages.append(AlertMessage(
                "warning", "High motor temperature",
                f"Motor temperature is {s.motor_temperature:.1f} °C. Consider reducing the load.",
            ))

        if s.power_consumption > 1400:
            messages.append(AlertMessage(
                "warning", "High power consumption",
                f"Power consumption is {s.power_consumption:.0f} W. Check for mechanical problems.",
            ))

        if s.compressor_rpm > 2800:
            messages.append(AlertMessage(
                "warning", "High speed",
                f"Motor speed is {s.compressor_rpm:.0f} rpm, close to the rated maximum.",
            ))

        if s.system_temperature > s.target_temperature + 10:
            messages.append(AlertMessage(
                "warning", "Temperature deviation",
                f"System temperature ({s.system_temperature:.1f} °C) is well above the "
                f"target ({s.target_temperature:.1f} °C).",
            ))

        return messages
