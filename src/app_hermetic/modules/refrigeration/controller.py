"""
Refrigeration Controller - Orchestration layer

Owns the detailed refrigeration cycle simulation and turns its state into
operator-facing alerts and ratings.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import time
from typing import Callable, Dict, List, Optional

from app_hermetic.core.engine import SimulationConfig, SimulationEngine
from app_hermetic.core.noise import NoiseSource
from app_hermetic.core.state import AlertMessage, CycleState, refrigeration_defaults
from app_hermetic.modules.refrigeration.model import CycleConfig, RefrigerationCycleModel


INFO_TIPS = (
    ("Preventive maintenance",
     "Check filters and connections every 1000 operating hours."),
    ("Efficiency tip",
     "A target between -5 °C and 0 °C gives the best energy efficiency."),
    ("Defrost cycle",
     "Run the defrost mode periodically to keep the evaporator efficient."),
)


class RefrigerationController(SimulationEngine):
    """
    Controller for the refrigeration cycle simulation.

    A SimulationEngine preset to the detailed model, plus the alert
    rules of the refrigeration panel.
    """

    INFO_TIP_PROBABILITY = 0.01

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        cycle_config: Optional[CycleConfig] = None,
        state: Optional[CycleState] = None,
        noise: Optional[NoiseSource] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize controller with the detailed cycle model."""
        config = config or SimulationConfig(fidelity="DETAILED", start_rpm=1500.0)
        super().__init__(
            config=config,
            state=state or refrigeration_defaults(),
            model=RefrigerationCycleModel(cycle_config),
            noise=noise,
            clock=clock,
        )

    def get_default_params(self) -> Dict:
        """Get default parameter set for UI initialization."""
        defaults = refrigeration_defaults()
        return {
            'target_temperature': defaults.target_temperature,   # °C
            'compressor_rpm': self.config.start_rpm,              # rpm
            'refrigerant_charge': defaults.refrigerant_charge,   # %
            'expansion_valve_opening': defaults.expansion_valve_opening,  # %
            'compressor_efficiency': defaults.compressor_efficiency,      # %
            'condenser_efficiency': defaults.condenser_efficiency,        # %
            'evaporator_efficiency': defaults.evaporator_efficiency,      # %
            'ambient_temperature': defaults.ambient_temperature,          # °C
            'defrost_mode': False,
        }

    def cop_rating(self) -> str:
        """
        Classify the current COP.

        Returns:
            "low" below 1.5, "medium" below 2.5, else "good"
        """
        cop = self.state.cop
        if cop < 1.5:
            return "low"
        if cop < 2.5:
            return "medium"
        return "good"

    def alert_messages(self) -> List[AlertMessage]:
        """
        Operator alerts for the current state.

        Nothing is reported while the system is stopped. An occasional
        informational tip is drawn from the noise source while the
        compressor turns.
        """
        s = self.state
        if not s.is_running:
            return []

        messages = []

        if s.system_temperature > s.target_temperature + 15:
            messages.append(AlertMessage(
                "error", "Critical temperature",
                f"System temperature is {s.system_temperature:.1f} °C, far above the "
                f"{s.target_temperature:.1f} °C target.",
            ))
        elif s.alerts["high_temperature"]:
            messages.append(AlertMessage(
                "warning", "High temperature",
                f"System temperature is {s.system_temperature:.1f} °C, above the "
                f"{s.target_temperature:.1f} °C target.",
            ))

        if s.condenser_pressure > 20:
            messages.append(AlertMessage(
                "warning", "High condenser pressure",
                f"Condenser pressure is {s.condenser_pressure:.1f} bar. Check ventilation.",
            ))

        if s.alerts["low_pressure"]:
            messages.append(AlertMessage(
                "warning", "Low evaporator pressure",
                f"Evaporator pressure is {s.evaporator_pressure:.1f} bar. Check for leaks.",
            ))

        if s.compressor_pressure > 18:
            messages.append(AlertMessage(
                "error", "High compressor pressure",
                f"Compressor pressure is {s.compressor_pressure:.1f} bar. Risk of equipment damage.",
            ))

        if s.alerts["low_refrigerant"]:
            messages.append(AlertMessage(
                "warning", "Low refrigerant charge",
                f"Charge is {s.refrigerant_charge:.0f} % of nominal. Possible leak.",
            ))

        if s.alerts["compressor_overload"]:
            messages.append(AlertMessage(
                "error", "Compressor overload",
                f"Power draw is {s.power_consumption:.0f} W.",
            ))

        if s.alerts["frozen_evaporator"]:
            messages.append(AlertMessage(
                "warning", "Evaporator icing",
                "Temperature below -5 °C. Consider a defrost cycle.",
            ))

        if s.compressor_rpm > 0 and self.noise.chance(self.INFO_TIP_PROBABILITY):
            title, text = self.noise.choice(INFO_TIPS)
            messages.append(AlertMessage("info", title, text))

        return messages
