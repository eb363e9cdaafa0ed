"""
Refrigeration Cycle Model - Detailed vapor-compression cycle step

Coupled pressure / flow / power / temperature update driven by compressor
speed, expansion valve opening, refrigerant charge and component
efficiencies. Not a validated thermodynamic model: it produces bounded,
self-consistent, smoothly varying signals.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from app_hermetic.core.errors import DomainError, require_finite
from app_hermetic.core.noise import NoiseSource
from app_hermetic.core.state import REFRIGERANT_STATE_LABELS, CycleState

logger = logging.getLogger(__name__)


@dataclass
class AlertThresholds:
    """Fixed limits of the cycle alert flags."""
    high_condenser_pressure: float = 18.0   # bar
    low_evaporator_pressure: float = 2.0    # bar
    temperature_margin: float = 10.0        # °C above target
    frozen_temperature: float = -5.0        # °C
    high_superheat: float = 10.0            # °C
    low_superheat: float = 2.0              # °C
    high_subcooling: float = 8.0            # °C
    low_subcooling: float = 1.0             # °C
    overload_power: float = 1200.0          # W
    low_charge: float = 70.0                # %


@dataclass
class CycleConfig:
    """
    Constants of the detailed cycle model.

    Attributes:
        rated_rpm: Speed that maps to rpm factor 1.0 [rpm]
        equilibrium_pressure: Standstill pressure of all sides [bar]
        equalization_rate: Fraction of the gap closed per idle tick [-]
        ambient_leak: Heat leak coefficient toward ambient [1/tick]
        defrost_rate: Temperature rise per defrost tick [°C]
        defrost_max_temperature: Defrost stops warming above this [°C]
        cop_max: Upper bound of the reported COP [-]
        thresholds: Alert limits
    """
    rated_rpm: float = 3000.0
    equilibrium_pressure: float = 10.0
    equalization_rate: float = 0.1
    ambient_leak: float = 0.01
    defrost_rate: float = 0.2
    defrost_max_temperature: float = 10.0
    cop_max: float = 10.0
    thresholds: AlertThresholds = field(default_factory=AlertThresholds)


def evaluate_alerts(
    condenser_pressure: float,
    evaporator_pressure: float,
    system_temperature: float,
    target_temperature: float,
    superheat: float,
    subcooling: float,
    power_consumption: float,
    refrigerant_charge: float,
    thresholds: Optional[AlertThresholds] = None,
) -> Dict[str, bool]:
    """
    Recompute every alert flag from fixed thresholds.

    Returns:
        Dictionary with exactly the keys of ALERT_KEYS
    """
    t = thresholds or AlertThresholds()
    alerts = {
        "high_pressure": condenser_pressure > t.high_condenser_pressure,
        "low_pressure": evaporator_pressure < t.low_evaporator_pressure,
        "high_temperature": system_temperature > target_temperature + t.temperature_margin,
        "low_refrigerant": refrigerant_charge < t.low_charge,
        "high_superheat": superheat > t.high_superheat,
        "low_superheat": superheat < t.low_superheat,
        "high_subcooling": subcooling > t.high_subcooling,
        "low_subcooling": subcooling < t.low_subcooling,
        "compressor_overload": power_consumption > t.overload_power,
        "frozen_evaporator": system_temperature < t.frozen_temperature,
    }
    return alerts


class RefrigerationCycleModel:
    """
    Detailed model of the refrigeration cycle.

    step() is a pure function of the previous snapshot: it returns a new
    CycleState and never touches the one it was given.
    """

    fidelity = "DETAILED"

    def __init__(self, config: Optional[CycleConfig] = None):
        self.config = config or CycleConfig()

    def step(self, state: CycleState, noise: Optional[NoiseSource] = None) -> CycleState:
        """
        Advance the cycle by one tick.

        Args:
            state: Previous snapshot (operator setpoints included)
            noise: Unused by the detailed model, accepted for a uniform
                model interface

        Returns:
            New snapshot

        Raises:
            DomainError: If efficiencies make the formulas undefined or a
                result is not finite
        """
        if not state.is_running:
            return self._equalize(state)
        return self._run(state)

    # ========== Standstill ==========

    def _equalize(self, state: CycleState) -> CycleState:
        """Passive pressure equalization after shutdown."""
        cfg = self.config
        p_eq = cfg.equilibrium_pressure
        rate = cfg.equalization_rate
        return replace(
            state,
            compressor_pressure=state.compressor_pressure + (p_eq - state.compressor_pressure) * rate,
            condenser_pressure=state.condenser_pressure + (p_eq - state.condenser_pressure) * rate,
            evaporator_pressure=state.evaporator_pressure + (p_eq - state.evaporator_pressure) * rate,
            refrigerant_flow=0.0,
            power_consumption=0.0,
            cooling_capacity=0.0,
            cop=0.0,
        )

    # ========== Running ==========

    def _run(self, state: CycleState) -> CycleState:
        cfg = self.config

        if state.compressor_efficiency <= 0:
            message = (
                f"Compressor efficiency must be positive, got {state.compressor_efficiency}"
            )
            logger.error(message)
            raise DomainError(message)

        # Normalized drivers
        rpm_factor = state.compressor_rpm / cfg.rated_rpm
        charge_factor = state.refrigerant_charge / 100
        valve_factor = state.expansion_valve_opening / 100

        # Pressures: suction falls with speed and rises with valve opening,
        # discharge does the opposite, compressor chamber in between
        base_evaporator = 4 + valve_factor * 2 - rpm_factor * 1.5
        base_condenser = 12 + rpm_factor * 8 - valve_factor * 2
        base_compressor = base_evaporator + (base_condenser - base_evaporator) * (
            state.compressor_efficiency / 100
        )

        evaporator_pressure = base_evaporator * charge_factor
        condenser_pressure = base_condenser * charge_factor
        compressor_pressure = base_compressor * charge_factor

        # Flow
        pressure_diff = condenser_pressure - evaporator_pressure
        refrigerant_flow = rpm_factor * 100 * charge_factor * (pressure_diff / 10)

        # Power
        base_power = 200 + rpm_factor * 800
        power_consumption = base_power * (pressure_diff / 10) * (100 / state.compressor_efficiency)

        # Cooling capacity and COP
        cooling_capacity = (refrigerant_flow * state.evaporator_efficiency / 100) * 10
        if power_consumption > 0:
            cop = min(max(cooling_capacity / power_consumption, 0.0), cfg.cop_max)
        else:
            cop = 0.0

        # Superheat / subcooling
        closure = (100 - state.expansion_valve_opening) / 20
        superheat = 5 + closure - rpm_factor * 2
        subcooling = 3 + rpm_factor * 2 - closure

        # Temperature
        temperature = self._next_temperature(state, cooling_capacity)

        # Alerts use the temperature the tick started from
        alerts = evaluate_alerts(
            condenser_pressure=condenser_pressure,
            evaporator_pressure=evaporator_pressure,
            system_temperature=state.system_temperature,
            target_temperature=state.target_temperature,
            superheat=superheat,
            subcooling=subcooling,
            power_consumption=power_consumption,
            refrigerant_charge=state.refrigerant_charge,
            thresholds=cfg.thresholds,
        )

        new_state = replace(
            state,
            compressor_pressure=compressor_pressure,
            condenser_pressure=condenser_pressure,
            evaporator_pressure=evaporator_pressure,
            refrigerant_flow=refrigerant_flow,
            power_consumption=power_consumption,
            cooling_capacity=cooling_capacity,
            cop=cop,
            superheat=superheat,
            subcooling=subcooling,
            # Phase labels do not vary with the operating point
            refrigerant_state=dict(REFRIGERANT_STATE_LABELS),
            system_temperature=temperature,
            alerts=alerts,
        )
        self._check_finite(new_state)
        return new_state

    def _next_temperature(self, state: CycleState, cooling_capacity: float) -> float:
        """
        First-order pull toward the target plus ambient leakage.

        Defrost warms by a fixed rate up to defrost_max_temperature.
        """
        cfg = self.config
        T = state.system_temperature

        if state.defrost_mode:
            if T >= cfg.defrost_max_temperature:
                return T
            return min(T + cfg.defrost_rate, cfg.defrost_max_temperature)

        if state.compressor_rpm <= 0:
            return T

        cooling_power = (cooling_capacity / 1000) * 0.1
        ambient_effect = (state.ambient_temperature - T) * cfg.ambient_leak
        return T - (T - state.target_temperature) * cooling_power + ambient_effect

    @staticmethod
    def _check_finite(state: CycleState) -> None:
        for name in (
            "compressor_pressure",
            "condenser_pressure",
            "evaporator_pressure",
            "refrigerant_flow",
            "power_consumption",
            "cop",
            "superheat",
            "subcooling",
            "system_temperature",
        ):
            require_finite(name, getattr(state, name))
