"""
CycleState - Snapshot of the compressor / refrigeration cycle

A CycleState is never modified in place. Models return a new snapshot
built with dataclasses.replace, and the engine swaps its reference.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict


# Refrigerant condition at the 8 boundary points of the cycle
REFRIGERANT_STATE_LABELS: Dict[str, str] = {
    "compressor_inlet": "Superheated vapor",
    "compressor_outlet": "High-pressure superheated vapor",
    "condenser_inlet": "High-pressure superheated vapor",
    "condenser_outlet": "Subcooled liquid",
    "expansion_valve_inlet": "Subcooled liquid",
    "expansion_valve_outlet": "Liquid-vapor mixture",
    "evaporator_inlet": "Liquid-vapor mixture",
    "evaporator_outlet": "Superheated vapor",
}

ALERT_KEYS = (
    "high_pressure",
    "low_pressure",
    "high_temperature",
    "low_refrigerant",
    "high_superheat",
    "low_superheat",
    "high_subcooling",
    "low_subcooling",
    "compressor_overload",
    "frozen_evaporator",
)


def _no_alerts() -> Dict[str, bool]:
    return {key: False for key in ALERT_KEYS}


@dataclass(frozen=True)
class CycleState:
    """
    Complete operating state of one simulated cycle.

    Attributes:
        is_running: Master on/off switch
        compressor_rpm: Drive speed [rpm], 0 when stopped
        system_temperature: Cooled space temperature [°C]
        target_temperature: Operator setpoint [°C]
        ambient_temperature: Surroundings temperature [°C]
        compressor_pressure: Compressor chamber pressure [bar]
        condenser_pressure: Discharge side pressure [bar]
        evaporator_pressure: Suction side pressure [bar]
        refrigerant_flow: Mass flow scalar [kg/s-equivalent]
        power_consumption: Electrical power [W]
        cop: Coefficient of performance [-]
        cooling_capacity: Refrigeration effect [W]
        superheat: Evaporator outlet superheat [°C]
        subcooling: Condenser outlet subcooling [°C]
        refrigerant_charge: Charge as % of nominal
        expansion_valve_opening: Valve opening [%]
        compressor_efficiency: [%]
        condenser_efficiency: [%]
        evaporator_efficiency: [%]
        refrigerant_type: Refrigerant designation
        refrigerant_state: Phase label at each of the 8 cycle points
        alerts: Threshold flags, see ALERT_KEYS
        defrost_mode: Evaporator defrost regime active
        motor_temperature: Motor winding temperature [°C]
        motor_efficiency: Motor efficiency [%]
        motor_load: Motor load fraction [0-1]
        motor_balance: Rotor balance quality [0-1], 1 = perfect
        friction_coefficient: Bearing friction coefficient [-]
        vibration_level: Housing vibration amplitude [m]
        thermal_expansion: Relative thermal growth of the piston [-]
    """
    is_running: bool = False
    compressor_rpm: float = 0.0
    system_temperature: float = 25.0
    target_temperature: float = 5.0
    ambient_temperature: float = 25.0

    compressor_pressure: float = 10.0
    condenser_pressure: float = 15.0
    evaporator_pressure: float = 4.0

    refrigerant_flow: float = 0.0
    power_consumption: float = 0.0
    cop: float = 3.0
    cooling_capacity: float = 0.0
    superheat: float = 5.0
    subcooling: float = 3.0

    refrigerant_charge: float = 100.0
    expansion_valve_opening: float = 50.0
    compressor_efficiency: float = 85.0
    condenser_efficiency: float = 90.0
    evaporator_efficiency: float = 90.0

    refrigerant_type: str = "R-134a"
    refrigerant_state: Dict[str, str] = field(
        default_factory=lambda: dict(REFRIGERANT_STATE_LABELS)
    )
    alerts: Dict[str, bool] = field(default_factory=_no_alerts)
    defrost_mode: bool = False

    # Motor side
    motor_temperature: float = 45.0
    motor_efficiency: float = 92.0
    motor_load: float = 0.5
    motor_balance: float = 0.9
    friction_coefficient: float = 0.02
    vibration_level: float = 0.1
    thermal_expansion: float = 0.0

    def active_alerts(self) -> list:
        """Names of the alert flags currently raised."""
        return [name for name, value in self.alerts.items() if value]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert state to dictionary representation.

        Returns:
            Dictionary of all fields (mappings are copied)
        """
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = dict(value) if isinstance(value, dict) else value
        return data


@dataclass(frozen=True)
class AlertMessage:
    """
    Operator-facing alert.

    Attributes:
        severity: "error", "warning" or "info"
        title: Short headline
        message: Detail text with the offending value
    """
    severity: str
    title: str
    message: str


def refrigeration_defaults() -> CycleState:
    """Initial state of the refrigeration cycle at process start."""
    return CycleState()


def motor_defaults() -> CycleState:
    """Initial state of the motor-side simplified model."""
    return CycleState(
        system_temperature=5.0,
        target_temperature=2.0,
        compressor_pressure=12.5,
        condenser_pressure=18.2,
        evaporator_pressure=4.8,
        power_consumption=750.0,
    )
