"""
Motor Model - Simplified motor-side operating model

Loose per-tick update of the hermetic motor: winding temperature, power,
efficiency, a proportional pull of the cooled space toward its target and
noisy pressures that depend on speed only. Mechanical indicators
(vibration, thermal growth) come from the kinematics formulas.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

from app_hermetic.core.errors import require_finite
from app_hermetic.core.noise import NoiseSource, ZeroNoise
from app_hermetic.core.state import CycleState
from app_hermetic.modules.kinematics import model as kinematics


@dataclass
class MotorConfig:
    """
    Constants of the simplified motor model.

    Pressures follow base + (rpm/rated_rpm)·scale ± noise.
    """
    rated_rpm: float = 3000.0

    compressor_pressure_base: float = 12.5
    compressor_pressure_scale: float = 5.0
    compressor_pressure_noise: float = 0.25
    condenser_pressure_base: float = 18.2
    condenser_pressure_scale: float = 4.0
    condenser_pressure_noise: float = 0.3
    evaporator_pressure_base: float = 4.8
    evaporator_pressure_scale: float = -2.0
    evaporator_pressure_noise: float = 0.2

    # Space temperature control
    correction_gain: float = 0.1
    max_correction: float = 0.5
    temperature_noise: float = 0.2
    defrost_rate: float = 0.5
    defrost_max_temperature: float = 5.0

    # Winding temperature, power and efficiency
    motor_temperature_base: float = 35.0
    motor_temperature_scale: float = 50.0
    motor_temperature_noise: float = 5.0
    power_base: float = 200.0
    power_scale: float = 1200.0
    power_noise: float = 50.0
    efficiency_base: float = 95.0
    efficiency_noise: float = 2.0

    # Load estimate
    load_temperature_span: float = 15.0
    reference_temperature: float = 60.0


class MotorModel:
    """
    Simplified model of the compressor motor.

    All randomness is drawn from the injected NoiseSource.
    """

    fidelity = "SIMPLE"

    def __init__(self, config: Optional[MotorConfig] = None):
        self.config = config or MotorConfig()

    def step(self, state: CycleState, noise: Optional[NoiseSource] = None) -> CycleState:
        """
        Advance the motor state by one tick.

        Args:
            state: Previous snapshot
            noise: Random source for the perturbations (ZeroNoise when
                omitted)

        Returns:
            New snapshot
        """
        if noise is None:
            noise = ZeroNoise()

        if not state.is_running:
            return replace(state, motor_load=0.0, vibration_level=0.0)

        cfg = self.config
        rpm = state.compressor_rpm
        rpm_ratio = rpm / cfg.rated_rpm

        system_temperature = self._next_temperature(state, noise)

        compressor_pressure = (
            cfg.compressor_pressure_base
            + rpm_ratio * cfg.compressor_pressure_scale
            + noise.jitter(cfg.compressor_pressure_noise)
        )
        condenser_pressure = (
            cfg.condenser_pressure_base
            + rpm_ratio * cfg.condenser_pressure_scale
            + noise.jitter(cfg.condenser_pressure_noise)
        )
        evaporator_pressure = (
            cfg.evaporator_pressure_base
            + rpm_ratio * cfg.evaporator_pressure_scale
            + noise.jitter(cfg.evaporator_pressure_noise)
        )

        motor_temperature = state.motor_temperature
        power_consumption = state.power_consumption
        motor_efficiency = state.motor_efficiency
        if rpm > 0:
            motor_temperature = (
                cfg.motor_temperature_base
                + rpm_ratio * cfg.motor_temperature_scale
                + noise.uniform(0.0, cfg.motor_temperature_noise)
            )
            power_consumption = (
                cfg.power_base
                + rpm_ratio * cfg.power_scale
                + noise.uniform(0.0, cfg.power_noise)
            )
            motor_efficiency = (
                cfg.efficiency_base
                - (rpm / (2 * cfg.rated_rpm)) * 10
                + noise.uniform(0.0, cfg.efficiency_noise)
            )

        load = self.motor_load(state.is_running, rpm, system_temperature, state.target_temperature)
        vib = kinematics.vibration(rpm, state.motor_balance, load)
        growth = kinematics.thermal_expansion(
            1.0,
            motor_temperature,
            cfg.reference_temperature,
            kinematics.DEFAULT_PROPERTIES["piston"].thermal_expansion,
        ) - 1.0

        new_state = replace(
            state,
            system_temperature=system_temperature,
            compressor_pressure=compressor_pressure,
            condenser_pressure=condenser_pressure,
            evaporator_pressure=evaporator_pressure,
            motor_temperature=motor_temperature,
            power_consumption=power_consumption,
            motor_efficiency=motor_efficiency,
            motor_load=load,
            vibration_level=vib.amplitude,
            thermal_expansion=growth,
        )
        for name in ("system_temperature", "power_consumption", "motor_temperature"):
            require_finite(name, getattr(new_state, name))
        return new_state

    def _next_temperature(self, state: CycleState, noise: NoiseSource) -> float:
        cfg = self.config
        T = state.system_temperature

        if state.defrost_mode:
            return min(cfg.defrost_max_temperature, T + cfg.defrost_rate)

        if state.compressor_rpm <= 0:
            return T

        diff = T - state.target_temperature
        correction = min(abs(diff) * cfg.correction_gain, cfg.max_correction)
        return T - math.copysign(correction, diff) + noise.jitter(cfg.temperature_noise)

    def motor_load(
        self,
        is_running: bool,
        rpm: float,
        system_temperature: float,
        target_temperature: float,
    ) -> float:
        """
        Load fraction from the temperature gap and the speed.

        A larger gap to the target means more work; 0 when stopped.
        """
        if not is_running or rpm == 0:
            return 0.0
        based_on_temperature = min(
            1.0, abs(system_temperature - target_temperature) / self.config.load_temperature_span
        )
        based_on_rpm = rpm / self.config.rated_rpm
        return min(1.0, based_on_temperature * 0.7 + based_on_rpm * 0.3)
