"""
Crank Mechanism Controller - Frame-rate driver for the compressor animation

Advances the crank angle with a smoothed shaft speed and evaluates the
kinematics formulas for one rendered frame. Holds only animation state;
it reads the simulation state but never writes it.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import math
from dataclasses import dataclass
from typing import Optional

from app_hermetic.modules.kinematics import model


@dataclass(frozen=True)
class CrankMechanism:
    """
    Geometry of the compressor drive.

    Attributes:
        crank_radius: [m]
        rod_length: [m]
        compression_ratio: [-]
        balance: Balance quality [0-1]
        reference_temperature: Temperature of zero thermal growth [°C]
    """
    crank_radius: float = 0.15
    rod_length: float = 0.3
    compression_ratio: float = 8.5
    balance: float = 0.9
    reference_temperature: float = 60.0


@dataclass(frozen=True)
class CrankFrame:
    """
    Everything the renderer needs for one frame.

    Attributes:
        rpm: Smoothed shaft speed [rpm]
        crank_angle: [rad] in [0, 2π)
        piston_position: Offset from TDC [m]
        piston_acceleration: [m/s²]
        rod_angle: [rad]
        cylinder_pressure: [atm]
        vibration_amplitude: [m]
        vibration_frequency: [Hz]
        housing_offset_x: Display offset of the housing
        housing_offset_y: Display offset of the housing
        thermal_growth: Relative piston growth [-]
    """
    rpm: float
    crank_angle: float
    piston_position: float
    piston_acceleration: float
    rod_angle: float
    cylinder_pressure: float
    vibration_amplitude: float
    vibration_frequency: float
    housing_offset_x: float
    housing_offset_y: float
    thermal_growth: float


class CrankMechanismController:
    """
    Animation-side integrator of the slider-crank.

    Shaft inertia: the displayed speed closes 5 % of the gap to the
    commanded speed every 50 ms (10 % when coasting to a stop) and snaps
    once within 5 rpm.
    """

    INERTIA_PERIOD_S = 0.05
    INERTIA_FRACTION = 0.05
    STOP_FRACTION = 0.1
    SNAP_RPM = 5.0

    def __init__(self, mechanism: Optional[CrankMechanism] = None):
        self.mechanism = mechanism or CrankMechanism()
        # Rejects r > l at setup rather than on every frame
        model.piston_position(0.0, self.mechanism.crank_radius, self.mechanism.rod_length)
        self.current_rpm = 0.0
        self.crank_angle = 0.0

    def _smooth_rpm(self, target_rpm: float, dt: float) -> float:
        if abs(self.current_rpm - target_rpm) < self.SNAP_RPM:
            return target_rpm
        fraction = self.INERTIA_FRACTION if target_rpm > 0 else self.STOP_FRACTION
        keep = (1 - fraction) ** (dt / self.INERTIA_PERIOD_S)
        return target_rpm + (self.current_rpm - target_rpm) * keep

    def advance(
        self,
        dt: float,
        rpm: float,
        temperature: float,
        load: float,
        elapsed: float = 0.0,
    ) -> CrankFrame:
        """
        Advance the animation by dt seconds.

        Args:
            dt: Frame time step [s], may be 0
            rpm: Commanded shaft speed from the simulation [rpm]
            temperature: Motor temperature [°C]
            load: Motor load fraction [0-1]
            elapsed: Animation clock [s], phase of the housing shake

        Returns:
            CrankFrame for this frame
        """
        if dt < 0:
            raise ValueError(f"Frame time step must be non-negative, got dt={dt}")

        mech = self.mechanism
        self.current_rpm = self._smooth_rpm(rpm, dt)

        omega = self.current_rpm / 60 * 2 * math.pi
        if self.current_rpm > 0:
            self.crank_angle = (self.crank_angle + omega * dt) % (2 * math.pi)

        position = model.piston_position(self.crank_angle, mech.crank_radius, mech.rod_length)
        # Offset spans [-2r, 0]; rescale to [-1, 1] for the pressure model
        normalized = position / mech.crank_radius + 1 if mech.crank_radius > 0 else 1.0

        vib = model.vibration(self.current_rpm, mech.balance, load)
        piston_coeff = model.DEFAULT_PROPERTIES["piston"].thermal_expansion

        return CrankFrame(
            rpm=self.current_rpm,
            crank_angle=self.crank_angle,
            piston_position=position,
            piston_acceleration=model.piston_acceleration(
                self.crank_angle, omega, mech.crank_radius, mech.rod_length
            ),
            rod_angle=model.connecting_rod_angle(
                self.crank_angle, mech.crank_radius, mech.rod_length
            ),
            cylinder_pressure=model.cylinder_pressure(
                normalized, temperature, mech.compression_ratio
            ),
            vibration_amplitude=vib.amplitude,
            vibration_frequency=vib.frequency,
            housing_offset_x=math.sin(elapsed * vib.frequency * 2) * vib.amplitude * 0.05,
            housing_offset_y=math.sin(elapsed * vib.frequency * 1.7) * vib.amplitude * 0.04,
            thermal_growth=model.thermal_expansion(
                1.0, temperature, mech.reference_temperature, piston_coeff
            ) - 1.0,
        )

    def reset(self) -> None:
        self.current_rpm = 0.0
        self.crank_angle = 0.0
