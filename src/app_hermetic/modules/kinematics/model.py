"""
Kinematics Model - Mechanical formulas of the hermetic compressor

Stateless library: slider-crank kinematics, vibration, thermal expansion,
cylinder pressure, friction, torque, motor efficiency curve, air drag and
conduction. Angles are in radians, lengths in metres, temperatures in °C.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from app_hermetic.core.errors import DomainError

logger = logging.getLogger(__name__)

AIR_DENSITY = 1.225  # kg/m³


@dataclass(frozen=True)
class PhysicalProperties:
    """
    Physical properties of a moving component.

    Attributes:
        mass: [kg]
        moment_of_inertia: [kg·m²]
        friction: Friction coefficient [0-1]
        elasticity: Elasticity coefficient [0-1]
        thermal_expansion: Linear expansion coefficient [1/K]
    """
    mass: float
    moment_of_inertia: float
    friction: float
    elasticity: float
    thermal_expansion: float


DEFAULT_PROPERTIES: Dict[str, PhysicalProperties] = {
    "rotor": PhysicalProperties(5.0, 0.12, 0.02, 0.3, 1.2e-5),
    "piston": PhysicalProperties(0.8, 0.005, 0.15, 0.2, 2.3e-5),
    "crankshaft": PhysicalProperties(3.2, 0.08, 0.03, 0.25, 1.1e-5),
    "flywheel": PhysicalProperties(8.5, 0.42, 0.01, 0.1, 1.0e-5),
    "fan": PhysicalProperties(0.6, 0.03, 0.05, 0.4, 2.5e-5),
    "gearbox": PhysicalProperties(4.5, 0.15, 0.04, 0.2, 1.3e-5),
}


@dataclass(frozen=True)
class Vibration:
    """Housing vibration: amplitude [m] and frequency [Hz]."""
    amplitude: float
    frequency: float


def _domain_error(message: str) -> DomainError:
    logger.error(message)
    return DomainError(message)


def _check_geometry(crank_radius: float, rod_length: float) -> None:
    if rod_length <= 0:
        raise _domain_error(f"Connecting rod length must be positive, got l={rod_length}")
    if crank_radius < 0:
        raise _domain_error(f"Crank radius must be non-negative, got r={crank_radius}")
    if crank_radius > rod_length:
        raise _domain_error(
            f"Crank radius exceeds connecting rod length (r={crank_radius}, l={rod_length})"
        )


# ========== Slider-crank ==========

def piston_position(crank_angle: float, crank_radius: float, rod_length: float) -> float:
    """
    Piston offset from top dead centre for a slider-crank mechanism.

    offset = cos(θ)·r + sqrt(l² − (sin(θ)·r)²) − (l + r)

    Args:
        crank_angle: Crank angle θ [rad], 0 at top dead centre
        crank_radius: Crank radius r [m]
        rod_length: Connecting rod length l [m]

    Returns:
        Offset [m], 0 at TDC and −2r at BDC

    Raises:
        DomainError: If r > l or lengths are not physical
    """
    _check_geometry(crank_radius, rod_length)
    sin_term = math.sin(crank_angle) * crank_radius
    return (
        math.cos(crank_angle) * crank_radius
        + math.sqrt(rod_length ** 2 - sin_term ** 2)
        - (rod_length + crank_radius)
    )


def piston_acceleration(
    crank_angle: float,
    angular_velocity: float,
    crank_radius: float,
    rod_length: float,
) -> float:
    """
    Piston acceleration: r·ω²·(cos θ + (r/l)·cos 2θ).

    Args:
        crank_angle: θ [rad]
        angular_velocity: ω [rad/s]
        crank_radius: r [m]
        rod_length: l [m]

    Returns:
        Acceleration [m/s²]
    """
    _check_geometry(crank_radius, rod_length)
    ratio = crank_radius / rod_length
    return crank_radius * angular_velocity ** 2 * (
        math.cos(crank_angle) + ratio * math.cos(2 * crank_angle)
    )


def connecting_rod_angle(crank_angle: float, crank_radius: float, rod_length: float) -> float:
    """Angle of the connecting rod from the cylinder axis [rad]."""
    _check_geometry(crank_radius, rod_length)
    return math.asin(crank_radius * math.sin(crank_angle) / rod_length)


def stroke_profile(
    crank_radius: float,
    rod_length: float,
    n_points: int = 180,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Piston offset over one full revolution.

    Args:
        crank_radius: r [m]
        rod_length: l [m]
        n_points: Number of samples

    Returns:
        Tuple of (angle array [rad], offset array [m])
    """
    _check_geometry(crank_radius, rod_length)
    theta = np.linspace(0.0, 2 * np.pi, n_points)
    offset = (
        np.cos(theta) * crank_radius
        + np.sqrt(rod_length ** 2 - (np.sin(theta) * crank_radius) ** 2)
        - (rod_length + crank_radius)
    )
    return theta, offset


# ========== Dynamics ==========

def vibration(rpm: float, balance: float, load: float) -> Vibration:
    """
    Housing vibration from speed, balance quality and load.

    amplitude = (1 − balance)·0.01·(1 + 0.5·load)·(rpm/3000)²
    frequency = rpm/60

    Args:
        rpm: Shaft speed [rpm]
        balance: Balance quality [0-1], 1 = perfectly balanced
        load: Load fraction [0-1]
    """
    frequency = rpm / 60
    base_amplitude = (1 - balance) * 0.01
    load_factor = 1 + load * 0.5
    rpm_factor = (rpm / 3000) ** 2
    return Vibration(amplitude=base_amplitude * load_factor * rpm_factor, frequency=frequency)


def torque(rpm: float, load: float, temperature: float, cylinder_pressure: float) -> float:
    """Required shaft torque [N·m] adjusted for temperature and speed."""
    temperature_factor = 1 - (temperature - 60) / 200
    base_torque = cylinder_pressure * load / 10
    return base_torque * temperature_factor * (1 - (rpm / 6000) * 0.2)


def friction_resistance(velocity: float, friction_coefficient: float, normal_force: float) -> float:
    """Coulomb friction μ·N opposing the motion direction (0 at rest)."""
    sign = (velocity > 0) - (velocity < 0)
    return friction_coefficient * normal_force * sign


def acceleration_time(
    initial_rpm: float,
    target_rpm: float,
    moment_of_inertia: float,
    applied_torque: float,
) -> float:
    """
    Time to change speed under a constant torque: I·(ω1 − ω0)/τ.

    Raises:
        DomainError: If applied_torque is zero
    """
    if applied_torque == 0:
        raise _domain_error("Acceleration time undefined for zero torque")
    initial_omega = initial_rpm * 2 * math.pi / 60
    target_omega = target_rpm * 2 * math.pi / 60
    return moment_of_inertia * (target_omega - initial_omega) / applied_torque


def efficiency(rpm: float, temperature: float, load: float) -> float:
    """
    Motor efficiency curve [%].

    90 % nominal, penalized outside 60-80 °C, away from 2000 rpm and away
    from 75 % load. Result clamped to [50, 98].
    """
    value = 90.0

    if temperature < 60:
        value -= (60 - temperature) * 0.3
    elif temperature > 80:
        value -= (temperature - 80) * 0.5

    rpm_factor = 1 - abs(rpm - 2000) / 2000
    value *= 0.8 + rpm_factor * 0.2

    load_factor = 1 - abs(load - 0.75) / 0.75
    value *= 0.9 + load_factor * 0.1

    return max(50.0, min(98.0, value))


# ========== Thermal / fluid ==========

def thermal_expansion(
    initial_size: float,
    temperature: float,
    reference_temperature: float,
    coefficient: float,
) -> float:
    """Linear expansion size·(1 + α·(T − T_ref)); shrinks below T_ref."""
    return initial_size * (1 + coefficient * (temperature - reference_temperature))


def cylinder_pressure(piston_pos: float, temperature: float, compression_ratio: float) -> float:
    """
    Cylinder pressure [atm] from a normalized piston position.

    The position is mapped with (pos + 1)/2 (0 = BDC, 1 = TDC), the
    relative volume is 1 + (CR − 1)·(1 − normalized), and the pressure
    follows P·V = const, scaled by (T + 273.15)/293.15.

    Raises:
        DomainError: If the relative volume is zero
    """
    normalized_position = (piston_pos + 1) / 2
    relative_volume = 1 + (compression_ratio - 1) * (1 - normalized_position)
    if relative_volume == 0:
        raise _domain_error(
            f"Zero relative volume (pos={piston_pos}, CR={compression_ratio})"
        )
    base_pressure = 1.0
    pressure = base_pressure * compression_ratio / relative_volume
    return pressure * (temperature + 273.15) / 293.15


def air_resistance_torque(angular_velocity: float, radius: float, drag_coefficient: float) -> float:
    """Aerodynamic drag torque on a rotating part [N·m]."""
    tangential_velocity = angular_velocity * radius
    drag_force = 0.5 * AIR_DENSITY * tangential_velocity ** 2 * drag_coefficient
    return drag_force * radius


def heat_transfer(
    temperature_difference: float,
    thermal_conductivity: float,
    contact_area: float,
    distance: float,
) -> float:
    """
    Conduction heat flow k·A·ΔT/d [W] (Fourier's law).

    Raises:
        DomainError: If distance is zero
    """
    if distance == 0:
        raise _domain_error("Heat transfer undefined for zero conduction distance")
    return thermal_conductivity * contact_area * temperature_difference / distance
