"""
Unit tests for Kinematics module

Tests the slider-crank formulas, the mechanical helpers and the
frame-rate crank mechanism driver.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import math

import numpy as np
import pytest

from app_hermetic.core.errors import DomainError
from app_hermetic.modules.kinematics import (
    CrankMechanism,
    CrankMechanismController,
    model,
)


class TestPistonPosition:
    """Test slider-crank position, acceleration and rod angle."""

    @pytest.mark.parametrize("r, l", [(0.15, 0.3), (0.05, 0.2), (0.1, 0.1), (0.0, 0.5)])
    def test_top_dead_centre_is_zero(self, r, l):
        """Offset is 0 at crank angle 0 for any valid geometry."""
        assert abs(model.piston_position(0.0, r, l)) < 1e-12, "TDC offset should be 0"

    def test_bottom_dead_centre(self):
        """Offset is -2r at crank angle π."""
        r, l = 0.15, 0.3
        assert abs(model.piston_position(math.pi, r, l) + 2 * r) < 1e-12, "BDC offset should be -2r"

    @pytest.mark.parametrize("theta", [0.0, 0.4, 1.3, 2.9, 4.2, 5.9])
    def test_periodic_in_crank_angle(self, theta):
        """Position repeats every full revolution."""
        r, l = 0.15, 0.3
        a = model.piston_position(theta, r, l)
        b = model.piston_position(theta + 2 * math.pi, r, l)
        assert abs(a - b) < 1e-12, "Position should be 2π-periodic"

    def test_offset_within_stroke(self):
        """Offset stays in [-2r, 0] over a revolution."""
        r, l = 0.15, 0.3
        for theta in np.linspace(0, 2 * math.pi, 73):
            pos = model.piston_position(theta, r, l)
            assert -2 * r - 1e-12 <= pos <= 1e-12, f"Offset out of stroke at θ={theta}"

    def test_crank_longer_than_rod_rejected(self):
        """r > l is a DomainError, not a NaN."""
        with pytest.raises(DomainError):
            model.piston_position(0.5, 0.4, 0.3)

    def test_non_positive_rod_rejected(self):
        with pytest.raises(DomainError):
            model.piston_position(0.0, 0.1, 0.0)

    def test_domain_error_is_value_error(self):
        """Callers catching ValueError also catch DomainError."""
        with pytest.raises(ValueError):
            model.connecting_rod_angle(1.0, 1.0, 0.5)

    def test_acceleration_at_tdc(self):
        """At θ=0 the acceleration is r·ω²·(1 + r/l)."""
        r, l, omega = 0.15, 0.3, 100.0
        expected = r * omega ** 2 * (1 + r / l)
        assert abs(model.piston_acceleration(0.0, omega, r, l) - expected) < 1e-9

    def test_rod_angle_at_quarter_turn(self):
        """sin(rod angle) = r/l at θ = π/2."""
        angle = model.connecting_rod_angle(math.pi / 2, 0.15, 0.3)
        assert abs(angle - math.pi / 6) < 1e-12, "Rod angle should be asin(0.5)"

    def test_stroke_profile(self):
        """Vectorized profile matches the scalar formula."""
        theta, offset = model.stroke_profile(0.15, 0.3, n_points=90)
        assert theta.shape == (90,) and offset.shape == (90,)
        assert abs(offset[0]) < 1e-12, "Profile should start at TDC"
        assert abs(offset.min() + 0.3) < 1e-3, "Profile minimum should be close to -2r"
        assert abs(offset[17] - model.piston_position(theta[17], 0.15, 0.3)) < 1e-12


class TestDynamics:
    """Test vibration, torque, friction and acceleration time."""

    def test_vibration_reference_point(self):
        """Balance 0.9, no load, rated speed: 1 mm at 50 Hz."""
        vib = model.vibration(3000, 0.9, 0.0)
        assert abs(vib.amplitude - 0.001) < 1e-12
        assert abs(vib.frequency - 50.0) < 1e-12

    def test_vibration_monotonic_in_rpm(self):
        """Amplitude never decreases as speed rises."""
        amplitudes = [model.vibration(rpm, 0.8, 0.5).amplitude for rpm in range(0, 3001, 100)]
        assert all(b >= a for a, b in zip(amplitudes, amplitudes[1:])), "Amplitude should not decrease"

    def test_perfect_balance_has_no_vibration(self):
        assert model.vibration(2500, 1.0, 1.0).amplitude == 0.0

    def test_zero_speed_frequency(self):
        assert model.vibration(0, 0.5, 0.5).frequency == 0.0

    def test_torque_reference(self):
        """At 60 °C and 0 rpm torque is pressure·load/10."""
        assert abs(model.torque(0, 1.0, 60, 10.0) - 1.0) < 1e-12

    def test_friction_opposes_motion(self):
        assert model.friction_resistance(3.0, 0.1, 10.0) == pytest.approx(1.0)
        assert model.friction_resistance(-2.0, 0.1, 10.0) == pytest.approx(-1.0)
        assert model.friction_resistance(0.0, 0.1, 10.0) == 0.0, "No friction force at rest"

    def test_acceleration_time(self):
        """0 → 60 rpm (2π rad/s) with I=1 and τ=2π takes 1 s."""
        assert model.acceleration_time(0, 60, 1.0, 2 * math.pi) == pytest.approx(1.0)

    def test_acceleration_time_zero_torque(self):
        with pytest.raises(DomainError):
            model.acceleration_time(0, 1000, 0.1, 0.0)

    def test_air_resistance(self):
        """1 m/s tip speed on a 0.1 m arm with Cd=1."""
        assert model.air_resistance_torque(10.0, 0.1, 1.0) == pytest.approx(0.06125)


class TestEfficiencyCurve:
    """Test motor efficiency curve."""

    def test_nominal_point(self):
        """Best efficiency at 2000 rpm, 60-80 °C, 75 % load."""
        assert model.efficiency(2000, 70, 0.75) == pytest.approx(90.0)

    def test_bounds_over_grid(self):
        """Result always lies in [50, 98]."""
        for rpm in np.linspace(0, 6000, 13):
            for temperature in np.linspace(-50, 250, 13):
                for load in np.linspace(0, 2, 9):
                    value = model.efficiency(rpm, temperature, load)
                    assert 50.0 <= value <= 98.0, f"Efficiency {value} out of bounds"

    def test_hot_motor_penalized(self):
        assert model.efficiency(2000, 100, 0.75) < model.efficiency(2000, 70, 0.75)


class TestThermalAndPressure:
    """Test thermal expansion, cylinder pressure and conduction."""

    def test_expansion_identity_at_reference(self):
        assert model.thermal_expansion(0.25, 60, 60, 2.3e-5) == 0.25

    def test_expansion_direction(self):
        assert model.thermal_expansion(1.0, 100, 60, 2.3e-5) > 1.0, "Should grow when hotter"
        assert model.thermal_expansion(1.0, 20, 60, 2.3e-5) < 1.0, "Should shrink when colder"

    def test_cylinder_pressure_at_tdc(self):
        """Full compression at 20 °C gives CR atm."""
        assert model.cylinder_pressure(1.0, 20.0, 8.5) == pytest.approx(8.5)

    def test_cylinder_pressure_at_bdc(self):
        """No compression at 20 °C gives 1 atm."""
        assert model.cylinder_pressure(-1.0, 20.0, 8.5) == pytest.approx(1.0)

    def test_cylinder_pressure_temperature_scaling(self):
        ratio = model.cylinder_pressure(1.0, 100.0, 8.5) / model.cylinder_pressure(1.0, 20.0, 8.5)
        assert ratio == pytest.approx(373.15 / 293.15)

    def test_cylinder_pressure_zero_volume(self):
        with pytest.raises(DomainError):
            model.cylinder_pressure(-1.0, 20.0, 0.0)

    def test_heat_transfer(self):
        assert model.heat_transfer(10.0, 2.0, 0.5, 0.1) == pytest.approx(100.0)

    def test_heat_transfer_zero_distance(self):
        with pytest.raises(DomainError):
            model.heat_transfer(10.0, 2.0, 0.5, 0.0)


class TestCrankMechanismController:
    """Test the frame-rate crank driver."""

    def setup_method(self):
        self.crank = CrankMechanismController()

    def test_invalid_geometry_rejected_at_setup(self):
        with pytest.raises(DomainError):
            CrankMechanismController(CrankMechanism(crank_radius=0.5, rod_length=0.3))

    def test_negative_dt_rejected(self):
        with pytest.raises(ValueError):
            self.crank.advance(-0.01, 1000, 60, 0.5)

    def test_zero_dt_frame_at_rest(self):
        """A frame at rest sits at TDC with full compression."""
        frame = self.crank.advance(0.0, 0.0, 20.0, 0.0)
        assert frame.crank_angle == 0.0
        assert abs(frame.piston_position) < 1e-12
        assert frame.cylinder_pressure == pytest.approx(8.5)
        assert frame.vibration_amplitude == 0.0

    def test_speed_inertia(self):
        """First 50 ms frame closes 5 % of the gap."""
        frame = self.crank.advance(0.05, 1200, 60, 0.5)
        assert frame.rpm == pytest.approx(60.0)

    def test_coasts_down_faster(self):
        """Stopping closes 10 % of the gap per 50 ms."""
        self.crank.advance(10.0, 1200, 60, 0.5)
        self.crank.advance(0.01, 1200, 60, 0.5)
        frame = self.crank.advance(0.05, 0, 60, 0.5)
        assert frame.rpm == pytest.approx(1080.0)

    def test_speed_snaps_to_target(self):
        self.crank.advance(10.0, 1200, 60, 0.5)
        frame = self.crank.advance(0.01, 1200, 60, 0.5)
        assert frame.rpm == 1200, "Speed should snap once within 5 rpm"

    def test_angle_wraps(self):
        """Crank angle stays within one revolution."""
        for _ in range(500):
            frame = self.crank.advance(0.033, 2900, 60, 0.5)
            assert 0.0 <= frame.crank_angle < 2 * math.pi

    def test_frame_consistent_with_formulas(self):
        mech = self.crank.mechanism
        for _ in range(40):
            frame = self.crank.advance(0.02, 1500, 75, 0.6)
        expected = model.piston_position(frame.crank_angle, mech.crank_radius, mech.rod_length)
        assert frame.piston_position == pytest.approx(expected)
        assert frame.vibration_frequency == pytest.approx(frame.rpm / 60)

    def test_no_thermal_growth_at_reference(self):
        frame = self.crank.advance(0.0, 0.0, 60.0, 0.0)
        assert frame.thermal_growth == pytest.approx(0.0)

    def test_reset(self):
        self.crank.advance(1.0, 1500, 60, 0.5)
        self.crank.reset()
        assert self.crank.current_rpm == 0.0 and self.crank.crank_angle == 0.0
