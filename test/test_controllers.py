"""
Unit tests for Refrigeration and Motor controllers

Tests operator alert rules, COP rating and default parameters.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from dataclasses import replace

import pytest

from app_hermetic.core.noise import ZeroNoise
from app_hermetic.core.state import ALERT_KEYS, motor_defaults, refrigeration_defaults
from app_hermetic.modules.motor import MotorController
from app_hermetic.modules.refrigeration import RefrigerationController
from app_hermetic.modules.refrigeration.controller import INFO_TIPS


class AlwaysNoise(ZeroNoise):
    """Noise source whose every chance() succeeds."""

    def chance(self, probability: float) -> bool:
        return True


def refrigeration_with(noise=None, **fields):
    state = replace(refrigeration_defaults(), **{"is_running": True, "compressor_rpm": 1500.0, **fields})
    return RefrigerationController(state=state, noise=noise or ZeroNoise())


def motor_with(**fields):
    state = replace(motor_defaults(), **{"is_running": True, "compressor_rpm": 1200.0, **fields})
    return MotorController(state=state, noise=ZeroNoise())


def titles(messages):
    return [m.title for m in messages]


class TestRefrigerationAlerts:
    """Test the refrigeration panel alert rules."""

    def test_silent_when_stopped(self):
        controller = RefrigerationController(
            state=replace(refrigeration_defaults(), system_temperature=40.0),
            noise=AlwaysNoise(),
        )
        assert controller.alert_messages() == []

    def test_critical_temperature(self):
        """25 °C against a 5 °C target is more than 15 °C off."""
        messages = refrigeration_with().alert_messages()
        assert len(messages) == 1
        assert messages[0].severity == "error"
        assert messages[0].title == "Critical temperature"

    def test_high_temperature_warning(self):
        alerts = {key: False for key in ALERT_KEYS}
        alerts["high_temperature"] = True
        messages = refrigeration_with(system_temperature=16.0, alerts=alerts).alert_messages()
        assert titles(messages) == ["High temperature"]
        assert messages[0].severity == "warning"

    def test_pressure_rules(self):
        messages = refrigeration_with(
            system_temperature=5.0, condenser_pressure=21.0, compressor_pressure=19.0,
        ).alert_messages()
        assert titles(messages) == ["High condenser pressure", "High compressor pressure"]
        assert [m.severity for m in messages] == ["warning", "error"]

    def test_flag_rules(self):
        alerts = {key: False for key in ALERT_KEYS}
        alerts.update(low_pressure=True, low_refrigerant=True, compressor_overload=True, frozen_evaporator=True)
        messages = refrigeration_with(system_temperature=5.0, alerts=alerts).alert_messages()
        assert titles(messages) == [
            "Low evaporator pressure",
            "Low refrigerant charge",
            "Compressor overload",
            "Evaporator icing",
        ]

    def test_info_tip(self):
        messages = refrigeration_with(noise=AlwaysNoise(), system_temperature=5.0).alert_messages()
        assert len(messages) == 1
        assert messages[0].severity == "info"
        assert (messages[0].title, messages[0].message) in INFO_TIPS

    def test_no_tip_at_zero_speed(self):
        controller = refrigeration_with(noise=AlwaysNoise(), system_temperature=5.0, compressor_rpm=0.0)
        assert controller.alert_messages() == []


class TestCopRating:
    """Test COP classification."""

    @pytest.mark.parametrize("cop, rating", [(0.0, "low"), (1.49, "low"), (1.5, "medium"), (2.4, "medium"), (2.5, "good"), (4.0, "good")])
    def test_rating(self, cop, rating):
        controller = RefrigerationController(state=replace(refrigeration_defaults(), cop=cop))
        assert controller.cop_rating() == rating


class TestMotorAlerts:
    """Test the motor panel alert rules."""

    def test_nominal_is_quiet(self):
        assert motor_with().alert_messages() == []

    def test_silent_when_stopped(self):
        controller = MotorController(state=replace(motor_defaults(), motor_temperature=95.0))
        assert controller.alert_messages() == []

    @pytest.mark.parametrize("temperature, severity", [(85.0, "error"), (75.0, "warning")])
    def test_motor_temperature(self, temperature, severity):
        messages = motor_with(motor_temperature=temperature).alert_messages()
        assert [m.severity for m in messages] == [severity]

    def test_power_speed_deviation(self):
        messages = motor_with(
            power_consumption=1500.0, compressor_rpm=2900.0, system_temperature=20.0,
        ).alert_messages()
        assert titles(messages) == ["High power consumption", "High speed", "Temperature deviation"]


class TestDefaultParams:
    """Test default parameter sets for the UI."""

    def test_refrigeration(self):
        params = RefrigerationController().get_default_params()
        assert params["compressor_rpm"] == 1500.0
        assert params["target_temperature"] == 5.0
        assert params["defrost_mode"] is False

    def test_motor(self):
        params = MotorController().get_default_params()
        assert params["compressor_rpm"] == 1200.0
        assert params["target_temperature"] == 2.0
        assert params["motor_balance"] == 0.9
